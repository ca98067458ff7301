from bloomcheck.filter.bit_store import BitStore
from bloomcheck.filter.bloom_filter import BloomFilter, HashFunction
from bloomcheck.filter.errors import (
    BloomFilterError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    MissingHashFunctionError,
    NullItemError,
)
from bloomcheck.filter.hashing import (
    compute_index,
    iter_indices,
    jenkins_one_at_a_time,
    to_int32,
)
from bloomcheck.filter.params import (
    optimal_error_rate,
    optimal_number_of_hash_bits,
    optimal_number_of_hashes,
)

__all__ = [
    "BitStore",
    "BloomFilter",
    "BloomFilterError",
    "HashFunction",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "MissingHashFunctionError",
    "NullItemError",
    "compute_index",
    "iter_indices",
    "jenkins_one_at_a_time",
    "optimal_error_rate",
    "optimal_number_of_hash_bits",
    "optimal_number_of_hashes",
    "to_int32",
]
