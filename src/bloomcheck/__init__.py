from bloomcheck.config import CONFIG, CheckerConfig, load_config
from bloomcheck.filter import (
    BitStore,
    BloomFilter,
    BloomFilterError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    MissingHashFunctionError,
    NullItemError,
    jenkins_one_at_a_time,
    optimal_error_rate,
    optimal_number_of_hash_bits,
    optimal_number_of_hashes,
)
from bloomcheck.io import WORD_READER, WordListReader
from bloomcheck.spellcheck import (
    BenchmarkResult,
    FalsePositiveBenchmark,
    InteractiveSession,
    SpellChecker,
    random_words,
)

__version__ = "0.1.0"

__all__ = [
    "CONFIG",
    "CheckerConfig",
    "load_config",
    "BitStore",
    "BloomFilter",
    "BloomFilterError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "MissingHashFunctionError",
    "NullItemError",
    "jenkins_one_at_a_time",
    "optimal_error_rate",
    "optimal_number_of_hash_bits",
    "optimal_number_of_hashes",
    "WORD_READER",
    "WordListReader",
    "BenchmarkResult",
    "FalsePositiveBenchmark",
    "InteractiveSession",
    "SpellChecker",
    "random_words",
]
