"""Probabilistic membership testing with Bloom filters."""

import logging
from typing import Callable, Generic, Optional, Type, TypeVar

from bloomcheck.filter.bit_store import BitStore
from bloomcheck.filter.errors import (
    InvalidArgumentError,
    MissingHashFunctionError,
    NullItemError,
)
from bloomcheck.filter.hashing import (
    iter_indices,
    jenkins_one_at_a_time,
    primary_hash,
)
from bloomcheck.filter.params import (
    optimal_error_rate,
    optimal_number_of_hash_bits,
    optimal_number_of_hashes,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
HashFunction = Callable[[T], int]


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise InvalidArgumentError(
            "capacity", capacity, "expected number of items must be > 0"
        )


def _check_error_rate(error_rate: float) -> None:
    if error_rate <= 0 or error_rate >= 1:
        raise InvalidArgumentError(
            "error_rate", error_rate, "error rate must be in (0.0, 1.0)"
        )


class BloomFilter(Generic[T]):
    """Insert-only Bloom filter using double hashing.

    Each item gets a primary hash from its own ``__hash__`` and a secondary
    hash from ``secondary_hash``; the k bit positions are combinations of
    the two. When no secondary hash is given and ``item_type`` is ``str``,
    Jenkins' one-at-a-time hash is used.

    Not thread-safe: concurrent callers must serialize access themselves.
    """

    def __init__(
        self,
        capacity: int,
        secondary_hash: Optional[HashFunction],
        bit_count: int,
        error_rate: float,
        hash_function_count: int,
        item_type: Type[T] = str,
    ) -> None:
        _check_capacity(capacity)
        if bit_count < 1:
            raise InvalidArgumentError(
                "bit_count", bit_count, "bit array size must be > 0"
            )
        _check_error_rate(error_rate)
        if hash_function_count < 1:
            raise InvalidArgumentError(
                "hash_function_count",
                hash_function_count,
                "number of hash functions must be > 0",
            )
        if secondary_hash is None:
            if not (isinstance(item_type, type) and issubclass(item_type, str)):
                raise MissingHashFunctionError(
                    f"no secondary hash function given and no default for "
                    f"item type {getattr(item_type, '__name__', item_type)!r}"
                )
            secondary_hash = jenkins_one_at_a_time

        self._capacity = capacity
        self._error_rate = error_rate
        self._hash_function_count = hash_function_count
        self._secondary_hash = secondary_hash
        self._bits = BitStore(bit_count)
        logger.debug(
            "BloomFilter capacity=%d bits=%d hashes=%d error_rate=%g",
            capacity,
            bit_count,
            hash_function_count,
            error_rate,
        )

    @classmethod
    def with_bit_count(
        cls,
        capacity: int,
        secondary_hash: Optional[HashFunction],
        bit_count: int,
        item_type: Type[T] = str,
    ) -> "BloomFilter[T]":
        _check_capacity(capacity)
        error_rate = optimal_error_rate(capacity)
        _check_error_rate(error_rate)
        return cls(
            capacity,
            secondary_hash,
            bit_count,
            error_rate,
            optimal_number_of_hashes(capacity, error_rate),
            item_type,
        )

    @classmethod
    def with_error_rate(
        cls,
        capacity: int,
        secondary_hash: Optional[HashFunction],
        error_rate: float,
        item_type: Type[T] = str,
    ) -> "BloomFilter[T]":
        _check_capacity(capacity)
        _check_error_rate(error_rate)
        return cls(
            capacity,
            secondary_hash,
            optimal_number_of_hash_bits(capacity, error_rate),
            error_rate,
            optimal_number_of_hashes(capacity, error_rate),
            item_type,
        )

    @classmethod
    def with_hash_count(
        cls,
        capacity: int,
        secondary_hash: Optional[HashFunction],
        error_rate: float,
        hash_function_count: int,
        item_type: Type[T] = str,
    ) -> "BloomFilter[T]":
        """Same sizing as :meth:`with_error_rate`.

        ``hash_function_count`` is accepted for compatibility but the count
        is always derived from ``capacity`` and ``error_rate``.
        """
        _check_capacity(capacity)
        _check_error_rate(error_rate)
        derived = optimal_number_of_hashes(capacity, error_rate)
        if hash_function_count != derived:
            logger.debug(
                "Ignoring hash_function_count=%d, using derived %d",
                hash_function_count,
                derived,
            )
        return cls.with_error_rate(capacity, secondary_hash, error_rate, item_type)

    @classmethod
    def for_capacity(
        cls,
        capacity: int,
        secondary_hash: Optional[HashFunction] = None,
        item_type: Type[T] = str,
    ) -> "BloomFilter[T]":
        _check_capacity(capacity)
        return cls.with_error_rate(
            capacity, secondary_hash, optimal_error_rate(capacity), item_type
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def error_rate(self) -> float:
        return self._error_rate

    @property
    def bit_count(self) -> int:
        return len(self._bits)

    @property
    def hash_function_count(self) -> int:
        return self._hash_function_count

    @property
    def set_bit_count(self) -> int:
        return self._bits.count()

    @property
    def fill_ratio(self) -> float:
        return self._bits.count() / len(self._bits)

    def _indices(self, item: T):
        if item is None:
            raise NullItemError(
                "None cannot be stored in or queried from a Bloom filter"
            )
        return iter_indices(
            primary_hash(item),
            self._secondary_hash(item),
            self._hash_function_count,
            len(self._bits),
        )

    def add(self, item: T) -> None:
        """Add ``item``. It cannot be removed."""
        for index in self._indices(item):
            self._bits.set(index)

    def contains(self, item: T) -> bool:
        """True if ``item`` was possibly added, False if it definitely was not."""
        # short-circuits on the first unset bit
        return all(self._bits.get(index) for index in self._indices(item))

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def __repr__(self) -> str:
        return (
            f"BloomFilter(capacity={self._capacity}, bit_count={self.bit_count}, "
            f"hash_function_count={self._hash_function_count}, "
            f"error_rate={self._error_rate:g})"
        )
