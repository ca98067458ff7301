"""Exceptions raised by the Bloom filter core."""

from typing import Any


class BloomFilterError(Exception):
    pass


class InvalidArgumentError(BloomFilterError, ValueError):
    def __init__(self, argument: str, value: Any, message: str) -> None:
        super().__init__(f"{argument}={value!r}: {message}")
        self.argument = argument
        self.value = value


class MissingHashFunctionError(BloomFilterError, TypeError):
    pass


class NullItemError(BloomFilterError, ValueError):
    pass


class IndexOutOfRangeError(BloomFilterError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"bit index {index} outside [0, {size})")
        self.index = index
        self.size = size
