"""Fixed-length packed bit vector."""

from bloomcheck.filter.errors import IndexOutOfRangeError


class BitStore:
    """A bit vector of ``size`` flags, all false at creation.

    Bits can only be set; there is no clear or resize.
    """

    __slots__ = ("_size", "_bits")

    def __init__(self, size: int) -> None:
        self._size = size
        self._bits = bytearray((size + 7) // 8)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"bit index must be int, not {type(index).__name__}")
        if not 0 <= index < self._size:
            raise IndexOutOfRangeError(index, self._size)

    def set(self, index: int) -> None:
        self._check(index)
        self._bits[index // 8] |= 1 << index % 8

    def get(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits[index // 8] & 1 << index % 8)

    def count(self) -> int:
        return sum(bin(byte).count("1") for byte in self._bits)
