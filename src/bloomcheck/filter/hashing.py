"""32-bit hash arithmetic: double hashing and the default string hash."""

import struct
from typing import Iterator

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


def to_int32(value: int) -> int:
    """Wrap an arbitrary int to a 32-bit signed two's complement value."""
    value &= _MASK32
    return value - (1 << 32) if value & _SIGN32 else value


def compute_index(primary: int, secondary: int, i: int, bit_count: int) -> int:
    """Derive the i-th bit position from two hash values.

    ``primary + i * secondary`` is evaluated with 32-bit wraparound. The
    slot is ``abs`` of the truncated remainder (sign of the dividend),
    which is ``|raw| mod bit_count``; a negative sum lands on the same slot
    as its positive mirror.
    """
    raw = to_int32(primary + to_int32(i * secondary))
    return abs(raw) % bit_count


def iter_indices(
    primary: int, secondary: int, count: int, bit_count: int
) -> Iterator[int]:
    for i in range(count):
        yield compute_index(primary, secondary, i, bit_count)


def primary_hash(item: object) -> int:
    return to_int32(hash(item))


def _utf16_units(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    for (unit,) in struct.iter_unpack("<H", data):
        yield unit


def jenkins_one_at_a_time(text: str) -> int:
    """Bob Jenkins' one-at-a-time hash over UTF-16 code units.

    Every step wraps to a signed 32-bit int and right shifts are
    arithmetic, so the result is bit-identical to the signed-int variant.
    """
    h = 0
    for unit in _utf16_units(text):
        h = to_int32(h + unit)
        h = to_int32(h + (h << 10))
        h ^= h >> 6
    h = to_int32(h + (h << 3))
    h ^= h >> 11
    h = to_int32(h + (h << 15))
    return h
