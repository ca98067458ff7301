"""Sizing math for Bloom filters.

All three functions are pure and work on Python floats (IEEE double), which
keeps ``1 / capacity`` well clear of underflow for any realistic capacity.
"""

import math

INT32_MAX = 2**31 - 1

# 1 / 2**ln(2): taking log in this base gives -log(p) / ln(2)**2
_BITS_LOG_BASE = 1.0 / math.pow(2, math.log(2.0))


def optimal_error_rate(capacity: int) -> float:
    rate = 1.0 / capacity
    if rate != 0:
        return rate
    # asymptotic approximation once 1/capacity stops being representable
    return math.pow(0.6185, INT32_MAX // capacity)


def optimal_number_of_hash_bits(capacity: int, error_rate: float) -> int:
    return int(math.ceil(capacity * math.log(error_rate, _BITS_LOG_BASE)))


def optimal_number_of_hashes(capacity: int, error_rate: float) -> int:
    bits = optimal_number_of_hash_bits(capacity, error_rate)
    return round(math.log(2.0) * bits / capacity)
