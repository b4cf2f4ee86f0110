"""
Population count and the measures derived from it.
"""

from atmfjstc.lib.int32_bit_ops.int32 import INT32_WIDTH, to_int32
from atmfjstc.lib.int32_bit_ops.accessors import iter_bits
from atmfjstc.lib.int32_bit_ops.errors import NegativeInputError


def count_set_bits(number: int) -> int:
    """
    Counts the bits set to 1 in a number, e.g. ``count_set_bits(7) == 3``.

    Counting is always done over exactly `INT32_WIDTH` bits, so negative numbers are counted in their two's-complement
    form, e.g. ``count_set_bits(-1) == 32``.
    """
    return sum(iter_bits(number))


def bits_diff(number_a: int, number_b: int) -> int:
    """
    Counts the bit positions at which two numbers differ (i.e. their Hamming distance), e.g. ``bits_diff(4, 7) == 2``.
    """
    return count_set_bits(to_int32(number_a) ^ to_int32(number_b))


def bit_length(number: int) -> int:
    """
    Returns the number of bits needed to represent a non-negative number, i.e. the smallest `k` such that
    ``2^k > number``. E.g. ``bit_length(5) == 3``, ``bit_length(0) == 0``.

    Raises:
        NegativeInputError: If the number is negative (after reduction to 32 bits).
    """
    number = to_int32(number)

    if number < 0:
        raise NegativeInputError('bit_length', number)

    bits_counter = 0
    while bits_counter < INT32_WIDTH - 1 and (1 << bits_counter) <= number:
        bits_counter += 1

    return bits_counter
