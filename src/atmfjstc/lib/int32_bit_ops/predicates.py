"""
Parity, sign and power-of-2 tests performed purely with bit operations.
"""

from atmfjstc.lib.int32_bit_ops.int32 import INT32_WIDTH, to_int32


def is_even(number: int) -> bool:
    """
    Checks whether a number is even, i.e. whether its least significant bit is 0.

    This agrees with ``number % 2 == 0`` for negative numbers as well.
    """
    return (to_int32(number) & 1) == 0


def is_positive(number: int) -> bool:
    """
    Checks whether a number is strictly positive, by looking at its sign bit.

    Note that 0 is NOT considered positive, even though its sign bit is clear.
    """
    number = to_int32(number)

    if number == 0:
        return False

    return ((number >> (INT32_WIDTH - 1)) & 1) == 0


def is_power_of_2(number: int) -> bool:
    """
    Checks whether a number is a power of 2, using the ``n & (n - 1) == 0`` test.

    Beware: the test is purely bitwise, so it also returns True for 0 and for `INT32_MIN` (whose only set bit is the
    sign bit). Callers that only care about positive powers of 2 should also check that the number is positive.
    """
    number = to_int32(number)

    return (number & to_int32(number - 1)) == 0
