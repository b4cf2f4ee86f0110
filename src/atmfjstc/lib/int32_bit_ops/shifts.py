"""
Scaling by 2 via shifts, and two's-complement negation.
"""

from atmfjstc.lib.int32_bit_ops.int32 import to_int32


def multiply_by_two(number: int) -> int:
    """
    Shifts a number left by one bit. A 1 shifted out of bit 31 is lost, e.g. ``multiply_by_two(INT32_MAX) == -2``.
    """
    return to_int32(to_int32(number) << 1)


def divide_by_two(number: int) -> int:
    """
    Shifts a number right by one bit, replicating the sign bit.

    For negative odd numbers this rounds towards negative infinity, not towards zero: ``divide_by_two(-3) == -2``.
    """
    return to_int32(number) >> 1


def switch_sign(number: int) -> int:
    """
    Negates a number as ``~n + 1``.

    `INT32_MIN` has no positive counterpart in 32 bits, so it negates to itself.
    """
    return to_int32(~to_int32(number) + 1)
