"""
Reading and writing individual bits of a 32-bit integer.

All functions here validate the bit position and raise `InvalidBitPositionError` for anything outside
``[0, INT32_WIDTH - 1]``. Apart from the targeted bit, the value is returned unchanged.
"""

from typing import Iterable, Any

from atmfjstc.lib.int32_bit_ops.int32 import INT32_WIDTH, to_int32, check_bit_position


def get_bit(number: int, position: int) -> int:
    """
    Returns the bit at `position` in `number` (0 or 1). E.g. ``get_bit(5, 2) == 1``, ``get_bit(5, 1) == 0``.

    For negative numbers, the two's-complement representation is used, so ``get_bit(-1, 31) == 1``.
    """
    return (to_int32(number) >> check_bit_position(position)) & 1


def set_bit(number: int, position: int) -> int:
    """
    Returns `number` with the bit at `position` forced to 1.
    """
    return to_int32(to_int32(number) | (1 << check_bit_position(position)))


def clear_bit(number: int, position: int) -> int:
    """
    Returns `number` with the bit at `position` forced to 0.
    """
    return to_int32(to_int32(number) & ~(1 << check_bit_position(position)))


def update_bit(number: int, position: int, value: Any) -> int:
    """
    Returns `number` with the bit at `position` set to `value`.

    The value is interpreted by truthiness: anything non-zero (or otherwise truthy) sets the bit, while 0 (or any
    falsy value) clears it.
    """
    position = check_bit_position(position)
    bit_value = 1 if value else 0

    return to_int32((to_int32(number) & ~(1 << position)) | (bit_value << position))


def iter_bits(number: int) -> Iterable[int]:
    """
    Iterates through all `INT32_WIDTH` bits of a number, from the least significant to the most significant.

    Unlike a loop that shifts the number until it reaches zero, this always terminates after exactly 32 bits, negative
    numbers included.
    """
    number = to_int32(number)

    for position in range(INT32_WIDTH):
        yield get_bit(number, position)
