"""
Definition of the fixed-width integer domain that all operations in this package work in.

Python ints have arbitrary precision, so the 32-bit two's-complement representation is simulated: every argument is
first reduced to its low 32 bits (`to_int32`) and every result is reduced the same way before being returned. This is
the same coercion that e.g. JavaScript applies to the operands of its bitwise operators.
"""

from atmfjstc.lib.int32_bit_ops.errors import InvalidBitPositionError


INT32_WIDTH = 32
INT32_MIN = -(1 << (INT32_WIDTH - 1))
INT32_MAX = (1 << (INT32_WIDTH - 1)) - 1
UINT32_MASK = (1 << INT32_WIDTH) - 1

_SIGN_BIT = 1 << (INT32_WIDTH - 1)


def to_int32(value: int) -> int:
    """
    Interprets the low 32 bits of an integer as a signed two's-complement value.

    E.g. ``to_int32(0xFFFFFFFF) == -1`` and ``to_int32(INT32_MAX + 1) == INT32_MIN``. Values already in the 32-bit
    range are returned unchanged.
    """
    _require_int(value)

    value &= UINT32_MASK

    return value - (1 << INT32_WIDTH) if value & _SIGN_BIT else value


def to_uint32(value: int) -> int:
    """
    Interprets the low 32 bits of an integer as an unsigned value, e.g. ``to_uint32(-1) == 0xFFFFFFFF``.
    """
    _require_int(value)

    return value & UINT32_MASK


def check_bit_position(position: int) -> int:
    """
    Checks that a bit position lies in ``[0, INT32_WIDTH - 1]`` and returns it.

    Raises:
        InvalidBitPositionError: If the position is out of range. Positions are never wrapped around.
        TypeError: If the position is not an integer.
    """
    _require_int(position)

    if not (0 <= position < INT32_WIDTH):
        raise InvalidBitPositionError(position, INT32_WIDTH)

    return position


def _require_int(value: int):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int, got '{type(value).__name__}'")
