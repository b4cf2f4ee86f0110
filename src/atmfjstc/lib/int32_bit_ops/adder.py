"""
Addition performed gate by gate, the way a ripple-carry adder circuit does it.
"""

from typing import Tuple

from atmfjstc.lib.int32_bit_ops.int32 import to_int32
from atmfjstc.lib.int32_bit_ops.accessors import iter_bits


def full_adder_bit(a_bit: int, b_bit: int, carry_in: int) -> Tuple[int, int]:
    """
    Adds two bits and an incoming carry using only XOR, AND and OR.

    Returns:
        A ``(sum_bit, carry_out)`` tuple.
    """
    for bit in (a_bit, b_bit, carry_in):
        if isinstance(bit, bool) or bit not in (0, 1):
            raise ValueError(f"Expected a bit (0 or 1), got {bit!r}")

    a_xor_b = a_bit ^ b_bit

    return a_xor_b ^ carry_in, (a_xor_b & carry_in) | (a_bit & b_bit)


def full_adder(a: int, b: int) -> int:
    """
    Adds two 32-bit numbers by propagating a carry through all 32 bit positions, e.g. ``full_adder(7, 3) == 10``.

    The carry out of bit 31 is dropped, so the result matches native 32-bit addition including overflow:
    ``full_adder(INT32_MAX, 1) == INT32_MIN``.
    """
    result = 0
    carry = 0

    for position, (a_bit, b_bit) in enumerate(zip(iter_bits(a), iter_bits(b))):
        sum_bit, carry = full_adder_bit(a_bit, b_bit, carry)
        result |= sum_bit << position

    return to_int32(result)
