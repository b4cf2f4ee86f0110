"""
Primitive bitwise arithmetic over 32-bit two's-complement integers: bit accessors, parity and sign tests, scaling by
shifts, multiplication built from shifts and additions, population counts and a gate-level full adder.

Python ints have unlimited precision, so the fixed width is simulated (see the `int32` module). Any int is accepted as
input and is read by its low 32 bits; results are always in the range ``[INT32_MIN, INT32_MAX]``.

These are mostly of didactic value. Owing to the interpreted nature of Python, they are far slower than the native
operators they emulate.
"""

__version__ = '0.1.0'


from atmfjstc.lib.int32_bit_ops.int32 import INT32_WIDTH, INT32_MIN, INT32_MAX, to_int32, to_uint32
from atmfjstc.lib.int32_bit_ops.errors import (
    Int32BitOpsError, InvalidBitPositionError, NegativeInputError, RecursionBoundExceededError,
)
from atmfjstc.lib.int32_bit_ops.accessors import get_bit, set_bit, clear_bit, update_bit
from atmfjstc.lib.int32_bit_ops.predicates import is_even, is_positive, is_power_of_2
from atmfjstc.lib.int32_bit_ops.shifts import multiply_by_two, divide_by_two, switch_sign
from atmfjstc.lib.int32_bit_ops.multiplication import multiply, multiply_unsigned
from atmfjstc.lib.int32_bit_ops.counting import count_set_bits, bits_diff, bit_length
from atmfjstc.lib.int32_bit_ops.adder import full_adder
