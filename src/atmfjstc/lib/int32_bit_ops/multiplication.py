"""
Multiplication algorithms built from shifts and additions only, without using the native ``*`` operator.

Two variants are provided:

- `multiply`: signed, recursive. It halves the multiplier at every step while doubling the multiplicand, correcting
  for odd multipliers by adding or subtracting the multiplicand.
- `multiply_unsigned`: shift-and-add over the set bits of the multiplier. It relies on the fact that any number can be
  decomposed into a sum of powers of 2, e.g. ``19 = 2^4 + 2^1 + 2^0``, so ``x * 19 = (x << 4) + (x << 1) + (x << 0)``.

Both produce the result modulo 2^32, as a signed 32-bit value, just like native fixed-width multiplication.
"""

from atmfjstc.lib.int32_bit_ops.int32 import INT32_WIDTH, to_int32, to_uint32
from atmfjstc.lib.int32_bit_ops.predicates import is_even, is_positive
from atmfjstc.lib.int32_bit_ops.shifts import multiply_by_two, divide_by_two
from atmfjstc.lib.int32_bit_ops.errors import NegativeInputError, RecursionBoundExceededError


def multiply(a: int, b: int) -> int:
    """
    Multiplies two signed 32-bit numbers. E.g. ``multiply(2, 3) == 6``, ``multiply(2, -3) == -6``.

    The recursion handles four cases:

    - `a` or `b` is 0: the result is 0
    - `b` is even: ``a * b == (2a) * (b / 2)``
    - `b` is odd and positive: ``a * b == (2a) * ((b - 1) / 2) + a``
    - `b` is odd and negative: ``a * b == (2a) * ((b + 1) / 2) - a``

    Every step strips one bit off `b`, so the recursion is at most `INT32_WIDTH` levels deep, `INT32_MIN` included.
    Overflow wraps around, e.g. ``multiply(INT32_MAX, 2) == -2``.

    Raises:
        RecursionBoundExceededError: If the depth bound is ever exceeded. This cannot happen for valid 32-bit input.
    """
    return _multiply(to_int32(a), to_int32(b), 0)


def _multiply(a: int, b: int, depth: int) -> int:
    if a == 0 or b == 0:
        return 0

    if depth > INT32_WIDTH:
        raise RecursionBoundExceededError('multiply', INT32_WIDTH)

    if is_even(b):
        return _multiply(multiply_by_two(a), divide_by_two(b), depth + 1)

    if is_positive(b):
        return to_int32(_multiply(multiply_by_two(a), divide_by_two(b - 1), depth + 1) + a)

    return to_int32(_multiply(multiply_by_two(a), divide_by_two(b + 1), depth + 1) - a)


def multiply_unsigned(x: int, y: int) -> int:
    """
    Multiplies two non-negative numbers by adding up ``x << i`` for every bit `i` set in `y`.

    The multiplier is consumed with a logical (zero-filling) shift and the loop never runs for more than
    `INT32_WIDTH` iterations. The result wraps around modulo 2^32 like the signed variant.

    Raises:
        NegativeInputError: If either of the inputs is negative (after reduction to 32 bits).
    """
    x = to_int32(x)
    y = to_int32(y)

    if x < 0:
        raise NegativeInputError('multiply_unsigned', x)
    if y < 0:
        raise NegativeInputError('multiply_unsigned', y)

    result = 0
    multiplier = to_uint32(y)

    for bit_index in range(INT32_WIDTH):
        if multiplier == 0:
            break

        if multiplier & 1:
            result = to_int32(result + to_int32(x << bit_index))

        multiplier >>= 1

    return result
