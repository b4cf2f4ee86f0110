import unittest
import random

from atmfjstc.lib.int32_bit_ops.adder import full_adder, full_adder_bit


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


def _wrap(value):
    return ((value - INT32_MIN) % 2 ** 32) + INT32_MIN


class FullAdderBitTest(unittest.TestCase):
    def test_truth_table(self):
        for a_bit in (0, 1):
            for b_bit in (0, 1):
                for carry_in in (0, 1):
                    total = a_bit + b_bit + carry_in

                    with self.subTest(a_bit=a_bit, b_bit=b_bit, carry_in=carry_in):
                        self.assertEqual(full_adder_bit(a_bit, b_bit, carry_in), (total & 1, total >> 1))

    def test_not_a_bit(self):
        with self.assertRaises(ValueError):
            full_adder_bit(2, 0, 0)

    def test_bool_rejected(self):
        with self.assertRaises(ValueError):
            full_adder_bit(True, True, False)

    def test_returns_ints(self):
        sum_bit, carry_out = full_adder_bit(1, 1, 0)

        self.assertIs(type(sum_bit), int)
        self.assertIs(type(carry_out), int)


class FullAdderTest(unittest.TestCase):
    def test_example(self):
        self.assertEqual(full_adder(7, 3), 10)

    def test_negative(self):
        self.assertEqual(full_adder(-7, 3), -4)
        self.assertEqual(full_adder(-1, -1), -2)
        self.assertEqual(full_adder(-1, 1), 0)

    def test_overflow_wraps(self):
        self.assertEqual(full_adder(INT32_MAX, 1), INT32_MIN)
        self.assertEqual(full_adder(INT32_MIN, -1), INT32_MAX)
        self.assertEqual(full_adder(INT32_MIN, INT32_MIN), 0)

    def test_matches_native(self):
        rng = random.Random(7)
        values = [0, 1, -1, INT32_MIN, INT32_MAX] + [rng.randint(INT32_MIN, INT32_MAX) for _ in range(25)]

        for a in values:
            for b in values:
                with self.subTest(a=a, b=b):
                    self.assertEqual(full_adder(a, b), _wrap(a + b))


if __name__ == '__main__':
    unittest.main()
