import unittest
import random

from atmfjstc.lib.int32_bit_ops.shifts import multiply_by_two, divide_by_two, switch_sign


INT32_MIN = -2 ** 31
INT32_MAX = 2 ** 31 - 1


class MultiplyByTwoTest(unittest.TestCase):
    def test_simple(self):
        self.assertEqual(multiply_by_two(5), 10)
        self.assertEqual(multiply_by_two(-5), -10)

    def test_overflow_wraps(self):
        self.assertEqual(multiply_by_two(INT32_MAX), -2)
        self.assertEqual(multiply_by_two(INT32_MIN), 0)
        self.assertEqual(multiply_by_two(1 << 30), INT32_MIN)


class DivideByTwoTest(unittest.TestCase):
    def test_simple(self):
        self.assertEqual(divide_by_two(10), 5)
        self.assertEqual(divide_by_two(7), 3)

    def test_rounds_towards_negative_infinity(self):
        self.assertEqual(divide_by_two(-3), -2)
        self.assertEqual(divide_by_two(-1), -1)

    def test_min(self):
        self.assertEqual(divide_by_two(INT32_MIN), -(1 << 30))


class SwitchSignTest(unittest.TestCase):
    def test_simple(self):
        self.assertEqual(switch_sign(5), -5)
        self.assertEqual(switch_sign(-5), 5)
        self.assertEqual(switch_sign(0), 0)

    def test_max(self):
        self.assertEqual(switch_sign(INT32_MAX), INT32_MIN + 1)

    def test_min_is_fixed_point(self):
        self.assertEqual(switch_sign(INT32_MIN), INT32_MIN)

    def test_round_trip(self):
        rng = random.Random(42)

        for number in [0, 1, -1, INT32_MAX, INT32_MIN] + [rng.randint(INT32_MIN, INT32_MAX) for _ in range(50)]:
            with self.subTest(number=number):
                self.assertEqual(switch_sign(switch_sign(number)), number)


if __name__ == '__main__':
    unittest.main()
