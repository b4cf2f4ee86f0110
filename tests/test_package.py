import unittest

import atmfjstc.lib.int32_bit_ops as int32_bit_ops


class FlatSurfaceTest(unittest.TestCase):
    def test_all_operations_exported(self):
        for name in (
            'get_bit', 'set_bit', 'clear_bit', 'update_bit', 'is_even', 'is_positive', 'is_power_of_2',
            'multiply_by_two', 'divide_by_two', 'switch_sign', 'multiply', 'multiply_unsigned', 'count_set_bits',
            'bits_diff', 'bit_length', 'full_adder',
        ):
            with self.subTest(name=name):
                self.assertTrue(callable(getattr(int32_bit_ops, name)))

    def test_width(self):
        self.assertEqual(int32_bit_ops.INT32_WIDTH, 32)


if __name__ == '__main__':
    unittest.main()
