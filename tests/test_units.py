import unittest

from simparams.domain import units

class TestUnitConstants(unittest.TestCase):
    def test_data_sizes(self):
        self.assertEqual(units.BITS_PER_BYTE, 8)
        self.assertEqual(units.BYTES_PER_KB, 1024)
        self.assertEqual(units.BITS_PER_KB, 8192)
        self.assertEqual(units.BYTES_PER_MB, 1048576)

    def test_platform_sizes(self):
        self.assertEqual(
            (units.INTEGER_SIZE, units.DOUBLE_SIZE, units.BOOLEAN_SIZE, units.ENUM_SIZE),
            (32, 64, 1, 8),
        )
        self.assertEqual(units.SECONDS_PER_HOUR, 3600)

    def test_equality_precisions(self):
        self.assertLess(units.DOUBLE_EQUAL_PRECISION, units.DOUBLE_EQUAL_WEAK_PRECISION)
        self.assertLess(abs((0.1 + 0.2) - 0.3), units.DOUBLE_EQUAL_PRECISION)
        self.assertGreater(abs(1.0 - 1.00001), units.DOUBLE_EQUAL_WEAK_PRECISION)

    def test_display_formats(self):
        self.assertEqual(units.ZERO_DEC.format(3.7), "4")
        self.assertEqual(units.ONE_DEC.format(3.14159), "3.1")
        self.assertEqual(units.TWO_DEC.format(3.14159), "3.14")
        self.assertEqual(units.TEN_DEC.format(0.5), "0.5000000000")
        self.assertEqual(units.LEADING_ZEROES.format(42), "00000042")
        self.assertEqual(units.LEADING_ZEROES.format(123456789), "123456789")
        # the sign counts towards the width of 8
        self.assertEqual(units.LEADING_ZEROES.format(-42), "-0000042")

if __name__ == '__main__':
    unittest.main()
