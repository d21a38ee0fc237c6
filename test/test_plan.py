import unittest

from bytedump.common import ConfigError, DumpError, make_num
from bytedump.plan import ReadPlan


class ReadPlanTestCase(unittest.TestCase):
    def test_defaults(self):
        plan = ReadPlan()
        self.assertEqual(0, plan.offset)
        self.assertEqual(16, plan.bytes_per_line)
        self.assertEqual(-1, plan.bytes_to_read)
        self.assertFalse(plan.bounded)

    def test_invalid_width(self):
        for width in (0, -1, -16):
            with self.assertRaises(ConfigError):
                ReadPlan(bytes_per_line=width)

    def test_negative_offset(self):
        with self.assertRaises(ConfigError):
            ReadPlan(offset=-1)

    def test_negative_quota_is_unbounded(self):
        plan = ReadPlan(bytes_to_read=-5)
        self.assertEqual(ReadPlan.UNBOUNDED, plan.bytes_to_read)
        self.assertEqual(16, plan.request_size())

    def test_from_args(self):
        plan = ReadPlan.from_args(offset=3, bytes_per_line=8)
        self.assertEqual(-1, plan.bytes_to_read)
        plan = ReadPlan.from_args(bytes_to_read=12)
        self.assertTrue(plan.bounded)

    def test_request_size(self):
        plan = ReadPlan(bytes_per_line=16, bytes_to_read=40)
        self.assertEqual(16, plan.request_size())
        plan = ReadPlan(bytes_per_line=16, bytes_to_read=16)
        self.assertEqual(16, plan.request_size())
        plan = ReadPlan(bytes_per_line=16, bytes_to_read=5)
        self.assertEqual(5, plan.request_size())
        plan = ReadPlan(bytes_per_line=16, bytes_to_read=0)
        self.assertEqual(0, plan.request_size())

    def test_consume(self):
        plan = ReadPlan(offset=10, bytes_to_read=20)
        plan.consume(16)
        self.assertEqual(26, plan.offset)
        self.assertEqual(4, plan.bytes_to_read)
        plan = ReadPlan()
        plan.consume(16)
        self.assertEqual(16, plan.offset)
        self.assertEqual(-1, plan.bytes_to_read)

    def test_repr(self):
        self.assertIn('bytes_per_line=16', repr(ReadPlan()))


class MakeNumTestCase(unittest.TestCase):
    def test_formats(self):
        test_cases = (
            ('42', 42),
            ('0x10', 16),
            ('0XfF', 255),
            ('$20', 32),
            ('0b101', 5),
            ('%11', 3),
            ('-1', -1),
            ('-0x10', -16),
            (' 7 ', 7),
        )
        for txt, value in test_cases:
            self.assertEqual(value, make_num(txt))

    def test_invalid(self):
        for txt in ('', 'abc', '1.5', '0xzz', '--5', '12a',
                    '-0x-5', '0x+5', '$-1', '0b 1', '+5'):
            with self.assertRaises(ValueError):
                make_num(txt)


class DumpErrorTestCase(unittest.TestCase):
    def test_message(self):
        err = ConfigError('cannot seek into stdin')
        self.assertIsInstance(err, DumpError)
        self.assertEqual('cannot seek into stdin', str(err))
        self.assertEqual('"cannot seek into stdin"', repr(err))


if __name__ == '__main__':
    unittest.main(verbosity=2)
