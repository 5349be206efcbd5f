import unittest
import warnings
from decimal import Decimal
from fractions import Fraction
from rangeparse import expansion, parse
from rangeparse.interface import Single, Range, RangeError


class TestExpand(unittest.TestCase):
	def test_00_single(self):
		self.assertEqual([7], expansion.expand(Single(7), 1))

	def test_01_ascending_either_way(self):
		for item in Range(-2, 3), Range(3, -2):
			with self.subTest(item=item): self.assertEqual([-2, -1, 0, 1, 2, 3], expansion.expand(item, 1))

	def test_02_degenerate_range(self):
		self.assertEqual([4], expansion.expand(Range(4, 4), 1))

	def test_03_fractional_unit(self):
		self.assertEqual(
			[Fraction(0), Fraction(1, 2), Fraction(1)],
			expansion.expand(Range(Fraction(1), Fraction(0)), Fraction(1, 2)),
		)

	def test_04_unit_must_advance(self):
		for unit in 0, -1:
			with self.subTest(unit=unit): self.assertRaises(RangeError, expansion.expand, Range(1, 3), unit)
		self.assertRaises(RangeError, expansion.expand, Range(1e300, 2e300), 1.0)

	def test_04a_precision_running_out_partway(self):
		# The unit advances at the low end but gets lost in rounding further up.
		self.assertRaises(RangeError, expansion.expand, Range(2.0**53 - 2, 2.0**53 + 2), 1.0)
		big = Range(Decimal('9999999999999999999999999998'), Decimal('10000000000000000000000000005'))
		self.assertRaises(RangeError, expansion.expand, big, Decimal(1))

	def test_04b_precision_through_the_parser(self):
		self.assertRaises(RangeError, parse, '9007199254740990-9007199254740994', float)
		self.assertRaises(RangeError, parse, '9999999999999999999999999998-10000000000000000000000000005', Decimal)

	def test_05_stopping_short_warns(self):
		with warnings.catch_warnings(record=True) as caught:
			warnings.simplefilter('always')
			self.assertEqual([1.5, 2.5], expansion.expand(Range(1.5, 3.0), 1.0))
		self.assertEqual(1, len(caught))
		self.assertIn('stops short', str(caught[0].message))

	def test_06_exact_landing_is_quiet(self):
		with warnings.catch_warnings(record=True) as caught:
			warnings.simplefilter('always')
			expansion.expand(Range(-1.0, 3.0), 1.0)
		self.assertEqual([], caught)


class TestExpandAll(unittest.TestCase):
	def test_00_order_and_duplicates(self):
		items = [Single(1), Range(3, 5), Single(2), Range(4, 3)]
		self.assertEqual([1, 3, 4, 5, 2, 3, 4], expansion.expand_all(items, 1))

	def test_01_nothing(self):
		self.assertEqual([], expansion.expand_all([], 1))


if __name__ == '__main__':
	unittest.main()
