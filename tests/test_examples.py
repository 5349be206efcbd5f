import unittest

import example.pages, example.registers

from rangeparse import MalformedInput, InvalidValue


class TestPages(unittest.TestCase):
	def test_00_selection(self):
		for text, expect in [
			('1', [0]),
			('1-3,7', [0, 1, 2, 6]),
			('12-10', [9, 10, 11]),
			('2,2', [1, 1]),
		]:
			with self.subTest(text=text): self.assertEqual(expect, example.pages.select_pages(text, 12))

	def test_01_out_of_bounds(self):
		for text in '0', '11-13', '-1':
			with self.subTest(text=text): self.assertRaises(MalformedInput, example.pages.select_pages, text, 12)


class TestRegisters(unittest.TestCase):
	def test_00_word_steps(self):
		found = example.registers.registers('0x10..0x1C;0x0;0x24..0x20')
		self.assertEqual([0x10, 0x14, 0x18, 0x1C, 0x0, 0x20, 0x24], found)
		self.assertTrue(all(isinstance(a, example.registers.Address) for a in found))

	def test_01_misaligned(self):
		self.assertRaises(InvalidValue, example.registers.registers, '0x10..0x13')


if __name__ == '__main__':
	unittest.main()
