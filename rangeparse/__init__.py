"""
RangeParse: turn text like "1-3,5-8" or "-5--1,0-3" into the list of numbers it describes.

	>>> parse("1,3-5,2")
	[1, 3, 4, 5, 2]
	>>> parse("-8,-5--1")
	[-8, -5, -4, -3, -2, -1]
	>>> parse_with("-2;0..3;-1;7", ";", "..")
	[-2, 0, 1, 2, 3, -1, 7]

Values come out in the order the segments were written; each range comes out ascending,
whichever way round its endpoints were given. Duplicates are kept.
The `kind` argument chooses the numbers: see the `numeric` module.

Bad input raises a subclass of `RangeError` (which is a ValueError) on the first problem found.
"""

from .interface import (
	DEFAULT_VALUE_SEPARATOR, DEFAULT_RANGE_SEPARATOR,
	Single, Range, Segment,
	RangeError, MalformedInput, InvalidValue, SeparatorConflict,
)
from .numeric import Numeric, Steppable, numeric_for
from . import scanner, expansion

class RangeParser:
	"""
	A parser bound to one pair of separators and one kind of number.
	It holds no state beyond that, so one instance can be shared freely.
	"""
	def __init__(self, value_separator:str=DEFAULT_VALUE_SEPARATOR, range_separator:str=DEFAULT_RANGE_SEPARATOR, kind=int):
		if not value_separator or not range_separator or value_separator in range_separator or range_separator in value_separator:
			raise SeparatorConflict(value_separator, range_separator)
		self.value_separator = value_separator
		self.range_separator = range_separator
		self.numeric = numeric_for(kind)

	def segments(self, text:str):
		return scanner.split_segments(text, self.value_separator)

	def interpret(self, segment:Segment):
		return scanner.interpret(segment, self.range_separator, self.numeric.decode)

	def parse(self, text:str) -> list:
		return expansion.expand_all(map(self.interpret, self.segments(text)), self.numeric.unit)

def parse(text:str, kind=int) -> list:
	""" Parse with the usual separators: comma between values, dash within a range. """
	return RangeParser(kind=kind).parse(text)

def parse_with(text:str, value_separator:str, range_separator:str, kind=int) -> list:
	return RangeParser(value_separator, range_separator, kind).parse(text)
