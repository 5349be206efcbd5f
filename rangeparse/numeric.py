"""
What the range parser needs to know about a kind of number.

Four things, really: how to read one from text, how to add two together, how to compare,
and what the "unit" is -- the step from one value to the next when filling in a range.
Python numbers already know how to add and compare, so a `Numeric` only has to carry
the other two.

There are three ways to say which kind of number you want:

	* One of the built-in types listed in `BUILTIN`: int, float, Decimal, or Fraction.
	* A `Numeric(decode, unit)` you put together yourself.
	* A class with `from_text(text)` and `unit()` classmethods. Subclass `Steppable` if you like,
	  but it's enough to have the methods.

The decode function should raise ValueError (or ArithmeticError, which is what Decimal does)
when handed text that is not a number. Anything else it raises is your problem.

Mind the exponent: with the default dash for a range-separator, "1e-3" reads as the range
from "1e" to "3", and "1e" is not a number. Write "0.001", or pick another range-separator.
"""

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType
from typing import NamedTuple, Callable, Any

class Numeric(NamedTuple):
	decode: Callable[[str], Any]
	unit: Any

class Steppable(ABC):
	""" The protocol for a home-made numeric type. """

	@classmethod
	@abstractmethod
	def from_text(cls, text:str):
		""" Return an instance, or raise ValueError if the text does not denote one. """

	@classmethod
	@abstractmethod
	def unit(cls):
		""" Return the smallest step between consecutive values; it must be strictly positive. """

	@classmethod
	def __subclasshook__(cls, C):
		if cls is Steppable:
			if all(callable(getattr(C, name, None)) for name in ('from_text', 'unit')): return True
		return NotImplemented

def _finite(kind, is_finite=math.isfinite):
	# An infinite endpoint would make for a very long range.
	def decode(text:str):
		value = kind(text)
		if not is_finite(value): raise ValueError("not a finite number: %r"%text)
		return value
	return decode

BUILTIN = MappingProxyType({
	int: Numeric(int, 1),
	float: Numeric(_finite(float), 1.0),
	Decimal: Numeric(_finite(Decimal, Decimal.is_finite), Decimal(1)),
	Fraction: Numeric(Fraction, Fraction(1)),
})

def numeric_for(kind) -> Numeric:
	""" Resolve any of the accepted ways to say "this kind of number" into a Numeric. """
	if isinstance(kind, Numeric): return kind
	if isinstance(kind, type):
		if kind in BUILTIN: return BUILTIN[kind]
		if issubclass(kind, Steppable): return Numeric(kind.from_text, kind.unit())
	raise TypeError("Don't know how to parse numbers of kind %r"%(kind,))
