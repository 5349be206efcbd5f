"""
A home-made kind of number: hardware register addresses, written in hex and aligned to words.
Ranges of them step by the word size, so "0x10-0x1C" means four registers, not thirteen.
"""

from rangeparse import Steppable, parse_with

WORD = 4

class Address(int, Steppable):
	@classmethod
	def from_text(cls, text:str):
		value = int(text, 16)
		if value % WORD: raise ValueError("misaligned address: %s"%text)
		return cls(value)

	@classmethod
	def unit(cls): return cls(WORD)

	def __add__(self, other): return Address(int(self) + int(other))

	def __repr__(self): return '0x%X'%self

def registers(text:str) -> list:
	""" Semicolons between items; two dots within a range. """
	return parse_with(text, ';', '..', kind=Address)
