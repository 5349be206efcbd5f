"""
This file aggregates the design constants, endpoint types, and exception types which RangeParse deals in.

A range expression is a list of segments. Each segment is either a single value or a pair
of endpoints. The scanner produces `Single` and `Range` objects; the expander consumes them.

Every exception raised on account of bad input derives from `RangeError`, which is itself
a `ValueError`, so callers who don't care about the details can catch just the one thing.
Those which know where in the input the problem lies carry a `span` (a slice object) and
can illustrate themselves via `complaint(...)`.
"""

from typing import NamedTuple, Any, Optional

from . import failureprone

DEFAULT_VALUE_SEPARATOR = ','
DEFAULT_RANGE_SEPARATOR = '-'

class Single(NamedTuple):
	value: Any

class Range(NamedTuple):
	start: Any
	end: Any

class Segment(NamedTuple):
	""" A piece of the input between value-separators, along with where it came from. """
	text: str
	start: int

	@property
	def span(self) -> slice: return slice(self.start, self.start + len(self.text))

class RangeError(ValueError):
	""" Base class of all exceptions arising from the range-parsing machinery. """
	span: Optional[slice] = None

	def complaint(self, text:str) -> str:
		"""
		Given the original input text, produce a message with the offending part underlined.
		If the error has no known location, you just get the message.
		"""
		if self.span is None: return str(self)
		return failureprone.complaint(text, self.span, str(self))

class MalformedInput(RangeError):
	"""
	Raised when the structure of the input is wrong:
		an empty input or segment,
		a range missing one of its endpoints,
		or more range-separators than a two-endpoint range can hold.
	"""
	def __init__(self, segment:str, reason:str, span:slice=None):
		super().__init__(segment, reason)
		self.segment, self.reason, self.span = segment, reason, span

	def __str__(self): return "Malformed range expression %r: %s"%(self.segment, self.reason)

class InvalidValue(RangeError):
	""" Raised when some endpoint text will not decode into the requested kind of number. """
	def __init__(self, text:str, segment:str, span:slice=None):
		super().__init__(text, segment)
		self.text, self.segment, self.span = text, segment, span

	def __str__(self): return "Not a number: %r (in %r)"%(self.text, self.segment)

class SeparatorConflict(RangeError):
	""" The separators must be non-empty and neither may contain the other. """
	def __init__(self, value_separator:str, range_separator:str):
		super().__init__(value_separator, range_separator)
		self.value_separator, self.range_separator = value_separator, range_separator

	def __str__(self):
		return "Cannot tell value separator %r from range separator %r"%(self.value_separator, self.range_separator)
