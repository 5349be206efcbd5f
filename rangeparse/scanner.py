"""
Segment splitting and interpretation: the part of range parsing that cares about text.

Splitting on the value-separator is easy. The interesting part is the range-separator,
because in the usual notation it is also the minus sign: "-5--1" means the range from -5 to -1.
The rule is that a range-separator counts as a sign if it appears where an endpoint is
expected to begin -- at the start of the segment, or right after another range-separator.
Anywhere else it is structural: it divides one endpoint from the next.

That rule is a two-state machine, and `find_delimiters` is exactly that machine.
It is kept apart from the decoding so the tricky cases can be examined on their own.
"""

from typing import Callable, Iterator

from .interface import Segment, Single, Range, MalformedInput, InvalidValue

EXPECTING_ENDPOINT = 'EXPECTING_ENDPOINT'
SCANNING_FOR_DELIMITER = 'SCANNING_FOR_DELIMITER'

def split_segments(text:str, value_separator:str) -> Iterator[Segment]:
	"""
	Yield the segments between value-separators, left to right.
	An empty (or all-blank) segment is an error, and so is an empty input.
	"""
	start = 0
	for piece in text.split(value_separator):
		segment = Segment(piece, start)
		if not piece.strip(): raise MalformedInput(piece, "empty segment", segment.span)
		yield segment
		start += len(piece) + len(value_separator)

def find_delimiters(text:str, range_separator:str) -> list[int]:
	""" Return the offsets of every structural range-separator in the text. """
	delimiters, state, cursor, width = [], EXPECTING_ENDPOINT, 0, len(range_separator)
	while cursor < len(text):
		if state == EXPECTING_ENDPOINT:
			if text[cursor].isspace():
				cursor += 1
				continue
			# A separator here is the sign of the coming endpoint.
			cursor += width if text.startswith(range_separator, cursor) else 1
			state = SCANNING_FOR_DELIMITER
		elif text.startswith(range_separator, cursor):
			delimiters.append(cursor)
			cursor += width
			state = EXPECTING_ENDPOINT
		else:
			cursor += 1
	return delimiters

def interpret(segment:Segment, range_separator:str, decode:Callable):
	""" Classify a segment as Single or Range, decoding the endpoint(s) along the way. """
	text = segment.text
	delimiters = find_delimiters(text, range_separator)
	if len(delimiters) > 1: raise MalformedInput(text, "too many range separators", segment.span)
	if delimiters:
		split = delimiters[0]
		return Range(
			_decode_endpoint(segment, 0, split, decode),
			_decode_endpoint(segment, split + len(range_separator), len(text), decode),
		)
	else:
		return Single(_decode_endpoint(segment, 0, len(text), decode))

def _decode_endpoint(segment:Segment, left:int, right:int, decode:Callable):
	span = slice(segment.start + left, segment.start + right)
	text = segment.text[left:right].strip()
	if not text: raise MalformedInput(segment.text, "missing endpoint", span)
	try: return decode(text)
	except (ValueError, ArithmeticError) as ex:
		raise InvalidValue(text, segment.text, span) from ex
