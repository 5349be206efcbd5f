""" Turn interpreted segments into the values they stand for. """

import warnings
from typing import Iterable

from .interface import Single, Range, RangeError

def expand(item, unit) -> list:
	"""
	A Single stands for itself. A Range stands for every value from its lower endpoint
	to its higher one, inclusive, counting up by the unit. Which endpoint was written
	first makes no difference: the result always ascends.
	"""
	if isinstance(item, Single): return [item.value]
	assert isinstance(item, Range), type(item)
	lo, hi = (item.end, item.start) if item.end < item.start else (item.start, item.end)
	values = []
	x = lo
	while x <= hi:
		values.append(x)
		# Precision can run out partway along a float or Decimal range.
		step = x + unit
		if not step > x: raise RangeError("Unit %r does not advance from %r"%(unit, x))
		x = step
	if values[-1] != hi:
		warnings.warn("Range from %r to %r stops short at %r"%(lo, hi, values[-1]))
	return values

def expand_all(items:Iterable, unit) -> list:
	""" Concatenate the expansions, in order. """
	result = []
	for item in items: result.extend(expand(item, unit))
	return result
