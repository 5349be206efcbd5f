"""
This module is all about easing over the process to display where things go wrong.

A range expression is (nearly always) a single line of text typed by a person,
so the useful thing to do with a bad one is show it back with the offending part
underlined. The `illustration` function makes that picture; `complaint` adds the
message and a column number on top.

If somebody passes a multi-line string, only the line containing the trouble is shown.
"""

import re

LINE_BREAK = re.compile(r'\r\n?|\n')

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

def find_line(text:str, index:int):
	""" Return the (line, column) containing a character offset, where line is the actual text. """
	left = 0
	for m in LINE_BREAK.finditer(text):
		if m.end() > index: return text[left:m.start()], index - left
		left = m.end()
	return text[left:], index - left

def complaint(text:str, a_slice:slice, message:str) -> str:
	line, col = find_line(text, a_slice.start)
	illustrated = illustration(line, col, a_slice.stop - a_slice.start, prefix=' >>> ')
	return "At column %d: %s\n%s"%(col + 1, message, illustrated)
