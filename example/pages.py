""" The sort of thing a print dialog asks for: "1-3,7,10-12". This is just a worked example. """

from rangeparse import RangeParser, MalformedInput

# One parser serves every call; it holds no state beyond its configuration.
pages = RangeParser()

def select_pages(text:str, page_count:int) -> list:
	"""
	Return the zero-based indices of the pages selected, in the order asked for.
	Page numbers are one-based, as people write them. A page that doesn't exist is an error.
	"""
	selection = pages.parse(text)
	for number in selection:
		if not 1 <= number <= page_count:
			raise MalformedInput(text, "there is no page %d in a document of %d pages"%(number, page_count))
	return [number - 1 for number in selection]

if __name__ == '__main__':
	import sys
	text = sys.argv[1] if len(sys.argv) > 1 else "1-3,7,12-10"
	try: print(select_pages(text, 12))
	except MalformedInput as ex:
		print(ex.complaint(text), file=sys.stderr)
		sys.exit(1)
