"""
The document driver, and the one entry point most callers need:

	from vrscene.parsing.document import parse_vrscene
	scene = parse_vrscene(text)

A document is any mixture of comments, includes and plugin blocks. The driver
tries those three in turn until the text runs out. If none of them applies,
the whole parse fails with ParseFailed; there is no partial result.
"""
from ..scanning.engine import Cursor
from ..scene import Vrscene
from .interface import ParseFailed
from .leaves import parse_comment, parse_include
from .plugins import parse_plugin

def parse_vrscene(text:str, *, lenient_braces:bool=False) -> Vrscene:
	"""
	Parse a complete document held in memory.
	Empty (or all-whitespace) text is an empty document, not an error.
	`lenient_braces` tolerates junk between a plugin's name and its opening brace.
	"""
	cursor = Cursor(text)
	includes, comments, plugins = [], [], []
	cursor.trim_leading_whitespace()
	while not cursor.at_end():
		comment = parse_comment(cursor)
		if comment is not None: comments.append(comment)
		else:
			include = parse_include(cursor)
			if include is not None: includes.append(include)
			else:
				plugin = parse_plugin(cursor, lenient_braces=lenient_braces)
				if plugin is None: raise ParseFailed(cursor.furthest, cursor.expected())
				plugins.append(plugin)
		cursor.trim_leading_whitespace()
	return Vrscene(includes, comments, plugins, text)
