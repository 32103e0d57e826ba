"""
The expression grammar for attribute values:

	value -> number | "string" | name ( arguments ) | plugin::attribute | name
	arguments -> <empty> | value ( , value )*

The alternatives are tried in that order, and the first to match wins. Since the
last three all begin with a name, the longer forms have to go first or a plain
identifier would steal every one of them.
"""
from typing import Optional

from ..scanning.engine import Cursor
from ..scene import Value, QuotedString, Identifier, AttributeSelector, FunctionCall
from .leaves import parse_number, parse_quoted_string, parse_identifier

def parse_attribute_selector(cursor:Cursor) -> Optional[AttributeSelector]:
	""" No whitespace is allowed on either side of the `::`. """
	mark = cursor.mark()
	plugin = parse_identifier(cursor)
	if plugin is not None and cursor.try_consume('::', trim=False):
		attribute = parse_identifier(cursor, trim=False)
		if attribute is not None: return AttributeSelector(plugin, attribute)
	cursor.reset(mark)
	return None

def parse_function(cursor:Cursor) -> Optional[FunctionCall]:
	"""
	Once past the opening parenthesis, every argument must be followed by
	either a comma or the closing parenthesis. Anything else abandons the
	whole call, and the cursor goes back to before the name.
	"""
	mark = cursor.mark()
	name = parse_identifier(cursor)
	if name is None or not cursor.try_consume('('):
		cursor.reset(mark)
		return None
	arguments = []
	if not cursor.try_consume(')'):
		while True:
			argument = parse_value(cursor)
			if argument is None: break
			arguments.append(argument)
			if cursor.try_consume(')'): break
			if not cursor.try_consume(','):
				argument = None
				break
		if argument is None:
			cursor.reset(mark)
			return None
	return FunctionCall(name, tuple(arguments))

def _parse_quoted_value(cursor:Cursor) -> Optional[QuotedString]:
	text = parse_quoted_string(cursor)
	if text is not None: return QuotedString(text)

def _parse_identifier_value(cursor:Cursor) -> Optional[Identifier]:
	name = parse_identifier(cursor)
	if name is not None: return Identifier(name)

ALTERNATIVES = (
	parse_number,
	_parse_quoted_value,
	parse_function,
	parse_attribute_selector,
	_parse_identifier_value,
)

def parse_value(cursor:Cursor) -> Optional[Value]:
	for alternative in ALTERNATIVES:
		value = alternative(cursor)
		if value is not None: return value
	return None
