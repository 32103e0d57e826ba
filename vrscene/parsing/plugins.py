"""
Plugin blocks:

	Type name {
		attribute = value;
		// comments may appear between statements
	}

Comments inside a block are skipped over; they do not end up in the document.
"""
from typing import Optional

from ..scanning.engine import Cursor
from ..scene import Plugin, Attribute
from .leaves import parse_comment, parse_identifier
from .values import parse_value

def _open_brace(cursor:Cursor, lenient:bool) -> bool:
	"""
	Normally only whitespace may come between the plugin name and its `{`.
	In lenient mode, whatever text is there gets skipped without a glance,
	which is how older readers of the format behaved.
	"""
	if not lenient: return cursor.try_consume('{')
	brace = cursor.find('{')
	if brace < 0:
		cursor.expect("'{'")
		return False
	cursor.advance_to(brace+1)
	return True

def _parse_statement(cursor:Cursor) -> Optional[Attribute]:
	name = parse_identifier(cursor)
	if name is None or not cursor.try_consume('='): return None
	value = parse_value(cursor)
	if value is None or not cursor.try_consume(';'): return None
	return Attribute(name, value)

def parse_plugin(cursor:Cursor, *, lenient_braces:bool=False) -> Optional[Plugin]:
	mark = cursor.mark()
	type_name = parse_identifier(cursor)
	name = parse_identifier(cursor) if type_name is not None else None
	if name is None or not _open_brace(cursor, lenient_braces):
		cursor.reset(mark)
		return None
	attributes = []
	while not cursor.try_consume('}'):
		if parse_comment(cursor) is not None: continue
		statement = _parse_statement(cursor)
		if statement is None:
			cursor.reset(mark)
			return None
		attributes.append(statement)
	return Plugin(type_name, name, tuple(attributes))
