"""
The smallest productions: comments, includes, quoted strings, numbers and identifiers.

Each one takes a Cursor and returns either the thing it found or None.
On None, the cursor has not moved.
"""
import re
from typing import Optional

from ..scanning.engine import Cursor
from ..scanning.interface import trim_trailing_whitespace, is_identifier_start, is_identifier_break
from ..scene import Comment, Include, Integer, Float

INT64_MIN, INT64_MAX = -2**63, 2**63-1

INTEGER = re.compile(r'[-+]?[0-9]+')
FLOAT = re.compile(r'[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?')

def parse_comment(cursor:Cursor) -> Optional[Comment]:
	"""
	A comment runs to the end of the line. The newline itself is left in place:
	whoever called us will be trimming whitespace next anyway.
	"""
	mark = cursor.mark()
	cursor.trim_leading_whitespace()
	if not cursor.match('//'):
		cursor.expect('comment')
		cursor.reset(mark)
		return None
	eol = cursor.find('\n')
	if eol < 0: eol = len(cursor.text)
	return Comment(trim_trailing_whitespace(cursor.take_until(eol)))

def parse_quoted_string(cursor:Cursor) -> Optional[str]:
	mark = cursor.mark()
	if not cursor.try_consume('"'): return None
	end = cursor.find('"')
	if end < 0:
		cursor.expect('closing \'"\'')
		cursor.reset(mark)
		return None
	text = cursor.take_until(end)
	cursor.advance_to(end+1)
	return text

def parse_include(cursor:Cursor) -> Optional[Include]:
	mark = cursor.mark()
	if not cursor.try_consume('#include'): return None
	path = parse_quoted_string(cursor)
	if path is None:
		cursor.reset(mark)
		return None
	return Include(path)

def parse_identifier(cursor:Cursor, trim:bool=True) -> Optional[str]:
	mark = cursor.mark()
	if trim: cursor.trim_leading_whitespace()
	if not is_identifier_start(cursor.peek()):
		cursor.expect('identifier')
		cursor.reset(mark)
		return None
	# The first character is already known good.
	end = 1
	while not is_identifier_break(cursor.peek(end)): end += 1
	return cursor.take_until(cursor.position + end)

def _integer_length(text:str, at:int) -> int:
	m = INTEGER.match(text, at)
	if m is None or not INT64_MIN <= int(m.group()) <= INT64_MAX: return 0
	return m.end() - at

def _float_length(text:str, at:int) -> int:
	m = FLOAT.match(text, at)
	return 0 if m is None else m.end() - at

def parse_number(cursor:Cursor):
	"""
	Both lexers get a look at the same spot, and whichever reads further wins.
	So `123` and `123.0` differ, as do `1` and `1e3`. When they read the same
	amount, which can only mean plain digits, the integer is the answer.
	An integer too big for 64 bits does not count as an integer at all.
	"""
	mark = cursor.mark()
	cursor.trim_leading_whitespace()
	text, at = cursor.text, cursor.position
	int_length, float_length = _integer_length(text, at), _float_length(text, at)
	if int_length and int_length >= float_length:
		return Integer(int(cursor.take_until(at + int_length)))
	if float_length > int_length:
		return Float(float(cursor.take_until(at + float_length)))
	cursor.expect('number')
	cursor.reset(mark)
	return None
