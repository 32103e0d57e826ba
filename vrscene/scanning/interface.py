"""
Scanning Interface Definitions.

These are the character classes of the vrscene format, along with the
handful of string primitives everything else is built from.
"""

WHITESPACE = ' \t\n\v\f\r'
IDENTIFIER_BREAKS = frozenset('=;{}:,()' + WHITESPACE)
FIRST_HIGH_LETTER = 0xC0 # Accented Latin letters start here; anything above is allowed to start a name.

def trim_leading_whitespace(text:str) -> str:
	return text.lstrip(WHITESPACE)

def trim_trailing_whitespace(text:str) -> str:
	return text.rstrip(WHITESPACE)

def match(text:str, token:str) -> bool:
	""" True if `text` begins with `token`. """
	return text.startswith(token)

def is_identifier_start(ch:str) -> bool:
	if not ch: return False
	return ch == '_' or (ch.isascii() and ch.isalpha()) or ord(ch) >= FIRST_HIGH_LETTER

def is_identifier_break(ch:str) -> bool:
	""" The end of input also breaks an identifier, so the empty string counts. """
	return ch == '' or ch in IDENTIFIER_BREAKS
