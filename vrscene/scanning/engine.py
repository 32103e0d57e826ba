"""
The cursor is the shared parse position. Every production takes one, and either
moves it past what it recognized or leaves it exactly where it was.

Productions get the all-or-nothing behavior by taking a `mark()` on entry and
calling `reset(mark)` on the way out of any failure. Marks are just offsets,
so taking one costs nothing.

Along the way the cursor remembers the furthest point any production got to
before giving up, and what it was hoping to see there. That is not part of the
grammar: it only exists so that a failed parse can say something useful.
"""
from .interface import WHITESPACE, match

class Cursor:
	"""
	A view on the unparsed remainder of an immutable text.
	`position` is the offset of the first character not yet consumed.
	"""

	def __init__(self, text:str, at:int=0):
		self.__text = text
		self.__size = len(text)
		self.position = at
		self.furthest = at
		self.__expected = set()

	@property
	def text(self) -> str: return self.__text

	def remaining(self) -> str:
		return self.__text[self.position:]

	def at_end(self) -> bool:
		return self.position >= self.__size

	def peek(self, offset:int=0) -> str:
		""" The character `offset` places ahead, or the empty string past the end. """
		index = self.position + offset
		return self.__text[index] if index < self.__size else ''

	def mark(self) -> int:
		return self.position

	def reset(self, mark:int):
		""" Put the cursor back where it was when `mark` was taken. """
		self.position = mark

	def advance_to(self, position:int):
		assert self.position <= position <= self.__size
		self.position = position

	def take_until(self, position:int) -> str:
		""" Consume up to (not including) `position` and return the consumed text. """
		left = self.position
		self.advance_to(position)
		return self.__text[left:position]

	def find(self, ch:str) -> int:
		""" Offset of the next `ch` at or after the cursor, or -1. """
		return self.__text.find(ch, self.position)

	def trim_leading_whitespace(self):
		text, size, position = self.__text, self.__size, self.position
		while position < size and text[position] in WHITESPACE: position += 1
		self.position = position

	def match(self, token:str) -> bool:
		return match(self.__text[self.position:self.position+len(token)], token)

	def try_consume(self, token:str, trim:bool=True) -> bool:
		"""
		Skip leading whitespace (unless `trim` is false) and then the `token`.
		If the token is not there, the cursor does not move at all, whitespace included.
		"""
		mark = self.position
		if trim: self.trim_leading_whitespace()
		if self.match(token):
			self.position += len(token)
			return True
		self.expect(repr(token))
		self.position = mark
		return False

	def expect(self, what:str):
		"""
		Note that something called `what` was wanted at the current position.
		Only the furthest position is remembered, along with everything wanted there.
		Always returns None, so a production can say `return cursor.expect(...)`.
		"""
		if self.position > self.furthest:
			self.furthest = self.position
			self.__expected = {what}
		elif self.position == self.furthest:
			self.__expected.add(what)

	def expected(self) -> tuple:
		return tuple(sorted(self.__expected))
