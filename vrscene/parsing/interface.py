"""
Parsing Interface Definitions

Individual productions never raise: they return None and leave the cursor alone,
because "this is not my kind of thing" and "this is my kind of thing, but broken"
look the same from inside a recursive-descent parser. Only the document driver
decides that nothing more can be done, and it raises ParseFailed.
"""

class ParseFailed(ValueError):
	"""
	Raised when a document does not parse. No partial document is available.

	position: the furthest offset any production reached before giving up.
		That is usually the most useful place to point at.
	expected: names of the constructs which would have been acceptable there.
	"""
	def __init__(self, position:int, expected:tuple=()):
		super().__init__(position, expected)
		self.position, self.expected = position, tuple(expected)

	def __str__(self):
		return self.message()

	def message(self) -> str:
		if self.expected:
			return "expected %s"%(" or ".join(self.expected))
		return "could not parse"

	def slice(self) -> slice:
		""" The spot to point at, in the form a SourceText complaint wants. """
		return slice(self.position, self.position+1)

	def describe(self, source) -> str:
		"""
		Render a complaint with line, column, and an illustration.
		`source` is a support.failureprone.SourceText wrapping the text that failed.
		"""
		return source.complaint(self.slice(), self.message())
