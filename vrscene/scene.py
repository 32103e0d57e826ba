"""
The in-memory form of a parsed vrscene document.

Everything here is immutable once built. All the text is copied out of the
source buffer, so nothing depends on the buffer staying around; the document
keeps the source anyway, because error displays and inspection want it.

Values form a closed family: Integer, Float, QuotedString, Identifier,
AttributeSelector and FunctionCall. Only FunctionCall is recursive.
Equality between terms respects their kind, so Integer(1) != Float(1.0)
and Identifier('x') != QuotedString('x').
"""
from typing import Optional, Union

from .support.treelang import BaseTerm

class Integer(BaseTerm):
	__slots__ = ('value',)
	_checks_ = {'value': lambda x: type(x) is int}

class Float(BaseTerm):
	__slots__ = ('value',)
	_checks_ = {'value': lambda x: type(x) is float}

class QuotedString(BaseTerm):
	""" Raw text from between the quotes. There are no escape sequences. """
	__slots__ = ('text',)

class Identifier(BaseTerm):
	__slots__ = ('name',)

class AttributeSelector(BaseTerm):
	"""
	Written as `plugin::attribute`.
	The parser never checks that either side names anything real.
	"""
	__slots__ = ('plugin', 'attribute')

class FunctionCall(BaseTerm):
	__slots__ = ('name', 'arguments')
	_checks_ = {'arguments': lambda xs: type(xs) is tuple and all(isinstance(x, VALUE_TYPES) for x in xs)}

Value = Union[Integer, Float, QuotedString, Identifier, AttributeSelector, FunctionCall]
VALUE_TYPES = (Integer, Float, QuotedString, Identifier, AttributeSelector, FunctionCall)

class Attribute(BaseTerm):
	__slots__ = ('name', 'value')
	_checks_ = {'value': lambda x: isinstance(x, VALUE_TYPES)}

class Plugin(BaseTerm):
	"""
	Attributes stay in the order written, and repeats are kept as separate entries.
	If you want to look things up by name, `lookup()` builds a dictionary in which
	the last assignment to a name wins.
	"""
	__slots__ = ('type', 'name', 'attributes')
	_checks_ = {'attributes': lambda xs: type(xs) is tuple and all(isinstance(x, Attribute) for x in xs)}

	def lookup(self) -> dict:
		return {a.name: a.value for a in self.attributes}

	def get(self, name:str, default=None) -> Optional[Value]:
		return self.lookup().get(name, default)

class Include(BaseTerm):
	__slots__ = ('path',)

class Comment(BaseTerm):
	""" The whole comment, starting with the `//`, less any trailing whitespace. """
	__slots__ = ('text',)

class Vrscene:
	"""
	A complete document. Items are grouped by kind, each group in source order.
	Two documents compare equal when their items do; the source text is not compared.
	"""
	__slots__ = ('includes', 'comments', 'plugins', 'source')

	def __init__(self, includes=(), comments=(), plugins=(), source:str=''):
		object.__setattr__(self, 'includes', tuple(includes))
		object.__setattr__(self, 'comments', tuple(comments))
		object.__setattr__(self, 'plugins', tuple(plugins))
		object.__setattr__(self, 'source', source)

	def __setattr__(self, key, value): raise TypeError("Vrscene is immutable")

	def __eq__(self, other):
		if not isinstance(other, Vrscene): return NotImplemented
		return (self.includes, self.comments, self.plugins) == (other.includes, other.comments, other.plugins)

	def __hash__(self): return hash((self.includes, self.comments, self.plugins))

	def __repr__(self):
		return '<Vrscene: %d includes, %d comments, %d plugins>'%(len(self.includes), len(self.comments), len(self.plugins))

	def plugin(self, name:str) -> Optional[Plugin]:
		""" The first plugin with the given instance name, if any. """
		for p in self.plugins:
			if p.name == name: return p

	def plugins_of_type(self, type_name:str) -> list:
		return [p for p in self.plugins if p.type == type_name]
