"""
Small immutable terms, and passes over them.

A term is somewhere between a dataclass and a namedtuple: a fixed list of
fields in `__slots__`, positional construction, iteration over the fields,
and equality which also takes the class into account. That last part is
the point: an Integer holding 1 is not a Float holding 1.0.

Passes are callable. They dispatch on the class name of the term, so a pass
over the scene model has methods called `Integer`, `FunctionCall` and so on.
"""

import abc

class BaseTerm:
	"""
	Subclasses list their fields in `__slots__`, and that is all they need to do.
	Optional `_checks_` may map field names to predicates, which are consulted
	(in debug mode only) at construction time.
	"""
	__slots__ = ()
	_checks_ = {}
	def __setattr__(self, key, value): raise TypeError("%s is immutable"%type(self).__name__)
	def __delattr__(self, item): raise TypeError("%s is immutable"%type(self).__name__)
	def __init__(self, *args):
		if __debug__ and len(args) != len(self.__slots__):
			raise TypeError("%s got %d arguments; wants %d"%(type(self).__name__, len(args), len(self.__slots__)))
		for f,v in zip(self.__slots__, args):
			check = self._checks_.get(f)
			if __debug__ and check is not None and not check(v):
				raise TypeError("%s: Field %r failed well-formed-ness check with value %r"%(type(self).__name__, f, v))
			object.__setattr__(self, f, v)
	def __iter__(self):
		return (getattr(self, s) for s in self.__slots__)
	def __eq__(self, other):
		return type(self) is type(other) and tuple(self) == tuple(other)
	def __hash__(self): return hash((type(self).__name__, *self))
	def __repr__(self):
		return "%s(%s)"%(type(self).__name__, ", ".join(map(repr, self)))
	def __reduce__(self): return type(self), tuple(self)


class TreePass(abc.ABC):
	"""
	Passes implement a simple form of double-dispatch by calling a method named
	for the type of the first argument, with the term again as first argument.
	All remaining arguments are passed through unexamined.
	The per-symbol methods must make explicit recursive calls
	if you intend for processing to continue.
	"""
	@abc.abstractmethod
	def _unhandled_(self, term, *args, **kwargs):
		""" Deal with unknown symbols here. """
		raise NotImplementedError(type(self))

	def __call__(self, term, *args, **kwargs):
		method = getattr(self, term.__class__.__name__, self._unhandled_)
		return method(term, *args, **kwargs)


class StrictPass(TreePass):
	def _unhandled_(self, term, *args, **kwargs):
		""" Strict passes must implement something for every symbol. """
		raise TypeError("%s neglects to handle %s"%(type(self).__name__, type(term).__name__))
