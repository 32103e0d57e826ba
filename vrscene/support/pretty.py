""" Bits and bobs in support of looking at parsed scenes: text that parses back to the same document. """
import math

from ..scene import Vrscene, Plugin, Include, Comment
from .treelang import StrictPass

INDENT = '\t'
OVERFLOW = '1e999'

class ValuePrinter(StrictPass):
	""" One method per kind of value. """
	def Integer(self, term): return str(term.value)
	def Float(self, term):
		value = term.value
		# Infinities come from literals too big for a double; print one of those.
		if math.isinf(value): return OVERFLOW if value > 0 else '-'+OVERFLOW
		return repr(value) # repr always has a point or an exponent.
	def QuotedString(self, term): return '"%s"'%term.text
	def Identifier(self, term): return term.name
	def AttributeSelector(self, term): return '%s::%s'%(term.plugin, term.attribute)
	def FunctionCall(self, term):
		return '%s(%s)'%(term.name, ', '.join(self(a) for a in term.arguments))

value_text = ValuePrinter()

def include_text(include:Include) -> str:
	return '#include "%s"'%include.path

def comment_text(comment:Comment) -> str:
	return comment.text

def plugin_text(plugin:Plugin) -> str:
	lines = ['%s %s {'%(plugin.type, plugin.name)]
	for a in plugin.attributes:
		lines.append('%s%s=%s;'%(INDENT, a.name, value_text(a.value)))
	lines.append('}')
	return '\n'.join(lines)

def as_text(scene:Vrscene) -> str:
	"""
	Includes come first, then comments, then plugins, because that is all the
	document remembers: the interleaving is lost, and so are comments inside
	plugin blocks.
	"""
	parts = [include_text(i) for i in scene.includes]
	parts.extend(comment_text(c) for c in scene.comments)
	parts.extend(plugin_text(p) for p in scene.plugins)
	return ''.join(p+'\n' for p in parts)

def print_scene(scene:Vrscene, file=None):
	print(as_text(scene), end='', file=file)
