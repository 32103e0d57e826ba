"""
This module is all about easing over the process to display where things go wrong.

Parsing deals in plain integer offsets; people deal in lines and columns.
The SourceText converts one into the other, slices out the offending line, and
builds a small picture with a caret under the interesting spot. The `complain`
method prints such a picture to STDERR.

Line breaks: scene files come out of all kinds of exporters, so by default the
Unix, old-Apple and DOS conventions are all treated as line-breaks. You can
supply a mode argument to insist on just one of them; the options are the keys
of the LINEBREAK_MODE dictionary.
"""

import bisect, re, sys

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unix': re.compile(r'\n'),
	'apple': re.compile(r'\r'),
	'dos': re.compile(r'\r\n'),
}

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. """
	single_line = single_line.rstrip('\r\n')
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for the text of a scene file: participates in half-respectable error-display with context. """
	def __init__(self, content:str, line_breaks='normal', filename:str=None, first_line=1):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
		return self.__bounds

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Respects self.first_line. """
		bounds = self.__make_bounds()
		row = bisect.bisect_right(bounds, index, hi=len(bounds) - 1) - 1
		col = index - bounds[row]
		return row+self.first_line, col

	def line_of_text(self, row):
		""" Argument respects self.first_line. """
		bounds = self.__make_bounds()
		r = min(max(0, row - self.first_line), len(bounds) - 2)
		return self.content[bounds[r]:bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str):
		left, right = a_slice.start, a_slice.stop
		row, col = self.find_row_col(left)
		reference = self._format_message(row, col, message)
		line = self.line_of_text(row)
		illustrated = illustration(line, col, right - left, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)

	def complain(self, a_slice:slice, message:str):
		print(self.complaint(a_slice, message), file=sys.stderr)
