""" Comments, includes, strings, identifiers and numbers. """
import unittest
from vrscene.scanning.engine import Cursor
from vrscene.parsing import leaves
from vrscene.scene import Comment, Include, Integer, Float


class TestComment(unittest.TestCase):
	def test_stops_at_newline(self):
		c = Cursor('  // hello  \nFoo')
		self.assertEqual(Comment('// hello'), leaves.parse_comment(c))
		self.assertEqual(12, c.position)
		self.assertEqual('\n', c.peek())

	def test_end_of_input_ends_comment(self):
		c = Cursor('// the end')
		self.assertEqual(Comment('// the end'), leaves.parse_comment(c))
		self.assertTrue(c.at_end())

	def test_dos_line_ending_is_trimmed(self):
		self.assertEqual(Comment('// dos'), leaves.parse_comment(Cursor('// dos\r\nx')))

	def test_not_a_comment(self):
		for text in ['  / x', 'Foo // bar', '']:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertIsNone(leaves.parse_comment(c))
				self.assertEqual(0, c.position)


class TestInclude(unittest.TestCase):
	def test_include(self):
		c = Cursor('#include "a/b.vrscene"')
		self.assertEqual(Include('a/b.vrscene'), leaves.parse_include(c))
		self.assertTrue(c.at_end())

	def test_whitespace_around(self):
		c = Cursor('  #include   "x.vrscene"  ')
		self.assertEqual(Include('x.vrscene'), leaves.parse_include(c))
		self.assertEqual(24, c.position)

	def test_broken_include_restores_cursor(self):
		for text in ['#include nope', '#include "unterminated', '#include', '#inc "x"']:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertIsNone(leaves.parse_include(c))
				self.assertEqual(0, c.position)


class TestQuotedString(unittest.TestCase):
	def test_plain(self):
		c = Cursor('"abc" tail')
		self.assertEqual('abc', leaves.parse_quoted_string(c))
		self.assertEqual(5, c.position)

	def test_empty_string(self):
		self.assertEqual('', leaves.parse_quoted_string(Cursor('""')))

	def test_no_escapes(self):
		c = Cursor(r'"a\"b"')
		self.assertEqual('a\\', leaves.parse_quoted_string(c))
		self.assertEqual(4, c.position)

	def test_failures(self):
		for text in ['"open', 'x"', '', "'single'"]:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertIsNone(leaves.parse_quoted_string(c))
				self.assertEqual(0, c.position)


class TestIdentifier(unittest.TestCase):
	def test_identifiers(self):
		for text, expect, position in [
			('  Node01=3', 'Node01', 8),
			('_x.y:z', '_x.y', 4),
			('élan;', 'élan', 4),
			('abc', 'abc', 3),
			('a"b c', 'a"b', 3),
			('x(1)', 'x', 1),
			('a\tb', 'a', 1),
		]:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertEqual(expect, leaves.parse_identifier(c))
				self.assertEqual(position, c.position)

	def test_not_identifiers(self):
		for text in ['9abc', '', '   ', '::x', '"q"', '-x', '\u00b5x', '\u00aax']:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertIsNone(leaves.parse_identifier(c))
				self.assertEqual(0, c.position)

	def test_no_trim(self):
		c = Cursor('  x')
		self.assertIsNone(leaves.parse_identifier(c, trim=False))
		self.assertEqual(0, c.position)


class TestNumber(unittest.TestCase):
	def test_numbers(self):
		for text, expect, position in [
			('123', Integer(123), 3),
			('123.0', Float(123.0), 5),
			('1.5e3', Float(1500.0), 5),
			('-7', Integer(-7), 2),
			('+7', Integer(7), 2),
			('.5', Float(0.5), 2),
			('1e3', Float(1000.0), 3),
			('2E-2', Float(0.02), 4),
			('123.', Float(123.0), 4),
			('12abc', Integer(12), 2),
			('1e', Integer(1), 1),
			('  42;', Integer(42), 4),
			('9223372036854775807', Integer(2**63-1), 19),
			('-9223372036854775808', Integer(-2**63), 20),
			('9223372036854775808', Float(9223372036854775808.0), 19),
		]:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertEqual(expect, leaves.parse_number(c))
				self.assertEqual(position, c.position)

	def test_tie_goes_to_integer(self):
		value = leaves.parse_number(Cursor('123'))
		self.assertIs(Integer, type(value))
		self.assertNotEqual(Float(123.0), value)

	def test_not_numbers(self):
		for text in ['abc', '-', '.', '', ' -x', 'e5', '"1"']:
			with self.subTest(text=text):
				c = Cursor(text)
				self.assertIsNone(leaves.parse_number(c))
				self.assertEqual(0, c.position)


if __name__ == '__main__':
	unittest.main()
