import unittest
import contextlib, io, os, tempfile
from vrscene import __main__ as cli


class TestCommandLine(unittest.TestCase):
	def setUp(self) -> None:
		self.folder = tempfile.TemporaryDirectory()

	def tearDown(self) -> None:
		self.folder.cleanup()
		cli.VERBOSE = False

	def write(self, text):
		path = os.path.join(self.folder.name, 'scene.vrscene')
		with open(path, 'w', encoding='utf-8') as fh: fh.write(text)
		return path

	def run_cli(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			status = cli.main(cli.parse_arguments(list(argv)))
		return status, out.getvalue(), err.getvalue()

	def test_success_with_timing(self):
		status, out, err = self.run_cli(self.write('// hi\nNode n { x=1; }\n'), '--time')
		self.assertEqual(0, status)
		word, micros = out.split()
		self.assertEqual('SUCCESS', word)
		self.assertGreaterEqual(int(micros), 0)
		self.assertEqual('', err)

	def test_dump(self):
		status, out, err = self.run_cli(self.write('Node n { x = 1 ; }'), '--dump')
		self.assertEqual(0, status)
		self.assertEqual('Node n {\n\tx=1;\n}\n', out)

	def test_verbose(self):
		status, out, err = self.run_cli(self.write('#include "a"\nA a {}\nB b {}'), '-v')
		self.assertEqual(0, status)
		self.assertTrue(cli.VERBOSE)
		self.assertEqual('1 includes, 0 comments, 2 plugins\n', err)

	def test_parse_failure(self):
		path = self.write('Node n {\n\tx=1\n}\n')
		status, out, err = self.run_cli(path)
		self.assertEqual(1, status)
		self.assertEqual('', out)
		self.assertIn(path+": line 3, column 1: expected ';'", err)

	def test_lenient_braces(self):
		path = self.write('Node n junk { }')
		self.assertEqual(1, self.run_cli(path)[0])
		self.assertEqual(0, self.run_cli(path, '--lenient-braces')[0])

	def test_missing_file(self):
		status, out, err = self.run_cli(os.path.join(self.folder.name, 'nope.vrscene'))
		self.assertEqual(1, status)
		self.assertIn('Cannot read', err)


if __name__ == '__main__':
	unittest.main()
