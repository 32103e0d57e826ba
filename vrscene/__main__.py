"""
Read a .vrscene file and parse it, reporting how it went.

The whole file is read into memory first, so with --time the figure is
for parsing alone.
"""

import sys, argparse, time

from vrscene.parsing.document import parse_vrscene
from vrscene.parsing.interface import ParseFailed
from vrscene.support.failureprone import SourceText
from vrscene.support import pretty

VERBOSE = False

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m vrscene', description=__doc__,)
	parser.add_argument('source_path', help='path to input file')
	parser.add_argument('--lenient-braces', action='store_true', dest='lenient_braces', help="Skip any text between a plugin's name and its opening brace, as older readers did.")
	parser.add_argument('--time', action='store_true', help='Print SUCCESS and the parse time in microseconds.')
	parser.add_argument('--dump', action='store_true', help='Print the parsed document on STDOUT.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk about what the document contains.")
	return parser.parse_args(argv)

def main(args) -> int:
	global VERBOSE
	if args.verbose: VERBOSE = True
	try:
		with open(args.source_path, encoding='utf-8', errors='surrogateescape') as fh: text = fh.read()
	except OSError as e:
		print('Cannot read %s: %s'%(args.source_path, e.strerror), file=sys.stderr)
		return 1
	start = time.perf_counter()
	try:
		scene = parse_vrscene(text, lenient_braces=args.lenient_braces)
	except ParseFailed as e:
		SourceText(text, filename=args.source_path).complain(e.slice(), e.message())
		return 1
	elapsed = time.perf_counter() - start
	if args.time: print('SUCCESS', int(elapsed * 1_000_000))
	if VERBOSE:
		print('%d includes, %d comments, %d plugins'%(len(scene.includes), len(scene.comments), len(scene.plugins)), file=sys.stderr)
	if args.dump: pretty.print_scene(scene)
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
