"""Command-line interface for notefd."""


import argparse
from importlib.metadata import version, PackageNotFoundError
import logging
import sys
from notefd.api import Notefd
from notefd.conf import ConfError
from notefd.report import render_json, render_table, render_text


def _version() -> str:
    try:
        return version('notefd')
    except PackageNotFoundError:
        return 'N/A'


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='notefd',
        description='Find notes. Searches DIR recursively for files with "note" as one of the dot-separated parts '
                    'of their name (like "todo.note.md"), and prints those whose header has all of the given tags.')
    parser.add_argument('-t', '--tag', action='append', default=[], metavar='TAG', dest='tags',
                        help='If multiple tags are specified, they are chained together by "and". '
                             'Tags are case-insensitive.')
    formats = parser.add_mutually_exclusive_group()
    formats.add_argument('-j', '--json', action='store_true',
                         help='Output as JSON. The output is an object with a list of "matches", each having '
                              '"path", "title" and "tags", and a list of "errors", each having "path" and "message".')
    formats.add_argument('--table', action='store_true', help='Format output as a table.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging details to stderr.')
    parser.add_argument('--version', action='version', version=f'%(prog)s {_version()}')
    parser.add_argument('dir', nargs='?', default='.', help='Directory to search. Defaults to the current directory.')
    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    args = argparser().parse_args(args)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')
    try:
        nf = Notefd.for_user()
    except ConfError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    results = nf.search(args.tags, args.dir)
    if args.json:
        print(render_json(results))
    elif args.table:
        print(render_table(results), end='')
    else:
        print(render_text(results, nf.conf.report_template), end='')
    return 0
