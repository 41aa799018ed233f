"""CLI entry point for the minipas interpreter.

Usage:
    python -m minipas [-p] [-t] [-s] [-d] [-v|-vv|-vvv] [program_file]

Options:
  -p            Trace the parser: tokens read, rules entered and left
  -t            Print the parse tree before interpreting it
  -s            Print the symbol table after interpreting
  -d            Trace the teardown of the parse tree
  -v            Increase debug verbosity (can be repeated)

Without a program file the program is read from standard input. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import sys
from pathlib import Path

from .driver import Options, error_banner, run_source
from .errors import MinipasError, ParseError


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="minipas language interpreter")
    parser.add_argument('-p', dest='trace_parse', action='store_true', help='trace parsing')
    parser.add_argument('-t', dest='print_tree', action='store_true', help='print the parse tree')
    parser.add_argument('-s', dest='print_symbols', action='store_true', help='print the symbol table')
    parser.add_argument('-d', dest='trace_teardown', action='store_true', help='trace deleting the parse tree')
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('program', nargs='?', help='minipas program file to execute')
    args = parser.parse_args(argv)

    if args.program:
        program_file = Path(args.program)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            sys.exit(1)
        with open(program_file, 'r', encoding='utf-8') as f:
            source = f.read()
    else:
        source = sys.stdin.read()

    options = Options(
        trace_parse=args.trace_parse,
        print_tree=args.print_tree,
        print_symbols=args.print_symbols,
        trace_teardown=args.trace_teardown,
        debug_level=args.v,
    )
    try:
        run_source(source, options)
    except ParseError as e:
        print(error_banner(e))
        sys.exit(1)
    except MinipasError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
