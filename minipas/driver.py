"""End-to-end run of a minipas program.

Parsing, printing, interpreting and tearing down the tree all walk the
same tree shape. :func:`run_source` performs them in that order and
prints the section banners between them. Errors propagate to the caller;
:func:`error_banner` formats a parse error the way the CLI reports it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .ast import Program
from .errors import MinipasError
from .interpreter import Interpreter
from .parser import parse_program
from .printer import print_tree, trace_teardown
from .symbols import SymbolTable
from .values import format_number

BANNER_RULE = '==========================='


@dataclass
class Options:
    trace_parse: bool = False     # -p
    print_tree: bool = False      # -t
    print_symbols: bool = False   # -s
    trace_teardown: bool = False  # -d
    debug_level: int = 0          # -v, repeatable
    debug_file: str = 'debug.txt'


def run_source(source: str, options: Optional[Options] = None) -> Program:
    """Parse and interpret ``source``; return the tree that was run."""
    if options is None:
        options = Options()
    symbols = SymbolTable()
    root = parse_program(source, symbols, trace=options.trace_parse)

    if options.print_tree:
        print()
        print("*** Print the Tree ***")
        print_tree(root)
        print()

    print("*** Interpret the Tree ***")
    interpreter = Interpreter(symbols, debug_level=options.debug_level, debug_file=options.debug_file)
    interpreter.run(root)
    print()

    if options.print_symbols:
        print("*** Print the Symbol Table ***")
        print_symbol_table(symbols)

    if options.trace_teardown:
        print("*** Delete the Tree ***")
        trace_teardown(root)
    return root


def print_symbol_table(symbols: SymbolTable) -> None:
    for name, value in symbols.items():
        print(f"{name:>8}: {format_number(value)}")


def error_banner(err: MinipasError) -> str:
    lexeme = err.lexeme if err.lexeme is not None else err.message
    return f"\n{BANNER_RULE}\nERROR near: {lexeme}\n{BANNER_RULE}"
