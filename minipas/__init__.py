# minipas language package
# This package provides a recursive-descent parser and a tree-walking
# interpreter for the minipas language.
from .errors import MinipasError, ParseError, RedeclarationError
from .interpreter import Interpreter, run_program
from .parser import Parser, parse_program
from .symbols import SymbolTable

__all__ = [
    'run_program',
    'parse_program',
    'Parser',
    'Interpreter',
    'SymbolTable',
    'MinipasError',
    'ParseError',
    'RedeclarationError',
]
