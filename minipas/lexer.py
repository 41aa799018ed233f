"""Token source for the minipas language.

Lexing is delegated to a Lark basic lexer built from the terminal grammar
below. Lark only tokenizes here; the grammar rules themselves are handled
by the recursive-descent parser in :mod:`minipas.parser`, which pulls
tokens one at a time through :class:`TokenSource`.

Keywords are declared as string terminals. Lark folds them into ``IDENT``
and re-types an identifier whose whole text equals a keyword, so
``program`` is a keyword while ``programs`` is an identifier. Any
character no other terminal accepts becomes an ``UNKNOWN`` token instead
of a lexer failure, leaving the parser to report it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List

from lark import Lark


class TokenKind(Enum):
    # keywords
    PROGRAM = auto()
    VAR = auto()
    BEGIN = auto()
    END = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    WHILE = auto()
    DO = auto()
    READ = auto()
    WRITE = auto()
    NOT = auto()
    OR = auto()
    AND = auto()
    MOD = auto()
    FOR = auto()
    TO = auto()
    DOWNTO = auto()
    LET = auto()
    BREAK = auto()
    CONTINUE = auto()
    # type names
    INTEGER = auto()
    REAL = auto()
    # punctuation
    SEMICOLON = auto()
    COLON = auto()
    OPENPAREN = auto()
    CLOSEPAREN = auto()
    # operators
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    ASSIGN = auto()
    EQUALTO = auto()
    LESSTHAN = auto()
    GREATERTHAN = auto()
    NOTEQUALTO = auto()
    # classified lexemes
    IDENT = auto()
    INTLIT = auto()
    FLOATLIT = auto()
    STRINGLIT = auto()
    EOF = auto()
    UNKNOWN = auto()


MINIPAS_TOKENS = r"""
    start: _token*

    _token: PROGRAM | VAR | BEGIN | END | IF | THEN | ELSE | WHILE | DO
          | READ | WRITE | NOT | OR | AND | MOD | FOR | TO | DOWNTO | LET
          | BREAK | CONTINUE | INTEGER | REAL
          | SEMICOLON | COLON | OPENPAREN | CLOSEPAREN
          | PLUS | MINUS | MULTIPLY | DIVIDE | ASSIGN
          | EQUALTO | LESSTHAN | GREATERTHAN | NOTEQUALTO
          | IDENT | INTLIT | FLOATLIT | STRINGLIT | UNKNOWN

    PROGRAM: "program"
    VAR: "var"
    BEGIN: "begin"
    END: "end"
    IF: "if"
    THEN: "then"
    ELSE: "else"
    WHILE: "while"
    DO: "do"
    READ: "read"
    WRITE: "write"
    NOT: "not"
    OR: "or"
    AND: "and"
    MOD: "mod"
    FOR: "for"
    TO: "to"
    DOWNTO: "downto"
    LET: "let"
    BREAK: "break"
    CONTINUE: "continue"
    INTEGER: "INTEGER"
    REAL: "REAL"

    SEMICOLON: ";"
    COLON: ":"
    OPENPAREN: "("
    CLOSEPAREN: ")"
    PLUS: "+"
    MINUS: "-"
    MULTIPLY: "*"
    DIVIDE: "/"
    ASSIGN: ":="
    EQUALTO: "="
    LESSTHAN: "<"
    GREATERTHAN: ">"
    NOTEQUALTO: "<>"

    IDENT: /[A-Za-z_][A-Za-z0-9_]*/
    FLOATLIT.2: /\d+\.\d+([eE][+-]?\d+)?/
    INTLIT: /\d+/
    STRINGLIT: /"[^"\n]*"|'[^'\n]*'/
    UNKNOWN.-1: /./

    COMMENT: /\{[^}]*\}/
    %ignore COMMENT
    %import common.WS
    %ignore WS
"""


MINIPAS_LEXER = Lark(
    MINIPAS_TOKENS,
    parser='lalr',
    lexer='basic',
)


@dataclass
class Token:
    kind: TokenKind
    lexeme: str
    line: int = 0
    column: int = 0


class TokenSource:
    """Yields the tokens of a source text one at a time.

    After the input is exhausted every call to :meth:`next` returns an
    ``EOF`` token whose lexeme is ``"EOF"``.
    """
    def __init__(self, text: str):
        self._stream = MINIPAS_LEXER.lex(text)
        self._exhausted = False
        self._line = 1
        self._column = 1

    def next(self) -> Token:
        if not self._exhausted:
            raw = next(self._stream, None)
            if raw is not None:
                self._line = raw.end_line or raw.line
                self._column = raw.end_column or raw.column
                return Token(TokenKind[raw.type], str(raw), raw.line, raw.column)
            self._exhausted = True
        return Token(TokenKind.EOF, 'EOF', self._line, self._column)

    def __iter__(self) -> Iterator[Token]:
        """Iterate up to and including the first ``EOF`` token."""
        while True:
            token = self.next()
            yield token
            if token.kind is TokenKind.EOF:
                return


def tokenize(source: str) -> List[Token]:
    """Return every token of ``source``, ending with ``EOF``."""
    return list(TokenSource(source))
