"""Parser for the minipas language.

A predictive recursive-descent parser with one token of look-ahead. Each
grammar rule has its own method, and every method follows the same steps:
check that the current token is in the rule's FIRST set, consume tokens
and call sub-rules in the order of the production, then build and return
the AST node for the rule.

    program    := "program" IDENT ";" block EOF
    block      := ( "var" ( IDENT ":" type ";" )+ )? compound
    compound   := "begin" statement ( ";" statement )* "end"
    statement  := assignment | compound | if | while | read | write
    assignment := IDENT ":=" expression
    if         := "if" expression "then" statement ( "else" statement )?
    while      := "while" expression ( "do" )? statement
    read       := "read" "(" IDENT ")"
    write      := "write" "(" ( IDENT | STRINGLIT ) ")"
    expression := simple_expr ( relop simple_expr )?
    simple_expr:= term ( ( "+" | "-" | "or" ) term )*
    term       := factor ( ( "*" | "/" | "mod" ) factor )*
    factor     := IDENT | INTLIT | FLOATLIT | "(" expression ")"
                | "not" factor | "-" factor
    relop      := "=" | "<" | ">" | "<>"

Variables declared in a ``var`` section are entered into the parser's
symbol table as they are read. Any error raises :class:`ParseError`
immediately; there is no recovery.
"""

from __future__ import annotations

import sys
from typing import FrozenSet, List, Optional, TextIO

from .ast import (
    Program, Block, Declaration, Compound, Assignment, IfStatement,
    WhileStatement, ReadStatement, WriteStatement, Expression,
    SimpleExpression, Term, IntLiteral, FloatLiteral, Identifier,
    NestedExpression, NotFactor, MinusFactor, Statement, Factor,
)
from .errors import ParseError, RedeclarationError
from .lexer import Token, TokenKind, TokenSource
from .symbols import SymbolTable

K = TokenKind

FIRST_PROGRAM: FrozenSet[TokenKind] = frozenset({K.PROGRAM})
FIRST_BLOCK: FrozenSet[TokenKind] = frozenset({K.VAR, K.BEGIN})
FIRST_COMPOUND: FrozenSet[TokenKind] = frozenset({K.BEGIN})
FIRST_STATEMENT: FrozenSet[TokenKind] = frozenset({K.IDENT, K.BEGIN, K.IF, K.WHILE, K.READ, K.WRITE})
FIRST_FACTOR: FrozenSet[TokenKind] = frozenset({K.IDENT, K.INTLIT, K.FLOATLIT, K.OPENPAREN, K.NOT, K.MINUS})
# expression, simple_expr and term all start with a factor
FIRST_EXPRESSION = FIRST_SIMPLE_EXPRESSION = FIRST_TERM = FIRST_FACTOR

TYPE_NAMES: FrozenSet[TokenKind] = frozenset({K.INTEGER, K.REAL})
RELOPS: FrozenSet[TokenKind] = frozenset({K.EQUALTO, K.LESSTHAN, K.GREATERTHAN, K.NOTEQUALTO})
ADDOPS: FrozenSet[TokenKind] = frozenset({K.PLUS, K.MINUS, K.OR})
MULOPS: FrozenSet[TokenKind] = frozenset({K.MULTIPLY, K.DIVIDE, K.MOD})


class Parser:
    def __init__(self, tokens: TokenSource, symbols: Optional[SymbolTable] = None,
                 trace: bool = False, out: Optional[TextIO] = None):
        self.tokens = tokens
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.trace = trace
        self.out = out if out is not None else sys.stdout
        self.level = -1
        self.current: Optional[Token] = None

    # Token handling

    def advance(self) -> Token:
        """Read the next token into ``current`` and return it."""
        self.current = self.tokens.next()
        if self.trace:
            self.say(f"Next token is: TOK_{self.current.kind.name}, Next lexeme is: {self.current.lexeme}")
        return self.current

    def match(self, *kinds: TokenKind) -> bool:
        return self.current is not None and self.current.kind in kinds

    def consume(self, kind: TokenKind) -> Token:
        """Check the current token's kind, then read past it."""
        if not self.match(kind):
            self.error(kind.name)
        return self.take()

    def take(self) -> Token:
        """Read past the current token whatever its kind."""
        token = self.current
        if self.trace:
            self.say(f"---> FOUND {token.lexeme}")
        self.advance()
        return token

    def expect_first(self, first: FrozenSet[TokenKind], rule: str) -> None:
        if self.current is None or self.current.kind not in first:
            self.error(f"start of <{rule}>")

    def error(self, expected: Optional[str] = None):
        raise ParseError(self.current, expected)

    # Trace output

    def say(self, msg: str) -> None:
        print('  ' * max(self.level, 0) + msg, file=self.out)

    def enter(self, rule: str) -> None:
        if self.trace:
            self.say(f"Enter <{rule}>")
        self.level += 1

    def leave(self, rule: str) -> None:
        self.level -= 1
        if self.trace:
            self.say(f"Exit <{rule}>")

    # Grammar rules

    def parse_program(self) -> Program:
        if self.current is None:
            self.advance()  # prime the look-ahead
        self.expect_first(FIRST_PROGRAM, 'program')
        self.enter('program')
        self.take()
        name = self.consume(K.IDENT).lexeme
        self.consume(K.SEMICOLON)
        block = self.parse_block()
        if not self.match(K.EOF):
            self.error('end of input')
        if self.trace:
            self.say(f"---> FOUND {self.current.lexeme}")
        node = Program(self.level, name, block)
        self.leave('program')
        return node

    def parse_block(self) -> Block:
        self.expect_first(FIRST_BLOCK, 'block')
        self.enter('block')
        declarations: List[Declaration] = []
        if self.match(K.VAR):
            self.take()
            declarations.append(self.parse_declaration())
            while self.match(K.IDENT):
                declarations.append(self.parse_declaration())
        compound = self.parse_compound()
        node = Block(self.level, compound, declarations)
        self.leave('block')
        return node

    def parse_declaration(self) -> Declaration:
        # IDENT ":" type ";"
        if not self.match(K.IDENT):
            self.error('IDENT')
        if self.current.lexeme in self.symbols:
            raise RedeclarationError(self.current)
        name = self.take().lexeme
        self.consume(K.COLON)
        if not self.match(*TYPE_NAMES):
            self.error('INTEGER or REAL')
        type_name = self.take().lexeme
        self.symbols.declare(name)
        self.consume(K.SEMICOLON)
        return Declaration(self.level, name, type_name)

    def parse_compound(self) -> Compound:
        self.expect_first(FIRST_COMPOUND, 'compound')
        self.enter('compound')
        self.take()
        statements: List[Statement] = [self.parse_statement()]
        while self.match(K.SEMICOLON):
            self.take()
            statements.append(self.parse_statement())
        self.consume(K.END)
        node = Compound(self.level, statements)
        self.leave('compound')
        return node

    def parse_statement(self) -> Statement:
        self.expect_first(FIRST_STATEMENT, 'statement')
        self.enter('statement')
        kind = self.current.kind
        if kind is K.IDENT:
            node = self.parse_assignment()
        elif kind is K.BEGIN:
            node = self.parse_compound()
        elif kind is K.IF:
            node = self.parse_if()
        elif kind is K.WHILE:
            node = self.parse_while()
        elif kind is K.READ:
            node = self.parse_read()
        else:
            node = self.parse_write()
        self.leave('statement')
        return node

    def parse_assignment(self) -> Assignment:
        if not self.match(K.IDENT):
            self.error('IDENT')
        self.enter('assignment')
        name = self.take().lexeme
        self.consume(K.ASSIGN)
        expression = self.parse_expression()
        node = Assignment(self.level, name, expression)
        self.leave('assignment')
        return node

    def parse_if(self) -> IfStatement:
        if not self.match(K.IF):
            self.error('IF')
        self.enter('if')
        self.take()
        condition = self.parse_expression()
        self.consume(K.THEN)
        then_statement = self.parse_statement()
        else_statement = None
        if self.match(K.ELSE):
            self.take()
            else_statement = self.parse_statement()
        node = IfStatement(self.level, condition, then_statement, else_statement)
        self.leave('if')
        return node

    def parse_while(self) -> WhileStatement:
        if not self.match(K.WHILE):
            self.error('WHILE')
        self.enter('while')
        self.take()
        condition = self.parse_expression()
        if self.match(K.DO):
            self.take()
        body = self.parse_statement()
        node = WhileStatement(self.level, condition, body)
        self.leave('while')
        return node

    def parse_read(self) -> ReadStatement:
        if not self.match(K.READ):
            self.error('READ')
        self.enter('read')
        self.take()
        self.consume(K.OPENPAREN)
        name = self.consume(K.IDENT).lexeme
        self.consume(K.CLOSEPAREN)
        node = ReadStatement(self.level, name)
        self.leave('read')
        return node

    def parse_write(self) -> WriteStatement:
        if not self.match(K.WRITE):
            self.error('WRITE')
        self.enter('write')
        self.take()
        self.consume(K.OPENPAREN)
        if self.match(K.IDENT):
            node = WriteStatement(self.level, name=self.take().lexeme)
        elif self.match(K.STRINGLIT):
            node = WriteStatement(self.level, text=self.take().lexeme)
        else:
            self.error('IDENT or STRINGLIT')
        self.consume(K.CLOSEPAREN)
        self.leave('write')
        return node

    def parse_expression(self) -> Expression:
        self.expect_first(FIRST_EXPRESSION, 'expression')
        self.enter('expression')
        first = self.parse_simple_expression()
        relop = None
        second = None
        if self.match(*RELOPS):
            relop = self.take().lexeme
            second = self.parse_simple_expression()
        node = Expression(self.level, first, relop, second)
        self.leave('expression')
        return node

    def parse_simple_expression(self) -> SimpleExpression:
        self.expect_first(FIRST_SIMPLE_EXPRESSION, 'simple_expression')
        self.enter('simple_expression')
        first = self.parse_term()
        rest = []
        while self.match(*ADDOPS):
            op = self.take().lexeme
            rest.append((op, self.parse_term()))
        node = SimpleExpression(self.level, first, rest)
        self.leave('simple_expression')
        return node

    def parse_term(self) -> Term:
        self.expect_first(FIRST_TERM, 'term')
        self.enter('term')
        first = self.parse_factor()
        rest = []
        while self.match(*MULOPS):
            op = self.take().lexeme
            rest.append((op, self.parse_factor()))
        node = Term(self.level, first, rest)
        self.leave('term')
        return node

    def parse_factor(self) -> Factor:
        self.expect_first(FIRST_FACTOR, 'factor')
        self.enter('factor')
        kind = self.current.kind
        if kind is K.IDENT:
            node = Identifier(self.level, self.take().lexeme)
        elif kind is K.INTLIT:
            node = IntLiteral(self.level, float(self.take().lexeme))
        elif kind is K.FLOATLIT:
            node = FloatLiteral(self.level, float(self.take().lexeme))
        elif kind is K.OPENPAREN:
            self.take()
            node = NestedExpression(self.level, self.parse_expression())
            self.consume(K.CLOSEPAREN)
        elif kind is K.NOT:
            self.take()
            node = NotFactor(self.level, self.parse_factor())
        else:
            self.take()
            node = MinusFactor(self.level, self.parse_factor())
        self.leave('factor')
        return node


def parse_program(source: str, symbols: Optional[SymbolTable] = None,
                  trace: bool = False, out: Optional[TextIO] = None) -> Program:
    """Parse minipas source code into a Program AST.

    Declared variables are entered into ``symbols`` when given. Any syntax
    or redeclaration error raises :class:`ParseError`.
    """
    parser = Parser(TokenSource(source), symbols, trace=trace, out=out)
    return parser.parse_program()
