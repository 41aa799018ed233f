"""Abstract Syntax Tree (AST) definitions for minipas.

Each node corresponds to a rule of the grammar and is built once by the
parser, children first. ``level`` is the nesting depth the parser was at
when it built the node; it only drives indentation in the tree display.

Statements and factors are closed families, spelled out by the
``Statement`` and ``Factor`` unions. The interpreter and the printer
dispatch over exactly these classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union


@dataclass
class Node:
    """Base class for all AST nodes."""
    level: int


@dataclass
class Program(Node):
    name: str
    block: 'Block'


@dataclass
class Declaration(Node):
    name: str
    type_name: str  # INTEGER or REAL, display only


@dataclass
class Block(Node):
    compound: 'Compound'
    declarations: List[Declaration] = field(default_factory=list)


# Statements

@dataclass
class Assignment(Node):
    name: str
    expression: 'Expression'


@dataclass
class Compound(Node):
    statements: List['Statement'] = field(default_factory=list)


@dataclass
class IfStatement(Node):
    condition: 'Expression'
    then_statement: 'Statement'
    else_statement: Optional['Statement'] = None


@dataclass
class WhileStatement(Node):
    condition: 'Expression'
    body: 'Statement'


@dataclass
class ReadStatement(Node):
    name: str


@dataclass
class WriteStatement(Node):
    name: Optional[str] = None
    text: Optional[str] = None  # string literal, quotes included

    def __post_init__(self):
        if (self.name is None) == (self.text is None):
            raise ValueError('write needs exactly one of a variable name or a string literal')


# Expressions

@dataclass
class Expression(Node):
    first: 'SimpleExpression'
    relop: Optional[str] = None
    second: Optional['SimpleExpression'] = None


@dataclass
class SimpleExpression(Node):
    first: 'Term'
    rest: List[Tuple[str, 'Term']] = field(default_factory=list)


@dataclass
class Term(Node):
    first: 'Factor'
    rest: List[Tuple[str, 'Factor']] = field(default_factory=list)


# Factors

@dataclass
class IntLiteral(Node):
    value: float


@dataclass
class FloatLiteral(Node):
    value: float


@dataclass
class Identifier(Node):
    name: str


@dataclass
class NestedExpression(Node):
    expression: Expression


@dataclass
class NotFactor(Node):
    factor: 'Factor'


@dataclass
class MinusFactor(Node):
    factor: 'Factor'


Statement = Union[Assignment, Compound, IfStatement, WhileStatement, ReadStatement, WriteStatement]
Factor = Union[IntLiteral, FloatLiteral, Identifier, NestedExpression, NotFactor, MinusFactor]

STATEMENT_TYPES = (Assignment, Compound, IfStatement, WhileStatement, ReadStatement, WriteStatement)
FACTOR_TYPES = (IntLiteral, FloatLiteral, Identifier, NestedExpression, NotFactor, MinusFactor)


def iter_children(node: Node) -> Iterator[Node]:
    """Yield the nodes directly owned by ``node``, in source order."""
    if isinstance(node, Program):
        yield node.block
    elif isinstance(node, Block):
        yield from node.declarations
        yield node.compound
    elif isinstance(node, Assignment):
        yield node.expression
    elif isinstance(node, Compound):
        yield from node.statements
    elif isinstance(node, IfStatement):
        yield node.condition
        yield node.then_statement
        if node.else_statement is not None:
            yield node.else_statement
    elif isinstance(node, WhileStatement):
        yield node.condition
        yield node.body
    elif isinstance(node, Expression):
        yield node.first
        if node.second is not None:
            yield node.second
    elif isinstance(node, (SimpleExpression, Term)):
        yield node.first
        for _, operand in node.rest:
            yield operand
    elif isinstance(node, NestedExpression):
        yield node.expression
    elif isinstance(node, (NotFactor, MinusFactor)):
        yield node.factor
