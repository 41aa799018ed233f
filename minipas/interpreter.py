"""Tree-walking interpreter for minipas.

The interpreter evaluates the AST built by :mod:`minipas.parser` in a
second traversal of the same shape as parsing. All mutable state of a
run lives in the interpreter's :class:`SymbolTable`, which is usually the
same table the parser declared the program's variables into.

Numbers are Python floats throughout. Conditions and logical operators
use the zero tolerance of :func:`minipas.values.truth`.
"""

from __future__ import annotations

import builtins
import math
from typing import Optional

from .ast import (
    Node, Program, Block, Compound, Assignment, IfStatement, WhileStatement,
    ReadStatement, WriteStatement, Expression, SimpleExpression, Term,
    IntLiteral, FloatLiteral, Identifier, NestedExpression, NotFactor,
    MinusFactor,
)
from .errors import MinipasError
from .parser import parse_program
from .symbols import SymbolTable
from .values import FALSE, TRUE, format_number, from_bool, truncating_mod, truth


class Interpreter:
    """Executes a minipas AST against a symbol table."""
    def __init__(self, symbols: Optional[SymbolTable] = None, debug_level: int = 0,
                 debug_file: str = 'debug.txt'):
        self.symbols = symbols if symbols is not None else SymbolTable()
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp = None

    def debug(self, msg: str):
        if self.debug_level > 0 and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    # Public API
    def run(self, program: Program) -> None:
        if self.debug_level > 0:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug(f"run program {program.name}")
            self.execute_block(program.block)
            self.debug(f"finished program {program.name}")
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, block: Block) -> None:
        # declarations were entered into the symbol table while parsing
        self.execute(block.compound)

    # Variables
    def lookup(self, name: str) -> float:
        if name not in self.symbols:
            self.create(name)
        return self.symbols.get(name)

    def assign(self, name: str, value: float) -> None:
        if name not in self.symbols:
            self.create(name)
        self.symbols.set(name, value)
        if self.debug_level >= 2:
            self.debug(f"assign {name} = {format_number(value)}")

    def create(self, name: str) -> None:
        # undeclared names start at zero, like names introduced by read
        self.symbols.declare(name)
        if self.debug_level >= 2:
            self.debug(f"implicitly declare {name}")

    # Statements
    def execute(self, node: Node) -> None:
        if isinstance(node, Assignment):
            self.assign(node.name, self.evaluate(node.expression))
            return
        if isinstance(node, Compound):
            for stmt in node.statements:
                self.execute(stmt)
            return
        if isinstance(node, IfStatement):
            cond = self.evaluate(node.condition)
            truthy = truth(cond)
            if self.debug_level >= 3:
                self.debug(f"if condition {format_number(cond)} -> {truthy}")
            if truthy:
                self.execute(node.then_statement)
            elif node.else_statement is not None:
                self.execute(node.else_statement)
            return
        if isinstance(node, WhileStatement):
            while True:
                cond = self.evaluate(node.condition)
                if self.debug_level >= 3:
                    self.debug(f"while condition {format_number(cond)} -> {truth(cond)}")
                if not truth(cond):
                    break
                self.execute(node.body)
            return
        if isinstance(node, ReadStatement):
            self.assign(node.name, self.read_number(node.name))
            return
        if isinstance(node, WriteStatement):
            if node.name is not None:
                print(format_number(self.lookup(node.name)))
            else:
                print(node.text[1:-1])
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def read_number(self, name: str) -> float:
        try:
            raw = builtins.input(f"Enter value for {name}: ")
        except EOFError:
            raise MinipasError('InputError', f'end of input while reading {name}')
        try:
            return float(raw.strip())
        except ValueError:
            raise MinipasError('InputError', f'cannot read a number for {name} from {raw!r}')

    # Expressions
    def evaluate(self, node: Node) -> float:
        if isinstance(node, Expression):
            value = self.evaluate(node.first)
            if node.relop is None:
                return value
            other = self.evaluate(node.second)
            return self.apply_relop(node.relop, value, other)
        if isinstance(node, SimpleExpression):
            value = self.evaluate(node.first)
            for op, term in node.rest:
                value = self.apply_binary_op(op, value, self.evaluate(term))
            return value
        if isinstance(node, Term):
            value = self.evaluate(node.first)
            for op, factor in node.rest:
                value = self.apply_binary_op(op, value, self.evaluate(factor))
            return value
        if isinstance(node, (IntLiteral, FloatLiteral)):
            return node.value
        if isinstance(node, Identifier):
            return self.lookup(node.name)
        if isinstance(node, NestedExpression):
            return self.evaluate(node.expression)
        if isinstance(node, NotFactor):
            return FALSE if truth(self.evaluate(node.factor)) else TRUE
        if isinstance(node, MinusFactor):
            return -self.evaluate(node.factor)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_relop(self, op: str, a: float, b: float) -> float:
        if op == '=':
            return from_bool(not truth(a - b))
        if op == '<>':
            return from_bool(truth(a - b))
        if op == '<':
            return from_bool(a < b)
        if op == '>':
            return from_bool(a > b)
        raise MinipasError('RuntimeError', f'unknown relational operator {op}')

    def apply_binary_op(self, op: str, a: float, b: float) -> float:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == 'or':
            return from_bool(truth(a) or truth(b))
        if op == '*':
            return a * b
        if op == '/':
            if b == 0.0:
                raise MinipasError('RuntimeError', 'division by zero')
            return a / b
        if op == 'mod':
            if not (math.isfinite(a) and math.isfinite(b)):
                raise MinipasError('RuntimeError', 'modulo of a non-finite number')
            if int(b) == 0:
                raise MinipasError('RuntimeError', 'modulo by zero')
            return truncating_mod(a, b)
        raise MinipasError('RuntimeError', f'unknown operator {op}')


def run_program(source: str, debug_level: int = 0) -> SymbolTable:
    """Parse and run a minipas program, returning its final symbol table."""
    symbols = SymbolTable()
    program = parse_program(source, symbols)
    interpreter = Interpreter(symbols, debug_level=debug_level)
    interpreter.run(program)
    return symbols
