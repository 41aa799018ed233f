"""Textual display of a minipas AST.

Every node renders as ``(kind ... kind)`` with its children in between,
each on a new line indented by ``"| "`` per tree level. The layout is
meant for reading, not for parsing back.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from .ast import (
    Node, Program, Block, Declaration, Compound, Assignment, IfStatement,
    WhileStatement, ReadStatement, WriteStatement, Expression,
    SimpleExpression, Term, IntLiteral, FloatLiteral, Identifier,
    NestedExpression, NotFactor, MinusFactor, FACTOR_TYPES, STATEMENT_TYPES,
    iter_children,
)
from .values import format_number

NODE_NAMES = {
    Program: 'ProgramNode',
    Block: 'BlockNode',
    Declaration: 'DeclarationNode',
    Compound: 'CompoundNode',
    Assignment: 'AssignmentNode',
    IfStatement: 'IfNode',
    WhileStatement: 'WhileNode',
    ReadStatement: 'ReadNode',
    WriteStatement: 'WriteNode',
    Expression: 'ExpressionNode',
    SimpleExpression: 'SimpleExpressionNode',
    Term: 'TermNode',
    IntLiteral: 'IntLitNode',
    FloatLiteral: 'FloatLitNode',
    Identifier: 'IdentifierNode',
    NestedExpression: 'NestedExpressionNode',
    NotFactor: 'NotNode',
    MinusFactor: 'MinusNode',
}


def operator_label(op: str) -> str:
    # word operators are shown in capitals: or -> OR, mod -> MOD
    return op.upper()


class TreePrinter:
    def __init__(self):
        self.parts: List[str] = []

    def text(self, s: str) -> None:
        self.parts.append(s)

    def line(self, level: int, s: str) -> None:
        self.parts.append('\n' + '| ' * max(level, 0) + s)

    def render(self, node: Node) -> str:
        self.parts = []
        self.visit(node)
        return ''.join(self.parts)

    def visit(self, node: Node) -> None:
        lv = node.level
        if isinstance(node, Program):
            self.line(lv, f"(program {node.name}")
            self.visit(node.block)
            self.line(lv, "program) ")
        elif isinstance(node, Block):
            self.line(lv, "(block ")
            for decl in node.declarations:
                self.visit(decl)
            self.visit(node.compound)
            self.line(lv, "block) ")
        elif isinstance(node, Declaration):
            self.line(lv, f"(var {node.name} : {node.type_name} var) ")
        elif isinstance(node, Assignment):
            self.line(lv, f"(assignment ( {node.name} := )")
            self.visit(node.expression)
            self.line(lv, "assignment) ")
        elif isinstance(node, Compound):
            self.line(lv, "(compound_stmt ")
            for stmt in node.statements:
                self.visit(stmt)
            self.line(lv, "compound_stmt) ")
        elif isinstance(node, IfStatement):
            self.line(lv, "(if_stmt ")
            self.visit(node.condition)
            self.line(lv, "(then ")
            self.visit(node.then_statement)
            self.line(lv, "then) ")
            if node.else_statement is not None:
                self.line(lv, "(else ")
                self.visit(node.else_statement)
                self.line(lv, "else) ")
            self.line(lv, "if_stmt) ")
        elif isinstance(node, WhileStatement):
            self.line(lv, "(while_stmt ")
            self.visit(node.condition)
            self.visit(node.body)
            self.line(lv, "while_stmt) ")
        elif isinstance(node, ReadStatement):
            self.line(lv, f"(read_stmt ( {node.name} )")
            self.line(lv, "read_stmt) ")
        elif isinstance(node, WriteStatement):
            target = node.name if node.name is not None else node.text
            self.line(lv, f"(write_stmt ( {target} )")
            self.line(lv, "write_stmt) ")
        elif isinstance(node, Expression):
            self.line(lv, "(expression ")
            self.visit(node.first)
            if node.relop is not None:
                self.line(lv, f"{node.relop} ")
                self.visit(node.second)
            self.line(lv, "expression) ")
        elif isinstance(node, (SimpleExpression, Term)):
            kind = 'simple_expr' if isinstance(node, SimpleExpression) else 'term'
            self.line(lv, f"({kind} ")
            self.visit(node.first)
            for op, operand in node.rest:
                self.line(lv, f"{operator_label(op)} ")
                self.visit(operand)
            self.line(lv, f"{kind}) ")
        elif isinstance(node, FACTOR_TYPES):
            self.line(lv, "(factor ")
            self.visit_factor(node)
            self.line(lv, "factor) ")
        else:
            raise NotImplementedError(f"print: unexpected node type {type(node)}")

    def visit_factor(self, node: Node) -> None:
        if isinstance(node, IntLiteral):
            self.text(f"(INTLIT: {format_number(node.value)}) ")
        elif isinstance(node, FloatLiteral):
            self.text(f"(FLOATLIT: {format_number(node.value)}) ")
        elif isinstance(node, Identifier):
            self.text(f"( IDENT: {node.name} ) ")
        elif isinstance(node, NestedExpression):
            self.text("(NESTED_EXPR: ")
            self.visit(node.expression)
            self.text(") ")
        elif isinstance(node, NotFactor):
            self.text("(NOT: ")
            self.visit(node.factor)
            self.text(") ")
        elif isinstance(node, MinusFactor):
            self.text("(-: ")
            self.visit(node.factor)
            self.text(") ")


def format_tree(node: Node) -> str:
    return TreePrinter().render(node)


def print_tree(node: Node, out: Optional[TextIO] = None) -> None:
    print(format_tree(node), file=out if out is not None else sys.stdout)


def trace_teardown(node: Node, out: Optional[TextIO] = None) -> None:
    """Announce the release of every node, parents before children.

    Statements and factors also announce their shared base kind once
    their own children are gone.
    """
    out = out if out is not None else sys.stdout
    print(f"Deleting {NODE_NAMES[type(node)]} ", file=out)
    for child in iter_children(node):
        trace_teardown(child, out)
    if isinstance(node, STATEMENT_TYPES):
        print("Deleting StatementNode ", file=out)
    elif isinstance(node, FACTOR_TYPES):
        print("Deleting FactorNode ", file=out)
