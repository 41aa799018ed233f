import io

from minipas.interpreter import parse_program
from minipas.printer import format_tree, print_tree, trace_teardown

SOURCE = """
program show;
var x : INTEGER;
begin
  x := 3;
  while x > 0 do
    if not x = 2 then x := x - 1 else x := (x - 2) * 1.5
end
"""


def test_tree_opens_and_closes_every_kind():
    text = format_tree(parse_program(SOURCE))
    for kind in ('program', 'block', 'compound_stmt', 'assignment', 'while_stmt',
                 'if_stmt', 'then', 'else', 'expression', 'simple_expr', 'term', 'factor'):
        assert text.count(f'({kind} ') == text.count(f'{kind}) ') > 0
    assert '(program show' in text
    assert '(var x : INTEGER var) ' in text
    assert '(assignment ( x := )' in text


def test_tree_shows_factor_variants():
    text = format_tree(parse_program(SOURCE))
    assert '(INTLIT: 3) ' in text
    assert '(FLOATLIT: 1.5) ' in text
    assert '( IDENT: x ) ' in text
    assert '(NOT: ' in text
    assert '(NESTED_EXPR: ' in text


def test_tree_nesting_follows_the_ast():
    text = format_tree(parse_program(SOURCE))
    # the if statement is the while body, so it opens and closes inside it
    assert text.index('(while_stmt ') < text.index('(if_stmt ') < text.index('if_stmt) ') < text.index('while_stmt) ')
    assert text.index('(then ') < text.index('then) ') < text.index('(else ') < text.index('else) ')


def test_indentation_grows_with_depth():
    program = parse_program(SOURCE)
    lines = format_tree(program).split('\n')
    block_line = next(line for line in lines if line.endswith('(block '))
    assert block_line == '| ' * program.block.level + '(block '
    compound_line = next(line for line in lines if line.endswith('(compound_stmt '))
    assert compound_line == '| ' * program.block.compound.level + '(compound_stmt '
    assert program.block.compound.level > program.block.level


def test_operators_are_shown():
    text = format_tree(parse_program('program p; begin x := 1 + 2 or 3 mod 4 end'))
    assert '\n' in text
    lines = [line.lstrip('| ') for line in text.split('\n')]
    assert '+ ' in lines
    assert 'OR ' in lines
    assert 'MOD ' in lines


def test_print_tree_writes_to_stream():
    out = io.StringIO()
    program = parse_program('program p; begin write("hi") end')
    print_tree(program, out)
    assert '(write_stmt ( "hi" )' in out.getvalue()


def test_teardown_visits_parents_first():
    out = io.StringIO()
    trace_teardown(parse_program('program p; var a : REAL; begin a := - 1 end'), out)
    assert out.getvalue().splitlines() == [
        'Deleting ProgramNode ',
        'Deleting BlockNode ',
        'Deleting DeclarationNode ',
        'Deleting CompoundNode ',
        'Deleting AssignmentNode ',
        'Deleting ExpressionNode ',
        'Deleting SimpleExpressionNode ',
        'Deleting TermNode ',
        'Deleting MinusNode ',
        'Deleting IntLitNode ',
        'Deleting FactorNode ',
        'Deleting FactorNode ',
        'Deleting StatementNode ',
        'Deleting StatementNode ',
    ]


def test_teardown_closes_each_statement_and_factor():
    out = io.StringIO()
    trace_teardown(parse_program('program p; begin if x then write(x) else read(x); y := (1) end'), out)
    lines = out.getvalue().splitlines()
    assert lines.count('Deleting StatementNode ') == 5
    assert lines.count('Deleting FactorNode ') == 3
    assert lines[-1] == 'Deleting StatementNode '
