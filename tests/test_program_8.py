import pytest

from minipas.errors import RedeclarationError
from minipas.interpreter import parse_program
from minipas.symbols import SymbolTable


def test_program_8_redeclaration_fails(capsys):
    with open('examples/program_8.pas', 'r', encoding='utf-8') as f:
        source = f.read()
    symbols = SymbolTable()
    with pytest.raises(RedeclarationError) as excinfo:
        parse_program(source, symbols)
    assert excinfo.value.lexeme == 'x'
    assert excinfo.value.line == 4
    # only the first declaration made it in
    assert list(symbols.items()) == [('x', 0.0)]
    assert capsys.readouterr().out == ''
