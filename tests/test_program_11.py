import builtins
from minipas.interpreter import parse_program, Interpreter


def test_program_11_countdown(monkeypatch, capsys):
    monkeypatch.setattr(builtins, 'input', lambda prompt='': '3')
    with open('examples/program_11.pas', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['3', '2', '1', 'liftoff']
