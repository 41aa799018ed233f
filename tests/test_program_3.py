from minipas.interpreter import parse_program, Interpreter


def test_program_3_while_terminates(capsys):
    with open('examples/program_3.pas', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out = capsys.readouterr().out.strip()
    assert out == '3'
