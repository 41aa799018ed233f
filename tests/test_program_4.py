from minipas.interpreter import parse_program, Interpreter


def test_program_4_unary_operators(capsys):
    with open('examples/program_4.pas', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['-5', '1', '0', '4']
