from minipas.interpreter import parse_program, Interpreter


def test_program_2_relational_if(capsys):
    with open('examples/program_2.pas', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    # quotes are stripped from string literals
    assert out_lines == ['yes', 'no']
