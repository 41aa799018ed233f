import io
import sys

import pytest

from minipas.__main__ import main
from minipas.driver import Options, error_banner, run_source
from minipas.errors import ParseError
from minipas.parser import parse_program

SOURCE = 'program p; var x : INTEGER; y : REAL; begin x := 3; write(x) end'


def test_run_source_default_sections(capsys):
    run_source(SOURCE)
    out = capsys.readouterr().out
    assert out == '*** Interpret the Tree ***\n3\n\n'


def test_run_source_all_sections(capsys):
    run_source(SOURCE, Options(print_tree=True, print_symbols=True, trace_teardown=True))
    out = capsys.readouterr().out
    assert out.index('*** Print the Tree ***') < out.index('*** Interpret the Tree ***') \
        < out.index('*** Print the Symbol Table ***') < out.index('*** Delete the Tree ***')
    assert '       x: 3\n       y: 0\n' in out
    assert 'Deleting ProgramNode' in out
    assert '(program p' in out


def test_run_source_trace(capsys):
    run_source(SOURCE, Options(trace_parse=True))
    out = capsys.readouterr().out
    assert out.startswith('Next token is: TOK_PROGRAM, Next lexeme is: program\n')
    assert 'Exit <program>\n*** Interpret the Tree ***' in out


def test_parse_error_stops_before_interpreting(capsys):
    with pytest.raises(ParseError):
        run_source('program p; begin write("x") write("y") end')
    assert capsys.readouterr().out == ''


def test_error_banner():
    with pytest.raises(ParseError) as excinfo:
        parse_program('program p; begin x := ; end')
    assert error_banner(excinfo.value) == (
        '\n===========================\n'
        'ERROR near: ;\n'
        '==========================='
    )


def test_cli_runs_file(tmp_path, capsys):
    path = tmp_path / 'prog.pas'
    path.write_text(SOURCE, encoding='utf-8')
    main([str(path)])
    assert capsys.readouterr().out == '*** Interpret the Tree ***\n3\n\n'


def test_cli_flags(tmp_path, capsys):
    path = tmp_path / 'prog.pas'
    path.write_text(SOURCE, encoding='utf-8')
    main(['-t', '-s', '-d', str(path)])
    out = capsys.readouterr().out
    assert '*** Print the Tree ***' in out
    assert '*** Print the Symbol Table ***' in out
    assert '*** Delete the Tree ***' in out


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO(SOURCE))
    main([])
    assert capsys.readouterr().out.endswith('3\n\n')


def test_cli_syntax_error(tmp_path, capsys):
    path = tmp_path / 'bad.pas'
    path.write_text('program p; begin x := 1 write(x) end', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert 'ERROR near: write' in out
    assert '*** Interpret the Tree ***' not in out


def test_cli_redeclaration(tmp_path, capsys):
    path = tmp_path / 'dup.pas'
    path.write_text('program p; var x : INTEGER; x : REAL; begin write(x) end', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert 'ERROR near: x' in capsys.readouterr().out


def test_cli_runtime_error(tmp_path, capsys):
    path = tmp_path / 'div.pas'
    path.write_text('program p; begin x := 1 / 0 end', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert 'Runtime error: RuntimeError: division by zero' in capsys.readouterr().err


def test_cli_mod_of_infinity(tmp_path, capsys):
    path = tmp_path / 'inf.pas'
    path.write_text('program p; begin x := 1.0e400 mod 2 end', encoding='utf-8')
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert 'Runtime error: RuntimeError: modulo of a non-finite number' in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / 'missing.pas')])
    assert excinfo.value.code == 1
    assert 'not found' in capsys.readouterr().err
