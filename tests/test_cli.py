import pytest
from turtlec.__main__ import main


@pytest.fixture
def program(tmp_path):
    path = tmp_path / 'walk.turtle'
    path.write_text('PENDOWN\nFORWARD step\nRIGHT 90\n', encoding='utf-8')
    return path


def test_run_program_file(program, capsys):
    main(['-D', 'step=12', str(program)])
    assert capsys.readouterr().out == 'D\nM 12\nR -90\n'


def test_output_file(program, tmp_path):
    out = tmp_path / 'walk.cmd'
    main(['-D', 'step=1.5', '-o', str(out), str(program)])
    assert out.read_text() == 'D\nM 1.5\nR -90\n'


def test_emit_and_execute_ast(program, capsys):
    main(['--emit-ast', str(program)])
    ast_path = capsys.readouterr().out.strip()
    assert ast_path.endswith('walk.turtle.ast.json')
    main(['-D', 'step=3', '--ast', ast_path])
    assert capsys.readouterr().out == 'D\nM 3\nR -90\n'


def test_runtime_error_exits_with_status_1(program, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(program)])
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == 'D\n'
    assert captured.err == 'Runtime error: NameError: undefined variable step\n'


def test_syntax_error_exits_with_status_1(tmp_path, capsys):
    path = tmp_path / 'broken.turtle'
    path.write_text('WHILE 1 > 0 DO\nHOME\n', encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        main([str(path)])
    assert exc.value.code == 1
    assert capsys.readouterr().err == "Syntax error: 3: Unexpected token 'EOT', Expecting 'OD'\n"


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main([str(tmp_path / 'nope.turtle')])
    assert 'not found' in capsys.readouterr().err
