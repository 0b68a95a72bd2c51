from pathlib import Path
from turtlec.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_1_square(capsys):
    with open(EXAMPLES / 'square.turtle', 'r', encoding='utf-8') as f:
        source = f.read()
    ast = parse_program(source)
    interp = Interpreter()
    interp.run(ast)
    out_lines = capsys.readouterr().out.strip().split('\n')
    expected = ['D'] + ['M 100', 'R -90'] * 4 + ['U', 'H']
    assert out_lines == expected
    assert interp.global_env.get('i') == 4
