"""CLI entry point for the turtle compiler.

Usage:
    python -m turtlec [-v|-vv|-vvv] [-D NAME=VALUE ...] [-o FILE] <program_file>
    python -m turtlec [-v...] --emit-ast <program_file>
    python -m turtlec [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  -D NAME=VALUE Bind a variable before the program runs (can be repeated)
  -o FILE       Write the command stream to FILE instead of stdout
  --emit-ast    Parse the given program and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from .ast_json import ast_to_obj, ast_from_obj
from .environment import Environment
from .errors import TurtleRuntimeError, TurtleSyntaxError
from .interpreter import Interpreter
from .parser import parse_program


def parse_define(text: str):
    name, sep, value = text.partition('=')
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value for {name} is not a number: {value!r}")


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def load_program(path: Path):
    try:
        return parse_program(read_source(path))
    except TurtleSyntaxError as e:
        print(f"Syntax error: {e}", file=sys.stderr)
        sys.exit(1)


def execute(ast_program, args) -> None:
    env = Environment(dict(args.define))
    out = open(args.output, 'w', encoding='utf-8') if args.output else None
    try:
        interpreter = Interpreter(stream=out, debug_level=args.v)
        interpreter.run(ast_program, env)
    except TurtleRuntimeError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if out:
            out.close()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Turtle graphics compiler")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('-D', dest='define', action='append', default=[], type=parse_define,
                        metavar='NAME=VALUE', help='bind a variable before running (can be repeated)')
    parser.add_argument('-o', '--output', metavar='FILE', help='write commands to FILE instead of stdout')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='turtle program file to compile and run')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        ast_program = load_program(program_file)
        obj = ast_to_obj(ast_program)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(obj, out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        data = json.loads(read_source(ast_path))
        execute(ast_from_obj(data), args)
        return

    # Default: compile and run a source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast')
    execute(load_program(Path(args.program)), args)


if __name__ == '__main__':
    main()
