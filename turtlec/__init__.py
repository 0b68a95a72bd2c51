# Turtle compiler package
# This package parses turtle programs and executes them into a stream of drawing commands.
from .errors import TurtleError, TurtleSyntaxError, TurtleRuntimeError, ErrorKind
from .environment import Environment
from .parser import Parser, parse_program
from .interpreter import Interpreter, run_program, compile_program

__all__ = [
    'TurtleError',
    'TurtleSyntaxError',
    'TurtleRuntimeError',
    'ErrorKind',
    'Environment',
    'Parser',
    'parse_program',
    'Interpreter',
    'run_program',
    'compile_program',
]
