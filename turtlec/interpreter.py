"""Tree-walking evaluator for the turtle language.

The interpreter executes a parsed ``Program`` against an ``Environment``
and emits one command line per turtle action, in execution order:

    HOME      -> H
    PENUP     -> U
    PENDOWN   -> D
    PUSHSTATE -> [
    POPSTATE  -> ]
    FORWARD e -> M <e>
    LEFT e    -> R <e>
    RIGHT e   -> R <-e>

Emitted commands are collected in ``Interpreter.commands`` and, unless
``echo`` is disabled, printed to the output stream as they happen.
"""

from __future__ import annotations

from typing import List, Optional, TextIO

from .ast import (
    Program, Block, Assign, WhileStmt, IfStmt,
    HomeStmt, PenUpStmt, PenDownStmt, PushStateStmt, PopStateStmt,
    ForwardStmt, LeftStmt, RightStmt,
    Literal, Ident, UnaryOp, BinaryOp, Node,
)
from .environment import Environment
from .errors import TurtleRuntimeError
from .parser import parse_program
from .types import ErrorVal, Number, format_number, is_truthy, truth


class Interpreter:
    """Core interpreter that executes turtle ASTs."""
    def __init__(self, stream: Optional[TextIO] = None, echo: bool = True,
                 debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = Environment()
        self.commands: List[str] = []
        self.stream = stream
        self.echo = echo
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> List[str]:
        if env is None:
            env = self.global_env
        try:
            for stmt in program.body:
                self.execute(stmt, env)
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None
        return self.commands

    def emit(self, command: str):
        self.commands.append(command)
        if self.debug_level >= 1:
            self.debug(f"emit {command}")
        if self.echo:
            print(command, file=self.stream)

    def execute(self, node: Node, env: Environment):
        if isinstance(node, Block):
            for stmt in node.statements:
                self.execute(stmt, env)
            return
        if isinstance(node, Assign):
            value = self.evaluate(node.value, env)
            env.put(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name} = {format_number(value)}")
            return
        if isinstance(node, WhileStmt):
            while True:
                cond = self.evaluate(node.condition, env)
                if self.debug_level >= 3:
                    self.debug(f"while condition {format_number(cond)}")
                if not is_truthy(cond):
                    break
                self.execute(node.body, env)
            return
        if isinstance(node, IfStmt):
            cond = self.evaluate(node.condition, env)
            if self.debug_level >= 3:
                self.debug(f"if condition {format_number(cond)}")
            if is_truthy(cond):
                self.execute(node.then_block, env)
            elif node.else_block is not None:
                self.execute(node.else_block, env)
            return
        if isinstance(node, HomeStmt):
            self.emit('H')
            return
        if isinstance(node, PenUpStmt):
            self.emit('U')
            return
        if isinstance(node, PenDownStmt):
            self.emit('D')
            return
        if isinstance(node, PushStateStmt):
            self.emit('[')
            return
        if isinstance(node, PopStateStmt):
            self.emit(']')
            return
        if isinstance(node, ForwardStmt):
            distance = self.evaluate(node.distance, env)
            self.emit(f"M {format_number(distance)}")
            return
        if isinstance(node, RightStmt):
            angle = self.evaluate(node.angle, env)
            # right turns are negative rotations
            self.emit(f"R {format_number(-angle)}")
            return
        if isinstance(node, LeftStmt):
            angle = self.evaluate(node.angle, env)
            self.emit(f"R {format_number(angle)}")
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Node, env: Environment) -> Number:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Ident):
            return env.get(node.name)
        if isinstance(node, UnaryOp):
            operand = self.evaluate(node.operand, env)
            if node.op == '-':
                return -operand
            if node.op == 'NOT':
                return truth(not is_truthy(operand))
            raise NotImplementedError(f"unsupported unary operator {node.op}")
        if isinstance(node, BinaryOp):
            # AND/OR short-circuit, so the right operand is evaluated lazily
            if node.op == 'AND':
                return truth(is_truthy(self.evaluate(node.left, env))
                             and is_truthy(self.evaluate(node.right, env)))
            if node.op == 'OR':
                return truth(is_truthy(self.evaluate(node.left, env))
                             or is_truthy(self.evaluate(node.right, env)))
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_binary_op(self, op: str, a: Number, b: Number) -> Number:
        if op == '+':
            return a + b
        if op == '-':
            return a - b
        if op == '*':
            return a * b
        if op == '/':
            if b == 0:
                raise TurtleRuntimeError(ErrorVal('ZeroDivisionError', 'division by zero'))
            return a / b
        if op == '=':
            return truth(a == b)
        if op == '<>':
            return truth(a != b)
        if op == '<':
            return truth(a < b)
        if op == '>':
            return truth(a > b)
        if op == '<=':
            return truth(a <= b)
        if op == '>=':
            return truth(a >= b)
        raise NotImplementedError(f"unknown operator {op}")


def run_program(source: str, env: Optional[Environment] = None,
                stream: Optional[TextIO] = None, debug_level: int = 0) -> List[str]:
    """Parse and run a turtle program, printing each command as it is emitted."""
    ast_program = parse_program(source)
    interpreter = Interpreter(stream=stream, debug_level=debug_level)
    return interpreter.run(ast_program, env)


def compile_program(source: str, env: Optional[Environment] = None) -> List[str]:
    """Parse and run a turtle program silently, returning the command stream."""
    ast_program = parse_program(source)
    interpreter = Interpreter(echo=False)
    return interpreter.run(ast_program, env)
