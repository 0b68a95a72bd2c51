"""Abstract Syntax Tree (AST) definitions for the turtle language.

The AST classes defined in this module represent the syntactic structure
of parsed turtle programs. The set of node kinds is closed: the
interpreter dispatches over exactly the classes listed in ``STMT_NODES``
and ``EXPR_NODES``. Every node owns its children; subtrees are never
shared between parents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .types import Number


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node]


# Statements

@dataclass
class Block(Node):
    statements: List[Node]


@dataclass
class Assign(Node):
    name: str  # l-value
    value: Node  # r-value


@dataclass
class WhileStmt(Node):
    condition: Node
    body: Block


@dataclass
class IfStmt(Node):
    condition: Node
    then_block: Block
    else_block: Optional[Node]  # Block, nested IfStmt for ELSIF, or None


@dataclass
class HomeStmt(Node):
    pass


@dataclass
class PenUpStmt(Node):
    pass


@dataclass
class PenDownStmt(Node):
    pass


@dataclass
class PushStateStmt(Node):
    pass


@dataclass
class PopStateStmt(Node):
    pass


@dataclass
class ForwardStmt(Node):
    distance: Node


@dataclass
class LeftStmt(Node):
    angle: Node


@dataclass
class RightStmt(Node):
    angle: Node


# Expressions

@dataclass
class Literal(Node):
    value: Number


@dataclass
class Ident(Node):
    name: str


@dataclass
class UnaryOp(Node):
    op: str  # '-' or 'NOT'
    operand: Node


@dataclass
class BinaryOp(Node):
    op: str  # arithmetic, relational, AND or OR
    left: Node
    right: Node


STMT_NODES = (
    Block, Assign, WhileStmt, IfStmt,
    HomeStmt, PenUpStmt, PenDownStmt, PushStateStmt, PopStateStmt,
    ForwardStmt, LeftStmt, RightStmt,
)

EXPR_NODES = (Literal, Ident, UnaryOp, BinaryOp)
