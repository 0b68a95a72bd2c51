"""JSON serialization/deserialization for turtle ASTs.

This module converts between the AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Every node carries a
``"type"`` tag naming its class.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Program,
    Block,
    Assign,
    WhileStmt,
    IfStmt,
    HomeStmt,
    PenUpStmt,
    PenDownStmt,
    PushStateStmt,
    PopStateStmt,
    ForwardStmt,
    LeftStmt,
    RightStmt,
    Literal,
    Ident,
    UnaryOp,
    BinaryOp,
)

# Operand-free actions serialize as a bare type tag.
SIMPLE_ACTIONS: Dict[str, type] = {
    cls.__name__: cls
    for cls in (HomeStmt, PenUpStmt, PenDownStmt, PushStateStmt, PopStateStmt)
}


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, WhileStmt):
        return {"type": "WhileStmt", "condition": ast_to_obj(node.condition), "body": ast_to_obj(node.body)}
    if isinstance(node, IfStmt):
        return {
            "type": "IfStmt",
            "condition": ast_to_obj(node.condition),
            "then_block": ast_to_obj(node.then_block),
            "else_block": ast_to_obj(node.else_block),
        }
    if type(node).__name__ in SIMPLE_ACTIONS:
        return {"type": type(node).__name__}
    if isinstance(node, ForwardStmt):
        return {"type": "ForwardStmt", "distance": ast_to_obj(node.distance)}
    if isinstance(node, LeftStmt):
        return {"type": "LeftStmt", "angle": ast_to_obj(node.angle)}
    if isinstance(node, RightStmt):
        return {"type": "RightStmt", "angle": ast_to_obj(node.angle)}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, UnaryOp):
        return {"type": "UnaryOp", "op": node.op, "operand": ast_to_obj(node.operand)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "Block":
        return Block(statements=[ast_from_obj(s) for s in obj["statements"]])
    if t == "Assign":
        return Assign(name=obj["name"], value=ast_from_obj(obj["value"]))
    if t == "WhileStmt":
        return WhileStmt(condition=ast_from_obj(obj["condition"]), body=ast_from_obj(obj["body"]))
    if t == "IfStmt":
        return IfStmt(
            condition=ast_from_obj(obj["condition"]),
            then_block=ast_from_obj(obj["then_block"]),
            else_block=ast_from_obj(obj.get("else_block")),
        )
    if t in SIMPLE_ACTIONS:
        return SIMPLE_ACTIONS[t]()
    if t == "ForwardStmt":
        return ForwardStmt(distance=ast_from_obj(obj["distance"]))
    if t == "LeftStmt":
        return LeftStmt(angle=ast_from_obj(obj["angle"]))
    if t == "RightStmt":
        return RightStmt(angle=ast_from_obj(obj["angle"]))
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "UnaryOp":
        return UnaryOp(op=obj["op"], operand=ast_from_obj(obj["operand"]))
    if t == "Literal":
        return Literal(value=float(obj["value"]))
    if t == "Ident":
        return Ident(name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")
