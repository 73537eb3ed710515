"""JSON serialization/deserialization for the GenZ AST.

This module converts between GenZ AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. Tokens are kept whole so a
program loaded back from JSON reports errors on the same lines.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import (
    Number,
    String,
    CharLiteral,
    Boolean,
    GhostedNull,
    GHOSTED,
    Identifier,
    Group,
    Unary,
    Binary,
    Stmt,
    Print,
    ExpressionStatement,
    VarDecl,
    Assign,
    Block,
    If,
    Listen,
)
from .tokens import Token, TokenType


LEAF_TYPES = {
    "Number": Number,
    "String": String,
    "CharLiteral": CharLiteral,
    "Boolean": Boolean,
    "Identifier": Identifier,
}


def token_to_obj(t: Token) -> Dict[str, Any]:
    return {"type": t.type.name, "lexeme": t.lexeme, "literal": t.literal, "line": t.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["lexeme"], o.get("literal"), o["line"])


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": [ast_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Invalid program object")
    return [ast_from_obj(s) for s in obj["body"]]


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None

    # Expressions
    if isinstance(node, (Number, String, CharLiteral, Boolean, Identifier)):
        return {"type": type(node).__name__, "token": token_to_obj(node.token)}
    if isinstance(node, GhostedNull):
        return {"type": "Ghosted"}
    if isinstance(node, Group):
        return {"type": "Group", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "operand": ast_to_obj(node.operand)}
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }

    # Statements
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, ExpressionStatement):
        return {"type": "ExpressionStatement", "expression": ast_to_obj(node.expression)}
    if isinstance(node, VarDecl):
        return {
            "type": "VarDecl",
            "sigil": node.sigil,
            "name": token_to_obj(node.name),
            "initializer": ast_to_obj(node.initializer),
        }
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, If):
        return {
            "type": "If",
            "condition": ast_to_obj(node.condition),
            "then_branch": ast_to_obj(node.then_branch),
            "else_branch": ast_to_obj(node.else_branch),
        }
    if isinstance(node, Listen):
        return {"type": "Listen", "prompt": node.prompt, "target": token_to_obj(node.target)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t in LEAF_TYPES:
        return LEAF_TYPES[t](token_from_obj(obj["token"]))
    if t == "Ghosted":
        return GHOSTED
    if t == "Group":
        return Group(ast_from_obj(obj["expression"]))
    if t == "Unary":
        return Unary(token_from_obj(obj["operator"]), ast_from_obj(obj["operand"]))
    if t == "Binary":
        return Binary(ast_from_obj(obj["left"]), token_from_obj(obj["operator"]), ast_from_obj(obj["right"]))
    if t == "Print":
        return Print(ast_from_obj(obj["expression"]))
    if t == "ExpressionStatement":
        return ExpressionStatement(ast_from_obj(obj["expression"]))
    if t == "VarDecl":
        return VarDecl(obj["sigil"], token_from_obj(obj["name"]), ast_from_obj(obj["initializer"]))
    if t == "Assign":
        return Assign(token_from_obj(obj["name"]), ast_from_obj(obj["value"]))
    if t == "Block":
        return Block([ast_from_obj(s) for s in obj["statements"]])
    if t == "If":
        return If(
            ast_from_obj(obj["condition"]),
            ast_from_obj(obj["then_branch"]),
            ast_from_obj(obj.get("else_branch")),
        )
    if t == "Listen":
        return Listen(obj["prompt"], token_from_obj(obj["target"]))

    raise ValueError(f"Unknown AST node type: {t}")
