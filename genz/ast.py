"""Abstract Syntax Tree (AST) definitions for the GenZ language.

Expression nodes describe values to compute; statement nodes describe
effects. Both are built once by the parser and only read afterwards, so
every node is a frozen dataclass. Leaf expressions keep the token they came
from so that runtime errors can point at a source line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .tokens import Token


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


###############################################################################
# Expressions
###############################################################################

@dataclass(frozen=True)
class Expr(Node):
    pass


@dataclass(frozen=True)
class Number(Expr):
    token: Token


@dataclass(frozen=True)
class String(Expr):
    token: Token


@dataclass(frozen=True)
class CharLiteral(Expr):
    token: Token


@dataclass(frozen=True)
class Boolean(Expr):
    token: Token


@dataclass(frozen=True)
class GhostedNull(Expr):
    """The null literal. Use the GHOSTED singleton rather than instantiating."""

    def __repr__(self) -> str:
        return 'Ghosted'


GHOSTED = GhostedNull()


@dataclass(frozen=True)
class Identifier(Expr):
    token: Token  # lexeme may carry a sigil


@dataclass(frozen=True)
class Group(Expr):
    expression: Expr


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    operand: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


###############################################################################
# Statements
###############################################################################

@dataclass(frozen=True)
class Stmt(Node):
    pass


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class ExpressionStatement(Stmt):
    expression: Expr


@dataclass(frozen=True)
class VarDecl(Stmt):
    sigil: str
    name: Token  # sigil already stripped from the lexeme
    initializer: Expr


@dataclass(frozen=True)
class Assign(Stmt):
    name: Token  # IDENTIFIER or SIGIL_IDENT
    value: Expr


@dataclass(frozen=True)
class Block(Stmt):
    statements: List[Stmt]


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt]


@dataclass(frozen=True)
class Listen(Stmt):
    prompt: str
    target: Token  # SIGIL_IDENT
