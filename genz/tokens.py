"""Token definitions for the GenZ language.

A token records the kind of lexeme found by the scanner, the exact source
text, an optional literal payload and the line it started on.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class TokenType(enum.Enum):
    # Punctuation
    LPAR = "("
    RPAR = ")"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","
    DOT = "."
    SEMICOLON = ";"
    COLON = ":"

    # Operators
    ADD = "+"
    INC = "++"
    MINUS = "-"
    DEC = "--"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"
    EXPONENT = "^"
    AND = "&"
    OR = "|"
    NOT = "!"
    NOT_EQUAL = "!="
    ASSIGN = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    G_EQUAL = ">="
    LESS = "<"
    L_EQUAL = "<="

    # Literals
    NUM = "NUM"
    STR = "STR"
    CHAR = "CHAR"
    IDENTIFIER = "IDENTIFIER"
    SIGIL_IDENT = "SIGIL_IDENT"

    # Keywords
    PRINT = "PRINT"
    INPUT = "INPUT"
    ASSIGNMENT = "ASSIGNMENT"
    VAR = "VAR"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"
    NULL = "NULL"
    END = "END"
    END_IF = "END_IF"
    END_LOOP = "END_LOOP"
    FOR = "FOR"
    WHILE = "WHILE"
    FUN = "FUN"
    RETURN = "RETURN"
    CLASS = "CLASS"
    SUPER = "SUPER"
    THIS = "THIS"
    BREAK = "BREAK"
    CONTINUE = "CONTINUE"
    IMPORT = "IMPORT"

    END_OF_FILE = "EOF"


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    literal: Any
    line: int

    def __str__(self) -> str:
        return self.lexeme or self.type.value
