"""Keyword table consumed by the scanner.

Only part of the table is understood by the parser; the rest is reserved so
the words cannot be used as identifiers.
"""

from typing import Dict

from .tokens import TokenType


KEYWORDS: Dict[str, TokenType] = {
    'spill': TokenType.PRINT,
    'listen': TokenType.INPUT,
    'as': TokenType.ASSIGNMENT,
    'tea': TokenType.VAR,
    'bet': TokenType.IF,
    'deadass': TokenType.ELSE,
    'fr': TokenType.TRUE,
    'cap': TokenType.FALSE,
    'ghosted': TokenType.NULL,
    'end': TokenType.END,
    'end_if': TokenType.END_IF,
    'end_loop': TokenType.END_LOOP,
    # reserved, never parsed
    'lowkey': TokenType.FOR,
    'highkey': TokenType.WHILE,
    'summon': TokenType.FUN,
    'slay': TokenType.RETURN,
    'squad': TokenType.CLASS,
    'super': TokenType.SUPER,
    'dis': TokenType.THIS,
    'cancelled': TokenType.BREAK,
    'yeet': TokenType.CONTINUE,
    'pullup': TokenType.IMPORT,
}

BLOCK_TERMINATORS = (TokenType.END, TokenType.END_IF, TokenType.END_LOOP)
