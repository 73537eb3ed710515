"""Lexical scanner for the GenZ language.

The scanner walks the source once, left to right, with a single character of
lookahead for two-character operators. Problems are recorded as diagnostics
and scanning carries on, except for an unterminated comment which swallows
the rest of the input.
"""

from __future__ import annotations

from typing import Any, List

from .errors import ScanDiagnostic
from .keywords import KEYWORDS
from .tokens import Token, TokenType


COMMENT_OPENER = "FYI."
SIGIL_CHARS = "@$%"

SINGLE_CHAR_TOKENS = {
    '(': TokenType.LPAR,
    ')': TokenType.RPAR,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    ';': TokenType.SEMICOLON,
    ':': TokenType.COLON,
    '*': TokenType.MULTIPLY,
    '/': TokenType.DIVIDE,
    '^': TokenType.EXPONENT,
    '&': TokenType.AND,
    '|': TokenType.OR,
}

# first char -> (second char, two-char token, one-char token)
TWO_CHAR_TOKENS = {
    '+': ('+', TokenType.INC, TokenType.ADD),
    '-': ('-', TokenType.DEC, TokenType.MINUS),
    '!': ('=', TokenType.NOT_EQUAL, TokenType.NOT),
    '=': ('=', TokenType.EQUAL_EQUAL, TokenType.ASSIGN),
    '>': ('=', TokenType.G_EQUAL, TokenType.GREATER),
    '<': ('=', TokenType.L_EQUAL, TokenType.LESS),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.diagnostics: List[ScanDiagnostic] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.END_OF_FILE, "", None, self.line))
        return self.tokens

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in TWO_CHAR_TOKENS:
            second, double, single = TWO_CHAR_TOKENS[c]
            self.add_token(double if self.match(second) else single)
        elif c in (' ', '\r', '\t'):
            return
        elif c == '\n':
            self.line += 1
        elif c in SIGIL_CHARS and self.peek().isalpha():
            self.identifier(TokenType.SIGIL_IDENT)
        elif c == '%':
            self.add_token(TokenType.MODULO)
        elif self.source.startswith(COMMENT_OPENER, self.start):
            self.current = self.start + len(COMMENT_OPENER)
            self.comment()
        elif c.isalpha():
            self.identifier()
        elif is_digit(c):
            self.number()
        elif c == '"':
            self.string()
        elif c == '\'':
            self.char()
        else:
            self.report(f"Unexpected character: '{c}'")

    def comment(self):
        while not self.is_at_end() and self.peek() != '.':
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.report("Comment Incomplete")
            return
        self.advance()  # closing '.'

    def identifier(self, type_: TokenType = TokenType.IDENTIFIER):
        while self.peek().isalnum() or self.peek() == '_':
            self.advance()
        if type_ is TokenType.IDENTIFIER:
            type_ = KEYWORDS.get(self.source[self.start:self.current], TokenType.IDENTIFIER)
        self.add_token(type_)

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # a trailing '.' without digits after it is not part of the number
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenType.NUM, float(self.source[self.start:self.current]))

    def string(self):
        while not self.is_at_end() and self.peek() != '"':
            if self.peek() == '\n':
                self.line += 1
            self.advance()
        if self.is_at_end():
            self.report("Unterminated string.")
            return
        self.advance()  # closing quote
        self.add_token(TokenType.STR, self.source[self.start + 1:self.current - 1])

    def char(self):
        while not self.is_at_end() and self.peek() not in ('\'', '\n'):
            self.advance()
        if self.peek() != '\'':
            self.report("Unterminated character literal.")
            return
        self.advance()  # closing quote
        value = self.source[self.start + 1:self.current - 1]
        if len(value) != 1:
            self.report("Character literal must be exactly one character.")
            return
        self.add_token(TokenType.CHAR, value)

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def add_token(self, type_: TokenType, literal: Any = None):
        self.tokens.append(Token(type_, self.source[self.start:self.current], literal, self.line))

    def report(self, message: str):
        self.diagnostics.append(ScanDiagnostic(self.line, message))
