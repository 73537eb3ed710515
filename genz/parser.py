"""Recursive-descent parser for the GenZ language.

Expressions are parsed by precedence climbing, from lowest to highest:

    logic_or   := logic_and ("|" logic_and)*
    logic_and  := equality ("&" equality)*
    equality   := comparison (("==" | "!=") comparison)*
    comparison := term (("<" | ">" | "<=" | ">=") term)*
    term       := factor (("+" | "-") factor)*
    factor     := unary (("*" | "/" | "%") unary)*
    unary      := ("!" | "-") unary | power
    power      := primary ("^" unary)?
    primary    := NUM | STR | CHAR | "fr" | "cap" | "ghosted"
                | IDENTIFIER | SIGIL_IDENT | "(" logic_or ")"

Statements need no separators; the parser decides what a statement is from
its first token, with one token of lookahead to tell an assignment from an
expression statement. The first error aborts the whole parse.
"""

from __future__ import annotations

from typing import List, Optional

from .ast import (
    Expr, Stmt, Number, String, CharLiteral, Boolean, GHOSTED, Identifier,
    Group, Unary, Binary, Print, ExpressionStatement, VarDecl, Assign, Block,
    If, Listen,
)
from .errors import ParseError
from .keywords import BLOCK_TERMINATORS
from .tokens import Token, TokenType


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def peek_next(self) -> Optional[Token]:
        if self.pos + 1 < len(self.tokens):
            return self.tokens[self.pos + 1]
        return None

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type is TokenType.END_OF_FILE

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def check(self, *types: TokenType) -> bool:
        return not self.is_at_end() and self.peek().type in types

    def match(self, *types: TokenType) -> bool:
        if self.check(*types):
            self.advance()
            return True
        return False

    def consume(self, type_: TokenType, message: str) -> Token:
        if self.check(type_):
            return self.advance()
        raise ParseError(self.peek(), message)

    def parse_program(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            statements.append(self.parse_statement())
        return statements

    ###########################################################################
    # Statements
    ###########################################################################

    def parse_statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return Print(self.parse_expression())
        if self.match(TokenType.INPUT):
            return self.parse_listen()
        if self.match(TokenType.VAR):
            self.consume(TokenType.SIGIL_IDENT, "Expect sigil variable (e.g., $age) after 'tea'.")
            return self.parse_var_decl()
        if self.match(TokenType.SIGIL_IDENT):
            return self.parse_var_decl()
        if self.match(TokenType.COLON):
            return Block(self.parse_block())
        if self.match(TokenType.IF):
            return self.parse_if()
        next_token = self.peek_next()
        if (self.check(TokenType.IDENTIFIER, TokenType.SIGIL_IDENT)
                and next_token is not None and next_token.type is TokenType.ASSIGNMENT):
            return self.parse_assignment()
        return ExpressionStatement(self.parse_expression())

    def parse_block(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.check(*BLOCK_TERMINATORS) and not self.is_at_end():
            statements.append(self.parse_statement())
        # a missing terminator at end of input is tolerated
        self.match(*BLOCK_TERMINATORS)
        return statements

    def parse_if(self) -> If:
        condition = self.parse_expression()
        then_branch = self.parse_statement()
        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.parse_statement()
        return If(condition, then_branch, else_branch)

    def parse_var_decl(self) -> VarDecl:
        sigil_token = self.previous()
        name = Token(TokenType.IDENTIFIER, sigil_token.lexeme[1:], None, sigil_token.line)
        self.consume(TokenType.ASSIGNMENT, "Expect 'as' in variable declaration.")
        initializer = self.parse_expression()
        return VarDecl(sigil_token.lexeme[0], name, initializer)

    def parse_assignment(self) -> Assign:
        name = self.advance()
        self.consume(TokenType.ASSIGNMENT, "Expect 'as' after variable name.")
        return Assign(name, self.parse_expression())

    def parse_listen(self) -> Listen:
        prompt = self.consume(TokenType.STR, "Expect prompt string after 'listen'.")
        self.consume(TokenType.ASSIGNMENT, "Expect 'as' after prompt string.")
        target = self.consume(TokenType.SIGIL_IDENT, "Expect variable for input (e.g., @name).")
        return Listen(prompt.literal, target)

    ###########################################################################
    # Expressions
    ###########################################################################

    def parse_expression(self) -> Expr:
        return self.parse_logic_or()

    def parse_binary(self, operand, *operators: TokenType) -> Expr:
        node = operand()
        while self.match(*operators):
            op_token = self.previous()
            node = Binary(node, op_token, operand())
        return node

    def parse_logic_or(self) -> Expr:
        return self.parse_binary(self.parse_logic_and, TokenType.OR)

    def parse_logic_and(self) -> Expr:
        return self.parse_binary(self.parse_equality, TokenType.AND)

    def parse_equality(self) -> Expr:
        return self.parse_binary(self.parse_comparison, TokenType.EQUAL_EQUAL, TokenType.NOT_EQUAL)

    def parse_comparison(self) -> Expr:
        return self.parse_binary(self.parse_term, TokenType.LESS, TokenType.GREATER,
                                 TokenType.L_EQUAL, TokenType.G_EQUAL)

    def parse_term(self) -> Expr:
        return self.parse_binary(self.parse_factor, TokenType.ADD, TokenType.MINUS)

    def parse_factor(self) -> Expr:
        return self.parse_binary(self.parse_unary, TokenType.MULTIPLY, TokenType.DIVIDE, TokenType.MODULO)

    def parse_unary(self) -> Expr:
        if self.match(TokenType.NOT, TokenType.MINUS):
            op_token = self.previous()
            return Unary(op_token, self.parse_unary())
        return self.parse_power()

    def parse_power(self) -> Expr:
        base = self.parse_primary()
        if self.match(TokenType.EXPONENT):
            op_token = self.previous()
            # re-entering unary makes '^' right-associative
            return Binary(base, op_token, self.parse_unary())
        return base

    def parse_primary(self) -> Expr:
        if self.match(TokenType.NUM):
            return Number(self.previous())
        if self.match(TokenType.STR):
            return String(self.previous())
        if self.match(TokenType.CHAR):
            return CharLiteral(self.previous())
        if self.match(TokenType.TRUE, TokenType.FALSE):
            return Boolean(self.previous())
        if self.match(TokenType.NULL):
            return GHOSTED
        if self.match(TokenType.IDENTIFIER, TokenType.SIGIL_IDENT):
            return Identifier(self.previous())
        if self.match(TokenType.LPAR):
            expr = self.parse_expression()
            self.consume(TokenType.RPAR, "Expect ')' after expression.")
            return Group(expr)
        raise ParseError(self.peek(), "Expect expression.")


def parse_tokens(tokens: List[Token]) -> List[Stmt]:
    return Parser(tokens).parse_program()
