"""Tree-walking interpreter for the GenZ language.

The front end turns source text into tokens (scanner.py) and tokens into a
list of statements (parser.py). The Interpreter then executes the statements
one by one against the global environment. Nested blocks run in a fresh
child environment that is passed down explicitly, so the enclosing scope is
back in effect as soon as the block returns or raises.

Variables named with a sigil carry a declared kind: `@` text, `$` integer,
`%` number. Declarations always bind in the current scope, so a block can
shadow an outer name. Assignments and `listen` upsert: rebind the name
where it already lives, or define it in the current scope.
"""

from __future__ import annotations

import builtins
import math
from typing import Any, Callable, List, Optional

from .ast import (
    Expr, Stmt, Number, String, CharLiteral, Boolean, GhostedNull, Identifier,
    Group, Unary, Binary, Print, ExpressionStatement, VarDecl, Assign, Block,
    If, Listen,
)
from .environment import Environment
from .errors import ErrorHandler, GenZRuntimeError, UndefinedVariableError
from .parser import parse_tokens
from .scanner import Scanner
from .tokens import Token, TokenType
from .types import (
    Char, SIGIL_KINDS, check_sigil, convert_input, is_equal, is_number,
    is_truthy, strip_sigil, to_integer, to_string, type_name,
)


def parse_program(source: str, error_handler: Optional[ErrorHandler] = None,
                  debug: Optional[Callable[..., None]] = None) -> List[Stmt]:
    """Scan and parse GenZ source into a statement list.

    Scan diagnostics are reported through error_handler (a fresh one if not
    given). A ParseError propagates to the caller. `debug` is an optional
    tracing hook taking (message, level), normally Interpreter.debug.
    """
    if error_handler is None:
        error_handler = ErrorHandler()
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if debug:
        debug(f"scanned {len(tokens)} token(s), {len(scanner.diagnostics)} diagnostic(s)")
        for token in tokens:
            debug(f"token {token.type.name} {token.lexeme!r} line {token.line}", 4)
    for diagnostic in scanner.diagnostics:
        if debug:
            debug(f"diagnostic line {diagnostic.line}: {diagnostic.message}")
        error_handler.warn(diagnostic)
    statements = parse_tokens(tokens)
    if debug:
        debug(f"parsed {len(statements)} statement(s)")
    return statements


class Interpreter:
    """Executes GenZ statements against a global environment."""
    def __init__(self, interactive: bool = False, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = Environment()
        self.interactive = interactive
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None

    def debug(self, msg: str, level: int = 1):
        if self.debug_level >= level and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, statements: List[Stmt], env: Optional[Environment] = None):
        if env is None:
            env = self.global_env
        self.debug(f"run {len(statements)} statement(s)")
        self.execute_block(statements, env)

    def execute_block(self, statements: List[Stmt], env: Environment):
        for stmt in statements:
            self.execute(stmt, env)

    def execute(self, stmt: Stmt, env: Environment):
        if isinstance(stmt, Print):
            print(to_string(self.evaluate(stmt.expression, env)))
            return
        if isinstance(stmt, ExpressionStatement):
            value = self.evaluate(stmt.expression, env)
            if self.interactive:
                print(to_string(value))
            return
        if isinstance(stmt, VarDecl):
            value = self.evaluate(stmt.initializer, env)
            value = self.coerce_to_sigil(value, stmt.sigil, stmt.name)
            # a declaration binds in the current scope, shadowing outer ones
            env.define(stmt.name.lexeme, value)
            self.debug(f"define {stmt.name.lexeme} = {to_string(value)} at depth {env.depth}", 2)
            return
        if isinstance(stmt, Assign):
            value = self.evaluate(stmt.value, env)
            sigil = stmt.name.lexeme[:1]
            if stmt.name.type is TokenType.SIGIL_IDENT and sigil in SIGIL_KINDS:
                if sigil == '@' and isinstance(value, Char):
                    value = value.value
                value = self.coerce_to_sigil(value, sigil, stmt.name)
            self.upsert(env, strip_sigil(stmt.name.lexeme), value)
            return
        if isinstance(stmt, Listen):
            raw = self.read_line(stmt.prompt)
            sigil = stmt.target.lexeme[:1]
            value = self.coerce_to_sigil(convert_input(raw, sigil), sigil, stmt.target)
            self.upsert(env, strip_sigil(stmt.target.lexeme), value)
            return
        if isinstance(stmt, Block):
            block_env = Environment(parent=env)
            self.debug(f"enter block at depth {block_env.depth}", 3)
            try:
                self.execute_block(stmt.statements, block_env)
            finally:
                self.debug(f"leave block at depth {block_env.depth}", 3)
            return
        if isinstance(stmt, If):
            cond = self.evaluate(stmt.condition, env)
            truthy = is_truthy(cond)
            self.debug(f"if condition {to_string(cond)} -> {truthy}", 3)
            if truthy:
                self.execute(stmt.then_branch, env)
            elif stmt.else_branch is not None:
                self.execute(stmt.else_branch, env)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(stmt)}")

    def read_line(self, prompt: str) -> str:
        try:
            return builtins.input(prompt)
        except EOFError:
            return ''

    def coerce_to_sigil(self, value: Any, sigil: str, name: Token) -> Any:
        """Apply the `$` float-to-integer rule, then validate against the sigil."""
        try:
            if sigil == '$' and isinstance(value, float):
                value = to_integer(value)
            check_sigil(value, sigil)
        except TypeError as e:
            raise GenZRuntimeError(name, f"Type mismatch for '{strip_sigil(name.lexeme)}': {e}.")
        return value

    def upsert(self, env: Environment, name: str, value: Any):
        if env.try_assign(name, value):
            self.debug(f"assign {name} = {to_string(value)}", 2)
        else:
            env.define(name, value)
            self.debug(f"define {name} = {to_string(value)} at depth {env.depth}", 2)

    def evaluate(self, expr: Expr, env: Environment) -> Any:
        if isinstance(expr, (Number, String)):
            return expr.token.literal
        if isinstance(expr, CharLiteral):
            return Char(expr.token.literal)
        if isinstance(expr, Boolean):
            return expr.token.type is TokenType.TRUE
        if isinstance(expr, GhostedNull):
            return None
        if isinstance(expr, Identifier):
            try:
                return env.get(strip_sigil(expr.token.lexeme))
            except UndefinedVariableError as e:
                raise GenZRuntimeError(expr.token, str(e))
        if isinstance(expr, Group):
            return self.evaluate(expr.expression, env)
        if isinstance(expr, Unary):
            operand = self.evaluate(expr.operand, env)
            if expr.operator.type is TokenType.NOT:
                return not is_truthy(operand)
            if expr.operator.type is TokenType.MINUS:
                if not is_number(operand):
                    raise GenZRuntimeError(expr.operator, f"Operand must be a number, got {type_name(operand)}.")
                return -operand
            raise GenZRuntimeError(expr.operator, f"Unsupported unary operator '{expr.operator.lexeme}'.")
        if isinstance(expr, Binary):
            # both sides are always evaluated, even for '&' and '|'
            left = self.evaluate(expr.left, env)
            right = self.evaluate(expr.right, env)
            return self.apply_binary_op(expr.operator, left, right)
        raise NotImplementedError(f"evaluate: unexpected node type {type(expr)}")

    def apply_binary_op(self, op: Token, a: Any, b: Any) -> Any:
        kind = op.type
        if kind is TokenType.ADD:
            if isinstance(a, str) and isinstance(b, str):
                return a + b
            if not is_number(a) and not isinstance(a, str):
                raise GenZRuntimeError(op, f"Left operand of '+' must be a number or text, got {type_name(a)}.")
            if is_number(a) and is_number(b):
                x, y = self.numeric_operands(op, a, b)
                return x + y
            expected = 'text' if isinstance(a, str) else 'a number'
            raise GenZRuntimeError(op, f"Right operand of '+' must be {expected}, got {type_name(b)}.")
        if kind in (TokenType.MINUS, TokenType.MULTIPLY, TokenType.DIVIDE, TokenType.MODULO, TokenType.EXPONENT):
            x, y = self.numeric_operands(op, a, b)
            if kind is TokenType.MINUS:
                return x - y
            if kind is TokenType.MULTIPLY:
                return x * y
            if kind is TokenType.DIVIDE:
                if y == 0.0:
                    raise GenZRuntimeError(op, "Division by zero.")
                return x / y
            if kind is TokenType.MODULO:
                if y == 0.0:
                    raise GenZRuntimeError(op, "Modulo by zero.")
                if math.isinf(x):
                    return math.nan
                return math.fmod(x, y)
            return self.power(x, y)
        if kind in (TokenType.LESS, TokenType.GREATER, TokenType.L_EQUAL, TokenType.G_EQUAL):
            x, y = self.numeric_operands(op, a, b)
            if kind is TokenType.LESS:
                return x < y
            if kind is TokenType.GREATER:
                return x > y
            if kind is TokenType.L_EQUAL:
                return x <= y
            return x >= y
        if kind is TokenType.EQUAL_EQUAL:
            return is_equal(a, b)
        if kind is TokenType.NOT_EQUAL:
            return not is_equal(a, b)
        if kind is TokenType.AND:
            return is_truthy(a) and is_truthy(b)
        if kind is TokenType.OR:
            return is_truthy(a) or is_truthy(b)
        raise GenZRuntimeError(op, f"Unknown operator '{op.lexeme}'.")

    @staticmethod
    def numeric_operands(op: Token, a: Any, b: Any):
        if not is_number(a):
            raise GenZRuntimeError(op, f"Left operand of '{op.lexeme}' must be a number, got {type_name(a)}.")
        if not is_number(b):
            raise GenZRuntimeError(op, f"Right operand of '{op.lexeme}' must be a number, got {type_name(b)}.")
        try:
            return float(a), float(b)
        except OverflowError:
            raise GenZRuntimeError(op, f"Operand of '{op.lexeme}' is too large for a number.")

    @staticmethod
    def power(x: float, y: float) -> float:
        try:
            return math.pow(x, y)
        except OverflowError:
            return -math.inf if x < 0 and y.is_integer() and y % 2 == 1 else math.inf
        except ValueError:
            # zero to a negative power, or a negative base to a fractional one
            return math.inf if x == 0.0 else math.nan


def run_source(source: str, interpreter: Interpreter, error_handler: ErrorHandler) -> bool:
    """Parse and execute one unit of source (a file, or one shell line).

    Errors are reported by error_handler and stop the unit; returns whether
    the unit ran without a reported error.
    """
    with error_handler:
        statements = parse_program(source, error_handler, interpreter.debug)
        interpreter.run(statements)
        return True
    return False


def run_program(source: str, interactive: bool = False, debug_level: int = 0) -> Interpreter:
    """Convenience function to run a GenZ program from a source string."""
    interpreter = Interpreter(interactive=interactive, debug_level=debug_level)
    try:
        run_source(source, interpreter, ErrorHandler())
    finally:
        interpreter.close()
    return interpreter
