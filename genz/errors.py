"""Error types and error reporting for the GenZ interpreter.

Scanning problems are collected as diagnostics and never stop the run.
Parse and runtime errors are raised as exceptions and caught by an
ErrorHandler at the top of a run (or of a shell line), which prints them
and lets the process carry on. Unexpected Python errors are caught there
as well.
"""

from dataclasses import dataclass
from typing import Optional

from termcolor import colored

from .tokens import Token


class GenZError(Exception):
    """Base class for every language-level failure."""


class ParseError(GenZError):
    """Raised by the parser; aborts the parse of the current input."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class GenZRuntimeError(GenZError):
    """Raised while evaluating; aborts the current statement."""
    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message


class UndefinedVariableError(GenZError):
    def __init__(self, name: str):
        super().__init__(f"Undefined variable '{name}'.")
        self.name = name


@dataclass(frozen=True)
class ScanDiagnostic:
    line: int
    message: str


class ErrorHandler:
    """Context manager that reports errors instead of letting them escape.

    GenZ errors are reported with their line. Any other exception (or a
    keyboard interrupt) is reported as a bare runtime error, so a bad line
    never takes the process down.
    """
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self):
        self.had_error = False

    @staticmethod
    def location(line: Optional[int]) -> str:
        return colored(f"[line {line}] ", attrs=["bold"]) if line is not None else ""

    def warn(self, diagnostic: ScanDiagnostic):
        print(self.location(diagnostic.line) + colored(diagnostic.message, ErrorHandler.WARNING))

    def throw(self, error: BaseException):
        self.had_error = True
        if isinstance(error, ParseError):
            label, line = "Parse Error: ", error.token.line
        elif isinstance(error, GenZRuntimeError):
            label, line = "Runtime error: ", error.token.line
        else:
            label, line = "Runtime Error: ", None
        if isinstance(error, KeyboardInterrupt):
            message = "keyboard interrupt"
        elif isinstance(error, RecursionError):
            message = "maximum recursion depth exceeded"
        else:
            message = str(error) or type(error).__name__
        print(self.location(line) + colored(label, ErrorHandler.ERROR, attrs=["bold"]) + message)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            return False
        # SystemExit and other non-Exception signals keep propagating
        if issubclass(exc_type, (Exception, KeyboardInterrupt)):
            self.throw(exc_val)
            return True
        return False
