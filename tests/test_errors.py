import pytest

from genz.errors import (
    ErrorHandler, GenZError, GenZRuntimeError, ParseError, ScanDiagnostic, UndefinedVariableError,
)
from genz.tokens import Token, TokenType


TOKEN = Token(TokenType.IDENTIFIER, 'x', None, 7)


def test_parse_error_report(capsys):
    handler = ErrorHandler()
    with handler:
        raise ParseError(TOKEN, "Expect expression.")
    assert handler.had_error
    assert capsys.readouterr().out == "[line 7] Parse Error: Expect expression.\n"


def test_runtime_error_report(capsys):
    with ErrorHandler():
        raise GenZRuntimeError(TOKEN, "Division by zero.")
    assert capsys.readouterr().out == "[line 7] Runtime error: Division by zero.\n"


def test_other_language_errors_have_no_line(capsys):
    with ErrorHandler():
        raise UndefinedVariableError('x')
    assert capsys.readouterr().out == "Runtime Error: Undefined variable 'x'.\n"


def test_keyboard_interrupt_is_reported(capsys):
    handler = ErrorHandler()
    with handler:
        raise KeyboardInterrupt
    assert handler.had_error
    assert capsys.readouterr().out == "Runtime Error: keyboard interrupt\n"


def test_unexpected_python_errors_are_reported(capsys):
    handler = ErrorHandler()
    with handler:
        raise ValueError("math domain error")
    assert handler.had_error
    with handler:
        raise OverflowError
    with handler:
        raise RecursionError("deep")
    assert capsys.readouterr().out == (
        "Runtime Error: math domain error\n"
        "Runtime Error: OverflowError\n"
        "Runtime Error: maximum recursion depth exceeded\n"
    )


def test_system_exit_propagates():
    handler = ErrorHandler()
    with pytest.raises(SystemExit):
        with handler:
            raise SystemExit(1)
    assert not handler.had_error


def test_clean_block_leaves_no_error(capsys):
    handler = ErrorHandler()
    with handler:
        pass
    assert not handler.had_error
    assert capsys.readouterr().out == ''


def test_warning_is_not_an_error(capsys):
    handler = ErrorHandler()
    handler.warn(ScanDiagnostic(3, "Unterminated string."))
    assert not handler.had_error
    assert capsys.readouterr().out == "[line 3] Unterminated string.\n"


def test_hierarchy():
    assert issubclass(ParseError, GenZError)
    assert issubclass(GenZRuntimeError, GenZError)
    assert issubclass(UndefinedVariableError, GenZError)
