"""Runtime values and helpers for GenZ.

GenZ values are plain Python objects:

    ghosted    None
    boolean    bool
    number     float
    integer    int (produced by the `$` sigil; never a bool)
    text       str
    character  Char

This module holds the rules every operator and statement shares: how a
value is named in messages, how it prints, what counts as true, when two
values are equal, and what the declared-type sigils accept.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


SIGIL_KINDS = {
    '@': 'text',
    '$': 'integer',
    '%': 'number',
}

# what `listen` accepts for `$` and `%` targets, after trimming the line
INTEGER_INPUT = re.compile(r"[+-]?[0-9]+")
NUMBER_INPUT = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class Char:
    """A single character, kept apart from one-letter text."""
    value: str

    def __str__(self) -> str:
        return self.value


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_name(value: Any) -> str:
    """Return the GenZ kind of a runtime value, for error messages."""
    if value is None:
        return 'ghosted'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, int):
        return 'integer'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'text'
    if isinstance(value, Char):
        return 'character'
    return type(value).__name__


def to_string(value: Any) -> str:
    """Render a value the way `spill` prints it."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is None and b is None
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def strip_sigil(lexeme: str) -> str:
    lexeme = lexeme.strip()
    if lexeme[:1] in SIGIL_KINDS:
        return lexeme[1:]
    return lexeme


def to_integer(value: float) -> int:
    """Convert a float to int only when it has no fractional part.

    Raises TypeError otherwise; the caller turns it into a GenZ error.
    """
    if not value.is_integer():
        raise TypeError(f"expected integer, got number {to_string(value)}")
    return int(value)


def check_sigil(value: Any, sigil: str) -> bool:
    """Check a value against the kind a sigil declares.

    Ghosted always passes. Raises TypeError (not a GenZ error) describing
    the mismatch; the caller should wrap it with the offending token.
    """
    if value is None:
        return True
    if sigil == '@':
        if isinstance(value, str):
            return True
    elif sigil == '$':
        if isinstance(value, int) and not isinstance(value, bool):
            return True
        if isinstance(value, float) and value.is_integer():
            return True
    elif sigil == '%':
        if isinstance(value, float):
            return True
    else:
        raise TypeError(f"unknown sigil {sigil!r}")
    raise TypeError(f"expected {SIGIL_KINDS[sigil]}, got {type_name(value)}")


def convert_input(raw: str, sigil: str) -> Any:
    """Convert a line read by `listen` according to the target's sigil.

    Surrounding whitespace is ignored for `$` and `%`. Anything that is not
    plain decimal notation (`4_2`, `inf`, `0x10`) reads as zero.
    """
    if sigil == '$':
        text = raw.strip()
        if not INTEGER_INPUT.fullmatch(text):
            return 0
        try:
            return int(text)
        except ValueError:
            # longer than the interpreter's digit limit
            return 0
    if sigil == '%':
        text = raw.strip()
        if not NUMBER_INPUT.fullmatch(text):
            return 0.0
        return float(text)
    return raw
