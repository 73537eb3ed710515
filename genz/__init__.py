# GenZ language package
# This package provides a scanner, parser and tree-walking interpreter for GenZ.
from .errors import GenZError, ParseError, GenZRuntimeError
from .interpreter import parse_program, run_program, run_source, Interpreter

__all__ = [
    'parse_program',
    'run_program',
    'run_source',
    'Interpreter',
    'GenZError',
    'ParseError',
    'GenZRuntimeError',
]
