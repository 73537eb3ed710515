"""CLI entry point for the GenZ interpreter.

Usage:
    python -m genz [-v|-vv|-vvv|-vvvv] [--debug-file PATH] [program_file]
    python -m genz [-v...] --emit-ast <program_file>
    python -m genz [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug information goes (default: debug.txt)
  --emit-ast    Parse the given .genz file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a program file the interactive shell is started. Debug information
is written to the debug file only when verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast_json import program_to_obj, program_from_obj
from .errors import ErrorHandler
from .interpreter import parse_program, run_source, Interpreter
from .shell import Shell


def read_source(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='genz', description="GenZ language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', help='file receiving debug output (default: debug.txt)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='GENZ_FILE', help='emit AST JSON for the given .genz file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='GenZ program file (.genz) to execute; omit for the shell')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        error_handler = ErrorHandler()
        with error_handler:
            statements = parse_program(source, error_handler)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
            print(str(out_path))
        sys.exit(1 if error_handler.had_error else 0)

    interpreter = Interpreter(interactive=not (args.ast or args.program), debug_level=args.v,
                              debug_file=args.debug_file)
    try:
        # Execute from AST JSON
        if args.ast:
            data = json.loads(read_source(Path(args.ast)))
            statements = program_from_obj(data)
            error_handler = ErrorHandler()
            with error_handler:
                interpreter.run(statements)
            sys.exit(1 if error_handler.had_error else 0)

        # Default: execute source file, or start the shell
        if args.program:
            source = read_source(Path(args.program))
            ok = run_source(source, interpreter, ErrorHandler())
            sys.exit(0 if ok else 1)

        Shell(interpreter).cmdloop()
    finally:
        interpreter.close()


if __name__ == '__main__':
    main()
