"""Interactive mode for the GenZ interpreter. Uses cmd as backend."""

import cmd

from .errors import ErrorHandler
from .interpreter import Interpreter, run_source


class Shell(cmd.Cmd):
    """GenZ interpreter shell. Each line is run on its own against a shared
    global scope, and bare expressions echo their value. Lines starting with
    `?` are taken by cmd as `help` and never reach the parser."""
    intro = "GenZ interpreter :: Python backend\nType 'help' for more information, 'exit' to leave."
    prompt = "> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter
        self.error_handler = ErrorHandler()

    def default(self, line):
        """Executes an arbitrary GenZ line."""
        run_source(line, self.interpreter, self.error_handler)

    def do_help(self, arg):
        """Prints a short tour of the language instead of command docs."""
        print("Welcome to the GenZ interpreter!\n\n"
              "Declare typed variables with a sigil: 'tea @name as \"Jess\"' (text),\n"
              "'tea $age as 17' (integer) or 'tea %rate as 2.5' (number).\n"
              "Print with 'spill $age', read input with 'listen \"Name? \" as @name',\n"
              "branch with 'bet $age >= 18 : spill \"adult\" end deadass : spill \"minor\" end'.\n"
              "Comments look like 'FYI. this is ignored.'")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
