"""Session control for lcparse: parsing statements read from a file, stdin or the interactive shell.

A statement is one λ-term. It usually fits on one line, but a line with unclosed parentheses is continued on the next
one, and the joined lines are parsed as a single buffer.
"""

import sys

from lcparse.lang.error import LambdaException
from lcparse.pure.lexical import Token
from lcparse.pure.parser import Parser
from lcparse.pure.printer import print_term


class Session:
    """Governs a parsing session: statements are added, then parsed and rendered by run."""
    SH_FILE = "<in>"     # command-line shell filename
    STDIN = "-"          # read statements from standard input
    STDIN_FILE = "<stdin>"

    def __init__(self, error_handler, path, strict=True, tree=False):
        self.path = self.STDIN_FILE if path == self.STDIN else path  # used for error messages
        self.error_handler = error_handler
        self.error_handler.register_file(self.path)

        self.strict = strict  # whether input after a complete term is an error
        self.tree = tree      # render results as trees instead of canonical text

        self.to_parse = {}  # dict of line num: statement to parse
        self.results = []   # rendered results, in order

        if path == Session.SH_FILE:
            return

        try:
            if path == Session.STDIN:
                self.load(sys.stdin)
            else:
                with open(path, "r") as file:
                    self.load(file)
        except OSError:
            raise LambdaException("'{}' could not be opened", path, diagnosis=False)

    def load(self, lines):
        """Adds every statement in lines (an iterable of lines, e.g. a file)."""
        exprs = []
        add_to_prev = False
        for line_num, line in enumerate(lines):
            __, add_to_prev = Session.preprocess_line(line, line_num + 1, add_to_prev, exprs)

        for expr, line_num in exprs:
            self.add(expr, line_num)

    @staticmethod
    def preprocess_line(line, line_num, add_to_prev, exprs=None):
        """Preprocesses a line from a file or the shell. If add_to_prev, line continues the previous statement. In
        shell mode exprs can be ignored; for files it collects (statement, first line num) pairs. Returns the
        (possibly joined) statement and whether it continues on the next line.
        """
        line = line.rstrip()

        if exprs is not None:
            if add_to_prev and exprs:
                prev, prev_num = exprs.pop()
                line = prev + "\n" + line
                exprs.append((line, prev_num))
            elif line.strip():
                exprs.append((line, line_num))

        return line, line.count("(") > line.count(")")

    def add(self, expr, line_num):
        """Queues expr for parsing. Raises ValueError if expr is blank."""
        if not expr.strip():
            raise ValueError("statement cannot be empty")
        self.to_parse[line_num] = expr

    def run(self):
        """Parses every queued statement, appending its rendering to self.results. Parse errors are raised after the
        offending statement has been registered with the error handler.
        """
        for line_num, expr in list(self.to_parse.items()):
            self.error_handler.register_line(self.path, expr, line_num)

            try:
                parser = Parser(expr)
                term = parser.parse(self.strict)
            finally:
                del self.to_parse[line_num]

            if parser.token is not Token.EOF:
                diagnostic = parser.tokenizer.diagnostic("", at_token=True)
                self.error_handler.warn("input after the λ-term is ignored", diagnostic.line,
                                        start=diagnostic.line_offset, end=len(diagnostic.line))

            self.results.append(term.display() if self.tree else print_term(term))
            self.error_handler.remove_line(self.path)

    def pop(self):
        """Removes and returns the oldest rendered result."""
        return self.results.pop(0)
