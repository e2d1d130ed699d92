"""Error handling for lcparse. Parsing only ever raises LambdaExceptions: if another type of error makes it all the
way to ErrorHandler, it is assumed to be an internal issue (except for the few special cases handled in __exit__).
"""

import sys
from dataclasses import dataclass
from enum import IntEnum

from termcolor import colored


class ErrorKind(IntEnum):
    """Error codes of a parse. END_OF_INPUT is only used internally by the tokenizer and never raised by parse."""
    OK = 0
    END_OF_INPUT = 1
    UNKNOWN_TOKEN = 2
    UNEXPECTED_TOKEN = 3
    NAME_TOO_LONG = 4


@dataclass(frozen=True)
class Diagnostic:
    """Where a parse failed. line_number is 1-based, line_offset is 0-based and line_start is the index of the first
    character of the offending line within the parsed source.
    """
    message: str
    line_number: int
    line_offset: int
    line_start: int
    line: str


class LambdaException(Exception):
    """Templates an error/warning message. msg may contain '{}' placeholders that are filled with exprs (which are
    bolded when displayed). exprs[0] should be the offending expression, and start/end delimit the part of it to
    highlight.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        self.template = msg
        self.exprs = list(exprs)
        self.expr = self.exprs[0]
        self.start = start
        self.end = end if end != -1 else len(self.expr)

        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.message())

    def message(self, bold=False):
        """Formats the template with exprs, bolding the exprs if requested."""
        if bold:
            return self.template.format(*(colored(expr, attrs=["bold"]) for expr in self.exprs))
        return self.template.format(*self.exprs)

    @property
    def msg(self):
        return self.message()


class ParseError(LambdaException):
    """Fatal error of a single parse call. The offending expression is the offending source line."""
    kind = ErrorKind.OK

    def __init__(self, diagnostic):
        self.diagnostic = diagnostic

        template = diagnostic.message.replace("{", "{{").replace("}", "}}")
        super().__init__(template, diagnostic.line, start=diagnostic.line_offset, end=diagnostic.line_offset + 1)

    @property
    def line_number(self):
        return self.diagnostic.line_number

    @property
    def line_offset(self):
        return self.diagnostic.line_offset


class UnknownToken(ParseError):
    """Lexical error: a character that starts no token."""
    kind = ErrorKind.UNKNOWN_TOKEN


class UnexpectedToken(ParseError):
    """Syntactic error: a valid token in a position where the grammar does not allow it."""
    kind = ErrorKind.UNEXPECTED_TOKEN


class NameTooLong(ParseError):
    """Lexical error: a variable name longer than the tokenizer's name cap."""
    kind = ErrorKind.NAME_TOO_LONG


class ErrorHandler:
    """Context manager that reports LambdaExceptions (and converts unexpected Python errors into reports)."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, file=None):
        self.fatal = fatal
        self.file = file
        self.traceback = {}

    def _print(self, text):
        print(text, file=self.file if self.file is not None else sys.stdout)

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers the statement being processed. Should be called before parsing it."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after a successful parse."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns error.expr with the offending part highlighted and a caret pointing at it."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        start = min(error.start, len(error.expr))
        end = max(error.end, start + 1)

        diagnosis = "  " + error.expr[:start]
        diagnosis += colored(error.expr[start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), color, attrs=["bold"])

        return diagnosis

    def _location(self, error):
        """Returns 'path:line:col: ' for the most recently registered line, if any."""
        for file, (line, line_num) in reversed(self.traceback.items()):
            if line is not None:
                if isinstance(error, ParseError):
                    return f"{file}:{line_num + error.line_number - 1}:{error.line_offset}: "
                return f"{file}:{line_num}: "
        return ""

    def warn(self, *args, **kwargs):
        """Generates and prints a warning message based on args."""
        error = LambdaException(*args, **kwargs)

        warning_msg = colored(self._location(error), attrs=["bold"])
        warning_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.message(bold=True)
        self._print(warning_msg)

        if not error.internal and error.expr and error.diagnosis:
            self._print(ErrorHandler.diagnose(error, warning=True))

    def throw(self, error):
        """Prints error along with the registered traceback. Exits if this handler is fatal."""
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():
            if line:
                first_line = line.partition("\n")[0]  # multi-line statements only show their first line
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {first_line}\n"
                lines += 1

        if lines:
            error_msg = "Traceback:\n" + error_msg

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored(self._location(error), attrs=["bold"])
        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.message(bold=True)
        self._print(error_msg)

        if not error.internal and error.expr and error.diagnosis:
            self._print(ErrorHandler.diagnose(error))

        if self.fatal:
            sys.exit(1)
        for path in self.traceback:
            self.remove_line(path)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LambdaException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LambdaException("λ-term is nested too deeply to parse"))
        elif exc_type is not None and issubclass(exc_type, LambdaException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LambdaException("unknown error: '{}: {}'", [exc_type.__name__, str(exc_val)], internal=True))
            do_exit = True

        return not do_exit
