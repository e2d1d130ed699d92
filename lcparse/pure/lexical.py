"""Pure lambda calculus tokenizer.

Tokens are produced on demand: the parser asks for the next token whenever it has consumed the current one, so no
token list is ever materialized. The tokenizer keeps track of where it is in the source (1-based line, 0-based column
and the index where the current line starts) so that errors can point at the offending character.
"""

from enum import Enum
from string import ascii_letters

from lcparse.lang.error import Diagnostic, NameTooLong, UnknownToken


class Token(Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    VARIABLE = "variable"
    POINT = "."
    BACKSLASH = "\\"
    EOF = "end of input"


SINGLE_CHAR_TOKENS = {
    "(": Token.LEFT_PAREN,
    ")": Token.RIGHT_PAREN,
    ".": Token.POINT,
    "\\": Token.BACKSLASH,
}

WHITESPACE = " \t\n\r\v\f"


class Tokenizer:
    """Splits source into tokens one next_token call at a time."""
    MAX_NAME_LEN = 63

    def __init__(self, source, size=None):
        """source is a str, or bytes (one character per byte). If size is given, only source[:size] is read."""
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("latin-1")
        if size is not None:
            source = source[:size]

        self.source = source
        self.offset = 0

        self.line = 1
        self.column = 0
        self.line_start = 0

        self.token = None
        self.variable = None

        # where the current token starts
        self.token_line = 1
        self.token_column = 0
        self.token_line_start = 0

    def peek(self):
        """Returns the current character, or None at end of input."""
        if self.offset >= len(self.source):
            return None
        return self.source[self.offset]

    def proceed(self):
        """Consumes the current character, updating the position."""
        char = self.peek()
        if char is None:
            return

        self.offset += 1
        if char == "\n":
            self.line += 1
            self.column = 0
            self.line_start = self.offset
        else:
            self.column += 1

    def line_text(self, line_start=None):
        """Returns the text of the line starting at line_start (defaults to the current line), without newline."""
        if line_start is None:
            line_start = self.line_start

        end = self.source.find("\n", line_start)
        return self.source[line_start:] if end == -1 else self.source[line_start:end]

    def diagnostic(self, message, at_token=False):
        """Builds a Diagnostic at the current position, or at the start of the current token if at_token."""
        if at_token:
            line, column, line_start = self.token_line, self.token_column, self.token_line_start
        else:
            line, column, line_start = self.line, self.column, self.line_start
        return Diagnostic(message, line, column, line_start, self.line_text(line_start))

    def next_token(self):
        """Skips whitespace and reads the next token into self.token (and self.variable for VARIABLE tokens).
        End of input is the EOF token, never an error. Raises UnknownToken or NameTooLong.
        """
        char = self.peek()
        while char is not None and char in WHITESPACE:
            self.proceed()
            char = self.peek()

        self.token_line, self.token_column, self.token_line_start = self.line, self.column, self.line_start
        self.variable = None

        if char is None:
            self.token = Token.EOF

        elif char in SINGLE_CHAR_TOKENS:
            self.token = SINGLE_CHAR_TOKENS[char]
            self.proceed()

        elif char in ascii_letters:
            self.token = Token.VARIABLE
            self.variable = self._read_name()

        else:
            raise UnknownToken(self.diagnostic(f"Unknown token {char!r}."))

        return self.token

    def _read_name(self):
        """Reads the maximal run of letters starting at the current character."""
        start = self.offset
        while self.peek() is not None and self.peek() in ascii_letters:
            if self.offset - start == Tokenizer.MAX_NAME_LEN:
                msg = f"Variable name is longer than {Tokenizer.MAX_NAME_LEN} characters."
                raise NameTooLong(self.diagnostic(msg))
            self.proceed()
        return self.source[start:self.offset]
