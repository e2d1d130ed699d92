"""Untyped lambda calculus front end.

For reference:
- "Pure lambda calculus": lambda calculus as defined by Church, written with "\\" for λ (\\x y . y x)
- "Canonical form": the minimally parenthesized text print_term produces

Basic program flow:
    1. Tokenizer: turns source into tokens on demand (pure/lexical.py)
    2. Parser: recursive descent over the tokens, producing a tree of Variables, Applications and Abstractions
       (pure/parser.py, pure/term.py)
    3. Printer: renders a tree back to canonical form (pure/printer.py)

Everything in lang/ (error reporting, sessions, the shell) is glue around parse and print_term.
"""

from lcparse.lang.error import ErrorKind, NameTooLong, ParseError, UnexpectedToken, UnknownToken
from lcparse.pure.parser import parse
from lcparse.pure.printer import print_term
from lcparse.pure.term import Abstraction, Application, LambdaTerm, Variable

__all__ = [
    "Abstraction", "Application", "ErrorKind", "LambdaTerm", "NameTooLong", "ParseError", "UnexpectedToken",
    "UnknownToken", "Variable", "parse", "print_term",
]
