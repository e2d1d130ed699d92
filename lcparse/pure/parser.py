"""Recursive descent parser for pure lambda calculus.

Application associates to the left, so the natural grammar is left-recursive:

```
T -> \\ vars . T
T -> T T
T -> ( T )
T -> var
```

A top-down parser cannot follow T -> T T, so application is parsed as a term followed by a tail that folds whatever
follows into the term parsed so far:

```
T       -> \\ vars . T
T       -> ( T ) T'(T)
T       -> var T'(var)
T'(l)   -> \\ vars . T           => Application(l, Abstraction)
T'(l)   -> ( T ) T'(l T)        => the application becomes the new left operand
T'(l)   -> var T'(l var)
T'(l)   -> <eps>                => l
```

Errors are raised as exceptions, so a partially built tree is simply dropped on the way out.
"""

from lcparse.lang.error import UnexpectedToken
from lcparse.pure.lexical import Token, Tokenizer
from lcparse.pure.term import Abstraction, Application, Variable


class Parser:
    """Parses a single λ-term from source. Each Parser owns its tokenizer and is used for exactly one parse."""

    def __init__(self, source, size=None):
        self.tokenizer = Tokenizer(source, size)

    @property
    def token(self):
        return self.tokenizer.token

    def advance(self):
        return self.tokenizer.next_token()

    def unexpected(self, msg):
        """Returns an UnexpectedToken pointing at the current token."""
        return UnexpectedToken(self.tokenizer.diagnostic(msg, at_token=True))

    def parse(self, strict=True):
        """Parses the source. If strict, anything after the term is an error, otherwise it is ignored."""
        self.advance()
        term = self.parse_term()

        if strict and self.token is not Token.EOF:
            raise self.unexpected("Expected end of input.")
        return term

    def parse_term(self):
        """T -> \\ vars . T | ( T ) T' | var T'"""
        if self.token is Token.BACKSLASH:
            return self.parse_abstraction()

        elif self.token is Token.LEFT_PAREN:
            return self.parse_application(self.parse_parenthesized())

        elif self.token is Token.VARIABLE:
            left = Variable(self.tokenizer.variable)
            self.advance()
            return self.parse_application(left)

        raise self.unexpected("Expected one of ['\\', '(', variable].")

    def parse_abstraction(self):
        """\\ var+ . T, desugared into one Abstraction per variable."""
        if self.token is not Token.BACKSLASH:
            raise self.unexpected("Expected '\\'.")

        self.advance()
        if self.token is not Token.VARIABLE:
            raise self.unexpected("Expected variable.")

        parameters = []
        while self.token is Token.VARIABLE:
            parameters.append(Variable(self.tokenizer.variable))
            self.advance()

        if self.token is not Token.POINT:
            raise self.unexpected("Expected '.' or variable.")

        self.advance()
        return Abstraction.curry(parameters, self.parse_term())

    def parse_parenthesized(self):
        """( T )"""
        self.advance()
        term = self.parse_term()

        if self.token is not Token.RIGHT_PAREN:
            raise self.unexpected("Expected ')'.")

        self.advance()
        return term

    def parse_application(self, left):
        """T'(left): folds every following operand into left. An abstraction operand ends the tail because its body
        extends as far right as possible.
        """
        while True:
            if self.token is Token.BACKSLASH:
                return Application(left, self.parse_abstraction())

            elif self.token is Token.LEFT_PAREN:
                left = Application(left, self.parse_parenthesized())

            elif self.token is Token.VARIABLE:
                left = Application(left, Variable(self.tokenizer.variable))
                self.advance()

            else:
                return left


def parse(source, size=None, strict=True):
    """Parses one λ-term from source (str or bytes; only source[:size] if size is given).

    Raises UnknownToken, UnexpectedToken or NameTooLong (all ParseErrors) on failure. With strict=False, input left
    over after a complete term is ignored instead of rejected.
    """
    return Parser(source, size).parse(strict)
