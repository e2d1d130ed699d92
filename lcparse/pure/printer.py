"""Renders λ-terms in canonical form: the surface syntax with as few parentheses as possible.

- an Abstraction in function position is parenthesized (its body would otherwise swallow the argument)
- an argument is parenthesized unless it is a Variable
- nested Abstractions are printed as one binder: \\x . \\y . M becomes \\x y . M

Parsing the output of print_term gives back a tree that prints to the same text. Missing or malformed nodes print as
NULL instead of failing, so that half-built trees can still be inspected.
"""

from io import StringIO

from lcparse.pure.term import Abstraction, Application, Variable

NULL = "NULL"


def _print_variable(variable, out):
    if not isinstance(variable, Variable) or not variable.name:
        out.write(NULL)
    else:
        out.write(variable.name)


def _print_term(term, out, with_paren):
    """with_paren is decided by the caller: whether term sits where trailing tokens would be grouped with it."""
    if isinstance(term, Variable):
        _print_variable(term, out)

    elif isinstance(term, Application):
        if with_paren:
            out.write("(")

        # f a b c is ((f a) b) c: print the head once, then the arguments left to right
        arguments = []
        head = term
        while isinstance(head, Application):
            arguments.append(head.argument)
            head = head.function

        _print_term(head, out, isinstance(head, Abstraction))
        for argument in reversed(arguments):
            out.write(" ")
            _print_term(argument, out, True)
        if with_paren:
            out.write(")")

    elif isinstance(term, Abstraction):
        if with_paren:
            out.write("(")
        out.write("\\")

        parameters, body = term.uncurry()
        for parameter in parameters:
            _print_variable(parameter, out)
            out.write(" ")

        out.write(". ")
        _print_term(body, out, False)
        if with_paren:
            out.write(")")

    else:
        out.write(NULL)


def print_term(term):
    """Returns the canonical text of term."""
    out = StringIO()
    _print_term(term, out, False)
    return out.getvalue()
