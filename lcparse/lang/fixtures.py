"""Reference λ-terms in canonical form. Each one must print back exactly as written after being parsed."""

from lcparse.lang.error import LambdaException
from lcparse.pure.parser import parse
from lcparse.pure.printer import print_term

FIXTURES = (
    "x",
    "x x",
    "x x x",
    "x (x x)",
    "(\\x . x) x",
    "x (\\x . x)",
    "x x (x x) x",
    "\\x y . y (x x)",
    "\\x y z . x (y z)",
    "\\x . x x (x x)",
    "x x (\\x . x (\\x . x)) x",
    "(\\x . x x) (\\y z . z x y) (x x x)",
)


def check(expr):
    """Parses expr and raises a LambdaException unless it prints back as expr."""
    printed = print_term(parse(expr))
    if printed != expr:
        raise LambdaException("round trip failed\nexpected: {}\n     got: {}", [expr, printed], diagnosis=False)
    return printed


def run_all(exprs=FIXTURES):
    """Checks every expr, stopping at the first failure. Returns the number of exprs checked."""
    for expr in exprs:
        check(expr)
    return len(exprs)
