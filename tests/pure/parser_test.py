import unittest

from lcparse.lang.error import ErrorKind, NameTooLong, ParseError, UnexpectedToken, UnknownToken
from lcparse.pure.parser import Parser, parse
from lcparse.pure.term import Abstraction, Application, Variable

x, y, z = Variable("x"), Variable("y"), Variable("z")


class ParseTestCase(unittest.TestCase):

    def test_parse(self):
        cases = {
            "x": x,
            "(x)": x,
            "((x))": x,
            " \n x \t": x,
            "x y": Application(x, y),
            "x x x": Application(Application(x, x), x),
            "x (y z)": Application(x, Application(y, z)),
            "(x y) z": Application(Application(x, y), z),
            "x (y z) x": Application(Application(x, Application(y, z)), x),
            "\\x . x": Abstraction("x", x),
            "\\x.x": Abstraction("x", x),
            "\\x y . y (x x)": Abstraction("x", Abstraction("y", Application(y, Application(x, x)))),
            "\\x . \\y . x": Abstraction("x", Abstraction("y", x)),
            "\\x . x y": Abstraction("x", Application(x, y)),
            "(\\x . x) y": Application(Abstraction("x", x), y),
            "x \\y . y z": Application(x, Abstraction("y", Application(y, z))),
            "x y \\z . z": Application(Application(x, y), Abstraction("z", z)),
            "(\\x . x) (y) z": Application(Application(Abstraction("x", x), y), z),
            "foo Bar": Application(Variable("foo"), Variable("Bar")),
            "x\n(y\nz)": Application(x, Application(y, z)),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case), case)

    def test_parse_bytes(self):
        self.assertEqual(Application(x, y), parse(b"x y"))
        self.assertEqual(x, parse(b"x y", size=1))

    def test_long_application(self):
        term = parse("x " * 5000)

        depth = 0
        while isinstance(term, Application):
            self.assertEqual(x, term.argument)
            term = term.function
            depth += 1
        self.assertEqual((4999, x), (depth, term))

    def test_unexpected_token(self):
        cases = {
            "": ("Expected one of ['\\', '(', variable].", 1, 0),
            ")": ("Expected one of ['\\', '(', variable].", 1, 0),
            "\\x": ("Expected '.' or variable.", 1, 2),
            "\\x y": ("Expected '.' or variable.", 1, 4),
            "\\x (": ("Expected '.' or variable.", 1, 3),
            "\\ . x": ("Expected variable.", 1, 2),
            "\\x . ": ("Expected one of ['\\', '(', variable].", 1, 5),
            "(x": ("Expected ')'.", 1, 2),
            "y (x": ("Expected ')'.", 1, 4),
            "x\n(y\nz": ("Expected ')'.", 3, 1),
            "x )": ("Expected end of input.", 1, 2),
            "x . y": ("Expected end of input.", 1, 2),
        }
        for case, (message, line_number, line_offset) in cases.items():
            with self.assertRaises(UnexpectedToken, msg=case) as context:
                parse(case)

            error = context.exception
            self.assertEqual(ErrorKind.UNEXPECTED_TOKEN, error.kind, case)
            self.assertEqual(message, error.diagnostic.message, case)
            self.assertEqual(message, str(error), case)
            self.assertEqual((line_number, line_offset), (error.line_number, error.line_offset), case)

    def test_lenient(self):
        cases = {
            "x )": x,
            "x . y": x,
            "(x y)) z": Application(x, y),
        }
        for case, expected in cases.items():
            self.assertEqual(expected, parse(case, strict=False), case)

        parser = Parser("x )")
        parser.parse(strict=False)
        self.assertEqual(")", parser.token.value)

    def test_lexical_errors(self):
        with self.assertRaises(UnknownToken) as context:
            parse("x\n  1")

        diagnostic = context.exception.diagnostic
        self.assertEqual((2, 2, 2, "  1"), (diagnostic.line_number, diagnostic.line_offset, diagnostic.line_start,
                                            diagnostic.line))

        self.assertRaises(UnknownToken, parse, "x 1", strict=False)
        self.assertRaises(NameTooLong, parse, "\\" + "a" * 64 + " . x")
        self.assertEqual(Abstraction("a" * 63, x), parse("\\" + "a" * 63 + " . x"))

    def test_errors_are_parse_errors(self):
        should_raise = ["1", "(", "\\", "\\x", "a" * 100, "x (\\y . )"]
        for case in should_raise:
            self.assertRaises(ParseError, parse, case)

    def test_nesting(self):
        self.assertEqual(x, parse("(" * 100 + "x" + ")" * 100))
        self.assertRaises(RecursionError, parse, "(" * 10000 + "x" + ")" * 10000)


if __name__ == '__main__':
    unittest.main()
