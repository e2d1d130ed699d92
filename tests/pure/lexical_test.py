import unittest

from lcparse.lang.error import ErrorKind, NameTooLong, UnknownToken
from lcparse.pure.lexical import Token, Tokenizer


def tokens(source, size=None):
    """Returns (token, variable) pairs up to and including EOF."""
    tokenizer = Tokenizer(source, size)
    result = []
    while not result or result[-1][0] is not Token.EOF:
        result.append((tokenizer.next_token(), tokenizer.variable))
    return result


class TokenizerTestCase(unittest.TestCase):

    def test_next_token(self):
        cases = {
            "": [(Token.EOF, None)],
            "  \t\n ": [(Token.EOF, None)],
            "x": [(Token.VARIABLE, "x"), (Token.EOF, None)],
            "( ) . \\": [(Token.LEFT_PAREN, None), (Token.RIGHT_PAREN, None), (Token.POINT, None),
                         (Token.BACKSLASH, None), (Token.EOF, None)],
            "\\xy.yX": [(Token.BACKSLASH, None), (Token.VARIABLE, "xy"), (Token.POINT, None),
                        (Token.VARIABLE, "yX"), (Token.EOF, None)],
            "(abc)\r\n\vdef": [(Token.LEFT_PAREN, None), (Token.VARIABLE, "abc"), (Token.RIGHT_PAREN, None),
                               (Token.VARIABLE, "def"), (Token.EOF, None)],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, tokens(case), case)

    def test_bytes(self):
        self.assertEqual([(Token.BACKSLASH, None), (Token.VARIABLE, "x"), (Token.EOF, None)], tokens(b"\\x"))
        self.assertRaises(UnknownToken, tokens, "λx.x".encode("utf-8"))

    def test_size(self):
        self.assertEqual([(Token.VARIABLE, "abc"), (Token.EOF, None)], tokens("abc def", size=3))
        self.assertEqual([(Token.EOF, None)], tokens("abc", size=0))

    def test_unknown_token(self):
        should_raise = ["1", "x_y", "x 2", "λ", "x ; y", "\\x . x0"]
        for case in should_raise:
            self.assertRaises(UnknownToken, tokens, case)

        tokenizer = Tokenizer("x y 1 z")
        tokenizer.next_token()
        tokenizer.next_token()
        with self.assertRaises(UnknownToken) as context:
            tokenizer.next_token()

        error = context.exception
        self.assertEqual(ErrorKind.UNKNOWN_TOKEN, error.kind)
        self.assertEqual("Unknown token '1'.", error.diagnostic.message)
        self.assertEqual(1, error.diagnostic.line_number)
        self.assertEqual(4, error.diagnostic.line_offset)
        self.assertEqual("x y 1 z", error.diagnostic.line)

    def test_unknown_token_message(self):
        cases = {
            b"x\x00y": ("Unknown token '\\x00'.", 1),
            "\t\x07": ("Unknown token '\\x07'.", 1),
            "x '": ("Unknown token \"'\".", 2),
        }
        for case, (message, line_offset) in cases.items():
            with self.assertRaises(UnknownToken) as context:
                tokens(case)
            self.assertEqual(message, context.exception.diagnostic.message, case)
            self.assertEqual(line_offset, context.exception.line_offset, case)

    def test_name_too_long(self):
        name = "a" * Tokenizer.MAX_NAME_LEN
        self.assertEqual([(Token.VARIABLE, name), (Token.EOF, None)], tokens(name))
        self.assertEqual([(Token.VARIABLE, name), (Token.VARIABLE, "b"), (Token.EOF, None)], tokens(name + " b"))

        with self.assertRaises(NameTooLong) as context:
            tokens("x " + name + "b")

        error = context.exception
        self.assertEqual(ErrorKind.NAME_TOO_LONG, error.kind)
        self.assertEqual(2 + Tokenizer.MAX_NAME_LEN, error.diagnostic.line_offset)

    def test_position(self):
        tokenizer = Tokenizer("x\n  y\n\n(")

        tokenizer.next_token()
        self.assertEqual((1, 0, 0), (tokenizer.token_line, tokenizer.token_column, tokenizer.token_line_start))

        tokenizer.next_token()
        self.assertEqual((2, 2, 2), (tokenizer.token_line, tokenizer.token_column, tokenizer.token_line_start))
        self.assertEqual("  y", tokenizer.line_text(tokenizer.token_line_start))

        tokenizer.next_token()
        self.assertEqual(Token.LEFT_PAREN, tokenizer.token)
        self.assertEqual((4, 0, 7), (tokenizer.token_line, tokenizer.token_column, tokenizer.token_line_start))

        tokenizer.next_token()
        self.assertEqual(Token.EOF, tokenizer.token)
        self.assertEqual((4, 1), (tokenizer.line, tokenizer.column))

    def test_diagnostic(self):
        tokenizer = Tokenizer("ab\ncd ef")
        tokenizer.next_token()
        tokenizer.next_token()

        diagnostic = tokenizer.diagnostic("here", at_token=True)
        self.assertEqual(("here", 2, 0, 3, "cd ef"), (diagnostic.message, diagnostic.line_number,
                                                      diagnostic.line_offset, diagnostic.line_start, diagnostic.line))

        diagnostic = tokenizer.diagnostic("there")
        self.assertEqual((2, 2), (diagnostic.line_number, diagnostic.line_offset))


if __name__ == '__main__':
    unittest.main()
