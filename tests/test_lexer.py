"""Unit tests for lexer module."""

import unittest

from exprsimplifier_pkg.config import MAX_EXPRESSION_DEPTH, MAX_INPUT_LENGTH
from exprsimplifier_pkg.lexer import find_closing_paren, lex
from exprsimplifier_pkg.tokens import TokenKind
from exprsimplifier_pkg.types import (
    ConsecutiveOperatorsError,
    InvalidCharacterError,
    InvalidExpressionError,
    UnmatchedCloseParenError,
    UnmatchedOpenParenError,
    ValidationError,
)


def lexemes(expr):
    return [token.lexeme for token in lex(expr)]


class TestLexBasics(unittest.TestCase):
    """Test plain numbers, variables and operators."""

    def test_simple_sum(self):
        self.assertEqual(lexemes("1+2"), ["1", "+", "2"])

    def test_whitespace_is_ignored(self):
        self.assertEqual(lexemes(" 1 +\t 2 "), ["1", "+", "2"])

    def test_token_kinds(self):
        kinds = [token.kind for token in lex("x*2.5")]
        self.assertEqual(
            kinds, [TokenKind.VARIABLE, TokenKind.OPERATOR, TokenKind.NUMBER]
        )

    def test_decimal_number(self):
        self.assertEqual(lexemes("3.14"), ["3.14"])

    def test_variable_with_digits(self):
        self.assertEqual(lexemes("x2y+1"), ["x2y", "+", "1"])

    def test_subexpression_is_one_token(self):
        tokens = lex("(x+(y-1))*2")
        self.assertEqual(tokens[0].lexeme, "(x+(y-1))")
        self.assertEqual(tokens[0].kind, TokenKind.SUBEXPRESSION)
        self.assertEqual([t.lexeme for t in tokens[1:]], ["*", "2"])

    def test_empty_input(self):
        self.assertEqual(lex(""), [])
        self.assertEqual(lex("   "), [])


class TestImplicitMultiplication(unittest.TestCase):
    """Test insertion of synthetic multiplication tokens."""

    def test_number_variable(self):
        self.assertEqual(lexemes("2x"), ["2", "*", "x"])

    def test_decimal_variable(self):
        self.assertEqual(lexemes("3.14r"), ["3.14", "*", "r"])

    def test_number_subexpression(self):
        self.assertEqual(lexemes("2(x+1)"), ["2", "*", "(x+1)"])

    def test_subexpression_subexpression(self):
        self.assertEqual(lexemes("(x)(y)"), ["(x)", "*", "(y)"])

    def test_variable_subexpression_is_invalid(self):
        with self.assertRaises(InvalidExpressionError):
            lex("x(1)")


class TestNegativeSign(unittest.TestCase):
    """Test unary minus handling."""

    def test_fused_into_number(self):
        self.assertEqual(lexemes("-3+x"), ["-3", "+", "x"])

    def test_after_operator(self):
        self.assertEqual(lexemes("2*-3"), ["2", "*", "-3"])

    def test_before_variable(self):
        self.assertEqual(lexemes("-x"), ["-1", "*", "x"])

    def test_before_subexpression(self):
        self.assertEqual(lexemes("-(x+1)"), ["-1", "*", "(x+1)"])

    def test_between_operators(self):
        self.assertEqual(lexemes("2*-x"), ["2", "*", "-1", "*", "x"])

    def test_binary_minus_after_number(self):
        self.assertEqual(lexemes("2-3"), ["2", "-", "3"])

    def test_double_minus(self):
        self.assertEqual(lexemes("--"), ["-1", "-"])

    def test_trailing_sign(self):
        with self.assertRaises(InvalidExpressionError):
            lex("1+-")


class TestLexErrors(unittest.TestCase):
    """Test lexical failures."""

    def test_invalid_character(self):
        with self.assertRaises(InvalidCharacterError) as ctx:
            lex("2 $ 3")
        self.assertEqual(str(ctx.exception), "Invalid character: $")
        self.assertEqual(ctx.exception.code, "INVALID_CHARACTER")

    def test_second_decimal_point(self):
        with self.assertRaises(InvalidCharacterError):
            lex("1.2.3")

    def test_unmatched_open_paren(self):
        with self.assertRaises(UnmatchedOpenParenError):
            lex("(1+2")

    def test_unmatched_close_paren(self):
        with self.assertRaises(UnmatchedCloseParenError):
            lex("1+2)")

    def test_consecutive_operators(self):
        with self.assertRaises(ConsecutiveOperatorsError):
            lex("1*/2")
        with self.assertRaises(ConsecutiveOperatorsError):
            lex("1+*2")

    def test_input_length_limit(self):
        with self.assertRaises(ValidationError) as ctx:
            lex("x" * (MAX_INPUT_LENGTH + 1))
        self.assertEqual(ctx.exception.code, "TOO_LONG")

    def test_nesting_limit(self):
        depth = MAX_EXPRESSION_DEPTH + 1
        with self.assertRaises(ValidationError) as ctx:
            lex("(" * depth + "1" + ")" * depth)
        self.assertEqual(ctx.exception.code, "TOO_DEEP")


class TestFindClosingParen(unittest.TestCase):
    def test_nested(self):
        self.assertEqual(find_closing_paren("(a(b)c)d", 0), 6)
        self.assertEqual(find_closing_paren("(a(b)c)d", 2), 4)

    def test_unmatched(self):
        self.assertEqual(find_closing_paren("((a)", 0), -1)


if __name__ == "__main__":
    unittest.main()
