"""Fuzzing tests for the lexer, parser and simplifier with random inputs."""

import random
import string
import unittest

from exprsimplifier_pkg.api import simplify, simplify_expression
from exprsimplifier_pkg.types import ExpressionError

OPERATORS = "+-*/^"
LEAVES = ["x", "y", "z", "0", "1", "2", "3", "0.5", "-1", "-2"]


def random_expression(rng, depth=0):
    """Generate a random well-formed expression."""
    if depth > 3 or rng.random() < 0.3:
        return rng.choice(LEAVES)
    left = random_expression(rng, depth + 1)
    right = random_expression(rng, depth + 1)
    if right.startswith("-"):
        right = f"({right})"
    expr = f"{left}{rng.choice(OPERATORS)}{right}"
    return f"({expr})" if rng.random() < 0.5 else expr


class TestLexerFuzzing(unittest.TestCase):
    """Fuzz test with random garbage."""

    def test_random_strings(self):
        """Random strings either simplify or fail with an ExpressionError."""
        rng = random.Random(1234)
        alphabet = string.ascii_letters + string.digits + "+-*/^(). $"
        for _ in range(300):
            text = "".join(rng.choices(alphabet, k=rng.randint(1, 30)))
            try:
                simplify_expression(text)
            except ExpressionError:
                pass

    def test_malformed_expressions(self):
        for expr in ["(((", ")))", "x++y", "x^^", "*/x", "", "   ", "1.2.3", "x(", ")("]:
            with self.subTest(expr=expr):
                self.assertFalse(simplify(expr).ok)


class TestSimplifierFuzzing(unittest.TestCase):
    """Fuzz test with random well-formed expressions."""

    def test_idempotence(self):
        rng = random.Random(42)
        for _ in range(300):
            expr = random_expression(rng)
            with self.subTest(expr=expr):
                try:
                    once = simplify_expression(expr)
                except ExpressionError:
                    continue
                self.assertEqual(simplify_expression(once), once)

    def test_never_raises_internal_error(self):
        rng = random.Random(7)
        for _ in range(300):
            result = simplify(random_expression(rng))
            self.assertNotEqual(result.error_code, "INTERNAL_ERROR")


if __name__ == "__main__":
    unittest.main()
