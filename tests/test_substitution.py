"""Tests for variable substitution."""

from exprsimplifier_pkg.parser import parse_expression
from exprsimplifier_pkg.substitution import substitute
from exprsimplifier_pkg.tree import SyntaxTree

N = SyntaxTree.number
V = SyntaxTree.variable
op = SyntaxTree.node


class TestSubstitute:
    """Test replacing variables with numeric literals."""

    def test_bound_variable_becomes_number(self):
        tree = substitute(parse_expression("x*y"), {"x": "1"})
        assert tree == op("*", N("1"), V("y"))
        assert tree.left.is_number

    def test_every_occurrence_is_replaced(self):
        tree = substitute(parse_expression("x+x^2"), {"x": "3"})
        assert tree == op("+", N("3"), op("^", N("3"), N("2")))

    def test_unmatched_variables_are_untouched(self):
        original = parse_expression("x*y")
        assert substitute(original, {"z": "1"}) is original

    def test_no_bindings(self):
        original = parse_expression("x+1")
        assert substitute(original, {}) is original

    def test_leaf(self):
        assert substitute(V("x"), {"x": "-1"}) == N("-1")

    def test_input_tree_is_not_modified(self):
        original = parse_expression("2x+y")
        substitute(original, {"x": "5", "y": "1"})
        assert original == parse_expression("2x+y")
        assert list(original.variables()) == ["x", "y"]
