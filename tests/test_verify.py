"""Tests for the SymPy cross-check."""

import sympy as sp

from exprsimplifier_pkg.api import simplify
from exprsimplifier_pkg.parser import parse_expression
from exprsimplifier_pkg.verify import equivalent, to_sympy


class TestToSympy:
    def test_numbers_are_exact(self):
        x = sp.Symbol("x")
        assert to_sympy(parse_expression("x^2+0.5")) == x**2 + sp.Rational(1, 2)

    def test_difference_and_quotient(self):
        x, y = sp.symbols("x y")
        assert sp.simplify(to_sympy(parse_expression("x-y/2")) - (x - y / 2)) == 0

    def test_negative_literal(self):
        assert to_sympy(parse_expression("-3")) == sp.Integer(-3)


class TestEquivalent:
    def test_identity_rewrites_are_equivalent(self):
        assert equivalent(parse_expression("x*1+0"), parse_expression("x"))
        assert equivalent(parse_expression("2*(x+y)"), parse_expression("2x+2y"))

    def test_different_expressions(self):
        assert not equivalent(parse_expression("x+1"), parse_expression("x"))

    def test_float_fold_within_tolerance(self):
        assert equivalent(parse_expression("0.1^2"), parse_expression("0.01"))


class TestVerifiedResults:
    def test_verified_flag(self):
        result = simplify("x*2*y", verify=True)
        assert result.ok is True
        assert result.verified is True

    def test_float_power_verifies(self):
        assert simplify("0.1^2", verify=True).verified is True

    def test_not_requested(self):
        assert simplify("x*2*y", verify=False).verified is None
