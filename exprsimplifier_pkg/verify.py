"""Symbolic cross-check of simplification results with SymPy."""

from __future__ import annotations

import sympy as sp

from . import config
from .logging_config import get_logger
from .tokens import format_decimal
from .tree import SyntaxTree

logger = get_logger("verify")

_SYMPY_OPERATIONS = {
    "+": lambda a, b: sp.Add(a, b),
    "-": lambda a, b: sp.Add(a, sp.Mul(-1, b)),
    "*": lambda a, b: sp.Mul(a, b),
    "/": lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
    "^": lambda a, b: sp.Pow(a, b),
}


def to_sympy(tree: SyntaxTree) -> sp.Expr:
    """Convert a syntax tree to a SymPy expression.

    Numbers become exact rationals (``0.1`` -> ``1/10``) and variables become
    symbols.
    """
    if tree.is_leaf:
        if tree.token.is_number:
            return sp.Rational(format_decimal(tree.token.value))
        return sp.Symbol(tree.token.lexeme)
    operation = _SYMPY_OPERATIONS[tree.symbol]
    return operation(to_sympy(tree.left), to_sympy(tree.right))


def equivalent(before: SyntaxTree, after: SyntaxTree) -> bool:
    """Check that two trees denote the same expression.

    A numeric difference within NUMERIC_TOLERANCE is accepted because powers with
    non-integer operands are folded in floating point.

    Args:
        before: Tree as parsed (after substitution)
        after: Simplified tree

    Returns:
        True if SymPy reduces the difference to (approximately) zero
    """
    difference = sp.simplify(to_sympy(before) - to_sympy(after))
    if difference == 0:
        return True
    if difference.is_number:
        try:
            return abs(complex(difference)) <= config.NUMERIC_TOLERANCE
        except (TypeError, ValueError):
            logger.debug(f"Difference {difference} has no numeric value")
            return False
    logger.debug(f"Residual difference after simplification: {difference}")
    return False
