"""Canonical string rendering of syntax trees.

Products are printed with implicit multiplication where it reads naturally
(``2x``, ``-x^2``, ``3(x + 1)``, ``(x + 1)(x - 1)``). Elsewhere operands are
parenthesized only when re-parsing the output would otherwise build a different
tree, so printing and parsing again is lossless.
"""

from __future__ import annotations

from .tokens import precedence_of
from .tree import SyntaxTree

_SPACED_SYMBOLS = frozenset({"+", "-"})


def _wrap(text: str) -> str:
    return f"({text})"


def _format_implicit_product(tree: SyntaxTree) -> str | None:
    """Format ``left * right`` without the operator, or None if it does not apply."""
    left, right = tree.left, tree.right
    if left.is_number and right.is_power_like:
        if left.number_equals(-1):
            return f"-{format_tree(right)}"
        return f"{left.token}{format_tree(right)}"
    if left.is_number and not right.is_leaf:
        return f"{left.token}{_wrap(format_tree(right))}"
    if not left.is_leaf and not right.is_leaf:
        return f"{_wrap(format_tree(left))}{_wrap(format_tree(right))}"
    return None


def _format_operand(child: SyntaxTree, parent_symbol: str, is_right: bool) -> str:
    text = format_tree(child)
    if child.is_leaf:
        # 2*(-3) must not collapse into 2*-3
        return _wrap(text) if text.startswith("-") else text

    child_precedence = precedence_of(child.symbol)
    parent_precedence = precedence_of(parent_symbol)
    # Parsing is left-associative: an equal-precedence operand only needs
    # parentheses on the right, where x - y - z, a/b/c and x^y^z would re-parse
    # as (x - y) - z, (a/b)/c and (x^y)^z.
    if child_precedence < parent_precedence or (
        is_right and child_precedence == parent_precedence
    ):
        return _wrap(text)
    return text


def format_tree(tree: SyntaxTree) -> str:
    """Render a syntax tree in canonical form.

    Args:
        tree: Syntax tree, usually the output of :func:`simplify`

    Returns:
        Canonical string (e.g., "2(x + y)", "-2x", "x^2 + x - 1")
    """
    if tree.is_leaf:
        return tree.token.lexeme

    if tree.is_op("*"):
        implicit = _format_implicit_product(tree)
        if implicit is not None:
            return implicit

    symbol = tree.symbol
    operator_text = f" {symbol} " if symbol in _SPACED_SYMBOLS else symbol
    left = _format_operand(tree.left, symbol, is_right=False)
    right = _format_operand(tree.right, symbol, is_right=True)
    return f"{left}{operator_text}{right}"
