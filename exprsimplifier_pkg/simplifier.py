"""Tree simplification.

Each operator node is simplified bottom-up: its children first, then a validity
check, then the rewrite passes below in order, repeated until the node is stable.

1. fold_constants: evaluate operators whose operands are both numbers
2. standardize: constants to the right of sums, coefficients to the left of
   products, higher powers first in sums of powers
3. eliminate_identities: x+0, x-0, x-x, 0*x, 1*x, x/1, x/x, x^1, 0^0, 0^n, x^0
"""

from __future__ import annotations

from typing import Callable

from .logging_config import get_logger
from .tokens import format_decimal, get_operator
from .tree import SyntaxTree
from .types import DivisionByZeroError, NonIntegerPowerOfNegativeError

logger = get_logger("simplifier")

ZERO = SyntaxTree.number("0")
ONE = SyntaxTree.number("1")


def _swap(node: SyntaxTree) -> SyntaxTree:
    return SyntaxTree(node.token, node.right, node.left)


def check_validity(node: SyntaxTree) -> None:
    """Reject operator nodes whose value is undefined.

    Raises:
        DivisionByZeroError: for x/0 and 0^n with n negative
        NonIntegerPowerOfNegativeError: for a negative base with a fractional exponent
    """
    left, right = node.left, node.right
    if node.is_op("/") and right.number_equals(0):
        raise DivisionByZeroError("Division by zero")
    if node.is_op("^") and left.is_number and right.is_number:
        base, exponent = left.token.value, right.token.value
        if base.is_zero() and exponent < 0:
            raise DivisionByZeroError("Zero cannot be raised to a negative power")
        if base < 0 and exponent != exponent.to_integral_value():
            raise NonIntegerPowerOfNegativeError(
                f"A negative number cannot be raised to a non-integer power: "
                f"({left.token})^{right.token}"
            )


def fold_constants(node: SyntaxTree) -> SyntaxTree:
    if node.is_leaf or not (node.left.is_number and node.right.is_number):
        return node
    operator = get_operator(node.symbol)
    value = operator.apply(node.left.token.value, node.right.token.value)
    return SyntaxTree.number(format_decimal(value))


def standardize(node: SyntaxTree) -> SyntaxTree:
    """Put operands of sums and products in canonical order."""
    if node.is_leaf:
        return node
    left, right = node.left, node.right

    if node.is_op("+"):
        if left.is_number and not right.is_number:
            return _swap(node)
        if left.is_power_like and right.is_power_like:
            left_exp, right_exp = left.exponent(), right.exponent()
            if left_exp is not None and right_exp is not None and right_exp > left_exp:
                return _swap(node)
    elif node.is_op("*"):
        if not left.is_number and right.is_number:
            return _swap(node)
    return node


def eliminate_identities(node: SyntaxTree) -> SyntaxTree:
    if node.is_leaf:
        return node
    left, right = node.left, node.right

    if node.is_op("+"):
        if right.number_equals(0):
            return left
    elif node.is_op("-"):
        if right.number_equals(0):
            return left
        if left == right:
            return ZERO
    elif node.is_op("*"):
        # 0*x wins over 1*x
        if left.number_equals(0):
            return ZERO
        if left.number_equals(1):
            return right
    elif node.is_op("/"):
        if right.number_equals(1):
            return left
        if left == right:
            return ONE
    elif node.is_op("^"):
        if right.number_equals(1):
            return left
        if left.number_equals(0):
            return ONE if right.number_equals(0) else ZERO
        if right.number_equals(0):
            return ONE
    return node


REWRITE_PASSES: tuple[Callable[[SyntaxTree], SyntaxTree], ...] = (
    fold_constants,
    standardize,
    eliminate_identities,
)


def _rewrite(node: SyntaxTree) -> SyntaxTree:
    """Run the rewrite passes on a node with simplified children until it is stable."""
    while not node.is_leaf:
        check_validity(node)
        rewritten = node
        for rewrite_pass in REWRITE_PASSES:
            rewritten = rewrite_pass(rewritten)
        if rewritten is node:
            break
        logger.debug("Rewrote %s -> %s", node, rewritten)
        node = rewritten
    return node


def simplify(tree: SyntaxTree) -> SyntaxTree:
    """Simplify a syntax tree.

    Args:
        tree: Parsed (and optionally substituted) syntax tree

    Returns:
        The simplified tree; simplifying it again returns an equal tree

    Raises:
        EvaluationError: division by zero, a negative base with a fractional
            exponent, or a power too large to represent
    """
    if tree.is_leaf:
        return tree
    left = simplify(tree.left)
    right = simplify(tree.right)
    if left is not tree.left or right is not tree.right:
        tree = SyntaxTree(tree.token, left, right)
    return _rewrite(tree)
