"""Tree building and input parsing.

This module handles:
- Building a syntax tree from a token sequence, one precedence band at a time
- Parsing (and caching) complete expression strings
- Parsing ``name=value`` variable assignments
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from . import config
from .config import CACHE_SIZE_PARSE, NUMBER_RE, VAR_NAME_RE
from .lexer import lex
from .logging_config import get_logger
from .tokens import PRECEDENCE_BANDS, Token, TokenKind
from .tree import SyntaxTree
from .types import InvalidExpressionError, ValidationError

logger = get_logger("parser")


def strip_parens(subexpr: str) -> str:
    """Remove one pair of enclosing parentheses, if present."""
    if len(subexpr) >= 2 and subexpr[0] == "(" and subexpr[-1] == ")":
        return subexpr[1:-1]
    return subexpr


def _leafify(tokens: Sequence[Token]) -> list[SyntaxTree]:
    """Turn every token into a single-node tree, parsing sub-expressions recursively."""
    subtrees = []
    for token in tokens:
        if token.kind is TokenKind.SUBEXPRESSION:
            subtrees.append(_parse_cached(strip_parens(token.lexeme)))
        else:
            subtrees.append(SyntaxTree(token))
    return subtrees


def _reduce_band(trees: list[SyntaxTree], band: frozenset[str]) -> list[SyntaxTree]:
    """Combine every operator of ``band`` with its neighbours, left to right.

    Operators from other bands are carried through untouched, so running the bands
    from highest to lowest precedence yields a left-associative tree.
    """
    stack: list[SyntaxTree] = []
    pending: SyntaxTree | None = None

    for tree in trees:
        if tree.is_operator_leaf and tree.symbol in band:
            if pending is not None or not stack or stack[-1].is_operator_leaf:
                raise InvalidExpressionError(
                    f"Operator '{tree.symbol}' is missing its left operand"
                )
            pending = tree
        elif pending is not None:
            if tree.is_operator_leaf:
                raise InvalidExpressionError(
                    f"Operator '{pending.symbol}' is missing its right operand"
                )
            previous = stack.pop()
            stack.append(SyntaxTree(pending.token, previous, tree))
            pending = None
        else:
            stack.append(tree)

    if pending is not None:
        raise InvalidExpressionError(
            f"Operator '{pending.symbol}' is missing its right operand"
        )
    return stack


def build(tokens: Sequence[Token]) -> SyntaxTree:
    """Build a syntax tree from lexed tokens.

    Args:
        tokens: Output of :func:`lex`

    Returns:
        The root of the syntax tree

    Raises:
        InvalidExpressionError: if the tokens do not form exactly one expression
    """
    if not tokens:
        raise InvalidExpressionError("Empty expression")

    trees = _leafify(tokens)
    for band in PRECEDENCE_BANDS:
        trees = _reduce_band(trees, band)

    if len(trees) != 1:
        raise InvalidExpressionError(
            f"Invalid expression: missing operator between {len(trees)} operands"
        )
    return trees[0]


@lru_cache(maxsize=CACHE_SIZE_PARSE)
def _parse_cached(expr: str) -> SyntaxTree:
    return build(lex(expr))


def parse_expression(expr: str) -> SyntaxTree:
    """Parse an expression string into a syntax tree.

    Trees are immutable, so cached results are shared between callers. Size limits
    are checked on every call, cache hits included.

    Raises:
        ExpressionError: any lexical, structural or validation failure
    """
    if len(expr) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    tree = _parse_cached(expr)
    # Checked before anything walks the tree recursively
    if tree.depth() > config.MAX_TREE_DEPTH:
        raise ValidationError(
            f"Expression too complex (depth >{config.MAX_TREE_DEPTH})", "TOO_DEEP"
        )
    logger.debug("Parsed %r as %s", expr, tree)
    return tree


def parse_assignments(assignments: Iterable[str]) -> dict[str, str]:
    """Parse ``name=value`` strings into variable bindings.

    Args:
        assignments: Strings such as "x=2" or "rate = -0.5"

    Returns:
        Mapping of variable name to numeric literal; later duplicates win

    Raises:
        ValidationError: (code INVALID_ASSIGNMENT) for a missing '=', a name that is
            not a variable, or a value that is not a number
    """
    bindings: dict[str, str] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        name = name.strip()
        value = value.strip()
        if not sep or not VAR_NAME_RE.match(name) or not NUMBER_RE.match(value):
            raise ValidationError(
                f"Invalid variable assignment: {assignment!r} (expected name=value)",
                "INVALID_ASSIGNMENT",
            )
        bindings[name] = value
    return bindings
