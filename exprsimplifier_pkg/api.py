"""Public API for the expression simplifier.

``simplify_expression`` raises on failure; ``simplify`` and ``validate_expression``
return structured objects without raising for bad input.
"""

from __future__ import annotations

from typing import Sequence

from . import config
from .logging_config import get_logger
from .parser import parse_assignments, parse_expression
from .printer import format_tree
from .simplifier import simplify as simplify_tree
from .substitution import substitute
from .tree import SyntaxTree
from .types import ExpressionError, SimplifyResult, ValidationError
from .verify import equivalent

logger = get_logger("api")


def _run_pipeline(
    expr: str, variable_assignments: Sequence[str]
) -> tuple[SyntaxTree, SyntaxTree]:
    """Parse, substitute and simplify. Returns (substituted tree, simplified tree)."""
    bindings = parse_assignments(variable_assignments)
    try:
        tree = substitute(parse_expression(expr), bindings)
        return tree, simplify_tree(tree)
    except RecursionError:
        raise ValidationError("Expression too deeply nested", "TOO_DEEP") from None


def simplify_expression(expr: str, variable_assignments: Sequence[str] = ()) -> str:
    """Simplify an expression and return its canonical form.

    Args:
        expr: Expression string (e.g., "2*(x+y)", "x*y")
        variable_assignments: "name=value" strings (e.g., ["x=1"])

    Returns:
        Canonical simplified expression

    Raises:
        ExpressionError: lexical, structural, evaluation or validation failure

    Example:
        >>> from exprsimplifier_pkg.api import simplify_expression
        >>> simplify_expression("2*(x+y)")
        '2(x + y)'
        >>> simplify_expression("x*y", ["x=1"])
        'y'
    """
    _, simplified = _run_pipeline(expr, variable_assignments)
    return format_tree(simplified)


def simplify(
    expr: str,
    variable_assignments: Sequence[str] = (),
    verify: bool | None = None,
) -> SimplifyResult:
    """Simplify an expression, reporting failures in the result.

    Args:
        expr: Expression string
        variable_assignments: "name=value" strings
        verify: Cross-check the result with SymPy (default: VERIFY_RESULTS)

    Returns:
        SimplifyResult with the canonical form and remaining free symbols

    Example:
        >>> from exprsimplifier_pkg.api import simplify
        >>> simplify("x/x").result
        '1'
        >>> simplify("1/0").error_code
        'DIVISION_BY_ZERO'
    """
    if verify is None:
        verify = config.VERIFY_RESULTS

    try:
        before, after = _run_pipeline(expr, variable_assignments)
    except ExpressionError as e:
        logger.debug(f"Simplification of {expr!r} failed: {e.code}: {e.message}")
        return SimplifyResult(ok=False, error=e.message, error_code=e.code)
    except Exception as e:
        logger.warning(f"Unexpected simplification error: {e}", exc_info=True)
        return SimplifyResult(
            ok=False, error="Unexpected simplification error", error_code="INTERNAL_ERROR"
        )

    verified = None
    if verify:
        try:
            verified = equivalent(before, after)
        except Exception as e:
            logger.warning(f"SymPy cross-check failed: {e}", exc_info=True)
            verified = False
        if not verified:
            logger.warning(f"Could not verify simplification of {expr!r}")

    return SimplifyResult(
        ok=True,
        result=format_tree(after),
        free_symbols=sorted(set(after.variables())),
        verified=verified,
    )


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Validate an expression without simplifying it.

    Args:
        expression: Expression string to validate

    Returns:
        Tuple of (is_valid, error_message)

    Example:
        >>> from exprsimplifier_pkg.api import validate_expression
        >>> validate_expression("2x + 1")
        (True, None)
        >>> validate_expression("2 $ 3")
        (False, 'Invalid character: $')
    """
    try:
        parse_expression(expression)
        return True, None
    except ExpressionError as e:
        return False, str(e)
    except RecursionError:
        return False, "Expression too deeply nested"
