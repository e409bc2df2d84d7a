"""Token model and the canonical operator table.

Numbers stay exact decimal literal strings until folding, where they become
``decimal.Decimal`` values. The operator table is built once at import and exposed
through a read-only mapping.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Callable

from . import config
from .types import DivisionByZeroError, NonIntegerPowerOfNegativeError, NumericOverflowError


class TokenKind(Enum):
    OPERATOR = "operator"
    NUMBER = "number"
    VARIABLE = "variable"
    SUBEXPRESSION = "subexpression"


@dataclass(frozen=True)
class Token:
    """Smallest lexical unit of an expression."""

    lexeme: str
    kind: TokenKind

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def is_number(self) -> bool:
        return self.kind is TokenKind.NUMBER

    @property
    def is_variable(self) -> bool:
        return self.kind is TokenKind.VARIABLE

    @property
    def value(self) -> Decimal:
        """Exact numeric value of a Number token."""
        return Decimal(self.lexeme)

    def __str__(self) -> str:
        return self.lexeme


# Unbounded precision: sums, differences and products of decimals never need rounding.
_EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def format_decimal(value: Decimal) -> str:
    """Render a decimal as a plain literal with trailing zeros trimmed.

    Args:
        value: Decimal to render (e.g., Decimal("2.500"), Decimal("1E+3"))

    Returns:
        Canonical literal (e.g., "2.5", "1000"); zero is always "0"
    """
    if value.is_zero():
        return "0"
    return format(value.normalize(_EXACT), "f")


def _add(left: Decimal, right: Decimal) -> Decimal:
    return _EXACT.add(left, right)


def _sub(left: Decimal, right: Decimal) -> Decimal:
    return _EXACT.subtract(left, right)


def _mul(left: Decimal, right: Decimal) -> Decimal:
    return _EXACT.multiply(left, right)


def _div(left: Decimal, right: Decimal) -> Decimal:
    if right.is_zero():
        raise DivisionByZeroError("Division by zero")
    # Quotients may not terminate, so division alone is rounded.
    return Context(prec=config.DECIMAL_PRECISION).divide(left, right)


def _is_integral(value: Decimal) -> bool:
    return value == value.to_integral_value()


def _pow(base: Decimal, exponent: Decimal) -> Decimal:
    """Raise ``base`` to ``exponent``.

    Integer powers with a non-negative integer exponent are exact. Anything else
    is computed with binary floats and converted back through the float's repr,
    so e.g. ``0.1^2`` folds to ``0.010000000000000002``.
    """
    if (
        _is_integral(base)
        and _is_integral(exponent)
        and 0 <= exponent <= config.MAX_EXACT_EXPONENT
    ):
        return Decimal(int(base) ** int(exponent))
    try:
        result = float(base) ** float(exponent)
    except ZeroDivisionError:
        raise DivisionByZeroError("Zero cannot be raised to a negative power") from None
    except OverflowError:
        raise NumericOverflowError(
            f"Result of {format_decimal(base)}^{format_decimal(exponent)} is too large"
        ) from None
    if isinstance(result, complex):
        raise NonIntegerPowerOfNegativeError(
            "A negative number cannot be raised to a non-integer power"
        )
    if not math.isfinite(result):
        raise NumericOverflowError(
            f"Result of {format_decimal(base)}^{format_decimal(exponent)} is too large"
        )
    return Decimal(repr(result))


@dataclass(frozen=True)
class Operator:
    """Binary infix operator with its binding strength and exact-decimal function."""

    symbol: str
    name: str
    precedence: int
    function: Callable[[Decimal, Decimal], Decimal]

    def apply(self, left: Decimal, right: Decimal) -> Decimal:
        return self.function(left, right)


# Ordered by decreasing precedence.
OPERATORS = MappingProxyType(
    {
        op.symbol: op
        for op in (
            Operator("^", "pow", 2, _pow),
            Operator("*", "mul", 1, _mul),
            Operator("/", "div", 1, _div),
            Operator("+", "add", 0, _add),
            Operator("-", "sub", 0, _sub),
        )
    }
)

OPERATOR_SYMBOLS = frozenset(OPERATORS)


def _group_by_precedence() -> tuple[frozenset[str], ...]:
    bands: dict[int, set[str]] = {}
    for op in OPERATORS.values():
        bands.setdefault(op.precedence, set()).add(op.symbol)
    return tuple(frozenset(bands[level]) for level in sorted(bands, reverse=True))


# Highest band first: ("^",), ("*", "/"), ("+", "-")
PRECEDENCE_BANDS = _group_by_precedence()

MULTIPLY = Token("*", TokenKind.OPERATOR)


def get_operator(symbol: str) -> Operator:
    """Look up an operator by its symbol.

    Raises:
        KeyError: if ``symbol`` is not one of ``^ * / + -``
    """
    return OPERATORS[symbol]


def precedence_of(symbol: str) -> int:
    return OPERATORS[symbol].precedence
