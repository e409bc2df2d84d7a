"""Error taxonomy and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class SimplifyResult:
    """Result of simplifying an expression."""

    ok: bool
    result: str | None = None
    free_symbols: list[str] | None = None
    verified: bool | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.free_symbols is not None:
            result_dict["free_symbols"] = self.free_symbols
        if self.verified is not None:
            result_dict["verified"] = self.verified
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SimplifyResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.free_symbols is not None:
            parts.append(f"free_symbols={self.free_symbols!r}")
        if self.verified is not None:
            parts.append(f"verified={self.verified!r}")
        return f"SimplifyResult({', '.join(parts)})"


class ExpressionError(Exception):
    """Base class for every failure raised while simplifying an expression."""

    default_code = "EXPRESSION_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(ExpressionError):
    """Raised when input validation fails (size limits, malformed assignments)."""

    default_code = "VALIDATION_ERROR"


class LexError(ExpressionError):
    """Raised when the expression cannot be split into tokens."""

    default_code = "LEX_ERROR"


class InvalidCharacterError(LexError):
    default_code = "INVALID_CHARACTER"


class UnmatchedOpenParenError(LexError):
    default_code = "UNMATCHED_OPEN_PAREN"


class UnmatchedCloseParenError(LexError):
    default_code = "UNMATCHED_CLOSE_PAREN"


class ConsecutiveOperatorsError(LexError):
    default_code = "CONSECUTIVE_OPERATORS"


class InvalidExpressionError(ExpressionError):
    """Raised when tokens do not form a well-shaped binary expression."""

    default_code = "INVALID_EXPRESSION"


class EvaluationError(ExpressionError):
    """Raised when a subexpression has no defined value."""

    default_code = "EVALUATION_ERROR"


class DivisionByZeroError(EvaluationError):
    default_code = "DIVISION_BY_ZERO"


class NonIntegerPowerOfNegativeError(EvaluationError):
    default_code = "NON_INTEGER_POWER_OF_NEGATIVE"


class NumericOverflowError(EvaluationError):
    default_code = "NUMERIC_OVERFLOW"
