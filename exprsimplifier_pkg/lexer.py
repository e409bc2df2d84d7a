"""Expression lexer.

Splits an expression string into an ordered token sequence:
- unary minus is fused into number literals or becomes a ``-1`` coefficient
- implicit multiplication (``2x``, ``2(x+1)``, ``(x)(y)``) gets an explicit ``*``
- parenthesized spans are captured whole as sub-expression tokens
"""

from __future__ import annotations

from . import config
from .logging_config import get_logger
from .tokens import MULTIPLY, OPERATOR_SYMBOLS, Token, TokenKind
from .types import (
    ConsecutiveOperatorsError,
    InvalidCharacterError,
    InvalidExpressionError,
    UnmatchedCloseParenError,
    UnmatchedOpenParenError,
    ValidationError,
)

logger = get_logger("lexer")

OPEN_PAREN = "("
CLOSE_PAREN = ")"
NEGATIVE_SIGN = "-"
DECIMAL_POINT = "."
NEGATIVE_ONE = "-1"

# Previous token kinds after which a parenthesis means multiplication.
_IMPLICIT_MULTIPLICAND_KINDS = (TokenKind.NUMBER, TokenKind.SUBEXPRESSION)


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def find_closing_paren(text: str, start: int) -> int:
    """Return the index of the parenthesis closing the one at ``start``, or -1.

    Raises:
        ValidationError: if nesting gets deeper than MAX_EXPRESSION_DEPTH
    """
    depth = 0
    for idx in range(start, len(text)):
        char = text[idx]
        if char == OPEN_PAREN:
            depth += 1
            if depth > config.MAX_EXPRESSION_DEPTH:
                raise ValidationError(
                    f"Expression too deeply nested (>{config.MAX_EXPRESSION_DEPTH} levels)",
                    "TOO_DEEP",
                )
        elif char == CLOSE_PAREN:
            depth -= 1
        if depth == 0:
            return idx
    return -1


def _scan_number(text: str, start: int) -> int:
    """Return the end (exclusive) of the digit run starting at ``start``, allowing one '.'."""
    end = start
    seen_point = False
    while end < len(text):
        char = text[end]
        if _is_digit(char):
            end += 1
        elif char == DECIMAL_POINT and not seen_point:
            seen_point = True
            end += 1
        else:
            break
    return end


def _scan_variable(text: str, start: int) -> int:
    end = start
    while end < len(text) and (text[end].isalpha() or _is_digit(text[end])):
        end += 1
    return end


def lex(expr: str) -> list[Token]:
    """Split an expression into tokens.

    Args:
        expr: Expression string (e.g., "2x - (y+1)^2")

    Returns:
        Token list including synthetic multiplication tokens
        (e.g., "2x" -> [2, *, x])

    Raises:
        ValidationError: input too long or too deeply nested
        InvalidCharacterError: a character outside numbers, letters, operators and parentheses
        UnmatchedOpenParenError: a '(' without a matching ')'
        UnmatchedCloseParenError: a ')' without a matching '('
        ConsecutiveOperatorsError: two binary operators in a row
        InvalidExpressionError: a variable directly followed by '(' or a trailing sign
    """
    if len(expr) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )

    text = "".join(expr.split())
    tokens: list[Token] = []
    prev_kind: TokenKind | None = None
    pos = 0

    while pos < len(text):
        char = text[pos]

        if char == OPEN_PAREN:
            if prev_kind in _IMPLICIT_MULTIPLICAND_KINDS:
                tokens.append(MULTIPLY)
            elif prev_kind is TokenKind.VARIABLE:
                raise InvalidExpressionError(
                    f"Variable '{tokens[-1].lexeme}' cannot be followed by '('"
                )
            end = find_closing_paren(text, pos)
            if end == -1:
                raise UnmatchedOpenParenError("Unmatched opening parenthesis")
            token = Token(text[pos : end + 1], TokenKind.SUBEXPRESSION)
            pos = end + 1

        elif char == CLOSE_PAREN:
            raise UnmatchedCloseParenError("Unmatched closing parenthesis")

        elif char == NEGATIVE_SIGN and (prev_kind is None or prev_kind is TokenKind.OPERATOR):
            if pos + 1 >= len(text):
                raise InvalidExpressionError("Expression ends with a negative sign")
            if _is_digit(text[pos + 1]):
                end = _scan_number(text, pos + 1)
                token = Token(text[pos:end], TokenKind.NUMBER)
                pos = end
            else:
                # -x and -(...) become -1 * x and -1 * (...)
                token = Token(NEGATIVE_ONE, TokenKind.NUMBER)
                pos += 1

        elif char in OPERATOR_SYMBOLS:
            if prev_kind is TokenKind.OPERATOR:
                raise ConsecutiveOperatorsError(
                    f"Two operators in a row: '{tokens[-1].lexeme}{char}'"
                )
            token = Token(char, TokenKind.OPERATOR)
            pos += 1

        elif _is_digit(char):
            end = _scan_number(text, pos)
            token = Token(text[pos:end], TokenKind.NUMBER)
            pos = end

        elif char.isalpha():
            if prev_kind is TokenKind.NUMBER:
                tokens.append(MULTIPLY)
            end = _scan_variable(text, pos)
            token = Token(text[pos:end], TokenKind.VARIABLE)
            pos = end

        else:
            raise InvalidCharacterError(f"Invalid character: {char}")

        tokens.append(token)
        prev_kind = token.kind

    logger.debug(f"Lexed {text!r} into {[t.lexeme for t in tokens]}")
    return tokens
