"""Immutable binary syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, Optional

from .tokens import Token, TokenKind


@dataclass(frozen=True)
class SyntaxTree:
    """A leaf (Number or Variable token) or an operator node with two children.

    Equality and hashing are structural, so two independently built trees for
    ``x+1`` compare equal.
    """

    token: Token
    left: Optional[SyntaxTree] = None
    right: Optional[SyntaxTree] = None

    def __post_init__(self) -> None:
        if (self.left is None) != (self.right is None):
            raise ValueError("Operator nodes need exactly two children")

    @classmethod
    def number(cls, lexeme: str) -> SyntaxTree:
        return cls(Token(lexeme, TokenKind.NUMBER))

    @classmethod
    def variable(cls, name: str) -> SyntaxTree:
        return cls(Token(name, TokenKind.VARIABLE))

    @classmethod
    def node(cls, symbol: str, left: SyntaxTree, right: SyntaxTree) -> SyntaxTree:
        return cls(Token(symbol, TokenKind.OPERATOR), left, right)

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    @property
    def is_number(self) -> bool:
        return self.is_leaf and self.token.is_number

    @property
    def is_variable(self) -> bool:
        return self.is_leaf and self.token.is_variable

    @property
    def is_operator_leaf(self) -> bool:
        """Bare operator token, only present while the tree is being built."""
        return self.is_leaf and self.token.is_operator

    @property
    def symbol(self) -> str:
        return self.token.lexeme

    def is_op(self, symbol: str) -> bool:
        return not self.is_leaf and self.token.lexeme == symbol

    def number_equals(self, value: int) -> bool:
        """True for a Number leaf whose value equals ``value`` (``1.0`` equals 1)."""
        return self.is_number and self.token.value == value

    @property
    def is_power_like(self) -> bool:
        """A bare variable, or a power whose base is a bare variable."""
        return self.is_variable or (self.is_op("^") and self.left.is_variable)

    def exponent(self) -> Optional[Decimal]:
        """Numeric exponent of a power-like tree; a bare variable has exponent 1."""
        if self.is_variable:
            return Decimal(1)
        if self.is_op("^") and self.right.is_number:
            return self.right.token.value
        return None

    def depth(self) -> int:
        """Height of the tree, computed with an explicit stack."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            tree, level = stack.pop()
            deepest = max(deepest, level)
            if not tree.is_leaf:
                stack.append((tree.left, level + 1))
                stack.append((tree.right, level + 1))
        return deepest

    def variables(self) -> Iterator[str]:
        """Yield variable names in left-to-right order (duplicates included)."""
        stack = [self]
        while stack:
            tree = stack.pop()
            if tree.is_leaf:
                if tree.token.is_variable:
                    yield tree.token.lexeme
            else:
                stack.append(tree.right)
                stack.append(tree.left)

    def __str__(self) -> str:
        if self.is_leaf:
            return self.token.lexeme
        return f"({self.left} {self.token} {self.right})"
