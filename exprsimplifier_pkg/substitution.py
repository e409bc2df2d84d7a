"""Replace variables with numeric literals."""

from __future__ import annotations

from typing import Mapping

from .tree import SyntaxTree


def substitute(tree: SyntaxTree, bindings: Mapping[str, str]) -> SyntaxTree:
    """Return a copy of ``tree`` with bound variables replaced by Number leaves.

    Variables without a binding are kept as they are. Subtrees without any bound
    variable are shared with the input tree.
    """
    if not bindings:
        return tree
    if tree.is_leaf:
        if tree.token.is_variable and tree.token.lexeme in bindings:
            return SyntaxTree.number(bindings[tree.token.lexeme])
        return tree

    left = substitute(tree.left, bindings)
    right = substitute(tree.right, bindings)
    if left is tree.left and right is tree.right:
        return tree
    return SyntaxTree(tree.token, left, right)
