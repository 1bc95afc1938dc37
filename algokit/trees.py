"""Binary tree nodes, height and spiral (zig-zag) level-order traversal."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary tree node."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def height(root: Optional[TreeNode]) -> int:
    """Number of levels in the tree; an empty tree has height 0."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def spiral_order(root: Optional[TreeNode]) -> list[Any]:
    """Node values level by level, alternating direction.

    The first level is read right to left, the second left to right,
    and so on.
    """
    result: list[Any] = []
    level = [root] if root is not None else []
    right_to_left = True
    while level:
        values = [node.data for node in level]
        result.extend(reversed(values) if right_to_left else values)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        right_to_left = not right_to_left
    return result