"""Operations on binary trees built from :class:`TreeNode`."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _nodes(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of the tree in preorder."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    """Yield the values of the tree in inorder."""
    stack: list[TreeNode] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def copy_tree(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Return a deep copy of the tree made of new nodes."""
    if node is None:
        return None
    return TreeNode(node.value, copy_tree(node.left), copy_tree(node.right))


def trees_equal(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return (
        a.value == b.value
        and trees_equal(a.left, b.left)
        and trees_equal(a.right, b.right)
    )


def count_external_nodes(node: Optional[TreeNode]) -> int:
    """Count the leaves of the tree."""
    return sum(1 for n in _nodes(node) if n.left is None and n.right is None)


def count_internal_nodes(node: Optional[TreeNode]) -> int:
    """Count the nodes that have at least one child."""
    return sum(1 for n in _nodes(node) if n.left is not None or n.right is not None)


def kth_smallest(node: Optional[TreeNode], k: int) -> Any:
    """Return the ``k``-th value (1-based) of an inorder walk.

    For a binary search tree this is the ``k``-th smallest value.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    for position, value in enumerate(_inorder(node), start=1):
        if position == k:
            return value
    raise ValueError(f"tree has fewer than {k} nodes")


def mirror(node: Optional[TreeNode]) -> Optional[TreeNode]:
    """Swap the children of every node in place and return the root."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        current.left, current.right = current.right, current.left
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    return node