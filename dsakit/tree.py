"""Binary trees built from ``TreeNode`` objects: construction, traversal and reshaping.

Functions that take a tree take its root node, or ``None`` for an empty tree.
Where values describe missing children, ``None`` or ``-1`` marks a missing node.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

ABSENT = -1


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def _is_absent(value: Any) -> bool:
    return value is None or value == ABSENT


def from_sorted(values: Iterable[Any]) -> TreeNode | None:
    """Build a height-balanced search tree from ascending values."""
    items = list(values)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        mid = start + (end - start) // 2
        node = TreeNode(items[mid])
        node.left = build(start, mid - 1)
        node.right = build(mid + 1, end)
        return node

    return build(0, len(items) - 1)


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [child for node in level for child in (node.left, node.right) if child is not None]


def level_averages(root: TreeNode | None) -> list[float]:
    """Return the mean of the values on each level, from the root down."""
    return [sum(node.data for node in level) / len(level) for level in _levels(root)]


def build_from_traversals(inorder: Iterable[Any], preorder: Iterable[Any]) -> TreeNode | None:
    """Rebuild a tree from its in-order and pre-order traversals."""
    in_values = list(inorder)
    pre_values = list(preorder)
    if len(in_values) != len(pre_values):
        raise ValueError("traversals must have the same length")
    order = iter(pre_values)

    def build(start: int, end: int) -> TreeNode | None:
        if start > end:
            return None
        value = next(order)
        try:
            position = in_values.index(value, start, end + 1)
        except ValueError:
            raise ValueError(f"traversals disagree at value {value!r}") from None
        node = TreeNode(value)
        node.left = build(start, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(in_values) - 1)


def flatten(root: TreeNode | None) -> None:
    """Relink the tree in place into a right-leaning chain in pre-order."""
    node = root
    while node is not None:
        if node.left is not None:
            rightmost = node.left
            while rightmost.right is not None:
                rightmost = rightmost.right
            rightmost.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


def build_level_order(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values given level by level, left child before right.

    The first value is the root; each node then takes the next two values as
    its children. Running out of values leaves the remaining children missing.
    """
    stream = iter(values)
    first = next(stream, None)
    if _is_absent(first):
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left_value = next(stream, None)
        if not _is_absent(left_value):
            node.left = TreeNode(left_value)
            queue.append(node.left)
        right_value = next(stream, None)
        if not _is_absent(right_value):
            node.right = TreeNode(right_value)
            queue.append(node.right)
    return root


def build_preorder(values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from values in pre-order, with markers for missing children.

    Running out of values leaves the remaining children missing.
    """
    stream = iter(values)

    def build() -> TreeNode | None:
        value = next(stream, None)
        if _is_absent(value):
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values breadth first, left to right on each level."""
    return [node.data for level in _levels(root) for node in level]


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in pre-order: node, left subtree, right subtree."""
    result: list[Any] = []
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        result.append(node.data)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in in-order: left subtree, node, right subtree."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.data)
        node = node.right
    return result


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the first value met on each level when looking from the left."""
    return [level[0].data for level in _levels(root)]


def morris_inorder(root: TreeNode | None) -> list[Any]:
    """Return the in-order values using threaded links instead of a stack.

    The tree is restored to its original shape before returning.
    """
    result: list[Any] = []
    node = root
    while node is not None:
        if node.left is None:
            result.append(node.data)
            node = node.right
            continue
        predecessor = node.left
        while predecessor.right is not None and predecessor.right is not node:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = node
            node = node.left
        else:
            predecessor.right = None
            result.append(node.data)
            node = node.right
    return result


def size(root: TreeNode | None) -> int:
    """Return the number of nodes in the tree."""
    return sum(len(level) for level in _levels(root))