"""Doubly linked lists built from ``DNode`` objects.

Every function takes the head node, or ``None`` for an empty list. Functions
that change a list relink its nodes in place and return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DNode:
    """A node of a doubly linked list."""

    data: Any
    next: DNode | None = field(default=None, repr=False)
    prev: DNode | None = field(default=None, repr=False)


def _nodes(head: DNode | None) -> Iterator[DNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _node_at(head: DNode | None, k: int) -> DNode:
    """Return the node at the 1-based position ``k``."""
    if k < 1:
        raise IndexError("position must be at least 1")
    for position, node in enumerate(_nodes(head), start=1):
        if position == k:
            return node
    raise IndexError("position past the end of the list")


def from_iterable(values: Iterable[Any]) -> DNode | None:
    """Build a list holding the values in order; ``None`` when there are none."""
    dummy = DNode(None)
    tail = dummy
    for value in values:
        node = DNode(value, prev=tail)
        tail.next = node
        tail = node
    head = dummy.next
    if head is not None:
        head.prev = None
    return head


def to_list(head: DNode | None) -> list[Any]:
    """Return the values of the list in order."""
    return [node.data for node in _nodes(head)]


def delete_head(head: DNode | None) -> DNode | None:
    """Remove the first node and return the new head."""
    if head is None or head.next is None:
        return None
    new_head = head.next
    new_head.prev = None
    head.next = None
    return new_head


def delete_tail(head: DNode | None) -> DNode | None:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    new_tail = tail.prev
    tail.prev = None
    new_tail.next = None
    return head


def delete_at(head: DNode | None, k: int) -> DNode | None:
    """Remove the node at the 1-based position ``k`` and return the head."""
    if head is None:
        return None
    node = _node_at(head, k)
    back, front = node.prev, node.next
    if back is None and front is None:
        return None
    if back is None:
        return delete_head(head)
    if front is None:
        return delete_tail(head)
    back.next = front
    front.prev = back
    node.next = node.prev = None
    return head


def insert_at_head(head: DNode | None, data: Any) -> DNode | None:
    """Put a new node holding ``data`` before the head and return it.

    An empty list stays empty.
    """
    if head is None:
        return None
    node = DNode(data, next=head)
    head.prev = node
    return node


def insert_at_tail(head: DNode | None, data: Any) -> DNode | None:
    """Append a new node holding ``data`` and return the head.

    An empty list stays empty.
    """
    if head is None:
        return None
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = DNode(data, prev=tail)
    return head


def insert_before(head: DNode | None, data: Any, k: int) -> DNode | None:
    """Insert ``data`` before the node at the 1-based position ``k`` and return the head."""
    if k == 1:
        return insert_at_head(head, data)
    node = _node_at(head, k)
    back = node.prev
    new_node = DNode(data, next=node, prev=back)
    back.next = new_node
    node.prev = new_node
    return head


def remove_all(head: DNode | None, key: Any) -> DNode | None:
    """Remove every node holding ``key`` and return the new head."""
    node = head
    while node is not None:
        following = node.next
        if node.data == key:
            if node is head:
                head = following
            back = node.prev
            if following is not None:
                following.prev = back
            if back is not None:
                back.next = following
            node.next = node.prev = None
        node = following
    return head