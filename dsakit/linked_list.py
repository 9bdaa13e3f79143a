"""Singly linked lists built from ``ListNode`` objects.

Every function takes the head node, or ``None`` for an empty list. Functions
that change a list relink its nodes in place and return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = field(default=None, repr=False)


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding the values in order; ``None`` when there are none."""
    dummy = ListNode(None)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the list in order."""
    return [node.data for node in _nodes(head)]


def length(head: ListNode | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def contains(head: ListNode | None, value: Any) -> bool:
    """Tell whether some node holds ``value``."""
    return any(node.data == value for node in _nodes(head))


def delete_head(head: ListNode | None) -> ListNode | None:
    """Remove the first node and return the new head."""
    if head is None:
        return None
    rest = head.next
    head.next = None
    return rest


def delete_tail(head: ListNode | None) -> ListNode | None:
    """Remove the last node and return the head."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next.next is not None:
        node = node.next
    node.next = None
    return head


def delete_at(head: ListNode | None, k: int) -> ListNode | None:
    """Remove the node at the 1-based position ``k`` and return the head."""
    if head is None:
        return None
    if k < 1:
        raise IndexError("position must be at least 1")
    if k == 1:
        return head.next
    prev = head
    for _ in range(k - 2):
        if prev.next is None:
            raise IndexError("position past the end of the list")
        prev = prev.next
    if prev.next is None:
        raise IndexError("position past the end of the list")
    prev.next = prev.next.next
    return head


def delete_value(head: ListNode | None, value: Any) -> ListNode | None:
    """Remove the first node holding ``value`` and return the head."""
    if head is None:
        return None
    if head.data == value:
        return head.next
    prev = head
    while prev.next is not None:
        if prev.next.data == value:
            prev.next = prev.next.next
            break
        prev = prev.next
    return head


def insert_at(head: ListNode | None, data: Any, pos: int) -> ListNode | None:
    """Insert ``data`` so that it ends up at the 1-based position ``pos``.

    On an empty list only position 1 inserts; any other position leaves it empty.
    """
    if head is None:
        return ListNode(data) if pos == 1 else None
    if pos < 1:
        raise IndexError("position must be at least 1")
    if pos == 1:
        return ListNode(data, head)
    prev = head
    for _ in range(pos - 2):
        prev = prev.next
        if prev is None:
            raise IndexError("position past the end of the list")
    prev.next = ListNode(data, prev.next)
    return head


def add_two_numbers(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Add two numbers stored as digit lists, least significant digit first.

    Returns a new list; the inputs are left untouched.
    """
    dummy = ListNode(None)
    tail = dummy
    carry = 0
    a, b = first, second
    while a is not None or b is not None:
        total = carry
        if a is not None:
            total += a.data
            a = a.next
        if b is not None:
            total += b.data
            b = b.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Remove the middle node (the second of two middles) and return the head."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    prev = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        prev = slow
        slow = slow.next
    prev.next = slow.next
    return head


def delete_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Remove the ``n``-th node counted from the end (1 is the tail) and return the head."""
    if head is None:
        return None
    if n < 1:
        raise IndexError("position must be at least 1")
    fast: ListNode | None = head
    for _ in range(n):
        if fast is None:
            raise IndexError("position past the start of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def middle(head: ListNode | None) -> ListNode | None:
    """Return the middle node; of two middles, the second."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def odd_even(head: ListNode | None) -> ListNode | None:
    """Relink the nodes so that those at odd positions come before those at even ones."""
    if head is None or head.next is None:
        return head
    odd = head
    even = even_head = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list and return the new head."""
    prev: ListNode | None = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    count = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        count += 1
    k %= count
    if k == 0:
        return head
    new_tail = head
    for _ in range(count - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def sort_012(head: ListNode | None) -> ListNode | None:
    """Relink a list of zeros, ones and twos into ascending order, keeping node order within each value.

    Values other than 0 and 1 are placed with the twos.
    """
    if head is None or head.next is None:
        return head
    zero_dummy, one_dummy, two_dummy = ListNode(-1), ListNode(-1), ListNode(-1)
    zero, one, two = zero_dummy, one_dummy, two_dummy
    for node in list(_nodes(head)):
        if node.data == 0:
            zero.next = node
            zero = node
        elif node.data == 1:
            one.next = node
            one = node
        else:
            two.next = node
            two = node
    zero.next = one_dummy.next if one_dummy.next is not None else two_dummy.next
    one.next = two_dummy.next
    two.next = None
    return zero_dummy.next