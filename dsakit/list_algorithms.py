"""Algorithms on singly linked lists: group reversal, merge sort and cycle detection."""

from __future__ import annotations

from dsakit.linked_list import ListNode, reverse


def _kth_node(node: ListNode | None, k: int) -> ListNode | None:
    """Return the ``k``-th node counting ``node`` as the first, or None if the list is shorter."""
    for _ in range(k - 1):
        if node is None:
            return None
        node = node.next
    return node


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the nodes in consecutive groups of ``k``; a short final group keeps its order.

    Returns the new head. A ``k`` below 2 leaves the list as it is.
    """
    if k <= 1:
        return head
    dummy = ListNode(None, head)
    prev_last = dummy
    node = head
    while node is not None:
        kth = _kth_node(node, k)
        if kth is None:
            prev_last.next = node
            break
        following = kth.next
        kth.next = None
        prev_last.next = reverse(node)
        prev_last = node
        node = following
    return dummy.next


def merge_sorted_lists(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Relink two ascending lists into one ascending list and return its head.

    On equal values the node from ``first`` comes first.
    """
    dummy = ListNode(None)
    tail = dummy
    a, b = first, second
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.next = a
            a = a.next
        else:
            tail.next = b
            b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def merge_sort(head: ListNode | None) -> ListNode | None:
    """Sort the list in ascending order by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    right = slow.next
    slow.next = None
    return merge_sorted_lists(merge_sort(head), merge_sort(right))


def _meeting_point(head: ListNode | None) -> ListNode | None:
    """Return the node where the slow and fast pointers meet, or None without a cycle."""
    if head is None or head.next is None:
        return None
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return slow
    return None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` loops forever."""
    return _meeting_point(head) is not None


def cycle_length(head: ListNode | None) -> int:
    """Return the number of nodes in the cycle, or -1 when there is none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return -1
    count = 1
    node = meeting.next
    while node is not meeting:
        count += 1
        node = node.next
    return count


def cycle_start(head: ListNode | None) -> ListNode | None:
    """Return the first node of the cycle, or None when there is none."""
    meeting = _meeting_point(head)
    if meeting is None:
        return None
    slow, fast = head, meeting
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    return slow