"""Sorting, merging and reversing singly linked lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from dsakit.linked import Node


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def split_half(head: Node | None) -> Node | None:
    """Cut the list after its first half and return the head of the second half.

    The first half keeps the extra node when the length is odd. A list of
    fewer than two nodes has no second half, so ``None`` is returned.
    """
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    second = slow.next
    slow.next = None
    return second


def sorted_merge(a: Node | None, b: Node | None) -> Node | None:
    """Merge two ascending lists into a new ascending list.

    On equal values the node from ``b`` comes first. If either list is empty
    the other one is returned as it is.
    """
    if a is None:
        return b
    if b is None:
        return a
    anchor = Node(None)
    tail = anchor
    while a is not None and b is not None:
        if a.data < b.data:
            value, a = a.data, a.next
        else:
            value, b = b.data, b.next
        tail.next = Node(value)
        tail = tail.next
    rest = a if a is not None else b
    for value in rest or ():
        tail.next = Node(value)
        tail = tail.next
    return anchor.next


def merge_sort(head: Node | None) -> Node | None:
    """Sort the list in ascending order and return the head of the result."""
    if head is None or head.next is None:
        return head
    second = split_half(head)
    return sorted_merge(merge_sort(head), merge_sort(second))


def sort_012(head: Node | None) -> Node | None:
    """Sort a list holding only 0, 1 and 2 by rewriting its values in place."""
    if head is None:
        return head
    counts = Counter(head)
    bad = set(counts) - {0, 1, 2}
    if bad:
        raise ValueError(f"list may only hold 0, 1 and 2, found {sorted(bad)!r}")
    ordered = (value for value in (0, 1, 2) for _ in range(counts[value]))
    for node, value in zip(_nodes(head), ordered):
        node.data = value
    return head


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list by relinking its nodes; return the new head."""
    prev: Node | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = prev
        prev = node
        node = following
    return prev