"""Circular singly linked lists built from :class:`dsakit.linked.Node`."""

from __future__ import annotations

from typing import Any, Iterator

from dsakit.linked import Node


def make_circular(head: Node | None) -> Node | None:
    """Link the last node back to ``head``; return ``head``."""
    if head is None:
        return head
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = head
    return head


def _ring(head: Node) -> Iterator[Node]:
    node = head
    while True:
        yield node
        node = node.next
        if node is head:
            return
        if node is None:
            raise ValueError("list is not circular")


def circular_to_list(head: Node | None) -> list[Any]:
    """Return the values of one round of the circular list."""
    return [] if head is None else [node.data for node in _ring(head)]


def split_circular(head: Node | None) -> tuple[Node | None, Node | None]:
    """Split a circular list into two circular halves; the first gets any extra node."""
    if head is None:
        return None, None
    for _ in _ring(head):
        pass
    if head.next is head:
        return head, None
    slow = fast = head
    while fast.next is not head and fast.next.next is not head:
        fast = fast.next.next
        slow = slow.next
    second = slow.next
    if fast.next.next is head:
        fast = fast.next
    fast.next = second
    slow.next = head
    return head, second