"""Singly linked list nodes and basic helpers for building and inspecting them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False, repr=False)
class Node:
    """A node of a singly linked list."""

    data: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list."""
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a linked list holding ``values`` in order; ``None`` if empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def append(head: Node | None, data: Any) -> Node:
    """Add ``data`` at the end of the list and return its head."""
    node = Node(data)
    if head is None:
        return node
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = node
    return head


def length(head: Node | None) -> int:
    """Count the nodes of the list."""
    return 0 if head is None else sum(1 for _ in head)


def is_equal(head1: Node | None, head2: Node | None) -> bool:
    """Tell whether two lists hold the same values in the same order."""
    while head1 is not None and head2 is not None:
        if head1.data != head2.data:
            return False
        head1, head2 = head1.next, head2.next
    return head1 is None and head2 is None