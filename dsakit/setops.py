"""Set-like operations on singly linked lists: membership, union, intersection, deduplication."""

from __future__ import annotations

from typing import Any

from dsakit.linked import Node, from_iterable
from dsakit.sorting import merge_sort, reverse_list


def contains(head: Node | None, value: Any) -> bool:
    """Tell whether the list holds ``value``."""
    return head is not None and value in head


def sorted_intersection(head1: Node | None, head2: Node | None) -> Node | None:
    """Return a new list of the values common to two ascending lists, in one pass."""
    common = []
    while head1 is not None and head2 is not None:
        if head1.data == head2.data:
            common.append(head1.data)
            head1, head2 = head1.next, head2.next
        elif head1.data < head2.data:
            head1 = head1.next
        else:
            head2 = head2.next
    return from_iterable(common)


def intersection_nested(head1: Node | None, head2: Node | None) -> Node | None:
    """Return a new list with one entry for every equal pair of values across the lists."""
    if head1 is None or head2 is None:
        return None
    return from_iterable(a for a in head1 for b in head2 if a == b)


def union(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the distinct values of both lists in order of first appearance.

    If either list is empty the result is empty.
    """
    if head1 is None or head2 is None:
        return None
    result: list[Any] = []
    for value in (*head1, *head2):
        if value not in result:
            result.append(value)
    return from_iterable(result)


def intersection(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the distinct values of ``head1`` that also occur in ``head2``, in ``head1`` order."""
    if head1 is None or head2 is None:
        return None
    result: list[Any] = []
    for value in head1:
        if value not in result and contains(head2, value):
            result.append(value)
    return from_iterable(result)


def hashed_union(head1: Node | None, head2: Node | None) -> Node | None:
    """Like :func:`union`, using a hash set to track the values seen."""
    if head1 is None or head2 is None:
        return None
    seen: set[Any] = set()
    result = []
    for value in (*head1, *head2):
        if value not in seen:
            seen.add(value)
            result.append(value)
    return from_iterable(result)


def hashed_intersection(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the distinct values of ``head2`` that also occur in ``head1``, in ``head2`` order."""
    if head1 is None or head2 is None:
        return None
    pending = set(head1)
    result = []
    for value in head2:
        if value in pending:
            result.append(value)
            pending.discard(value)
    return from_iterable(result)


def remove_sorted_duplicates(head: Node | None) -> Node | None:
    """Unlink repeated values from an ascending list in place; return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.data == node.next.data:
            node.next = node.next.next
        else:
            node = node.next
    return head


def remove_duplicates(head: Node | None) -> Node | None:
    """Unlink every repeat of a value from an unsorted list in place; return its head."""
    if head is None:
        return head
    seen = {head.data}
    prev = head
    node = head.next
    while node is not None:
        if node.data in seen:
            prev.next = node.next
        else:
            seen.add(node.data)
            prev = node
        node = node.next
    return head


def find_triplet(
    head1: Node | None, head2: Node | None, head3: Node | None, target: Any
) -> tuple[Any, Any, Any] | None:
    """Find one value from each list whose sum is ``target``.

    Values of ``head1`` are tried in list order against ``head2`` ascending and
    ``head3`` descending. Returns the first triplet found, or ``None``. The
    input lists are left unchanged.
    """
    if head1 is None or head2 is None or head3 is None:
        return None
    ascending = merge_sort(from_iterable(head2))
    descending = reverse_list(merge_sort(from_iterable(head3)))
    for a in head1:
        b, c = ascending, descending
        while b is not None and c is not None:
            total = a + b.data + c.data
            if total == target:
                return a, b.data, c.data
            if total < target:
                b = b.next
            else:
                c = c.next
    return None