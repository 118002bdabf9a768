"""Operations that rearrange the nodes of a singly linked list."""

from __future__ import annotations

from dsakit.linked import Node, length


def _require_positive(k: int) -> None:
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")


def k_reverse(head: Node | None, k: int) -> Node | None:
    """Reverse the list in consecutive groups of ``k`` nodes; return the new head."""
    _require_positive(k)
    new_head: Node | None = None
    prev_tail: Node | None = None
    node = head
    while node is not None:
        group_tail = node
        prev: Node | None = None
        count = 0
        while node is not None and count < k:
            following = node.next
            node.next = prev
            prev = node
            node = following
            count += 1
        if prev_tail is None:
            new_head = prev
        else:
            prev_tail.next = prev
        prev_tail = group_tail
    return new_head


def k_alt_reverse(head: Node | None, k: int) -> Node | None:
    """Reverse every other group of ``k`` nodes, starting with the first."""
    _require_positive(k)
    result: Node | None = None
    attach_to: Node | None = None
    while head is not None and head.next is not None:
        prev: Node | None = None
        node: Node | None = head
        count = 0
        while node is not None and count < k:
            following = node.next
            node.next = prev
            prev = node
            node = following
            count += 1
        head.next = node
        if attach_to is None:
            result = prev
        else:
            attach_to.next = prev
        last = head
        count = 0
        while node is not None and count < k:
            last = node
            node = node.next
            count += 1
        attach_to = last
        head = node
    if head is not None:
        if attach_to is None:
            result = head
        else:
            attach_to.next = head
    return result


def pair_swap(head: Node | None) -> Node | None:
    """Swap adjacent nodes pairwise by relinking; return the new head."""
    anchor = Node(None, head)
    prev = anchor
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return anchor.next


def pair_swap_iterative(head: Node | None) -> Node | None:
    """Swap adjacent nodes pairwise by walking three pointers; return the new head."""
    if head is None or head.next is None:
        return head
    prev = head
    curr = head.next
    following = curr.next
    head = curr
    while following is not None and following.next is not None:
        curr.next = prev
        prev.next = following.next
        prev = following
        curr = prev.next
        following = following.next.next
    curr.next = prev
    prev.next = following
    return head


def pair_swap_values(head: Node | None) -> None:
    """Swap the data of adjacent nodes pairwise, in place."""
    node = head
    while node is not None and node.next is not None:
        node.data, node.next.data = node.next.data, node.data
        node = node.next.next


def rotate_counter_clockwise(head: Node | None, k: int) -> Node | None:
    """Move the first ``k`` nodes to the end of the list; return the new head.

    A ``k`` larger than the list leaves it unchanged.
    """
    if head is None or head.next is None:
        return head
    n = length(head)
    steps = n - k
    if steps <= 0:
        return head
    steps %= n
    if steps == 0:
        return head
    new_tail = head
    for _ in range(n - steps - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    last = new_head
    while last.next is not None:
        last = last.next
    last.next = head
    return new_head


def swap_kth(head: Node | None, k: int) -> Node | None:
    """Swap the k-th node from the start with the k-th from the end; return the new head."""
    if head is None or head.next is None:
        return head
    n = length(head)
    if k < 1 or k > n:
        raise ValueError(f"k must be between 1 and {n}, got {k}")
    if 2 * k - 1 == n:
        return head
    k = min(k, n - k + 1)
    anchor = Node(None, head)
    before_x = anchor
    for _ in range(k - 1):
        before_x = before_x.next
    before_y = anchor
    for _ in range(n - k):
        before_y = before_y.next
    x = before_x.next
    y = before_y.next
    if x.next is y:
        before_x.next = y
        x.next = y.next
        y.next = x
    else:
        before_x.next, before_y.next = y, x
        x.next, y.next = y.next, x.next
    return anchor.next


def merge_alternate(p: Node | None, q: Node | None) -> tuple[Node | None, Node | None]:
    """Insert nodes of ``q`` after alternate nodes of ``p``.

    Returns the head of ``p`` and the part of ``q`` that did not fit.
    """
    if p is None or q is None:
        return p, q
    p_curr: Node | None = p
    q_curr: Node | None = q
    while p_curr is not None and q_curr is not None:
        p_next, q_next = p_curr.next, q_curr.next
        q_curr.next = p_next
        p_curr.next = q_curr
        p_curr, q_curr = p_next, q_next
    return p, q_curr


def separate_even_odd(head: Node | None) -> Node | None:
    """Relink the list so even values come before odd ones, each in original order."""
    if head is None or head.next is None:
        return head
    evens = Node(None)
    odds = Node(None)
    even_tail, odd_tail = evens, odds
    node: Node | None = head
    while node is not None:
        following = node.next
        node.next = None
        if node.data % 2 == 0:
            even_tail.next = node
            even_tail = node
        else:
            odd_tail.next = node
            odd_tail = node
        node = following
    even_tail.next = odds.next
    return evens.next