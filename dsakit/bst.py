"""Binary search trees: checks, lookups and conversions from trees and sorted lists."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from dsakit.linked import Node
from dsakit.tree import TreeNode, inorder as _inorder_values


def is_bst(root: TreeNode | None) -> bool:
    """Tell whether the tree is a binary search tree with distinct keys."""

    def check(node: TreeNode | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and node.data <= low:
            return False
        if high is not None and node.data >= high:
            return False
        return check(node.left, low, node.data) and check(node.right, node.data, high)

    return check(root, None, None)


def contains(root: TreeNode | None, value: Any) -> bool:
    """Tell whether the binary search tree holds ``value``."""
    node = root
    while node is not None:
        if value == node.data:
            return True
        node = node.left if value < node.data else node.right
    return False


def lca(root: TreeNode | None, a: Any, b: Any) -> TreeNode | None:
    """Return the lowest common ancestor of ``a`` and ``b`` in a binary search tree.

    Returns ``None`` if either value is missing from the tree.
    """
    if root is None or not contains(root, a) or not contains(root, b):
        return None
    node = root
    while True:
        if node.data > a and node.data > b:
            node = node.left
        elif node.data < a and node.data < b:
            node = node.right
        else:
            return node


def binary_tree_to_bst(root: TreeNode | None) -> TreeNode | None:
    """Rewrite the tree's values in place so it becomes a search tree of the same shape."""
    if root is None:
        return root
    values = iter(sorted(_inorder_values(root)))

    def assign(node: TreeNode | None) -> None:
        if node is None:
            return
        assign(node.left)
        node.data = next(values)
        assign(node.right)

    assign(root)
    return root


def build_tree(inorder: Sequence[Any], preorder: Sequence[Any]) -> TreeNode | None:
    """Rebuild a binary tree from its inorder and preorder traversals."""
    if len(inorder) != len(preorder):
        raise ValueError(
            f"traversals differ in length: {len(inorder)} and {len(preorder)}"
        )
    order = list(inorder)
    roots = iter(preorder)

    def build(beg: int, end: int) -> TreeNode | None:
        if beg > end:
            return None
        value = next(roots)
        try:
            position = order.index(value, beg, end + 1)
        except ValueError:
            raise ValueError(
                f"value {value!r} from preorder is not where inorder expects it"
            ) from None
        node = TreeNode(value)
        node.left = build(beg, position - 1)
        node.right = build(position + 1, end)
        return node

    return build(0, len(order) - 1)


def has_children_sum_property(root: TreeNode | None) -> bool:
    """Tell whether every inner node equals the sum of its children's values."""
    if root is None or (root.left is None and root.right is None):
        return True
    left = root.left.data if root.left is not None else 0
    right = root.right.data if root.right is not None else 0
    return (
        root.data == left + right
        and has_children_sum_property(root.left)
        and has_children_sum_property(root.right)
    )


def _increment_down(root: TreeNode, diff: Any) -> None:
    node = root
    while True:
        if node.left is not None:
            node = node.left
        elif node.right is not None:
            node = node.right
        else:
            return
        node.data += diff


def convert_to_children_sum(root: TreeNode | None) -> TreeNode | None:
    """Raise values in place until every inner node equals the sum of its children.

    No value is ever decreased. Returns the root.
    """
    if root is None or (root.left is None and root.right is None):
        return root
    convert_to_children_sum(root.left)
    convert_to_children_sum(root.right)
    left = root.left.data if root.left is not None else 0
    right = root.right.data if root.right is not None else 0
    diff = root.data - (left + right)
    if diff < 0:
        root.data -= diff
    elif diff > 0:
        _increment_down(root, diff)
    return root


def sorted_list_to_bst(head: Node | None) -> TreeNode | None:
    """Build a balanced search tree from an ascending singly linked list.

    The list is left unchanged; the tree is made of new nodes.
    """
    values = iter([] if head is None else head)
    count = 0 if head is None else sum(1 for _ in head)

    def build(n: int) -> TreeNode | None:
        if n <= 0:
            return None
        left = build(n // 2)
        root = TreeNode(next(values), left)
        root.right = build(n - n // 2 - 1)
        return root

    return build(count)


def dll_from_iterable(values: Iterable[Any]) -> TreeNode | None:
    """Build a doubly linked list of tree nodes, ``left`` pointing back and ``right`` forward."""
    head: TreeNode | None = None
    tail: TreeNode | None = None
    for value in values:
        node = TreeNode(value, tail)
        if tail is None:
            head = node
        else:
            tail.right = node
        tail = node
    return head


def sorted_dll_to_bst(head: TreeNode | None) -> TreeNode | None:
    """Turn an ascending doubly linked list into a balanced search tree in place."""
    count = 0
    node = head
    while node is not None:
        count += 1
        node = node.right
    cursor = head

    def build(n: int) -> TreeNode | None:
        nonlocal cursor
        if n <= 0:
            return None
        left = build(n // 2)
        root = cursor
        assert root is not None
        root.left = left
        cursor = cursor.right
        root.right = build(n - n // 2 - 1)
        return root

    return build(count)