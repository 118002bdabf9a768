"""Binary tree nodes with traversals, measurements and in-place transformations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(eq=False, repr=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r})"


def _inorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield from _inorder(root.left)
        yield root.data
        yield from _inorder(root.right)


def _preorder(root: TreeNode | None) -> Iterator[Any]:
    if root is not None:
        yield root.data
        yield from _preorder(root.left)
        yield from _preorder(root.right)


def _levels(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order."""
    return list(_preorder(root))


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, each level left to right."""
    result: list[Any] = []
    if root is None:
        return result
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
        result.append(node.data)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order, walking with a single stack."""
    result: list[Any] = []
    if root is None:
        return result
    stack: list[TreeNode] = []
    node: TreeNode | None = root
    while True:
        if node is not None:
            if node.right is not None:
                stack.append(node.right)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            if node.right is not None and stack and stack[-1] is node.right:
                stack.pop()
                stack.append(node)
                node = node.right
            else:
                result.append(node.data)
                node = None
        if not stack:
            break
    return result


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""

    def check(node: TreeNode | None) -> int | None:
        if node is None:
            return 0
        left = check(node.left)
        if left is None:
            return None
        right = check(node.right)
        if right is None or abs(left - right) >= 2:
            return None
        return 1 + max(left, right)

    return check(root) is not None


def count_leaves(root: TreeNode | None) -> int:
    """Count the nodes that have no children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def spiral_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, alternating direction.

    The root level comes first, the second level left to right, the third
    right to left, and so on.
    """
    result: list[Any] = []
    for depth, level in enumerate(_levels(root)):
        values = [node.data for node in level]
        if depth % 2 == 0:
            values.reverse()
        result.extend(values)
    return result


def max_width(root: TreeNode | None) -> int:
    """Return the largest number of nodes found on a single level."""
    return max((len(level) for level in _levels(root)), default=0)


def mirror(root: TreeNode | None) -> TreeNode | None:
    """Swap left and right children throughout the tree in place; return the root."""
    if root is not None:
        mirror(root.left)
        mirror(root.right)
        root.left, root.right = root.right, root.left
    return root


def double_tree(root: TreeNode | None) -> TreeNode | None:
    """Insert a copy of each node as its left child, in place; return the root."""
    if root is not None:
        double_tree(root.left)
        double_tree(root.right)
        root.left = TreeNode(root.data, root.left)
    return root


def root_to_leaf_paths(root: TreeNode | None) -> list[list[Any]]:
    """Return the values along every root-to-leaf path, leftmost path first."""
    paths: list[list[Any]] = []

    def walk(node: TreeNode | None, path: list[Any]) -> None:
        if node is None:
            return
        path = [*path, node.data]
        if node.left is None and node.right is None:
            paths.append(path)
        else:
            walk(node.left, path)
            walk(node.right, path)

    walk(root, [])
    return paths


def has_path_sum(root: TreeNode | None, total: Any) -> bool:
    """Tell whether some root-to-leaf path adds up to ``total``."""
    return any(sum(path) == total for path in root_to_leaf_paths(root))