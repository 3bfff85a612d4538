"""Binary tree nodes and classic recursive tree algorithms."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node. Nodes compare by identity."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def insert(root: Optional[TreeNode], value: int) -> TreeNode:
    """Insert ``value`` into a binary search tree and return its root.

    Smaller values go left; equal or larger values go right.
    """
    new_node = TreeNode(value)
    if root is None:
        return new_node
    node = root
    while True:
        if value < node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def find_height(root: Optional[TreeNode]) -> int:
    """Height of the tree in edges (-1 for an empty tree)."""
    return max_depth(root) - 1


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Lowest node that has both ``p`` and ``q`` as descendants (a node descends from itself)."""
    if root is None:
        return None
    if root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes whose value is at least every value on the path from the root."""

    def count(node: Optional[TreeNode], highest: float) -> int:
        if node is None:
            return 0
        good = 1 if node.val >= highest else 0
        highest = max(highest, node.val)
        return good + count(node.left, highest) + count(node.right, highest)

    return count(root, float("-inf"))


def _iter_leaves(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is None and node.right is None:
            yield node.val
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def leaf_values(root: Optional[TreeNode]) -> list[int]:
    """Values of the leaves, from left to right."""
    return list(_iter_leaves(root))


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """True when both trees have the same leaf value sequence."""
    return leaf_values(root1) == leaf_values(root2)


def path_sum(root: Optional[TreeNode], target_sum: int) -> int:
    """Count downward paths whose values add up to ``target_sum``."""
    prefix_sums: Counter[int] = Counter({0: 1})

    def count(node: Optional[TreeNode], running: int) -> int:
        if node is None:
            return 0
        running += node.val
        found = prefix_sums[running - target_sum]
        prefix_sums[running] += 1
        found += count(node.left, running) + count(node.right, running)
        prefix_sums[running] -= 1
        return found

    return count(root, 0)