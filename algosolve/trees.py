"""Binary tree and binary search tree algorithms."""

from __future__ import annotations

from typing import Optional

from .structures import TreeNode


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node that has both p and q as descendants."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path as values joined by '->'."""
    paths: list[str] = []

    def walk(node: TreeNode, prefix: str) -> None:
        if node.left is None and node.right is None:
            paths.append(prefix)
            return
        for child in (node.left, node.right):
            if child is not None:
                walk(child, f"{prefix}->{child.val}")

    if root is not None:
        walk(root, str(root.val))
    return paths


def is_valid_serialization(preorder: str) -> bool:
    """Check a comma-separated preorder serialization using '#' for null."""
    tokens = preorder.split(",")
    if tokens[-1] == "":
        tokens.pop()
    slots = 1
    for token in tokens:
        slots -= 1
        if slots < 0:
            return False
        if token != "#":
            slots += 2
    return slots == 0


def diameter_of_binary_tree(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest path between two nodes."""
    best = 0

    def depth(node: Optional[TreeNode]) -> int:
        nonlocal best
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    depth(root)
    return best


def insert_into_bst(root: Optional[TreeNode], val: int) -> TreeNode:
    """Insert val into a BST (equal values go right) and return the root."""
    new_node = TreeNode(val)
    if root is None:
        return new_node
    node = root
    while True:
        if val < node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def prune_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Remove every subtree that contains no 1, returning the new root."""
    if root is None:
        return None
    root.left = prune_tree(root.left)
    root.right = prune_tree(root.right)
    if root.val == 0 and root.left is None and root.right is None:
        return None
    return root


def distribute_coins(root: Optional[TreeNode]) -> int:
    """Return the moves needed so that every node holds exactly one coin."""
    moves = 0

    def excess(node: Optional[TreeNode]) -> int:
        nonlocal moves
        if node is None:
            return 0
        left = excess(node.left)
        right = excess(node.right)
        moves += abs(left) + abs(right)
        return node.val + left + right - 1

    excess(root)
    return moves


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Check that the tree is a strict binary search tree."""

    def valid(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if low is not None and node.val <= low:
            return False
        if high is not None and node.val >= high:
            return False
        return valid(node.left, low, node.val) and valid(node.right, node.val, high)

    return valid(root, None, None)


def bst_insert(root: Optional[TreeNode], data: int) -> TreeNode:
    """Insert data into a BST (equal values go left) and return the root."""
    new_node = TreeNode(data)
    if root is None:
        return new_node
    node = root
    while True:
        if data <= node.val:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def top_view(root: Optional[TreeNode]) -> list[int]:
    """Return the left spine bottom-up, then the root and its right spine."""
    if root is None:
        return []
    left_spine: list[int] = []
    node = root.left
    while node is not None:
        left_spine.append(node.val)
        node = node.left
    right_spine: list[int] = []
    node = root
    while node is not None:
        right_spine.append(node.val)
        node = node.right
    return left_spine[::-1] + right_spine