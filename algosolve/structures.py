"""Linked-list and binary-tree node types with level-order helpers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False)
class ListNode:
    """A singly linked list node; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a linked list from values, returning its head or None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next

    def to_values(self) -> list[int]:
        """Return the values from this node to the end of the list."""
        return [node.val for node in self]


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order list where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _MISSING)
        if left is _MISSING:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _MISSING)
        if right is _MISSING:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def tree_to_list(root: Optional[TreeNode]) -> list[Optional[int]]:
    """Return the level-order list of a tree, without trailing None entries."""
    result: list[Optional[int]] = []
    queue: deque[Optional[TreeNode]] = deque([root] if root else [])
    while queue:
        node = queue.popleft()
        if node is None:
            result.append(None)
            continue
        result.append(node.val)
        queue.append(node.left)
        queue.append(node.right)
    while result and result[-1] is None:
        result.pop()
    return result