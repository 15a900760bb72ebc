"""Merging of sorted linked lists."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from .structures import ListNode


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one; on ties the node from l2 comes first."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def merge_k_lists(lists: Sequence[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted lists pairwise by divide and conquer."""
    if not lists:
        return None
    if len(lists) == 1:
        return lists[0]
    mid = (len(lists) - 1) // 2 + 1
    return merge_two_lists(merge_k_lists(lists[:mid]), merge_k_lists(lists[mid:]))