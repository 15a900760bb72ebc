"""Sliding-window problems solved with monotonic deques."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import accumulate


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of k consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    maxima: list[int] = []
    for i, value in enumerate(nums):
        if window and window[0] <= i - k:
            window.popleft()
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(nums[window[0]])
    return maxima


def shortest_subarray(nums: Sequence[int], k: int) -> int:
    """Return the length of the shortest subarray summing to at least k, or -1."""
    prefix = [0, *accumulate(nums)]
    candidates: deque[int] = deque()
    best: int | None = None
    for i, total in enumerate(prefix):
        while candidates and total - prefix[candidates[0]] >= k:
            length = i - candidates.popleft()
            if best is None or length < best:
                best = length
        while candidates and total <= prefix[candidates[-1]]:
            candidates.pop()
        candidates.append(i)
    return -1 if best is None else best