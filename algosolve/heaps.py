"""Selection and scheduling problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value of nums, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap = list(nums[:k])
    heapq.heapify(heap)
    for value in nums[k:]:
        if value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def top_k_frequent(nums: Iterable[int], k: int) -> list[int]:
    """Return up to k values, most frequent first.

    Values of equal frequency keep the order of their first appearance.
    """
    counts = Counter(nums)
    ranked = sorted(counts, key=counts.__getitem__, reverse=True)
    return ranked[: max(k, 0)]


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return k pairs (a, b) with the smallest sums, largest sum first.

    Both inputs are expected in ascending order. Pairs of equal sum kept in
    the result are ordered by descending (a, b).
    """
    if k <= 0:
        return []
    # Max-heap of (sum, a, b) stored negated.
    heap: list[tuple[int, int, int]] = []
    for a in nums1:
        for b in nums2:
            total = a + b
            if len(heap) < k:
                heapq.heappush(heap, (-total, -a, -b))
            elif total < -heap[0][0]:
                heapq.heapreplace(heap, (-total, -a, -b))
            else:
                break
    return [(-a, -b) for _, a, b in sorted(heap)]


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the time units to run tasks 'A'-'Z' with a cooldown of n."""
    counts = Counter(tasks)
    for task in counts:
        if len(task) != 1 or not "A" <= task <= "Z":
            raise ValueError(f"task must be an uppercase letter, got {task!r}")
    heap = [-count for count in counts.values()]
    heapq.heapify(heap)
    time = 0
    while heap:
        slots = n + 1
        remaining: list[int] = []
        while slots and heap:
            count = -heapq.heappop(heap)
            if count > 1:
                remaining.append(count - 1)
            time += 1
            slots -= 1
        for count in remaining:
            heapq.heappush(heap, -count)
        if not heap:
            break
        time += slots
    return time


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Return the lowest-numbered of n rooms that held the most meetings.

    Meetings go to the lowest free room; when none is free, the meeting is
    delayed to the room that frees up first, keeping its duration.
    """
    if n < 1:
        raise ValueError(f"number of rooms must be positive, got {n}")
    free = list(range(n))
    busy: list[tuple[int, int]] = []
    booked = [0] * n
    for start, end in sorted((m[0], m[1]) for m in meetings):
        while busy and busy[0][0] <= start:
            _, room = heapq.heappop(busy)
            heapq.heappush(free, room)
        if free:
            room = heapq.heappop(free)
            heapq.heappush(busy, (end, room))
        else:
            available, room = heapq.heappop(busy)
            heapq.heappush(busy, (available + end - start, room))
        booked[room] += 1
    return booked.index(max(booked))