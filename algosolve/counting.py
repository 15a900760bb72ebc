"""Counting, number-theory and simulation puzzles."""

from __future__ import annotations

import bisect
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations, count, takewhile
from operator import xor

MOD = 1_000_000_007

_DIRECTIONS = (
    (-1, 0), (1, 0),
    (0, -1), (0, 1),
    (-1, -1), (-1, 1),
    (1, -1), (1, 1),
)


def _parse_topics(topic: str) -> int:
    if set(topic) - {"0", "1"}:
        raise ValueError(f"topic string must hold only 0 and 1, got {topic!r}")
    return int(topic, 2) if topic else 0


def acm_team(topics: Iterable[str]) -> tuple[int, int]:
    """Return the most topics a pair can know and how many pairs know that many."""
    known = [_parse_topics(topic) for topic in topics]
    best = 0
    teams = 0
    for a, b in combinations(known, 2):
        covered = (a | b).bit_count()
        if covered > best:
            best, teams = covered, 1
        elif covered == best:
            teams += 1
    return best, teams


def count_divisible_subarrays(nums: Iterable[int], k: int) -> int:
    """Return how many contiguous subarrays have a sum divisible by k."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    remainders = Counter({0: 1})
    total = 0
    for value in nums:
        total = (total + value) % k
        remainders[total] += 1
    return sum(c * (c - 1) // 2 for c in remainders.values())


def running_median(values: Iterable[int]) -> list[float]:
    """Return the median of every prefix of values."""
    ordered: list[int] = []
    medians: list[float] = []
    for value in values:
        bisect.insort(ordered, value)
        mid = (len(ordered) - 1) // 2
        if len(ordered) % 2:
            medians.append(float(ordered[mid]))
        else:
            medians.append((ordered[mid] + ordered[mid + 1]) / 2)
    return medians


def stones(n: int, a: int, b: int) -> list[int]:
    """Return the possible values of the last of n stones, in ascending order.

    The first stone is 0 and each next one adds either a or b.
    """
    if a == b:
        return [(n - 1) * a]
    return sorted((n - i) * a + (i - 1) * b for i in range(1, n + 1))


def non_divisible_subset(k: int, nums: Iterable[int]) -> int:
    """Return the size of the largest subset where no pair sums to a multiple of k."""
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    remainders = Counter(x % k for x in nums)
    size = sum(
        max(remainders[i], remainders[k - i]) for i in range(1, (k - 1) // 2 + 1)
    )
    if remainders[0]:
        size += 1
    if k % 2 == 0 and remainders[k // 2]:
        size += 1
    return size


def queens_attack(
    n: int, r_q: int, c_q: int, obstacles: Iterable[Sequence[int]]
) -> int:
    """Return the squares a queen at (r_q, c_q) attacks on an n-by-n board."""
    blocked = {(obstacle[0], obstacle[1]) for obstacle in obstacles}
    moves = 0
    for dr, dc in _DIRECTIONS:
        r, c = r_q + dr, c_q + dc
        while 1 <= r <= n and 1 <= c <= n and (r, c) not in blocked:
            moves += 1
            r += dr
            c += dc
    return moves


def substrings(s: str) -> int:
    """Return the sum of all substrings of a digit string, modulo 10**9 + 7."""
    total = 0
    ending_here = 0
    for position, char in enumerate(s, start=1):
        ending_here = (position * int(char) + 10 * ending_here) % MOD
        total = (total + ending_here) % MOD
    return total


def sansa_xor(nums: Sequence[int]) -> int:
    """Return the XOR of the XORs of every contiguous subarray."""
    size = len(nums)
    return reduce(
        xor,
        (v for i, v in enumerate(nums) if (i + 1) * (size - i) % 2 == 1),
        0,
    )


def special_multiple(n: int) -> str:
    """Return the smallest positive multiple of n written with only 9s and 0s."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    for index in count(1):
        candidate = int(format(index, "b").replace("1", "9"))
        if candidate % n == 0:
            return str(candidate)
    raise AssertionError("unreachable")


def first_primes(count: int) -> list[int]:
    """Return the first count prime numbers."""
    primes: list[int] = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % p for p in takewhile(lambda p: p * p <= candidate, primes)):
            primes.append(candidate)
        candidate += 1
    return primes


def waiter(numbers: Iterable[int], q: int) -> list[int]:
    """Return the plates in the order the waiter emits them after q iterations.

    The last number is the top of the stack.
    """
    output: list[int] = []
    stack = list(numbers)
    for prime in first_primes(q):
        if not stack:
            break
        popped = stack[::-1]
        divisible = [v for v in popped if v % prime == 0]
        stack = [v for v in popped if v % prime != 0]
        output.extend(reversed(divisible))
    output.extend(reversed(stack))
    return output