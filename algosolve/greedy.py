"""Greedy solutions to distribution, coverage and selection puzzles."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence


def candies(ratings: Sequence[int]) -> int:
    """Return the fewest candies so that everyone gets one and a child rated
    higher than a neighbour gets more than that neighbour."""
    ratings = list(ratings)
    if not ratings:
        return 0
    counts = [1]
    for previous, current in zip(ratings, ratings[1:]):
        counts.append(counts[-1] + 1 if current > previous else 1)

    following = counts[-1]
    total = following
    for rating, right_rating, count in zip(
        reversed(ratings[:-1]), reversed(ratings[1:]), reversed(counts[:-1])
    ):
        if rating > right_rating:
            count = max(count, following + 1)
        total += count
        following = count
    return total


def fair_rations(loaves: Iterable[int]) -> str:
    """Return the loaves handed out so everyone holds an even number, or 'NO'.

    A loaf always goes to a person and the next one in line together.
    """
    loaves = list(loaves)
    if not loaves:
        raise ValueError("at least one person is required")
    given = 0
    carry = 0
    for count in loaves[:-1]:
        if (count + carry) % 2 == 1:
            carry = 1
            given += 2
        else:
            carry = 0
    return str(given) if (loaves[-1] + carry) % 2 == 0 else "NO"


def pylons(k: int, towns: Sequence[int]) -> int:
    """Return the plants to switch on so every town has power, or -1.

    A plant at town i powers the towns closer than k to it; towns holding a
    plant are marked 1.
    """
    towns = list(towns)
    # Distance from each town to the next plant strictly after it (None: none).
    distances: list[int | None] = []
    distance: int | None = None
    for town in reversed(towns):
        distances.append(distance)
        if town == 1:
            distance = 1
        elif distance is not None:
            distance += 1
    distances.reverse()

    count = len(towns)
    switched_on = 0
    skipped = 0
    for index, (town, to_next) in enumerate(zip(towns, distances)):
        if to_next is None:
            if skipped >= k or count - index > k:
                return -1
            switched_on += 1
            break
        if town == 0:
            skipped += 1
            continue
        if skipped + to_next < k:
            skipped += 1
            continue
        if skipped >= k:
            return -1
        switched_on += 1
        skipped = 1 - k
    return switched_on


def minimum_flower_cost(k: int, prices: Iterable[int]) -> int:
    """Return the least total cost for k friends to buy every flower once.

    A friend's n-th purchase costs (n) times the flower's price.
    """
    if k < 1:
        raise ValueError(f"number of friends must be positive, got {k}")
    multipliers = [1] * k
    total = 0
    for price in sorted(prices, reverse=True):
        total += price * multipliers[0]
        heapq.heapreplace(multipliers, multipliers[0] + 1)
    return total


def highest_value_palindrome(s: str, k: int) -> str:
    """Return the largest palindrome reachable by changing at most k digits,
    or '-1' when no palindrome is reachable."""
    if not s:
        return s
    digits = list(s)
    size = len(digits)
    half = size // 2
    mismatched = sum(1 for a, b in zip(s[:half], reversed(s)) if a != b)
    if mismatched > k:
        return "-1"

    remaining = k
    for i in range(half + 1):
        if remaining <= 0:
            break
        j = size - 1 - i
        if digits[i] != digits[j]:
            mismatched -= 1
            if digits[i] == "9" or digits[j] == "9":
                digits[i] = digits[j] = "9"
                remaining -= 1
            elif remaining - 2 >= mismatched:
                digits[i] = digits[j] = "9"
                remaining -= 2
            else:
                digits[i] = digits[j] = max(digits[i], digits[j])
                remaining -= 1
        elif i != j and digits[i] < "9" and remaining - 2 >= mismatched:
            digits[i] = digits[j] = "9"
            remaining -= 2
        elif i == j and digits[i] < "9" and remaining - 1 >= mismatched:
            digits[i] = "9"
            remaining -= 1
    return "".join(digits)


def luck_balance(k: int, contests: Iterable[Sequence[int]]) -> int:
    """Return the most luck left after losing at most k important contests.

    Each contest is a (luck, importance) pair; importance 0 means unimportant.
    """
    luck = 0
    important: list[int] = []
    for value, importance in contests:
        if importance == 0:
            luck += value
        else:
            important.append(value)
    important.sort(reverse=True)
    lost = max(k, 0)
    return luck + sum(important[:lost]) - sum(important[lost:])


def truck_tour(pumps: Iterable[Sequence[int]]) -> int:
    """Return the first pump from which a full circle can be driven, or -1.

    Each pump is a (petrol, distance to the next pump) pair.
    """
    balance = 0
    tank = 0
    start = 0
    for index, (petrol, distance) in enumerate(pumps):
        balance += petrol - distance
        tank += petrol - distance
        if tank < 0:
            start = index + 1
            tank = 0
    return -1 if balance < 0 else start