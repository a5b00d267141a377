"""Small array puzzles: house robber, stock profit, rotation and three-sum."""

from __future__ import annotations

from collections.abc import Sequence


def house_robber(houses: Sequence[int]) -> int:
    """Return the largest total from houses no two of which are adjacent."""
    if not houses:
        return 0
    if len(houses) == 1:
        return houses[0]
    previous, best = houses[0], max(houses[0], houses[1])
    for amount in houses[2:]:
        previous, best = best, max(previous + amount, best)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        return 0
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's method."""
    while a % b != 0:
        a, b = b, a % b
    return b


def rotate(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated right by ``k`` places."""
    items = list(values)
    if not items:
        return items
    offset = k % len(items)
    if offset == 0:
        return items
    return items[-offset:] + items[:-offset]


def three_sum(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Return every distinct ascending triple from ``values`` that sums to zero."""
    ordered = sorted(values)
    size = len(ordered)
    answers: list[tuple[int, int, int]] = []
    for i, first in enumerate(ordered):
        if first > 0:
            break
        if i > 0 and first == ordered[i - 1]:
            continue
        low, high = i + 1, size - 1
        while low < high:
            total = first + ordered[low] + ordered[high]
            if total < 0:
                low += 1
            elif total > 0:
                high -= 1
            else:
                answers.append((first, ordered[low], ordered[high]))
                low += 1
                high -= 1
                while low < high and ordered[low] == ordered[low - 1]:
                    low += 1
    return answers