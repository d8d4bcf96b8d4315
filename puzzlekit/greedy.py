"""Greedy puzzles: range updates, purchases, pairings and orderings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise


def array_manipulation(size: int, operations: Iterable[tuple[int, int, int]]) -> int:
    """Return the largest value after adding each ``k`` to the 1-based range ``[a, b]``.

    The array starts as ``size`` zeros.
    """
    deltas = [0] * (size + 2)
    for start, stop, amount in operations:
        if not 1 <= start <= stop <= size:
            raise ValueError(f"range [{start}, {stop}] is outside 1..{size}")
        deltas[start] += amount
        deltas[stop + 1] -= amount
    return max(0, *accumulate(deltas[1 : size + 1])) if size > 0 else 0


def flower_cost(prices: Iterable[int], buyers: int) -> int:
    """Return the least total cost for ``buyers`` friends to buy every flower.

    Each friend pays ``(previous purchases + 1) * price`` for a flower.
    """
    if buyers <= 0:
        raise ValueError("there must be at least one buyer")
    ordered = sorted(prices, reverse=True)
    return sum((position // buyers + 1) * price for position, price in enumerate(ordered))


def grid_challenge(rows: Iterable[str]) -> bool:
    """Tell whether sorting every row leaves every column in ascending order."""
    sorted_rows = [sorted(row) for row in rows]
    return all(
        upper <= lower
        for above, below in pairwise(sorted_rows)
        for upper, lower in zip(above, below)
    )


def order_sequence(orders: Iterable[tuple[int, int]]) -> list[int]:
    """Return the 1-based customer numbers in the order their orders are served.

    Each order is ``(placed_at, preparation_time)``; ties go to the lower number.
    """
    finishes = [(placed + duration, number) for number, (placed, duration) in enumerate(orders, 1)]
    return [number for _, number in sorted(finishes)]


def largest_permutation(values: Sequence[int], swaps: int) -> list[int]:
    """Return the largest permutation reachable with at most ``swaps`` swaps.

    ``values`` must be a permutation of ``1..len(values)``.
    """
    result = list(values)
    size = len(result)
    if sorted(result) != list(range(1, size + 1)):
        raise ValueError("values must be a permutation of 1..n")
    position = {value: index for index, value in enumerate(result)}
    remaining = swaps
    for index in range(size):
        if remaining <= 0:
            break
        wanted = size - index
        current = result[index]
        if current == wanted:
            continue
        remaining -= 1
        other = position[wanted]
        result[index], result[other] = wanted, current
        position[wanted], position[current] = index, other
    return result


def max_toys(prices: Iterable[int], budget: int) -> int:
    """Return how many toys fit in ``budget`` when the cheapest are bought first."""
    count = 0
    for price in sorted(prices):
        if budget >= price:
            count += 1
            budget -= price
    return count


def min_unfairness(values: Sequence[int], k: int) -> int:
    """Return the smallest ``max - min`` over any ``k`` chosen values."""
    if not 1 <= k <= len(values):
        raise ValueError(f"k must be between 1 and {len(values)}")
    ordered = sorted(values)
    return min(high - low for low, high in zip(ordered, ordered[k - 1 :]))


def min_containers(weights: Iterable[int]) -> int:
    """Return how many containers are needed when each holds items within 4 units."""
    count = 0
    floor: int | None = None
    for weight in sorted(weights):
        if floor is None or weight > floor + 4:
            floor = weight
            count += 1
    return count


def sherlock_min_max(values: Sequence[int], low: int, high: int) -> int:
    """Return ``M`` in ``[low, high]`` that maximises ``min(|a - M|)`` over ``values``."""
    if not values:
        raise ValueError("values must not be empty")
    ordered = sorted(values)
    best_m = 0
    best_distance = 0
    if low < ordered[0]:
        best_distance = ordered[0] - low
        best_m = low
    if high > ordered[-1] and high - ordered[-1] > best_distance:
        best_distance = high - ordered[-1]
        best_m = high
    for left, right in pairwise(ordered):
        half = (right - left) // 2
        if right - left < 2 or half <= best_distance:
            continue
        middle = left + half
        if low <= middle <= high:
            best_distance = half
            best_m = middle
        elif high < middle:
            distance = min(right - high, high - left)
            if distance > best_distance:
                best_distance = distance
                best_m = high
    return best_m


def can_permute(first: Sequence[int], second: Sequence[int], k: int) -> bool:
    """Tell whether the arrays can be paired so that every pair sums to at least ``k``."""
    if len(first) != len(second):
        raise ValueError("both arrays must have the same length")
    return all(
        a + b >= k for a, b in zip(sorted(first), sorted(second, reverse=True))
    )