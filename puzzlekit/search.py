"""Search puzzles: flood fills, maze paths, pair lookups and prefix sums."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))
_EIGHT_WAY = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (1, -1), (-1, 1), (1, 1),
)


def _check_rectangular(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def largest_region(grid: Sequence[Sequence[int]]) -> int:
    """Return the size of the largest group of 1s joined by sides or corners."""
    rows, cols = _check_rectangular(grid)
    seen: set[tuple[int, int]] = set()
    best = 0
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            pending = [(r, c)]
            size = 0
            while pending:
                cr, cc = pending.pop()
                size += 1
                for dr, dc in _EIGHT_WAY:
                    nr, nc = cr + dr, cc + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        pending.append((nr, nc))
            best = max(best, size)
    return best


def _find_path(
    grid: Sequence[str], start: tuple[int, int], rows: int, cols: int
) -> list[tuple[int, int]] | None:
    """Depth-first search trying up, down, left, right; return the cells before ``*``."""
    visited = {start}
    stack = [(start, iter(_MOVES))]
    while stack:
        (r, c), moves = stack[-1]
        for dr, dc in moves:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            cell = grid[nr][nc]
            if cell == "*":
                return [position for position, _ in stack]
            if cell == "X" or (nr, nc) in visited:
                continue
            visited.add((nr, nc))
            stack.append(((nr, nc), iter(_MOVES)))
            break
        else:
            stack.pop()
    return None


def wand_waves(grid: Sequence[str]) -> int:
    """Return how many times a wand is waved on the way from ``M`` to ``*``.

    A wave happens at every cell of the path with more than one open way on.
    """
    rows, cols = _check_rectangular(grid)
    start = next(
        ((r, row.index("M")) for r, row in enumerate(grid) if "M" in row), None
    )
    if start is None:
        raise ValueError("grid has no starting cell 'M'")
    path = _find_path(grid, start, rows, cols)
    if path is None:
        raise ValueError("no path leads from 'M' to '*'")
    walked: set[tuple[int, int]] = set()
    waves = 0
    for r, c in path:
        walked.add((r, c))
        open_ways = sum(
            1
            for dr, dc in _MOVES
            if 0 <= r + dr < rows
            and 0 <= c + dc < cols
            and grid[r + dr][c + dc] in ".*"
            and (r + dr, c + dc) not in walked
        )
        if open_ways > 1:
            waves += 1
    return waves


def count_luck(grid: Sequence[str], guess: int) -> bool:
    """Tell whether ``guess`` equals the number of wand waves in the maze."""
    return wand_waves(grid) == guess


def ice_cream_parlor(money: int, costs: Sequence[int]) -> tuple[int, int] | None:
    """Return the first 1-based pair of flavours whose costs add up to ``money``.

    Pairs are ordered by the first index, then the second; ``None`` if there is none.
    """
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, cost in enumerate(costs):
        positions[cost].append(index)
    for index, cost in enumerate(costs):
        partners = positions.get(money - cost)
        if not partners:
            continue
        found = bisect_right(partners, index)
        if found < len(partners):
            return index + 1, partners[found] + 1
    return None


def maximum_sum_modulo(values: Iterable[int], modulus: int) -> int:
    """Return the largest sum of a contiguous subarray taken modulo ``modulus``."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    prefixes = [0]
    running = 0
    best = 0
    for value in values:
        running = (running + value) % modulus
        above = bisect_right(prefixes, running)
        if above == len(prefixes):
            best = max(best, running - prefixes[0])
        else:
            best = max(best, running - prefixes[above] + modulus)
        if bisect_left(prefixes, running) == above:
            insort(prefixes, running)
    return best


def missing_numbers(original: Iterable[int], modified: Iterable[int]) -> list[int]:
    """Return, ascending, the numbers that occur more often in ``modified``."""
    return sorted(Counter(modified) - Counter(original))


def count_pairs(values: Iterable[int], difference: int) -> int:
    """Return how many values have a later value exactly ``difference`` above them.

    Values are taken in ascending order; each value counts at most once.
    """
    if difference < 0:
        raise ValueError("difference must not be negative")
    counts = Counter(values)
    if difference == 0:
        return sum(count - 1 for count in counts.values())
    return sum(count for value, count in counts.items() if value + difference in counts)


def balanced_sums(values: Sequence[int]) -> bool:
    """Tell whether an inner element has equal sums on its left and right.

    A single element is always balanced; the first and last are never tried.
    """
    if len(values) == 1:
        return True
    total = sum(values)
    lefts = accumulate(values)
    return any(
        left == total - left - value for left, value in zip(lefts, values[1:-1])
    )