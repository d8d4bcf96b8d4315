"""Implementation puzzles: grids, ciphers, counting and simple simulations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from math import isqrt
from string import ascii_lowercase, ascii_uppercase


def _ceil_sqrt(value: int) -> int:
    root = isqrt(value)
    return root if root * root == value else root + 1


def acm_team(topics: Sequence[str]) -> tuple[int, int]:
    """Return the most topics a two-person team knows and how many teams know that many.

    Each entry is a string of ``'0'``/``'1'`` flags, one per topic.
    """
    best = 0
    teams = 0
    for first, second in combinations(topics, 2):
        known = sum(a == "1" or b == "1" for a, b in zip(first, second))
        if known > best:
            best, teams = known, 1
        elif known == best:
            teams += 1
    return best, teams


def class_cancelled(arrivals: Iterable[int], threshold: int) -> bool:
    """Tell whether fewer than ``threshold`` students arrive on time (at or before 0)."""
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return on_time < threshold


def caesar_cipher(text: str, shift: int) -> str:
    """Rotate every ASCII letter of ``text`` by ``shift`` places, keeping case."""
    step = shift % 26
    table = str.maketrans(
        ascii_lowercase + ascii_uppercase,
        ascii_lowercase[step:]
        + ascii_lowercase[:step]
        + ascii_uppercase[step:]
        + ascii_uppercase[:step],
    )
    return text.translate(table)


def cavity_map(grid: Sequence[str]) -> list[str]:
    """Mark with ``X`` every cell deeper than all four of its neighbours.

    Cells on the border never count as cavities.
    """
    rows = len(grid)
    result = []
    for r, row in enumerate(grid):
        marked = []
        for c, cell in enumerate(row):
            neighbours = [
                grid[r - 1][c] if r > 0 else None,
                grid[r + 1][c] if r + 1 < rows else None,
                row[c - 1] if c > 0 else None,
                row[c + 1] if c + 1 < len(row) else None,
            ]
            is_cavity = all(n is not None and n < cell for n in neighbours)
            marked.append("X" if is_cavity else cell)
        result.append("".join(marked))
    return result


def chocolate_feast(money: int, cost: int, wrappers: int) -> int:
    """Return how many bars can be eaten, trading ``wrappers`` wrappers for a bar."""
    if cost <= 0:
        raise ValueError("cost must be positive")
    if wrappers < 2:
        raise ValueError("at least two wrappers must be needed for a free bar")
    eaten = money // cost
    spare = eaten
    while spare >= wrappers:
        traded = spare // wrappers
        eaten += traded
        spare = spare % wrappers + traded
    return eaten


def encrypt(text: str) -> str:
    """Write ``text`` into a near-square grid and read it back column by column."""
    columns = _ceil_sqrt(len(text))
    return " ".join(text[start::columns] for start in range(columns))


def find_digits(number: int) -> int:
    """Return how many non-zero digits of ``number`` divide it evenly."""
    return sum(
        1 for digit in map(int, str(abs(number))) if digit and number % digit == 0
    )


def last_stones(count: int, a: int, b: int) -> list[int]:
    """Return, ascending, every possible value of the last of ``count`` stones.

    The first stone is 0 and each step adds either ``a`` or ``b``.
    """
    steps = count - 1
    if steps <= 0:
        return []
    return sorted({a * i + b * (steps - i) for i in range(steps + 1)})


def _ring(layer: int, rows: int, cols: int) -> list[tuple[int, int]]:
    top, bottom = layer, rows - 1 - layer
    left, right = layer, cols - 1 - layer
    cells = [(top, c) for c in range(left, right + 1)]
    cells += [(r, right) for r in range(top + 1, bottom)]
    cells += [(bottom, c) for c in range(right, left - 1, -1)]
    cells += [(r, left) for r in range(bottom - 1, top, -1)]
    return cells


def rotate_matrix(matrix: Sequence[Sequence[int]], rotations: int) -> list[list[int]]:
    """Rotate every ring of ``matrix`` anticlockwise by ``rotations`` steps.

    The smaller of the two dimensions must be even.
    """
    grid = [list(row) for row in matrix]
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("matrix rows must all have the same length")
    if min(rows, cols) % 2:
        raise ValueError("the smaller dimension of the matrix must be even")
    for layer in range(min(rows, cols) // 2):
        cells = _ring(layer, rows, cols)
        values = [grid[r][c] for r, c in cells]
        shift = rotations % len(values)
        for (r, c), value in zip(cells, values[shift:] + values[:shift]):
            grid[r][c] = value
    return grid


def kaprekar_numbers(low: int, high: int) -> list[int]:
    """Return the modified Kaprekar numbers in ``[low, high]``.

    The square's digits are split with the shorter half on the left;
    an empty half counts as zero.
    """
    found = []
    for number in range(low, high + 1):
        digits = str(number * number)
        middle = len(digits) // 2
        left = int(digits[:middle] or 0)
        right = int(digits[middle:] or 0)
        if left + right == number:
            found.append(number)
    return found


def service_lane(widths: Sequence[int], start: int, end: int) -> int:
    """Return the widest vehicle (at most 3) that fits through segments ``start..end``."""
    if not 0 <= start <= end < len(widths):
        raise ValueError(f"segment range [{start}, {end}] is invalid")
    return min(4, *widths[start : end + 1])


def count_squares(low: int, high: int) -> int:
    """Return how many perfect squares lie in ``[low, high]``."""
    if low < 0:
        raise ValueError("low must not be negative")
    if high < low:
        return 0
    return max(0, isqrt(high) - _ceil_sqrt(low) + 1)


def grid_search(grid: Sequence[str], pattern: Sequence[str]) -> bool:
    """Tell whether ``pattern`` occurs as a rectangular block inside ``grid``."""
    if not pattern or not pattern[0]:
        raise ValueError("pattern must not be empty")
    height, width = len(pattern), len(pattern[0])
    for top in range(len(grid) - height + 1):
        first = grid[top]
        start = first.find(pattern[0])
        while start != -1:
            if all(
                grid[top + k][start : start + width] == pattern[k]
                for k in range(1, height)
            ):
                return True
            start = first.find(pattern[0], start + 1)
    return False


def utopian_tree(cycles: int) -> int:
    """Return the tree's height after ``cycles``: doubling in spring, +1 in summer."""
    height = 1
    for cycle in range(1, cycles + 1):
        height = height + 1 if cycle % 2 == 0 else height * 2
    return height