"""String puzzles built on letter counts and neighbouring characters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import pairwise
from string import ascii_letters, ascii_lowercase


def alternating_deletions(text: str) -> int:
    """Return how many deletions leave no two equal neighbouring characters."""
    return sum(a == b for a, b in pairwise(text))


def anagram_changes(text: str) -> int:
    """Return how many changes make the two halves anagrams, or -1 for odd length."""
    if len(text) % 2:
        return -1
    middle = len(text) // 2
    return (Counter(text[middle:]) - Counter(text[:middle])).total()


def is_funny(text: str) -> bool:
    """Tell whether neighbour differences read the same forwards and backwards."""
    gaps = [abs(ord(b) - ord(a)) for a, b in pairwise(text)]
    return gaps == gaps[::-1]


def can_form_palindrome(text: str) -> bool:
    """Tell whether some rearrangement of ``text`` is a palindrome."""
    odd = sum(count % 2 for count in Counter(text).values())
    return odd == 0 or (odd == 1 and len(text) % 2 == 1)


def gemstones(rocks: Iterable[str]) -> int:
    """Return how many lowercase letters occur in every rock."""
    common = set(ascii_lowercase)
    for rock in rocks:
        common &= set(rock)
    return len(common)


def make_anagram_cost(first: str, second: str) -> int:
    """Return how many deletions make the two strings anagrams."""
    a, b = Counter(first), Counter(second)
    return ((a - b) + (b - a)).total()


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` holds every letter of the alphabet, ignoring case."""
    return {c.lower() for c in text if c in ascii_letters} >= set(ascii_lowercase)


def share_letter(first: str, second: str) -> bool:
    """Tell whether the strings have a character in common."""
    return not set(first).isdisjoint(second)