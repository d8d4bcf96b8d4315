import string

import pytest

from puzzlekit.strings import (
    alternating_deletions,
    anagram_changes,
    can_form_palindrome,
    gemstones,
    is_funny,
    is_pangram,
    make_anagram_cost,
    share_letter,
)


@pytest.mark.parametrize("text", ["AAAA", "BBBBB", "Q"])
def test_alternating_deletions_uniform(text):
    assert alternating_deletions(text) == len(text) - 1


def test_alternating_deletions_already_alternating():
    assert not alternating_deletions("ABABABAB")
    assert not alternating_deletions("BABABA")


def test_alternating_deletions_mixed():
    assert alternating_deletions("AAABBB") == 4


def test_anagram_changes_odd_length():
    assert anagram_changes("abc") == -1


def test_anagram_changes_halves_already_anagrams():
    assert not anagram_changes("abcbca")


def test_anagram_changes_disjoint_halves():
    text = "aaabbb"
    assert anagram_changes(text) == len(text) // 2


def test_anagram_changes_bounded_by_half():
    text = "xaxbbbxx"
    assert 0 <= anagram_changes(text) <= len(text) // 2


def test_is_funny_examples():
    assert is_funny("acxz")
    assert not is_funny("bcxz")


def test_is_funny_palindrome():
    assert is_funny("racecar")


def test_can_form_palindrome_examples():
    assert can_form_palindrome("aaabbbb")
    assert can_form_palindrome("cdcdcdcdeeeef")
    assert not can_form_palindrome("cdefghmnopqrstuvw")


def test_can_form_palindrome_invariant_under_shuffle():
    assert can_form_palindrome("abba") == can_form_palindrome("baab")


def test_gemstones_example():
    assert gemstones(["abcdde", "baccd", "eeabg"]) == 2


def test_gemstones_single_rock():
    rock = "hello"
    assert gemstones([rock]) == len(set(rock))


def test_gemstones_no_rocks():
    assert gemstones([]) == len(string.ascii_lowercase)


def test_make_anagram_cost_permutation():
    assert not make_anagram_cost("listen", "silent")


def test_make_anagram_cost_disjoint():
    first, second = "abc", "xyz"
    assert make_anagram_cost(first, second) == len(first) + len(second)


def test_make_anagram_cost_symmetric_and_extra_letter():
    first, second = "cde", "abc"
    cost = make_anagram_cost(first, second)
    assert make_anagram_cost(second, first) == cost
    assert make_anagram_cost(first, second + "z") == cost + 1


def test_is_pangram():
    sentence = "We promptly judged antique ivory buckles for the next prize"
    assert is_pangram(sentence)
    assert is_pangram(sentence.upper())
    assert not is_pangram(sentence.replace("z", ""))


def test_share_letter():
    assert share_letter("hello", "world")
    assert not share_letter("hi", "world")
    assert not share_letter("", "world")