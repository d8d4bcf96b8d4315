import pytest

from puzzlekit.greedy import (
    array_manipulation,
    can_permute,
    flower_cost,
    grid_challenge,
    largest_permutation,
    max_toys,
    min_containers,
    min_unfairness,
    order_sequence,
    sherlock_min_max,
)


def test_array_manipulation_whole_range():
    assert array_manipulation(5, [(1, 5, 7)]) == 7


def test_array_manipulation_disjoint_ranges():
    ops = [(1, 2, 3), (3, 4, 9), (5, 5, 4)]
    assert array_manipulation(5, ops) == max(k for _, _, k in ops)


def test_array_manipulation_overlapping_ranges_add():
    ops = [(2, 4, 3), (2, 4, 9), (3, 3, 4)]
    assert array_manipulation(6, ops) == sum(k for _, _, k in ops)


def test_array_manipulation_out_of_range():
    with pytest.raises(ValueError):
        array_manipulation(3, [(1, 4, 1)])


def test_flower_cost_example():
    assert flower_cost([2, 5, 6], 2) == 15


def test_flower_cost_enough_buyers_pays_face_value():
    prices = [4, 9, 1, 7]
    assert flower_cost(prices, len(prices)) == sum(prices)


def test_flower_cost_more_buyers_never_costs_more():
    prices = [3, 8, 2, 6, 5, 1]
    assert flower_cost(prices, 1) >= flower_cost(prices, 2) >= flower_cost(prices, 3)


def test_flower_cost_needs_buyers():
    with pytest.raises(ValueError):
        flower_cost([1, 2], 0)


def test_grid_challenge_example():
    assert grid_challenge(["ebacd", "fghij", "olmkn", "trpqs", "xywuv"])


def test_grid_challenge_failure():
    assert not grid_challenge(["xyz", "abc"])


def test_order_sequence_is_permutation_sorted_by_finish():
    orders = [(8, 1), (4, 2), (5, 6), (3, 1), (4, 3)]
    result = order_sequence(orders)
    assert sorted(result) == list(range(1, len(orders) + 1))
    finishes = [sum(orders[n - 1]) for n in result]
    assert finishes == sorted(finishes)


def test_order_sequence_ties_keep_lower_number_first():
    assert order_sequence([(2, 2), (1, 3), (3, 1)]) == [1, 2, 3]


def test_largest_permutation_no_swaps():
    values = [4, 2, 3, 5, 1]
    assert largest_permutation(values, 0) == values


def test_largest_permutation_many_swaps_sorts_descending():
    values = [4, 2, 3, 5, 1]
    assert largest_permutation(values, 10) == sorted(values, reverse=True)


def test_largest_permutation_one_swap():
    values = [4, 2, 3, 5, 1]
    result = largest_permutation(values, 1)
    assert result[0] == len(values)
    assert sorted(result) == sorted(values)
    assert result[1:3] == values[1:3]


def test_largest_permutation_rejects_non_permutation():
    with pytest.raises(ValueError):
        largest_permutation([1, 1, 3], 1)


def test_max_toys_example():
    assert max_toys([1, 12, 5, 111, 200, 1000, 10], 50) == 4


def test_max_toys_affords_everything():
    prices = [3, 7, 2]
    assert max_toys(prices, sum(prices)) == len(prices)


def test_min_unfairness_whole_list():
    values = [10, 100, 300, 200, 1000, 20, 30]
    assert min_unfairness(values, len(values)) == max(values) - min(values)


def test_min_unfairness_grows_with_k():
    values = [10, 100, 300, 200, 1000, 20, 30]
    results = [min_unfairness(values, k) for k in range(1, len(values) + 1)]
    assert results == sorted(results)


@pytest.mark.parametrize("k", [0, 4])
def test_min_unfairness_bad_k(k):
    with pytest.raises(ValueError):
        min_unfairness([1, 2, 3], k)


def test_min_containers_spread_out():
    weights = [1, 6, 11, 16]
    assert min_containers(weights) == len(weights)


def test_min_containers_close_weights_share():
    assert min_containers([10, 11, 14]) == min_containers([10])
    assert min_containers([1, 2, 3, 21, 7, 12, 14, 21]) == min_containers([1, 7, 12, 21])


def test_sherlock_min_max_example():
    assert sherlock_min_max([5, 8, 14], 4, 9) == 4


def test_sherlock_min_max_single_point():
    assert sherlock_min_max([3, 20], 7, 7) == 7


def test_sherlock_min_max_within_bounds():
    result = sherlock_min_max([12, 40, 2, 77], 5, 60)
    assert 5 <= result <= 60


def test_sherlock_min_max_empty():
    with pytest.raises(ValueError):
        sherlock_min_max([], 1, 2)


def test_can_permute_examples():
    assert can_permute([2, 1, 3], [7, 8, 9], 10)
    assert not can_permute([1, 2, 2, 1], [3, 3, 3, 4], 5)


def test_can_permute_length_mismatch():
    with pytest.raises(ValueError):
        can_permute([1], [1, 2], 2)