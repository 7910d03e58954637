from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.dynamic import knapsack, matrix_chain_cost, subset_sums


def _brute_knapsack(capacity, weights, values):
    best = 0
    items = list(zip(weights, values))
    for r in range(len(items) + 1):
        for chosen in combinations(items, r):
            if sum(w for w, _ in chosen) <= capacity:
                best = max(best, sum(v for _, v in chosen))
    return best


def test_knapsack_book_shop_example():
    assert knapsack(10, [4, 8, 5, 3], [5, 12, 8, 1]) == 13


def test_knapsack_zero_capacity():
    assert knapsack(0, [1, 2], [10, 20]) == 0


def test_knapsack_item_too_heavy():
    assert knapsack(3, [4], [100]) == 0


@given(
    st.integers(min_value=0, max_value=30),
    st.lists(
        st.tuples(st.integers(min_value=1, max_value=12), st.integers(min_value=0, max_value=50)),
        max_size=7,
    ),
)
def test_knapsack_matches_exhaustive_search(capacity, items):
    weights = [w for w, _ in items]
    values = [v for _, v in items]
    assert knapsack(capacity, weights, values) == _brute_knapsack(capacity, weights, values)


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack(-1, [], [])
    with pytest.raises(ValueError):
        knapsack(5, [1, 2], [3])
    with pytest.raises(ValueError):
        knapsack(5, [-1], [3])


def test_subset_sums_of_ones_are_powers_of_two():
    result = subset_sums([1] * 16)
    assert result == [2 ** bin(mask).count("1") for mask in range(16)]


@given(st.lists(st.integers(min_value=-100, max_value=100), max_size=40))
def test_subset_sums_definition(values):
    result = subset_sums(values)
    assert len(result) == len(values)
    for mask, total in enumerate(result):
        assert total == sum(values[x] for x in range(len(values)) if x & mask == x)


def test_subset_sums_first_element_unchanged():
    assert subset_sums([7, 1, 2])[0] == 7
    assert subset_sums([]) == []


def test_matrix_chain_source_example():
    assert matrix_chain_cost([1, 2, 3, 4]) == 18


def test_matrix_chain_single_matrix_is_free():
    assert matrix_chain_cost([5, 9]) == 0


def test_matrix_chain_two_matrices():
    assert matrix_chain_cost([3, 7, 11]) == 3 * 7 * 11


@given(st.lists(st.integers(min_value=1, max_value=20), min_size=3, max_size=8))
def test_matrix_chain_not_worse_than_left_to_right(dims):
    left_to_right = sum(dims[0] * dims[k] * dims[k + 1] for k in range(1, len(dims) - 1))
    assert 0 < matrix_chain_cost(dims) <= left_to_right


def test_matrix_chain_errors():
    with pytest.raises(ValueError):
        matrix_chain_cost([4])
    with pytest.raises(ValueError):
        matrix_chain_cost([2, 0, 3])