import math
import random

import pytest

from search_timer.searches import (
    NOT_FOUND,
    SearchResult,
    max_binary_comparisons,
    search_binary,
    search_linear,
)


def test_linear_finds_target_in_unsorted_array():
    assert search_linear(8, [5, 3, 8, 1, 9]) == SearchResult(2, 3)


def test_linear_absent_target_scans_everything():
    result = search_linear(100, [1, 2, 3])
    assert result.found_index == NOT_FOUND
    assert result.comparisons == 3


def test_linear_empty_array():
    assert search_linear(1, []) == (-1, 0)


def test_linear_comparisons_equal_position_plus_one():
    data = random.Random(7).sample(range(1, 201), 50)
    for i, value in enumerate(data):
        assert search_linear(value, data) == (i, i + 1)


def test_binary_traces_bisection():
    # mid 2 holds 5, go high; mid 3 holds 8, match.
    assert search_binary(8, [1, 3, 5, 8, 9]) == SearchResult(3, 2)


def test_binary_middle_element_takes_one_comparison():
    assert search_binary(5, [1, 3, 5, 8, 9]) == (2, 1)


@pytest.mark.parametrize("target", [0, 2, 4, 7, 10])
def test_binary_absent_target(target):
    found_index, comparisons = search_binary(target, [1, 3, 5, 8, 9])
    assert found_index == NOT_FOUND
    assert 1 <= comparisons <= max_binary_comparisons(5)


def test_binary_empty_array():
    assert search_binary(3, []) == (-1, 0)


def test_both_searches_agree_with_list_index():
    rng = random.Random(42)
    data = rng.sample(range(1, 1001), 300)
    sorted_data = sorted(data)
    for target in range(0, 1002):
        linear = search_linear(target, data)
        binary = search_binary(target, sorted_data)
        if target in data:
            assert linear.found_index == data.index(target)
            assert binary.found_index == sorted_data.index(target)
        else:
            assert linear == (NOT_FOUND, len(data))
            assert binary.found_index == NOT_FOUND


@pytest.mark.parametrize("n", [1, 2, 3, 7, 8, 100, 1000])
def test_binary_comparisons_bounded_by_log2(n):
    sorted_data = list(range(2, 2 * n + 2, 2))
    bound = math.ceil(math.log2(n + 1))
    assert max_binary_comparisons(n) == bound
    for target in range(0, 2 * n + 3):
        assert search_binary(target, sorted_data).comparisons <= bound


def test_searches_are_repeatable():
    data = [5, 3, 8, 1, 9]
    sorted_data = sorted(data)
    for target in (1, 4, 9):
        assert search_linear(target, data) == search_linear(target, data)
        assert search_binary(target, sorted_data) == search_binary(target, sorted_data)
