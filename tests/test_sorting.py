import random

import pytest

from dsprimer.sorting import quick


def test_quick_reversed():
    array = [5, 4, 3, 2, 1]
    quick(array, 0, len(array) - 1)
    assert array == [1, 2, 3, 4, 5]


def test_quick_example():
    array = [5, 2, 4, 1, 3]
    quick(array, 0, 4)
    assert array == [1, 2, 3, 4, 5]


def test_quick_partial_range():
    array = [9, 5, 3, 4, 0]
    quick(array, 1, 3)
    assert array == [9, 3, 4, 5, 0]


def test_quick_with_duplicates_and_negatives():
    array = [3, -1, 3, 0, -1, 2, 2]
    quick(array, 0, len(array) - 1)
    assert array == [-1, -1, 0, 2, 2, 3, 3]


def test_quick_single_element_untouched():
    array = [7]
    quick(array, 0, 0)
    assert array == [7]


@pytest.mark.parametrize("seed", range(5))
def test_quick_matches_sorted_on_random_data(seed):
    rng = random.Random(seed)
    array = [rng.randint(-50, 50) for _ in range(200)]
    expected = sorted(array)
    quick(array, 0, len(array) - 1)
    assert array == expected


def test_quick_already_sorted_large():
    array = list(range(3000))
    quick(array, 0, len(array) - 1)
    assert array == list(range(3000))