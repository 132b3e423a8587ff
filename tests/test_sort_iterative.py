import pytest

from algolab.sort import generate_random_numbers
from algolab.sort_iterative import quick_sort


def test_sorts_int_sample():
    vec = [5, 2, 9, 1, 5, 6]
    quick_sort(vec)
    assert vec == [1, 2, 5, 5, 6, 9]


def test_sorts_float_sample():
    vec = [5.23, 2.1, 9.7, 1.342, 5.044, 6.456]
    quick_sort(vec)
    assert vec == [1.342, 2.1, 5.044, 5.23, 6.456, 9.7]


def test_sorts_string_sample():
    vec = ["banana", "strawberry", "raspberry", "blueberry", "pineapple",
           "kiwi", "apple", "peach", "orange", "lemon"]
    quick_sort(vec)
    assert vec == ["apple", "banana", "blueberry", "kiwi", "lemon",
                   "orange", "peach", "pineapple", "raspberry", "strawberry"]


def test_handles_empty():
    vec = []
    quick_sort(vec)
    assert vec == []


@pytest.mark.parametrize("vec", [[42], [42.2]])
def test_handles_single_element(vec):
    expected = list(vec)
    quick_sort(vec)
    assert vec == expected


@pytest.mark.parametrize(
    "vec, expected",
    [
        ([1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
        ([1.2, 2.1, 3.4, 4.7, 5.9], [1.2, 2.1, 3.4, 4.7, 5.9]),
        ([9, 7, 5, 3, 1], [1, 3, 5, 7, 9]),
        ([9.34, 7.1, 5.044, 3.3, 1.201], [1.201, 3.3, 5.044, 7.1, 9.34]),
        ([2, 1], [1, 2]),
        ([3, 3, 3, 1, 1], [1, 1, 3, 3, 3]),
    ],
)
def test_small_inputs(vec, expected):
    quick_sort(vec)
    assert vec == expected


def test_sorts_random_ints():
    vec = generate_random_numbers(50000, 0, 10000)
    expected = sorted(vec)
    quick_sort(vec)
    assert vec == expected


def test_sorts_random_floats():
    vec = generate_random_numbers(50000, 0.0, 10000.0)
    expected = sorted(vec)
    quick_sort(vec)
    assert vec == expected


def test_long_ordered_and_reversed_inputs():
    ascending = list(range(5000))
    descending = list(range(4999, -1, -1))
    quick_sort(ascending)
    quick_sort(descending)
    assert ascending == list(range(5000))
    assert descending == list(range(5000))