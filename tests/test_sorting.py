import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import selection_sort, sort_ascending

SAMPLE = [5, 2, 9, 1, 5, 6]


def test_sort_ascending_sample():
    assert sort_ascending(SAMPLE) == [1, 2, 5, 5, 6, 9]


def test_selection_sort_sample():
    data = [12, 23, 12, 44, 34, 65, 2, 3]
    assert selection_sort(data) == [2, 3, 12, 12, 23, 34, 44, 65]


def test_selection_sort_leaves_input_unchanged():
    data = list(SAMPLE)
    selection_sort(data)
    assert data == SAMPLE


def test_sort_ascending_accepts_iterables():
    assert sort_ascending(iter([3, 1, 2])) == [1, 2, 3]


@pytest.mark.parametrize("func", [sort_ascending, selection_sort])
def test_empty_and_single(func):
    assert func([]) == []
    assert func([7]) == [7]


@given(st.lists(st.integers()))
def test_both_sorts_agree(values):
    assert selection_sort(values) == sort_ascending(values)


@given(st.lists(st.integers()))
def test_selection_sort_is_ordered_permutation(values):
    result = selection_sort(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(values)