import pytest

from dsakit.arrays import (
    reverse_in_place,
    reverse_range,
    reversed_copy,
    swap_alternate,
    unique_element,
)


def test_reversed_copy_leaves_input_untouched():
    src = [1, 2, 3, 4, 5, 6]
    result = reversed_copy(src)
    assert src == [1, 2, 3, 4, 5, 6]
    assert result[::-1] == src


def test_reversed_copy_of_empty():
    assert reversed_copy([]) == []


@pytest.mark.parametrize("data", [[], [7], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_reverse_in_place_matches_copy(data):
    expected = reversed_copy(data)
    original = list(data)
    result = reverse_in_place(data)
    assert result is data
    assert data == expected
    assert reverse_in_place(data) == original


def test_reverse_range_whole_array():
    arr = [1, 2, 3, 4, 5]
    reverse_range(arr, 0, len(arr) - 1)
    assert arr == [5, 4, 3, 2, 1]


def test_reverse_range_partial():
    arr = [1, 2, 3, 4, 5]
    reverse_range(arr, 1, 3)
    assert arr[0] == 1 and arr[4] == 5
    assert arr[1:4] == [4, 3, 2]


def test_reverse_range_empty_range_is_noop():
    arr = [3, 1, 2]
    reverse_range(arr, 2, 1)
    assert arr == [3, 1, 2]


def test_reverse_range_out_of_bounds():
    with pytest.raises(IndexError):
        reverse_range([1, 2, 3], 0, 5)


def test_swap_alternate_even_length():
    arr = [1, 2, 3, 4, 5, 6]
    swap_alternate(arr)
    assert arr == [2, 1, 4, 3, 6, 5]


def test_swap_alternate_odd_length_keeps_last():
    arr = [1, 2, 3, 4, 5]
    swap_alternate(arr)
    assert arr[-1] == 5
    assert sorted(arr) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("data", [[], [1], [1, 2, 3], [9, 8, 7, 6]])
def test_swap_alternate_twice_is_identity(data):
    original = list(data)
    swap_alternate(data)
    swap_alternate(data)
    assert data == original


def test_unique_element_odd_one_out():
    assert unique_element([1, 2, 3, 6, 3, 6, 2]) == 1


def test_unique_element_in_middle():
    assert unique_element([2, 4, 7, 2, 7]) == 4


def test_unique_element_at_end():
    assert unique_element([5, 1, 1, 3, 3]) == 5


def test_unique_element_does_not_mutate():
    data = [3, 1, 3]
    unique_element(data)
    assert data == [3, 1, 3]


@pytest.mark.parametrize("data", [[], [4, 4], [1, 2, 1, 2]])
def test_unique_element_none_found(data):
    with pytest.raises(ValueError):
        unique_element(data)