import pytest

from dsakit.searching import binary_search, interpolation_search, linear_search

DATA = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
SORTED_SEARCHES = [binary_search, interpolation_search]


@pytest.mark.parametrize("search", [linear_search, *SORTED_SEARCHES])
@pytest.mark.parametrize("key", DATA)
def test_finds_every_present_key(search, key):
    index = search(DATA, key)
    assert DATA[index] == key


@pytest.mark.parametrize("search", [linear_search, *SORTED_SEARCHES])
@pytest.mark.parametrize("key", [0, 11, -5, 100])
def test_missing_key_returns_none(search, key):
    assert search(DATA, key) is None


@pytest.mark.parametrize("search", [linear_search, *SORTED_SEARCHES])
def test_empty_sequence(search):
    assert search([], 3) is None


def test_linear_search_returns_first_occurrence():
    values = [4, 9, 4, 9]
    assert linear_search(values, 9) == values.index(9)


def test_linear_search_on_unsorted_data():
    values = [12, 11, 13, 5, 6]
    assert linear_search(values, 5) == 3


def test_binary_search_pinned_index():
    assert binary_search(DATA, 7) == 6


def test_gaps_between_values():
    values = [2, 4, 8, 16, 32, 64]
    for key in values:
        assert values[binary_search(values, key)] == key
        assert values[interpolation_search(values, key)] == key
    for key in (3, 5, 33, 63):
        assert binary_search(values, key) is None
        assert interpolation_search(values, key) is None


def test_interpolation_search_all_equal():
    values = [7, 7, 7, 7]
    assert values[interpolation_search(values, 7)] == 7
    assert interpolation_search(values, 8) is None


def test_single_element():
    assert binary_search([5], 5) == 0
    assert interpolation_search([5], 5) == 0
    assert interpolation_search([5], 4) is None