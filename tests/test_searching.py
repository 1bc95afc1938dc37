import math

import pytest

from algokit.searching import (
    binary_search,
    interpolation_search,
    linear_search,
    lower_bound_search,
    rabin_karp,
    square_root,
)

SORTED = [2, 3, 4, 10, 40]


@pytest.mark.parametrize("target", SORTED)
def test_binary_search_finds_present(target):
    index = binary_search(SORTED, target)
    assert SORTED[index] == target


@pytest.mark.parametrize("target", [0, 5, 41, -3])
def test_binary_search_missing(target):
    assert binary_search(SORTED, target) == -1


def test_binary_search_empty():
    assert binary_search([], 1) == -1


def test_lower_bound_driver_cases():
    values = [1, 3, 4, 5, 6]
    assert lower_bound_search(values, 1) == 0
    assert lower_bound_search(values, 6) == len(values) - 1
    assert lower_bound_search(values, 10) == -1


def test_lower_bound_returns_first_duplicate():
    values = [1, 2, 2, 2, 3]
    assert lower_bound_search(values, 2) == values.index(2)


@pytest.mark.parametrize("target", [1, 3, 4, 5, 6, 0, 2, 7])
def test_lower_bound_agrees_with_list_index(target):
    values = [1, 3, 4, 5, 6]
    expected = values.index(target) if target in values else -1
    assert lower_bound_search(values, target) == expected


def test_lower_bound_empty():
    assert lower_bound_search([], 3) == -1


def test_square_root_driver_example():
    assert square_root(50, 3) == pytest.approx(7.071)


@pytest.mark.parametrize("number", [0, 1, 2, 10, 49, 50, 99, 1000])
@pytest.mark.parametrize("precision", [0, 1, 3, 4])
def test_square_root_truncates(number, precision):
    result = square_root(number, precision)
    step = 10 ** -precision
    assert result <= math.sqrt(number) + 1e-12
    assert math.sqrt(number) < result + step + 1e-12


def test_square_root_perfect_square_is_exact():
    assert square_root(49, 4) == 7.0


def test_square_root_rejects_negative():
    with pytest.raises(ValueError):
        square_root(-4, 2)
    with pytest.raises(ValueError):
        square_root(4, -1)


UNIFORM = [10, 20, 30, 40, 50, 60, 70, 80, 90]


@pytest.mark.parametrize("target", UNIFORM)
def test_interpolation_search_finds_present(target):
    index = interpolation_search(UNIFORM, target)
    assert UNIFORM[index] == target


@pytest.mark.parametrize("target", [5, 15, 95, 55])
def test_interpolation_search_missing(target):
    assert interpolation_search(UNIFORM, target) == -1


def test_interpolation_search_constant_and_empty():
    assert interpolation_search([4, 4, 4], 4) in (0, 1, 2)
    assert interpolation_search([4, 4, 4], 5) == -1
    assert interpolation_search([], 1) == -1


def test_interpolation_search_non_uniform():
    values = [1, 2, 3, 100, 1000, 1001]
    for target in values:
        assert values[interpolation_search(values, target)] == target


def test_linear_search():
    values = [7, 3, 9, 3, 1]
    assert linear_search(values, 3) == values.index(3)
    assert linear_search(values, 1) == len(values) - 1
    assert linear_search(values, 42) == -1


def test_rabin_karp_driver_example():
    assert rabin_karp("AA", "ABCCDEEABCCAA") == [11]


def test_rabin_karp_overlapping_matches_all_start_with_pattern():
    text = "aaaaab"
    result = rabin_karp("aa", text)
    assert len(result) == 4
    assert all(text.startswith("aa", i) for i in result)


@pytest.mark.parametrize(
    "pattern,text",
    [("ABC", "ABCCDEEABCCAA"), ("ab", "abababab"), ("x", "xyzxx"), ("zz", "abc")],
)
def test_rabin_karp_small_modulus_gives_same_result(pattern, text):
    assert rabin_karp(pattern, text, 7) == rabin_karp(pattern, text)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("abcdef", "abc") == []


def test_rabin_karp_whole_text():
    assert rabin_karp("hello", "hello") == [0]


def test_rabin_karp_rejects_bad_input():
    with pytest.raises(ValueError):
        rabin_karp("", "abc")
    with pytest.raises(ValueError):
        rabin_karp("a", "abc", 0)