import pytest

from algokit.dp_sequences import (
    lcs_length,
    longest_common_subsequence,
    longest_common_substring,
    longest_palindromic_subsequence,
    longest_repeating_subsequence,
    min_insertions_deletions,
    min_palindrome_partitions,
    shortest_common_supersequence,
    shortest_common_supersequence_length,
)

PAIRS = [
    ("aggtab", "gxtxayb"),
    ("abcdgh", "aedfhr"),
    ("heap", "pea"),
    ("", "abc"),
    ("abc", ""),
    ("same", "same"),
    ("xyz", "abc"),
]


def _is_subsequence(small: str, big: str) -> bool:
    it = iter(big)
    return all(ch in it for ch in small)


def test_lcs_length_of_source_example():
    assert lcs_length("aggtab", "gxtxayb") == 4


@pytest.mark.parametrize("a,b", PAIRS)
def test_lcs_length_is_symmetric(a, b):
    assert lcs_length(a, b) == lcs_length(b, a)


@pytest.mark.parametrize("text", ["", "a", "banana", "abcabc"])
def test_lcs_with_itself_is_whole_length(text):
    assert lcs_length(text, text) == len(text)


@pytest.mark.parametrize("a,b", PAIRS)
def test_longest_common_subsequence_is_common_and_maximal(a, b):
    result = longest_common_subsequence(a, b)
    assert len(result) == lcs_length(a, b)
    assert _is_subsequence(result, a)
    assert _is_subsequence(result, b)


def test_disjoint_strings_share_nothing():
    assert longest_common_subsequence("xyz", "abc") == ""
    assert longest_common_substring("xyz", "abc") == 0


@pytest.mark.parametrize("a,b", PAIRS)
def test_common_substring_bounded_by_subsequence(a, b):
    length = longest_common_substring(a, b)
    assert 0 <= length <= lcs_length(a, b)


def test_common_substring_contained_run():
    assert longest_common_substring("xxabcdyy", "zzabcdww") == len("abcd")


def test_palindromic_subsequence_of_palindrome_is_full_length():
    assert longest_palindromic_subsequence("racecar") == len("racecar")


def test_palindromic_subsequence_of_distinct_chars_is_one():
    assert longest_palindromic_subsequence("abcdef") == 1


def test_repeating_subsequence_distinct_chars_is_zero():
    assert longest_repeating_subsequence("abcdef") == 0


def test_repeating_subsequence_of_doubled_letters():
    assert longest_repeating_subsequence("aabb") == 2


def test_repeating_subsequence_of_repeated_block():
    assert longest_repeating_subsequence("xyzxyz") == len("xyz")


@pytest.mark.parametrize("a,b", PAIRS)
def test_min_insertions_deletions_relation(a, b):
    ops = min_insertions_deletions(a, b)
    assert ops == len(a) + len(b) - 2 * lcs_length(a, b)
    assert ops == min_insertions_deletions(b, a)


def test_min_insertions_deletions_identical_is_zero():
    assert min_insertions_deletions("geek", "geek") == 0


@pytest.mark.parametrize("text", ["", "a", "aba", "noon", "racecar"])
def test_palindrome_needs_no_cuts(text):
    assert min_palindrome_partitions(text) == 0


@pytest.mark.parametrize("text", ["ab", "abcd", "xyzuvw"])
def test_distinct_chars_need_a_cut_between_each(text):
    assert min_palindrome_partitions(text) == len(text) - 1


def test_palindrome_partition_joined_palindromes():
    # "aba" + "cc" + "dd" can be split into three palindromes.
    assert min_palindrome_partitions("abaccdd") == 2


@pytest.mark.parametrize("a,b", PAIRS)
def test_shortest_common_supersequence_contains_both(a, b):
    result = shortest_common_supersequence(a, b)
    assert len(result) == shortest_common_supersequence_length(a, b)
    assert _is_subsequence(a, result)
    assert _is_subsequence(b, result)


def test_supersequence_of_identical_strings_is_the_string():
    assert shortest_common_supersequence("abc", "abc") == "abc"


def test_supersequence_with_empty_is_other():
    assert shortest_common_supersequence("", "gxtxayb") == "gxtxayb"
    assert shortest_common_supersequence("aggtab", "") == "aggtab"