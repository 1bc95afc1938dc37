"""Dynamic programming over strings and sequences.

Covers subsequences, substrings, supersequences and palindrome partitions.
"""

from __future__ import annotations

from typing import Any, Sequence


def _lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    """Table where cell ``[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``."""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a, start=1):
        row, above = table[i], table[i - 1]
        for j, y in enumerate(b, start=1):
            if x == y:
                row[j] = above[j - 1] + 1
            else:
                row[j] = max(above[j], row[j - 1])
    return table


def lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Length of the longest common subsequence of ``a`` and ``b``."""
    return _lcs_table(a, b)[len(a)][len(b)]


def longest_common_subsequence(a: str, b: str) -> str:
    """One longest common subsequence of ``a`` and ``b``."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    picked: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] < table[i - 1][j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))


def longest_common_substring(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Length of the longest contiguous run shared by ``a`` and ``b``."""
    best = 0
    previous = [0] * (len(b) + 1)
    for x in a:
        current = [0] * (len(b) + 1)
        for j, y in enumerate(b, start=1):
            if x == y:
                current[j] = previous[j - 1] + 1
                best = max(best, current[j])
        previous = current
    return best


def longest_palindromic_subsequence(text: Sequence[Any]) -> int:
    """Length of the longest subsequence of ``text`` that reads the same backwards."""
    return lcs_length(list(reversed(text)), text)


def longest_repeating_subsequence(text: Sequence[Any]) -> int:
    """Length of the longest subsequence occurring twice at distinct positions."""
    n = len(text)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            if text[i - 1] == text[j - 1] and i != j:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table[n][n]


def min_insertions_deletions(source: Sequence[Any], target: Sequence[Any]) -> int:
    """Fewest single-element insertions plus deletions turning ``source`` into ``target``."""
    common = lcs_length(source, target)
    return (len(source) - common) + (len(target) - common)


def min_palindrome_partitions(text: Sequence[Any]) -> int:
    """Fewest cuts that split ``text`` into palindromic pieces."""
    n = len(text)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    for i in range(n - 1, -1, -1):
        for j in range(i, n):
            if text[i] == text[j] and (j - i < 2 or palindrome[i + 1][j - 1]):
                palindrome[i][j] = True

    # cuts[i] is the fewest cuts needed for text[i:]; cuts[n] stands for nothing left.
    cuts = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        if palindrome[i][n - 1]:
            cuts[i] = 0
            continue
        cuts[i] = min(
            1 + cuts[k + 1] for k in range(i, n - 1) if palindrome[i][k]
        )
    return cuts[0]


def shortest_common_supersequence_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Length of the shortest sequence holding both ``a`` and ``b`` as subsequences."""
    return len(a) + len(b) - lcs_length(a, b)


def shortest_common_supersequence(a: str, b: str) -> str:
    """One shortest string holding both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    built: list[str] = []
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            built.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i][j - 1] > table[i - 1][j]:
            built.append(b[j - 1])
            j -= 1
        else:
            built.append(a[i - 1])
            i -= 1
    built.extend(reversed(a[:i]))
    built.extend(reversed(b[:j]))
    return "".join(reversed(built))