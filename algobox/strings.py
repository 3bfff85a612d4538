"""String algorithms: phone-keypad combinations, common prefixes,
palindromes and shortest common supersequences."""

from __future__ import annotations

from itertools import product
from typing import Sequence

_PHONE_MAP = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def letter_combinations(digits: str) -> list[str]:
    """Every letter string that the keypad digits can spell, in keypad order.

    Raises ValueError for characters that are not decimal digits.
    """
    if not digits:
        return []
    try:
        groups = [_PHONE_MAP[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    return ["".join(letters) for letters in product(*groups)]


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest prefix shared by all strings, found by shrinking the first one."""
    if not strs:
        return ""
    prefix = strs[0]
    for text in strs[1:]:
        while not text.startswith(prefix):
            prefix = prefix[:-1]
            if not prefix:
                return ""
    return prefix


def longest_common_prefix_by_columns(strs: Sequence[str]) -> str:
    """Longest prefix shared by all strings, found by comparing column by column."""
    if not strs:
        return ""
    first = strs[0]
    for index, column in enumerate(zip(*strs)):
        if any(char != column[0] for char in column):
            return first[:index]
    return first[: min(len(text) for text in strs)]


def is_palindrome(s: str) -> bool:
    """True when the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    chars = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return chars == chars[::-1]


def shortest_common_supersequence(str1: str, str2: str) -> str:
    """A shortest string that has both ``str1`` and ``str2`` as subsequences."""
    m, n = len(str1), len(str2)
    lcs = [[0] * (n + 1) for _ in range(m + 1)]
    for i, a in enumerate(str1, 1):
        for j, b in enumerate(str2, 1):
            if a == b:
                lcs[i][j] = lcs[i - 1][j - 1] + 1
            else:
                lcs[i][j] = max(lcs[i - 1][j], lcs[i][j - 1])

    backwards: list[str] = []
    i, j = m, n
    while i > 0 and j > 0:
        if str1[i - 1] == str2[j - 1]:
            backwards.append(str1[i - 1])
            i -= 1
            j -= 1
        elif lcs[i - 1][j] > lcs[i][j - 1]:
            backwards.append(str1[i - 1])
            i -= 1
        else:
            backwards.append(str2[j - 1])
            j -= 1
    backwards.extend(reversed(str1[:i]))
    backwards.extend(reversed(str2[:j]))
    return "".join(reversed(backwards))