import pytest

from algonotes.strings import (
    kmp_count,
    kmp_prefix,
    manacher,
    min_rotation,
    tandem_repeats,
    z_function,
)


def _occurrences(text, pattern):
    return sum(text.startswith(pattern, i) for i in range(len(text)))


def _is_palindrome(s):
    return s == s[::-1]


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("AAAA", "AA"),
        ("ABABABA", "ABA"),
        ("hello", "z"),
        ("", "a"),
        ("abc", "abcd"),
        ("abcabcabc", "abc"),
    ],
)
def test_kmp_count_matches_overlapping_occurrences(text, pattern):
    assert kmp_count(text, pattern) == _occurrences(text, pattern)


def test_kmp_count_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_count("abc", "")


@pytest.mark.parametrize("pattern", ["ABABAC", "aaaa", "abacaba", "x", ""])
def test_kmp_prefix_is_border_table(pattern):
    b = kmp_prefix(pattern)
    assert len(b) == len(pattern) + 1
    assert b[0] == -1
    for i in range(1, len(pattern) + 1):
        k = b[i]
        assert 0 <= k < i
        assert pattern[:k] == pattern[i - k : i]
        assert not any(pattern[:m] == pattern[i - m : i] for m in range(k + 1, i))


def test_z_function_sample():
    assert z_function("abcbcba") == [7, 0, 0, 0, 0, 0, 1]


def test_z_function_empty():
    assert z_function("") == []


@pytest.mark.parametrize("s", ["aaaaa", "ababacaca", "mississippi", "abacabadabacaba"])
def test_z_function_is_common_prefix_length(s):
    z = z_function(s)
    assert z[0] == len(s)
    for i in range(1, len(s)):
        k = z[i]
        assert s[:k] == s[i : i + k]
        assert i + k == len(s) or s[k] != s[i + k]


def test_tandem_repeats_of_run():
    assert set(tandem_repeats("aaaa")) == {(0, 2), (1, 3), (2, 4), (0, 4)}


@pytest.mark.parametrize("s", ["aa", "abaabaab", "mississippi", "abcabcabc", "ab", "a", ""])
def test_tandem_repeats_are_all_squares(s):
    found = tandem_repeats(s)
    expected = {
        (i, i + 2 * h)
        for h in range(1, len(s) // 2 + 1)
        for i in range(len(s) - 2 * h + 1)
        if s[i : i + h] == s[i + h : i + 2 * h]
    }
    assert set(found) == expected
    for start, stop in found:
        half = (stop - start) // 2
        assert s[start : start + half] == s[start + half : stop]


def test_manacher_sample():
    even, odd = manacher("abcbcba")
    assert odd == [1, 1, 3, 7, 3, 1, 1]
    assert even == [0] * 6


def test_manacher_empty():
    assert manacher("") == ([], [])


@pytest.mark.parametrize("s", ["aa", "abba", "abacaba", "aabbaabb", "mississippi", "z"])
def test_manacher_lengths_are_maximal(s):
    n = len(s)
    even, odd = manacher(s)
    assert len(odd) == n
    assert len(even) == max(n - 1, 0)
    for i, length in enumerate(odd):
        h = (length - 1) // 2
        assert length % 2 == 1
        assert _is_palindrome(s[i - h : i + h + 1])
        assert i - h - 1 < 0 or i + h + 1 >= n or s[i - h - 1] != s[i + h + 1]
    for i, length in enumerate(even):
        h = length // 2
        lo, hi = i + 1 - h, i + 1 + h
        assert length % 2 == 0
        assert _is_palindrome(s[lo:hi])
        assert lo - 1 < 0 or hi >= n or s[lo - 1] != s[hi]


@pytest.mark.parametrize("s", ["bca", "aaaa", "abab", "cabbage", "zyxwvu", "baaab", "a"])
def test_min_rotation_gives_smallest_rotation(s):
    k = min_rotation(s)
    assert 0 <= k < len(s)
    assert s[k:] + s[:k] == min(s[i:] + s[:i] for i in range(len(s)))


def test_min_rotation_of_equal_characters_is_start():
    assert min_rotation("aaaa") == 0