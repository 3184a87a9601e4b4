import itertools
import os

import pytest

from algonotes.suffixes import SuffixArray, SuffixAutomaton, Trie

TEXTS = ["GATAGACA$", "banana", "aaaaa", "abracadabra", "mississippi$", "x"]


@pytest.mark.parametrize("text", TEXTS)
def test_suffix_array_is_sorted_permutation(text):
    sa = SuffixArray(text)
    assert sorted(sa.sa) == list(range(len(text)))
    suffixes = [text[i:] for i in sa.sa]
    assert suffixes == sorted(suffixes)


@pytest.mark.parametrize("text", TEXTS)
def test_lcp_matches_neighbours(text):
    sa = SuffixArray(text)
    assert sa.lcp[0] == 0
    for i in range(1, len(text)):
        a, b = text[sa.sa[i]:], text[sa.sa[i - 1]:]
        assert sa.lcp[i] == len(os.path.commonprefix([a, b]))


def test_known_suffix_array():
    assert SuffixArray("GATAGACA$").sa == [8, 7, 5, 3, 1, 6, 4, 0, 2]


@pytest.mark.parametrize("pattern", ["A", "GA", "CA", "AGA"])
def test_string_matching_finds_all_occurrences(pattern):
    text = "GATAGACA$"
    sa = SuffixArray(text)
    lo, hi = sa.string_matching(pattern)
    found = sorted(sa.sa[i] for i in range(lo, hi + 1))
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert found == expected


def test_string_matching_absent():
    assert SuffixArray("GATAGACA$").string_matching("TT") is None


def test_longest_repeated_substring():
    text = "GATAGACA$"
    sa = SuffixArray(text)
    length, idx = sa.longest_repeated()
    start = sa.sa[idx]
    assert text[start:start + length] == "GA"
    assert text.count("GA") >= 2


def test_longest_repeated_single_char():
    assert SuffixArray("x").longest_repeated() == (-1, 0)


def test_longest_common_substring():
    text = "GATAGACA$" + "CATA" + "#"
    split = len(text) - len("CATA") - 1
    sa = SuffixArray(text)
    length, idx = sa.longest_common(split)
    start = sa.sa[idx]
    common = text[start:start + length]
    assert common == "ATA"
    assert common in "GATAGACA" and common in "CATA"


def test_suffix_array_on_list():
    data = [3, 1, 2, 1, 0]
    sa = SuffixArray(data)
    assert [data[i:] for i in sa.sa] == sorted(data[i:] for i in range(len(data)))
    lo, hi = sa.string_matching([1])
    assert hi - lo + 1 == data.count(1)


def _substrings(text):
    return {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}


@pytest.mark.parametrize("text", ["abcbc", "aaaa", "abracadabra"])
def test_automaton_recognises_exactly_substrings(text):
    sam = SuffixAutomaton.from_iterable(text)
    subs = _substrings(text)
    alphabet = sorted(set(text)) + ["z"]
    for length in range(1, 4):
        for word in itertools.product(alphabet, repeat=length):
            w = "".join(word)
            assert (w in sam) == (w in subs)


@pytest.mark.parametrize("text", ["abcbc", "aaaa", "abracadabra", "mississippi"])
def test_automaton_distinct_substring_count(text):
    sam = SuffixAutomaton.from_iterable(text)
    states = sam.states
    total = sum(s.length - states[s.link].length for s in states[1:])
    assert total == len(_substrings(text))
    assert len(states) <= 2 * len(text) - 1


def test_automaton_order_sorted_by_length():
    sam = SuffixAutomaton()
    for c in "abbab":
        sam.extend(c)
    order = sam.order
    assert sorted(order) == list(range(1, len(sam.states)))
    lengths = [sam.states[i].length for i in order]
    assert lengths == sorted(lengths)
    assert sam.states[sam.last].length == 5


@pytest.fixture
def trie():
    t = Trie()
    for word in sorted({"CAR", "CAT", "RAT"}):
        t.insert(word)
    return t


def test_trie_search(trie):
    assert trie.search("CAR") is True
    assert trie.search("DOG") is False
    assert trie.search("CA") is False


def test_trie_starts_with(trie):
    assert trie.starts_with("CA") is True
    assert trie.starts_with("Z") is False
    assert trie.starts_with("AT") is False
    assert trie.starts_with("") is True


def test_trie_empty_word():
    t = Trie()
    assert t.search("") is False
    t.insert("")
    assert t.search("") is True