import pytest

from algokit.strings import kmp_search
from algokit.text_problems import (
    MOD,
    count_occurrences,
    finding_borders,
    word_combinations,
)


def test_finding_borders_example():
    assert finding_borders("abcababcab") == [2, 5]


@pytest.mark.parametrize("s", ["abcababcab", "aaaaa", "abacaba", "xyz", "a"])
def test_finding_borders_are_borders(s):
    result = finding_borders(s)
    assert result == sorted(result)
    for k in result:
        assert 0 < k < len(s)
        assert s[:k] == s[-k:]


def test_finding_borders_all_equal_letters():
    s = "aaaaaa"
    assert finding_borders(s) == list(range(1, len(s)))


def test_finding_borders_complete():
    s = "abacabadabacaba"
    expected = [k for k in range(1, len(s)) if s[:k] == s[-k:]]
    assert finding_borders(s) == expected


def test_finding_borders_empty():
    assert finding_borders("") == []


def test_count_occurrences_example():
    assert count_occurrences("saippuakauppias", "pp") == 2


def test_count_occurrences_matches_search():
    text, pattern = "abababab", "aba"
    assert count_occurrences(text, pattern) == len(kmp_search(pattern, text))


def test_count_occurrences_absent():
    assert count_occurrences("abc", "d") == 0


def test_count_occurrences_pattern_longer_than_text():
    assert count_occurrences("ab", "abc") == 0


def test_count_occurrences_empty_pattern():
    with pytest.raises(ValueError):
        count_occurrences("abc", "")


def test_word_combinations_example():
    assert word_combinations("ababc", ["ab", "abab", "c", "cb"]) == 2


def test_word_combinations_no_split():
    assert word_combinations("abc", ["x", "y"]) == 0


def test_word_combinations_single_word():
    assert word_combinations("hello", ["hello"]) == 1


def test_word_combinations_empty_text():
    assert word_combinations("", ["a"]) == 1


def test_word_combinations_single_letters_only():
    assert word_combinations("aaaaaaa", ["a"]) == 1


def test_word_combinations_reduced_modulo():
    result = word_combinations("a" * 400, ["a", "aa"])
    assert 0 <= result < MOD