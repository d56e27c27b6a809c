import pytest

from algokit.strings import (
    BASE,
    MOD1,
    MOD2,
    kmp_search,
    polynomial_hash,
    prefix_function,
    same_string_hash,
    z_function,
)

SAMPLES = ["", "a", "aaaa", "abab", "aabaaab", "abcabcabx", "mississippi", "zzyzzyzzz"]


def test_prefix_function_known_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("s", SAMPLES)
def test_prefix_function_values_are_borders(s):
    pi = prefix_function(s)
    assert len(pi) == len(s)
    for i, k in enumerate(pi):
        assert k <= i
        assert s[:k] == s[i + 1 - k : i + 1]


@pytest.mark.parametrize("text", ["xyzabxyzxyq", "", "xy", "xyzxyzxyz", "aaxyzaa"])
def test_kmp_counts_non_overlapping_pattern(text):
    found = kmp_search("xyz", text)
    assert len(found) == text.count("xyz")
    assert all(text[i : i + 3] == "xyz" for i in found)
    assert found == sorted(found)


@pytest.mark.parametrize("pattern,text", [("aa", "aaaaa"), ("aba", "abababa"), ("ss", "mississippi")])
def test_kmp_agrees_with_z_function(pattern, text):
    z = z_function(pattern + "#" + text)
    offset = len(pattern) + 1
    expected = [i - offset for i, v in enumerate(z) if v == len(pattern)]
    assert kmp_search(pattern, text) == expected
    assert all(text.startswith(pattern, i) for i in expected)


def test_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("", "abc")


@pytest.mark.parametrize("s", SAMPLES)
def test_z_function_is_maximal_common_prefix(s):
    z = z_function(s)
    assert len(z) == len(s)
    for i in range(1, len(s)):
        k = z[i]
        assert s[:k] == s[i : i + k]
        assert i + k == len(s) or s[k] != s[i + k]


def test_z_function_first_entry():
    assert z_function("aaaa")[0] == 0
    assert z_function("") == []


def test_hash_of_single_letter_is_its_rank():
    assert polynomial_hash("a", MOD1) == 1
    assert polynomial_hash("a", MOD2) == 1


@pytest.mark.parametrize("s,t", [("abc", "de"), ("", "xyz"), ("hello", ""), ("zz", "zzz")])
@pytest.mark.parametrize("mod", [MOD1, MOD2])
def test_hash_concatenation(s, t, mod):
    combined = polynomial_hash(s + t, mod)
    expected = (polynomial_hash(s, mod) + pow(BASE, len(s), mod) * polynomial_hash(t, mod)) % mod
    assert combined == expected


def test_same_string_hash():
    assert same_string_hash("abc", "abc") is True
    assert same_string_hash("abc", "abd") is False
    assert same_string_hash("ab", "ba") is False


def test_hash_rejects_bad_modulus():
    with pytest.raises(ValueError):
        polynomial_hash("abc", 0)