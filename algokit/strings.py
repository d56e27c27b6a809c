"""Exact string matching and polynomial string hashing."""

from __future__ import annotations

MOD1 = 1_000_000_007
MOD2 = 998_244_353
BASE = 37


def prefix_function(pattern: str) -> list[int]:
    """For every prefix, the length of its longest proper border."""
    lps = [0] * len(pattern)
    length = 0
    for i in range(1, len(pattern)):
        while length and pattern[i] != pattern[length]:
            length = lps[length - 1]
        if pattern[i] == pattern[length]:
            length += 1
        lps[i] = length
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Start indices of every occurrence of pattern in text, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    m = len(pattern)
    found: list[int] = []
    j = 0
    for i, ch in enumerate(text):
        while j and ch != pattern[j]:
            j = lps[j - 1]
        if ch == pattern[j]:
            j += 1
            if j == m:
                found.append(i - m + 1)
                j = lps[j - 1]
    return found


def z_function(s: str) -> list[int]:
    """z[i] is the length of the longest common prefix of s and s[i:]; z[0] is 0."""
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and s[z[i]] == s[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def polynomial_hash(s: str, mod: int = MOD1) -> int:
    """Sum of (letter rank) * BASE**i modulo mod, where 'a' has rank 1."""
    if mod <= 0:
        raise ValueError("modulus must be positive")
    value = 0
    power = 1
    for ch in s:
        value = (value + (ord(ch) - ord("a") + 1) * power) % mod
        power = power * BASE % mod
    return value


def same_string_hash(a: str, b: str) -> bool:
    """Whether a and b agree under both hash moduli."""
    return all(polynomial_hash(a, m) == polynomial_hash(b, m) for m in (MOD1, MOD2))