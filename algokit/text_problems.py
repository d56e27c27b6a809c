"""String problems: borders, occurrence counting and dictionary splits."""

from __future__ import annotations

from typing import Iterable

from algokit.strings import kmp_search, prefix_function

MOD = 1_000_000_007


def finding_borders(s: str) -> list[int]:
    """Lengths of every proper border of s (prefix equal to suffix), ascending."""
    if not s:
        return []
    lps = prefix_function(s)
    borders: list[int] = []
    k = lps[-1]
    while k:
        borders.append(k)
        k = lps[k - 1]
    return borders[::-1]


def count_occurrences(text: str, pattern: str) -> int:
    """Number of places where pattern occurs in text, overlaps included."""
    return len(kmp_search(pattern, text))


def word_combinations(text: str, words: Iterable[str]) -> int:
    """Ways to write text as a concatenation of dictionary words, modulo 10**9 + 7."""
    children: list[dict[str, int]] = [{}]
    is_end: list[bool] = [False]
    for word in words:
        node = 0
        for ch in word:
            nxt = children[node].get(ch)
            if nxt is None:
                children.append({})
                is_end.append(False)
                nxt = len(children) - 1
                children[node][ch] = nxt
            node = nxt
        is_end[node] = True

    n = len(text)
    ways = [0] * (n + 1)
    ways[n] = 1
    for start in range(n - 1, -1, -1):
        node = 0
        total = 0
        for i in range(start, n):
            nxt = children[node].get(text[i])
            if nxt is None:
                break
            node = nxt
            if is_end[node]:
                total = (total + ways[i + 1]) % MOD
        ways[start] = total
    return ways[0]