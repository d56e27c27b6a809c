import random

import pytest

from algokit.number_theory import (
    chinese_remainder,
    discrete_log,
    linear_sieve,
    xor_pyramid_top,
)


def test_chinese_remainder_classic_example():
    assert chinese_remainder([2, 3, 2], [3, 5, 7]) == 23


@pytest.mark.parametrize("moduli", [[3, 5, 7], [4, 9, 25], [11], [8, 3], [1, 13]])
def test_chinese_remainder_satisfies_every_congruence(moduli):
    rng = random.Random(sum(moduli))
    total = 1
    for m in moduli:
        total *= m
    for _ in range(20):
        remainders = [rng.randrange(m) for m in moduli]
        x = chinese_remainder(remainders, moduli)
        assert 0 <= x < total
        assert [x % m for m in moduli] == remainders


def test_chinese_remainder_errors():
    with pytest.raises(ValueError):
        chinese_remainder([1, 1], [4, 6])
    with pytest.raises(ValueError):
        chinese_remainder([1], [3, 5])
    with pytest.raises(ValueError):
        chinese_remainder([1], [0])


@pytest.mark.parametrize("m", [2, 7, 9, 10, 12, 13, 16, 25])
def test_discrete_log_is_smallest_solution(m):
    for a in range(1, m):
        for b in range(m):
            x = discrete_log(a, b, m)
            if x is None:
                assert all(pow(a, y, m) != b for y in range(2 * m))
            else:
                assert pow(a, x, m) == b
                assert all(pow(a, y, m) != b for y in range(x))


def test_discrete_log_large_prime_modulus():
    m = 1_000_000_007
    x = discrete_log(5, 123456, m)
    assert x is not None
    assert pow(5, x, m) == 123456


def test_discrete_log_zero_base():
    assert discrete_log(0, 0, 7) == 1
    assert discrete_log(0, 3, 7) is None


def test_discrete_log_unsolvable():
    assert discrete_log(2, 3, 4) is None


def test_linear_sieve_primes_below_hundred():
    spf, primes = linear_sieve(100)
    assert len(primes) == 25
    prime_set = set(primes)
    for n in range(2, 100):
        assert spf[n] in prime_set
        assert n % spf[n] == 0
        assert all(n % p for p in primes if p < spf[n])
        assert (spf[n] == n) == (n in prime_set)


def test_linear_sieve_small_limits():
    assert linear_sieve(0) == ([], [])
    assert linear_sieve(2)[1] == []
    with pytest.raises(ValueError):
        linear_sieve(-1)


def _collapse(row):
    while len(row) > 1:
        row = [a ^ b for a, b in zip(row, row[1:])]
    return row[0]


def test_xor_pyramid_matches_layer_by_layer_collapse():
    rng = random.Random(99)
    for length in range(1, 25):
        row = [rng.randrange(1 << 20) for _ in range(length)]
        assert xor_pyramid_top(row) == _collapse(row)


def test_xor_pyramid_single_value():
    assert xor_pyramid_top([41]) == 41