"""Tests for prime utilities."""

import pytest
from euler_library import primes
from euler_library.primes import is_prime, prime_factors
from euler_library import DomainError


def test_is_prime():
    assert is_prime(2) == True
    assert is_prime(3) == True
    assert is_prime(17) == True
    assert is_prime(97) == True
    assert is_prime(1) == False
    assert is_prime(0) == False
    assert is_prime(-7) == False
    assert is_prime(4) == False
    assert is_prime(25) == False
    assert is_prime(100) == False
    assert is_prime(7919) == True


def test_is_prime_matches_sieve():
    flags = primes.prime_sieve(1000)
    assert [n for n in range(1001) if is_prime(n)] == [n for n in range(1001) if flags[n]]


def test_prime_factors():
    assert prime_factors(1) == []
    assert prime_factors(12) == [2, 2, 3]
    assert prime_factors(97) == [97]
    assert prime_factors(13195) == [5, 7, 13, 29]
    assert prime_factors(2 ** 10) == [2] * 10
    with pytest.raises(DomainError):
        prime_factors(0)


def test_prime_factors_unique():
    assert primes.prime_factors_unique(12) == [2, 3]
    assert primes.prime_factors_unique(1) == []
    assert primes.prime_factors_unique(360) == [2, 3, 5]


def test_sopf():
    assert primes.sopf(12) == 5
    assert primes.sopf(1) == 0
    assert primes.sopf(30) == 10


def test_prime_factor_cnt():
    assert primes.prime_factor_cnt(11) == [0, 0, 1, 1, 1, 1, 2, 1, 1, 1, 2]
    assert primes.prime_factor_cnt(0) == []
    counts = primes.prime_factor_cnt(1000)
    assert counts[644] == 3
    assert counts[210] == 4


def test_primes_upto():
    assert primes.primes_upto(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert primes.primes_upto(1) == []
    assert primes.primes_upto(2) == [2]
    assert sum(primes.primes_upto(10)) == 17
    with pytest.raises(DomainError):
        primes.primes_upto(-1)
