"""Tests for common number utilities."""

from itertools import cycle, islice

import pytest
from euler_library import common as eu
from euler_library import DomainError


def test_divisors():
    assert eu.divisors(28) == [1, 2, 4, 7, 14, 28]
    assert eu.divisors(1) == [1]
    assert eu.divisors(36) == [1, 2, 3, 4, 6, 9, 12, 18, 36]
    assert eu.divisors(13) == [1, 13]
    with pytest.raises(DomainError):
        eu.divisors(0)
    with pytest.raises(DomainError):
        eu.divisors(-6)


def test_divisors_is_pure():
    assert eu.divisors(360) == eu.divisors(360)


def test_divisor_sum():
    assert eu.divisor_sum(10) == 8
    assert eu.divisor_sum(28) == 28
    assert eu.divisor_sum(0) == 0
    assert eu.divisor_sum(1) == 0
    assert eu.divisor_sum(16) == 15


def test_divisor_sum_list():
    assert eu.divisor_sum_list(10) == [0, 0, 1, 1, 3, 1, 6, 1, 7, 4, 8]
    assert eu.divisor_sum_list(0) == [0]
    sums = eu.divisor_sum_list(300)
    assert sums[220] == 284
    assert sums[284] == 220
    assert all(sums[n] == eu.divisor_sum(n) for n in range(301))


def test_gcd_lcm():
    assert eu.gcd(48, 18) == 6
    assert eu.gcd(0, 0) == 0
    assert eu.gcd(-4, 6) == 2
    assert eu.lcm(4, 6) == 12
    assert eu.lcm(0, 5) == 0
    assert eu.lcm(-4, 6) == 12


def test_digit_sum():
    assert eu.digit_sum(12345) == 15
    assert eu.digit_sum(0) == 0
    assert eu.digit_sum(2 ** 15) == 26
    with pytest.raises(DomainError):
        eu.digit_sum(-1)


def test_sum_of_digits():
    assert eu.sum_of_digits("123") == 6
    assert eu.sum_of_digits("") == 0
    with pytest.raises(DomainError):
        eu.sum_of_digits("12a")


def test_digits_conversion():
    assert eu.to_digits(123) == [1, 2, 3]
    assert eu.to_digits(0) == [0]
    assert eu.from_digits([1, 2, 3]) == 123
    assert eu.from_digits([]) == 0
    with pytest.raises(DomainError):
        eu.to_digits(-5)


def test_bytes_conversion():
    assert eu.to_bytes(123) == bytes([49, 50, 51])
    assert eu.from_bytes([51, 50, 49]) == 321
    assert eu.from_bytes(eu.to_bytes(123)) == 123
    with pytest.raises(ValueError):
        eu.from_bytes(b"12x")


def test_is_palindrome():
    assert eu.is_palindrome(12321) == True
    assert eu.is_palindrome(123) == False
    assert eu.is_palindrome("abcba") == True
    assert eu.is_palindrome(7) == True
    assert eu.is_palindrome(-121) == False


def test_is_pandigital():
    assert eu.is_pandigital("456123", 1) == True
    assert eu.is_pandigital("4560123", 0) == True
    assert eu.is_pandigital(192384576) == True
    assert eu.is_pandigital("1223") == False
    assert eu.is_pandigital("1234567890") == False


def test_is_perm():
    assert eu.is_perm(123, 231) == True
    assert eu.is_perm("yes", "esy") == True
    assert eu.is_perm(123, 124) == False
    assert eu.is_perm(11, 1) == False


def test_factorial():
    assert eu.factorial(0) == 1
    assert eu.factorial(1) == 1
    assert eu.factorial(5) == 120
    assert eu.factorial(15) == 1307674368000
    assert str(eu.factorial(31)) == "8222838654177922817725562880000000"
    with pytest.raises(DomainError):
        eu.factorial(-1)


def test_replicate():
    assert list(eu.replicate(2, [1, 2, 3])) == [[1, 2, 3], [1, 2, 3]]
    assert "".join(eu.replicate(3, "abc")) == "abcabcabc"
    assert list(eu.replicate(0, 1)) == []


def test_cartesian_product():
    assert eu.cartesian_product([[1, 2], [3, 4]]) == [[1, 3], [1, 4], [2, 3], [2, 4]]
    assert eu.cartesian_product([]) == []
    assert eu.cartesian_product([[1, 2], []]) == []


def test_perms_with_reps():
    assert eu.perms_with_reps(2, [1, 2]) == [[1, 1], [1, 2], [2, 1], [2, 2]]
    res = [[1, 1], [1, 2], [1, 3], [2, 1], [2, 2], [2, 3], [3, 1], [3, 2], [3, 3]]
    assert eu.perms_with_reps(2, [1, 2, 3]) == res
    assert eu.perms_with_reps(0, [1, 2]) == [[]]


def test_perms_without_reps():
    assert eu.perms_without_reps(2, [1, 2]) == [[1, 2], [2, 1]]
    assert eu.perms_without_reps(2, [3, 1, 2]) == [[1, 2], [1, 3], [2, 1], [2, 3], [3, 1], [3, 2]]
    assert eu.perms_without_reps(0, [1, 2]) == [[]]
    assert eu.perms_without_reps(3, [1, 2]) == []
    with pytest.raises(DomainError):
        eu.perms_without_reps(-1, [1])


def test_k_nested():
    res = [[1, 1, 1], [1, 1, 2], [1, 2, 1], [1, 2, 2], [2, 1, 1], [2, 1, 2], [2, 2, 1], [2, 2, 2]]
    assert eu.k_nested(3, [1, 2]) == res
    assert len(eu.k_nested(8, ["red", "green", "blue", "orange"])) == 65536
    assert eu.k_nested(0, [1, 2]) == [[]]
    with pytest.raises(DomainError, match="k_nested"):
        eu.k_nested(-1, [1, 2])


def test_accumulate():
    assert eu.accumulate([1, 2, 3, 4]) == [1, 3, 6, 10]
    assert eu.accumulate([1, 1, 1, 1, 1]) == [1, 2, 3, 4, 5]
    assert eu.accumulate([]) == []


def test_sqrt_terms():
    assert eu.sqrt_terms(13) == (3, [1, 1, 1, 1, 6])
    assert eu.sqrt_terms(2) == (1, [2])
    assert eu.sqrt_terms(23) == (4, [1, 3, 1, 8])
    assert eu.sqrt_terms(25) is None
    assert eu.sqrt_terms(0) is None
    with pytest.raises(DomainError):
        eu.sqrt_terms(-2)


def test_continued_fraction():
    a0, period = eu.sqrt_terms(13)
    terms = list(islice(cycle(period), 15))
    assert terms == [1, 1, 1, 1, 6, 1, 1, 1, 1, 6, 1, 1, 1, 1, 6]
    assert eu.continued_fraction(a0, terms) == (154451, 42837)
    assert eu.continued_fraction(5, []) == (5, 1)
    assert eu.continued_fraction(1, [2]) == (3, 2)


def test_continued_fraction_big():
    terms = list(islice(cycle([1, 3, 1, 8]), 64))
    num, den = eu.continued_fraction(4, terms)
    assert str(num) == "3468077590434524694871282564"
    assert str(den) == "723144166673926627543073281"


def test_phis():
    assert eu.phis(100)[90:] == [24, 72, 44, 60, 46, 72, 32, 96, 42, 60, 40]
    assert eu.phis(10) == [0, 1, 1, 2, 2, 4, 2, 6, 4, 6, 4]
    assert eu.phis(0) == [0]
    with pytest.raises(DomainError):
        eu.phis(-1)
