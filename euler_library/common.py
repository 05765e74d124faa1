"""Common functions used in solving Project Euler problems.

Example:
    >>> from euler_library import common as eu
    >>> eu.is_palindrome(12321)
    True
    >>> eu.divisor_sum_list(10)
    [0, 0, 1, 1, 3, 1, 6, 1, 7, 4, 8]
    >>> eu.perms_with_reps(2, [1, 2, 3])[:3]
    [[1, 1], [1, 2], [1, 3]]

Functions defined over the naturals raise ``DomainError`` when called with
a value outside that range. Predicates return False instead.
"""

import math
from itertools import accumulate as _accumulate, permutations, product, repeat
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .exceptions import DomainError
from .utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DIGITS = "0123456789"


def _require_natural(func: str, n: int, minimum: int = 0) -> None:
    if n < minimum:
        raise DomainError(func, n, f"an integer >= {minimum}")


def divisors(n: int) -> List[int]:
    """Return the positive divisors of n in ascending order.

    Args:
        n: Integer >= 1

    Returns:
        Ascending list of divisors, including 1 and n

    Raises:
        DomainError: If n < 1
    """
    _require_natural("divisors", n, 1)
    small, large = [], []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if i != n // i:
                large.append(n // i)
    return small + large[::-1]


def divisor_sum(n: int) -> int:
    """Return the sum of the proper divisors of n (not including n).

    0 and 1 have no proper divisors besides themselves and map to 0.
    """
    _require_natural("divisor_sum", n)
    if n < 2:
        return 0
    total = 1
    for x in range(2, math.isqrt(n) + 1):
        if n % x == 0:
            d = n // x
            total += x if d == x else x + d
    return total


def divisor_sum_list(limit: int) -> List[int]:
    """Return ``divisor_sum(i)`` for every i from 0 to limit inclusive.

    Sieve based, much faster than calling ``divisor_sum`` in a loop.
    """
    _require_natural("divisor_sum_list", limit)
    sums = np.zeros(limit + 1, dtype=np.int64)
    for i in range(1, limit // 2 + 1):
        sums[2 * i::i] += i
    logger.debug(f"Built divisor sum sieve up to {limit}", extra={'extra_data': {'limit': limit}})
    return sums.tolist()


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of a and b, always non-negative.

    ``gcd(0, 0)`` is 0.
    """
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple of a and b, always non-negative.

    The lcm with 0 is 0.
    """
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of n.

    Args:
        n: Non-negative integer

    Returns:
        Sum of digits

    Raises:
        DomainError: If n is negative
    """
    _require_natural("digit_sum", n)
    return sum(int(c) for c in str(n))


def sum_of_digits(s: str) -> int:
    """Return the sum of the digits of a digit string.

    Raises:
        DomainError: If s contains anything other than 0-9
    """
    if any(c not in DIGITS for c in s):
        raise DomainError("sum_of_digits", s, "a string of decimal digits")
    return sum(DIGITS.index(c) for c in s)


def to_digits(n: int) -> List[int]:
    """Return n as a list of its decimal digits, most significant first.

    ``to_digits(0)`` is ``[0]``.
    """
    _require_natural("to_digits", n)
    return [int(c) for c in str(n)]


def from_digits(xs: Iterable[int]) -> int:
    """Build a number from a sequence of decimal digits."""
    res = 0
    for d in xs:
        res = res * 10 + d
    return res


def to_bytes(value: Any) -> bytes:
    """Return the decimal/text representation of value as bytes."""
    return str(value).encode("utf-8")


def from_bytes(data: Iterable[int]) -> int:
    """Parse an integer from bytes, e.g. ``from_bytes([51, 50, 49]) == 321``.

    Raises:
        ValueError: If the bytes do not spell an integer
    """
    return int(bytes(data).decode("utf-8"))


def is_palindrome(value: Any) -> bool:
    """Check if value reads the same backward and forward.

    Works on anything with a string form, e.g. ``12321`` or ``"abcba"``.
    """
    s = str(value)
    return s == s[::-1]


def is_pandigital(value: Any, start: int = 1) -> bool:
    """Check if value uses each digit from start to start+len-1 exactly once.

    The usual definition is ``start=1``: an n-digit number using 1..n.

    Args:
        value: Number or digit string
        start: First digit of the range

    Returns:
        True if pandigital over the range
    """
    s = str(value)
    expected = "".join(str(d) for d in range(start, start + len(s)))
    return sorted(s) == sorted(expected)


def is_perm(a: Any, b: Any) -> bool:
    """Check if a and b are permutations of each other, e.g. 123 and 231."""
    return sorted(to_bytes(a)) == sorted(to_bytes(b))


def factorial(n: int) -> int:
    """Calculate factorial of n.

    Python integers are unbounded, so there is no upper limit on n.

    Args:
        n: Non-negative integer

    Returns:
        Factorial of n

    Raises:
        DomainError: If n is negative
    """
    if n < 0:
        raise DomainError("factorial", n, "a non-negative integer")
    return math.factorial(n)


def replicate(n: int, elt: T) -> Iterator[T]:
    """Return an iterator yielding elt n times."""
    _require_natural("replicate", n)
    return repeat(elt, n)


def cartesian_product(lists: Sequence[Sequence[T]]) -> List[List[T]]:
    """Return the cartesian product of a list of lists.

    An empty list of lists gives an empty product.
    """
    if not lists:
        return []
    return [list(p) for p in product(*lists)]


def perms_with_reps(k: int, xs: Sequence[T]) -> List[List[T]]:
    """Return ordered selections of k items from xs, repetition allowed.

    ``perms_with_reps(2, [1, 2]) == [[1, 1], [1, 2], [2, 1], [2, 2]]``
    """
    _require_natural("perms_with_reps", k)
    return [list(p) for p in product(xs, repeat=k)]


def perms_without_reps(k: int, xs: Sequence[T]) -> List[List[T]]:
    """Return the k-permutations of xs without repetition, sorted."""
    _require_natural("perms_without_reps", k)
    return sorted(list(p) for p in permutations(xs, k))


def k_nested(k: int, xs: Sequence[T]) -> List[List[T]]:
    """Return every combination produced by k nested loops over xs, sorted.

    ``k_nested(3, [1, 2])`` is the same as::

        for i in xs:
            for j in xs:
                for k in xs:
                    yield [i, j, k]
    """
    _require_natural("k_nested", k)
    return sorted(perms_with_reps(k, xs))


def accumulate(xs: Iterable[int]) -> List[int]:
    """Return the running total of xs."""
    return list(_accumulate(xs))


def sqrt_terms(n: int) -> Optional[Tuple[int, List[int]]]:
    """Return the periodic continued fraction of sqrt(n).

    Form is ``(a0, [t1, t2, ..., tn])`` where the terms repeat forever,
    see https://projecteuler.net/problem=64.

    Args:
        n: Non-negative integer

    Returns:
        ``(a0, period)``, or None if n is a perfect square

    Raises:
        DomainError: If n is negative
    """
    _require_natural("sqrt_terms", n)
    a0 = math.isqrt(n)
    if a0 * a0 == n:
        return None
    terms = []
    m, d, a = 0, 1, a0
    while a != 2 * a0:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        terms.append(a)
    return a0, terms


def continued_fraction(a0: int, terms: Sequence[int]) -> Tuple[int, int]:
    """Evaluate a finite continued fraction ``(a0, [t1, t2, ...])``.

    Use ``sqrt_terms`` plus ``itertools.cycle`` to build convergents of a
    periodic fraction.

    Returns:
        ``(numerator, denominator)``
    """
    seq = [a0, *terms]
    num, den = seq[-1], 1
    for a in reversed(seq[:-1]):
        num, den = a * num + den, num
    return num, den


def phis(d: int) -> List[int]:
    """Return Euler's totient phi(i) for every i from 0 to d inclusive.

    phi(n) counts the positive integers up to n that are relatively prime
    to n. phi(0) is reported as 0.
    """
    _require_natural("phis", d)
    phi = np.arange(d + 1, dtype=np.int64)
    for p in range(2, d + 1):
        if phi[p] == p:
            phi[p::p] -= phi[p::p] // p
    logger.debug(f"Built totient sieve up to {d}", extra={'extra_data': {'limit': d}})
    return phi.tolist()
