"""Helpers for problems that need arbitrary precision arithmetic.

Python integers are unbounded, so big factorials and big continued fraction
convergents come straight from ``euler_library.common``. This module holds
the routines that only make sense with many-digit results.

Example:
    >>> from euler_library import big as eu_big
    >>> str(eu_big.precision_sqrt(2, 10))
    '1414213562'
"""

from typing import List

from .exceptions import DomainError


def precision_sqrt(n: int, digits: int) -> int:
    """Return the first ``digits`` digits of the square root of n.

    The decimal point is dropped: sqrt(2) = 1.41421... comes back as
    141421... Uses the digit-by-digit subtraction method, so no floating
    point is involved.

    Args:
        n: Integer >= 1
        digits: Number of digits to produce, >= 1

    Returns:
        Integer holding the digits

    Raises:
        DomainError: If n < 1 or digits < 1
    """
    if n < 1:
        raise DomainError("precision_sqrt", n, "an integer >= 1")
    if digits < 1:
        raise DomainError("precision_sqrt", digits, "at least one digit")

    limit = 10 ** (digits + 1)
    a, b = 5 * n, 5
    while b < limit:
        if a >= b:
            a -= b
            b += 10
        else:
            a *= 100
            b = (b // 10) * 100 + 5
    return b // 100


def integer_partitions(n: int) -> List[int]:
    """Return ``[p(0), p(1), ..., p(n)]`` for the partition function p.

    Built with Euler's pentagonal number recurrence, see
    http://oeis.org/A000041.
    """
    if n < 0:
        raise DomainError("integer_partitions", n, "a non-negative integer")

    # generalized pentagonal numbers 1, 2, 5, 7, 12, 15, ...
    pentagonals = []
    i = 1
    while i * (3 * i - 1) // 2 <= n:
        g = i * (3 * i - 1) // 2
        pentagonals.extend([g, g + i])
        i += 1

    signs = (1, 1, -1, -1)
    p = [1]
    for m in range(1, n + 1):
        total = 0
        for j, k in enumerate(pentagonals):
            if k > m:
                break
            total += signs[j % 4] * p[m - k]
        p.append(total)
    return p
