"""Prime number utilities."""

import math
from typing import List

import numpy as np

from .exceptions import DomainError
from .utils.logging import get_logger

logger = get_logger(__name__)


def is_prime(n: int) -> bool:
    """Check if a number is prime.

    Args:
        n: Number to check

    Returns:
        True if prime, False otherwise (including every n < 2)
    """
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def prime_factors(n: int) -> List[int]:
    """Return the prime factors of n with multiplicity, ascending.

    ``prime_factors(1)`` is empty.

    Raises:
        DomainError: If n < 1
    """
    if n < 1:
        raise DomainError("prime_factors", n, "an integer >= 1")
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def prime_factors_unique(n: int) -> List[int]:
    """Return the distinct prime factors of n, ascending."""
    return sorted(set(prime_factors(n)))


def sopf(n: int) -> int:
    """Sum of the distinct prime factors of n."""
    return sum(prime_factors_unique(n))


def prime_factor_cnt(n: int) -> List[int]:
    """Count distinct prime factors of every i in 0..n-1.

    Args:
        n: Length of the returned list

    Returns:
        List where index i holds the number of distinct primes dividing i
    """
    if n < 0:
        raise DomainError("prime_factor_cnt", n, "a non-negative integer")
    counts = np.zeros(n, dtype=np.int64)
    for i in range(2, n):
        if counts[i] == 0:
            counts[i::i] += 1
    logger.debug(f"Built prime factor count sieve of size {n}", extra={'extra_data': {'limit': n}})
    return counts.tolist()


def prime_sieve(limit: int) -> np.ndarray:
    """Return boolean flags where ``flags[i]`` is True iff i is prime.

    Uses the Sieve of Eratosthenes.

    Args:
        limit: Upper bound (inclusive)

    Returns:
        Boolean array of length limit + 1
    """
    if limit < 0:
        raise DomainError("prime_sieve", limit, "a non-negative integer")
    flags = np.ones(limit + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p::p] = False
    logger.debug(f"Built prime sieve up to {limit}", extra={'extra_data': {'limit': limit}})
    return flags


def primes_upto(limit: int) -> List[int]:
    """Return all primes <= limit in ascending order."""
    return np.nonzero(prime_sieve(limit))[0].tolist()
