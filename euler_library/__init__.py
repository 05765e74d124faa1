"""Euler Library - numeric helpers for solving Project Euler problems.

Import a module under a short alias::

    from euler_library import common as eu
    eu.divisors(28)
"""

__version__ = "0.1.0"

from . import big, cards, common, primes
from .exceptions import DomainError
from .common import divisors, digit_sum, is_palindrome, factorial, gcd, lcm
from .primes import is_prime

__all__ = [
    "big", "cards", "common", "primes",
    "DomainError",
    "divisors", "digit_sum", "is_palindrome", "factorial", "gcd", "lcm",
    "is_prime",
]
