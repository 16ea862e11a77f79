# primeset/primes/factorize.py
# Stateless helpers: trial division over 2 and the odd numbers, no cache.
from typing import List

from .errors import InvalidInputError
from .limits import U64_MAX, as_natural, check_ceiling


def firstfac(x: int) -> int:
    """Smallest factor of x other than 1 (x itself when x is prime)."""
    x = check_ceiling(as_natural(x, "x"), U64_MAX)
    if x < 2:
        raise InvalidInputError(f"{x} has no factor other than 1")
    if x % 2 == 0:
        return 2
    d = 3
    while d * d <= x:
        if x % d == 0:
            return d
        d += 2
    return x


def factors(x: int) -> List[int]:
    """All prime factors of x, with multiplicity, in increasing order."""
    x = check_ceiling(as_natural(x, "x"), U64_MAX)
    if x <= 1:
        return []
    out: List[int] = []
    while True:
        d = firstfac(x)
        out.append(d)
        if d == x:
            return out
        x //= d


def factors_unique(x: int) -> List[int]:
    """Distinct prime factors of x in increasing order."""
    x = check_ceiling(as_natural(x, "x"), U64_MAX)
    if x <= 1:
        return []
    out: List[int] = []
    while True:
        d = firstfac(x)
        out.append(d)
        if d == x:
            return out
        while x % d == 0:
            x //= d
        if x == 1:
            return out


def is_prime(n: int) -> bool:
    n = check_ceiling(as_natural(n), U64_MAX)
    return n > 1 and firstfac(n) == n
