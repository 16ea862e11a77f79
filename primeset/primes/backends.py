# primeset/primes/backends.py
"""Prime-set protocol.

A backend only has to know how to find one more prime (``expand``) and how to
expose the primes found so far (``_view``). Everything else (index access,
lower-bound search, primality, factorization, cursors) is built here on top
of those two primitives, and only ever extends the backend one prime at a
time, so the cached list stays complete up to its maximum.
"""
import threading
from abc import ABC, abstractmethod
from bisect import bisect_left
from math import isqrt
from typing import List, Optional, Tuple

import numpy as np

from .cursor import PrimeSetIter
from .errors import InvalidInputError
from .limits import as_natural, check_ceiling, resolve_max_value


class PrimeBackend(ABC):
    def __init__(self, max_value: Optional[int] = None):
        self.max_value = resolve_max_value(max_value)
        # Serializes every append; re-entrant so find/is_prime can call expand.
        self._lock = threading.RLock()

    @abstractmethod
    def expand(self) -> int:
        """Find the prime after the current maximum, append it and return it."""
        ...

    @abstractmethod
    def _view(self) -> List[int]:
        """The live, append-only list of primes. Callers must not mutate it."""
        ...

    # -- cached state -----------------------------------------------------

    def list(self) -> Tuple[int, ...]:
        """Snapshot of all primes found so far."""
        return tuple(self._view())

    def to_array(self) -> np.ndarray:
        return np.array(self._view()[:], dtype=np.uint64)

    def __len__(self) -> int:
        return len(self._view())

    def is_empty(self) -> bool:
        return not self._view()

    def __getitem__(self, index):
        # Plain list semantics over what is cached; use nth() to extend.
        return self._view()[index]

    def __contains__(self, n) -> bool:
        return self.is_prime(n)

    # -- extension --------------------------------------------------------

    def _ensure_len(self, size: int) -> List[int]:
        primes = self._view()
        if len(primes) >= size:
            return primes
        with self._lock:
            while len(primes) < size:
                self.expand()
        return primes

    def extend_to_index(self, k: int) -> None:
        """Make sure the prime at zero-based index ``k`` is cached."""
        k = as_natural(k, "k")
        self._ensure_len(k + 1)

    def nth(self, k: int) -> int:
        """The (k+1)-th smallest prime, extending the cache if needed."""
        k = as_natural(k, "k")
        return self._ensure_len(k + 1)[k]

    get = nth

    def next_prime_after(self, n: int) -> int:
        """Smallest prime strictly greater than ``n``.

        When ``n`` is the current maximum this appends exactly one prime.
        """
        n = as_natural(n)
        return self.find(n + 1)[1]

    # -- queries ----------------------------------------------------------

    def find(self, lower_bound: int) -> Tuple[int, int]:
        """Return ``(index, prime)`` for the smallest prime >= ``lower_bound``.

        If ``lower_bound`` is itself prime the result is ``(index, lower_bound)``.
        The cache is extended only as far as the answer.
        """
        lower_bound = as_natural(lower_bound, "lower_bound")
        check_ceiling(lower_bound, self.max_value)
        primes = self._view()
        if lower_bound > primes[-1]:
            with self._lock:
                while lower_bound > primes[-1]:
                    self.expand()
        return self.find_vec(lower_bound)

    def find_vec(self, lower_bound: int) -> Optional[Tuple[int, int]]:
        """Like find(), but only looks at primes already cached.

        Returns None when ``lower_bound`` is past the cache maximum.
        """
        lower_bound = as_natural(lower_bound, "lower_bound")
        primes = self._view()
        size = len(primes)
        if lower_bound > primes[size - 1]:
            return None
        idx = bisect_left(primes, lower_bound, 0, size)
        return idx, primes[idx]

    def is_prime(self, n: int) -> bool:
        n = as_natural(n)
        check_ceiling(n, self.max_value)
        if n < 2:
            return False
        root = isqrt(n)
        i = 0
        while True:
            p = self._ensure_len(i + 1)[i]
            if p > root:
                return True
            if n % p == 0:
                return False
            i += 1

    def prime_factors(self, n: int) -> List[Tuple[int, int]]:
        """Factorize ``n`` as increasing ``(prime, exponent)`` pairs.

        >>> pset.prime_factors(360)
        [(2, 3), (3, 2), (5, 1)]
        """
        n = as_natural(n)
        if n == 0:
            raise InvalidInputError("0 has no prime factorization")
        check_ceiling(n, self.max_value)
        factors: List[Tuple[int, int]] = []
        i = 0
        while n > 1:
            p = self._ensure_len(i + 1)[i]
            if p * p > n:
                # no prime <= sqrt(n) divides what is left, so it is prime
                factors.append((n, 1))
                break
            if n % p == 0:
                exponent = 0
                while n % p == 0:
                    n //= p
                    exponent += 1
                factors.append((p, exponent))
            i += 1
        return factors

    # -- cursors ----------------------------------------------------------

    def iter(self) -> PrimeSetIter:
        """Unbounded cursor over all primes, starting with 2."""
        return PrimeSetIter(self, 0)

    def __iter__(self) -> PrimeSetIter:
        return self.iter()

    def generator(self) -> PrimeSetIter:
        """Unbounded cursor over the primes not found yet."""
        return PrimeSetIter(self, len(self))

    def iter_vec(self) -> PrimeSetIter:
        """Finite cursor over the primes found so far; never extends."""
        return PrimeSetIter(self, 0, expand=False)
