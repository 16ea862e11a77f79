# primeset/primes/trial_division.py
import logging
from typing import List, Optional

from .backends import PrimeBackend
from .errors import PrimeOverflowError, PrimeSetError
from .limits import check_ceiling

logger = logging.getLogger(__name__)


class TrialDivision(PrimeBackend):
    """Prime cache grown by trial division against its own primes.

    Create with ``pset = TrialDivision()`` and walk ``pset.iter()`` for all
    primes. Seeded with 2 and 3 so the maximum is always odd and candidates
    step by 2.
    """

    def __init__(self, max_value: Optional[int] = None):
        super().__init__(max_value)
        self._primes: List[int] = [2, 3]

    def _view(self) -> List[int]:
        return self._primes

    def expand(self) -> int:
        with self._lock:
            try:
                prime = self._next_prime(self._primes[-1])
            except PrimeOverflowError as e:
                logger.warning("prime cache stopped at %d: %s", self._primes[-1], e)
                raise
            self._primes.append(prime)
            size = len(self._primes)
        if size & (size - 1) == 0:
            logger.debug("prime cache holds %d primes, largest %d", size, prime)
        return prime

    def _next_prime(self, current: int) -> int:
        candidate = current + 2
        while True:
            check_ceiling(candidate, self.max_value)
            if self._is_coprime_to_cache(candidate):
                return candidate
            candidate += 2

    def _is_coprime_to_cache(self, candidate: int) -> bool:
        for p in self._primes:
            if p * p > candidate:
                return True
            if candidate % p == 0:
                return False
        # Only sound while the largest cached prime exceeds sqrt(candidate).
        raise PrimeSetError(
            f"cache exhausted at {self._primes[-1]} before reaching sqrt({candidate})"
        )

    def __repr__(self):
        return f"{type(self).__name__}(len={len(self._primes)}, max={self._primes[-1]})"
