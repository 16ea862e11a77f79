# primeset/primes/cursor.py
from itertools import islice
from typing import List

from .limits import as_natural


class PrimeSetIter:
    """Independent read position over a shared prime set.

    Advancing past the cached primes extends the shared set (unless
    ``expand`` is False, in which case the cursor stops there). Any number of
    cursors can walk the same set; growth caused by one is visible to all.
    """

    def __init__(self, pset, position: int = 0, expand: bool = True):
        self._pset = pset
        self.position = position
        self.expand = expand

    def __iter__(self):
        return self

    def __next__(self) -> int:
        if self.position >= len(self._pset):
            if not self.expand:
                raise StopIteration
            self._pset.extend_to_index(self.position)
        prime = self._pset[self.position]
        self.position += 1
        return prime

    def take(self, n: int) -> List[int]:
        """Advance n steps and return the primes passed."""
        n = as_natural(n, "n")
        return list(islice(self, n))

    def skip(self, n: int) -> "PrimeSetIter":
        n = as_natural(n, "n")
        for _ in islice(self, n):
            pass
        return self

    def __repr__(self):
        return f"{type(self).__name__}(position={self.position}, expand={self.expand})"
