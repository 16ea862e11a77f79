# primeset/primes/limits.py
# Integer ceiling shared by the cache and the stateless helpers.
import operator
import os
from typing import Optional

import numpy as np

from .errors import InvalidInputError, PrimeOverflowError

U64_MAX = int(np.iinfo(np.uint64).max)

ENV_MAX_VALUE = "PRIMESET_MAX_VALUE"


def resolve_max_value(max_value: Optional[int] = None) -> int:
    """Pick the ceiling: explicit argument, then PRIMESET_MAX_VALUE, then uint64 max."""
    if max_value is None:
        raw = os.environ.get(ENV_MAX_VALUE)
        if raw is None or not raw.strip():
            return U64_MAX
        try:
            max_value = int(raw.strip(), 0)
        except ValueError:
            raise InvalidInputError(f"{ENV_MAX_VALUE}={raw!r} is not an integer") from None
    max_value = as_natural(max_value, "max_value")
    if max_value < 3:
        raise InvalidInputError(f"max_value must be at least 3, got {max_value}")
    return min(max_value, U64_MAX)


def as_natural(n, name: str = "n") -> int:
    """Coerce n to a plain int and reject negatives."""
    if isinstance(n, bool):
        raise InvalidInputError(f"{name} must be an integer, got bool")
    try:
        value = operator.index(n)
    except TypeError:
        raise InvalidInputError(f"{name} must be an integer, got {type(n).__name__}") from None
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value}")
    return value


def check_ceiling(n: int, limit: int) -> int:
    if n > limit:
        raise PrimeOverflowError(n, limit)
    return n
