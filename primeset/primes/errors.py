# primeset/primes/errors.py


class PrimeSetError(Exception):
    """Base class for every error raised by primeset."""


class PrimeOverflowError(PrimeSetError, OverflowError):
    """A value would exceed the configured integer ceiling."""

    def __init__(self, value: int, limit: int):
        super().__init__(f"{value} exceeds the integer ceiling {limit}")
        self.value = value
        self.limit = limit


class InvalidInputError(PrimeSetError, ValueError):
    """Input outside the natural-number domain of an operation."""
