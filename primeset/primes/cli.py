# primeset/primes/cli.py
# Usage: python -m primeset.primes.cli --count 20 [--nth K] [--find B] [--is-prime N] [--factor N] [--verify]

import argparse
import logging
import sys
import time

from primeset.primes.errors import PrimeSetError
from primeset.primes.trial_division import TrialDivision


def format_factors(pairs) -> str:
    if not pairs:
        return "1"
    return " * ".join(f"{p}^{e}" if e > 1 else f"{p}" for p, e in pairs)


def verify(pset: TrialDivision, args) -> bool:
    """Cross-check the answers against sympy."""
    from sympy import factorint, isprime, nextprime, prime

    ok = True
    if args.count:
        got = pset.iter().take(args.count)
        expected = [int(prime(i)) for i in range(1, args.count + 1)]
        ok &= got == expected
    if args.nth is not None:
        ok &= pset.nth(args.nth) == int(prime(args.nth + 1))
    if args.find is not None:
        ok &= pset.find(args.find)[1] == int(nextprime(args.find - 1))
    if args.is_prime is not None:
        ok &= pset.is_prime(args.is_prime) == bool(isprime(args.is_prime))
    if args.factor is not None:
        expected = sorted((int(p), int(e)) for p, e in factorint(args.factor).items())
        ok &= pset.prime_factors(args.factor) == expected
    return ok


def main(argv=None):
    parser = argparse.ArgumentParser(description="Incremental trial-division prime cache")
    parser.add_argument("--count", type=int, default=10, help="Print the first K primes (0 to disable)")
    parser.add_argument("--nth", type=int, default=None, help="Print the prime at zero-based index K")
    parser.add_argument("--find", type=int, default=None, help="Print (index, prime) of the smallest prime >= B")
    parser.add_argument("--is-prime", type=int, default=None, help="Test N for primality")
    parser.add_argument("--factor", type=int, default=None, help="Print the prime factorization of N")
    parser.add_argument(
        "--max-value",
        type=int,
        default=None,
        help="Integer ceiling for the cache (default: PRIMESET_MAX_VALUE or uint64 max)",
    )
    parser.add_argument("--verify", action="store_true", help="Cross-check results against sympy")
    parser.add_argument("--verbose", action="store_true", help="Log cache growth to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    t0 = time.time()
    try:
        pset = TrialDivision(max_value=args.max_value)
        if args.count > 0:
            print("First primes:", pset.iter().take(args.count))
        if args.nth is not None:
            print(f"nth({args.nth}): {pset.nth(args.nth)}")
        if args.find is not None:
            idx, p = pset.find(args.find)
            print(f"find({args.find}): index {idx}, prime {p}")
        if args.is_prime is not None:
            print(f"is_prime({args.is_prime}): {pset.is_prime(args.is_prime)}")
        if args.factor is not None:
            print(f"{args.factor} = {format_factors(pset.prime_factors(args.factor))}")
        ok = verify(pset, args) if args.verify else True
    except PrimeSetError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    dt = time.time() - t0

    print(f"Cached primes: {len(pset)}")
    print(f"Time: {dt:.3f}s")
    if args.verify:
        print(f"Verified against sympy: {ok}")
        if not ok:
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
