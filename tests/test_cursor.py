"""Tests for prime-set cursors."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from itertools import islice

import pytest
from sympy import primerange

from primeset.primes.errors import InvalidInputError
from primeset.primes.trial_division import TrialDivision

FIRST_TEN = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_first_ten_primes() -> None:
    assert list(islice(TrialDivision().iter(), 10)) == FIRST_TEN


def test_iter_protocol_uses_a_fresh_cursor() -> None:
    pset = TrialDivision()
    assert list(islice(pset, 5)) == FIRST_TEN[:5]
    assert list(islice(pset, 5)) == FIRST_TEN[:5]


def test_cursor_is_restartable_over_a_grown_cache() -> None:
    pset = TrialDivision()
    first = pset.iter().take(200)
    assert len(pset) == 200
    again = pset.iter().take(200)
    assert first == again
    assert len(pset) == 200


def test_cursors_advance_independently() -> None:
    pset = TrialDivision()
    a = pset.iter()
    b = pset.iter()
    assert a.take(8) == FIRST_TEN[:8]
    assert next(b) == 2
    assert b.position == 1
    assert a.position == 8
    assert next(a) == 23


def test_growth_from_one_cursor_is_visible_to_others() -> None:
    pset = TrialDivision()
    pset.iter().take(50)
    cached = pset.iter_vec()
    assert len(list(cached)) == 50


def test_skip_and_enumerate() -> None:
    pset = TrialDivision()
    assert pset.iter().skip(5).take(3) == [13, 17, 19]
    indexed = list(islice(enumerate(pset.iter()), 4))
    assert indexed == [(0, 2), (1, 3), (2, 5), (3, 7)]


def test_iter_vec_never_extends() -> None:
    pset = TrialDivision()
    assert list(pset.iter_vec()) == [2, 3]
    assert len(pset) == 2


def test_generator_yields_only_new_primes() -> None:
    pset = TrialDivision()
    pset.extend_to_index(4)
    assert pset.generator().take(3) == [13, 17, 19]
    assert pset.list()[-1] == 19


def test_long_walk_matches_reference() -> None:
    reference = list(primerange(2, 20000))
    assert TrialDivision().iter().take(len(reference)) == reference


def test_concurrent_cursors_keep_cache_consistent() -> None:
    pset = TrialDivision()
    n = 3000

    def walk(_: int) -> list:
        return pset.iter().take(n)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(walk, range(16)))

    expected = list(primerange(2, results[0][-1] + 1))
    assert len(expected) == n
    for r in results:
        assert r == expected
    assert pset.list() == tuple(expected)


def test_concurrent_queries_keep_cache_consistent() -> None:
    pset = TrialDivision()

    def query(k: int) -> tuple:
        return pset.nth(k), pset.find(k * 7)[1], pset.is_prime(k * 13 + 1)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(query, range(0, 2000, 7)))

    primes = pset.list()
    assert list(primes) == list(primerange(2, primes[-1] + 1))


@pytest.mark.parametrize("bad", [-1, -10])
def test_negative_take_and_skip_rejected(bad: int) -> None:
    cursor = TrialDivision().iter()
    with pytest.raises(InvalidInputError):
        cursor.take(bad)
    with pytest.raises(InvalidInputError):
        cursor.skip(bad)
    assert cursor.position == 0
