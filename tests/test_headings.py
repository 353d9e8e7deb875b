import random
from collections import Counter

import pytest

from voltage.core.config_model import Locale
from voltage.core.errors import HeadingPoolError
from voltage.core.headings import HeadingPool, lookup, pool_for, reroll
from voltage.locales import HEADINGS


def _pool(*phrases):
    return HeadingPool(locale=None, phrases=tuple(phrases))


def test_reroll_never_returns_current_index():
    rng = random.Random(1234)
    pool = _pool("a", "b", "c", "d", "e")
    for current in range(len(pool)):
        for _ in range(200):
            assert reroll(pool, current, rng) != current


def test_reroll_three_phrases_from_zero():
    rng = random.Random(7)
    pool = _pool("a", "b", "c")
    seen = {reroll(pool, 0, rng) for _ in range(500)}
    assert seen == {1, 2}


def test_reroll_is_roughly_uniform_over_other_indices():
    rng = random.Random(42)
    pool = _pool("a", "b", "c", "d")
    counts = Counter(reroll(pool, 2, rng) for _ in range(6000))

    assert set(counts) == {0, 1, 3}
    for index in (0, 1, 3):
        assert 1700 < counts[index] < 2300


def test_reroll_chain_never_repeats_immediately():
    rng = random.Random(99)
    pool = pool_for(Locale.EN)
    current = reroll(pool, None, rng)
    for _ in range(300):
        following = reroll(pool, current, rng)
        assert following != current
        current = following


def test_reroll_without_current_reaches_every_index():
    rng = random.Random(3)
    pool = _pool("a", "b", "c")
    assert {reroll(pool, None, rng) for _ in range(300)} == {0, 1, 2}


def test_reroll_two_phrases_alternates():
    pool = _pool("a", "b")
    assert reroll(pool, 0) == 1
    assert reroll(pool, 1) == 0


@pytest.mark.parametrize("phrases", [(), ("only",)])
def test_reroll_rejects_pools_too_small(phrases):
    with pytest.raises(HeadingPoolError):
        reroll(_pool(*phrases), 0)
    with pytest.raises(HeadingPoolError):
        reroll(_pool(*phrases), None)


def test_reroll_rejects_out_of_range_current():
    with pytest.raises(HeadingPoolError):
        reroll(_pool("a", "b", "c"), 3)


def test_pool_for_each_locale():
    assert pool_for(Locale.EN).phrases == HEADINGS[Locale.EN]
    assert pool_for(Locale.PL).phrases == HEADINGS[Locale.PL]
    assert lookup(pool_for(Locale.PL), 1) == "Lepiej późno niż wcale."
    for locale in Locale:
        assert len(pool_for(locale)) >= 2
