"""Heading provider: localized proverb pools and non-repeating rerolls."""

from __future__ import annotations

import random
from dataclasses import dataclass

from ..locales import HEADINGS
from .config_model import Locale
from .errors import HeadingPoolError


@dataclass(frozen=True)
class HeadingPool:
    """Ordered, immutable list of headings for one locale."""

    locale: Locale | None
    phrases: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.phrases)


def pool_for(locale: Locale) -> HeadingPool:
    return HeadingPool(locale=locale, phrases=HEADINGS[locale])


def reroll(pool: HeadingPool, current: int | None, rng: random.Random | None = None) -> int:
    """Pick a heading index uniformly at random, never returning ``current``.

    ``current`` is None before the first heading is shown, in which case
    every index is eligible. One draw over the ``len(pool) - 1`` other
    indices is shifted past ``current``, so the result is uniform without
    retrying.

    Raises:
        HeadingPoolError: the pool has fewer than two headings, or
            ``current`` is not a valid index into it.
    """
    rng = rng or random
    size = len(pool)
    if size < 2:
        raise HeadingPoolError(f"cannot reroll a pool of {size} heading(s)")
    if current is None:
        return rng.randrange(size)
    if not 0 <= current < size:
        raise HeadingPoolError(f"heading index {current} out of range for pool of {size}")

    choice = rng.randrange(size - 1)
    if choice >= current:
        choice += 1
    return choice


def lookup(pool: HeadingPool, index: int) -> str:
    return pool.phrases[index]
