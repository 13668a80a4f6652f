"""
selector.py — Random word picking
==================================
Filters a word list by exact length, shuffles it and slices off the
requested number of words.

The ``diff`` parameter is a placeholder: for small requests it narrows the
pool to the first ``number * 10`` shuffled words and reshuffles them. It does
not score words by difficulty.
"""
from __future__ import annotations

import random
import re
from typing import List, Optional, Sequence

from .errors import NoWordsOfLength

MIN_WORDS = 1
MAX_WORDS = 100
MIN_DIFF = 1
MAX_DIFF = 5
# Difficulty bucketing only applies to requests this small
DIFF_MAX_NUMBER = 5
DIFF_POOL_FACTOR = 10

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")
# Longer digit runs saturate instead of being converted
_MAX_DIGITS = 18
_SATURATED = 10 ** _MAX_DIGITS


def parse_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of a query value, e.g. ``"7abc"`` -> 7.

    Missing or non-numeric values give ``default``. Values too long to
    matter saturate to +/- 10**18.
    """
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    value = _SATURATED if len(digits) > _MAX_DIGITS else int(digits)
    return -value if sign == "-" else value


def clamp_count(n: int, lo: int = MIN_WORDS, hi: int = MAX_WORDS) -> int:
    return max(lo, min(hi, n))


def select_words(
    words: Sequence[str],
    number: int,
    length: int = -1,
    diff: int = -1,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Pick up to ``number`` random words from ``words``.

    length < 1 disables the length filter; diff outside [1, 5] disables the
    difficulty bucket. Raises NoWordsOfLength when the length filter leaves
    nothing to pick from.
    """
    rng = rng or random.Random()

    if length >= 1:
        pool = [w for w in words if len(w) == length]
        if not pool:
            raise NoWordsOfLength()
    else:
        pool = list(words)

    rng.shuffle(pool)

    if MIN_DIFF <= diff <= MAX_DIFF and number <= DIFF_MAX_NUMBER:
        pool = pool[: number * DIFF_POOL_FACTOR]
        rng.shuffle(pool)

    return pool[:number]
