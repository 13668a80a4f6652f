"""
Tests for word picking: length filter, count clamping, the difficulty
bucket and lenient query parsing.

Run with: pytest tests/test_selector.py -v
"""
from __future__ import annotations

import random

import pytest

from word_service.errors import NoWordsOfLength
from word_service.schemas import WordQuery
from word_service.selector import clamp_count, parse_int, select_words
from word_service.store import FALLBACK_WORDS

WORDS = [f"w{i:03d}" for i in range(200)] + ["a", "bb", "ccc"]


def _rng(seed: int = 7) -> random.Random:
    return random.Random(seed)


# ---------------------------------------------------------------------------
# select_words
# ---------------------------------------------------------------------------

class TestSelectWords:
    def test_returns_requested_count(self):
        out = select_words(WORDS, 10, rng=_rng())
        assert len(out) == 10
        assert set(out) <= set(WORDS)
        assert len(set(out)) == 10

    def test_count_larger_than_pool_returns_whole_pool(self):
        out = select_words(FALLBACK_WORDS, 50, rng=_rng())
        assert sorted(out) == sorted(FALLBACK_WORDS)

    def test_length_filter(self):
        out = select_words(WORDS, 100, length=4, rng=_rng())
        assert len(out) == 100
        assert all(len(w) == 4 for w in out)

    def test_length_filter_on_fallback(self):
        out = select_words(FALLBACK_WORDS, 3, length=5, rng=_rng())
        assert sorted(out) == ["hello", "world"]

    def test_length_counts_characters(self):
        out = select_words(["日本語", "über", "abcd"], 5, length=4, rng=_rng())
        assert sorted(out) == ["abcd", "über"]

    def test_no_words_of_length_raises(self):
        with pytest.raises(NoWordsOfLength):
            select_words(FALLBACK_WORDS, 1, length=42, rng=_rng())

    @pytest.mark.parametrize("length", [0, -1, -5])
    def test_non_positive_length_disables_filter(self, length):
        out = select_words(FALLBACK_WORDS, 5, length=length, rng=_rng())
        assert sorted(out) == sorted(FALLBACK_WORDS)

    def test_does_not_mutate_input(self):
        words = list(WORDS)
        select_words(words, 5, rng=_rng())
        assert words == WORDS

    def test_seeded_rng_is_reproducible(self):
        assert select_words(WORDS, 5, rng=_rng(3)) == select_words(WORDS, 5, rng=_rng(3))

    def test_shuffle_reaches_every_word(self):
        rng = _rng()
        seen = set()
        for _ in range(200):
            seen.update(select_words(FALLBACK_WORDS, 1, rng=rng))
        assert seen == set(FALLBACK_WORDS)


class TestDifficultyBucket:
    def test_small_request_draws_from_first_bucket(self):
        # Same seed: the bucket is the first number*10 words of the same shuffle
        shuffled = list(WORDS)
        _rng(11).shuffle(shuffled)
        bucket = set(shuffled[:30])
        out = select_words(WORDS, 3, diff=2, rng=_rng(11))
        assert len(out) == 3
        assert set(out) <= bucket

    def test_large_request_ignores_difficulty(self):
        assert select_words(WORDS, 6, diff=3, rng=_rng(5)) == select_words(WORDS, 6, rng=_rng(5))

    @pytest.mark.parametrize("diff", [0, 6, -1])
    def test_out_of_range_difficulty_is_ignored(self, diff):
        assert select_words(WORDS, 2, diff=diff, rng=_rng(5)) == select_words(WORDS, 2, rng=_rng(5))

    def test_bucket_smaller_than_pool_size(self):
        out = select_words(FALLBACK_WORDS, 5, diff=1, rng=_rng())
        assert sorted(out) == sorted(FALLBACK_WORDS)


# ---------------------------------------------------------------------------
# Parsing & clamping
# ---------------------------------------------------------------------------

class TestParsing:
    @pytest.mark.parametrize("raw,expected", [
        ("5", 5),
        ("  12", 12),
        ("7abc", 7),
        ("-3", -3),
        ("+4", 4),
        ("abc", 1),
        ("", 1),
        (None, 1),
        ("2.9", 2),
    ])
    def test_parse_int(self, raw, expected):
        assert parse_int(raw, 1) == expected

    def test_parse_int_saturates_huge_values(self):
        assert parse_int("9" * 5000, 1) == 10 ** 18
        assert parse_int("-" + "9" * 5000, 1) == -(10 ** 18)
        assert parse_int("0" * 5000 + "42", 1) == 42

    def test_word_query_clamps_huge_number(self):
        assert WordQuery.from_raw("9" * 5000, "8" * 5000, None, "7" * 5000).number == 100

    @pytest.mark.parametrize("n,expected", [(0, 1), (-10, 1), (1, 1), (50, 50), (100, 100), (101, 100), (10_000, 100)])
    def test_clamp_count(self, n, expected):
        assert clamp_count(n) == expected

    def test_word_query_defaults(self):
        q = WordQuery.from_raw(None, None, None, None)
        assert (q.number, q.length, q.lang, q.diff) == (1, -1, "en", -1)

    def test_word_query_clamps_number(self):
        assert WordQuery.from_raw("500", None, None, None).number == 100
        assert WordQuery.from_raw("0", None, None, None).number == 1
        assert WordQuery.from_raw("junk", None, None, None).number == 1

    def test_word_query_respects_lower_max_words(self):
        assert WordQuery.from_raw("80", None, "de", None, max_words=20).number == 20
