"""Tests for hakasha.core.generator – random target words."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from hakasha.core.generator import NO_CHARACTERS_MESSAGE, generate_target_word
from hakasha.core.levels import LevelTable


@pytest.fixture()
def table() -> LevelTable:
    return LevelTable(["ab", "cd", "e"])


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


# ===========================================================================
# Shape
# ===========================================================================

class TestShape:
    @pytest.mark.parametrize("n", [1, 2, 7, 20])
    def test_length_and_spaces(self, table, rng, n: int):
        word = generate_target_word(n, 1, table, rng)
        assert len(word) == 2 * n - 1
        assert word.count(" ") == n - 1

    def test_letters_at_even_positions(self, table, rng):
        word = generate_target_word(10, 2, table, rng)
        assert all(c != " " for c in word[::2])
        assert all(c == " " for c in word[1::2])

    def test_zero_letters(self, table, rng):
        assert generate_target_word(0, 0, table, rng) == ""

    def test_single_letter_has_no_space(self, table, rng):
        word = generate_target_word(1, 0, table, rng)
        assert len(word) == 1
        assert word in "ab"

    def test_no_leading_or_trailing_space(self, table, rng):
        word = generate_target_word(5, 0, table, rng)
        assert word == word.strip()

    def test_default_rng(self, table):
        word = generate_target_word(4, 0, table)
        assert set(word.replace(" ", "")) <= set("ab")


# ===========================================================================
# Character set
# ===========================================================================

class TestCharacterSet:
    @pytest.mark.parametrize("level", [0, 1, 2])
    def test_letters_come_from_cumulative_set(self, table, rng, level: int):
        allowed = table.cumulative_set(level)
        word = generate_target_word(50, level, table, rng)
        assert set(word.replace(" ", "")) <= set(allowed)

    def test_roughly_uniform(self, table, rng):
        word = generate_target_word(5000, 2, table, rng)
        counts = Counter(word.replace(" ", ""))
        assert set(counts) == set("abcde")
        # expected 1000 each
        assert all(800 < count < 1200 for count in counts.values())

    def test_seeded_rng_is_reproducible(self, table):
        a = generate_target_word(10, 2, table, random.Random(7))
        b = generate_target_word(10, 2, table, random.Random(7))
        assert a == b


# ===========================================================================
# Out-of-range levels
# ===========================================================================

class TestNoCharacters:
    @pytest.mark.parametrize("level", [-1, 3, 99])
    def test_sentinel(self, table, rng, level: int):
        assert generate_target_word(20, level, table, rng) == NO_CHARACTERS_MESSAGE

    @pytest.mark.parametrize("n", [0, 1, 20])
    def test_sentinel_regardless_of_length(self, table, rng, n: int):
        assert generate_target_word(n, -1, table, rng) == NO_CHARACTERS_MESSAGE
