"""Random practice targets built from a level's character set."""

from __future__ import annotations

import logging
import random

from hakasha.core.levels import LevelTable

logger = logging.getLogger(__name__)

NO_CHARACTERS_MESSAGE = "Error: No characters available for this level."


def generate_target_word(num_letters: int, level: int, table: LevelTable, rng=None) -> str:
    """Return ``num_letters`` random letters from ``level``'s set, space separated.

    Letters are drawn uniformly with replacement. An out-of-range level gives
    ``NO_CHARACTERS_MESSAGE`` instead of raising.
    """
    characters = table.cumulative_set(level)
    if not characters:
        logger.warning("No characters available for level %d", level)
        return NO_CHARACTERS_MESSAGE

    rng = rng or random
    return " ".join(rng.choice(characters) for _ in range(num_letters))
