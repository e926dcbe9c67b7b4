from __future__ import annotations

import logging
from typing import Callable, List, Optional

from hakasha.core.generator import generate_target_word
from hakasha.core.keys import is_letter_attempt
from hakasha.core.levels import DEFAULT_BLOCK_SIZE, NOT_AVAILABLE, LevelTable, level_name
from hakasha.core.markup import render_progress

logger = logging.getLogger(__name__)

Scheduler = Callable[[Callable[[], None]], None]


class ProgressionEngine:
    """Judges keystrokes against the current target and moves through levels.

    A round is the target word plus what has been typed and where mistakes
    were made. Finishing a round does not reset it immediately: the reset is
    handed to ``schedule`` (or left for the host to trigger with
    :meth:`maybe_reset`) so the finished round can be drawn first.
    Keys arriving in between are ignored.

    Only a round finished without any mistake moves the learner up a level.
    """

    def __init__(
        self,
        table: LevelTable,
        block_size: int = DEFAULT_BLOCK_SIZE,
        rng=None,
        schedule: Optional[Scheduler] = None,
    ) -> None:
        """Start at level 0 with a fresh target."""
        if block_size < 1:
            raise ValueError(f"block_size must be a positive integer, got {block_size}")
        self._table = table
        self._block_size = block_size
        self._rng = rng
        self._schedule = schedule
        self._level = 0
        self._target_word = ""
        self._input_value = ""
        self._error_indices: List[int] = []
        self._reset_pending = False
        self._new_round()

    @property
    def table(self) -> LevelTable:
        return self._table

    @property
    def block_size(self) -> int:
        """Letters per target word."""
        return self._block_size

    @property
    def level(self) -> int:
        """Current level index (0-based)."""
        return self._level

    @property
    def target_word(self) -> str:
        return self._target_word

    @property
    def input_value(self) -> str:
        """Part of the target typed so far, auto-inserted spaces included."""
        return self._input_value

    @property
    def error_indices(self) -> List[int]:
        """Positions mistyped this round, in the order they were first missed."""
        return list(self._error_indices)

    @property
    def reset_pending(self) -> bool:
        return self._reset_pending

    def is_round_complete(self) -> bool:
        return len(self._input_value) >= len(self._target_word)

    # -- level descriptors -------------------------------------------------

    @property
    def previous_level_name(self) -> str:
        if self._level > 0:
            return level_name(self._level - 1)
        return NOT_AVAILABLE

    @property
    def previous_level_character_set(self) -> str:
        if self._level > 0:
            return self._table.chunk(self._level - 1)
        return NOT_AVAILABLE

    @property
    def current_level_name(self) -> str:
        return level_name(self._level)

    @property
    def current_level_character_set(self) -> str:
        return self._table.chunk(self._level)

    @property
    def next_level_name(self) -> str:
        if self._level < self._table.last_index:
            return level_name(self._level + 1)
        return NOT_AVAILABLE

    @property
    def next_level_character_set(self) -> str:
        if self._level < self._table.last_index:
            return self._table.chunk(self._level + 1)
        return NOT_AVAILABLE

    # -- judging -----------------------------------------------------------

    def handle_key_press(self, key: str) -> bool:
        """Judge one key. Returns True if the round changed, False if ignored."""
        position = len(self._input_value)
        if position >= len(self._target_word):
            logger.debug("Ignoring %r: round already complete", key)
            return False
        if not is_letter_attempt(key):
            return False

        target_char = self._target_word[position]
        if key.upper() != target_char.upper():
            if position in self._error_indices:
                return False
            self._error_indices.append(position)
            logger.debug("Wrong key %r at %d (expected %r)", key, position, target_char)
            return True

        typed = self._input_value + target_char
        if len(typed) < len(self._target_word) and self._target_word[len(typed)] == " ":
            typed += " "
        self._input_value = typed

        if len(self._input_value) == len(self._target_word):
            self._request_reset()
        return True

    def _request_reset(self) -> None:
        self._reset_pending = True
        if self._schedule is not None:
            self._schedule(self.maybe_reset)

    def maybe_reset(self) -> bool:
        """Run the reset left pending by a finished round, if any."""
        if not self._reset_pending:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        """Start a new round, one level up if the last one had no mistakes."""
        if not self._error_indices and self._level < self._table.last_index:
            self._level += 1
            logger.info("Advanced to %s", self.current_level_name)
        elif self._error_indices:
            logger.debug("Round finished with %d errors; staying on %s",
                         len(self._error_indices), self.current_level_name)
        self._new_round()

    def _new_round(self) -> None:
        self._reset_pending = False
        self._input_value = ""
        self._error_indices = []
        self._target_word = generate_target_word(
            self._block_size, self._level, self._table, self._rng
        )
        logger.debug("New target for %s: %r", self.current_level_name, self._target_word)

    def markup(self) -> str:
        """Rich-text rendering of the current round."""
        return render_progress(self._target_word, self._input_value, self._error_indices)
