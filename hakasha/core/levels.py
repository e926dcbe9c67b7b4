from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import yaml

from hakasha.core.keys import is_letter_attempt

logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 20
LEVEL_PREFIX = "Level "
NOT_AVAILABLE = "N/A"


def level_name(level: int) -> str:
    """Display label for a zero-based level index, e.g. 4 -> 'Level 5'."""
    return f"{LEVEL_PREFIX}{level + 1}"


class LevelTable:
    """Ordered character chunks, one per level.

    Level ``n`` practises every chunk from ``0`` to ``n``. The table is fixed
    once built.
    """

    def __init__(self, chunks: Sequence[str]) -> None:
        chunks = tuple(chunks)
        if not chunks:
            raise ValueError("level table needs at least one chunk")
        for index, chunk in enumerate(chunks):
            if not isinstance(chunk, str):
                raise ValueError(f"chunk {index}: expected a string, got {type(chunk).__name__}")
            # only the final chunk may be empty
            if not chunk and index < len(chunks) - 1:
                raise ValueError(f"chunk {index}: empty")
            for char in chunk:
                if not is_letter_attempt(char):
                    raise ValueError(f"chunk {index}: {char!r} is not a typeable letter")
        self._chunks: Tuple[str, ...] = chunks

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"LevelTable({list(self._chunks)!r})"

    @property
    def chunks(self) -> Tuple[str, ...]:
        return self._chunks

    @property
    def last_index(self) -> int:
        return len(self._chunks) - 1

    def is_valid(self, level: int) -> bool:
        return 0 <= level <= self.last_index

    def chunk(self, level: int) -> str:
        """Characters newly introduced at ``level``."""
        return self._chunks[level]

    def cumulative_set(self, level: int) -> str:
        """All characters allowed at ``level``; empty when ``level`` is out of range."""
        if not self.is_valid(level):
            return ""
        return "".join(self._chunks[: level + 1])

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "LevelConfig":
        """Read the level table and block size from a YAML file.

        Defaults to the bundled ``data/levels.yaml``.
        """
        if path is None:
            path = Path(__file__).resolve().parent.parent / "data" / "levels.yaml"
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Levels file not found: {path}")

        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{path.name}: expected YAML with 'levels'")
        levels = raw.get("levels")
        if not levels or not isinstance(levels, list):
            raise ValueError(f"{path.name}: missing or invalid 'levels'")

        block_size = raw.get("block_size", DEFAULT_BLOCK_SIZE)
        # bool is an int subclass
        if isinstance(block_size, bool) or not isinstance(block_size, int) or block_size < 1:
            raise ValueError(f"{path.name}: 'block_size' must be a positive integer")

        try:
            table = cls(levels)
        except ValueError as e:
            raise ValueError(f"{path.name}: {e}") from e

        logger.info("Loaded %d levels from %s", len(table), path)
        return LevelConfig(table=table, block_size=block_size)


@dataclass(frozen=True)
class LevelConfig:
    """Construction-time settings for a practice session."""

    table: LevelTable
    block_size: int = DEFAULT_BLOCK_SIZE
