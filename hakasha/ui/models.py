"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from hakasha.core.engine import ProgressionEngine


@dataclass
class LevelInfo:
    """One column of the level table: heading, level label and its characters."""

    heading: str
    name: str
    characters: str


def level_infos(engine: ProgressionEngine) -> List[LevelInfo]:
    """Previous, current and next level columns for the engine's current level."""
    return [
        LevelInfo("Previous Level", engine.previous_level_name, engine.previous_level_character_set),
        LevelInfo("Current Level", engine.current_level_name, engine.current_level_character_set),
        LevelInfo("Next Level", engine.next_level_name, engine.next_level_character_set),
    ]
