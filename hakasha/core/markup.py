"""Rich-text view of a round's progress."""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Iterable, List, Optional

CORRECT = "correct"
ERROR = "error"
NEXT = "next"

CSS_CLASSES = {
    CORRECT: "correct-text",
    ERROR: "error-text",
    NEXT: "next-char",
}


@dataclass(frozen=True)
class Segment:
    """A run of target text and how to show it.

    ``tag`` is ``None`` for the untyped remainder. ``underline`` marks the
    character the learner has to type next.
    """

    text: str
    tag: Optional[str] = None
    underline: bool = False


def progress_segments(
    target_word: str, input_value: str, error_indices: Iterable[int]
) -> List[Segment]:
    errors = set(error_indices)
    typed = min(len(input_value), len(target_word))

    segments = [
        Segment(target_word[i], ERROR if i in errors else CORRECT)
        for i in range(typed)
    ]
    if typed < len(target_word):
        tag = ERROR if typed in errors else NEXT
        segments.append(Segment(target_word[typed], tag, underline=True))
        remainder = target_word[typed + 1 :]
        if remainder:
            segments.append(Segment(remainder))
    return segments


def render_segment(segment: Segment) -> str:
    text = html.escape(segment.text)
    if segment.underline:
        text = f"<u>{text}</u>"
    if segment.tag is None:
        return f"<span>{text}</span>"
    return f'<span class="{CSS_CLASSES[segment.tag]}">{text}</span>'


def render_progress(target_word: str, input_value: str, error_indices: Iterable[int]) -> str:
    """Markup for the target with typed, next and remaining characters tagged."""
    return "".join(
        render_segment(s) for s in progress_segments(target_word, input_value, error_indices)
    )
