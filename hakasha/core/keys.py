"""Classify key identifiers coming from the window before they reach the engine."""

from __future__ import annotations

from typing import Optional

# Named keys the practice input swallows without judging.
CONTROL_KEYS = frozenset(
    {
        "ArrowLeft",
        "ArrowRight",
        "ArrowUp",
        "ArrowDown",
        "Tab",
        "Home",
        "End",
        "Backspace",
        "Delete",
        "Escape",
        "Enter",
    }
)


def is_letter_attempt(key: str) -> bool:
    """True for a single visible character other than space."""
    return (
        isinstance(key, str)
        and len(key) == 1
        and key != " "
        and key.isprintable()
    )


def key_from_event(text: str, modifiers_held: bool = False) -> Optional[str]:
    """Translate raw key text into something the engine should judge.

    Returns ``None`` for shortcuts (Ctrl/Alt/Meta held, select-all included),
    named control keys, space and empty text.
    """
    if modifiers_held:
        return None
    if not text or text in CONTROL_KEYS:
        return None
    if not is_letter_attempt(text):
        return None
    return text
