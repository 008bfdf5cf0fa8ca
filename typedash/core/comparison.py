"""Per-character view of typed text against the target."""

from __future__ import annotations

from enum import Enum
from typing import List


class CharState(Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"


def char_states(target: str, typed: str) -> List[CharState]:
    """One state per target character: untyped, matched, or mistyped."""
    states: List[CharState] = []
    for i, ch in enumerate(target):
        if i >= len(typed):
            states.append(CharState.PENDING)
        elif typed[i] == ch:
            states.append(CharState.CORRECT)
        else:
            states.append(CharState.INCORRECT)
    return states


def has_trailing_error(target: str, typed: str) -> bool:
    """True when the most recently typed character is wrong for its position."""
    if not typed:
        return False
    last = len(typed) - 1
    return last >= len(target) or typed[last] != target[last]
