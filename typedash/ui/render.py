"""Rich-text rendering for the typing screen (no Qt dependency)."""

from __future__ import annotations

import html
from typing import Dict

from typedash.core.comparison import CharState, char_states
from typedash.ui.colors import Palette

STATE_COLORS: Dict[CharState, str] = {
    CharState.PENDING: Palette.PENDING,
    CharState.CORRECT: Palette.CORRECT,
    CharState.INCORRECT: Palette.INCORRECT,
}


def render_target_html(target: str, typed: str) -> str:
    """Target text as HTML, each character colored by its typing state.

    Consecutive characters in the same state share one span.
    """
    if not target:
        return ""
    parts: list[str] = []
    run_state = None
    run_chars: list[str] = []

    def _flush() -> None:
        if run_chars:
            text = html.escape("".join(run_chars))
            parts.append(f'<span style="color:{STATE_COLORS[run_state]};">{text}</span>')

    for ch, state in zip(target, char_states(target, typed)):
        if state is not run_state:
            _flush()
            run_state = state
            run_chars = []
        run_chars.append(ch)
    _flush()
    return '<span style="font-family: monospace;">' + "".join(parts) + "</span>"


def format_time_left(seconds: int) -> str:
    return f"Time Left: {max(0, seconds)}s"
