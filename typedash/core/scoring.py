from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreResult:
    """Final metrics for one finished typing session."""

    wpm: int
    accuracy: int
    correct_chars: int
    incorrect_chars: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def count_words(text: str) -> int:
    """Number of whitespace-separated words; blank text has none."""
    return len(text.split())


def compare_chars(target: str, typed: str) -> Tuple[int, int]:
    """Return ``(correct, incorrect)`` for a positional comparison.

    Every typed character is checked against the target at the same index.
    Characters typed past the end of the target are wrong, and so is every
    target character that was never reached.
    """
    correct = 0
    incorrect = 0
    for i, ch in enumerate(typed):
        if i < len(target) and ch == target[i]:
            correct += 1
        else:
            incorrect += 1
    incorrect += max(0, len(target) - len(typed))
    return correct, incorrect


def calculate_results(target: str, typed: str, elapsed_seconds: float) -> ScoreResult:
    """Score *typed* against *target* over *elapsed_seconds*.

    Never raises for degenerate input: a non-positive elapsed time gives
    0 WPM and an empty target gives 0% accuracy.
    """
    words = count_words(typed)
    if elapsed_seconds > 0:
        wpm = round_half_up(words / elapsed_seconds * 60)
    else:
        logger.debug("Elapsed time %r is not positive; reporting 0 WPM", elapsed_seconds)
        wpm = 0

    correct, incorrect = compare_chars(target, typed)
    if target:
        accuracy = round_half_up(correct / len(target) * 100)
        accuracy = max(0, min(100, accuracy))
    else:
        logger.debug("Empty target text; reporting 0%% accuracy")
        accuracy = 0

    return ScoreResult(
        wpm=wpm,
        accuracy=accuracy,
        correct_chars=correct,
        incorrect_chars=incorrect,
    )
