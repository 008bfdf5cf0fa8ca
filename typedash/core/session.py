from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Union

from typedash.core.comparison import CharState, char_states, has_trailing_error
from typedash.core.scoring import ScoreResult, calculate_results

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 60


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class Session:
    """One timed attempt at typing the presented text.

    Sessions are immutable values; every change produces a new ``Session``
    through :func:`reduce`. Timestamps are seconds on whatever clock the
    caller uses (the UI passes ``time.time()``).
    """

    target_text: str = ""
    typed_text: str = ""
    duration: int = DEFAULT_DURATION
    time_left: int = DEFAULT_DURATION
    started_at: Optional[float] = None
    ended_at: Optional[float] = None
    phase: Phase = Phase.IDLE
    result: Optional[ScoreResult] = None

    @property
    def is_running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def elapsed_seconds(self) -> float:
        """Seconds between start and end; 0.0 until the session has both."""
        if self.started_at is None or self.ended_at is None:
            return 0.0
        return self.ended_at - self.started_at

    @property
    def has_trailing_error(self) -> bool:
        return has_trailing_error(self.target_text, self.typed_text)

    def char_states(self) -> List[CharState]:
        return char_states(self.target_text, self.typed_text)


@dataclass(frozen=True)
class Started:
    timestamp: float
    duration: int = DEFAULT_DURATION
    target_text: str = ""


@dataclass(frozen=True)
class TextLoaded:
    target_text: str


@dataclass(frozen=True)
class CharacterTyped:
    char: str
    position: int


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class TimerTick:
    seconds_remaining: int


@dataclass(frozen=True)
class Finished:
    timestamp: float


SessionEvent = Union[Started, TextLoaded, CharacterTyped, InputChanged, TimerTick, Finished]


def _finish(session: Session, ended_at: float) -> Session:
    elapsed = ended_at - session.started_at if session.started_at is not None else 0.0
    result = calculate_results(session.target_text, session.typed_text, elapsed)
    logger.info(
        "Session finished after %.1fs: %d WPM, %d%% accuracy",
        elapsed,
        result.wpm,
        result.accuracy,
    )
    return replace(session, ended_at=ended_at, phase=Phase.FINISHED, result=result)


def reduce(session: Session, event: SessionEvent) -> Session:
    """Apply *event* to *session* and return the resulting session.

    ``Started`` always begins a fresh session. Every other event is ignored
    unless the session is running, except ``TextLoaded`` which is also
    accepted before the first start.
    """
    if isinstance(event, Started):
        if event.duration <= 0:
            raise ValueError(f"duration must be positive, got {event.duration}")
        return Session(
            target_text=event.target_text,
            duration=event.duration,
            time_left=event.duration,
            started_at=event.timestamp,
            phase=Phase.RUNNING,
        )

    if isinstance(event, TextLoaded):
        if session.phase is Phase.FINISHED:
            return session
        return replace(session, target_text=event.target_text)

    if isinstance(event, CharacterTyped):
        if not session.is_running:
            return session
        position = max(0, min(event.position, len(session.typed_text)))
        return replace(session, typed_text=session.typed_text[:position] + event.char)

    if isinstance(event, InputChanged):
        if not session.is_running:
            return session
        return replace(session, typed_text=event.text)

    if isinstance(event, TimerTick):
        if not session.is_running:
            return session
        time_left = max(0, event.seconds_remaining)
        session = replace(session, time_left=time_left)
        if time_left == 0:
            return _finish(session, session.started_at + session.duration)
        return session

    if isinstance(event, Finished):
        if not session.is_running:
            return session
        return _finish(session, event.timestamp)

    raise TypeError(f"Unsupported session event: {event!r}")
