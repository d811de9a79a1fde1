from __future__ import annotations

import math

from pydantic import BaseModel, Field

TYPING_DELAY_MS = 50
COUNTER_DURATION_MS = 1000
COUNTER_TICK_MS = 16

STATUS_READY = "SYSTEM STATUS: READY"
STATUS_SEARCHING = "SEARCHING..."
STATUS_ERROR = "SYSTEM STATUS: ERROR"

CLASS_READY = "status-ready"
CLASS_SEARCHING = "status-searching"
CLASS_COMPLETE = "status-complete"


def status_complete(count: int) -> str:
    return f"SEARCH COMPLETE - {count} JOBS FOUND"


def typewriter_frames(message: str) -> list[str]:
    return [message[: index + 1] for index in range(len(message))]


def counter_frames(
    start: int,
    target: int,
    *,
    duration_ms: int = COUNTER_DURATION_MS,
    tick_ms: int = COUNTER_TICK_MS,
) -> list[int]:
    """Values shown on each tick while the counter moves from ``start`` to ``target``."""
    if tick_ms <= 0 or duration_ms <= 0:
        raise ValueError("duration_ms and tick_ms must be positive")
    if start == target:
        return [target]

    # Integer steps stay exact for any count.
    steps = max(math.ceil(duration_ms / tick_ms), 1)
    span = target - start
    frames = [start + span * step // steps for step in range(1, steps)]
    frames.append(target)
    return frames


class StatusLine(BaseModel):
    text: str
    css_class: str
    delay_ms: int = TYPING_DELAY_MS
    frames: list[str] = Field(default_factory=list)

    @classmethod
    def typed(cls, text: str, css_class: str, *, delay_ms: int = TYPING_DELAY_MS) -> StatusLine:
        frames = typewriter_frames(text)
        return cls(text=text, css_class=css_class, delay_ms=delay_ms, frames=frames)


class CounterAnimation(BaseModel):
    start: int
    target: int
    tick_ms: int = COUNTER_TICK_MS
    frames: list[int]

    @classmethod
    def between(cls, start: int, target: int) -> CounterAnimation:
        return cls(start=start, target=target, frames=counter_frames(start, target))
