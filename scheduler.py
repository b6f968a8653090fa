"""
SM-2 spaced repetition scheduling.

Pure functions only: given a card's current repetition state, a quality score
and the current time, compute the next state. No I/O, so the store can call
this while it holds the connection lock and tests can call it directly.

Quality scale: 0 = total blackout .. 5 = perfect recall. Anything below 3 is
a failed recall and sends the card back to the start of the ladder.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta

MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3

INITIAL_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
INITIAL_INTERVAL_DAYS = 1
SECOND_INTERVAL_DAYS = 6


@dataclass(frozen=True)
class RepetitionState:
    ease_factor: float = INITIAL_EASE_FACTOR
    interval_days: int = INITIAL_INTERVAL_DAYS
    repetitions: int = 0


@dataclass(frozen=True)
class ReviewOutcome:
    ease_factor: float
    interval_days: int
    repetitions: int
    next_review: datetime
    last_reviewed: datetime

    @property
    def state(self) -> RepetitionState:
        return RepetitionState(self.ease_factor, self.interval_days, self.repetitions)


def clamp_quality(quality: int) -> int:
    return max(MIN_QUALITY, min(MAX_QUALITY, int(quality)))


def _round_half_up(value: float) -> int:
    # Built-in round() rounds half to even; intervals round .5 upwards.
    return int(math.floor(value + 0.5))


def next_ease_factor(ease_factor: float, quality: int) -> float:
    """Apply the SM-2 ease update and the 1.3 floor."""
    miss = MAX_QUALITY - quality
    return max(MIN_EASE_FACTOR, ease_factor + (0.1 - miss * (0.08 + miss * 0.02)))


def next_interval(state: RepetitionState, quality: int) -> int:
    if quality < PASSING_QUALITY:
        return INITIAL_INTERVAL_DAYS
    if state.repetitions == 0:
        return INITIAL_INTERVAL_DAYS
    if state.repetitions == 1:
        return SECOND_INTERVAL_DAYS
    return max(1, _round_half_up(state.interval_days * state.ease_factor))


def schedule(state: RepetitionState, quality: int, now: datetime) -> ReviewOutcome:
    """Compute the state that follows one review of quality ``quality``.

    Quality is clamped to 0..5, never rejected. The interval uses the ease
    factor from before this review; the new ease factor is computed from the
    old one and stored for the next review, on failures as well as successes.
    """
    quality = clamp_quality(quality)
    interval = next_interval(state, quality)
    repetitions = 0 if quality < PASSING_QUALITY else state.repetitions + 1
    return ReviewOutcome(
        ease_factor=next_ease_factor(state.ease_factor, quality),
        interval_days=interval,
        repetitions=repetitions,
        next_review=now + timedelta(days=interval),
        last_reviewed=now,
    )
