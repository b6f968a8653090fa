"""Tests for scheduler.py: SM-2 review scheduling."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from scheduler import (
    MIN_EASE_FACTOR,
    RepetitionState,
    clamp_quality,
    next_ease_factor,
    schedule,
)

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


class TestSuccessLadder:
    def test_three_perfect_reviews(self):
        s1 = schedule(RepetitionState(), 5, NOW)
        assert (s1.interval_days, s1.repetitions) == (1, 1)
        assert s1.ease_factor == pytest.approx(2.6)

        s2 = schedule(s1.state, 5, NOW)
        assert (s2.interval_days, s2.repetitions) == (6, 2)
        assert s2.ease_factor == pytest.approx(2.7)

        s3 = schedule(s2.state, 5, NOW)
        # 6 * 2.7 = 16.2, using the ease left by the previous review
        assert (s3.interval_days, s3.repetitions) == (16, 3)
        assert s3.ease_factor == pytest.approx(2.8)

    def test_next_review_is_now_plus_interval(self):
        outcome = schedule(RepetitionState(2.5, 6, 2), 4, NOW)
        assert outcome.last_reviewed == NOW
        assert outcome.next_review == NOW + timedelta(days=15)

    def test_interval_rounds_half_up(self):
        # 5 * 2.5 = 12.5; banker's rounding would give 12
        assert schedule(RepetitionState(2.5, 5, 2), 4, NOW).interval_days == 13

    def test_quality_four_keeps_ease(self):
        assert next_ease_factor(2.5, 4) == pytest.approx(2.5)

    def test_quality_three_passes_but_lowers_ease(self):
        outcome = schedule(RepetitionState(2.5, 6, 2), 3, NOW)
        assert outcome.repetitions == 3
        assert outcome.ease_factor == pytest.approx(2.36)


class TestFailure:
    def test_failure_resets(self):
        outcome = schedule(RepetitionState(2.5, 10, 4), 0, NOW)
        assert outcome.repetitions == 0
        assert outcome.interval_days == 1
        assert outcome.ease_factor < 2.5
        assert outcome.ease_factor == pytest.approx(1.7)

    @pytest.mark.parametrize("quality", [0, 1, 2])
    def test_any_failing_grade_resets(self, quality):
        outcome = schedule(RepetitionState(2.2, 30, 7), quality, NOW)
        assert (outcome.interval_days, outcome.repetitions) == (1, 0)
        assert outcome.next_review == NOW + timedelta(days=1)

    def test_ease_never_below_floor(self):
        outcome = schedule(RepetitionState(MIN_EASE_FACTOR, 1, 0), 0, NOW)
        assert outcome.ease_factor == MIN_EASE_FACTOR

    def test_repeated_failures_stay_at_floor(self):
        state = RepetitionState()
        for _ in range(10):
            state = schedule(state, 0, NOW).state
        assert state.ease_factor == MIN_EASE_FACTOR


class TestQualityClamp:
    def test_clamp(self):
        assert clamp_quality(-3) == 0
        assert clamp_quality(9) == 5
        assert clamp_quality(4) == 4

    def test_out_of_range_quality_is_clamped_not_rejected(self):
        high = schedule(RepetitionState(), 42, NOW)
        assert high == schedule(RepetitionState(), 5, NOW)
        low = schedule(RepetitionState(2.5, 6, 2), -1, NOW)
        assert low == schedule(RepetitionState(2.5, 6, 2), 0, NOW)


class TestIntervalFloor:
    def test_interval_at_least_one_day(self):
        outcome = schedule(RepetitionState(MIN_EASE_FACTOR, 0, 3), 5, NOW)
        assert outcome.interval_days >= 1
