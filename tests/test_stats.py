"""Tests for history statistics."""

from datetime import date, datetime, timedelta, timezone

from splitgen.models import HistoryEntry
from splitgen.splits import DEFAULT_REGISTRY, GLUTES, LEGS
from splitgen.stats import history_stats, workout_streak

AS_OF = datetime(2024, 5, 20, 18, 0, tzinfo=timezone.utc)


def _entry(days_ago: int, *groups: int) -> HistoryEntry:
    return HistoryEntry(workout_date=AS_OF - timedelta(days=days_ago), muscle_group_ids=groups)


class TestWorkoutStreak:
    def test_consecutive_days(self):
        history = [_entry(0), _entry(1), _entry(2), _entry(4)]
        assert workout_streak(history, date(2024, 5, 20)) == 3

    def test_no_workout_today(self):
        assert workout_streak([_entry(1), _entry(2)], date(2024, 5, 20)) == 0

    def test_two_workouts_same_day_count_once(self):
        assert workout_streak([_entry(0), _entry(0)], date(2024, 5, 20)) == 1


class TestHistoryStats:
    def test_empty(self):
        stats = history_stats([], DEFAULT_REGISTRY, as_of=AS_OF)
        assert stats == {
            "total_workouts": 0,
            "this_month": 0,
            "streak": 0,
            "last_split": None,
            "next_recommended_split": "Chest & Triceps",
        }

    def test_summary(self):
        history = [_entry(0, LEGS, GLUTES), _entry(1, 1, 5), _entry(25, 2, 4)]
        stats = history_stats(history, DEFAULT_REGISTRY, as_of=AS_OF)
        assert stats["total_workouts"] == 3
        assert stats["this_month"] == 2
        assert stats["streak"] == 2
        assert stats["last_split"] == "Legs & Glutes"
        assert stats["next_recommended_split"] == "Shoulders & Core"
