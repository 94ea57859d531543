"""Training history statistics shown next to the recommendation."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta, timezone
from typing import Any

from splitgen.models import HistoryEntry
from splitgen.split_recommender import classify_split, recommend_split
from splitgen.splits import SplitRegistry


def _local_date(value: datetime) -> date:
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()


def workout_streak(history: Sequence[HistoryEntry], today: date) -> int:
    """Consecutive training days ending today; 0 when nothing was logged today."""
    days = {_local_date(entry.workout_date) for entry in history}
    streak = 0
    cursor = today
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def history_stats(
    history: Sequence[HistoryEntry],
    registry: SplitRegistry,
    *,
    as_of: datetime | None = None,
    policy: str = "rotation",
) -> dict[str, Any]:
    """Summarize history (most-recent-first) for a dashboard."""
    now = as_of or datetime.now(timezone.utc)
    today = _local_date(now)
    month_start = today.replace(day=1)

    this_month = sum(
        1 for entry in history if month_start <= _local_date(entry.workout_date) <= today
    )
    last_split = (
        registry[classify_split(history[0].muscle_group_ids, registry)].name if history else None
    )
    next_index = recommend_split(history, registry, as_of=now, policy=policy)

    return {
        "total_workouts": len(history),
        "this_month": this_month,
        "streak": workout_streak(history, today),
        "last_split": last_split,
        "next_recommended_split": registry[next_index].name,
    }
