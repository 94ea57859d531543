"""Split recommendation from recent training history.

Two policies are available:

- rotation (default): identify the split trained in the most recent workout by
  coverage of its primary + secondary groups and follow its registered
  ``next_split`` pointer. When no split is covered well enough, fall back to
  the split whose groups were trained least over the last 7 days.
- recency: score every split by whether its groups were trained in the last
  7 days and pick the best-scoring one.

Both are deterministic for a given history and reference time, and both
fall back to split 0 instead of raising.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from splitgen.models import HistoryEntry
from splitgen.splits import SplitRegistry

logger = logging.getLogger(__name__)

COVERAGE_THRESHOLD = 0.5
BALANCE_WINDOW_DAYS = 7

# Recency policy weights: (trained recently, not trained recently)
PRIMARY_RECENCY_SCORES = (-10, 5)
SECONDARY_RECENCY_SCORES = (-5, 3)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _window(history: Sequence[HistoryEntry], as_of: datetime | None) -> list[HistoryEntry]:
    reference = _as_utc(as_of) if as_of is not None else datetime.now(timezone.utc)
    cutoff = reference - timedelta(days=BALANCE_WINDOW_DAYS)
    return [entry for entry in history if _as_utc(entry.workout_date) >= cutoff]


def coverage(trained_groups: set[int], focus_groups: Sequence[int]) -> float:
    """Fraction of ``focus_groups`` present in ``trained_groups``."""
    if not focus_groups:
        return 0.0
    matches = sum(1 for group_id in focus_groups if group_id in trained_groups)
    return matches / len(focus_groups)


def identify_last_split(history: Sequence[HistoryEntry], registry: SplitRegistry) -> int | None:
    """Return the split matched by the most recent workout, or None."""
    if not history:
        return None
    trained = set(history[0].muscle_group_ids)
    for split in registry:
        ratio = coverage(trained, split.focus_groups)
        if ratio >= COVERAGE_THRESHOLD:
            logger.info(
                "Last workout identified as %s (%d%% coverage)",
                split.name, round(ratio * 100),
                extra={"splitgen_split": split.name},
            )
            return split.id
    return None


def balanced_split(
    history: Sequence[HistoryEntry],
    registry: SplitRegistry,
    *,
    as_of: datetime | None = None,
) -> int:
    """Pick the split whose focus groups were trained least in the window.

    Ties go to the lowest index.
    """
    frequency: Counter[int] = Counter()
    for entry in _window(history, as_of):
        frequency.update(entry.muscle_group_ids)

    best_index = 0
    lowest = float("inf")
    for split in registry:
        groups = split.focus_groups
        average = sum(frequency[group_id] for group_id in groups) / len(groups)
        if average < lowest:
            lowest = average
            best_index = split.id

    logger.info(
        "Balanced split selected: %s (average frequency %.2f)",
        registry[best_index].name, lowest,
    )
    return best_index


def _rotation_split(
    history: Sequence[HistoryEntry],
    registry: SplitRegistry,
    as_of: datetime | None,
) -> int:
    if not history:
        logger.info("No training history, starting with %s", registry[0].name)
        return 0
    last = identify_last_split(history, registry)
    if last is not None:
        return registry[last].next_split
    return balanced_split(history, registry, as_of=as_of)


def _recency_split(
    history: Sequence[HistoryEntry],
    registry: SplitRegistry,
    as_of: datetime | None,
) -> int:
    trained: set[int] = set()
    for entry in _window(history, as_of):
        trained.update(entry.muscle_group_ids)

    best_index = 0
    best_score = float("-inf")
    for split in registry:
        score = 0
        for group_id in split.primary_groups:
            score += PRIMARY_RECENCY_SCORES[0] if group_id in trained else PRIMARY_RECENCY_SCORES[1]
        for group_id in split.secondary_groups:
            score += SECONDARY_RECENCY_SCORES[0] if group_id in trained else SECONDARY_RECENCY_SCORES[1]
        if score > best_score:
            best_score = score
            best_index = split.id
    return best_index


def recommend_split(
    history: Sequence[HistoryEntry],
    registry: SplitRegistry,
    *,
    as_of: datetime | None = None,
    policy: str = "rotation",
) -> int:
    """Return the index of the split to train next.

    ``history`` is ordered most-recent-first. Never raises: any failure is
    logged and mapped to split 0.
    """
    try:
        if policy == "rotation":
            index = _rotation_split(history, registry, as_of)
        elif policy == "recency":
            index = _recency_split(history, registry, as_of)
        else:
            raise ValueError(f"Unknown split policy: {policy!r}")
    except Exception:
        logger.exception("Split recommendation failed, falling back to split 0")
        return 0

    logger.info(
        "Next recommended split: %s", registry[index].name,
        extra={"splitgen_split": registry[index].name, "splitgen_policy": policy},
    )
    return index


def classify_split(muscle_group_ids: Sequence[int], registry: SplitRegistry) -> int:
    """Identify which split a completed workout belongs to.

    Primary group matches weigh 3, secondary matches 2; the first split with
    the strictly highest score wins.
    """
    trained = set(muscle_group_ids)
    best_index = 0
    best_score = -1
    for split in registry:
        score = 3 * sum(1 for g in split.primary_groups if g in trained)
        score += 2 * sum(1 for g in split.secondary_groups if g in trained)
        if score > best_score:
            best_score = score
            best_index = split.id
    return best_index
