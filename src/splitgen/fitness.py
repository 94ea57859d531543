"""Fitness evaluation for candidate workouts.

Additive score, floored at zero:

1. Split adherence: reward exercises in the split's groups, penalize a
   primary group with fewer than 2 exercises or a missing secondary group.
2. Experience fit: exercises close to the user's level score higher.
3. Goal bonus: one strategy per goal (see GOAL_BONUSES).
4. Redundancy: penalize any muscle group with more than 4 exercises.
5. Unresolved or repeated ids: heavy per-slot penalty, so stale ids die out.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Sequence

from splitgen.catalog import ExerciseCatalog
from splitgen.models import DIFFICULTY_RANK, LEVEL_RANK, Exercise, UserProfile
from splitgen.splits import TrainingSplit

PRIMARY_EXERCISE_BONUS = 20
PRIMARY_MIN_EXERCISES = 2
PRIMARY_SHORTFALL_PENALTY = 25
SECONDARY_EXERCISE_BONUS = 15
SECONDARY_MIN_EXERCISES = 1
SECONDARY_SHORTFALL_PENALTY = 20
AUXILIARY_EXERCISE_BONUS = 8

EXPERIENCE_FIT_BASE = 12
EXPERIENCE_FIT_STEP = 4

REDUNDANCY_LIMIT = 4
REDUNDANCY_PENALTY = 20
UNRESOLVED_PENALTY = 50

# Muscle groups treated as large compound movers
COMPOUND_GROUPS = frozenset({"legs", "back", "chest"})
HYPERTROPHY_MAIN_GROUPS = ("chest", "back", "legs", "shoulders", "biceps", "triceps")


def _group_name(exercise: Exercise) -> str:
    return exercise.muscle_group_name.strip().lower()


def _weight_loss_bonus(exercises: list[Exercise], by_group: dict[int, list[Exercise]]) -> float:
    return 10.0 * sum(1 for ex in exercises if _group_name(ex) in COMPOUND_GROUPS)


def _hypertrophy_bonus(exercises: list[Exercise], by_group: dict[int, list[Exercise]]) -> float:
    covered = {_group_name(ex) for ex in exercises}
    return 8.0 * sum(1 for group in HYPERTROPHY_MAIN_GROUPS if group in covered)


def _definition_bonus(exercises: list[Exercise], by_group: dict[int, list[Exercise]]) -> float:
    compound = sum(1 for ex in exercises if _group_name(ex) in COMPOUND_GROUPS)
    isolated = len(exercises) - compound
    return 8.0 * min(compound, isolated)


def _conditioning_bonus(exercises: list[Exercise], by_group: dict[int, list[Exercise]]) -> float:
    no_equipment = sum(1 for ex in exercises if not ex.equipment_required)
    return 6.0 * len(by_group) + 6.0 * no_equipment


def _rehabilitation_bonus(exercises: list[Exercise], by_group: dict[int, list[Exercise]]) -> float:
    per_difficulty = {"easy": 12.0, "medium": 6.0, "hard": 0.0}
    return sum(per_difficulty[ex.difficulty] for ex in exercises)


GoalBonus = Callable[[list[Exercise], dict[int, list[Exercise]]], float]

GOAL_BONUSES: dict[str, GoalBonus] = {
    "weight_loss": _weight_loss_bonus,
    "hypertrophy": _hypertrophy_bonus,
    "definition": _definition_bonus,
    "conditioning": _conditioning_bonus,
    "rehabilitation": _rehabilitation_bonus,
}


def split_adherence(by_group: dict[int, list[Exercise]], split: TrainingSplit) -> float:
    total = 0.0
    for group_id in split.primary_groups:
        count = len(by_group.get(group_id, ()))
        total += PRIMARY_EXERCISE_BONUS * count
        if count < PRIMARY_MIN_EXERCISES:
            total -= PRIMARY_SHORTFALL_PENALTY
    for group_id in split.secondary_groups:
        count = len(by_group.get(group_id, ()))
        total += SECONDARY_EXERCISE_BONUS * count
        if count < SECONDARY_MIN_EXERCISES:
            total -= SECONDARY_SHORTFALL_PENALTY
    for group_id in split.auxiliary_groups:
        total += AUXILIARY_EXERCISE_BONUS * len(by_group.get(group_id, ()))
    return total


def experience_fit(exercises: list[Exercise], user: UserProfile) -> float:
    level = LEVEL_RANK[user.experience_level]
    return float(sum(
        EXPERIENCE_FIT_BASE - EXPERIENCE_FIT_STEP * abs(DIFFICULTY_RANK[ex.difficulty] - level)
        for ex in exercises
    ))


def redundancy_penalty(by_group: dict[int, list[Exercise]]) -> float:
    return float(sum(
        REDUNDANCY_PENALTY * (len(group) - REDUNDANCY_LIMIT)
        for group in by_group.values()
        if len(group) > REDUNDANCY_LIMIT
    ))


def score(
    chromosome: Sequence[int],
    user: UserProfile,
    catalog: ExerciseCatalog,
    split: TrainingSplit,
) -> float:
    """Score a chromosome; always >= 0 and never raises on unknown ids.

    Repeated ids count once; each repeat is penalized like an unknown id.
    """
    distinct = list(dict.fromkeys(chromosome))
    exercises, unresolved = catalog.resolve(distinct)
    unresolved += len(chromosome) - len(distinct)

    by_group: dict[int, list[Exercise]] = defaultdict(list)
    for ex in exercises:
        by_group[ex.muscle_group_id].append(ex)

    value = split_adherence(by_group, split)
    value += experience_fit(exercises, user)
    value += GOAL_BONUSES[user.goal](exercises, by_group)
    value -= redundancy_penalty(by_group)
    value -= UNRESOLVED_PENALTY * unresolved
    return max(0.0, value)
