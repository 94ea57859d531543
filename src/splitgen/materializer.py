"""Turn the winning chromosome into a concrete workout.

Sets, repetitions and rest are looked up from REP_SCHEMES, keyed by goal,
the exercise's role in the split and the user's experience level.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from splitgen.catalog import ExerciseCatalog
from splitgen.models import GOAL_LABELS, GeneratedWorkout, UserProfile, WorkoutExercise
from splitgen.splits import TrainingSplit

BASE_DURATION_MINUTES: dict[str, int] = {
    "beginner": 35,
    "intermediate": 50,
    "advanced": 65,
}
MINUTES_PER_EXERCISE = 4

# goal → role → (sets, {experience_level: reps, "*": default reps}, rest seconds)
REP_SCHEMES: dict[str, dict[str, tuple[int, dict[str, str], int]]] = {
    "weight_loss": {
        "primary": (4, {"beginner": "15,12,12,10", "*": "18,15,12,10"}, 45),
        "secondary": (3, {"beginner": "15,12,12", "*": "15,12,10"}, 45),
        "auxiliary": (3, {"beginner": "15,12,12", "*": "15,12,10"}, 45),
    },
    "hypertrophy": {
        "primary": (4, {"beginner": "12,10,8,8", "intermediate": "12,10,8,6", "*": "15,12,10,8"}, 90),
        "secondary": (3, {"*": "12,10,8"}, 90),
        "auxiliary": (2, {"*": "12,10,8"}, 90),
    },
    "definition": {
        "primary": (4, {"advanced": "15,12,10,8", "*": "12,12,10,10"}, 60),
        "secondary": (3, {"advanced": "15,12,10,8", "*": "12,12,10,10"}, 60),
        "auxiliary": (3, {"advanced": "15,12,10,8", "*": "12,12,10,10"}, 60),
    },
    "conditioning": {
        "primary": (3, {"*": "15,15,12"}, 45),
        "secondary": (3, {"*": "15,15,12"}, 45),
        "auxiliary": (3, {"*": "15,15,12"}, 45),
    },
    "rehabilitation": {
        "primary": (3, {"*": "12,10,8"}, 75),
        "secondary": (2, {"*": "12,10,8"}, 75),
        "auxiliary": (2, {"*": "12,10,8"}, 75),
    },
}


def prescription(goal: str, role: str, experience_level: str) -> tuple[int, str, int]:
    """Return (sets, repetitions, rest_time) for one exercise."""
    sets, reps_by_level, rest = REP_SCHEMES[goal][role]
    reps = reps_by_level.get(experience_level, reps_by_level["*"])
    return sets, reps, rest


def estimated_duration(experience_level: str, exercise_count: int) -> int:
    return BASE_DURATION_MINUTES[experience_level] + MINUTES_PER_EXERCISE * exercise_count


def build_workout(
    chromosome: Sequence[int],
    user: UserProfile,
    catalog: ExerciseCatalog,
    split: TrainingSplit,
    *,
    fitness: float = 0.0,
    generated_at: datetime | None = None,
) -> GeneratedWorkout:
    """Materialize a chromosome. Unknown ids are skipped."""
    exercises, _ = catalog.resolve(chromosome)
    stamp = (generated_at or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H:%M")
    goal_label = GOAL_LABELS[user.goal]

    items = []
    for ex in exercises:
        sets, reps, rest = prescription(user.goal, split.role_of(ex.muscle_group_id), user.experience_level)
        items.append(WorkoutExercise(exercise=ex, sets=sets, repetitions=reps, rest_time=rest))

    return GeneratedWorkout(
        name=f"{split.name} - {goal_label} (genetic {stamp})",
        description=(
            f"Personalized {split.name} workout for {goal_label.lower()}, "
            f"{user.experience_level} level. Generated by a genetic algorithm "
            f"from your history and goals."
        ),
        goal=user.goal,
        experience_level=user.experience_level,
        estimated_duration=estimated_duration(user.experience_level, len(items)),
        split_id=split.id,
        split_name=split.name,
        exercises=items,
        fitness=fitness,
        chromosome=list(chromosome),
    )
