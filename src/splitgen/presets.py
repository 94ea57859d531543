"""Reference exercise catalog and seed workouts for demos and tests.

Muscle group ids follow the default split rotation (see splitgen.splits).
"""

from __future__ import annotations

from splitgen.catalog import ExerciseCatalog
from splitgen.models import Exercise, SeedWorkout, UserProfile
from splitgen.splits import (
    ABS,
    BACK,
    BICEPS,
    CALVES,
    CHEST,
    FOREARMS,
    GLUTES,
    LEGS,
    MUSCLE_GROUP_NAMES,
    SHOULDERS,
    TRICEPS,
)


def _ex(ex_id: int, name: str, group_id: int, difficulty: str, equipment: bool) -> Exercise:
    return Exercise(
        id=ex_id,
        name=name,
        muscle_group_id=group_id,
        muscle_group_name=MUSCLE_GROUP_NAMES[group_id],
        difficulty=difficulty,  # type: ignore[arg-type]
        equipment_required=equipment,
    )


REFERENCE_EXERCISES: tuple[Exercise, ...] = (
    _ex(1, "Barbell Bench Press", CHEST, "medium", True),
    _ex(2, "Push-up", CHEST, "easy", False),
    _ex(3, "Dumbbell Fly", CHEST, "medium", True),
    _ex(4, "Incline Dumbbell Press", CHEST, "hard", True),
    _ex(5, "Lat Pulldown", BACK, "medium", True),
    _ex(6, "Barbell Row", BACK, "hard", True),
    _ex(7, "Pull-up", BACK, "hard", False),
    _ex(8, "Seated Cable Row", BACK, "easy", True),
    _ex(9, "Overhead Press", SHOULDERS, "medium", True),
    _ex(10, "Lateral Raise", SHOULDERS, "easy", True),
    _ex(11, "Front Raise", SHOULDERS, "easy", True),
    _ex(12, "Arnold Press", SHOULDERS, "hard", True),
    _ex(13, "Barbell Curl", BICEPS, "easy", True),
    _ex(14, "Hammer Curl", BICEPS, "easy", True),
    _ex(15, "Concentration Curl", BICEPS, "medium", True),
    _ex(16, "Skull Crusher", TRICEPS, "medium", True),
    _ex(17, "Rope Pushdown", TRICEPS, "easy", True),
    _ex(18, "Bench Dip", TRICEPS, "hard", False),
    _ex(19, "Close-grip Bench Press", TRICEPS, "hard", True),
    _ex(20, "Back Squat", LEGS, "hard", True),
    _ex(21, "Leg Press", LEGS, "easy", True),
    _ex(22, "Walking Lunge", LEGS, "medium", False),
    _ex(23, "Romanian Deadlift", LEGS, "hard", True),
    _ex(24, "Plank", ABS, "easy", False),
    _ex(25, "Crunch", ABS, "easy", False),
    _ex(26, "Hanging Leg Raise", ABS, "hard", False),
    _ex(27, "Hip Thrust", GLUTES, "medium", True),
    _ex(28, "Glute Bridge", GLUTES, "easy", False),
    _ex(29, "Cable Kickback", GLUTES, "medium", True),
    _ex(30, "Standing Calf Raise", CALVES, "easy", True),
    _ex(31, "Seated Calf Raise", CALVES, "easy", True),
    _ex(32, "Wrist Curl", FOREARMS, "easy", True),
    _ex(33, "Farmer's Walk", FOREARMS, "medium", True),
)

REFERENCE_WORKOUTS: tuple[SeedWorkout, ...] = (
    SeedWorkout(
        id=1,
        name="Hypertrophy A",
        goal="hypertrophy",
        experience_level="intermediate",
        exercise_ids=(1, 3, 4, 16, 17, 9, 24, 2),
    ),
    SeedWorkout(
        id=2,
        name="Weight Loss Circuit",
        goal="weight_loss",
        experience_level="beginner",
        exercise_ids=(2, 7, 22, 24, 21, 10),
    ),
    SeedWorkout(
        id=3,
        name="Pull Day",
        goal="hypertrophy",
        experience_level="advanced",
        exercise_ids=(5, 6, 7, 8, 13, 14, 15, 32, 26),
    ),
)


def reference_catalog() -> ExerciseCatalog:
    return ExerciseCatalog(REFERENCE_EXERCISES)


PRESET_USERS: dict[str, UserProfile] = {
    "beginner_weight_loss": UserProfile(goal="weight_loss", experience_level="beginner", weight_kg=92.0),
    "intermediate_hypertrophy": UserProfile(goal="hypertrophy", experience_level="intermediate", weight_kg=80.0),
    "advanced_definition": UserProfile(goal="definition", experience_level="advanced", weight_kg=78.0),
    "intermediate_conditioning": UserProfile(goal="conditioning", experience_level="intermediate", weight_kg=70.0),
    "beginner_rehabilitation": UserProfile(goal="rehabilitation", experience_level="beginner", weight_kg=85.0),
}
