"""Shared fixtures: the 20-exercise reference catalog and its two seed workouts."""

from __future__ import annotations

import random

import pytest

from splitgen.catalog import ExerciseCatalog
from splitgen.config import EvolutionConfig
from splitgen.models import Exercise, SeedWorkout, UserProfile
from splitgen.splits import DEFAULT_REGISTRY

# Group ids in this fixture are its own (1 Chest, 2 Back, 3 Legs, 4 Shoulders,
# 5 Biceps, 6 Triceps, 7 Core) and do not follow the default registry names.
FIXTURE_EXERCISES: tuple[Exercise, ...] = (
    Exercise(1, "Bench Press", 1, "Chest", "medium", True),
    Exercise(2, "Push-up", 1, "Chest", "easy", False),
    Exercise(3, "Dumbbell Fly", 1, "Chest", "medium", True),
    Exercise(4, "Lat Pulldown", 2, "Back", "medium", True),
    Exercise(5, "Bent-over Row", 2, "Back", "hard", True),
    Exercise(6, "Pull-up", 2, "Back", "hard", False),
    Exercise(7, "Squat", 3, "Legs", "medium", False),
    Exercise(8, "Leg Press", 3, "Legs", "easy", True),
    Exercise(9, "Lunge", 3, "Legs", "medium", False),
    Exercise(10, "Overhead Press", 4, "Shoulders", "medium", True),
    Exercise(11, "Lateral Raise", 4, "Shoulders", "easy", True),
    Exercise(12, "Front Raise", 4, "Shoulders", "easy", True),
    Exercise(13, "Barbell Curl", 5, "Biceps", "easy", True),
    Exercise(14, "Hammer Curl", 5, "Biceps", "easy", True),
    Exercise(15, "Concentration Curl", 5, "Biceps", "medium", True),
    Exercise(16, "Skull Crusher", 6, "Triceps", "medium", True),
    Exercise(17, "Rope Pushdown", 6, "Triceps", "easy", True),
    Exercise(18, "Dip", 6, "Triceps", "hard", False),
    Exercise(19, "Plank", 7, "Core", "easy", False),
    Exercise(20, "Crunch", 7, "Core", "easy", False),
)

FIXTURE_WORKOUTS: tuple[SeedWorkout, ...] = (
    SeedWorkout(
        id=1,
        name="Hypertrophy A",
        goal="hypertrophy",
        experience_level="intermediate",
        exercise_ids=(1, 4, 7, 10, 13, 16, 19, 2),
    ),
    SeedWorkout(
        id=2,
        name="Weight Loss",
        goal="weight_loss",
        experience_level="beginner",
        exercise_ids=(2, 6, 7, 19, 8, 11),
    ),
)


def make_user(**overrides) -> UserProfile:
    defaults = dict(goal="hypertrophy", experience_level="intermediate", weight_kg=80.0)
    defaults.update(overrides)
    return UserProfile(**defaults)


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog(FIXTURE_EXERCISES)


@pytest.fixture
def seed_workouts() -> tuple[SeedWorkout, ...]:
    return FIXTURE_WORKOUTS


@pytest.fixture
def user() -> UserProfile:
    return make_user()


@pytest.fixture
def registry():
    return DEFAULT_REGISTRY


@pytest.fixture
def config() -> EvolutionConfig:
    return EvolutionConfig()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
