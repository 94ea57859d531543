"""Core data models for workout recommendation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

Goal = Literal["weight_loss", "hypertrophy", "definition", "conditioning", "rehabilitation"]
ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
Difficulty = Literal["easy", "medium", "hard"]

GOALS: tuple[str, ...] = (
    "weight_loss",
    "hypertrophy",
    "definition",
    "conditioning",
    "rehabilitation",
)

EXPERIENCE_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")

# Ordinal ranks used by the experience-fit score
DIFFICULTY_RANK: dict[str, int] = {"easy": 1, "medium": 2, "hard": 3}
LEVEL_RANK: dict[str, int] = {"beginner": 1, "intermediate": 2, "advanced": 3}

GOAL_LABELS: dict[str, str] = {
    "weight_loss": "Weight Loss",
    "hypertrophy": "Hypertrophy",
    "definition": "Definition",
    "conditioning": "Conditioning",
    "rehabilitation": "Rehabilitation",
}


@dataclass(frozen=True)
class MuscleGroup:
    id: int
    name: str


@dataclass(frozen=True)
class Exercise:
    id: int
    name: str
    muscle_group_id: int
    muscle_group_name: str
    difficulty: Difficulty
    equipment_required: bool


@dataclass(frozen=True)
class UserProfile:
    """Read-only user profile. Weight/height/age are carried but unused here."""

    goal: Goal
    experience_level: ExperienceLevel
    weight_kg: float | None = None
    height_cm: float | None = None
    age: int | None = None


@dataclass(frozen=True)
class SeedWorkout:
    """An existing workout used to seed the initial population."""

    id: int
    goal: str
    experience_level: str
    exercise_ids: tuple[int, ...]
    name: str = ""


@dataclass(frozen=True)
class HistoryEntry:
    """One completed workout: when it happened and which groups it trained."""

    workout_date: datetime
    muscle_group_ids: tuple[int, ...]
    workout_id: int | None = None


@dataclass(frozen=True)
class WorkoutExercise:
    exercise: Exercise
    sets: int
    repetitions: str  # comma-separated reps per set, e.g. "12,10,8,6"
    rest_time: int  # seconds


@dataclass
class GeneratedWorkout:
    """Materialized recommendation, handed to the caller for persistence."""

    name: str
    description: str
    goal: Goal
    experience_level: ExperienceLevel
    estimated_duration: int  # minutes
    split_id: int
    split_name: str
    exercises: list[WorkoutExercise] = field(default_factory=list)
    fitness: float = 0.0
    chromosome: list[int] = field(default_factory=list)

    @property
    def exercise_ids(self) -> list[int]:
        return [item.exercise.id for item in self.exercises]
