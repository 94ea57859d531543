"""Pydantic validation for records supplied by the host app.

The persistence/API layer hands over plain dicts (user profile, exercise
catalog, existing workouts, workout history). These models validate them,
normalize display labels ("Weight Loss", "Intermediate", "Medium") to the
canonical snake_case values and convert them into domain dataclasses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from splitgen.catalog import ExerciseCatalog
from splitgen.models import (
    DIFFICULTIES,
    EXPERIENCE_LEVELS,
    GOALS,
    Exercise,
    HistoryEntry,
    SeedWorkout,
    UserProfile,
)


def _canonical(value: Any, allowed: tuple[str, ...], *, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
    if normalized not in allowed:
        raise ValueError(f"{field_name} must be one of: {', '.join(allowed)}")
    return normalized


def _exercise_id(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("id")
    return value


class UserRecord(BaseModel):
    goal: str
    experience_level: str
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, gt=0)

    @field_validator("goal", mode="before")
    @classmethod
    def normalize_goal(cls, v: Any) -> str:
        return _canonical(v, GOALS, field_name="goal")

    @field_validator("experience_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        return _canonical(v, EXPERIENCE_LEVELS, field_name="experience_level")

    def to_domain(self) -> UserProfile:
        return UserProfile(
            goal=self.goal,  # type: ignore[arg-type]
            experience_level=self.experience_level,  # type: ignore[arg-type]
            weight_kg=self.weight,
            height_cm=self.height,
            age=self.age,
        )


class ExerciseRecord(BaseModel):
    id: int
    name: str = ""
    muscle_group_id: int
    muscle_group_name: str
    difficulty_level: str
    equipment_required: bool = False

    @field_validator("difficulty_level", mode="before")
    @classmethod
    def normalize_difficulty(cls, v: Any) -> str:
        return _canonical(v, DIFFICULTIES, field_name="difficulty_level")

    @field_validator("muscle_group_name")
    @classmethod
    def group_name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("muscle_group_name must not be empty")
        return v

    def to_domain(self) -> Exercise:
        return Exercise(
            id=self.id,
            name=self.name or f"Exercise {self.id}",
            muscle_group_id=self.muscle_group_id,
            muscle_group_name=self.muscle_group_name,
            difficulty=self.difficulty_level,  # type: ignore[arg-type]
            equipment_required=self.equipment_required,
        )


class WorkoutRecord(BaseModel):
    """An existing workout; ``exercises`` accepts ids or ``{"id": ...}`` objects."""

    id: int
    name: str = ""
    goal: str
    experience_level: str
    exercises: list[int] = Field(default_factory=list)

    @field_validator("goal", mode="before")
    @classmethod
    def normalize_goal(cls, v: Any) -> str:
        return _canonical(v, GOALS, field_name="goal")

    @field_validator("experience_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        return _canonical(v, EXPERIENCE_LEVELS, field_name="experience_level")

    @field_validator("exercises", mode="before")
    @classmethod
    def flatten_exercises(cls, v: Any) -> Any:
        if isinstance(v, list):
            return [_exercise_id(item) for item in v]
        return v

    def to_domain(self) -> SeedWorkout:
        return SeedWorkout(
            id=self.id,
            name=self.name,
            goal=self.goal,
            experience_level=self.experience_level,
            exercise_ids=tuple(self.exercises),
        )


class HistoryExerciseRecord(BaseModel):
    muscle_group_id: int


class HistoryRecord(BaseModel):
    workout_date: datetime
    workout_id: int | None = None
    exercises: list[HistoryExerciseRecord] = Field(default_factory=list)

    def to_domain(self) -> HistoryEntry:
        workout_date = self.workout_date
        if workout_date.tzinfo is None:
            workout_date = workout_date.replace(tzinfo=timezone.utc)
        return HistoryEntry(
            workout_date=workout_date,
            muscle_group_ids=tuple(ex.muscle_group_id for ex in self.exercises),
            workout_id=self.workout_id,
        )


def history_from_records(records: list[HistoryRecord]) -> list[HistoryEntry]:
    """History entries ordered most-recent-first regardless of input order."""
    entries = [record.to_domain() for record in records]
    return sorted(entries, key=lambda entry: entry.workout_date, reverse=True)


class RecommendationRequest(BaseModel):
    """Everything one recommendation run needs, fetched up front by the caller."""

    user: UserRecord
    exercises: list[ExerciseRecord]
    workouts: list[WorkoutRecord] = Field(default_factory=list)
    history: list[HistoryRecord] = Field(default_factory=list)
    seed: int | None = None

    @field_validator("exercises")
    @classmethod
    def exercises_not_empty(cls, v: list[ExerciseRecord]) -> list[ExerciseRecord]:
        if not v:
            raise ValueError("exercises must not be empty")
        return v

    @model_validator(mode="after")
    def unique_exercise_ids(self) -> "RecommendationRequest":
        ids = [ex.id for ex in self.exercises]
        if len(ids) != len(set(ids)):
            raise ValueError("exercise ids must be unique")
        return self

    def catalog(self) -> ExerciseCatalog:
        return ExerciseCatalog(ex.to_domain() for ex in self.exercises)

    def seed_workouts(self) -> list[SeedWorkout]:
        return [workout.to_domain() for workout in self.workouts]

    def history_entries(self) -> list[HistoryEntry]:
        return history_from_records(self.history)


def validate_request(data: dict[str, Any]) -> RecommendationRequest:
    """Validate a raw request dict.

    Raises pydantic.ValidationError on invalid input.
    """
    return RecommendationRequest.model_validate(data)
