"""Read-only lookup over the exercises supplied per call."""

from __future__ import annotations

from collections.abc import Iterable

from splitgen.models import Exercise, MuscleGroup


class ExerciseCatalog:
    """Immutable id → Exercise index preserving the supplied order."""

    def __init__(self, exercises: Iterable[Exercise]):
        self._exercises: dict[int, Exercise] = {}
        for ex in exercises:
            if ex.id in self._exercises:
                raise ValueError(f"Duplicate exercise id in catalog: {ex.id}")
            self._exercises[ex.id] = ex
        self._ids: tuple[int, ...] = tuple(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises

    def __iter__(self):
        return iter(self._exercises.values())

    @property
    def ids(self) -> tuple[int, ...]:
        return self._ids

    def get(self, exercise_id: int) -> Exercise | None:
        """Return the exercise, or None for ids not in the catalog."""
        return self._exercises.get(exercise_id)

    def resolve(self, exercise_ids: Iterable[int]) -> tuple[list[Exercise], int]:
        """Resolve ids to exercises.

        Returns (resolved, unresolved_count); unknown ids are skipped.
        """
        resolved: list[Exercise] = []
        missing = 0
        for ex_id in exercise_ids:
            ex = self._exercises.get(ex_id)
            if ex is None:
                missing += 1
            else:
                resolved.append(ex)
        return resolved, missing

    def in_groups(self, group_ids: Iterable[int]) -> list[Exercise]:
        """Exercises whose muscle group is one of ``group_ids``, in catalog order."""
        wanted = set(group_ids)
        return [ex for ex in self._exercises.values() if ex.muscle_group_id in wanted]

    def muscle_groups(self) -> list[MuscleGroup]:
        """Distinct muscle groups referenced by the catalog, first-seen order."""
        seen: dict[int, MuscleGroup] = {}
        for ex in self._exercises.values():
            if ex.muscle_group_id not in seen:
                seen[ex.muscle_group_id] = MuscleGroup(ex.muscle_group_id, ex.muscle_group_name)
        return list(seen.values())

