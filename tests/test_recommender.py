"""End-to-end tests for the recommendation pipeline."""

import random
from datetime import datetime, timedelta, timezone

import pytest

from splitgen.config import EvolutionConfig
from splitgen.models import HistoryEntry
from splitgen.population import InsufficientExercisesError
from splitgen.recommender import recommend_from_request, recommend_workout
from splitgen.schemas import validate_request

from conftest import FIXTURE_EXERCISES, FIXTURE_WORKOUTS, make_user

AS_OF = datetime(2024, 5, 20, 18, 0, tzinfo=timezone.utc)


def _request_data(**overrides) -> dict:
    data = {
        "user": {"goal": "Hypertrophy", "experience_level": "Intermediate", "weight": 80},
        "exercises": [
            {
                "id": ex.id,
                "name": ex.name,
                "muscle_group_id": ex.muscle_group_id,
                "muscle_group_name": ex.muscle_group_name,
                "difficulty_level": ex.difficulty.capitalize(),
                "equipment_required": ex.equipment_required,
            }
            for ex in FIXTURE_EXERCISES
        ],
        "workouts": [
            {
                "id": w.id,
                "name": w.name,
                "goal": w.goal,
                "experience_level": w.experience_level,
                "exercises": [{"id": ex_id} for ex_id in w.exercise_ids],
            }
            for w in FIXTURE_WORKOUTS
        ],
        "history": [],
        "seed": 42,
    }
    data.update(overrides)
    return data


class TestRecommendWorkout:
    def test_empty_history_intermediate_hypertrophy(self, catalog, seed_workouts, user):
        rec = recommend_workout(user, catalog, seed_workouts, (), rng=random.Random(42), as_of=AS_OF)
        workout = rec.workout
        assert rec.split_index == 0
        assert workout.split_name == "Chest & Triceps"
        assert len(workout.exercises) == 8
        assert len(set(workout.exercise_ids)) == 8
        assert workout.fitness >= 0
        assert all(ex_id in catalog for ex_id in workout.exercise_ids)

    def test_history_drives_split(self, catalog, seed_workouts, user):
        history = [HistoryEntry(AS_OF - timedelta(days=1), (6, 8))]
        rec = recommend_workout(user, catalog, seed_workouts, history, rng=random.Random(1), as_of=AS_OF)
        assert rec.split_index == 3
        assert rec.split_info["name"] == "Shoulders & Core"
        assert rec.split_info["next_split_name"] == "Chest & Triceps"

    def test_algorithm_info(self, catalog, seed_workouts, user):
        rec = recommend_workout(user, catalog, seed_workouts, rng=random.Random(42), as_of=AS_OF)
        info = rec.algorithm_info
        assert info["split_detected"] == 0
        assert info["split_policy"] == "rotation"
        assert info["population_size"] == 25
        assert info["generations_run"] == rec.evolution.generations_run

    def test_reproducible_with_seed(self, catalog, seed_workouts, user):
        first = recommend_workout(user, catalog, seed_workouts, rng=random.Random(7), as_of=AS_OF)
        second = recommend_workout(user, catalog, seed_workouts, rng=random.Random(7), as_of=AS_OF)
        assert first.workout.exercise_ids == second.workout.exercise_ids

    def test_split_unaware_uses_whole_catalog(self, catalog, seed_workouts, user):
        config = EvolutionConfig(split_aware=False)
        rec = recommend_workout(user, catalog, seed_workouts, config=config, rng=random.Random(3), as_of=AS_OF)
        assert rec.workout.split_name == "Full Body"
        assert len(rec.workout.exercises) == 8

    def test_goal_volume_adjustment(self, catalog, seed_workouts, user):
        config = EvolutionConfig(goal_volume_adjustment=True)
        rec = recommend_workout(user, catalog, seed_workouts, config=config, rng=random.Random(3), as_of=AS_OF)
        assert len(rec.workout.exercises) == 9

    def test_insufficient_catalog(self, catalog, seed_workouts):
        # Back & Biceps over the fixture draws on groups 2, 4 and 7: 8 exercises
        history = [HistoryEntry(AS_OF, (1, 5))]
        with pytest.raises(InsufficientExercisesError):
            recommend_workout(
                make_user(experience_level="advanced"), catalog, seed_workouts, history,
                rng=random.Random(0), as_of=AS_OF,
            )


class TestRecommendFromRequest:
    def test_runs_from_raw_request(self):
        request = validate_request(_request_data())
        rec = recommend_from_request(request, as_of=AS_OF)
        assert len(rec.workout.exercises) == 8
        assert rec.workout.goal == "hypertrophy"

    def test_request_seed_is_reproducible(self):
        request = validate_request(_request_data(seed=11))
        first = recommend_from_request(request, as_of=AS_OF)
        second = recommend_from_request(request, as_of=AS_OF)
        assert first.workout.exercise_ids == second.workout.exercise_ids

    def test_history_from_request(self):
        history = [{"workout_date": "2024-05-19T10:00:00Z", "exercises": [{"muscle_group_id": 6}, {"muscle_group_id": 8}]}]
        request = validate_request(_request_data(history=history))
        rec = recommend_from_request(request, as_of=AS_OF)
        assert rec.split_index == 3
