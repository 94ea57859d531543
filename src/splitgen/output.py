"""Output handlers: JSON file and hand-off to the host API.

The recommender produces a GeneratedWorkout. The host application persists it
as one workout row plus join rows:
    {"workout": {...}, "workout_exercises": [{"exercise_id", "sets", "repetitions", "rest_time"}]}

to_persistence_rows() handles the conversion.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any

import httpx

from splitgen.models import GeneratedWorkout
from splitgen.recommender import Recommendation


def workout_to_dict(workout: GeneratedWorkout) -> dict[str, Any]:
    """JSON-ready representation including exercise details."""
    return {
        "name": workout.name,
        "description": workout.description,
        "goal": workout.goal,
        "experience_level": workout.experience_level,
        "estimated_duration": workout.estimated_duration,
        "split": {"id": workout.split_id, "name": workout.split_name},
        "fitness": round(workout.fitness, 2),
        "chromosome": list(workout.chromosome),
        "exercises": [
            {
                "exercise_id": item.exercise.id,
                "name": item.exercise.name,
                "muscle_group": item.exercise.muscle_group_name,
                "difficulty": item.exercise.difficulty,
                "sets": item.sets,
                "repetitions": item.repetitions,
                "rest_time": item.rest_time,
            }
            for item in workout.exercises
        ],
    }


def to_persistence_rows(workout: GeneratedWorkout) -> dict[str, Any]:
    """Convert a workout to the host's workout + join-table row format."""
    return {
        "workout": {
            "name": workout.name,
            "description": workout.description,
            "goal": workout.goal,
            "experience_level": workout.experience_level,
            "estimated_duration": workout.estimated_duration,
        },
        "workout_exercises": [
            {
                "exercise_id": item.exercise.id,
                "sets": item.sets,
                "repetitions": item.repetitions,
                "rest_time": item.rest_time,
            }
            for item in workout.exercises
        ],
    }


def recommendation_to_dict(recommendation: Recommendation) -> dict[str, Any]:
    return {
        "workout": workout_to_dict(recommendation.workout),
        "split_info": recommendation.split_info,
        "algorithm_info": recommendation.algorithm_info,
    }


def write_json(payload: Any, output_path: str | Path) -> Path:
    """Write a payload to a JSON file and return the path."""
    path = Path(output_path)
    with path.open("w") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def submit_to_api(
    workout: GeneratedWorkout,
    base_url: str,
    api_key: str,
    *,
    path: str = "/v1/workouts",
    max_attempts: int = 5,
) -> dict[str, Any]:
    """POST the persistence rows to the host API.

    Returns summary: {"status": HTTP status or None, "body": parsed body, "errors": [...]}
    """
    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = to_persistence_rows(workout)
    errors: list[str] = []
    status: int | None = None
    body: Any = None

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        for attempt in range(max_attempts):
            try:
                resp = client.post(path, json=payload, headers=headers)
            except httpx.HTTPError as e:
                if attempt == max_attempts - 1:
                    errors.append(str(e))
                time.sleep(1.0)
                continue
            status = resp.status_code
            if status == 429:
                time.sleep(1.0 * (attempt + 1))
                continue
            if status not in (200, 201):
                errors.append(f"HTTP {status}: {resp.text[:200]}")
            else:
                body = resp.json()
            break

    if status == 429:
        errors.append(f"HTTP 429: rate limited after {max_attempts} attempts")

    return {"status": status, "body": body, "errors": errors}
