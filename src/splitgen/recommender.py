"""Recommendation pipeline: pick the split, evolve, materialize."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from splitgen.catalog import ExerciseCatalog
from splitgen.config import EvolutionConfig
from splitgen.evolution import EvolutionEngine, EvolutionResult
from splitgen.materializer import build_workout
from splitgen.models import GeneratedWorkout, HistoryEntry, SeedWorkout, UserProfile
from splitgen.schemas import RecommendationRequest
from splitgen.split_recommender import recommend_split
from splitgen.splits import DEFAULT_REGISTRY, SplitRegistry, split_info, whole_body_split

logger = logging.getLogger(__name__)


@dataclass
class Recommendation:
    workout: GeneratedWorkout
    split_index: int
    split_info: dict
    evolution: EvolutionResult
    algorithm_info: dict = field(default_factory=dict)


def recommend_workout(
    user: UserProfile,
    catalog: ExerciseCatalog,
    seed_workouts: Sequence[SeedWorkout] = (),
    history: Sequence[HistoryEntry] = (),
    *,
    registry: SplitRegistry = DEFAULT_REGISTRY,
    config: EvolutionConfig | None = None,
    rng: random.Random | None = None,
    as_of: datetime | None = None,
) -> Recommendation:
    """Generate the next workout for ``user``.

    ``history`` is ordered most-recent-first. Raises
    InsufficientExercisesError when the catalog cannot fill the workout.
    """
    config = config or EvolutionConfig()
    split_index = recommend_split(history, registry, as_of=as_of, policy=config.split_policy)

    if config.split_aware:
        split = registry[split_index]
        info = split_info(registry, split_index)
    else:
        split = whole_body_split(group.id for group in catalog.muscle_groups())
        info = {
            "id": split.id,
            "name": split.name,
            "description": split.description,
            "next_split_name": split.name,
            "sequence_info": "Split rotation is disabled; every workout targets the whole body.",
        }

    logger.info(
        "Selected split: %s (index %d)", split.name, split_index,
        extra={"splitgen_split": split.name},
    )

    engine = EvolutionEngine(config, rng)
    result = engine.evolve(user, catalog, seed_workouts, split)
    workout = build_workout(result.chromosome, user, catalog, split, fitness=result.fitness)

    logger.info(
        "Workout generated: %s with %d exercises", workout.name, len(workout.exercises),
        extra={"splitgen_best_fitness": result.fitness},
    )
    return Recommendation(
        workout=workout,
        split_index=split_index,
        split_info=info,
        evolution=result,
        algorithm_info={
            "split_detected": split_index,
            "split_policy": config.split_policy,
            "population_size": config.population_size,
            "max_generations": config.max_generations,
            "generations_run": result.generations_run,
            "converged": result.converged,
            "fitness": result.fitness,
        },
    )


def recommend_from_request(
    request: RecommendationRequest,
    *,
    registry: SplitRegistry = DEFAULT_REGISTRY,
    config: EvolutionConfig | None = None,
    as_of: datetime | None = None,
) -> Recommendation:
    """Run the pipeline on a validated request; ``request.seed`` fixes the RNG."""
    rng = random.Random(request.seed) if request.seed is not None else random.Random()
    return recommend_workout(
        request.user.to_domain(),
        request.catalog(),
        request.seed_workouts(),
        request.history_entries(),
        registry=registry,
        config=config,
        rng=rng,
        as_of=as_of,
    )
