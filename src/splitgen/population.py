"""Chromosome sizing, split pools and initial populations.

A chromosome is a list of distinct exercise ids. Initial individuals are
seeded from existing workouts where possible and completed proportionally
from the split's primary/secondary/auxiliary pools.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

from splitgen.catalog import ExerciseCatalog
from splitgen.config import EvolutionConfig
from splitgen.models import SeedWorkout, UserProfile
from splitgen.splits import TrainingSplit

logger = logging.getLogger(__name__)

BASE_EXERCISE_COUNT: dict[str, int] = {
    "beginner": 6,
    "intermediate": 8,
    "advanced": 10,
}

# Extra exercises per goal, applied only with goal_volume_adjustment
GOAL_EXERCISE_ADJUSTMENT: dict[str, int] = {
    "hypertrophy": 1,
}


class InsufficientExercisesError(ValueError):
    """The catalog cannot supply enough distinct exercises for the split."""

    def __init__(self, split_name: str, required: int, available: int):
        self.split_name = split_name
        self.required = required
        self.available = available
        super().__init__(
            f"insufficient exercises for split {split_name!r}: "
            f"need {required}, catalog provides {available}"
        )


@dataclass(frozen=True)
class SplitPools:
    """Catalog exercise ids partitioned by their role in a split."""

    primary: tuple[int, ...]
    secondary: tuple[int, ...]
    auxiliary: tuple[int, ...]

    @property
    def union(self) -> tuple[int, ...]:
        return tuple(dict.fromkeys(self.primary + self.secondary + self.auxiliary))

    def for_role(self, role: str) -> tuple[int, ...]:
        if role == "primary":
            return self.primary
        if role == "secondary":
            return self.secondary
        return self.auxiliary


def target_exercise_count(user: UserProfile, config: EvolutionConfig | None = None) -> int:
    """Number of exercises (chromosome length) for this user."""
    count = BASE_EXERCISE_COUNT[user.experience_level]
    if config is not None and config.goal_volume_adjustment:
        count += GOAL_EXERCISE_ADJUSTMENT.get(user.goal, 0)
    return count


def split_pools(catalog: ExerciseCatalog, split: TrainingSplit) -> SplitPools:
    return SplitPools(
        primary=tuple(ex.id for ex in catalog.in_groups(split.primary_groups)),
        secondary=tuple(ex.id for ex in catalog.in_groups(split.secondary_groups)),
        auxiliary=tuple(ex.id for ex in catalog.in_groups(split.auxiliary_groups)),
    )


def tier_targets(length: int, config: EvolutionConfig) -> tuple[int, int, int]:
    """(primary, secondary, auxiliary) counts for a chromosome of ``length``.

    Primary and secondary round up; auxiliary takes whatever is left.
    """
    primary = min(length, math.ceil(length * config.primary_ratio))
    secondary = min(length - primary, math.ceil(length * config.secondary_ratio))
    return primary, secondary, length - primary - secondary


def _draw(
    chromosome: list[int],
    pool: Sequence[int],
    count: int,
    rng: random.Random,
) -> None:
    if count <= 0:
        return
    present = set(chromosome)
    candidates = [ex_id for ex_id in pool if ex_id not in present]
    chromosome.extend(rng.sample(candidates, min(count, len(candidates))))


def complete_chromosome(
    partial: Sequence[int],
    length: int,
    pools: SplitPools,
    rng: random.Random,
    config: EvolutionConfig,
) -> list[int]:
    """Fill ``partial`` up to ``length`` keeping the split proportions.

    Returns a new list. Exhausted pools spill into the union of all pools; the
    result is shorter than ``length`` only when the union itself runs out.
    """
    chromosome = list(dict.fromkeys(partial))[:length]
    primary_target, secondary_target, _ = tier_targets(length, config)

    primary_set = set(pools.primary)
    secondary_set = set(pools.secondary)
    have_primary = sum(1 for ex_id in chromosome if ex_id in primary_set)
    have_secondary = sum(1 for ex_id in chromosome if ex_id in secondary_set)

    _draw(chromosome, pools.primary, min(primary_target - have_primary, length - len(chromosome)), rng)
    _draw(chromosome, pools.secondary, min(secondary_target - have_secondary, length - len(chromosome)), rng)
    _draw(chromosome, pools.auxiliary, length - len(chromosome), rng)
    _draw(chromosome, pools.union, length - len(chromosome), rng)
    return chromosome


def relevant_seed_workouts(seed_workouts: Sequence[SeedWorkout], user: UserProfile) -> list[SeedWorkout]:
    """Existing workouts sharing the user's goal or experience level."""
    return [
        workout
        for workout in seed_workouts
        if workout.goal == user.goal or workout.experience_level == user.experience_level
    ]


def initialize_population(
    size: int,
    length: int,
    catalog: ExerciseCatalog,
    seed_workouts: Sequence[SeedWorkout],
    user: UserProfile,
    split: TrainingSplit,
    rng: random.Random,
    config: EvolutionConfig,
) -> list[list[int]]:
    """Build ``size`` chromosomes of ``length`` distinct exercise ids.

    Raises InsufficientExercisesError when the split's pools hold fewer than
    ``length`` distinct exercises.
    """
    pools = split_pools(catalog, split)
    available = len(pools.union)
    if available < length:
        raise InsufficientExercisesError(split.name, length, available)

    population: list[list[int]] = []
    split_groups = set(split.all_groups)

    for workout in relevant_seed_workouts(seed_workouts, user):
        if len(population) >= size / 2:
            break
        seed = []
        for ex_id in workout.exercise_ids:
            ex = catalog.get(ex_id)
            if ex is not None and ex.muscle_group_id in split_groups:
                seed.append(ex_id)
        chromosome = complete_chromosome(seed, length, pools, rng, config)
        if len(chromosome) == length:
            population.append(chromosome)

    seeded = len(population)
    failures = 0
    while len(population) < size:
        chromosome = complete_chromosome([], length, pools, rng, config)
        if len(chromosome) == length:
            population.append(chromosome)
            continue
        failures += 1
        if failures >= config.max_fill_attempts:
            raise InsufficientExercisesError(split.name, length, available)

    logger.info(
        "Initial population: %d individuals (%d seeded from existing workouts)",
        len(population), seeded,
    )
    return population
