"""Generational loop over workout chromosomes.

Each generation is scored, the top individuals are carried over unchanged,
and the rest of the next generation is bred by tournament selection,
two-point crossover and split-aware mutation. The loop stops early once the
best fitness stops improving.

All randomness flows through the ``random.Random`` given to the engine, so a
seeded generator reproduces a run exactly.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field

from splitgen.catalog import ExerciseCatalog
from splitgen.config import EvolutionConfig
from splitgen.fitness import score
from splitgen.models import SeedWorkout, UserProfile
from splitgen.population import (
    SplitPools,
    initialize_population,
    split_pools,
    target_exercise_count,
)
from splitgen.splits import TrainingSplit

logger = logging.getLogger(__name__)


@dataclass
class EvolutionResult:
    chromosome: list[int]
    fitness: float
    best_history: list[float] = field(default_factory=list)
    generations_run: int = 0
    converged: bool = False


def tournament_select(
    population: Sequence[Sequence[int]],
    scores: Sequence[float],
    tournament_size: int,
    rng: random.Random,
) -> list[int]:
    """Return a copy of the fittest of ``tournament_size`` distinct individuals."""
    contenders = rng.sample(range(len(population)), min(tournament_size, len(population)))
    winner = contenders[0]
    for index in contenders[1:]:
        if scores[index] > scores[winner]:
            winner = index
    return list(population[winner])


def crossover(
    parent1: Sequence[int],
    parent2: Sequence[int],
    catalog: ExerciseCatalog,
    rng: random.Random,
) -> list[int]:
    """Two-point crossover returning a duplicate-free child of the parents' length."""
    length = len(parent1)
    if length < 3:
        return list(parent1)

    point1 = rng.randint(1, length - 2)
    # point2 may equal point1, in which case the child starts as a copy of parent1
    point2 = rng.randint(point1, length - 1)
    spliced = list(parent1[:point1]) + list(parent2[point1:point2]) + list(parent1[point2:])
    child = list(dict.fromkeys(spliced))

    spare = [gene for gene in dict.fromkeys(list(parent1) + list(parent2)) if gene not in child]
    while len(child) < length and spare:
        child.append(spare.pop(rng.randrange(len(spare))))

    if len(child) < length:
        present = set(child)
        fallback = [ex_id for ex_id in catalog.ids if ex_id not in present]
        child.extend(rng.sample(fallback, min(length - len(child), len(fallback))))
    return child


def mutate(
    chromosome: Sequence[int],
    catalog: ExerciseCatalog,
    split: TrainingSplit,
    pools: SplitPools,
    rng: random.Random,
    max_mutations: int = 3,
) -> list[int]:
    """Apply 1..max_mutations point mutations and return the mutated copy.

    A gene is replaced by another exercise from the same split role that is
    not already present; when no such exercise exists the attempt is a no-op.
    """
    child = list(chromosome)
    if not child:
        return child
    for _ in range(rng.randint(1, max_mutations)):
        position = rng.randrange(len(child))
        current = catalog.get(child[position])
        if current is None:
            continue
        role = split.role_of(current.muscle_group_id)
        present = set(child)
        candidates = [ex_id for ex_id in pools.for_role(role) if ex_id not in present]
        if candidates:
            child[position] = rng.choice(candidates)
    return child


def has_converged(best_history: Sequence[float], window: int, min_improvement: float) -> bool:
    """True when the best of the last ``window`` generations barely beats the window before."""
    if len(best_history) <= window:
        return False
    recent = max(best_history[-window:])
    older = best_history[-2 * window:-window]
    return recent - max(older) < min_improvement


class EvolutionEngine:
    """Genetic search for the best workout chromosome."""

    def __init__(self, config: EvolutionConfig | None = None, rng: random.Random | None = None):
        self.config = config or EvolutionConfig()
        self.rng = rng or random.Random()

    def evolve(
        self,
        user: UserProfile,
        catalog: ExerciseCatalog,
        seed_workouts: Sequence[SeedWorkout],
        split: TrainingSplit,
    ) -> EvolutionResult:
        """Run the generational loop and return the best final chromosome.

        Raises InsufficientExercisesError (from population setup) when the
        split cannot fill a chromosome.
        """
        cfg = self.config
        length = target_exercise_count(user, cfg)
        pools = split_pools(catalog, split)

        logger.info(
            "Genetic search started: population=%d generations=%d exercises=%d split=%s",
            cfg.population_size, cfg.max_generations, length, split.name,
            extra={"splitgen_split": split.name},
        )

        population = initialize_population(
            cfg.population_size, length, catalog, seed_workouts, user, split, self.rng, cfg,
        )

        best_history: list[float] = []
        converged = False
        generation = 0
        for generation in range(cfg.max_generations):
            scores = [score(individual, user, catalog, split) for individual in population]
            best = max(scores)
            best_history.append(best)

            # sorted() is stable, so equal scores keep population order
            ranked = sorted(range(len(population)), key=lambda i: scores[i], reverse=True)
            next_population = [list(population[i]) for i in ranked[:cfg.elitism]]

            while len(next_population) < cfg.population_size:
                parent1 = tournament_select(population, scores, cfg.tournament_size, self.rng)
                parent2 = tournament_select(population, scores, cfg.tournament_size, self.rng)

                if self.rng.random() < cfg.crossover_rate:
                    child = crossover(parent1, parent2, catalog, self.rng)
                else:
                    child = list(self.rng.choice((parent1, parent2)))

                if self.rng.random() < cfg.mutation_rate:
                    child = mutate(child, catalog, split, pools, self.rng, cfg.max_mutations)

                next_population.append(child)

            population = next_population

            logger.debug(
                "Generation %d: best=%.2f mean=%.2f",
                generation + 1, best, sum(scores) / len(scores),
                extra={"splitgen_generation": generation + 1, "splitgen_best_fitness": best},
            )

            if generation >= cfg.convergence_window and has_converged(
                best_history, cfg.convergence_window, cfg.min_improvement,
            ):
                converged = True
                logger.info("Converged at generation %d", generation + 1)
                break

        final_scores = [score(individual, user, catalog, split) for individual in population]
        best_index = final_scores.index(max(final_scores))

        logger.info(
            "Genetic search finished: fitness=%.2f after %d generations",
            final_scores[best_index], generation + 1,
            extra={"splitgen_best_fitness": final_scores[best_index]},
        )
        return EvolutionResult(
            chromosome=list(population[best_index]),
            fitness=final_scores[best_index],
            best_history=best_history,
            generations_run=generation + 1,
            converged=converged,
        )
