import os
from dataclasses import dataclass

SPLIT_POLICIES: tuple[str, ...] = ("rotation", "recency")


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class EvolutionConfig:
    population_size: int = 25
    max_generations: int = 20
    mutation_rate: float = 0.15
    crossover_rate: float = 0.75
    tournament_size: int = 4
    elitism: int = 2
    convergence_window: int = 5
    min_improvement: float = 1.0
    max_mutations: int = 3
    primary_ratio: float = 0.6
    secondary_ratio: float = 0.3
    max_fill_attempts: int = 50
    split_aware: bool = True
    split_policy: str = "rotation"
    goal_volume_adjustment: bool = False

    def __post_init__(self) -> None:
        if self.population_size < 2:
            raise ValueError("population_size must be at least 2")
        if self.max_generations < 1:
            raise ValueError("max_generations must be at least 1")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be within [0, 1]")
        if not 0.0 <= self.crossover_rate <= 1.0:
            raise ValueError("crossover_rate must be within [0, 1]")
        if not 1 <= self.tournament_size <= self.population_size:
            raise ValueError("tournament_size must be between 1 and population_size")
        if not 0 <= self.elitism < self.population_size:
            raise ValueError("elitism must be smaller than population_size")
        if self.max_mutations < 1:
            raise ValueError("max_mutations must be at least 1")
        if self.primary_ratio < 0 or self.secondary_ratio < 0:
            raise ValueError("fill ratios must not be negative")
        if self.primary_ratio + self.secondary_ratio > 1.0:
            raise ValueError("primary_ratio + secondary_ratio must not exceed 1")
        if self.split_policy not in SPLIT_POLICIES:
            raise ValueError(
                f"split_policy must be one of: {', '.join(SPLIT_POLICIES)}"
            )

    @classmethod
    def from_env(cls) -> "EvolutionConfig":
        return cls(
            population_size=int(os.environ.get("SPLITGEN_POPULATION_SIZE", "25")),
            max_generations=int(os.environ.get("SPLITGEN_MAX_GENERATIONS", "20")),
            mutation_rate=float(os.environ.get("SPLITGEN_MUTATION_RATE", "0.15")),
            crossover_rate=float(os.environ.get("SPLITGEN_CROSSOVER_RATE", "0.75")),
            tournament_size=int(os.environ.get("SPLITGEN_TOURNAMENT_SIZE", "4")),
            elitism=int(os.environ.get("SPLITGEN_ELITISM", "2")),
            split_aware=_env_bool("SPLITGEN_SPLIT_AWARE", "true"),
            split_policy=os.environ.get("SPLITGEN_SPLIT_POLICY", "rotation"),
            goal_volume_adjustment=_env_bool("SPLITGEN_GOAL_VOLUME", "false"),
        )


@dataclass(frozen=True)
class Settings:
    log_format: str = "text"
    api_url: str | None = None
    api_key: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_format=os.environ.get("SPLITGEN_LOG_FORMAT", "text"),
            api_url=os.environ.get("SPLITGEN_API_URL") or None,
            api_key=os.environ.get("SPLITGEN_API_KEY") or None,
        )
