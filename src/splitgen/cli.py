"""CLI interface for the splitgen workout recommender."""

from __future__ import annotations

import json
import logging
import random
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from splitgen.config import EvolutionConfig, Settings
from splitgen.logging import setup_logging
from splitgen.output import recommendation_to_dict, submit_to_api, write_json
from splitgen.population import InsufficientExercisesError
from splitgen.presets import PRESET_USERS, REFERENCE_WORKOUTS, reference_catalog
from splitgen.recommender import Recommendation, recommend_from_request, recommend_workout
from splitgen.schemas import HistoryRecord, RecommendationRequest, history_from_records, validate_request
from splitgen.splits import DEFAULT_REGISTRY
from splitgen.stats import history_stats


def _load_json(path: Path) -> dict:
    try:
        with path.open() as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        click.echo(f"Error: {path} is not valid JSON: {e}", err=True)
        sys.exit(1)
    if not isinstance(data, dict):
        click.echo(f"Error: {path} must contain a JSON object.", err=True)
        sys.exit(1)
    return data


def _load_request(request_file: Path) -> RecommendationRequest:
    data = _load_json(request_file)
    try:
        return validate_request(data)
    except ValidationError as e:
        click.echo(f"Error: invalid request file:\n{e}", err=True)
        sys.exit(1)


def _echo_recommendation(recommendation: Recommendation) -> None:
    workout = recommendation.workout
    click.echo(f"{workout.name}")
    click.echo(f"  Split: {recommendation.split_info['name']}")
    click.echo(f"  Fitness: {workout.fitness:.1f}")
    click.echo(f"  Duration: {workout.estimated_duration} min")
    for idx, item in enumerate(workout.exercises, start=1):
        ex = item.exercise
        click.echo(
            f"  {idx}. {ex.name} ({ex.muscle_group_name}) - "
            f"{item.sets}x{item.repetitions} ({item.rest_time}s)"
        )
    click.echo(f"  Next: {recommendation.split_info['next_split_name']}")


@click.group()
@click.option("--log-format", type=click.Choice(["text", "json"]), default=None,
              help="Log format (defaults to SPLITGEN_LOG_FORMAT or text).")
@click.option("--verbose", "-v", is_flag=True, help="Log every generation.")
def main(log_format: str | None, verbose: bool):
    """Genetic-algorithm workout recommender."""
    settings = Settings.from_env()
    setup_logging(log_format or settings.log_format, level=logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.option(
    "--request-file",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="JSON file with user, exercises, workouts and history.",
)
@click.option("--seed", type=int, help="Random seed (overrides the request's seed).")
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write the recommendation to JSON file.")
@click.option("--api", type=str, help="Host API base URL to submit the workout to.")
@click.option("--api-key", type=str, help="API key for the host API.")
def recommend(
    request_file: Path,
    seed: int | None,
    output: Path | None,
    api: str | None,
    api_key: str | None,
):
    """Generate the next workout from a request file."""
    settings = Settings.from_env()
    api = api or settings.api_url
    api_key = api_key or settings.api_key
    if api and not api_key:
        click.echo("Error: --api-key is required when using --api.", err=True)
        sys.exit(1)

    request = _load_request(request_file)
    if seed is not None:
        request = request.model_copy(update={"seed": seed})

    try:
        recommendation = recommend_from_request(request, config=EvolutionConfig.from_env())
    except (InsufficientExercisesError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _echo_recommendation(recommendation)

    if output:
        write_json(recommendation_to_dict(recommendation), output)
        click.echo(f"Wrote recommendation to {output}")

    if api:
        result = submit_to_api(recommendation.workout, api, api_key)
        if result["errors"]:
            for err in result["errors"]:
                click.echo(f"  {err}", err=True)
            sys.exit(1)
        click.echo(f"Submitted workout to {api} (HTTP {result['status']}).")


@main.command()
@click.option("--user", "user_name", type=click.Choice(list(PRESET_USERS.keys())),
              default="intermediate_hypertrophy", show_default=True)
@click.option("--seed", type=int, default=42, show_default=True)
@click.option("--output", "-o", type=click.Path(path_type=Path), help="Write the recommendation to JSON file.")
def demo(user_name: str, seed: int, output: Path | None):
    """Run the recommender on the reference catalog."""
    recommendation = recommend_workout(
        PRESET_USERS[user_name],
        reference_catalog(),
        REFERENCE_WORKOUTS,
        (),
        config=EvolutionConfig.from_env(),
        rng=random.Random(seed),
    )
    _echo_recommendation(recommendation)
    if output:
        write_json(recommendation_to_dict(recommendation), output)
        click.echo(f"Wrote recommendation to {output}")


@main.command("splits")
def list_splits():
    """List the training split rotation."""
    for split in DEFAULT_REGISTRY:
        click.echo(f"{split.id}: {split.name}")
        click.echo(f"  Primary: {list(split.primary_groups)}")
        click.echo(f"  Secondary: {list(split.secondary_groups)}")
        click.echo(f"  Auxiliary: {list(split.auxiliary_groups)}")
        click.echo(f"  Next: {DEFAULT_REGISTRY[split.next_split].name}")
        click.echo()


@main.command()
@click.option(
    "--request-file",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="JSON file with the user's history.",
)
def stats(request_file: Path):
    """Summarize training history and the next recommended split."""
    try:
        records = [HistoryRecord.model_validate(item) for item in _load_json(request_file).get("history", [])]
    except ValidationError as e:
        click.echo(f"Error: invalid history:\n{e}", err=True)
        sys.exit(1)
    config = EvolutionConfig.from_env()
    summary = history_stats(history_from_records(records), DEFAULT_REGISTRY, policy=config.split_policy)
    for key, value in summary.items():
        click.echo(f"{key}: {value}")
