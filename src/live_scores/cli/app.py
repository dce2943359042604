from __future__ import annotations

import asyncio
import json

import typer

from live_scores.core.config import settings
from live_scores.core.logging import configure_logging
from live_scores.ingestion.providers.base.errors import ProviderCapabilityError
from live_scores.models.game import Game
from live_scores.models.serialize import scores_to_dict, team_to_dict
from live_scores.models.sport import ALL_SPORTS, InvalidSportType, Sport
from live_scores.service.bootstrap import open_score_cache
from live_scores.service.cache import SportUnavailableError
from live_scores.teams.resolver import TeamResolver
from live_scores.teams.tables import load_team_tables

app = typer.Typer(no_args_is_help=True, help="Live scores across sports and providers.")


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (e.g. DEBUG, INFO)."
    ),
) -> None:
    configure_logging(log_level)


def _parse_sports(tokens: list[str]) -> list[Sport]:
    try:
        return [Sport.parse(token) for token in tokens]
    except InvalidSportType as e:
        valid = ", ".join(str(s) for s in ALL_SPORTS)
        raise typer.BadParameter(f"{e.token!r} is not one of: {valid}") from e


async def _fetch_scores(sports: list[Sport]) -> dict[Sport, list[Game]]:
    async with open_score_cache(settings) as cache:
        return await cache.get(sports)


@app.command("scores")
def scores_cmd(
    sports: list[str] | None = typer.Argument(
        None, help="Sport tokens (e.g. hockey college-football). Defaults to every sport."
    ),
) -> None:
    """Fetch current games and print them as JSON keyed by sport."""

    selected = _parse_sports(sports) if sports else list(ALL_SPORTS)

    try:
        scores = asyncio.run(_fetch_scores(selected))
    except SportUnavailableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps(scores_to_dict(scores), indent=2))


@app.command("teams")
def teams_cmd(
    sport: str = typer.Argument(..., help="Sport token (e.g. hockey, college-basketball)."),
) -> None:
    """Print the static team table used for a sport."""

    (parsed,) = _parse_sports([sport])
    resolver = TeamResolver(load_team_tables())
    try:
        teams = resolver.teams_for(parsed)
    except ProviderCapabilityError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(json.dumps([team_to_dict(t) for t in teams], indent=2))


@app.command("sports")
def sports_cmd() -> None:
    """List the supported sport tokens."""

    for sport in ALL_SPORTS:
        typer.echo(str(sport))
