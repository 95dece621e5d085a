import datetime
import logging
import time
from pathlib import Path
from typing import Annotated

import typer

from pitch_analytics.cli._logging import configure_logging
from pitch_analytics.cli._output import (
    console,
    print_decision_report,
    print_error,
    print_game_whiffs,
    print_pitch_mix,
)
from pitch_analytics.cli.factory import build_feed_source
from pitch_analytics.config import load_feed_settings
from pitch_analytics.services.batter_decisions import BatterDecisionService
from pitch_analytics.services.daily_whiffs import DailyWhiffService
from pitch_analytics.services.pitcher_day import PitcherDayService

logger = logging.getLogger(__name__)

app = typer.Typer(name="pitch-analytics", help="Pitch mix and swing-decision analytics from Baseball Savant feeds")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only log warnings and errors")] = False,
    log_file: Annotated[Path | None, typer.Option("--log-file", help="Also write DEBUG logs to this file")] = None,
) -> None:
    """Pitch mix and swing-decision analytics from Baseball Savant feeds."""
    configure_logging(verbose=verbose, quiet=quiet, log_file=log_file)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_PlayerIdOpt = Annotated[int, typer.Option("--player-id", help="MLBAM player id")]
_SeasonOpt = Annotated[int | None, typer.Option("--season", help="Season year (defaults to season.default)")]
_ThrowsOpt = Annotated[str | None, typer.Option("--throws", help="Pitcher handedness, L or R")]


@app.command("pitcher-day")
def pitcher_day(
    player_id: _PlayerIdOpt,
    date: Annotated[datetime.datetime, typer.Option("--date", formats=["%Y-%m-%d"], help="Game date")],
    game_pk: Annotated[int | None, typer.Option("--game-pk", help="Game to read from the live feed")] = None,
    throws: _ThrowsOpt = None,
) -> None:
    """Per-pitch-type aggregates for one pitcher on one date."""
    day = date.date()
    with build_feed_source() as source:
        summary = PitcherDayService(source).pitch_mix(player_id, day, game_pk=game_pk, throws=throws)
    if summary is None:
        print_error(f"no pitches found for pitcher {player_id} on {day.isoformat()}")
        raise typer.Exit(code=1)
    print_pitch_mix(f"Pitcher {player_id} — {day.isoformat()}", summary)


@app.command("pitcher-season")
def pitcher_season(player_id: _PlayerIdOpt, season: _SeasonOpt = None, throws: _ThrowsOpt = None) -> None:
    """Per-pitch-type aggregates for one pitcher over a season."""
    settings = load_feed_settings()
    year = season or settings.default_season
    with build_feed_source(settings) as source:
        summary = PitcherDayService(source).season_pitch_mix(player_id, year, throws=throws)
    if summary is None:
        print_error(f"no pitches found for pitcher {player_id} in {year}")
        raise typer.Exit(code=1)
    print_pitch_mix(f"Pitcher {player_id} — {year}", summary)


@app.command("batter-decisions")
def batter_decisions(
    player_id: Annotated[list[int], typer.Option("--player-id", help="MLBAM batter id (repeatable)")],
    season: _SeasonOpt = None,
) -> None:
    """Trout+ and ZoneDecision+ for one or more batters."""
    settings = load_feed_settings()
    year = season or settings.default_season
    failures = 0
    with build_feed_source(settings) as source:
        service = BatterDecisionService(source)
        for i, batter_id in enumerate(player_id):
            if i > 0 and settings.delay_seconds > 0:
                time.sleep(settings.delay_seconds)
            report = service.season_report(batter_id, year)
            if report is None:
                print_error(f"could not load pitches for batter {batter_id} in {year}")
                failures += 1
                continue
            print_decision_report(report)
    if failures == len(player_id):
        raise typer.Exit(code=1)
    if failures:
        logger.info("%d of %d batters failed", failures, len(player_id))


@app.command("game-whiffs")
def game_whiffs(game_pk: Annotated[int, typer.Option("--game-pk", help="Game to read from the live feed")]) -> None:
    """Swinging-strike counts per pitcher for one game."""
    with build_feed_source() as source:
        whiffs = DailyWhiffService(source).game_whiffs(game_pk)
    if whiffs is None:
        print_error(f"game feed unavailable for game {game_pk}")
        raise typer.Exit(code=1)
    print_game_whiffs(game_pk, whiffs)
    console.print(f"Total whiffs: {sum(w.whiffs for w in whiffs)}")
