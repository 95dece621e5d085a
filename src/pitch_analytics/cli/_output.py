from rich.console import Console
from rich.table import Table

from pitch_analytics.domain.decision import BatterDecisionReport, DecisionScore
from pitch_analytics.domain.pitch_mix import PitcherWhiffs, PitchMixSummary

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _fmt(value: float | int | None, spec: str = "") -> str:
    if value is None:
        return "—"
    return format(value, spec)


def print_pitch_mix(title: str, summary: PitchMixSummary) -> None:
    console.print(f"[bold]{title}[/bold]")
    console.print(
        f"  Pitches: {summary.total_pitches}  Strike%: {_fmt(summary.strike_pct, '.1f')}"
        f"  SwStr%: {_fmt(summary.swing_and_miss_pct, '.1f')}  Whiffs: {summary.total_whiffs}"
        f"  Arm angle: {_fmt(summary.arm_angle, '.1f')}"
    )
    if not summary.pitch_types:
        console.print("  No pitch types above the usage threshold.")
        return

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Pitch")
    table.add_column("#", justify="right")
    table.add_column("Usage", justify="right")
    table.add_column("Velo", justify="right")
    table.add_column("Spin", justify="right")
    table.add_column("HB", justify="right")
    table.add_column("IVB", justify="right")
    table.add_column("VAA", justify="right")
    table.add_column("Whiff%", justify="right")
    table.add_column("Strike%", justify="right")
    table.add_column("Ext", justify="right")
    for pt in summary.pitch_types:
        table.add_row(
            pt.name,
            str(pt.count),
            _fmt(pt.usage, ".1f"),
            _fmt(pt.velo, ".1f"),
            _fmt(pt.spin),
            _fmt(pt.h_movement, ".1f"),
            _fmt(pt.v_movement, ".1f"),
            _fmt(pt.vaa, ".2f"),
            _fmt(pt.whiff_pct, ".1f"),
            _fmt(pt.strike_pct, ".1f"),
            _fmt(pt.extension, ".1f"),
        )
    console.print(table)

    splits = Table(show_edge=False, pad_edge=False)
    splits.add_column("Pitch")
    splits.add_column("vs LHH", justify="right")
    splits.add_column("vs RHH", justify="right")
    splits.add_column("BBE", justify="right")
    splits.add_column("Barrel%", justify="right")
    for pt in summary.pitch_types:
        splits.add_row(
            pt.name,
            _fmt(pt.usage_vs_lhh, ".1f"),
            _fmt(pt.usage_vs_rhh, ".1f"),
            str(pt.batted_balls),
            _fmt(pt.barrel_pct, ".1f"),
        )
    console.print(splits)


def _score_line(label: str, score: DecisionScore) -> str:
    if not score.is_qualified:
        return f"  {label}: — (need {score.min_sample}, have {score.sample_size})"
    return f"  {label}: [bold]{score.score}[/bold] (raw {_fmt(score.raw, '.1f')}, n={score.sample_size})"


def print_decision_report(report: BatterDecisionReport) -> None:
    console.print(f"[bold]Swing decisions[/bold] for batter {report.batter_id} ({report.season})")
    console.print(_score_line("Trout+", report.trout_plus))
    console.print(_score_line("ZoneDecision+", report.zone_decision_plus))
    console.print(f"  Pitches: {report.pitch_count}  xwOBA: {_fmt(report.xwoba, '.3f')}")

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Zone", justify="right")
    table.add_column("Pitches", justify="right")
    table.add_column("Swing%", justify="right")
    table.add_column("Contact%", justify="right")
    table.add_column("xwOBA", justify="right")
    table.add_column("n", justify="right")
    for zone in report.zones:
        table.add_row(
            str(zone.zone),
            str(zone.pitches),
            _fmt(zone.swing_pct, ".1f"),
            _fmt(zone.contact_pct, ".1f"),
            _fmt(zone.xwoba, ".3f"),
            str(zone.xwoba_n),
        )
    console.print(table)


def print_game_whiffs(game_pk: int, whiffs: list[PitcherWhiffs]) -> None:
    if not whiffs:
        console.print(f"No pitchers found in game {game_pk}.")
        return
    table = Table(title=f"Whiffs — game {game_pk}", show_edge=False, pad_edge=False)
    table.add_column("Pitcher", justify="right")
    table.add_column("Pitches", justify="right")
    table.add_column("Whiffs", justify="right")
    for row in whiffs:
        table.add_row(str(row.pitcher_id), str(row.pitches), str(row.whiffs))
    console.print(table)
