"""Reading history and dashboard commands."""

from __future__ import annotations

from typing import Any, Dict, Optional

import typer
from rich.table import Table

from bp_cli.commands.common import (
    get_state,
    load_readings,
    print_json_payload,
    resolve_filters,
)
from bp_cli.core.analysis import build_dashboard_summary, build_history_report
from bp_cli.utils.formatting import (
    format_pressure,
    format_pulse,
    format_trend,
    reading_line,
    styled_category,
)


def _stats_line(stats: Dict[str, Any]) -> str:
    return (
        f"Total: {stats['total']}  Normal: {stats['normal']}  "
        f"Elevated: {stats['elevated']}  High: {stats['high']}"
    )


def history_command(
    ctx: typer.Context,
    search: str = typer.Option("", help="Match notes or values such as 120/80"),
    category: Optional[str] = typer.Option(None, help="Category filter: all|normal|elevated|high-stage-1|high-stage-2|crisis"),
    date_range: Optional[str] = typer.Option(None, "--range", help="Period: all|today|week|month"),
    limit: Optional[int] = typer.Option(None, min=1, help="Show at most N readings"),
) -> None:
    """List past readings with filters, category counts and trends."""
    state = get_state(ctx)
    category, date_range = resolve_filters(state, category, date_range)

    report = build_history_report(
        load_readings(state),
        search=search,
        category=category,
        date_range=date_range,
        now=state.clock(),
    )
    if limit is not None:
        report["readings"] = report["readings"][:limit]
    rows = report["readings"]

    if state.json_output:
        print_json_payload(state, report)
        return

    if state.plain_output:
        typer.echo("date\ttime\tpressure\tpulse\tcategory\ttrend\tnotes")
        for row in rows:
            typer.echo(reading_line(row))
        for key, value in report["stats"].items():
            typer.echo(f"{key}\t{value}")
        return

    state.console.print(_stats_line(report["stats"]))
    if not rows:
        state.console.print("No readings match the selected filters.")
        return

    table = Table(title=f"Readings ({len(rows)} of {report['stats']['total']})")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Pressure")
    table.add_column("Pulse")
    table.add_column("Category")
    table.add_column("Trend")
    table.add_column("Notes")
    for row in rows:
        table.add_row(
            row["date"],
            row["time"],
            format_pressure(row["systolic"], row["diastolic"]),
            format_pulse(row["pulse"]),
            styled_category(row["category"]),
            format_trend(row["trend"]),
            row["notes"] or "-",
        )
    state.console.print(table)


def dashboard_command(ctx: typer.Context) -> None:
    """Overview: latest reading, averages and recent readings."""
    state = get_state(ctx)
    dashboard_cfg = state.config.get("dashboard", {})
    summary = build_dashboard_summary(
        load_readings(state),
        recent_count=int(dashboard_cfg.get("recent_count", 5)),
        average_window=int(dashboard_cfg.get("average_window", 7)),
    )

    if state.json_output:
        print_json_payload(state, summary)
        return

    latest = summary["latest"]
    averages = summary["averages"]

    if state.plain_output:
        if latest:
            typer.echo(f"latest\t{latest['systolic']}/{latest['diastolic']}\t{latest['category']}")
        if averages:
            typer.echo(f"average\t{averages['systolic']}/{averages['diastolic']}")
            typer.echo(f"average_pulse\t{averages['pulse'] if averages['pulse'] is not None else '-'}")
        typer.echo(f"total\t{summary['stats']['total']}")
        return

    if not latest:
        state.console.print("No readings recorded yet. Add one with: bp add 120/80")
        return

    state.console.print(
        f"Latest reading: {format_pressure(latest['systolic'], latest['diastolic'])} "
        f"{styled_category(latest['category'])} ({latest['date']} {latest['time']})"
    )
    if averages:
        state.console.print(
            f"Average of last {averages['count']}: "
            f"{format_pressure(averages['systolic'], averages['diastolic'])}, "
            f"pulse {format_pulse(averages['pulse'])}"
        )

    table = Table(title="Recent readings")
    table.add_column("Date")
    table.add_column("Time")
    table.add_column("Pressure")
    table.add_column("Category")
    for row in summary["recent"]:
        table.add_row(
            row["date"],
            row["time"],
            format_pressure(row["systolic"], row["diastolic"]),
            styled_category(row["category"]),
        )
    state.console.print(table)
