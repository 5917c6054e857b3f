"""Reading entry and classification preview commands."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Optional

import typer
from rich.table import Table

from bp_cli.commands.common import get_state, open_store, print_json_payload, report_error
from bp_cli.core.analysis import reading_row
from bp_cli.core.classify import category_reference, classify_blood_pressure
from bp_cli.core.config import ConfigError, submission_delay
from bp_cli.core.intake import ValidationError, build_reading, parse_pressure_pair
from bp_cli.core.submit import ReadingSubmitter, TransientOperationError, submit_reading
from bp_cli.utils.formatting import format_pressure, format_pulse, styled_category


def _reference_table() -> Table:
    table = Table(title="Blood pressure categories")
    table.add_column("Category")
    table.add_column("Systolic / Diastolic")
    for label, ranges, style in category_reference():
        table.add_row(f"[{style}]{label}[/]", ranges)
    return table


def add_command(
    ctx: typer.Context,
    pressure: Optional[str] = typer.Argument(None, help="Pressure as SYSTOLIC/DIASTOLIC, e.g. 120/80"),
    pulse_arg: Optional[str] = typer.Argument(None, metavar="[PULSE]", help="Pulse in BPM"),
    systolic: Optional[str] = typer.Option(None, help="Systolic pressure (mmHg, 70-200)"),
    diastolic: Optional[str] = typer.Option(None, help="Diastolic pressure (mmHg, 40-130)"),
    pulse: Optional[str] = typer.Option(None, help="Pulse (BPM, 40-200)"),
    date: Optional[str] = typer.Option(None, help="Reading date YYYY-MM-DD (default: today)"),
    time: Optional[str] = typer.Option(None, help="Reading time HH:MM (default: now)"),
    notes: Optional[str] = typer.Option(None, help="Free-text notes"),
) -> None:
    """Record a new blood-pressure reading."""
    state = get_state(ctx)

    try:
        if pressure:
            systolic, diastolic = parse_pressure_pair(pressure)
        reading = build_reading(
            {
                "systolic": systolic,
                "diastolic": diastolic,
                "pulse": pulse if pulse is not None else pulse_arg,
                "date": date,
                "time": time,
                "notes": notes,
            },
            now=state.clock(),
        )
    except ValidationError as exc:
        report_error(state, f"Invalid {exc.field}: {exc.message}", field=exc.field)

    try:
        delay = submission_delay(state.config)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    submitter = ReadingSubmitter(open_store(state), delay_seconds=delay)
    status_ctx = (
        state.console.status("Saving reading...")
        if not (state.plain_output or state.json_output)
        else nullcontext()
    )
    try:
        with status_ctx:
            saved = submit_reading(submitter, reading)
    except TransientOperationError as exc:
        report_error(state, f"Failed to save reading: {exc}")

    classification = saved.classification
    payload = {"status": "saved", "reading": reading_row(saved)}

    if state.json_output:
        print_json_payload(state, payload)
        return

    if state.plain_output:
        typer.echo("status\tsaved")
        typer.echo(f"id\t{saved.id}")
        typer.echo(f"pressure\t{saved.pressure}")
        typer.echo(f"category\t{classification.category}")
        return

    state.console.print(
        f"Saved reading {format_pressure(saved.systolic, saved.diastolic)} - "
        f"{styled_category(classification.category)}"
    )
    if saved.pulse is not None:
        state.console.print(f"Pulse: {format_pulse(saved.pulse)}")


def classify_command(
    ctx: typer.Context,
    systolic: int = typer.Argument(..., help="Systolic pressure (mmHg)"),
    diastolic: int = typer.Argument(..., help="Diastolic pressure (mmHg)"),
) -> None:
    """Show the category for a pressure pair without saving it."""
    state = get_state(ctx)
    result = classify_blood_pressure(systolic, diastolic)

    if state.json_output:
        print_json_payload(
            state,
            {
                "systolic": systolic,
                "diastolic": diastolic,
                "category": result.category,
                "label": result.label,
            },
        )
        return

    if state.plain_output:
        typer.echo(f"category\t{result.category}")
        typer.echo(f"label\t{result.label}")
        return

    state.console.print(
        f"{format_pressure(systolic, diastolic)}: {styled_category(result.category)}"
    )
    state.console.print(_reference_table())
