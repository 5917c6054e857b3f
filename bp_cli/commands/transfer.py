"""Export and bulk import of readings."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
import yaml

from bp_cli.commands.common import (
    get_state,
    load_readings,
    open_store,
    print_json_payload,
    report_error,
    resolve_filters,
)
from bp_cli.core.analysis import build_history_report
from bp_cli.core.config import resolve_output_dir
from bp_cli.core.intake import ValidationError, build_reading
from bp_cli.core.store import StorageError
from bp_cli.exporters.csv_export import write_csv
from bp_cli.exporters.json_export import write_json_report
from bp_cli.utils.parsing import load_reading_input


def export_command(
    ctx: typer.Context,
    output_format: str = typer.Option("csv", "--format", help="Export format: csv|json"),
    output_dir: Optional[Path] = typer.Option(None, help="Output directory"),
    output_file: Optional[Path] = typer.Option(None, help="Single output file"),
    search: str = typer.Option("", help="Match notes or values such as 120/80"),
    category: Optional[str] = typer.Option(None, help="Category filter"),
    date_range: Optional[str] = typer.Option(None, "--range", help="Period: all|today|week|month"),
) -> None:
    """Export readings as CSV or JSON."""
    state = get_state(ctx)

    if output_format not in {"csv", "json"}:
        raise typer.BadParameter("--format must be csv|json")
    category, date_range = resolve_filters(state, category, date_range)

    report = build_history_report(
        load_readings(state),
        search=search,
        category=category,
        date_range=date_range,
        now=state.clock(),
    )

    out_dir = resolve_output_dir(state.config, explicit=output_dir)
    path = output_file or (out_dir / f"readings.{output_format}")
    try:
        if output_format == "csv":
            write_csv(path, report["readings"])
        else:
            write_json_report(path, report)
    except OSError as exc:
        report_error(state, f"Could not write export to {path}: {exc}")

    result = {
        "status": "exported",
        "format": output_format,
        "path": str(path),
        "count": len(report["readings"]),
    }

    if state.json_output:
        print_json_payload(state, result)
        return

    if state.plain_output:
        for key in ("status", "format", "path", "count"):
            typer.echo(f"{key}\t{result[key]}")
        return

    state.console.print(
        f"Exported {result['count']} readings as {output_format} to {path}",
        markup=False,
    )


def import_command(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, help="JSON/YAML file with reading(s)"),
    stdin: bool = typer.Option(False, "--stdin", help="Read readings from stdin"),
    dry_run: bool = typer.Option(False, help="Validate without saving"),
) -> None:
    """Import readings from a JSON or YAML file."""
    state = get_state(ctx)

    stdin_text = sys.stdin.read() if stdin else ""
    try:
        records = load_reading_input(file_path=file, read_stdin=stdin, stdin_text=stdin_text)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        report_error(state, f"Could not read input: {exc}")

    if not records:
        raise typer.BadParameter("Provide --file or --stdin with at least one reading")

    repository = None if dry_run else open_store(state)
    now = state.clock()
    results: List[Dict[str, Any]] = []

    for index, record in enumerate(records, 1):
        try:
            reading = build_reading(record, now=now)
        except ValidationError as exc:
            results.append({"row": index, "status": "rejected", "field": exc.field, "message": exc.message})
            continue

        if repository is not None:
            try:
                repository.insert(reading)
            except StorageError as exc:
                report_error(state, f"Storage error: {exc}")
        results.append(
            {
                "row": index,
                "status": "dry-run" if dry_run else "imported",
                "id": reading.id,
                "pressure": reading.pressure,
                "category": reading.category,
            }
        )

    accepted = sum(1 for item in results if item["status"] != "rejected")
    rejected = len(results) - accepted
    exit_code = 0 if accepted else 1

    if state.json_output:
        print_json_payload(state, {"accepted": accepted, "rejected": rejected, "results": results})
        raise typer.Exit(code=exit_code)

    if state.plain_output:
        typer.echo(f"accepted\t{accepted}")
        typer.echo(f"rejected\t{rejected}")
        for item in results:
            typer.echo(json.dumps(item, separators=(",", ":")))
        raise typer.Exit(code=exit_code)

    state.console.print(f"Imported {accepted} reading(s), rejected {rejected}")
    for item in results:
        if item["status"] == "rejected":
            state.console.print(f"- row {item['row']}: {item['message']}", markup=False)
    raise typer.Exit(code=exit_code)
