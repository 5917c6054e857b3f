"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, List, NoReturn, Optional, Tuple

import typer

from bp_cli.core.constants import CATEGORIES
from bp_cli.core.models import Reading
from bp_cli.core.state import CLIState
from bp_cli.core.store import ReadingRepository, StorageError, open_repository
from bp_cli.utils.date_ranges import validate_date_range


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def report_error(state: CLIState, message: str, **details: Any) -> NoReturn:
    """Print an error in the active output mode and exit with code 1."""
    if state.json_output:
        print_json_payload(state, {"status": "error", "message": message, **details})
    elif state.plain_output:
        typer.echo("status\terror")
        for key, value in details.items():
            typer.echo(f"{key}\t{value}")
        typer.echo(f"message\t{message}")
    else:
        state.console.print(message, markup=False)
    raise typer.Exit(code=1)


def open_store(state: CLIState) -> ReadingRepository:
    try:
        return open_repository(state.config)
    except StorageError as exc:
        report_error(state, f"Storage error: {exc}")


def load_readings(state: CLIState) -> List[Reading]:
    """Return stored readings newest first, reporting storage failures."""
    repository = open_store(state)
    try:
        return repository.list()
    except StorageError as exc:
        report_error(state, f"Storage error: {exc}")


def validate_category(value: str) -> str:
    """Check a --category value, raising a usage error for unknown names."""
    if value != "all" and value not in CATEGORIES:
        raise typer.BadParameter(f"category must be one of: all, {', '.join(CATEGORIES)}")
    return value


def resolve_filters(state: CLIState, category: Optional[str], date_range: Optional[str]) -> Tuple[str, str]:
    """Fill unset filters from the defaults config section."""
    defaults = state.config.get("defaults", {})
    resolved_category = validate_category(category or str(defaults.get("category", "all")))
    resolved_range = validate_date_range(date_range or str(defaults.get("date_range", "all")))
    return resolved_category, resolved_range
