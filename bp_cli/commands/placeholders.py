"""Views that are not built yet."""

from __future__ import annotations

from typing import Callable

import typer

from bp_cli.commands.common import get_state, print_json_payload
from bp_cli.core.constants import PLACEHOLDER_VIEWS


def make_placeholder_command(name: str) -> Callable[[typer.Context], None]:
    title, description = PLACEHOLDER_VIEWS[name]

    def placeholder_command(ctx: typer.Context) -> None:
        state = get_state(ctx)
        if state.json_output:
            print_json_payload(state, {"view": name, "status": "coming-soon", "description": description})
            return
        if state.plain_output:
            typer.echo(f"view\t{name}")
            typer.echo("status\tcoming-soon")
            return
        state.console.print(f"[bold]{title}[/]: coming soon. {description}")

    placeholder_command.__doc__ = f"{title} view (coming soon)."
    return placeholder_command
