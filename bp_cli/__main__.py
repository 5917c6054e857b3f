"""Entry point for bp-cli."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from bp_cli import __version__
from bp_cli.commands.add import add_command, classify_command
from bp_cli.commands.history import dashboard_command, history_command
from bp_cli.commands.placeholders import make_placeholder_command
from bp_cli.commands.transfer import export_command, import_command
from bp_cli.core.config import ConfigError, default_config_path, load_config
from bp_cli.core.constants import PLACEHOLDER_VIEWS
from bp_cli.core.state import CLIState
from bp_cli.utils.logging_setup import setup_logging

app = typer.Typer(
    add_completion=False,
    help="Blood pressure and pulse tracker",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Record and review blood pressure readings."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    setup_logging(verbose=verbose, quiet=quiet)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    ctx.obj = CLIState(
        json_output=json_output,
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=Console(quiet=quiet, no_color=plain_output),
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


app.command("dashboard")(dashboard_command)
app.command("add")(add_command)
app.command("classify")(classify_command)
app.command("history")(history_command)
app.command("export")(export_command)
app.command("import")(import_command)
for _view in PLACEHOLDER_VIEWS:
    app.command(_view)(make_placeholder_command(_view))


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
