"""Config commands: inspect and persist defaults."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import AppSettings, write_user_env_vars
from core.domain.output_format import OutputFormat, Strategy

app = typer.Typer(no_args_is_help=True, help="Show or change default settings.")

_console = Console()


@app.command()
def show() -> None:
    """Show the effective configuration (env vars + .env files)."""

    _console.print(build_settings_table(AppSettings()))


@app.command(name="set")
def set_defaults(
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Default output format."
    ),
    strategy: Optional[Strategy] = typer.Option(
        None, "--strategy", "-s", help="Default area calculator."
    ),
) -> None:
    """Store defaults in the user config .env."""

    values: dict[str, str] = {}
    if output_format is not None:
        values["SHAPE_AREA_OUTPUT_FORMAT"] = output_format.value
    if strategy is not None:
        values["SHAPE_AREA_STRATEGY"] = strategy.value
    if not values:
        raise typer.BadParameter("Pass at least one of --format or --strategy")

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved config to:[/green] {env_path}")
