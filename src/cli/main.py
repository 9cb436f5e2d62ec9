"""CLI principal (Typer).

Por qué Typer:
- Tipado de opciones/argumentos sin parsers manuales.
- Subcomandos (`config`) montados como apps independientes.

La salida calculada va a stdout; tablas, avisos y errores van a stderr.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_area_report_json
from adapters.logging_setup import configure_logging
from adapters.outputter import Outputter
from cli import config_cmd
from cli.ui_components import build_shapes_table, print_banner
from core.config import AppSettings
from core.domain.errors import ShapeAreaError
from core.domain.models import Circle, Square, Triangle
from core.domain.output_format import OutputFormat, Strategy
from core.services.area_pipeline import (
    AreaRequest,
    PipelineHooks,
    build_calculator,
    run_area_pipeline,
)
from core.services.type_switch import TypeSwitchAreaCalculator

app = typer.Typer(
    no_args_is_help=True,
    help="Sum the areas of squares, circles and triangles.",
)
app.add_typer(config_cmd.app, name="config")

_err_console = Console(stderr=True)


class DemoName(str, Enum):
    SRP = "srp"
    OCP = "ocp"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command(name="sum")
def sum_command(
    tokens: Optional[List[str]] = typer.Argument(
        None,
        help="Shapes as kind:dims, e.g. square:3 circle:2 triangle:10,5.",
        show_default=False,
    ),
    shapes_file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-i",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON array of shapes ({\"kind\": \"circle\", \"radius\": 2}).",
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None, "--format", "-f", help="Output format (default from config)."
    ),
    strategy: Optional[Strategy] = typer.Option(
        None, "--strategy", "-s", help="Area calculator implementation."
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", "-o", help="Also write shapes and total to a JSON file."
    ),
    details: bool = typer.Option(
        False, "--details", help="Show a table of shapes and areas on stderr."
    ),
) -> None:
    """Print the sum of the areas of the given shapes."""

    settings = AppSettings()
    hooks = PipelineHooks(warning=lambda msg: _err_console.print(f"[yellow]{msg}[/yellow]"))
    request = AreaRequest(tokens=tokens or [], shapes_file=shapes_file, strategy=strategy)

    try:
        result = run_area_pipeline(settings=settings, request=request, hooks=hooks)
    except ShapeAreaError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2) from exc

    if details:
        print_banner(_err_console)
        _err_console.print(build_shapes_table(result.shapes, result.total))

    outputter = Outputter(result.calculator)
    typer.echo(outputter.render(output_format or settings.output_format))

    if export is not None:
        path = export_area_report_json(
            shapes=result.shapes,
            total=result.total,
            output_path=export,
            indent=settings.json_indent,
        )
        _err_console.print(f"[green]Exported:[/green] {path}")


@app.command()
def demo(
    name: DemoName = typer.Argument(..., help="Which example to run."),
    strategy: Strategy = typer.Option(
        Strategy.POLYMORPHIC, "--strategy", "-s", help="Area calculator implementation."
    ),
) -> None:
    """Run one of the two classic examples."""

    if name is DemoName.SRP:
        shapes = [Circle(2), Square(3), Circle(4)]
        if strategy is Strategy.TYPE_SWITCH:
            # Computation and formatting in one class.
            typer.echo(TypeSwitchAreaCalculator(shapes).output())
            return
        outputter = Outputter(build_calculator(strategy, shapes))
        typer.echo(outputter.to_text())
        typer.echo(outputter.to_json())
        return

    shapes = [Square(10), Circle(5), Triangle(10, 5)]
    typer.echo(str(build_calculator(strategy, shapes).sum()))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
