"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings, get_user_env_file
from core.domain.models import ShapeModel


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Permite desactivar banner en modos no interactivos (JSON/pipelines).
    """

    title = Text("shape-area", style="bold cyan")
    subtitle = Text("SRP • OCP • Áreas de figuras", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _dimensions(shape: ShapeModel) -> str:
    data = shape.model_dump(exclude={"kind"})
    return ", ".join(f"{key}={value:g}" for key, value in data.items())


def build_shapes_table(shapes: Sequence[ShapeModel], total: float) -> Table:
    """Tabla Rich con cada figura, sus dimensiones y su área."""

    table = Table(title="Shapes", show_footer=True)
    table.add_column("#", style="dim", justify="right", footer="")
    table.add_column("Kind", style="cyan", no_wrap=True, footer="Total")
    table.add_column("Dimensions", style="white", footer="")
    table.add_column("Area", style="green", justify="right", footer=f"{total:.4f}")
    for index, shape in enumerate(shapes, start=1):
        table.add_row(str(index), shape.kind, _dimensions(shape), f"{shape.area():.4f}")
    return table


def build_settings_table(settings: AppSettings) -> Table:
    """Tabla con la configuración efectiva."""

    table = Table(title="shape-area config")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Details", style="dim")

    table.add_row("output_format", settings.output_format.value, settings.output_format.label())
    table.add_row("strategy", settings.strategy.value, "Area calculator implementation")
    table.add_row("json_indent", str(settings.json_indent), "Indent for --export files")
    table.add_row("log_level", settings.log_level, "Logging to stderr")
    table.add_row("user env file", str(get_user_env_file()), "SHAPE_AREA_* variables")
    return table
