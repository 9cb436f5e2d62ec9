"""Exportación JSON del resultado.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Conserva las figuras de entrada junto al total para poder recalcularlo.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


def export_area_report_json(
    *,
    shapes: Sequence[BaseModel],
    total: float,
    output_path: Path,
    indent: int = 2,
) -> Path:
    """Exporta figuras y área total a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "shapes": [shape.model_dump(mode="json") for shape in shapes],
        "totalArea": total,
    }
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=indent, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
