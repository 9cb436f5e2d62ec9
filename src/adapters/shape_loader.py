"""Carga de figuras desde fuentes externas.

Por qué está en adapters:
- Tokens de CLI y ficheros JSON son detalles de infraestructura.
- El Core solo recibe figuras ya validadas.

Formatos:
- Token: `kind:arg[,arg...]` (p.ej. `circle:2`, `triangle:10,5`).
- JSON: array de registros etiquetados (`{"kind": "circle", "radius": 2}`).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import TypeAdapter, ValidationError

from core.domain.errors import ShapeParseError, UnknownShape
from core.domain.models import SHAPE_TYPES, ShapeModel

logger = logging.getLogger(__name__)

_SHAPES_ADAPTER: TypeAdapter[list[ShapeModel]] = TypeAdapter(list[ShapeModel])

_TOKEN_FIELDS: dict[str, tuple[str, ...]] = {
    "square": ("side",),
    "circle": ("radius",),
    "triangle": ("base", "height"),
}


def parse_shape_token(token: str) -> ShapeModel:
    """Convierte un token `kind:args` en una figura.

    Errores:
    - `UnknownShape` si `kind` no existe.
    - `ShapeParseError` si faltan/sobran argumentos o no son numéricos.
    - `InvalidDimension` (desde el modelo) si el valor no es válido.
    """

    kind, sep, raw_args = token.strip().partition(":")
    kind = kind.strip().lower()
    if kind not in SHAPE_TYPES:
        raise UnknownShape(kind)
    if not sep or not raw_args.strip():
        raise ShapeParseError(f"Missing dimensions in shape token {token!r}")

    fields = _TOKEN_FIELDS[kind]
    parts = [p.strip() for p in raw_args.split(",")]
    if len(parts) != len(fields):
        raise ShapeParseError(
            f"Shape {kind!r} expects {len(fields)} dimension(s) ({', '.join(fields)}), "
            f"got {len(parts)} in {token!r}"
        )

    values: dict[str, float] = {}
    for name, part in zip(fields, parts):
        try:
            values[name] = float(part)
        except ValueError as exc:
            raise ShapeParseError(f"Dimension {name}={part!r} is not a number") from exc

    return SHAPE_TYPES[kind](**values)


def parse_shape_tokens(tokens: Iterable[str]) -> list[ShapeModel]:
    return [parse_shape_token(token) for token in tokens]


def load_shapes_json(path: Path) -> list[ShapeModel]:
    """Carga un array JSON de figuras etiquetadas por `kind`."""

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ShapeParseError(f"Invalid JSON in {path}: {exc}") from exc

    try:
        shapes = _SHAPES_ADAPTER.validate_python(raw)
    except ValidationError as exc:
        raise ShapeParseError(f"Invalid shapes file {path}: {exc}") from exc

    logger.info("Loaded %d shape(s) from %s", len(shapes), path)
    return shapes
