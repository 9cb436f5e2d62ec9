"""Errores del dominio.

Por qué una jerarquía propia:
- La CLI captura un único tipo base (`ShapeAreaError`) y lo traduce a exit code.
- `InvalidDimension` no hereda de `ValueError`: pydantic solo
  envuelve `ValueError`/`AssertionError` en `ValidationError`, así que este
  error llega intacto a quien construye la figura.
"""

from __future__ import annotations

from typing import Any


class ShapeAreaError(Exception):
    """Base de todos los errores del paquete."""


class InvalidDimension(ShapeAreaError):
    """Una dimensión no es un número real finito y no negativo."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid dimension {field}={value!r}: expected a finite, non-negative number"
        )


class UnknownShape(ShapeAreaError):
    """El tipo de figura no está soportado."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unknown shape kind: {kind!r}")


class ShapeParseError(ShapeAreaError):
    """Token o registro de figura mal formado."""
