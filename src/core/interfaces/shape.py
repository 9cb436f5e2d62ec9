"""Contratos de figuras y fuentes de área.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Cualquier objeto con `area()` participa en la suma: se añaden figuras
  nuevas sin tocar el calculador.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Shape(Protocol):
    """Contrato mínimo de una figura.

    Reglas de diseño:
    - `area` es pura: depende solo de los atributos de la propia figura.
    - Devuelve un número real finito y no negativo.
    """

    def area(self) -> float:
        """Calcula el área de la figura."""

        ...


@runtime_checkable
class AreaSource(Protocol):
    """Algo capaz de producir un área agregada (lo que envuelve el Outputter)."""

    def sum(self) -> float:
        ...
