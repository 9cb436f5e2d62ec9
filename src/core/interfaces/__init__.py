"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan figuras y calculadores.
- Permite invertir dependencias: los adaptadores dependen de abstracciones.
"""

from core.interfaces.shape import AreaSource, Shape

__all__ = ["AreaSource", "Shape"]
