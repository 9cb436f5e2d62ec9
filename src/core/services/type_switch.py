"""Type-switching area calculator.

Kept side by side with `AreaCalculator` to show what the polymorphic design
removes: this class has to know every concrete figure and its formula, and
it also formats its own output. Adding a figure means editing `sum()`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from core.domain.errors import UnknownShape
from core.domain.models import Circle, Square, Triangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeSwitchAreaCalculator:
    shapes: Sequence[object] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shapes", tuple(self.shapes))

    def sum(self) -> float:
        total: float = 0
        for shape in self.shapes:
            match shape:
                case Square(side=side):
                    total += side * side
                case Circle(radius=radius):
                    total += math.pi * radius * radius
                case Triangle(base=base, height=height):
                    total += 0.5 * base * height
                case _:
                    logger.debug("No branch for %r", shape)
                    raise UnknownShape(type(shape).__name__)
        return total

    def output(self) -> str:
        return f"Sum of the areas of provided shapes: {self.sum()}"
