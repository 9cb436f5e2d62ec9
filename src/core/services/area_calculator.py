"""Aggregation of shape areas.

The calculator only knows the `Shape` contract: every element computes its
own area, so adding a new figure never requires touching this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from core.interfaces.shape import Shape

logger = logging.getLogger(__name__)


def sum_areas(shapes: Iterable[Shape]) -> float:
    """Sum `area()` over `shapes` in iteration order.

    Plain left-to-right float addition; an empty iterable yields `0`.
    """

    total: float = 0
    for shape in shapes:
        total += shape.area()
    return total


@dataclass(frozen=True)
class AreaCalculator:
    """Sum of the areas of an ordered collection of shapes."""

    shapes: Sequence[Shape] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "shapes", tuple(self.shapes))

    def sum(self) -> float:
        total = sum_areas(self.shapes)
        logger.debug("Summed %d shape(s): %s", len(self.shapes), total)
        return total
