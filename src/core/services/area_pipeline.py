"""Area aggregation orchestration.

The CLI delegates loading, strategy selection and summing to these helpers,
which keeps side-effects (printing, tables) out of the core logic and makes
the pipeline reusable for other entry-points and tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.shape_loader import load_shapes_json, parse_shape_tokens
from core.config import AppSettings
from core.domain.models import ShapeModel
from core.domain.output_format import Strategy
from core.interfaces.shape import AreaSource
from core.services.area_calculator import AreaCalculator
from core.services.type_switch import TypeSwitchAreaCalculator

logger = logging.getLogger(__name__)


@dataclass
class AreaRequest:
    """Parameters that control the area pipeline."""

    tokens: Sequence[str] = ()
    shapes_file: Path | None = None
    strategy: Strategy | None = None


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers."""

    warning: Callable[[str], None] | None = None


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    shapes: list[ShapeModel]
    calculator: AreaSource
    total: float
    strategy: Strategy
    warnings: list[str] = field(default_factory=list)


def build_calculator(strategy: Strategy, shapes: Sequence[ShapeModel]) -> AreaSource:
    if strategy is Strategy.TYPE_SWITCH:
        return TypeSwitchAreaCalculator(shapes)
    return AreaCalculator(shapes)


def run_area_pipeline(
    *,
    settings: AppSettings,
    request: AreaRequest,
    hooks: PipelineHooks | None = None,
) -> PipelineResult:
    hooks = hooks or PipelineHooks()
    warnings: list[str] = []

    shapes: list[ShapeModel] = []
    if request.shapes_file is not None:
        shapes.extend(load_shapes_json(request.shapes_file))
    shapes.extend(parse_shape_tokens(request.tokens))

    if not shapes:
        message = "No shapes provided; the total area is 0."
        warnings.append(message)
        if hooks.warning:
            hooks.warning(message)

    strategy = request.strategy or settings.strategy
    calculator = build_calculator(strategy, shapes)
    total = calculator.sum()
    logger.info("Strategy %s summed %d shape(s) to %s", strategy.value, len(shapes), total)

    return PipelineResult(
        shapes=shapes,
        calculator=calculator,
        total=total,
        strategy=strategy,
        warnings=warnings,
    )
