from __future__ import annotations

import json
import math

import pytest

from core.config import AppSettings
from core.domain.errors import UnknownShape
from core.domain.models import Circle, Square, Triangle
from core.domain.output_format import Strategy
from core.services.area_calculator import AreaCalculator
from core.services.area_pipeline import AreaRequest, PipelineHooks, run_area_pipeline
from core.services.type_switch import TypeSwitchAreaCalculator


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


def test_tokens_are_summed(settings):
    result = run_area_pipeline(
        settings=settings,
        request=AreaRequest(tokens=["circle:2", "square:3", "circle:4"]),
    )
    assert result.shapes == [Circle(2), Square(3), Circle(4)]
    assert result.total == pytest.approx(20 * math.pi + 9)
    assert result.strategy is Strategy.POLYMORPHIC
    assert isinstance(result.calculator, AreaCalculator)
    assert result.warnings == []


def test_file_shapes_come_before_tokens(settings, tmp_path):
    path = tmp_path / "shapes.json"
    path.write_text(json.dumps([{"kind": "triangle", "base": 10, "height": 5}]), encoding="utf-8")
    result = run_area_pipeline(
        settings=settings,
        request=AreaRequest(tokens=["square:10", "circle:5"], shapes_file=path),
    )
    assert result.shapes == [Triangle(10, 5), Square(10), Circle(5)]
    assert result.total == pytest.approx(125 + 25 * math.pi)


def test_strategy_comes_from_settings_unless_requested(monkeypatch):
    monkeypatch.setenv("SHAPE_AREA_STRATEGY", "type-switch")
    settings = AppSettings(_env_file=None)

    result = run_area_pipeline(settings=settings, request=AreaRequest(tokens=["square:2"]))
    assert isinstance(result.calculator, TypeSwitchAreaCalculator)
    assert result.total == 4

    result = run_area_pipeline(
        settings=settings,
        request=AreaRequest(tokens=["square:2"], strategy=Strategy.POLYMORPHIC),
    )
    assert isinstance(result.calculator, AreaCalculator)


def test_empty_request_warns_and_sums_to_zero(settings):
    seen: list[str] = []
    result = run_area_pipeline(
        settings=settings,
        request=AreaRequest(),
        hooks=PipelineHooks(warning=seen.append),
    )
    assert result.total == 0
    assert result.shapes == []
    assert seen == result.warnings
    assert len(seen) == 1


def test_errors_propagate(settings):
    with pytest.raises(UnknownShape):
        run_area_pipeline(settings=settings, request=AreaRequest(tokens=["pentagon:1"]))
