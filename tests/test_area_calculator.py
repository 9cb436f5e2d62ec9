from __future__ import annotations

import itertools
import math

import pytest

from core.domain.errors import UnknownShape
from core.domain.models import Circle, Square, Triangle
from core.services.area_calculator import AreaCalculator, sum_areas
from core.services.type_switch import TypeSwitchAreaCalculator


class Hexagon:
    """A shape defined outside the package; only needs `area()`."""

    def __init__(self, side: float) -> None:
        self.side = side

    def area(self) -> float:
        return 3 * math.sqrt(3) / 2 * self.side**2


def test_ocp_scenario(ocp_shapes):
    total = AreaCalculator(ocp_shapes).sum()
    assert total == pytest.approx(100 + 25 * math.pi + 25)
    assert total == pytest.approx(203.5398, abs=1e-4)


def test_srp_scenario(srp_shapes):
    total = AreaCalculator(srp_shapes).sum()
    assert total == pytest.approx(20 * math.pi + 9)
    assert total == pytest.approx(71.8319, abs=1e-4)


def test_empty_collection_sums_to_zero():
    assert AreaCalculator([]).sum() == 0
    assert AreaCalculator().sum() == 0
    assert sum_areas([]) == 0


def test_sum_is_permutation_invariant():
    shapes = [Square(1.1), Circle(0.3), Triangle(2.2, 7.7), Circle(9), Square(0.01)]
    expected = AreaCalculator(shapes).sum()
    for permutation in itertools.permutations(shapes):
        assert AreaCalculator(permutation).sum() == pytest.approx(expected, rel=1e-12)


def test_calculator_accepts_any_iterable_and_keeps_order(srp_shapes):
    calculator = AreaCalculator(iter(srp_shapes))
    assert calculator.shapes == tuple(srp_shapes)
    assert calculator.sum() == pytest.approx(20 * math.pi + 9)


def test_new_shapes_need_no_calculator_changes():
    shapes = [Square(2), Hexagon(1)]
    assert AreaCalculator(shapes).sum() == pytest.approx(4 + 3 * math.sqrt(3) / 2)


@pytest.mark.parametrize(
    "shapes",
    [
        [],
        [Square(10), Circle(5), Triangle(10, 5)],
        [Circle(2), Square(3), Circle(4)],
        [Triangle(0, 3), Square(0.5)],
    ],
)
def test_type_switch_agrees_with_polymorphic(shapes):
    assert TypeSwitchAreaCalculator(shapes).sum() == pytest.approx(AreaCalculator(shapes).sum())


def test_type_switch_cannot_handle_unknown_shapes():
    with pytest.raises(UnknownShape) as excinfo:
        TypeSwitchAreaCalculator([Square(1), Hexagon(1)]).sum()
    assert excinfo.value.kind == "Hexagon"


def test_type_switch_formats_its_own_output():
    assert TypeSwitchAreaCalculator([]).output() == "Sum of the areas of provided shapes: 0"
    assert TypeSwitchAreaCalculator([Square(3)]).output() == "Sum of the areas of provided shapes: 9.0"
