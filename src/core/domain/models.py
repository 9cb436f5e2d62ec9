"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los modelos congelados dan inmutabilidad e igualdad por valor gratis.

Nota:
- Cada figura sabe calcular su propia área; el calculador no pregunta por tipos.
"""

from __future__ import annotations

import math
import numbers
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import InvalidDimension


def _check_dimension(field: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidDimension(field, value)
    try:
        number = float(value)
    except OverflowError as exc:
        raise InvalidDimension(field, value) from exc
    if not math.isfinite(number) or number < 0:
        raise InvalidDimension(field, value)
    return number


class _ShapeBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # `kind` queda fuera: pydantic no admite validadores "before" en el discriminador.
    @field_validator("side", "radius", "base", "height", mode="before", check_fields=False)
    @classmethod
    def validate_dimension(cls, value: Any, info: ValidationInfo) -> Any:
        return _check_dimension(info.field_name, value)

    @model_validator(mode="after")
    def validate_area(self) -> "_ShapeBase":
        area = self.area()
        if not math.isfinite(area):
            raise InvalidDimension("area", area)
        return self

    def area(self) -> float:
        raise NotImplementedError


class Square(_ShapeBase):
    """Cuadrado definido por la longitud de su lado."""

    kind: Literal["square"] = "square"
    side: float = Field(..., description="Longitud del lado.")

    def __init__(self, side: float | None = None, /, **data: Any) -> None:
        if side is not None:
            data["side"] = side
        super().__init__(**data)

    def area(self) -> float:
        return self.side * self.side


class Circle(_ShapeBase):
    """Círculo definido por su radio."""

    kind: Literal["circle"] = "circle"
    radius: float = Field(..., description="Radio del círculo.")

    def __init__(self, radius: float | None = None, /, **data: Any) -> None:
        if radius is not None:
            data["radius"] = radius
        super().__init__(**data)

    def area(self) -> float:
        return math.pi * self.radius * self.radius


class Triangle(_ShapeBase):
    """Triángulo definido por base y altura."""

    kind: Literal["triangle"] = "triangle"
    base: float = Field(..., description="Longitud de la base.")
    height: float = Field(..., description="Altura relativa a la base.")

    def __init__(
        self,
        base: float | None = None,
        height: float | None = None,
        /,
        **data: Any,
    ) -> None:
        if base is not None:
            data["base"] = base
        if height is not None:
            data["height"] = height
        super().__init__(**data)

    def area(self) -> float:
        return 0.5 * self.base * self.height


ShapeModel = Annotated[Union[Square, Circle, Triangle], Field(discriminator="kind")]
"""Unión etiquetada por `kind` para parsear entradas externas (JSON/CLI)."""

SHAPE_TYPES: dict[str, type[_ShapeBase]] = {
    "square": Square,
    "circle": Circle,
    "triangle": Triangle,
}


class AreaSummary(BaseModel):
    """Proyección estructurada del área total.

    Se serializa como `{"totalArea": <número>}`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_area: Union[int, float] = Field(
        ...,
        alias="totalArea",
        description="Suma de las áreas de las figuras.",
    )
