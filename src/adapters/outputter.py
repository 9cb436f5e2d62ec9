"""Formatting of aggregated areas.

Kept apart from the calculator so that adding an output format never
touches the summing logic, and vice versa.
"""

from __future__ import annotations

import json

from core.domain.models import AreaSummary
from core.domain.output_format import OutputFormat
from core.interfaces.shape import AreaSource

TEXT_TEMPLATE = "Sum of the areas of provided shapes: {total}"


class Outputter:
    """Renders the result of an `AreaSource` as text or JSON."""

    def __init__(self, source: AreaSource) -> None:
        self.source = source

    def summary(self) -> AreaSummary:
        return AreaSummary(total_area=self.source.sum())

    def to_text(self) -> str:
        return TEXT_TEMPLATE.format(total=self.source.sum())

    def to_json(self) -> str:
        """Single-key record `{"totalArea": <number>}`."""

        return json.dumps(self.summary().model_dump(by_alias=True))

    def render(self, fmt: OutputFormat) -> str:
        if fmt is OutputFormat.JSON:
            return self.to_json()
        return self.to_text()
