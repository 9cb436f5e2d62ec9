"""Output format options for shape-area.

This module centralizes the output formats supported across the
application. Keeping it in the domain layer allows both CLI and service
layers to share a single source of truth without creating circular
imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Supported renderings of the aggregated area."""

    TEXT = "text"
    JSON = "json"

    @classmethod
    def default(cls) -> "OutputFormat":
        """Return the default format used across the application."""

        return cls.TEXT

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return "JSON" if self is OutputFormat.JSON else "Plain text"


class Strategy(str, Enum):
    """How the calculator resolves each shape's area."""

    POLYMORPHIC = "polymorphic"
    TYPE_SWITCH = "type-switch"

    @classmethod
    def default(cls) -> "Strategy":
        return cls.POLYMORPHIC
