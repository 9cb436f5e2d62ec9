"""Logging configuration (stdlib logging rendered by rich).

Logs go to stderr so stdout stays reserved for the computed result.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a `RichHandler` on the root logger once; later calls only adjust the level."""

    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    if _configured:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    _configured = True
