"""Lanzador de shape-area desde un checkout (sin `pip install -e .`).

Añade `src/` al `sys.path` y delega en `cli.main.run`, de modo que
`python -m main sum circle:2 square:3` funciona igual que el script
`shape-area`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
