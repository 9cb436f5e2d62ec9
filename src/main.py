"""Entrypoint de shape-area dentro de `src/`.

`python -m main demo srp` (con `src/` como directorio actual) ejecuta la
misma app Typer que el script `shape-area`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
