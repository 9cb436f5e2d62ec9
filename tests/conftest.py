from __future__ import annotations

import pytest

from core.domain.models import Circle, Square, Triangle


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep settings independent of the developer's env vars and .env files."""

    for key in ("SHAPE_AREA_OUTPUT_FORMAT", "SHAPE_AREA_STRATEGY", "SHAPE_AREA_JSON_INDENT", "SHAPE_AREA_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def ocp_shapes():
    return [Square(10), Circle(5), Triangle(10, 5)]


@pytest.fixture
def srp_shapes():
    return [Circle(2), Square(3), Circle(4)]
