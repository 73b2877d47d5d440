"""Shared test fixtures for splitshappen.

Provides sample score lines and keeps config resolution away from any
real user config file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from splitshappen.config import loader

# ---------------------------------------------------------------------------
# Sample games
# ---------------------------------------------------------------------------

SAMPLE_LINE = "X7/9-X-88/-6XXX81"
SAMPLE_TOKENS = ["X", "7/", "9-", "X", "-8", "8/", "-6", "X", "X", "X", "81"]
SAMPLE_FRAME_SCORES = [20, 19, 9, 18, 8, 10, 6, 30, 28, 19]
SAMPLE_BALL_SCORES = [10, 14, 6, 18, 0, 10, 0, 16, 8, 2, 0, 6, 10, 20, 30, 16, 1]

PERFECT_GAME = "X" * 12
GUTTER_GAME = "--" * 10
ALL_SPARES = "5/" * 10 + "5"
ALL_NINES = "9-" * 10


# ---------------------------------------------------------------------------
# Config isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config discovery at an empty temp directory."""
    monkeypatch.delenv("SPLITSHAPPEN_CONFIG", raising=False)
    monkeypatch.setattr(loader, "SEARCH_PATHS", [tmp_path / "splitshappen.yaml"])
    return tmp_path


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a YAML config file and return its path."""
    import yaml

    def _write(content: dict, name: str = "splitshappen.yaml") -> Path:
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(content, f)
        return path

    return _write
