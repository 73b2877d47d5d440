"""Locate and read the splitshappen YAML config file."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import yaml

from splitshappen.config.defaults import ENV_CONFIG_VAR
from splitshappen.config.schema import SplitsHappenConfig

logger = logging.getLogger(__name__)

# Tried in order when no config file has been named
SEARCH_PATHS = [
    Path("splitshappen.yaml"),
    Path("~/.splitshappen/config.yaml"),
]


def _lookup_order(path: str | Path | None) -> Iterator[tuple[Path, bool]]:
    """Yield ``(candidate, named)`` pairs in the order they are tried.

    A named file (the argument, else $SPLITSHAPPEN_CONFIG) is the only
    candidate; otherwise the search paths are tried in turn.
    """
    named = path if path is not None else os.environ.get(ENV_CONFIG_VAR)
    if named:
        yield Path(named).expanduser(), True
        return
    for candidate in SEARCH_PATHS:
        yield candidate.expanduser(), False


def _resolve_config_path(path: str | Path | None) -> Path | None:
    for candidate, named in _lookup_order(path):
        if candidate.is_file():
            return candidate
        if named:
            logger.warning("Named config file does not exist: %s", candidate)
    return None


def load_config(path: str | Path | None = None) -> SplitsHappenConfig:
    """Read the scoring config, falling back to defaults.

    The file is ``path`` if given, else the one named by $SPLITSHAPPEN_CONFIG,
    else the first of ./splitshappen.yaml and ~/.splitshappen/config.yaml
    that exists. A named file that is missing means defaults; the search
    paths are not consulted.
    """
    config_path = _resolve_config_path(path)

    raw: dict = {}
    if config_path is None:
        logger.info("No config file, scoring with defaults")
    else:
        logger.info("Reading config %s", config_path)
        raw = yaml.safe_load(config_path.read_text()) or {}

    config = SplitsHappenConfig.model_validate(raw)
    logger.debug(
        "Scoring with strategy=%s strict=%s",
        config.scoring.strategy, config.scoring.strict,
    )
    return config
