"""Configuration loading, validation, and defaults."""

from splitshappen.config.loader import load_config
from splitshappen.config.schema import SplitsHappenConfig

__all__ = ["load_config", "SplitsHappenConfig"]
