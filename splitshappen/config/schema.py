"""Pydantic models for splitshappen.yaml validation."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from splitshappen.config.defaults import SCORING_DEFAULTS


# ---------------------------------------------------------------------------
# Scoring Config
# ---------------------------------------------------------------------------

class ScoringConfig(BaseModel):
    strategy: Literal["frames", "stream"] = SCORING_DEFAULTS["strategy"]
    strict: bool = SCORING_DEFAULTS["strict"]

    @field_validator("strategy", mode="before")
    @classmethod
    def normalize_strategy(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ---------------------------------------------------------------------------
# Top-Level Config
# ---------------------------------------------------------------------------

class SplitsHappenConfig(BaseModel):
    """Root configuration model for splitshappen."""

    version: int = 1
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)

    @model_validator(mode="before")
    @classmethod
    def coerce_none_to_defaults(cls, data: Any) -> Any:
        """YAML parses empty keys as None. Coerce to proper defaults."""
        if isinstance(data, dict) and data.get("scoring", {}) is None:
            data["scoring"] = {}
        return data
