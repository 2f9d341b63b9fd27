from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from guessing_game.core.bounded import GuessRange

ENV_PREFIX = "GUESSING_GAME_"


class GameSettings(BaseModel):
    # Range of valid guesses and the secret answer, inclusive on both ends.
    low: int = 0
    high: int = 1024

    # How many accepted guesses the player gets.
    attempts: int = Field(10, ge=1)

    # For reproducibility/debugging. None draws a fresh secret every run.
    seed: int | None = None

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def _check_range(self) -> GameSettings:
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must be <= high ({self.high})")
        return self

    @property
    def bounds(self) -> GuessRange:
        return GuessRange(low=self.low, high=self.high)


def settings_from_env(environ: Mapping[str, str] | None = None) -> GameSettings:
    """Build GameSettings from GUESSING_GAME_* variables; unset ones keep their defaults."""

    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for name in GameSettings.model_fields:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return GameSettings.model_validate(values)
