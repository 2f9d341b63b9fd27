from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class GameOutcome(StrEnum):
    """Signal from the response step to the driver loop."""

    CONTINUE = "continue"
    STOP = "stop"


class GamePhase(StrEnum):
    playing = "playing"
    won = "won"
    lost = "lost"


class GameResult(BaseModel):
    phase: GamePhase
    low: int
    high: int
    answer: int
    attempts_allowed: int = Field(..., ge=1)

    # Accepted guesses only, in order. Rejected input never shows up here.
    guesses: list[int] = Field(default_factory=list)

    @property
    def attempts_used(self) -> int:
        return len(self.guesses)
