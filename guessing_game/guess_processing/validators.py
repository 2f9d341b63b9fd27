from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from guessing_game.core.bounded import BoundedValue, GuessRange, OutOfRange


class InvalidGuess(ValueError):
    """Raw input that cannot become a guess. Always recoverable by re-prompting."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(reason)


@dataclass(frozen=True, slots=True)
class GuessContext:
    """Inputs available to every stage."""

    raw: str
    bounds: GuessRange


class GuessStage(ABC):
    """One step of the pipeline: takes the previous stage's candidate, returns the next one."""

    @abstractmethod
    def apply(self, candidate: Any, *, ctx: GuessContext) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class StripStage(GuessStage):
    def apply(self, candidate: Any, *, ctx: GuessContext) -> str:
        text = str(candidate).strip()
        if not text:
            raise InvalidGuess(ctx.raw, "No guess entered")
        return text


@dataclass(frozen=True, slots=True)
class ParseIntStage(GuessStage):
    def apply(self, candidate: Any, *, ctx: GuessContext) -> int:
        try:
            return int(candidate)
        except ValueError as e:
            raise InvalidGuess(ctx.raw, f"'{candidate}' is not an integer") from e


@dataclass(frozen=True, slots=True)
class RangeStage(GuessStage):
    def apply(self, candidate: Any, *, ctx: GuessContext) -> BoundedValue:
        try:
            return ctx.bounds.bind(candidate)
        except OutOfRange as e:
            raise InvalidGuess(ctx.raw, str(e)) from e


@dataclass(frozen=True, slots=True)
class GuessPipeline:
    stages: tuple[GuessStage, ...]

    def run(self, raw: str, *, bounds: GuessRange) -> BoundedValue:
        ctx = GuessContext(raw=raw, bounds=bounds)
        candidate: Any = raw
        for stage in self.stages:
            candidate = stage.apply(candidate, ctx=ctx)
        if not isinstance(candidate, BoundedValue):
            raise TypeError(f"Pipeline ended with {type(candidate).__name__}, expected BoundedValue")
        return candidate


DEFAULT_PIPELINE = GuessPipeline(stages=(StripStage(), ParseIntStage(), RangeStage()))


def parse_guess(raw: str, *, bounds: GuessRange, pipeline: GuessPipeline = DEFAULT_PIPELINE) -> BoundedValue:
    return pipeline.run(raw, bounds=bounds)
