from __future__ import annotations

from typing import Literal, Protocol

Tone = Literal["info", "prompt", "error", "high", "low", "win", "lose"]


class Styler(Protocol):
    """Formats a piece of console text for a given tone (e.g. colors)."""

    def style(self, text: str, *, tone: Tone) -> str:  # pragma: no cover
        ...


class PlainStyler:
    def style(self, text: str, *, tone: Tone) -> str:
        return text


PLAIN: Styler = PlainStyler()
