from __future__ import annotations

import io
import os
from collections.abc import Iterator

import pytest

from guessing_game.core.bounded import GuessRange


@pytest.fixture(autouse=True)
def _clean_game_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep a developer's GUESSING_GAME_* variables from leaking into tests."""

    for key in list(os.environ):
        if key.startswith("GUESSING_GAME_"):
            monkeypatch.delenv(key)
    yield


@pytest.fixture()
def bounds() -> GuessRange:
    return GuessRange(low=0, high=50)


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


class BrokenOutput(io.StringIO):
    """Output sink whose writes always fail, like a closed terminal."""

    def write(self, s: str) -> int:
        raise OSError("terminal went away")


@pytest.fixture()
def broken_output() -> BrokenOutput:
    return BrokenOutput()
