from __future__ import annotations

import io
import logging
import os

import pytest

from guessing_game import main as main_module
from guessing_game.game_loop import default_secret_source


@pytest.fixture()
def _no_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setattr(main_module, "_project_root", tmp_path)


def _play(monkeypatch: pytest.MonkeyPatch, lines: str) -> tuple[int, str]:
    monkeypatch.setattr("sys.stdin", io.StringIO(lines))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    return main_module.main(), out.getvalue()


@pytest.mark.usefixtures("_no_dotenv")
def test_win_exits_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUESSING_GAME_LOW", "1")
    monkeypatch.setenv("GUESSING_GAME_HIGH", "1")
    monkeypatch.setenv("GUESSING_GAME_ATTEMPTS", "1")

    code, text = _play(monkeypatch, "1\n")

    assert code == 0
    assert "You win!" in text


@pytest.mark.usefixtures("_no_dotenv")
def test_loss_exits_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUESSING_GAME_LOW", "1")
    monkeypatch.setenv("GUESSING_GAME_HIGH", "2")
    monkeypatch.setenv("GUESSING_GAME_ATTEMPTS", "1")
    monkeypatch.setenv("GUESSING_GAME_SEED", "0")
    wrong = 3 - default_secret_source(seed=0)(1, 2)

    code, text = _play(monkeypatch, f"{wrong}\n")

    assert code == 0
    assert "Game over" in text


@pytest.mark.usefixtures("_no_dotenv")
def test_broken_stdout_exits_one(monkeypatch: pytest.MonkeyPatch, broken_output: io.StringIO, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    monkeypatch.setattr("sys.stdout", broken_output)

    with caplog.at_level(logging.CRITICAL, logger="guessing_game.main"):
        assert main_module.main() == 1

    assert "Output stream is broken" in caplog.text


@pytest.mark.usefixtures("_no_dotenv")
def test_closed_stdin_exits_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    assert main_module.main() == 1


@pytest.mark.usefixtures("_no_dotenv")
def test_invalid_config_exits_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUESSING_GAME_ATTEMPTS", "0")
    assert main_module.main() == 2


def test_dotenv_values_are_loaded(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    (tmp_path / ".env").write_text("GUESSING_GAME_LOW=3\nGUESSING_GAME_HIGH=3\nGUESSING_GAME_ATTEMPTS=1\n", encoding="utf-8")
    monkeypatch.setattr(main_module, "_project_root", tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)

    try:
        assert main_module.main() == 0
    finally:
        # load_dotenv writes straight into os.environ.
        for key in ("GUESSING_GAME_LOW", "GUESSING_GAME_HIGH", "GUESSING_GAME_ATTEMPTS"):
            os.environ.pop(key, None)

    assert "from 3 through 3" in out.getvalue()
