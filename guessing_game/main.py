from __future__ import annotations

import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from guessing_game.core.io import OutputFailure
from guessing_game.game_loop import play_game
from guessing_game.guess_processing.reader import InputClosed
from guessing_game.settings import settings_from_env

logger = logging.getLogger(__name__)

_project_root = Path(__file__).resolve().parents[1]


def main() -> int:
    """Play one game on stdin/stdout and return the process exit code.

    Winning and losing both exit 0. Logging goes to stderr so it never mixes
    with the game text.
    """

    env_path = _project_root / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    try:
        settings = settings_from_env()
    except ValidationError as e:
        logging.basicConfig(level=logging.WARNING)
        logger.error("Invalid configuration:\n%s", e)
        return 2

    logging.basicConfig(level=settings.log_level)

    try:
        play_game(settings, input=sys.stdin, output=sys.stdout)
    except OutputFailure as e:
        logger.critical("Output stream is broken, aborting: %s", e)
        return 1
    except InputClosed as e:
        logger.error("%s", e)
        return 1
    return 0


def main_cli() -> None:
    raise SystemExit(main())
