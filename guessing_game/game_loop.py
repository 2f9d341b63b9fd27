from __future__ import annotations

import logging
import random
from collections.abc import Callable
from typing import TextIO

from guessing_game.core.bounded import BoundedValue
from guessing_game.core.io import write
from guessing_game.core.response import respond
from guessing_game.fsm import GameFSM
from guessing_game.guess_processing.reader import read_guess
from guessing_game.models import GameOutcome, GameResult
from guessing_game.settings import GameSettings
from guessing_game.styling import PLAIN, Styler

logger = logging.getLogger(__name__)

# Produces a uniformly random integer in [low, high].
SecretSource = Callable[[int, int], int]


def default_secret_source(*, seed: int | None = None) -> SecretSource:
    return random.Random(seed).randint


def play_game(
    settings: GameSettings,
    *,
    input: TextIO,
    output: TextIO,
    secret_source: SecretSource | None = None,
    styler: Styler = PLAIN,
) -> GameResult:
    """Run one full game and return its summary.

    The attempt budget counts down once per accepted guess. A correct guess ends
    the game immediately (won); exhausting the budget prints the loss message (lost).
    """

    bounds = settings.bounds
    source = secret_source or default_secret_source(seed=settings.seed)
    answer = BoundedValue(bounds=bounds, value=source(bounds.low, bounds.high))
    logger.debug("Secret generated: %s", answer)

    fsm = GameFSM()
    guesses: list[int] = []

    write(
        output,
        "\n{}\n".format(styler.style(f"I'm thinking of a number somewhere from {bounds}. Guess it!", tone="info")),
    )

    for remaining in range(settings.attempts, 0, -1):
        guess = read_guess(
            f"You have {remaining} attempts remaining. Guess: ",
            bounds=bounds,
            input=input,
            output=output,
            styler=styler,
        )
        guesses.append(int(guess))
        if respond(guess, answer, output=output, styler=styler) is GameOutcome.STOP:
            fsm.win()
            break
    else:
        write(output, "\n{}\n".format(styler.style("You're out of guesses! Game over.", tone="lose")))
        fsm.lose()

    logger.info("Game finished: phase=%s attempts_used=%d", fsm.phase.value, len(guesses))
    return GameResult(
        phase=fsm.phase,
        low=bounds.low,
        high=bounds.high,
        answer=int(answer),
        attempts_allowed=settings.attempts,
        guesses=guesses,
    )
