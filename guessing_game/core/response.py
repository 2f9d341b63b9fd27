from __future__ import annotations

import logging
from typing import TextIO

from guessing_game.core.bounded import BoundedValue
from guessing_game.core.io import write
from guessing_game.models import GameOutcome
from guessing_game.styling import PLAIN, Styler

logger = logging.getLogger(__name__)


def respond(guess: BoundedValue, answer: BoundedValue, *, output: TextIO, styler: Styler = PLAIN) -> GameOutcome:
    """Write exactly one message classifying `guess` against `answer`.

    Returns GameOutcome.STOP only when the two are equal.
    """

    if guess > answer:
        message = styler.style(f"{guess} is too high!", tone="high")
        outcome = GameOutcome.CONTINUE
    elif guess < answer:
        message = styler.style(f"{guess} is too low!", tone="low")
        outcome = GameOutcome.CONTINUE
    else:
        message = styler.style("You win!", tone="win")
        outcome = GameOutcome.STOP

    write(output, f"\n{message}\n")
    logger.debug("guess=%s outcome=%s", guess, outcome.value)
    return outcome
