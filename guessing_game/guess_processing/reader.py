from __future__ import annotations

import logging
from typing import TextIO

from guessing_game.core.bounded import BoundedValue, GuessRange
from guessing_game.core.io import write
from guessing_game.guess_processing.validators import InvalidGuess, parse_guess
from guessing_game.styling import PLAIN, Styler

logger = logging.getLogger(__name__)


class InputClosed(EOFError):
    """The input source ran dry before a valid guess arrived."""


def read_guess(
    prompt: str,
    *,
    bounds: GuessRange,
    input: TextIO,
    output: TextIO,
    styler: Styler = PLAIN,
) -> BoundedValue:
    """Prompt until the player enters an integer within `bounds` and return it.

    Blocks on `input`. Invalid lines print the valid range and re-prompt; they
    never reach the caller, so one call costs the caller exactly one attempt.

    Raises:
        InputClosed: `input` hit EOF.
        OutputFailure: `output` rejected a write.
    """

    while True:
        write(output, styler.style(prompt, tone="prompt"), flush=True)
        line = input.readline()
        if not line:
            raise InputClosed("Input closed before a valid guess was entered")

        try:
            guess = parse_guess(line, bounds=bounds)
        except InvalidGuess as e:
            logger.debug("Rejected guess %r: %s", e.raw, e.reason)
            write(
                output,
                "\n{}\n{}\n".format(
                    styler.style("Invalid guess.", tone="error"),
                    styler.style(f"Guesses must be an integer from {bounds}.", tone="info"),
                ),
            )
            continue

        return guess
