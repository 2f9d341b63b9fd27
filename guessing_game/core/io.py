from __future__ import annotations

from typing import TextIO


class OutputFailure(RuntimeError):
    """The output sink refused a write. Not recoverable: the terminal is gone."""


def write(output: TextIO, text: str, *, flush: bool = False) -> None:
    try:
        output.write(text)
        if flush:
            output.flush()
    except (OSError, ValueError) as e:
        # ValueError covers writes to an already closed file object.
        raise OutputFailure(f"Could not write to output: {e}") from e
