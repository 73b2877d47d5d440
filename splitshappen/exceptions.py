"""Error taxonomy for the scoring engine and CLI.

Scoring failures all derive from ``ScoringError`` so the CLI can report
them uniformly. None of them are recoverable: the game is rejected as a
whole and no partial total is produced.
"""

from __future__ import annotations

import click


class ScoringError(ValueError):
    """Base class for all scoring failures."""


class InvalidSymbol(ScoringError):
    """A character that has no pin value where a ball value is expected."""

    def __init__(self, symbol: str, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid ball character: {symbol!r}{where}")


class MalformedFrame(ScoringError):
    """A frame whose symbols violate the one-or-two symbol grammar."""

    def __init__(self, frame: str, index: int | None = None, reason: str = "") -> None:
        self.frame = frame
        self.index = index
        self.reason = reason
        where = f" in frame {index + 1}" if index is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Illegal frame {frame!r}{where}{detail}")


class IncompleteGame(ScoringError):
    """Input ended before ten frames and their bonus balls were seen."""

    def __init__(self, frames_found: int, detail: str = "") -> None:
        self.frames_found = frames_found
        msg = f"Incomplete game: {frames_found} of 10 frames"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class UnrecognizedArgument(click.UsageError):
    """Command-line argument other than ``-v``."""

    def __init__(self, arg: str, ctx: click.Context | None = None) -> None:
        self.arg = arg
        super().__init__(f"Unrecognized argument: {arg!r}", ctx=ctx)
