"""Score a whole game with either strategy."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from splitshappen.engine.frames import FrameScore, frames_total, score_frames
from splitshappen.engine.grammar import validate_line
from splitshappen.engine.stream import BallStep, score_stream
from splitshappen.engine.tokenizer import tokenize

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Scoring algorithm."""
    FRAMES = "frames"   # tokenize, then score each frame with lookahead
    STREAM = "stream"   # single pass with bonus multipliers


@dataclass
class GameResult:
    """Total score plus whatever detail the chosen strategy produced."""

    total: int
    strategy: Strategy
    tokens: list[str] = field(default_factory=list)
    frames: list[FrameScore] = field(default_factory=list)
    balls: list[BallStep] = field(default_factory=list)


def score_game(
    symbols: str | Iterable[str],
    strategy: Strategy | str = Strategy.FRAMES,
    strict: bool = False,
) -> GameResult:
    """Score one game.

    Parameters
    ----------
    symbols : str | Iterable[str]
        The score line, or an iterable of its characters. The streaming
        strategy consumes an iterable lazily unless ``strict`` is set;
        everything else reads it whole first.
    strategy : Strategy | str
        ``"frames"`` or ``"stream"``.
    strict : bool
        Run the grammar check before scoring.

    Returns
    -------
    GameResult
        ``tokens`` and ``frames`` are filled for the frame strategy,
        ``balls`` for the streaming one.
    """
    strategy = Strategy(strategy)

    if strategy is Strategy.FRAMES or strict:
        line = symbols if isinstance(symbols, str) else "".join(symbols)
        if strict:
            validate_line(line)
        symbols = line

    if strategy is Strategy.FRAMES:
        tokens = tokenize(symbols)
        frame_scores = score_frames(tokens)
        total = frames_total(frame_scores)
        logger.debug("Frame scoring total: %d", total)
        return GameResult(
            total=total, strategy=strategy, tokens=tokens, frames=frame_scores,
        )

    result = score_stream(symbols)
    logger.debug("Stream scoring total: %d after %d balls", result.total, len(result.steps))
    return GameResult(total=result.total, strategy=strategy, balls=result.steps)


def score_line(
    line: str,
    strategy: Strategy | str = Strategy.FRAMES,
    strict: bool = False,
) -> int:
    """Total score of a score line."""
    return score_game(line, strategy=strategy, strict=strict).total
