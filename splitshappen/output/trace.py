"""Verbose diagnostic lines for a scored game.

The frame strategy prints the tokenized frames followed by one line per
frame (index, token, score). The streaming strategy prints one line per
ball (index, frames completed, symbol, weighted ball score, running total).
"""

from __future__ import annotations

from splitshappen.engine.frames import FrameScore
from splitshappen.engine.game import GameResult, Strategy
from splitshappen.engine.stream import BallStep


def format_tokens(tokens: list[str]) -> str:
    """``Frames: X 7/ 9- ...``"""
    return "Frames:" + "".join(f" {t}" for t in tokens)


def format_frame(frame: FrameScore) -> str:
    return f"  {frame.index:2d}: {frame.token:>2s}: {frame.score:2d}"


def format_ball(step: BallStep) -> str:
    return (
        f"{step.index:2d}: {step.frame_count:2d}: {step.symbol}: "
        f"{step.ball_score:2d} ({step.running_total:3d})"
    )


def render_trace(result: GameResult) -> list[str]:
    """Trace lines for a game, in the layout of the strategy that scored it."""
    if result.strategy is Strategy.FRAMES:
        lines = [format_tokens(result.tokens)]
        lines.extend(format_frame(f) for f in result.frames)
        return lines
    return [format_ball(step) for step in result.balls]
