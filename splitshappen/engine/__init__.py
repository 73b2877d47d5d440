"""Bowling scoring engine.

Public API:
  score_game   — Score a line with either strategy -> GameResult
  score_line   — Total only
  Strategy     — FRAMES (tokenize + lookahead) or STREAM (state machine)
  ball_value   — Pin count of one symbol
"""

from splitshappen.engine.balls import ball_value
from splitshappen.engine.game import GameResult, Strategy, score_game, score_line

__all__ = [
    "GameResult",
    "Strategy",
    "ball_value",
    "score_game",
    "score_line",
]
