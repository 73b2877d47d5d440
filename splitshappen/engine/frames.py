"""Frame-by-frame scoring with lookahead bonuses.

Scores a tokenized game the way a bowler fills in a scorecard:

  1. Classify each of the ten frames as a strike, spare or open frame.
  2. Strikes score 10 plus the next two balls, spares 10 plus the next
     ball, open frames the sum of their two balls. The bonus balls are
     read by looking ahead into the following frame tokens.
  3. Add up the ten frame scores.

Worked example, ``X7/9-X-88/-6XXX81``::

    Frame  Token  Score
      1      X    10 + 7 + 3   = 20
      2      7/   10 + 9       = 19
      3      9-    9 + 0       =  9
      4      X    10 + 0 + 8   = 18
      5      -8    0 + 8       =  8
      6      8/   10 + 0       = 10
      7      -6    0 + 6       =  6
      8      X    10 + 10 + 10 = 30
      9      X    10 + 10 + 8  = 28
     10      X    10 + 8 + 1   = 19
    Bonus    81   --
    Total                        167

Tokens after the tenth frame are bonus balls: they are only read through
lookahead, never scored as an eleventh frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from splitshappen.config.defaults import FRAMES_PER_GAME, PINS_PER_FRAME, SPARE, STRIKE
from splitshappen.engine.balls import ball_value
from splitshappen.exceptions import IncompleteGame, MalformedFrame

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

class FrameKind(Enum):
    """How a frame ended."""
    STRIKE = "STRIKE"
    SPARE = "SPARE"
    OPEN = "OPEN"


@dataclass(frozen=True)
class FrameScore:
    """Score of one frame of the game."""

    index: int
    token: str
    kind: FrameKind
    score: int
    running_total: int


# ---------------------------------------------------------------------------
# Frame classification
# ---------------------------------------------------------------------------

def classify_frame(token: str, index: int | None = None) -> FrameKind:
    """Classify a frame token, rejecting shapes the grammar does not allow."""
    if not token or len(token) > 2:
        raise MalformedFrame(token, index, "a frame is one or two balls")
    if token[0] == SPARE:
        raise MalformedFrame(token, index, "spare marker with no first ball")
    if token == STRIKE:
        return FrameKind.STRIKE
    if len(token) == 1:
        found = index if index is not None else 0
        raise IncompleteGame(found, f"frame {token!r} is missing its second ball")
    if token[1] == STRIKE:
        raise MalformedFrame(token, index, "strike on the second ball")
    if token[1] == SPARE:
        return FrameKind.SPARE
    return FrameKind.OPEN


# ---------------------------------------------------------------------------
# Bonus lookahead
# ---------------------------------------------------------------------------

def _bonus_frame(tokens: list[str], frame_number: int) -> str:
    if frame_number >= len(tokens):
        raise IncompleteGame(
            min(len(tokens), FRAMES_PER_GAME), "missing bonus balls",
        )
    return tokens[frame_number]


def first_bonus_ball(tokens: list[str], frame_number: int) -> int:
    """Value of the first ball of the given frame (directly encoded)."""
    frame = _bonus_frame(tokens, frame_number)
    if frame[0] == SPARE:
        raise MalformedFrame(frame, frame_number, "spare marker with no first ball")
    return ball_value(frame[0])


def second_bonus_ball(tokens: list[str], frame_number: int) -> int:
    """Value of the second ball counted from the start of the given frame.

    - A strike has no second ball: use the first ball of the next frame.
    - A spare does not record its second ball: it is 10 minus the first.
    - Otherwise it is the frame's second symbol.
    """
    frame = _bonus_frame(tokens, frame_number)
    if frame == STRIKE:
        return first_bonus_ball(tokens, frame_number + 1)
    if len(frame) < 2:
        raise IncompleteGame(
            min(len(tokens), FRAMES_PER_GAME), "missing bonus balls",
        )
    if frame[0] == SPARE:
        raise MalformedFrame(frame, frame_number, "spare marker with no first ball")
    if frame[1] == SPARE:
        return PINS_PER_FRAME - ball_value(frame[0])
    return ball_value(frame[1])


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_frame(
    tokens: list[str], frame_number: int, kind: FrameKind | None = None,
) -> int:
    """Score a single frame, looking ahead for strike and spare bonuses.

    ``kind`` may be passed in when the caller has already classified the frame.
    """
    frame = tokens[frame_number]
    if kind is None:
        kind = classify_frame(frame, frame_number)
    if kind is FrameKind.STRIKE:
        return (
            PINS_PER_FRAME
            + first_bonus_ball(tokens, frame_number + 1)
            + second_bonus_ball(tokens, frame_number + 1)
        )
    if kind is FrameKind.SPARE:
        return PINS_PER_FRAME + first_bonus_ball(tokens, frame_number + 1)
    return ball_value(frame[0]) + ball_value(frame[1])


def score_frames(tokens: list[str]) -> list[FrameScore]:
    """Score the ten frames of a tokenized game.

    Raises ``IncompleteGame`` if there are fewer than ten frames or the
    last frames' bonus balls are missing.
    """
    if len(tokens) < FRAMES_PER_GAME:
        if tokens:
            # A truncated final frame is reported as such
            classify_frame(tokens[-1], len(tokens) - 1)
        raise IncompleteGame(len(tokens))

    results: list[FrameScore] = []
    running = 0
    for i in range(FRAMES_PER_GAME):
        kind = classify_frame(tokens[i], i)
        score = score_frame(tokens, i, kind)
        running += score
        logger.debug("  %2d: %2s: %2d (%3d)", i, tokens[i], score, running)
        results.append(FrameScore(
            index=i,
            token=tokens[i],
            kind=kind,
            score=score,
            running_total=running,
        ))

    return results


def frames_total(frame_scores: list[FrameScore]) -> int:
    """Total game score from scored frames."""
    return sum(f.score for f in frame_scores)
