"""Single-pass streaming scorer.

Treats the score line as a stream of balls and keeps a running total with
a small finite-state machine instead of splitting the game into frames.
Bonuses are handled with multipliers: a strike owes one extra count to
each of the next two balls, a spare owes one to the next ball. Owed
counts stack, so the third of three strikes in a row scores 10 x 3.

Worked example, ``X7/9-X-88/-6XXX81``::

    Input  Ball  Frame  Ball score     Running
      1     X      1    10 * 1 = 10      10
      2     7      2     7 * 2 = 14      24
      3     /      2     3 * 2 =  6      30
      4     9      3     9 * 2 = 18      48
      5     -      3     0 * 1 =  0      48
      6     X      4    10 * 1 = 10      58
      7     -      5     0 * 2 =  0      58
      8     8      5     8 * 2 = 16      74
      9     8      6     8 * 1 =  8      82
     10     /      6     2 * 1 =  2      84
     11     -      7     0 * 2 =  0      84
     12     6      7     6 * 1 =  6      90
     13     X      8    10 * 1 = 10     100
     14     X      9    10 * 2 = 20     120
     15     X     10    10 * 3 = 30     150
     16     8    Bonus   8 * 2 = 16     166
     17     1    Bonus   1 * 1 =  1     167

After the tenth frame the machine switches to bonus mode: balls count
only through what earlier strikes and spares still owe, and earn no
bonus of their own. It stops once nothing is owed, without reading the
rest of the input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from splitshappen.config.defaults import FRAMES_PER_GAME, PINS_PER_FRAME, SPARE, STRIKE
from splitshappen.engine.balls import ball_value
from splitshappen.exceptions import IncompleteGame, MalformedFrame

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BallStep:
    """One processed ball, as reported in the verbose trace."""

    index: int
    frame_count: int  # frames completed before this ball
    symbol: str
    base_score: int
    multiplier: int
    ball_score: int
    running_total: int


@dataclass
class StreamState:
    """Mutable state of the streaming scorer.

    Attributes:
        last_ball_value: Pins on the previous ball, to resolve a ``/``.
        current_bonus: Extra counts owed to the ball about to be scored.
        next_bonus: Extra counts owed to the ball after that.
        in_split_second_ball: The next ball is the second of its frame.
        frames_completed: Frames finished so far.
        in_base_game: Still inside the ten scored frames.
        total: Running score.
        balls_seen: Symbols consumed.
    """

    last_ball_value: int = 0
    current_bonus: int = 0
    next_bonus: int = 0
    in_split_second_ball: bool = False
    frames_completed: int = 0
    in_base_game: bool = True
    total: int = 0
    balls_seen: int = 0

    @property
    def multiplier(self) -> int:
        """How many times the next ball counts toward the total."""
        return int(self.in_base_game) + self.current_bonus

    @property
    def is_terminal(self) -> bool:
        """True once the ten frames are done and no bonus is owed."""
        return not self.in_base_game and self.current_bonus == 0 and self.next_bonus == 0

    def advance(self, symbol: str) -> BallStep:
        """Score one ball and move the machine to its next state."""
        index = self.balls_seen
        frame_count = self.frames_completed
        base_game = int(self.in_base_game)

        if symbol == STRIKE:
            base_score = PINS_PER_FRAME
        elif symbol == SPARE:
            if not self.in_split_second_ball:
                raise MalformedFrame(symbol, frame_count, "spare marker with no first ball")
            base_score = PINS_PER_FRAME - self.last_ball_value
        else:
            base_score = ball_value(symbol, index)

        multiplier = self.multiplier
        ball_score = multiplier * base_score
        self.total += ball_score

        if symbol == STRIKE:
            self.frames_completed += 1
            self.current_bonus = self.next_bonus + base_game
            self.next_bonus = base_game
            self.in_split_second_ball = False
        elif symbol == SPARE:
            self.frames_completed += 1
            self.current_bonus = self.next_bonus + base_game
            self.next_bonus = 0
            self.in_split_second_ball = False
        else:
            if self.in_split_second_ball:
                self.frames_completed += 1
                self.in_split_second_ball = False
            else:
                self.in_split_second_ball = True
            self.current_bonus = self.next_bonus
            self.next_bonus = 0

        self.last_ball_value = base_score
        self.balls_seen += 1
        if self.frames_completed >= FRAMES_PER_GAME:
            self.in_base_game = False

        step = BallStep(
            index=index,
            frame_count=frame_count,
            symbol=symbol,
            base_score=base_score,
            multiplier=multiplier,
            ball_score=ball_score,
            running_total=self.total,
        )
        logger.debug(
            "%2d: %2d: %s: %2d * %d = %2d (%3d)",
            index, frame_count, symbol, base_score, multiplier, ball_score, self.total,
        )
        return step


@dataclass
class StreamResult:
    """Outcome of a streaming scoring run."""

    total: int
    steps: list[BallStep] = field(default_factory=list)
    state: StreamState = field(default_factory=StreamState)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

def score_stream(symbols: Iterable[str]) -> StreamResult:
    """Score a game by streaming over its symbols.

    ``symbols`` may be a string or any iterable of single characters; it is
    consumed lazily and input past the last owed bonus ball is not read.

    Raises ``IncompleteGame`` if input runs out before ten frames are
    complete or while a strike or spare bonus is still owed.
    """
    state = StreamState()
    steps: list[BallStep] = []
    it = iter(symbols)

    while not state.is_terminal:
        try:
            symbol = next(it)
        except StopIteration:
            break
        steps.append(state.advance(symbol))

    if not state.is_terminal:
        frames_found = min(state.frames_completed, FRAMES_PER_GAME)
        if state.in_base_game:
            raise IncompleteGame(frames_found)
        raise IncompleteGame(frames_found, "missing bonus balls")

    return StreamResult(total=state.total, steps=steps, state=state)
