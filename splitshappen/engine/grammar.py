"""Strict grammar check for a complete score line.

Neither scorer validates much on its own: the frame scorer rejects frame
shapes it cannot score and the streaming scorer only rejects a ``/`` that
has no ball to complete. When strict validation is enabled this check runs
first, so both strategies accept exactly the same games:

  - every character is in the alphabet
  - ``/`` never starts a frame or a bonus pair
  - ``X`` is never the second ball of a frame
  - an open frame knocks down at most 9 pins
  - the tenth frame is followed by exactly the bonus balls it earned
"""

from __future__ import annotations

import logging

from splitshappen.config.defaults import (
    ALPHABET,
    FINAL_FRAME_BONUS_BALLS,
    FRAMES_PER_GAME,
    PINS_PER_FRAME,
    SPARE,
    STRIKE,
)
from splitshappen.engine.balls import ball_value
from splitshappen.exceptions import IncompleteGame, InvalidSymbol, MalformedFrame

logger = logging.getLogger(__name__)


def _check_pair(first: str, second: str, index: int | None) -> None:
    """Validate two balls thrown at the same rack."""
    pair = first + second
    if second == STRIKE:
        raise MalformedFrame(pair, index, "strike on the second ball")
    if second == SPARE:
        return
    if ball_value(first) + ball_value(second) >= PINS_PER_FRAME:
        raise MalformedFrame(pair, index, "open frame with 10 or more pins")


def _check_bonus(bonus: str, owed: int) -> None:
    if len(bonus) < owed:
        raise IncompleteGame(FRAMES_PER_GAME, "missing bonus balls")
    if len(bonus) > owed:
        raise MalformedFrame(
            bonus, None, f"expected {owed} bonus ball(s), got {len(bonus)}",
        )
    if not bonus:
        return
    if bonus[0] == SPARE:
        raise MalformedFrame(bonus, None, "spare marker with no first ball")
    # Two bonus balls share a rack unless the first one was a strike
    if owed == 2 and bonus[0] != STRIKE:
        _check_pair(bonus[0], bonus[1], None)
    elif owed == 2 and bonus[1] == SPARE:
        raise MalformedFrame(bonus, None, "spare marker with no first ball")


def validate_line(line: str) -> None:
    """Raise if ``line`` is not exactly one legal ten-frame game."""
    for pos, c in enumerate(line):
        if c not in ALPHABET:
            raise InvalidSymbol(c, pos)

    i = 0
    kind = "OPEN"
    for frame in range(FRAMES_PER_GAME):
        if i >= len(line):
            raise IncompleteGame(frame)
        c = line[i]
        if c == SPARE:
            raise MalformedFrame(c, frame, "spare marker with no first ball")
        if c == STRIKE:
            kind = "STRIKE"
            i += 1
            continue
        if i + 1 >= len(line):
            raise IncompleteGame(frame, f"frame {c!r} is missing its second ball")
        _check_pair(c, line[i + 1], frame)
        kind = "SPARE" if line[i + 1] == SPARE else "OPEN"
        i += 2

    _check_bonus(line[i:], FINAL_FRAME_BONUS_BALLS[kind])
    logger.debug("Validated %r: tenth frame %s", line, kind)
