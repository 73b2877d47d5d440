"""Split a score line into frame tokens."""

from __future__ import annotations

import logging

from splitshappen.config.defaults import STRIKE

logger = logging.getLogger(__name__)


def tokenize(line: str | None) -> list[str]:
    """Break a score line into frames of one or two symbols.

    A strike is a frame on its own; anything else takes the next two
    symbols (or the last one, if the line ends mid-frame). Bonus balls
    after the tenth frame come out as ordinary trailing tokens. Nothing
    is validated here: ``"/5"`` is returned as a token and rejected later
    by the frame scorer.
    """
    tokens: list[str] = []
    if not line:
        return tokens

    i = 0
    while i < len(line):
        if line[i] == STRIKE:
            tokens.append(line[i])
            i += 1
        else:
            tokens.append(line[i : i + 2])
            i += 2

    logger.debug("Tokenized %r into %d frames: %s", line, len(tokens), tokens)
    return tokens
