"""Ball value decoding shared by both scoring strategies."""

from __future__ import annotations

from splitshappen.config.defaults import BALL_VALUES
from splitshappen.exceptions import InvalidSymbol


def ball_value(symbol: str, position: int | None = None) -> int:
    """Translate one input symbol into the number of pins it knocked down.

    Misses are recorded as ``-`` rather than ``0`` and strikes as ``X``.
    The spare marker ``/`` has no value of its own (it depends on the
    previous ball), so callers must resolve it before getting here; passing
    it raises ``InvalidSymbol`` like any other unknown character.
    """
    try:
        return BALL_VALUES[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbol(str(symbol), position) from None
