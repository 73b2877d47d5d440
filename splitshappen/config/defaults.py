"""Default values and rule constants for the scoring engine.

These are the rules of ten-pin bowling, not tuning knobs: changing them
produces a different game.
"""

# ---------------------------------------------------------------------------
# Game shape
# ---------------------------------------------------------------------------
FRAMES_PER_GAME = 10
PINS_PER_FRAME = 10

# Bonus balls owed after the last frame, keyed by how it ended
FINAL_FRAME_BONUS_BALLS = {
    "STRIKE": 2,
    "SPARE": 1,
    "OPEN": 0,
}

# ---------------------------------------------------------------------------
# Symbol alphabet
# ---------------------------------------------------------------------------
STRIKE = "X"
SPARE = "/"
MISS = "-"

BALL_VALUES = {
    "-": 0,
    "1": 1,
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "X": 10,
}

ALPHABET = frozenset(BALL_VALUES) | {SPARE}

# ---------------------------------------------------------------------------
# Scoring defaults
# ---------------------------------------------------------------------------
SCORING_DEFAULTS = {
    "strategy": "frames",
    "strict": False,
}

ENV_CONFIG_VAR = "SPLITSHAPPEN_CONFIG"
