"""splitshappen -- ten-pin bowling score calculator."""

__version__ = "0.1.0"
