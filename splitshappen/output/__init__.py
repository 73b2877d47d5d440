"""Output generation: verbose scoring traces.

Re-exports key public functions for convenience.
"""

from splitshappen.output.trace import format_ball, format_frame, format_tokens, render_trace

__all__ = [
    "format_ball",
    "format_frame",
    "format_tokens",
    "render_trace",
]
