"""Command-line entry points.

Usage: splitshappen [-v]  /  splitshappen-fsa [-v]

Reads a score line as a single line from standard input and writes the
total score to standard output. With ``-v`` the frame scorer first prints
the tokenized frames and each frame's score, and the streaming scorer
prints each ball's weighted score and the running total.
"""

from __future__ import annotations

import logging
import sys

import click

from splitshappen.engine.game import Strategy

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "help_option_names": [],
}


def _run(ctx: click.Context, verbose: bool, strategy: Strategy | None) -> None:
    from splitshappen.config.loader import load_config
    from splitshappen.engine.game import score_game
    from splitshappen.exceptions import ScoringError, UnrecognizedArgument
    from splitshappen.output.trace import render_trace

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if ctx.args:
        raise UnrecognizedArgument(ctx.args[0], ctx=ctx)

    config = load_config()
    if strategy is None:
        strategy = Strategy(config.scoring.strategy)

    line = sys.stdin.readline().strip()
    logger.debug("Scoring %r with %s strategy", line, strategy.value)

    try:
        result = score_game(line, strategy=strategy, strict=config.scoring.strict)
    except ScoringError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from None

    if verbose:
        for trace_line in render_trace(result):
            click.echo(trace_line)
    click.echo(result.total)


@click.command("splitshappen", context_settings=CONTEXT_SETTINGS)
@click.option("-v", "verbose", is_flag=True, help="Print frame-by-frame scoring")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Score a bowling game read from standard input."""
    _run(ctx, verbose, None)


@click.command("splitshappen-fsa", context_settings=CONTEXT_SETTINGS)
@click.option("-v", "verbose", is_flag=True, help="Print ball-by-ball scoring")
@click.pass_context
def fsa_cli(ctx: click.Context, verbose: bool) -> None:
    """Score a bowling game from standard input with the streaming scorer."""
    _run(ctx, verbose, Strategy.STREAM)
