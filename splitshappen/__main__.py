"""Allow ``python -m splitshappen``."""

from splitshappen.cli.main import cli

if __name__ == "__main__":
    cli()
