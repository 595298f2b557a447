"""Entry point for ``python -m ledgrid``."""

from ledgrid.cli import cli

if __name__ == "__main__":
    cli()
