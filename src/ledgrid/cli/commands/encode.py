"""Headless encoding of a grid described on the command line."""

import json
import logging

import click

from ledgrid.encoding import encode, format_initializer
from ledgrid.exceptions import GridShapeError
from ledgrid.models import COLS, LedGrid

logger = logging.getLogger(__name__)

_ON_CHARS = set("1#xX*")
_OFF_CHARS = set("0.-_ ")


def parse_cell(value: str) -> tuple[int, int]:
    """Parse a 'ROW,COL' pair."""
    parts = value.split(",")
    if len(parts) != 2:
        raise click.BadParameter(f"expected ROW,COL, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise click.BadParameter(f"expected integers in ROW,COL, got {value!r}") from None


def parse_row(line: str) -> list[bool]:
    """Parse a row of 13 on/off characters ('1'/'#' on, '0'/'.' off)."""
    cells = []
    for char in line:
        if char in _ON_CHARS:
            cells.append(True)
        elif char in _OFF_CHARS:
            cells.append(False)
        else:
            raise click.BadParameter(f"unexpected character {char!r} in row {line!r}")
    if len(cells) != COLS:
        raise GridShapeError(f"{COLS} characters per row", f"{len(cells)} in {line!r}")
    return cells


@click.command()
@click.option(
    '--cell',
    '-c',
    'cells',
    multiple=True,
    metavar='ROW,COL',
    help='Turn on the cell at ROW,COL (repeatable)'
)
@click.option(
    '--rows',
    '-r',
    'rows',
    multiple=True,
    metavar='PATTERN',
    help='One row of 13 characters, 1/# for on and 0/. for off (give all 8)'
)
@click.option('--all', 'all_on', is_flag=True, help='Turn every cell on')
@click.option('--json', 'as_json', is_flag=True, help='Print the words as a JSON list')
def encode_cmd(cells: tuple[str, ...], rows: tuple[str, ...], all_on: bool, as_json: bool):
    """
    Encode a grid without starting the UI.

    \b
    Examples:
      # Top-left LED only
      ledgrid encode --cell 0,0

      # Whole grid
      ledgrid encode --all

      # Row patterns
      ledgrid encode -r 1000000000001 -r 0000000000000 ... (8 rows)
    """
    if rows and all_on:
        raise click.UsageError("--all and --rows cannot be used together")

    if rows:
        grid = LedGrid.from_rows([parse_row(row) for row in rows])
    else:
        grid = LedGrid()

    if all_on:
        grid.fill()

    for value in cells:
        row, col = parse_cell(value)
        grid.set_cell(row, col, True)

    words = encode(grid)
    logger.info(f"Encoded {grid.lit_count} lit cells from the command line")

    if as_json:
        click.echo(json.dumps(words))
    else:
        click.echo(format_initializer(words))
