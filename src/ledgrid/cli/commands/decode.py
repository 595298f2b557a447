"""Decode words back into a grid picture."""

import click

from ledgrid.encoding import decode


@click.command()
@click.argument('words', nargs=-1, required=True)
@click.option('--on', 'on_char', default='#', show_default=True, help='Character for lit cells')
@click.option('--off', 'off_char', default='.', show_default=True, help='Character for unlit cells')
def decode_cmd(words: tuple[str, ...], on_char: str, off_char: str):
    """
    Show the grid that a set of words encodes.

    Words may be pasted straight from an initializer, trailing commas included.

    \b
    Example:
      ledgrid decode 0x80000001, 0x00000000, 0x00000000, 0x00000000
    """
    # A pasted initializer can arrive as "0x1," or as "0x1" followed by ","
    cleaned = [word for word in words if word.strip(", ")]
    grid = decode(cleaned)
    click.echo(grid.render_text(on=on_char, off=off_char))
