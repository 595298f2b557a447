"""Basic example: build a pattern in code and print its words."""

from ledgrid import GridService
from ledgrid.encoding import decode


def main():
    """Draw a frame around the grid and print the initializer."""
    service = GridService()
    grid = service.grid

    # Top and bottom rows
    for col in range(grid.COLS):
        service.set_cell(0, col, True)
        service.set_cell(grid.ROWS - 1, col, True)

    # Left and right columns
    for row in range(1, grid.ROWS - 1):
        service.set_cell(row, 0, True)
        service.set_cell(row, grid.COLS - 1, True)

    print(grid.render_text())
    print()

    result = service.compute()
    print(result.text)

    # Cross-check: the words describe the same grid
    assert decode(result.words) == grid
    print(f"\n{grid.lit_count} LEDs lit, round trip OK")


if __name__ == "__main__":
    main()
