import numpy as np

from .shapeUtil import Point, HSegment


def _span(command):
    """(row, first, last) covered by a draw command, or None for anything else."""
    if isinstance(command, Point):
        return command.y, command.x, command.x
    if isinstance(command, HSegment):
        return command.y, command.x1, command.x2
    return None


def _mark(grid, row, lo, hi):
    """Set grid[row - 1, lo - 1:hi] (1-based, inclusive), clipped to the grid."""
    height, width = grid.shape
    if not 1 <= row <= height:
        return
    lo = max(lo - 1, 0)
    hi = min(hi, width)
    if lo < hi:
        grid[row - 1, lo:hi] = True


def logical_mask(commands, width, height):
    """
    Mark every logical cell the commands cover on a width x height grid.

    Rows and columns are 1-based like the terminal's, so cell (x, y) lands at
    mask[y - 1, x - 1].  Anything off the grid is clipped and non-drawing
    commands are skipped.
    """
    mask = np.zeros((height, width), dtype=bool)
    for command in commands:
        span = _span(command)
        if span is not None:
            _mark(mask, *span)
    return mask


def paint(commands, width, height, glyph="*", blank=" "):
    """
    Character grid of the commands exactly as the escape sequences place them.

    A point at logical x lands on screen column 2x; a segment from x1 to x2
    starts on column 2 * x1 and runs 2 * (x2 - x1 + 1) cells.
    """
    screen = np.zeros((height, 2 * width + 1), dtype=bool)
    for command in commands:
        span = _span(command)
        if span is None:
            continue
        row, first, last = span
        if isinstance(command, Point):
            _mark(screen, row, 2 * first, 2 * first)
        else:
            _mark(screen, row, 2 * first, 2 * last + 1)
    return np.where(screen, glyph, blank)


def to_text(grid):
    return "\n".join("".join(row).rstrip() for row in grid)
