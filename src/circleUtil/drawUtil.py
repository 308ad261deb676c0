from .shapeUtil import Point, HSegment

GLYPH = "*"
# Widest run a single segment may draw, in screen cells.
MAX_RUN = 369

ESC = "\033"


def repeat(glyph, count, limit=MAX_RUN):
    """Run of *glyph*, clamped to [0, limit] cells."""
    return glyph * max(0, min(count, limit))


def clear_screen():
    return f"{ESC}[2J"


def move_to(col, row):
    """Absolute cursor position, 1-based."""
    return f"{ESC}[{row};{col}H"


def encode(command, glyph=GLYPH):
    """
    Turn a draw command into the escape sequence that draws it.

    Logical columns are two cells wide, so every x is doubled on the way out.
    """
    if isinstance(command, Point):
        return move_to(command.x << 1, command.y) + glyph
    if isinstance(command, HSegment):
        width = (command.x2 - command.x1 + 1) << 1
        return move_to(command.x1 << 1, command.y) + repeat(glyph, width)
    raise TypeError(f"Cannot encode {type(command).__name__}: {command!r}")
