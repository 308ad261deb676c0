import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

TRACE_FORMAT = "x=%3d, x2=%5d, dx2=%3d, y=%3d, y2=%5d, dy2=%3d, sum=%5d"


Point = namedtuple("Point", ["x", "y"])
HSegment = namedtuple("HSegment", ["x1", "x2", "y"])
TraceState = namedtuple("TraceState", ["x", "x2", "dx2", "y", "y2", "dy2", "sum"])


def format_trace(state):
    return TRACE_FORMAT % tuple(state)


"""
Octant reflections of (x, y), in emission order
1 (cx - y, cy + x)
2 (cx + y, cy + x)
3 (cx - y, cy - x)
4 (cx + y, cy - x)
5 (cx - x, cy - y)
6 (cx + x, cy - y)
7 (cx - x, cy + y)
8 (cx + x, cy + y)
"""


def octant_points(cx, cy, x, y):
    """The 8 symmetric points of (x, y) about (cx, cy). Duplicates are kept."""
    return [
        Point(cx - y, cy + x),
        Point(cx + y, cy + x),
        Point(cx - y, cy - x),
        Point(cx + y, cy - x),
        Point(cx - x, cy - y),
        Point(cx + x, cy - y),
        Point(cx - x, cy + y),
        Point(cx + x, cy + y),
    ]


def rasterize(r, cx, cy, fill=False, trace=False):
    """
    Midpoint circle of radius r centered at (cx, cy), integer arithmetic only.

    Walks one octant from (0, r) until x passes y.  x2/y2 track the squares of
    x and y through their odd-number differences dx2/dy2.  The decision term
    (reported as sum) starts at r^2 + r and loses x^2 as x advances, so y
    steps down whenever r^2 + r - (x + 1)^2 <= y^2.

    Returns the draw commands in emission order:
      outline -> 8 Points per step
      fill    -> 2 HSegments per step across the wide band, plus 2 more
                 closing the caps at rows cy -/+ y right before y shrinks
      trace   -> one TraceState per step and nothing else; each one is also
                 logged at debug level on this module's logger
    """
    commands = []

    x, x2, dx2 = 0, 0, 1
    y, y2, dy2 = r, r * r, 2 * r - 1
    decision = r * r + r

    while x <= y:
        if trace:
            state = TraceState(x, x2, dx2, y, y2, dy2, decision)
            logger.debug(TRACE_FORMAT, *state)
            commands.append(state)
        elif fill:
            commands.append(HSegment(cx - y, cx + y, cy + x))
            commands.append(HSegment(cx - y, cx + y, cy - x))
        else:
            commands.extend(octant_points(cx, cy, x, y))

        decision -= dx2
        if decision <= y2:
            # Caps must be closed with the old y, it is gone after the step.
            if fill and not trace:
                commands.append(HSegment(cx - x, cx + x, cy - y))
                commands.append(HSegment(cx - x, cx + x, cy + y))
            y -= 1
            y2 -= dy2
            dy2 -= 2

        x += 1
        x2 += dx2
        dx2 += 2

    return commands
