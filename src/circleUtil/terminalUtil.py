import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_SIZE = (80, 24)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def atoi(text):
    """Parse a leading integer the way C's atoi does; no number means 0."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def env_size(environ=None):
    """(cols, rows) from COLUMNS and LINES, or None unless both are set."""
    if environ is None:
        environ = os.environ
    cols = environ.get("COLUMNS")
    lines = environ.get("LINES")
    if cols is None or lines is None:
        return None
    return atoi(cols), atoi(lines)


def terminal_size(fd=0, environ=None):
    """
    Terminal geometry as (cols, rows).

    The environment wins when it names both dimensions; otherwise the
    terminal on *fd* is asked for its window size, which raises OSError when
    *fd* is not a terminal.
    """
    size = env_size(environ)
    if size is not None:
        return size
    size = os.get_terminal_size(fd)
    return size.columns, size.lines


def canvas_size(size_query=terminal_size):
    """
    Terminal geometry as (cols, rows), never failing.

    A failed size query is reported and replaced by DEFAULT_SIZE.
    """
    try:
        return size_query()
    except OSError as e:
        logger.error("TIOCGWINSZ: %s (errno=%s)", e.strerror, e.errno)
        return DEFAULT_SIZE


def center_of(size):
    """Logical center of a (cols, rows) canvas.

    Columns are quartered rather than halved since each logical column takes
    two character cells.
    """
    cols, rows = size
    return cols // 4, rows // 2


def canvas_center(size_query=terminal_size):
    return center_of(canvas_size(size_query))
