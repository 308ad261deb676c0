#!/usr/bin/env python3
"""
bresenham.py – draw ASCII circles on the terminal with the midpoint algorithm.

Usage examples:
  # Three concentric outlines around the middle of the screen
  python bresenham.py 4 8 12

  # Solid disk
  python bresenham.py -f 10

  # Print the rasterizer state for each step instead of drawing
  python bresenham.py -v 3

  # Same picture as plain text, no escape sequences
  python bresenham.py -p -f 6

Canvas
------
The circle center is the middle of the terminal.  COLUMNS and LINES are used
when both are set, otherwise the terminal on stdin is asked for its size; if
that fails the error is reported and an 80x24 canvas is assumed.

Each logical column is drawn two character cells wide so circles come out
round on terminals whose cells are taller than they are wide.
"""

import argparse
import logging
import sys
from contextlib import contextmanager

from circleUtil.canvasUtil import paint, to_text
from circleUtil.drawUtil import GLYPH, clear_screen, encode
from circleUtil.shapeUtil import logger as rasterizer_log, rasterize
from circleUtil.terminalUtil import atoi, canvas_size, center_of, terminal_size

LOG_FORMAT = "%(filename)s:%(lineno)d:%(funcName)s: %(message)s"

logger = logging.getLogger(__name__)


# ── helpers ─────────────────────────────────────────────────────────────


@contextmanager
def _trace_to(out):
    """Send the rasterizer's trace lines to *out* while the block runs."""
    handler = logging.StreamHandler(out)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    level, propagate = rasterizer_log.level, rasterizer_log.propagate

    rasterizer_log.addHandler(handler)
    rasterizer_log.setLevel(logging.DEBUG)
    rasterizer_log.propagate = False
    try:
        yield
    finally:
        rasterizer_log.removeHandler(handler)
        rasterizer_log.setLevel(level)
        rasterizer_log.propagate = propagate


def _draw_commands(radii, center, fill=False):
    cx, cy = center
    for r in radii:
        yield from rasterize(r, cx, cy, fill=fill)


def render(radii, center, fill=False, trace=False, out=None):
    """Write every circle in *radii* to *out* as terminal escape sequences.

    In trace mode the rasterizer state is printed instead and the screen is
    left alone: no clear, no cursor movement, no final flush.
    """
    if out is None:
        out = sys.stdout

    if trace:
        cx, cy = center
        with _trace_to(out):
            for r in radii:
                rasterize(r, cx, cy, trace=True)
        return

    out.write(clear_screen())
    for command in _draw_commands(radii, center, fill=fill):
        out.write(encode(command, GLYPH))
    out.write("\n")
    out.flush()


def render_plain(radii, center, size, fill=False, out=None):
    """Draw onto an off-screen canvas of *size* and print it as plain text."""
    if out is None:
        out = sys.stdout

    cols, rows = size
    commands = list(_draw_commands(radii, center, fill=fill))
    grid = paint(commands, cols // 2, rows, glyph=GLYPH)
    out.write(to_text(grid) + "\n")
    out.flush()


# ── CLI ─────────────────────────────────────────────────────────────────


def build_parser():
    p = argparse.ArgumentParser(
        description="Draw circles on the terminal with Bresenham's algorithm."
    )

    p.add_argument(
        "radii",
        nargs="*",
        type=atoi,
        metavar="RADIUS",
        help="Circle radius in logical columns. Non-numeric values count as 0.",
    )
    p.add_argument(
        "-f",
        "--fill",
        action="store_true",
        help="Draw filled disks instead of outlines.",
    )
    p.add_argument(
        "-v",
        "--trace",
        action="store_true",
        help="Print the rasterizer state for every step instead of drawing.",
    )
    p.add_argument(
        "-p",
        "--plain",
        action="store_true",
        help="Print the picture as plain text without escape sequences "
        "(ignored with -v).",
    )

    return p


def parse_args(argv=None):
    """Options may come before, between or after the radii.

    Unrecognized options are reported and skipped.
    """
    parser = build_parser()
    args, unknown = parser.parse_known_intermixed_args(argv)
    for arg in unknown:
        logger.warning("%s: invalid option -- %r", parser.prog, arg)
    return args


# ── main ────────────────────────────────────────────────────────────────


def main(argv=None, size_query=terminal_size, out=None):
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)

    args = parse_args(argv)

    if out is None:
        out = sys.stdout

    size = canvas_size(size_query)
    center = center_of(size)
    logger.debug("canvas %dx%d, center %s", size[0], size[1], center)

    if args.plain and not args.trace:
        render_plain(args.radii, center, size, fill=args.fill, out=out)
    else:
        render(args.radii, center, fill=args.fill, trace=args.trace, out=out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
