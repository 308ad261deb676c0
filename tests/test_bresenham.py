import errno
import io
import logging

import bresenham
from circleUtil.canvasUtil import paint, to_text
from circleUtil.drawUtil import encode
from circleUtil.shapeUtil import format_trace, rasterize
from circleUtil.shapeUtil import logger as rasterizer_log


def _size(cols=80, rows=24):
    return lambda: (cols, rows)


def _run(argv, size_query=None):
    out = io.StringIO()
    status = bresenham.main(argv, size_query=size_query or _size(), out=out)
    assert status == 0
    return out.getvalue()


def test_parser_defaults():
    args = bresenham.build_parser().parse_args([])
    assert args.radii == []
    assert not args.fill and not args.trace and not args.plain


def test_parser_radii_parse_like_atoi():
    args = bresenham.build_parser().parse_args(["-f", "5", "x", "7px", "-3"])
    assert args.fill
    assert args.radii == [5, 0, 7, -3]


def test_options_may_follow_radii():
    args = bresenham.parse_args(["3", "-f", "5"])
    assert args.fill
    assert args.radii == [3, 5]


def test_fill_option_between_radii_fills_every_disk():
    expected = "".join(encode(c) for r in (3, 5) for c in rasterize(r, 20, 12, fill=True))
    assert _run(["3", "-f", "5"]) == "\033[2J" + expected + "\n"


def test_no_radii_just_clears():
    assert _run([]) == "\033[2J\n"


def test_outline_stream():
    expected = "".join(encode(c) for c in rasterize(3, 20, 12))
    assert _run(["3"]) == "\033[2J" + expected + "\n"


def test_fill_stream_uses_terminal_center():
    expected = "".join(encode(c) for c in rasterize(4, 25, 20, fill=True))
    assert _run(["-f", "4"], _size(100, 40)) == "\033[2J" + expected + "\n"


def test_several_radii_in_order():
    expected = "".join(encode(c) for r in (2, 5) for c in rasterize(r, 20, 12))
    assert _run(["2", "5"]) == "\033[2J" + expected + "\n"


def test_negative_radius_renders_nothing():
    assert _run(["-2"]) == "\033[2J\n"


def test_trace_output():
    lines = _run(["-v", "3"]).splitlines()
    states = rasterize(3, 0, 0, trace=True)
    assert len(lines) == len(states)
    for line, state in zip(lines, states):
        assert line.startswith("shapeUtil.py:")
        assert ":rasterize: " in line
        assert line.endswith(format_trace(state))
        assert "\033" not in line


def test_trace_ignores_fill_and_plain():
    plain = _run(["-v", "3"])
    assert _run(["-v", "-f", "-p", "3"]) == plain


def test_trace_does_not_depend_on_terminal_size():
    tail = [line.split(": ", 1)[1] for line in _run(["-v", "4"]).splitlines()]
    other = [line.split(": ", 1)[1] for line in _run(["-v", "4"], _size(200, 60)).splitlines()]
    assert tail == other


def test_plain_output():
    expected = to_text(paint(rasterize(2, 5, 5), 10, 10)) + "\n"
    out = _run(["-p", "2"], _size(20, 10))
    assert out == expected
    assert "\033" not in out


def test_failed_size_query_uses_default_canvas(caplog):
    def broken():
        raise OSError(errno.ENOTTY, "Inappropriate ioctl for device")

    with caplog.at_level(logging.ERROR):
        out = _run(["1"], broken)

    expected = "".join(encode(c) for c in rasterize(1, 20, 12))
    assert out == "\033[2J" + expected + "\n"
    assert "TIOCGWINSZ: Inappropriate ioctl for device" in caplog.text


def test_environment_sets_the_canvas(monkeypatch):
    monkeypatch.setenv("COLUMNS", "40")
    monkeypatch.setenv("LINES", "20")
    out = io.StringIO()
    bresenham.main(["0"], out=out)
    expected = "".join(encode(c) for c in rasterize(0, 10, 10))
    assert out.getvalue() == "\033[2J" + expected + "\n"


def test_unknown_option_is_reported_and_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        out = _run(["-z", "3"])

    expected = "".join(encode(c) for c in rasterize(3, 20, 12))
    assert out == "\033[2J" + expected + "\n"
    assert "invalid option" in caplog.text
    assert "-z" in caplog.text


def test_trace_handler_is_detached_afterwards():
    handlers = list(rasterizer_log.handlers)
    level, propagate = rasterizer_log.level, rasterizer_log.propagate

    _run(["-v", "2"])

    assert rasterizer_log.handlers == handlers
    assert rasterizer_log.level == level
    assert rasterizer_log.propagate == propagate
