"""
Tests for the line formatters and duration rendering.
"""

import pytest

from requestlog.colors import AnsiColorizer, Color, PlainColorizer
from requestlog.formatting import (
    MILLISECOND,
    SECOND,
    duration_color,
    format_duration,
    format_end,
    format_headers,
    format_start,
    status_color,
)
from requestlog.snapshot import RequestSnapshot

plain = PlainColorizer()


def _snapshot(**overrides):
    fields = dict(
        method="GET",
        url="/widgets?id=1",
        remote_addr="192.0.2.1:5555",
        headers={},
        request_id="",
    )
    fields.update(overrides)
    return RequestSnapshot(**fields)


@pytest.mark.parametrize(
    "ns, expected",
    [
        (0, "0s"),
        (1, "1ns"),
        (999, "999ns"),
        (1500, "1.5µs"),
        (250_000, "250µs"),
        (120 * MILLISECOND, "120ms"),
        (1_234_567, "1.234567ms"),
        (6 * SECOND, "6s"),
        (1500 * MILLISECOND, "1.5s"),
        (90 * SECOND, "1m30s"),
        (60 * SECOND, "1m0s"),
        (3600 * SECOND, "1h0m0s"),
        (3661 * SECOND + 500 * MILLISECOND, "1h1m1.5s"),
        (-120 * MILLISECOND, "-120ms"),
    ],
)
def test_format_duration(ns, expected):
    assert format_duration(ns) == expected


@pytest.mark.parametrize(
    "status, color",
    [
        (100, Color.BRIGHT_BLUE),
        (199, Color.BRIGHT_BLUE),
        (200, Color.BRIGHT_GREEN),
        (299, Color.BRIGHT_GREEN),
        (301, Color.BRIGHT_CYAN),
        (404, Color.BRIGHT_YELLOW),
        (500, Color.BRIGHT_RED),
        (599, Color.BRIGHT_RED),
    ],
)
def test_status_buckets(status, color):
    assert status_color(status) is color


def test_duration_buckets():
    assert duration_color(499 * MILLISECOND) is Color.GREEN
    assert duration_color(500 * MILLISECOND) is Color.YELLOW
    assert duration_color(4999 * MILLISECOND) is Color.YELLOW
    assert duration_color(5 * SECOND) is Color.RED


def test_start_line_without_request_id():
    line = format_start(_snapshot(), plain)
    assert line == 'Started GET "/widgets?id=1" from 192.0.2.1:5555'


def test_start_line_with_request_id():
    line = format_start(_snapshot(request_id="abc123"), plain)
    assert line == '[abc123] Started GET "/widgets?id=1" from 192.0.2.1:5555'


def test_start_line_prefers_forwarded_for():
    snap = _snapshot(headers={"X-Forwarded-For": ["10.0.0.5"]})
    assert format_start(snap, plain).endswith("from 10.0.0.5")


def test_start_line_ignores_empty_forwarded_for():
    snap = _snapshot(headers={"X-Forwarded-For": [""]})
    assert format_start(snap, plain).endswith("from 192.0.2.1:5555")


def test_start_line_quotes_url():
    line = format_start(_snapshot(url='/say?q="hi"'), plain)
    assert '"/say?q=\\"hi\\""' in line


def test_start_line_colors():
    line = format_start(_snapshot(request_id="r1"), AnsiColorizer())
    assert line.startswith("\033[30;1m[r1]\033[0m Started ")
    assert "\033[35;1mGET\033[0m" in line
    assert '\033[34m"/widgets?id=1"\033[0m' in line


def test_header_lines_one_per_key():
    snap = _snapshot(
        request_id="abc",
        headers={"Accept": ["text/html", "application/json"], "Host": ["example.com"]},
    )
    lines = format_headers(snap, plain)
    assert sorted(lines) == [
        "[abc] Accept: text/html, application/json",
        "[abc] Host: example.com",
    ]


def test_header_lines_empty_without_headers():
    assert format_headers(_snapshot(), plain) == []


@pytest.mark.parametrize("status, rendered", [(404, "404"), (7, "007"), (200, "200")])
def test_end_line_pads_status(status, rendered):
    line = format_end("", status, 120 * MILLISECOND, plain)
    assert line == f"Returning {rendered} in 120ms"


def test_end_line_with_request_id():
    assert format_end("abc123", 200, 6 * SECOND, plain) == "[abc123] Returning 200 in 6s"


def test_end_line_colors():
    line = format_end("", 503, 6 * SECOND, AnsiColorizer())
    assert line == "Returning \033[31;1m503\033[0m in \033[31m6s\033[0m"
