"""
Line formatters for the request logger:
- start line (method, URL, client address)
- header lines (verbose mode)
- end line (status and duration, colored by bucket)
"""

from __future__ import annotations

import json
from typing import List

from requestlog.colors import Color, Colorizer
from requestlog.snapshot import RequestSnapshot

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

FAST_THRESHOLD_NS = 500 * MILLISECOND
SLOW_THRESHOLD_NS = 5 * SECOND


def _fraction(value: int, digits: int) -> str:
    if not value:
        return ""
    return "." + str(value).zfill(digits).rstrip("0")


def format_duration(ns: int) -> str:
    """
    Render a nanosecond interval as "250µs", "120ms", "6s", "1m30.5s", "1h0m0s".
    """
    if ns == 0:
        return "0s"

    sign = "-" if ns < 0 else ""
    ns = abs(ns)

    if ns < SECOND:
        if ns < MICROSECOND:
            return f"{sign}{ns}ns"
        if ns < MILLISECOND:
            whole, frac = divmod(ns, MICROSECOND)
            return f"{sign}{whole}{_fraction(frac, 3)}µs"
        whole, frac = divmod(ns, MILLISECOND)
        return f"{sign}{whole}{_fraction(frac, 6)}ms"

    seconds, frac = divmod(ns, SECOND)
    text = f"{seconds % 60}{_fraction(frac, 9)}s"
    minutes = seconds // 60
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def status_color(status: int) -> Color:
    """
    Informational -> success -> redirect -> client error -> server error.
    """
    if status < 200:
        return Color.BRIGHT_BLUE
    if status < 300:
        return Color.BRIGHT_GREEN
    if status < 400:
        return Color.BRIGHT_CYAN
    if status < 500:
        return Color.BRIGHT_YELLOW
    return Color.BRIGHT_RED


def duration_color(ns: int) -> Color:
    """
    Fast under 500ms, moderate up to 5s, slow beyond.
    """
    if ns < FAST_THRESHOLD_NS:
        return Color.GREEN
    if ns < SLOW_THRESHOLD_NS:
        return Color.YELLOW
    return Color.RED


def request_id_prefix(request_id: str, colorizer: Colorizer) -> str:
    """
    "[<id>] " when a request ID is tracked, otherwise nothing.
    """
    if not request_id:
        return ""
    return colorizer.colorize(f"[{request_id}]", Color.BRIGHT_BLACK) + " "


def format_start(snapshot: RequestSnapshot, colorizer: Colorizer) -> str:
    """
    [<id>] Started <METHOD> "<URL>" from <ADDR>
    """
    return (
        request_id_prefix(snapshot.request_id, colorizer)
        + "Started "
        + colorizer.colorize(snapshot.method, Color.BRIGHT_MAGENTA)
        + " "
        + colorizer.colorize(json.dumps(snapshot.url, ensure_ascii=False), Color.BLUE)
        + " from "
        + snapshot.origin
    )


def format_headers(snapshot: RequestSnapshot, colorizer: Colorizer) -> List[str]:
    """
    One line per header key, values joined with ", " in arrival order.
    """
    prefix = request_id_prefix(snapshot.request_id, colorizer)
    return [f"{prefix}{key}: {', '.join(values)}" for key, values in snapshot.headers.items()]


def format_end(request_id: str, status: int, duration_ns: int, colorizer: Colorizer) -> str:
    """
    [<id>] Returning <STATUS> in <DURATION>
    """
    return (
        request_id_prefix(request_id, colorizer)
        + "Returning "
        + colorizer.colorize(f"{status:03d}", status_color(status))
        + " in "
        + colorizer.colorize(format_duration(duration_ns), duration_color(duration_ns))
    )
