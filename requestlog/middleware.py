"""
ASGI middleware that logs the start and end of each request.

For every HTTP request it writes:
- a "Started" line with method, URL and client address
- in verbose mode, one line per request header
- a "Returning" line with the response status and how long the app took

A request ID is included when one has been stored on ``request.state``.
Lines are colored unless a plain colorizer is supplied.

This is meant to be Good Enough for small services. Applications that
need machine-parseable output or a different destination are expected to
replace it with their own logger.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, MutableMapping, Optional

from starlette.types import ASGIApp, Receive, Scope, Send

from requestlog.colors import AnsiColorizer, Colorizer
from requestlog.formatting import format_end, format_headers, format_start
from requestlog.snapshot import RequestSnapshot, TimingSpan
from requestlog.status import StatusRecorder

LOGGER_NAME = "requestlog"


def get_request_id(scope: MutableMapping[str, Any]) -> str:
    """
    Read the request ID another middleware stored via ``request.state.request_id``.
    """
    state = scope.get("state") or {}
    request_id = state.get("request_id") if isinstance(state, dict) else None
    return str(request_id) if request_id else ""


class RequestLoggerMiddleware:
    """
    Logs "Started ..." before and "Returning ..." after the wrapped app runs.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        logger: Optional[logging.Logger] = None,
        verbose: bool = False,
        colorizer: Optional[Colorizer] = None,
        request_id_getter: Callable[[MutableMapping[str, Any]], str] = get_request_id,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self.app = app
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.verbose = verbose
        self.colorizer = colorizer if colorizer is not None else AnsiColorizer()
        self.request_id_getter = request_id_getter
        self.clock = clock

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = self.request_id_getter(scope) or ""
        snapshot = RequestSnapshot.from_scope(scope, request_id)

        self.logger.info(format_start(snapshot, self.colorizer))
        if self.verbose:
            for line in format_headers(snapshot, self.colorizer):
                self.logger.info(line)

        recorder = StatusRecorder(send)

        start = self.clock()
        await self.app(scope, receive, recorder)
        await recorder.ensure_status()
        span = TimingSpan(start_ns=start, end_ns=self.clock())

        self.logger.info(format_end(request_id, recorder.status, span.duration_ns, self.colorizer))


def request_logger(app: ASGIApp, **kwargs: Any) -> RequestLoggerMiddleware:
    """
    Wrap ``app`` with a request logger that does not dump headers.
    """
    kwargs["verbose"] = False
    return RequestLoggerMiddleware(app, **kwargs)


def verbose_request_logger(app: ASGIApp, **kwargs: Any) -> RequestLoggerMiddleware:
    """
    Same as ``request_logger`` but also logs every request header.
    """
    kwargs["verbose"] = True
    return RequestLoggerMiddleware(app, **kwargs)
