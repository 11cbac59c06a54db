"""Request logging middleware for ASGI applications."""

from requestlog.colors import AnsiColorizer, Color, Colorizer, PlainColorizer, get_colorizer
from requestlog.formatting import format_duration
from requestlog.middleware import (
    RequestLoggerMiddleware,
    get_request_id,
    request_logger,
    verbose_request_logger,
)
from requestlog.status import StatusRecorder

__all__ = [
    "AnsiColorizer",
    "Color",
    "Colorizer",
    "PlainColorizer",
    "RequestLoggerMiddleware",
    "StatusRecorder",
    "format_duration",
    "get_colorizer",
    "get_request_id",
    "request_logger",
    "verbose_request_logger",
]
