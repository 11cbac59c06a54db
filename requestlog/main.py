"""
Demo FastAPI application wired with the request logger.

Implements:
- /health
- /widgets/{widget_id} (in-memory catalogue, 404 for unknown IDs)
- Request ID taken from the configured header and stored on request.state
- Request logging (start line, optional headers, status + latency)
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from requestlog.colors import get_colorizer
from requestlog.config import Settings, settings as default_settings
from requestlog.middleware import RequestLoggerMiddleware
from requestlog.models import ErrorResponse, HealthResponse, Widget
from requestlog.monitoring import configure_logging

WIDGETS: Dict[int, Widget] = {
    1: Widget(id=1, name="sprocket", color="red"),
    2: Widget(id=2, name="flange"),
}


def create_app(
    settings: Optional[Settings] = None,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    """
    settings = settings or default_settings
    if logger is None:
        logger = configure_logging(settings)

    app = FastAPI(title=settings.service_name)

    app.add_middleware(
        RequestLoggerMiddleware,
        logger=logger,
        verbose=settings.verbose,
        colorizer=get_colorizer(settings.color),
    )

    # Added last so it runs first and the logger sees the ID
    @app.middleware("http")
    async def attach_request_id(request: Request, call_next):
        request_id = request.headers.get(settings.request_id_header)
        if request_id:
            request.state.request_id = request_id
        return await call_next(request)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(ok=True, service=settings.service_name)

    @app.get("/widgets/{widget_id}", response_model=Widget)
    async def get_widget(widget_id: int):
        """
        Look up a widget by ID.
        """
        widget = WIDGETS.get(widget_id)
        if widget is None:
            err = ErrorResponse(error="not_found", message=f"Widget {widget_id} does not exist.")
            return JSONResponse(status_code=404, content=err.model_dump())
        return widget

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "requestlog.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
