"""
Pydantic v2 models for the demo API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Widget(BaseModel):
    """
    A catalogue entry served by /widgets/{widget_id}.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1, max_length=200)
    color: Optional[str] = None


class HealthResponse(BaseModel):
    """
    Liveness payload for /health.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    ok: bool
    service: str


class ErrorResponse(BaseModel):
    """
    Error payload returned for unknown resources.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    error: str
    message: str
