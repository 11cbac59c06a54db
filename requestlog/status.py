"""
Status-observing wrapper around an ASGI ``send`` callable.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from starlette.status import HTTP_200_OK
from starlette.types import Message, Send


class StatusRecorder:
    """
    Forwards every message to the wrapped ``send`` and remembers the first
    status code the application started a response with.

    ``status`` stays 0 until ``http.response.start`` has been sent.
    """

    def __init__(self, send: Send, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._send = send
        self._clock = clock
        self._status = 0
        self._status_set_at: Optional[int] = None

    @property
    def status(self) -> int:
        return self._status

    @property
    def status_set_at(self) -> Optional[int]:
        """Clock reading (nanoseconds) when the first status was sent, if any."""
        return self._status_set_at

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start" and self._status == 0:
            self._status = int(message.get("status", HTTP_200_OK))
            self._status_set_at = self._clock()
        await self._send(message)

    async def ensure_status(self) -> None:
        """
        Finish the response with an empty 200 if the application never started one.
        """
        if self._status:
            return
        await self({"type": "http.response.start", "status": HTTP_200_OK, "headers": []})
        await self({"type": "http.response.body", "body": b"", "more_body": False})
