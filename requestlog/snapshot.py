"""
Per-request data captured by the request logger.

Everything here lives only for the duration of one request and is built
straight from the ASGI scope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, MutableMapping

FORWARDED_FOR_HEADER = "X-Forwarded-For"


def canonical_header_key(key: str) -> str:
    """
    Canonical MIME form of a header name: "x-forwarded-for" -> "X-Forwarded-For".
    """
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def _decode(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return str(value)


def collect_headers(raw_headers: Any) -> Dict[str, List[str]]:
    """
    Group raw ASGI header pairs by canonical key, keeping value order per key.
    """
    headers: Dict[str, List[str]] = {}
    for raw_key, raw_value in raw_headers or ():
        key = canonical_header_key(_decode(raw_key))
        headers.setdefault(key, []).append(_decode(raw_value))
    return headers


@dataclass(frozen=True)
class RequestSnapshot:
    """
    The parts of an inbound request that end up in log lines.
    """

    method: str
    url: str
    remote_addr: str
    headers: Mapping[str, List[str]] = field(default_factory=dict)
    request_id: str = ""

    @property
    def origin(self) -> str:
        """
        Client address, preferring a non-empty X-Forwarded-For over the socket peer.
        """
        values = self.headers.get(FORWARDED_FOR_HEADER)
        if values and values[0]:
            return values[0]
        return self.remote_addr

    @classmethod
    def from_scope(cls, scope: MutableMapping[str, Any], request_id: str = "") -> "RequestSnapshot":
        """
        Build a snapshot from an HTTP scope.
        """
        raw_path = scope.get("raw_path")
        # Some servers leave the query string on raw_path
        path = _decode(raw_path).split("?", 1)[0] if raw_path else scope.get("path", "")
        query = _decode(scope.get("query_string") or b"")
        url = f"{path}?{query}" if query else path

        client = scope.get("client")
        remote_addr = f"{client[0]}:{client[1]}" if client else ""

        return cls(
            method=scope.get("method", ""),
            url=url,
            remote_addr=remote_addr,
            headers=collect_headers(scope.get("headers")),
            request_id=request_id,
        )


@dataclass(frozen=True)
class TimingSpan:
    """
    Start and end instants (nanoseconds) around the inner application call.
    """

    start_ns: int
    end_ns: int

    @property
    def duration_ns(self) -> int:
        return max(0, self.end_ns - self.start_ns)
