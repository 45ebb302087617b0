"""
Transport protocol and HTTP message types for the Konduto SDK.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol


@dataclass
class HttpRequest:
    """A fully built request, owned by a single API call."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass
class HttpResponse:
    """
    Raw result of one round trip.

    ``error`` holds the transport exception when no HTTP response was
    obtained; ``status_code`` is 0 in that case.
    """

    status_code: int = 0
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    error: Exception | None = None

    def __post_init__(self):
        self._json_loaded = False
        self._json: Any = None

    def json(self) -> Any:
        """Parsed body, or None if the body is not valid JSON."""
        if not self._json_loaded:
            try:
                self._json = json.loads(self.body) if self.body else None
            except (ValueError, UnicodeDecodeError):
                self._json = None
            self._json_loaded = True
        return self._json

    def is_http_success(self) -> bool:
        """Check if the HTTP status is in the 2xx range."""
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Protocol for the layer that moves bytes between SDK and API."""

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Perform one HTTP exchange.

        Never raises for HTTP status codes or network failures; the latter
        are reported through ``HttpResponse.error``.
        """
        ...

    def close(self) -> None:
        """Close transport and cleanup resources."""
        ...
