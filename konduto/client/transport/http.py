"""
HTTP transport for Konduto API calls, built on requests.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import requests
from loguru import logger

from konduto.client.transport.base import HttpRequest, HttpResponse


class RequestsTransport:
    """
    Transport sending requests through a ``requests.Session``.

    The transport is a pure byte exchange: it never looks at status codes,
    and network failures come back as ``HttpResponse.error`` rather than
    being raised.
    """

    def __init__(self, session: requests.Session | None = None):
        """
        Initialize HTTP transport.

        Args:
            session: Session to reuse; a new one is created if omitted
        """
        self._session = session or requests.Session()
        self._closed = False

    def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send an HTTP request to the API.

        Args:
            request: Built request, including per-request options such as
                ``timeout`` and ``verify``

        Returns:
            The raw response, or a response carrying the transport error
        """
        if self._closed:
            return HttpResponse(error=RuntimeError("Transport is closed"))

        try:
            response = self._session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body,
                **request.options
            )
        except requests.RequestException as e:
            logger.debug(f"{request.method} {request.url} transport failure: {e}")
            return HttpResponse(error=e)

        return HttpResponse(
            status_code=response.status_code,
            body=response.content or b"",
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close transport and cleanup resources."""
        self._closed = True
        self._session.close()
