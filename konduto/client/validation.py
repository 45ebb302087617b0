"""
Response validation for the Konduto SDK.

A response is ok only when the HTTP status is 2xx and the JSON body carries
``"status": "ok"``. Gateways may answer 200 with an error payload, so both
signals are checked.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Any

from konduto.client.exceptions import TransportError, build_from_http_status
from konduto.client.transport.base import HttpResponse


def is_body_status_ok(body: Any) -> bool:
    """Check for ``'status': 'ok'`` in a parsed response body."""
    return isinstance(body, dict) and body.get("status") == "ok"


def is_ok(response: HttpResponse) -> bool:
    """Check the full ok-contract on a response."""
    return (
        response.error is None
        and response.is_http_success()
        and is_body_status_ok(response.json())
    )


def validate_response(response: HttpResponse) -> dict[str, Any]:
    """
    Validate a raw response and return its parsed body.

    Args:
        response: Response returned by the transport

    Returns:
        The parsed JSON body

    Raises:
        TransportError: If no HTTP response was obtained
        ServiceError: If the response does not satisfy the ok-contract
    """
    if response.error is not None:
        raise TransportError(
            f"HTTP request failed: {response.error}",
            details={"error": repr(response.error)}
        ) from response.error

    body = response.json()
    if not is_ok(response):
        raise build_from_http_status(body, response.status_code)

    return body
