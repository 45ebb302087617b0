"""
Turn a logical API operation into an authenticated HttpRequest.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import base64
import json
from dataclasses import dataclass
from typing import Any

from konduto.client.exceptions import ConfigurationError
from konduto.client.transport.base import HttpRequest
from konduto.core.state import StateSnapshot

USER_AGENT = "Konduto-Python-SDK/2.0.0"

ORDERS_PATH = "/orders"

# Methods addressing a single existing order
_ID_METHODS = frozenset({"GET", "PUT"})


@dataclass(frozen=True)
class Operation:
    """What to call: HTTP method, resource path, optional body and id."""

    method: str
    path: str = ORDERS_PATH
    body: dict[str, Any] | None = None
    resource_id: str | None = None

    def resolve_uri(self, endpoint: str) -> str:
        """Full URL; the id segment is only used for GET and PUT."""
        uri = f"{endpoint.rstrip('/')}{self.path}"
        if self.method.upper() in _ID_METHODS and self.resource_id is not None:
            uri += f"/{self.resource_id}"
        return uri


def basic_authorization(api_key: str) -> str:
    """Basic auth header value with the API key as username and no password."""
    token = base64.b64encode(f"{api_key}:".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def build_request(
    operation: Operation,
    snapshot: StateSnapshot,
    endpoint: str,
    default_timeout: float | None = None
) -> HttpRequest:
    """
    Build the HTTP request for an operation.

    Args:
        operation: Method, path, body and id of the call
        snapshot: Configuration captured at the start of the call
        endpoint: API base URL
        default_timeout: Timeout used when none is configured

    Returns:
        Request ready for the transport

    Raises:
        ConfigurationError: If no API key has been set
    """
    if not snapshot.has_api_key:
        raise ConfigurationError("API key not set. Call konduto.set_api_key() first")

    headers = {
        "Authorization": basic_authorization(snapshot.api_key),
        "Accept": "application/json",
        "User-Agent": USER_AGENT,
    }

    body = None
    if operation.body is not None:
        body = json.dumps(operation.body).encode("utf-8")
        headers["Content-Type"] = "application/json"

    options: dict[str, Any] = {}
    if default_timeout is not None:
        options["timeout"] = default_timeout
    options.update(snapshot.transport_options)
    # Required options always win over configured ones
    options["verify"] = snapshot.use_tls

    return HttpRequest(
        method=operation.method.upper(),
        url=operation.resolve_uri(endpoint),
        headers=headers,
        body=body,
        options=options,
    )
