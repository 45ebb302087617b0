"""
Konduto SDK exceptions.

Every failure surfaced by the SDK is a ``KondutoError``. HTTP/application
failures are ``ServiceError`` subclasses built by ``build_from_http_status``.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Any


class KondutoError(Exception):
    """Base exception for all Konduto SDK errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(KondutoError):
    """Raised when the SDK is used before it is configured, or misconfigured."""
    pass


class InvalidOrderIdError(KondutoError):
    """Raised when an operation receives an empty order id."""
    pass


class TransportError(KondutoError):
    """Raised when no HTTP response could be obtained."""
    pass


class UnexpectedResponseError(KondutoError):
    """Raised when a successful response lacks a required field."""

    def __init__(self, message: str, body: Any = None):
        super().__init__(message, details={"body": body})
        self.body = body


class ServiceError(KondutoError):
    """Raised when the API signals failure through HTTP status or body."""

    default_message = "Konduto API returned an error"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        body: Any = None
    ):
        super().__init__(
            message or self.default_message,
            details={"status_code": status_code, "body": body}
        )
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"[{self.status_code}] {self.message}"


class ClientError(ServiceError):
    """4xx responses."""
    default_message = "Request rejected by Konduto API"


class BadRequestError(ClientError):
    default_message = "Malformed request"


class InvalidAPIKeyError(ClientError):
    default_message = "Invalid API key"


class OperationNotAllowedError(ClientError):
    default_message = "Operation not allowed for this API key"


class OrderNotFoundError(ClientError):
    default_message = "Order not found"


class MethodNotAllowedError(ClientError):
    default_message = "HTTP method not allowed"


class DuplicateOrderError(ClientError):
    default_message = "Order already exists"


class RequestTooLargeError(ClientError):
    default_message = "Request body too large"


class UnprocessableOrderError(ClientError):
    default_message = "Order could not be processed"


class RateLimitError(ClientError):
    default_message = "Rate limit exceeded"


class ServerError(ServiceError):
    """5xx responses."""
    default_message = "Konduto API server error"


class InternalServerError(ServerError):
    default_message = "Konduto API internal error"


_STATUS_ERRORS: dict[int, type[ServiceError]] = {
    400: BadRequestError,
    401: InvalidAPIKeyError,
    403: OperationNotAllowedError,
    404: OrderNotFoundError,
    405: MethodNotAllowedError,
    409: DuplicateOrderError,
    413: RequestTooLargeError,
    422: UnprocessableOrderError,
    429: RateLimitError,
    500: InternalServerError,
}


def _extract_message(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None

    for key in ("message", "error"):
        value = body.get(key)
        if isinstance(value, dict):
            # {"error": {"message": ...}} envelopes
            value = value.get("message")
        if isinstance(value, str) and value:
            return value

    return None


def build_from_http_status(body: Any, status_code: int | None) -> ServiceError:
    """
    Classify a non-ok response into a ServiceError subclass.

    The HTTP status picks the class; the body only supplies the message and
    is attached for diagnostics. Every input yields exactly one error.

    Args:
        body: Parsed JSON body, or None if the body was not JSON
        status_code: HTTP status of the response

    Returns:
        The error to raise
    """
    message = _extract_message(body)

    if status_code in _STATUS_ERRORS:
        error_class = _STATUS_ERRORS[status_code]
    elif status_code is not None and 400 <= status_code < 500:
        error_class = ClientError
    elif status_code is not None and 500 <= status_code < 600:
        error_class = ServerError
    else:
        error_class = ServiceError

    return error_class(message, status_code=status_code, body=body)
