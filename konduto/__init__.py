"""
Konduto SDK.

Python client for the Konduto fraud analysis API.

Author: Yobie Benjamin
Date: 2026-10-18

Example Usage:
    ```python
    import konduto
    from konduto import Order, OrderStatus

    konduto.set_api_key("T0123456789ABCDEF01234")   # sandbox key
    konduto.set_logger(konduto.LoguruLogger())

    order = konduto.analyze(Order(id="ORD-1", total_amount=312.71))
    if order.is_declined():
        konduto.update_order_status("ORD-1", OrderStatus.DECLINED, "Auto decline")
    ```
"""

from threading import Lock
from typing import Any, Mapping, Optional

from konduto.client import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    DuplicateOrderError,
    InternalServerError,
    InvalidAPIKeyError,
    InvalidOrderIdError,
    KondutoClient,
    KondutoError,
    MethodNotAllowedError,
    OperationNotAllowedError,
    Order,
    OrderNotFoundError,
    OrderStatus,
    RateLimitError,
    Recommendation,
    RequestTooLargeError,
    SerializableOrder,
    ServerError,
    ServiceError,
    TransportError,
    UnexpectedResponseError,
    UnprocessableOrderError,
)
from konduto.config import KondutoSettings, get_settings
from konduto.core import STATE
from konduto.utils.logging import Logger, LoguruLogger, NullLogger

__version__ = "2.0.0"

_default_client: Optional[KondutoClient] = None
_client_lock = Lock()


def get_client() -> KondutoClient:
    """
    Get the client used by the module-level functions.

    Returns:
        Process-wide KondutoClient instance
    """
    global _default_client

    if _default_client is None:
        with _client_lock:
            if _default_client is None:
                _default_client = KondutoClient(state=STATE)

    return _default_client


def configure(settings: KondutoSettings) -> KondutoClient:
    """
    Apply settings to the process-wide configuration.

    Sets the API key when the settings carry one and rebuilds the default
    client for the settings' endpoint and timeout.
    """
    global _default_client

    if settings.api_key:
        STATE.set_api_key(settings.api_key)

    # The previous client stays open for calls still in flight
    with _client_lock:
        _default_client = KondutoClient(state=STATE, settings=settings)

    return _default_client


def set_api_key(api_key: str) -> bool:
    """Use ``api_key`` for all subsequent requests."""
    return STATE.set_api_key(api_key)


def set_logger(logger: Optional[Logger]) -> None:
    """Change the request logger, disabled by default. None disables it."""
    STATE.set_logger(logger)


def set_transport_options(options: Mapping[str, Any]) -> None:
    """Replace the extra options (e.g. ``timeout``) applied to every request."""
    STATE.set_transport_options(options)


def get_order(order_id: str) -> SerializableOrder:
    """Query Konduto for an order given its id."""
    return get_client().get_order(order_id)


def analyze(order: SerializableOrder) -> SerializableOrder:
    """Send an order for fraud analysis."""
    return get_client().analyze(order)


def send_order(order: Order) -> SerializableOrder:
    """Send an order to Konduto without prompting an analysis."""
    return get_client().send_order(order)


def update_order_status(order_id: str, status: OrderStatus | str, comments: str = "") -> bool:
    """Update the status of a previously sent order."""
    return get_client().update_order_status(order_id, status, comments)


__all__ = [
    # Operations
    "set_api_key",
    "set_logger",
    "set_transport_options",
    "configure",
    "get_client",
    "analyze",
    "send_order",
    "get_order",
    "update_order_status",
    # Client & config
    "KondutoClient",
    "KondutoSettings",
    "get_settings",
    "Logger",
    "LoguruLogger",
    "NullLogger",
    # Models
    "Order",
    "OrderStatus",
    "Recommendation",
    "SerializableOrder",
    # Exceptions
    "KondutoError",
    "ConfigurationError",
    "InvalidOrderIdError",
    "TransportError",
    "UnexpectedResponseError",
    "ServiceError",
    "ClientError",
    "BadRequestError",
    "InvalidAPIKeyError",
    "OperationNotAllowedError",
    "OrderNotFoundError",
    "MethodNotAllowedError",
    "DuplicateOrderError",
    "RequestTooLargeError",
    "UnprocessableOrderError",
    "RateLimitError",
    "ServerError",
    "InternalServerError",
]
