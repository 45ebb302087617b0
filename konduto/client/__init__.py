"""
Konduto Client SDK.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from konduto.client.exceptions import (
    BadRequestError,
    ClientError,
    ConfigurationError,
    DuplicateOrderError,
    InternalServerError,
    InvalidAPIKeyError,
    InvalidOrderIdError,
    KondutoError,
    MethodNotAllowedError,
    OperationNotAllowedError,
    OrderNotFoundError,
    RateLimitError,
    RequestTooLargeError,
    ServerError,
    ServiceError,
    TransportError,
    UnexpectedResponseError,
    UnprocessableOrderError,
    build_from_http_status,
)
from konduto.client.models import Order, OrderStatus, Recommendation, SerializableOrder
from konduto.client.api import KondutoClient

__all__ = [
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
    "build_from_http_status",
    # Models
    "Order",
    "OrderStatus",
    "Recommendation",
    "SerializableOrder",
    # Client
    "KondutoClient",
]
