"""
Konduto API operations.

``KondutoClient`` performs the four Konduto API functions described in the
Konduto documentation at http://docs.konduto.com/:

- analyze: send an order for fraud analysis
- send_order: store an order without analyzing it
- get_order: query a previously sent order
- update_order_status: set the review status of a previously sent order

Each call builds a request from the current configuration, sends it once,
validates the response and either returns the result or raises a
``KondutoError``. There are no retries.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from typing import Any, Callable

from pydantic import ValidationError

from konduto.client.exceptions import InvalidOrderIdError, UnexpectedResponseError
from konduto.client.models import Order, OrderStatus, SerializableOrder
from konduto.client.request import ORDERS_PATH, Operation, build_request
from konduto.client.transport.base import HttpResponse, Transport
from konduto.client.transport.http import RequestsTransport
from konduto.client.validation import is_ok, validate_response
from konduto.config.settings import KondutoSettings, get_settings
from konduto.core.state import STATE, ConfigState


class KondutoClient:
    """
    Client for the Konduto orders API.

    Configuration (API key, logger, transport options) is read from a shared
    ``ConfigState``; by default the process-wide one used by the
    ``konduto.set_*`` functions.

    Example:
        ```python
        import konduto
        from konduto import KondutoClient, Order

        konduto.set_api_key("P0123456789ABCDEF01234")
        client = KondutoClient()

        order = client.analyze(Order(id="ORD-1", total_amount=312.71))
        print(order.score, order.recommendation)

        client.update_order_status("ORD-1", "approved", "Checked by phone")
        ```
    """

    def __init__(
        self,
        state: ConfigState | None = None,
        transport: Transport | None = None,
        settings: KondutoSettings | None = None,
        order_class: type[SerializableOrder] = Order
    ):
        """
        Initialize client.

        Args:
            state: Configuration holder (defaults to the process-wide one)
            transport: Transport to use (defaults to a requests transport)
            settings: Endpoint and timeout settings (defaults to get_settings())
            order_class: Class used to build returned orders
        """
        self.state = state or STATE
        self.transport = transport or RequestsTransport()
        self.settings = settings or get_settings()
        self.order_class = order_class

    def get_order(self, order_id: str) -> SerializableOrder:
        """
        Query Konduto for an order given its id.

        Raises:
            UnexpectedResponseError: If the response has no usable 'order'
        """
        _check_order_id(order_id)
        _, order = self._request_api(
            Operation("GET", ORDERS_PATH, resource_id=order_id),
            extract=lambda body: self._build_order(_require_order(body), body)
        )
        return order

    def analyze(self, order: SerializableOrder) -> SerializableOrder:
        """
        Send an order for fraud analysis.

        The returned order holds the submitted fields updated with the ones
        sent back by the API (score, recommendation, ...).

        Raises:
            UnexpectedResponseError: If the response has no usable 'order'
        """
        order_json = order.to_json_dict()
        _, new_order = self._request_api(
            Operation("POST", ORDERS_PATH, body=order_json),
            extract=lambda body: self._build_order({**order_json, **_require_order(body)}, body)
        )
        return new_order

    def send_order(self, order: Order) -> SerializableOrder:
        """Send an order to Konduto without prompting an analysis."""
        order.set_analyze_flag(False)
        return self.analyze(order)

    def update_order_status(
        self,
        order_id: str,
        status: OrderStatus | str,
        comments: str = ""
    ) -> bool:
        """
        Update the status of a previously sent order.

        Returns:
            True when the API accepted the update
        """
        _check_order_id(order_id)
        if isinstance(status, OrderStatus):
            status = status.value

        body = {"status": status, "comments": comments}
        response, _ = self._request_api(
            Operation("PUT", ORDERS_PATH, body=body, resource_id=order_id)
        )
        return is_ok(response)

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def _build_order(self, fields: dict[str, Any], body: dict[str, Any]) -> SerializableOrder:
        try:
            return self.order_class.from_json_dict(fields)
        except ValidationError as e:
            raise UnexpectedResponseError(f"Response 'order' is malformed: {e}", body=body) from e

    def _request_api(
        self,
        operation: Operation,
        extract: Callable[[dict[str, Any]], Any] | None = None
    ) -> tuple[HttpResponse, Any]:
        """
        Perform an HTTP request to the Konduto API endpoint.

        ``extract`` turns the validated body into the call's result; its
        failures are logged like any other failure of the call.
        """
        snapshot = self.state.snapshot()
        log = snapshot.logger

        method = operation.method.upper()
        uri = operation.resolve_uri(self.settings.endpoint)
        body = operation.body
        http_status = None

        log.info(
            f"{method} {uri} Attempting to request...",
            {"method": method, "uri": uri, "body": body}
        )

        try:
            request = build_request(
                operation, snapshot, self.settings.endpoint, self.settings.timeout
            )
            response = self.transport.send(request)
            http_status = response.status_code or None
            json_body = validate_response(response)
            result = extract(json_body) if extract else json_body
        except Exception as exception:
            log.error(
                f"{method} {uri} Exception thrown [!]",
                {
                    "method": method,
                    "uri": uri,
                    "body": body,
                    "exception": exception,
                    "http_status": http_status,
                }
            )
            raise

        log.info(
            f"{method} {uri} Response successfully received!",
            {
                "method": method,
                "uri": uri,
                "body": body,
                "json_body": json_body,
                "http_status": http_status,
            }
        )
        return response, result


def _check_order_id(order_id: Any) -> None:
    if not isinstance(order_id, str) or not order_id:
        raise InvalidOrderIdError(f"Order id must be a non-empty string, got {order_id!r}")


def _require_order(body: dict[str, Any]) -> dict[str, Any]:
    order = body.get("order")
    if not isinstance(order, dict):
        raise UnexpectedResponseError(f"Response has no 'order': {body}", body=body)
    return order
