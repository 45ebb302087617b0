"""
Konduto SDK models.

The request/response engine only needs two things from an order: turning it
into a JSON-compatible mapping and building one back from such a mapping.
``Order`` is the default implementation of that contract.

Author: Yobie Benjamin
Date: 2026-10-18
"""

from enum import Enum
from typing import Any, Mapping, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class OrderStatus(str, Enum):
    """Review status of an order."""
    APPROVED = "approved"
    DECLINED = "declined"
    FRAUD = "fraud"
    PENDING = "pending"
    NOT_AUTHORIZED = "not_authorized"
    CANCELED = "canceled"
    NOT_ANALYZED = "not_analyzed"


class Recommendation(str, Enum):
    """Recommendation returned by the analysis."""
    APPROVE = "approve"
    DECLINE = "decline"
    REVIEW = "review"
    NONE = "none"


@runtime_checkable
class SerializableOrder(Protocol):
    """Capabilities the client requires from an order object."""

    def to_json_dict(self) -> dict[str, Any]:
        ...

    @classmethod
    def from_json_dict(cls, data: Mapping[str, Any]) -> "SerializableOrder":
        ...


class Order(BaseModel):
    """
    An order submitted to or retrieved from Konduto.

    Only the commonly used top-level fields are declared. Anything else the
    API sends back is kept as an extra field and serialized unchanged.

    Example:
        ```python
        order = Order(id="ORD-1", total_amount=100.0, customer={"id": "c1"})
        analyzed = client.analyze(order)
        if analyzed.recommendation == Recommendation.DECLINE:
            ...
        ```
    """

    # Ids and codes may arrive as JSON numbers
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str | None = None
    visitor: str | None = None
    total_amount: float | None = None
    shipping_amount: float | None = None
    tax_amount: float | None = None
    currency: str | None = None
    installments: int | None = None
    ip: str | None = None
    purchased_at: str | None = None
    analyze: bool | None = Field(None, description="False to skip analysis")

    score: int | float | None = None
    # Plain strings so that values unknown to this SDK still load
    recommendation: str | None = None
    status: str | None = None

    customer: dict[str, Any] | None = None
    payment: list[dict[str, Any]] | None = None
    billing: dict[str, Any] | None = None
    shipping: dict[str, Any] | None = None
    shopping_cart: list[dict[str, Any]] | None = None
    geolocation: dict[str, Any] | None = None
    device: dict[str, Any] | None = None
    navigation: dict[str, Any] | None = None

    def set_analyze_flag(self, analyze: bool) -> None:
        """Ask the API to analyze (True) or only store (False) this order."""
        self.analyze = analyze

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting unset fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_json_dict(cls, data: Mapping[str, Any]) -> "Order":
        """Build an order from a JSON-compatible mapping."""
        return cls.model_validate(dict(data))

    def is_declined(self) -> bool:
        """Check if the analysis recommends declining the order."""
        return self.recommendation == Recommendation.DECLINE.value
