"""Structures exchanged with the coffee shop."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


@dataclass
class OrderRequest:
    """A coffee order as sent to the shop.

    The order number is unknown until the shop accepts the order.
    """

    flavor: str
    payment_id: str
    order_number: Optional[int] = None

    def to_payload(self) -> dict[str, str]:
        """Body of the ``POST /order`` request."""
        return {"flavor": self.flavor, "paymentId": self.payment_id}


class OrderPayload(BaseModel):
    """The ``order`` part of a paid order response."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    order_number: int = Field(..., alias="orderNumber")


class ReceiptPayload(BaseModel):
    """The ``receipt`` part of a paid order response."""

    model_config = ConfigDict(extra="allow")

    balance: Decimal


class CoffeePaidPayload(BaseModel):
    """Body returned by the shop for a paid order."""

    model_config = ConfigDict(extra="allow")

    order: OrderPayload
    receipt: ReceiptPayload


class ErrorPayload(BaseModel):
    """The ``error`` part of a rejected order response."""

    model_config = ConfigDict(extra="allow")

    details: list[str] = Field(default_factory=list)


class OrderRejectedPayload(BaseModel):
    """Body returned by the shop for a rejected order."""

    model_config = ConfigDict(extra="allow")

    error: ErrorPayload
