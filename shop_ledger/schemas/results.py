"""
Command Result Schemas.

This module contains the Pydantic models for the payloads of each command
grammar and the ParsedResult envelope handed to the UI for confirmation.
Exactly one payload family is populated, chosen by ``ParsedResult.type``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_CUSTOMER
from .commands import CommandType, CreditType
from .entries import ParsedEntry, PriceUpdate


class OrderItem(BaseModel):
    """One line of a customer order."""
    item: str = Field(description="Title-cased item name")
    qty: float = Field(default=1, description="Ordered quantity")
    price: float | None = Field(default=None, description="Unit price if spoken or looked up")
    delivery_date: str | None = Field(default=None, description="Requested delivery date, if any")


class OrderPayload(BaseModel):
    """Order command payload: who ordered what."""
    customer: str = Field(default=DEFAULT_CUSTOMER, description="Customer name, 'Walk-in' if not spoken")
    items: list[OrderItem] = Field(default_factory=list)


class CreditItem(BaseModel):
    """One line of a multi-item credit sale."""
    item: str
    qty: float = 1
    unit: str = ""
    price: float = 0
    total: float = 0


class CreditPayload(BaseModel):
    """Credit sale (goods given on credit) or credit payment (money received)."""
    type: CreditType = Field(description="sale or payment")
    customer: str = Field(default="", description="Customer name; empty when not spoken")
    amount: float | None = Field(
        default=None,
        description="Sale total (sum of lines) or the payment amount received",
    )
    # Single-item sale fields
    item: str | None = None
    qty: float | None = None
    unit: str | None = None
    price: float | None = None
    # Multi-item sale lines
    items: list[CreditItem] | None = None

    @property
    def display_customer(self) -> str:
        """Customer name as presented to the shopkeeper."""
        return self.customer or DEFAULT_CUSTOMER


class ParsedResult(BaseModel):
    """Envelope returned for every utterance, successful or not."""
    model_config = ConfigDict(populate_by_name=True)

    type: CommandType = Field(description="Which grammar the utterance was routed to")
    entry: ParsedEntry | None = Field(default=None, description="First transaction line")
    entries: list[ParsedEntry] | None = Field(
        default=None,
        description="All transaction lines when the utterance named several items",
    )
    order: OrderPayload | None = None
    price_updates: list[PriceUpdate] | None = Field(default=None, alias="priceUpdates")
    credit: CreditPayload | None = None
    warnings: list[str] = Field(default_factory=list)
    source_text: str = ""
    force_review: bool | None = Field(
        default=None,
        alias="forceReview",
        description="True when the UI must show a review card even in quick-capture mode",
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with wire names (priceUpdates, forceReview), dropping unset payloads."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
