"""
Parsed Entry Schemas.

This module contains the Pydantic models for a single parsed ledger line
and the explicit outcome type returned by the chunk parser, which makes
"could not parse, skip this chunk" a value instead of a bare None.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field, model_validator

from .commands import PriceSource, TransactionType


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ParsedEntry(BaseModel):
    """One cash transaction line extracted from an utterance."""
    item: str = Field(description="Title-cased item name, e.g. 'Rice' or 'Parle G Biscuits'")
    qty: float = Field(default=1, description="Quantity, defaults to 1 when not spoken")
    unit: str = Field(default="", description="Normalized unit (kg, packet, ...) or empty")
    price: float = Field(default=0, description="Unit price, 0 when unknown")
    total: float = Field(default=0, description="Always round(qty * price, 2)")
    type: TransactionType = Field(
        default=TransactionType.CASH_IN,
        description="cash-in for sales/receipts, cash-out for purchases/expenses",
    )
    source_text: str = Field(default="", description="The chunk of text this entry was parsed from")
    transaction_date: str = Field(
        default_factory=_now_iso,
        description="ISO-8601 timestamp, defaults to the parse time",
    )
    price_source: PriceSource = Field(
        default=PriceSource.PARSED,
        description="Whether the price came from the text or a catalog lookup",
    )

    @model_validator(mode="after")
    def _compute_total(self) -> "ParsedEntry":
        self.total = round(self.qty * self.price, 2)
        return self

    def with_price(self, price: float, source: PriceSource) -> "ParsedEntry":
        """Return a copy repriced at ``price`` with the total recomputed."""
        return self.model_copy(update={
            "price": price,
            "total": round(self.qty * price, 2),
            "price_source": source,
        })


class SkipReason(str, Enum):
    """Why the chunk parser produced no entry."""
    EMPTY_CHUNK = "empty_chunk"
    UNKNOWN_ITEM = "unknown_item"
    PARSE_ERROR = "parse_error"


@dataclass
class ChunkResult:
    """Outcome of parsing one chunk: an entry, or the reason it was skipped."""
    entry: ParsedEntry | None = None
    skip_reason: SkipReason | None = None

    @property
    def skipped(self) -> bool:
        return self.entry is None


class PriceUpdate(BaseModel):
    """A catalog price change spoken as 'price of rice is 50'."""
    item: str = Field(description="Title-cased item name")
    price: float = Field(ge=0, description="New unit price")
