"""
Interpreter Schemas.

This package contains all Pydantic models and enums produced by the
command interpreter.
"""

from .commands import (
    CommandType,
    TransactionType,
    PriceSource,
    CreditType,
)
from .entries import (
    ParsedEntry,
    SkipReason,
    ChunkResult,
    PriceUpdate,
)
from .results import (
    OrderItem,
    OrderPayload,
    CreditItem,
    CreditPayload,
    ParsedResult,
)

__all__ = [
    # Enums
    "CommandType",
    "TransactionType",
    "PriceSource",
    "CreditType",
    # Entries
    "ParsedEntry",
    "SkipReason",
    "ChunkResult",
    "PriceUpdate",
    # Results
    "OrderItem",
    "OrderPayload",
    "CreditItem",
    "CreditPayload",
    "ParsedResult",
]
