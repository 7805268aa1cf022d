"""
Command and Classification Enums.

This module defines the small closed vocabularies shared by the parsers:
which command grammar an utterance belongs to, which direction money
moved, and where a price value came from.
"""

from enum import Enum


class CommandType(str, Enum):
    """Top-level grammar an utterance was routed to."""
    TRANSACTION = "transaction"
    ORDER = "order"
    PRICE = "price"
    CREDIT = "credit"


class TransactionType(str, Enum):
    """Direction of a cash transaction."""
    CASH_IN = "cash-in"
    CASH_OUT = "cash-out"


class PriceSource(str, Enum):
    """Provenance of an entry's price."""
    PARSED = "parsed"  # spoken or typed in the utterance
    AUTO_LOOKUP = "auto-lookup"  # filled from the price catalog


class CreditType(str, Enum):
    """Credit (udhaar) sub-commands."""
    SALE = "sale"
    PAYMENT = "payment"
