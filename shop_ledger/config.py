"""
Configuration Module for Shop Ledger
====================================

This module centralizes the settings used by the command interpreter. Values
are read from environment variables once at import time (a local ``.env``
file is honoured via python-dotenv) and exposed as typed module constants.

Configuration Categories:
-------------------------
- **Parsing Policy**: Defaults applied when an utterance leaves a field out,
  e.g. the customer name for walk-in sales and the transaction direction
  when no verb says whether money came in or went out.

- **Input Validation**: Maximum utterance length accepted by the interpreter.

- **Display**: Currency symbol used in warning messages.

- **Price Catalog Storage**: Database URL for the SQL-backed price catalog.

Environment Variables:
----------------------
- LEDGER_DEFAULT_CUSTOMER: Customer name used when none is spoken (default: "Walk-in")
- LEDGER_DEFAULT_TXN_TYPE: "cash-in" or "cash-out" (default: "cash-in")
- LEDGER_CURRENCY_SYMBOL: Symbol shown in price warnings (default: "₹")
- LEDGER_MAX_INPUT_LENGTH: Max utterance length in characters (default: 1000)
- LEDGER_DATABASE_URL: SQLAlchemy URL of the price catalog (default: "sqlite:///shop_ledger.db")
- LEDGER_LOG_LEVEL: Package log level, falling back to LOG_LEVEL (read by logging_config)

Usage:
------
    from shop_ledger.config import (
        DEFAULT_CUSTOMER,
        DEFAULT_TRANSACTION_TYPE,
        MAX_INPUT_LENGTH,
    )
"""

import os

from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# Parsing Policy
# =============================================================================
# The ledger is sales-first: an utterance with no direction signal is
# recorded as money coming in. Shops that mostly log expenses can flip it.

DEFAULT_CUSTOMER: str = os.getenv("LEDGER_DEFAULT_CUSTOMER", "Walk-in")

VALID_TRANSACTION_TYPES = ("cash-in", "cash-out")


def _read_default_transaction_type() -> str:
    value = os.getenv("LEDGER_DEFAULT_TXN_TYPE", "cash-in").strip().lower()
    if value not in VALID_TRANSACTION_TYPES:
        return "cash-in"
    return value


DEFAULT_TRANSACTION_TYPE: str = _read_default_transaction_type()


def get_default_transaction_type() -> str:
    """
    Return the transaction type used when the text carries no signal.

    This function allows dynamic override in tests without modifying
    the module-level constant.
    """
    return DEFAULT_TRANSACTION_TYPE


# =============================================================================
# Input Validation Configuration
# =============================================================================

# Voice transcripts can run on when the recognizer misses the end of speech
MAX_INPUT_LENGTH: int = int(os.getenv("LEDGER_MAX_INPUT_LENGTH", "1000"))


# =============================================================================
# Display Configuration
# =============================================================================

CURRENCY_SYMBOL: str = os.getenv("LEDGER_CURRENCY_SYMBOL", "₹")


# =============================================================================
# Price Catalog Storage
# =============================================================================

DATABASE_URL: str = os.getenv("LEDGER_DATABASE_URL", "sqlite:///shop_ledger.db")
