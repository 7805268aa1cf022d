"""
Command Classification.

Routes an utterance to one of the four command grammars. COMMAND_RULES is
evaluated top to bottom and the first predicate that holds decides the
command; anything left over is a plain cash transaction.
"""

import logging

from ..schemas import CommandType, CreditType
from .constants import CREDIT_PAID_PREFIX, CREDIT_SALE_PREFIX, ORDER_KEYWORD_PATTERN
from .prices import parse_price_sentence

logger = logging.getLogger(__name__)


def get_credit_command_type(text: str) -> CreditType | None:
    """Return SALE for "credit sale ...", PAYMENT for "credit paid ...", else None."""
    if not text:
        return None
    if CREDIT_SALE_PREFIX.search(text):
        return CreditType.SALE
    if CREDIT_PAID_PREFIX.search(text):
        return CreditType.PAYMENT
    return None


def is_credit_command(text: str) -> bool:
    return get_credit_command_type(text) is not None


def is_order_command(text: str) -> bool:
    return bool(text) and ORDER_KEYWORD_PATTERN.search(text) is not None


def is_price_command(text: str) -> bool:
    return bool(parse_price_sentence(text))


COMMAND_RULES = [
    (CommandType.CREDIT, is_credit_command),
    (CommandType.ORDER, is_order_command),
    (CommandType.PRICE, is_price_command),
]


def classify_command(text: str) -> CommandType:
    """Classify an utterance. Never raises; unknown text is a transaction."""
    for command_type, predicate in COMMAND_RULES:
        if predicate(text):
            logger.debug("Classified %r as %s", text, command_type.value)
            return command_type

    return CommandType.TRANSACTION
