"""
Order Command Parsing.

Handles utterances such as "order 2 kg rice and 1 packet maggi for Priya":
the order keywords and the trailing "for CUSTOMER" are removed and the
remainder is parsed item by item.
"""

import logging

from ..config import DEFAULT_CUSTOMER
from ..schemas import CommandType, OrderItem, OrderPayload, ParsedEntry, ParsedResult
from .constants import (
    CUSTOMER_EXCLUDE_WORDS,
    CUSTOMER_PATTERN,
    LIST_SPLIT_PATTERN,
    ORDER_KEYWORD_PATTERN,
)
from .lexical import title_case
from .transactions import parse_sentence, parse_single_item

logger = logging.getLogger(__name__)


def extract_customer_name(text: str) -> str | None:
    """
    Find "for NAME" at the very end of the text.

    Returns None when the words after "for" look like a quantity, unit,
    grocery item or day ("for five", "for rice", "for tomorrow").
    """
    if not text:
        return None

    match = CUSTOMER_PATTERN.search(text)
    if not match:
        return None

    name = " ".join(match.group(1).split())
    if len(name) < 2:
        return None
    if any(word.lower() in CUSTOMER_EXCLUDE_WORDS for word in name.split()):
        logger.debug("Rejected customer name %r", name)
        return None

    return title_case(name)


def strip_customer(text: str) -> str:
    """Remove a trailing "for NAME" clause."""
    return CUSTOMER_PATTERN.sub("", text).strip()


def _to_order_item(entry: ParsedEntry) -> OrderItem:
    return OrderItem(
        item=entry.item,
        qty=entry.qty or 1,
        price=entry.price if entry.price > 0 else None,
        delivery_date=None,
    )


def parse_order_command(text: str) -> ParsedResult:
    """Parse an order utterance into an order payload."""
    if not text or not text.strip():
        return ParsedResult(type=CommandType.ORDER, warnings=["Empty input text"], source_text=text or "")

    customer = extract_customer_name(text)

    item_text = ORDER_KEYWORD_PATTERN.sub(" ", text)
    if customer:
        item_text = strip_customer(item_text)
    item_text = " ".join(item_text.split())

    chunks = [chunk.strip() for chunk in LIST_SPLIT_PATTERN.split(item_text) if chunk.strip()]
    if len(chunks) > 1:
        entries = [entry for entry in map(parse_single_item, chunks) if entry is not None]
    else:
        entries = parse_sentence(item_text)

    items = [_to_order_item(entry) for entry in entries if entry.item]
    if not items:
        return ParsedResult(
            type=CommandType.ORDER,
            warnings=["Could not identify any items in the order"],
            source_text=text,
        )

    logger.info("Parsed order for %s with %d item(s)", customer or DEFAULT_CUSTOMER, len(items))
    return ParsedResult(
        type=CommandType.ORDER,
        order=OrderPayload(customer=customer or DEFAULT_CUSTOMER, items=items),
        source_text=text,
    )
