"""
Price Update Sentences.

Parses catalog updates such as "price of rice is 50 and milk is 25" or
"set price of sugar to 45 per kg" into PriceUpdate records.
"""

import logging
import re

from ..schemas import PriceUpdate
from .constants import (
    LIST_SPLIT_PATTERN,
    ORDER_KEYWORD_PATTERN,
    PRICE_BLOCKING_PATTERN,
    PRICE_KEYWORD_PATTERN,
    PRICE_PART_PATTERN,
    PRICE_SENTENCE_CLEANUPS,
)
from .lexical import title_case, to_number

logger = logging.getLogger(__name__)

_TRAILING_PUNCTUATION = re.compile(r"[\s.!?]+$")


def is_price_sentence(text: str) -> bool:
    """A price keyword is present and nothing marks the text as a sale, purchase or order."""
    if not text:
        return False
    if not PRICE_KEYWORD_PATTERN.search(text):
        return False
    if PRICE_BLOCKING_PATTERN.search(text) or ORDER_KEYWORD_PATTERN.search(text):
        return False
    return True


def parse_price_sentence(text: str) -> list[PriceUpdate]:
    """Return one PriceUpdate per "ITEM N" part, or [] when the text is not a price update."""
    if not is_price_sentence(text):
        return []

    cleaned = text
    for pattern in PRICE_SENTENCE_CLEANUPS:
        cleaned = pattern.sub(" ", cleaned)

    updates = []
    for part in LIST_SPLIT_PATTERN.split(cleaned):
        part = _TRAILING_PUNCTUATION.sub("", " ".join(part.split()))
        if not part:
            continue

        match = PRICE_PART_PATTERN.match(part)
        if not match:
            logger.debug("Price part %r did not match ITEM N", part)
            continue

        item = match.group(1).strip(" :=@-")
        if not item:
            continue
        updates.append(PriceUpdate(item=title_case(item), price=to_number(match.group(2))))

    logger.debug("Price sentence %r -> %d update(s)", text, len(updates))
    return updates
