"""
Item Name Extraction.

The primary extractor strips everything that is known not to be part of an
item name (verbs, stopwords, currency, numbers, units, punctuation) and
keeps what is left. When that leaves nothing usable, the fallback keeps the
longer words of the original text instead.
"""

import logging
import re

from .constants import (
    ITEM_STRIP_PATTERNS,
    KNOWN_UNITS,
    NOISE_WORDS,
    NUMBER_PATTERN,
    PLURAL_UNIT_PATTERNS,
)
from .errors import ParseErrorCode, ParsingError
from .lexical import contains_special_brand, title_case

logger = logging.getLogger(__name__)

_PUNCTUATION_PATTERN = re.compile(r"[^\w\s']")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_UNIT_WORDS = set(KNOWN_UNITS)


def extract_item(text: str) -> str:
    """
    Extract a title-cased item name from a chunk of text.

    Raises:
        ParsingError: EMPTY_INPUT for blank text, UNKNOWN_ITEM when fewer
            than two characters survive the stripping.
    """
    if not text or not text.strip():
        raise ParsingError("No text to extract an item from", ParseErrorCode.EMPTY_INPUT)

    brand = contains_special_brand(text)
    if brand:
        return brand

    cleaned = text.lower()
    for pattern in ITEM_STRIP_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)
    for pattern in PLURAL_UNIT_PATTERNS:
        cleaned = pattern.sub(" ", cleaned)

    cleaned = _PUNCTUATION_PATTERN.sub(" ", cleaned)
    cleaned = _WHITESPACE_PATTERN.sub(" ", cleaned).strip(" '")

    if len(cleaned) < 2:
        raise ParsingError(f"No item name found in {text!r}", ParseErrorCode.UNKNOWN_ITEM)

    return title_case(cleaned)


def _is_item_word(word: str) -> bool:
    return (
        len(word) > 2
        and word not in NOISE_WORDS
        and word not in _UNIT_WORDS
        and not NUMBER_PATTERN.fullmatch(word)
    )


def extract_item_fallback(text: str) -> str | None:
    """Keep the longer non-noise words of the original text. None means discard the chunk."""
    if not text:
        return None

    words = _PUNCTUATION_PATTERN.sub(" ", text.lower()).split()
    kept = [word for word in words if _is_item_word(word)]
    if not kept:
        return None

    return title_case(" ".join(kept))


def extract_item_or_fallback(text: str) -> str | None:
    """Primary extraction, then the fallback heuristic when no item name is found."""
    try:
        return extract_item(text)
    except ParsingError as e:
        if e.code != ParseErrorCode.UNKNOWN_ITEM:
            raise
        fallback = extract_item_fallback(text)
        logger.debug("Item fallback for %r -> %r", text, fallback)
        return fallback
