"""
Transaction Parsing.

Turns free text such as "sold 2 kg rice for 80 rupees and 1 packet maggi"
into ParsedEntry lines. Parsing is deterministic and never raises: a chunk
that cannot be understood comes back as a ChunkResult with a skip reason.
"""

import logging

from ..config import get_default_transaction_type
from ..schemas import ChunkResult, ParsedEntry, SkipReason, TransactionType
from .constants import CHUNK_SPLIT_PATTERN, TRANSACTION_TYPE_RULES
from .errors import ParsingError
from .items import extract_item_or_fallback
from .lexical import contains_special_brand, extract_price, extract_quantity, extract_unit

logger = logging.getLogger(__name__)


def determine_transaction_type(text: str, default: TransactionType | None = None) -> TransactionType:
    """
    Decide whether money came in or went out.

    Purchase/expense verbs are checked before sale verbs, so "bought and
    sold" is a purchase. With no verb at all the configured default wins.
    """
    for type_value, pattern in TRANSACTION_TYPE_RULES:
        if pattern.search(text or ""):
            return TransactionType(type_value)

    if default is not None:
        return default
    return TransactionType(get_default_transaction_type())


def parse_chunk(chunk: str) -> ChunkResult:
    """Parse one chunk of text describing a single item."""
    if not chunk or not chunk.strip():
        return ChunkResult(skip_reason=SkipReason.EMPTY_CHUNK)

    text = chunk.strip()
    try:
        txn_type = determine_transaction_type(text)
        qty = extract_quantity(text)

        item = contains_special_brand(text)
        if item is None:
            item = extract_item_or_fallback(text)
        if not item:
            logger.debug("No item in chunk %r, skipping", text)
            return ChunkResult(skip_reason=SkipReason.UNKNOWN_ITEM)

        unit = extract_unit(text) or ""
        price = extract_price(text) or 0

        entry = ParsedEntry(
            item=item,
            qty=qty,
            unit=unit,
            price=price,
            type=txn_type,
            source_text=text,
        )
    except (ParsingError, ValueError) as e:
        logger.warning("Failed to parse chunk %r: %s", text, e)
        return ChunkResult(skip_reason=SkipReason.PARSE_ERROR)

    logger.debug(
        "Parsed chunk %r -> item=%s qty=%s unit=%s price=%s type=%s",
        text, entry.item, entry.qty, entry.unit, entry.price, entry.type.value,
    )
    return ChunkResult(entry=entry)


def parse_single_item(chunk: str) -> ParsedEntry | None:
    """Parse one chunk, returning None when it should be skipped."""
    return parse_chunk(chunk).entry


def split_chunks(text: str) -> list[str]:
    """Split on commas, the word "and", or a sentence end followed by a number."""
    if not text:
        return []
    return [part.strip() for part in CHUNK_SPLIT_PATTERN.split(text) if part and part.strip()]


def parse_sentence(text: str) -> list[ParsedEntry]:
    """
    Parse a possibly multi-item sentence into entries.

    Each chunk is parsed independently. If splitting produced several
    chunks but none of them parsed, the whole text is tried once as a
    single item, since the split may have cut an item name in two
    ("salt and pepper").
    """
    if not text or not text.strip():
        return []

    chunks = split_chunks(text)
    if len(chunks) <= 1:
        entry = parse_single_item(text)
        return [entry] if entry else []

    entries = [entry for entry in map(parse_single_item, chunks) if entry is not None]
    if entries:
        return entries

    logger.debug("No chunk of %r parsed, retrying as a single item", text)
    entry = parse_single_item(text)
    return [entry] if entry else []


def parse_single_sentence(text: str) -> tuple[ParsedEntry, list[str]]:
    """
    Parse text into exactly one entry plus warnings.

    Older callers expect a single entry back. When nothing parses, the
    whole text becomes the item name so the shopkeeper can correct it.
    """
    if not text or not text.strip():
        return ParsedEntry(item="", source_text=""), ["Empty input text"]

    entries = parse_sentence(text)
    if entries:
        return entries[0], []

    text = text.strip()
    return (
        ParsedEntry(item=text, type=determine_transaction_type(text), source_text=text),
        ["Could not fully parse the input. Please review the entry."],
    )


def validate_entry(entry: ParsedEntry) -> tuple[bool, list[str]]:
    """Check an entry before it is saved. Returns (is_valid, errors)."""
    errors = []

    if not entry.item or not entry.item.strip():
        errors.append("Item name is required")
    if entry.qty <= 0:
        errors.append("Quantity must be a positive number")
    if entry.price < 0:
        errors.append("Price cannot be negative")

    return not errors, errors
