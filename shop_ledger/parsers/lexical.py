"""
Lexical Helpers.

Small deterministic extractors for units, quantities, prices and brand
names. Each extractor walks an ordered rule table from constants.py and
returns the first hit, logging which rule fired at DEBUG level.
"""

import logging

from .constants import (
    BRAND_PRODUCT_SUFFIXES,
    CURRENCY_BEFORE_PATTERN,
    G_SUFFIX_BRAND_PATTERN,
    NUMBER_PATTERN,
    NUMBER_UNIT_PATTERN,
    PRICE_RULES,
    QUANTITY_RULES,
    SPECIAL_BRANDS,
    UNIT_NORMALIZATIONS,
    UNIT_PATTERNS,
)

logger = logging.getLogger(__name__)


def to_number(text: str) -> float:
    """Convert a matched number to float, dropping digit-group commas ("2,000" -> 2000.0)."""
    return float(text.replace(",", ""))


def normalize_unit(unit: str) -> str:
    """
    Normalize a unit string to its singular short form.

    Examples:
        "Kgs" -> "kg"
        "packets" -> "packet"
        "litres" -> "l"
        "tin" -> "tin" (unknown units pass through, lower-cased)
    """
    unit = unit.lower().strip()
    return UNIT_NORMALIZATIONS.get(unit, unit)


def _is_price_number(text: str, start: int) -> bool:
    return CURRENCY_BEFORE_PATTERN.search(text[:start]) is not None


def extract_unit(text: str) -> str | None:
    """
    Extract the unit, normalized. None if no unit is present.

    The unit attached to the quantity ("2 packets of 500 g") wins; otherwise
    the first known unit anywhere in the text is used.
    """
    if not text:
        return None

    # "Parle G" / "Nuti G": that "g" is part of the brand, not grams
    text = G_SUFFIX_BRAND_PATTERN.sub(" ", text.lower())

    for match in NUMBER_UNIT_PATTERN.finditer(text):
        if not _is_price_number(text, match.start(1)):
            return normalize_unit(match.group(2))

    for unit, pattern in UNIT_PATTERNS:
        if pattern.search(text):
            return normalize_unit(unit)

    return None


def extract_quantity(text: str) -> float:
    """
    Extract the quantity from text, defaulting to 1. Never returns 0 or a negative.

    Numbers right after a currency token ("sold ₹50 of rice") are prices and
    are skipped by every rule.
    """
    if not text:
        return 1

    for rule_name, pattern in QUANTITY_RULES:
        for match in pattern.finditer(text):
            if _is_price_number(text, match.start(1)):
                continue
            value = to_number(match.group(1))
            if value > 0:
                logger.debug("Quantity %s from rule '%s' in %r", value, rule_name, text)
                return value
            break

    return 1


def extract_price(text: str) -> float | None:
    """Extract a unit price from text such as 'for Rs 20', '20 rupees' or 'at 5 each'."""
    if not text:
        return None

    for rule_name, pattern in PRICE_RULES:
        for match in pattern.finditer(text):
            value = to_number(match.group(1))
            if value > 0:
                logger.debug("Price %s from rule '%s' in %r", value, rule_name, text)
                return value

    return None


def extract_number(text: str) -> float | None:
    """Return the first number in text, or None."""
    if not text:
        return None

    match = NUMBER_PATTERN.search(text)
    if match:
        return to_number(match.group(0))
    return None


def contains_special_brand(text: str) -> str | None:
    """
    Detect a known brand such as "Parle G" or "Maggi".

    When the text also names the product category ("parle g biscuits",
    "maggi noodles") the category is appended to the brand name.
    """
    if not text:
        return None

    text_lower = text.lower()
    for pattern, brand in SPECIAL_BRANDS:
        if not pattern.search(text_lower):
            continue
        for keyword, suffix in BRAND_PRODUCT_SUFFIXES:
            if keyword in text_lower and keyword not in brand.lower():
                return f"{brand} {suffix}"
        return brand

    return None


def title_case(text: str) -> str:
    """Capitalize the first letter of each word, lower-casing the rest."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


def normalise_quantity(value: float, unit: str) -> float:
    """Convert gram/millilitre quantities to kilogram/litre scale."""
    if not unit:
        return value

    unit = normalize_unit(unit)
    if unit in ("g", "ml"):
        return value / 1000
    return value


def format_amount(value: float) -> str:
    """Format a money amount without a trailing '.0' (45.0 -> '45', 12.5 -> '12.5')."""
    if value == int(value):
        return str(int(value))
    return str(round(value, 2))
