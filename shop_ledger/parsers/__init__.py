"""
Command Parsers.

Deterministic, regex-driven parsers for shopkeeper utterances. Every
public entry point returns a value (an entry list, a ParsedResult, or
warnings) rather than raising.
"""

from .classifier import (
    COMMAND_RULES,
    classify_command,
    get_credit_command_type,
    is_credit_command,
    is_order_command,
    is_price_command,
)
from .credit import (
    parse_credit_command,
    parse_credit_payment,
    parse_credit_sale,
)
from .enrichment import (
    PriceEnricher,
    PriceLookup,
    enrich_order,
    parse_sentence_with_price_lookup,
    price_warnings,
)
from .errors import ParseErrorCode, ParsingError
from .items import extract_item, extract_item_fallback, extract_item_or_fallback
from .lexical import (
    contains_special_brand,
    extract_number,
    extract_price,
    extract_quantity,
    extract_unit,
    format_amount,
    normalise_quantity,
    normalize_unit,
    title_case,
)
from .orders import extract_customer_name, parse_order_command
from .prices import is_price_sentence, parse_price_sentence
from .transactions import (
    determine_transaction_type,
    parse_chunk,
    parse_sentence,
    parse_single_item,
    parse_single_sentence,
    split_chunks,
    validate_entry,
)

__all__ = [
    # Classification
    "COMMAND_RULES",
    "classify_command",
    "get_credit_command_type",
    "is_credit_command",
    "is_order_command",
    "is_price_command",
    # Credit
    "parse_credit_command",
    "parse_credit_payment",
    "parse_credit_sale",
    # Enrichment
    "PriceEnricher",
    "PriceLookup",
    "enrich_order",
    "parse_sentence_with_price_lookup",
    "price_warnings",
    # Errors
    "ParseErrorCode",
    "ParsingError",
    # Items
    "extract_item",
    "extract_item_fallback",
    "extract_item_or_fallback",
    # Lexical helpers
    "contains_special_brand",
    "extract_number",
    "extract_price",
    "extract_quantity",
    "extract_unit",
    "format_amount",
    "normalise_quantity",
    "normalize_unit",
    "title_case",
    # Orders
    "extract_customer_name",
    "parse_order_command",
    # Price sentences
    "is_price_sentence",
    "parse_price_sentence",
    # Transactions
    "determine_transaction_type",
    "parse_chunk",
    "parse_sentence",
    "parse_single_item",
    "parse_single_sentence",
    "split_chunks",
    "validate_entry",
]
