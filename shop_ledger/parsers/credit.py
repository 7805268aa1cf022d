"""
Credit (Udhaar) Command Parsing.

Two sub-commands are recognised, both anchored at the start of the text:

    credit sale 2 kg rice and 1 packet maggi for Priya
    credit paid Rs 500 by Ramesh

A credit sale records goods handed over on credit, priced from the text or
the price catalog. A credit payment records money received against the
customer's balance and is always flagged for review before saving.
"""

import logging

from ..config import DEFAULT_CUSTOMER
from ..schemas import (
    CommandType,
    CreditItem,
    CreditPayload,
    CreditType,
    ParsedResult,
)
from .classifier import get_credit_command_type
from .constants import CREDIT_PAID_PREFIX, CREDIT_SALE_PREFIX, PAYMENT_PATTERNS
from .enrichment import PriceLookup, parse_sentence_with_price_lookup
from .lexical import title_case, to_number
from .orders import extract_customer_name, strip_customer

logger = logging.getLogger(__name__)


def _failed(text: str, *warnings: str) -> ParsedResult:
    return ParsedResult(type=CommandType.TRANSACTION, warnings=list(warnings), source_text=text)


async def parse_credit_sale(text: str, lookup_price: PriceLookup | None = None) -> ParsedResult:
    """Parse "credit sale ITEMS [for CUSTOMER]"."""
    item_text = CREDIT_SALE_PREFIX.sub("", text).strip()

    customer = extract_customer_name(text)
    if customer:
        item_text = strip_customer(item_text)
    else:
        customer = DEFAULT_CUSTOMER

    entries, warnings = await parse_sentence_with_price_lookup(item_text, lookup_price)
    if not entries:
        return _failed(text, "Could not parse item details from credit sale")

    if len(entries) == 1:
        entry = entries[0]
        credit = CreditPayload(
            type=CreditType.SALE,
            customer=customer,
            item=entry.item,
            qty=entry.qty,
            unit=entry.unit,
            price=entry.price,
            amount=entry.total,
        )
    else:
        items = [
            CreditItem(item=e.item, qty=e.qty, unit=e.unit, price=e.price, total=e.total)
            for e in entries
        ]
        credit = CreditPayload(
            type=CreditType.SALE,
            customer=customer,
            items=items,
            amount=round(sum(item.total for item in items), 2),
        )

    logger.info("Parsed credit sale for %s: amount=%s", customer, credit.amount)
    return ParsedResult(type=CommandType.CREDIT, credit=credit, warnings=warnings, source_text=text)


def parse_credit_payment(text: str) -> ParsedResult:
    """Parse "credit paid AMOUNT [by|from|for|to CUSTOMER]" or "credit paid CUSTOMER AMOUNT"."""
    payment_text = " ".join(CREDIT_PAID_PREFIX.sub("", text).split())

    for rule_name, pattern in PAYMENT_PATTERNS:
        match = pattern.match(payment_text)
        if match:
            break
    else:
        return _failed(text, "Could not parse credit payment command format")

    amount = to_number(match.group("amount"))
    if amount <= 0:
        return _failed(text, "Credit payment amount must be greater than zero")

    customer = match.groupdict().get("customer") or ""
    customer = title_case(customer.strip(" ."))
    logger.debug("Credit payment matched rule '%s': %s from %r", rule_name, amount, customer)

    return ParsedResult(
        type=CommandType.CREDIT,
        credit=CreditPayload(type=CreditType.PAYMENT, customer=customer, amount=amount),
        source_text=text,
        force_review=True,
    )


async def parse_credit_command(text: str, lookup_price: PriceLookup | None = None) -> ParsedResult:
    """Parse a credit command. Text that is not a credit command gets a warning envelope."""
    credit_type = get_credit_command_type(text)
    if credit_type is None:
        return _failed(text or "", "Not a credit command")

    if credit_type == CreditType.SALE:
        return await parse_credit_sale(text, lookup_price)
    return parse_credit_payment(text)
