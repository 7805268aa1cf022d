"""
Price Lookup Enrichment.

Fills in prices the shopkeeper did not say out loud ("sold 2 kg rice")
from a price catalog. The catalog is injected as an async callable so the
parsers stay free of storage concerns:

    async def lookup_price(item: str) -> float | None

Lookups for every unpriced line are issued concurrently. A lookup that
fails is logged and treated as "no price"; it never aborts the batch.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from ..config import CURRENCY_SYMBOL
from ..schemas import OrderPayload, ParsedEntry, PriceSource
from .lexical import format_amount
from .transactions import parse_sentence

logger = logging.getLogger(__name__)

PriceLookup = Callable[[str], Awaitable[float | None]]


class PriceEnricher:
    """
    Reprices entries whose price is missing using an injected lookup.

    Args:
        lookup_price: Async function resolving an item name to a unit
            price, or None when the catalog has no price for it.
    """

    def __init__(self, lookup_price: PriceLookup | None):
        self._lookup_price = lookup_price

    async def _safe_lookup(self, item: str) -> float | None:
        if self._lookup_price is None:
            return None
        try:
            price = await self._lookup_price(item)
        except Exception:
            logger.warning("Price lookup failed for %r", item, exc_info=True)
            return None
        if price is None:
            return None

        # Catalogs backed by text columns may hand back "45"
        try:
            price = float(price)
        except (TypeError, ValueError):
            logger.warning("Price lookup for %r returned unusable value %r", item, price)
            return None
        if price <= 0:
            return None
        return price

    async def _lookup_many(self, items: list[str]) -> list[float | None]:
        return await asyncio.gather(*(self._safe_lookup(item) for item in items))

    async def enrich(self, entries: list[ParsedEntry]) -> tuple[list[ParsedEntry], list[str]]:
        """Return repriced entries (input order kept) and the price warnings."""
        unpriced = [i for i, entry in enumerate(entries) if entry.price <= 0]
        prices = await self._lookup_many([entries[i].item for i in unpriced])

        enriched = list(entries)
        for index, price in zip(unpriced, prices):
            if price is not None:
                enriched[index] = entries[index].with_price(price, PriceSource.AUTO_LOOKUP)
                logger.debug("Auto-priced %s at %s", enriched[index].item, price)

        return enriched, price_warnings(enriched)

    async def enrich_order(self, order: OrderPayload) -> tuple[OrderPayload, list[str]]:
        """Fill missing order item prices. Items still without a price are reported."""
        unpriced = [i for i, item in enumerate(order.items) if not item.price]
        prices = await self._lookup_many([order.items[i].item for i in unpriced])

        items = list(order.items)
        for index, price in zip(unpriced, prices):
            if price is not None:
                items[index] = items[index].model_copy(update={"price": price})

        warnings = []
        missing = [item.item for item in items if not item.price]
        if missing:
            warnings.append(f"No price found for: {', '.join(missing)}")

        return order.model_copy(update={"items": items}), warnings


def price_warnings(entries: list[ParsedEntry]) -> list[str]:
    """Warnings naming unpriced lines and lines priced from the catalog."""
    warnings = []

    missing = [entry.item for entry in entries if entry.price <= 0]
    if missing:
        warnings.append(f"No price found for: {', '.join(missing)}")

    looked_up = [
        f"{entry.item} ({CURRENCY_SYMBOL}{format_amount(entry.price)})"
        for entry in entries
        if entry.price_source == PriceSource.AUTO_LOOKUP
    ]
    if looked_up:
        warnings.append(f"Auto-populated prices for: {', '.join(looked_up)}")

    return warnings


async def parse_sentence_with_price_lookup(
    text: str,
    lookup_price: PriceLookup | None = None,
) -> tuple[list[ParsedEntry], list[str]]:
    """Parse a sentence and fill in missing prices from the catalog."""
    entries = parse_sentence(text)
    if not entries:
        return [], ["Could not parse any items from input"]

    return await PriceEnricher(lookup_price).enrich(entries)


async def enrich_order(
    order: OrderPayload,
    lookup_price: PriceLookup | None = None,
) -> tuple[OrderPayload, list[str]]:
    """Module-level shortcut for PriceEnricher(lookup_price).enrich_order(order)."""
    return await PriceEnricher(lookup_price).enrich_order(order)
