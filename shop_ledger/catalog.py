"""
Price Catalogs.

Collaborators that resolve an item name to its last known unit price. Both
catalogs expose the same async ``lookup_price(item)`` used by the
interpreter for price enrichment:

- InMemoryPriceCatalog: a plain dict, handy for tests and demos.
- SqlPriceCatalog: the ``prices`` table via SQLAlchemy; also persists the
  updates spoken as "price of rice is 50".

Matching is case-insensitive: an exact name match wins, otherwise the
first catalog item containing the spoken name is used.
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .models import Price
from .parsers.enrichment import PriceLookup
from .schemas import PriceUpdate

logger = logging.getLogger(__name__)

__all__ = ["PriceLookup", "InMemoryPriceCatalog", "SqlPriceCatalog"]


class InMemoryPriceCatalog:
    """Dictionary-backed price catalog."""

    def __init__(self, prices: dict[str, float] | None = None):
        self._prices = {name.lower(): float(price) for name, price in (prices or {}).items()}

    def set_price(self, item: str, price: float) -> None:
        self._prices[item.lower()] = float(price)

    def get_price(self, item: str) -> float | None:
        if not item:
            return None
        key = item.lower().strip()
        if key in self._prices:
            return self._prices[key]
        for name, price in self._prices.items():
            if key in name:
                return price
        return None

    async def lookup_price(self, item: str) -> float | None:
        return self.get_price(item)


class SqlPriceCatalog:
    """
    Price catalog stored in the ``prices`` table.

    Args:
        session_factory: A sessionmaker bound to the catalog database
            (see db.make_session_factory).
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _find(self, db: Session, item: str) -> Price | None:
        name = item.lower().strip()
        exact = db.query(Price).filter(func.lower(Price.item) == name).first()
        if exact is not None:
            return exact
        return (
            db.query(Price)
            .filter(Price.item.ilike(f"%{name}%"))
            .order_by(Price.updated_at.desc())
            .first()
        )

    def get_price(self, item: str) -> float | None:
        """Blocking lookup. Storage errors are logged and read as no price."""
        if not item or not item.strip():
            return None

        db = self._session_factory()
        try:
            row = self._find(db, item)
            return row.price if row is not None else None
        except SQLAlchemyError:
            logger.warning("Price lookup for %r failed", item, exc_info=True)
            return None
        finally:
            db.close()

    async def lookup_price(self, item: str) -> float | None:
        """Run get_price in a worker thread so concurrent lookups do not block the event loop."""
        return await asyncio.to_thread(self.get_price, item)

    def save_prices(self, updates: list[PriceUpdate], source_text: str = "") -> int:
        """
        Insert or update catalog prices.

        Existing items are matched case-insensitively on the exact name.
        Returns the number of rows written.
        """
        if not updates:
            return 0

        db = self._session_factory()
        try:
            now = datetime.now(timezone.utc)
            for update in updates:
                row = (
                    db.query(Price)
                    .filter(func.lower(Price.item) == update.item.lower())
                    .first()
                )
                if row is None:
                    row = Price(item=update.item)
                    db.add(row)
                    comment = "Created from voice input"
                else:
                    comment = f"Updated from {row.price} via voice input"
                row.price = update.price
                row.source_text = source_text
                row.last_update_comment = comment
                row.updated_at = now
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.error("Failed to save %d price update(s)", len(updates), exc_info=True)
            raise
        finally:
            db.close()

        logger.info("Saved %d price update(s)", len(updates))
        return len(updates)
