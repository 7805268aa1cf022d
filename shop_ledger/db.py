"""
Database connection management for the price catalog.

Nothing connects at import time: callers build an engine and a session
factory explicitly and hand the factory to SqlPriceCatalog.

    engine = make_engine()
    init_db(engine)
    catalog = SqlPriceCatalog(make_session_factory(engine))

Environment variables:
    - LEDGER_DATABASE_URL: SQLAlchemy URL (default: sqlite:///shop_ledger.db)
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .config import DATABASE_URL
from .models import Base

logger = logging.getLogger(__name__)


def make_engine(url: str | None = None) -> Engine:
    """Create an engine for ``url``, defaulting to the configured database."""
    url = url or DATABASE_URL
    return create_engine(
        url,
        pool_pre_ping=True,
        echo=False,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_db(engine: Engine) -> None:
    """Create the catalog tables if they do not exist."""
    Base.metadata.create_all(bind=engine)
    logger.info("Price catalog tables ready on %s", engine.url.render_as_string(hide_password=True))
