import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import shop_ledger.config as config_mod
from shop_ledger.catalog import InMemoryPriceCatalog, SqlPriceCatalog
from shop_ledger.models import Base


@pytest.fixture(autouse=True)
def sales_first_policy(monkeypatch):
    """Pin the default transaction type so a local .env cannot change results."""
    monkeypatch.setattr(config_mod, "DEFAULT_TRANSACTION_TYPE", "cash-in")


@pytest.fixture
def catalog():
    """In-memory price catalog with a few staple prices."""
    return InMemoryPriceCatalog({
        "Rice": 45,
        "Sugar": 42.5,
        "Parle G Biscuits": 10,
    })


@pytest.fixture
def session_factory():
    """Session factory over an in-memory SQLite DB.

    Uses StaticPool so all sessions share the same in-memory database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def sql_catalog(session_factory):
    return SqlPriceCatalog(session_factory)
