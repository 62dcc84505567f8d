"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tables created from Base.metadata, dropped on teardown

Design Decisions:
    - StaticPool: every session in a test shares the one in-memory connection,
      so a second session sees what the first committed
"""

import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure tests never touch a real database
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from pizza_catalog.db.base import Base  # noqa: E402
import pizza_catalog.models  # noqa: E402,F401


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(test_engine, class_=Session, expire_on_commit=False)


@pytest.fixture
def test_db(test_session_factory):
    with test_session_factory() as session:
        yield session


@pytest.fixture
def seed_pizzas(test_db):
    """Commit the given pizzas straight through the session, bypassing the service."""
    def _seed(*pizzas):
        test_db.add_all(pizzas)
        test_db.commit()
        return list(pizzas)
    return _seed
