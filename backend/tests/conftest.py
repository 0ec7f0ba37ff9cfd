"""Pytest configuration and fixtures."""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from footfall.database import Base, get_db
from footfall.main import app
from footfall.models import Entry, Store

# Three stores: Warsaw 3 entries, Berlin 2, Paris 1
SEED_STORES = [
    ("warsaw", "Store Warsaw", "Warsaw", "Poland"),
    ("berlin", "Store Berlin", "Berlin", "Germany"),
    ("paris", "Store Paris", "Paris", "France"),
]

SEED_ENTRIES = [
    ("warsaw", datetime(2026, 2, 1, 10, 0)),
    ("warsaw", datetime(2026, 2, 2, 11, 0)),
    ("warsaw", datetime(2026, 2, 3, 12, 0)),
    ("berlin", datetime(2026, 2, 1, 9, 0)),
    ("berlin", datetime(2026, 2, 5, 14, 0)),
    ("paris", datetime(2026, 2, 3, 8, 0)),
]


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(session):
    """Seed the three-store scenario and return plain ids.

    Returns a dict with store ids keyed by city slug and ``entries``
    holding entry ids in seeding order.
    """
    stores = {key: Store(name=name, city=city, country=country) for key, name, city, country in SEED_STORES}
    session.add_all(stores.values())
    session.flush()

    entries = [Entry(store_id=stores[key].id, entry_date=when) for key, when in SEED_ENTRIES]
    session.add_all(entries)
    session.flush()

    ids = {key: store.id for key, store in stores.items()}
    ids["entries"] = [entry.id for entry in entries]
    session.commit()
    return ids


@pytest.fixture
def client(session_factory, seeded):
    """API client backed by the seeded in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
