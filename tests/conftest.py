"""
Pytest configuration and fixtures.
Provides the test app client, an in-memory SQLite session and sample catalogs.
"""

import os

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import uuid
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from payterms.main import app
from payterms.db.base import Base
from payterms.db.session import get_db
from payterms.engine.term_catalog import TermCatalog
from payterms.schemas.payment_term import PaymentTermCreate
import payterms.models  # noqa: F401


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(scope="function")
async def test_db_session():
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    test_session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with test_session_maker() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture(scope="function")
async def test_client(test_db_session):
    """
    Create a test HTTP client whose requests share the test database session.
    """
    async def override_get_db():
        yield test_db_session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def client_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def catalog() -> TermCatalog:
    """Catalog with one plain and one discount custom term."""
    catalog = TermCatalog()
    catalog.add(PaymentTermCreate(label="Net 21", net_days=21))
    catalog.add(
        PaymentTermCreate(
            label="Early Bird",
            net_days=21,
            discount_percent=Decimal("3"),
            discount_days=7,
        )
    )
    return catalog
