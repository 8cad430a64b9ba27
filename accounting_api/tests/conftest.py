"""
Centralized Test Configuration.
"""

from datetime import date

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from accounting_api.app.main import app
from accounting_api.app.db.session import get_db, Base
from accounting_api.app.models.ledger_entry import LedgerEntry

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def override_get_db():
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture(scope="session", autouse=True)
def apply_overrides():
    """Point the app at the in-memory database for the whole session."""
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides = {}


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test function and drop after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Shared session for fixture data creation
@pytest.fixture
async def db_session():
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
def add_entries(db_session):
    """
    Insert ledger rows and commit.

    Each row is a dict of LedgerEntry fields; company "1", debit/credit 0
    and 2024-03-15 are filled in when absent.
    """
    async def _add(*rows):
        entries = []
        for row in rows:
            fields = {
                "company_id": "1",
                "entry_date": date(2024, 3, 15),
                "debit": 0,
                "credit": 0,
            }
            fields.update(row)
            entries.append(LedgerEntry(**fields))
        db_session.add_all(entries)
        await db_session.commit()
        return entries

    return _add
