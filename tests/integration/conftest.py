"""Integration test fixtures for database operations.

These fixtures require external resources (PostgreSQL database at DATABASE_URL).
Tests are skipped when the database cannot be reached.
"""

import asyncio
from collections.abc import AsyncGenerator
from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool

from src.login_as_customer.core import db
from src.login_as_customer.core.config import get_settings
from src.login_as_customer.core.db import run_migrations_sync
from src.login_as_customer.models import AdminUser, Customer, Store
from tests.factories import AdminUserFactory, CustomerFactory, StoreFactory
from tests.utils.cleanup import cleanup_admin_cascade, cleanup_store_cascade


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create test database engine and ensure migrations are applied."""
    await db.dispose_engine()

    settings = get_settings()
    test_engine = create_async_engine(settings.database_url, poolclass=NullPool)

    try:
        async with test_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (OSError, SQLAlchemyError) as e:
        await test_engine.dispose()
        pytest.skip(f"PostgreSQL not reachable at DATABASE_URL: {e}")

    await asyncio.to_thread(run_migrations_sync)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does not auto-commit; tests and services commit explicitly.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def db_store(engine: AsyncEngine, db_session: AsyncSession) -> AsyncGenerator[Store]:
    """Persisted active store view; removes it and its customers afterwards."""
    store = StoreFactory.build(
        id=None, code=f"store_{uuid4().hex[:12]}", base_url="https://shop.test/"
    )
    db_session.add(store)
    await db_session.commit()

    yield store

    async with engine.connect() as conn:
        await cleanup_store_cascade(conn, store.id)
        await conn.commit()


@pytest.fixture
async def db_customer(db_session: AsyncSession, db_store: Store) -> Customer:
    """Persisted customer who allows remote shopping assistance."""
    customer = CustomerFactory.build(id=None, store_id=db_store.id, assistance_allowed=True)
    db_session.add(customer)
    await db_session.commit()
    return customer


@pytest.fixture
async def db_admin(
    engine: AsyncEngine, db_session: AsyncSession, db_store: Store
) -> AsyncGenerator[AdminUser]:
    """Persisted admin with the login-as-customer resource.

    Depends on db_store so its rows are cleaned up before the store's customers.
    """
    admin = AdminUserFactory.build(id=None, username=f"admin_{uuid4().hex[:12]}")
    db_session.add(admin)
    await db_session.commit()

    yield admin

    async with engine.connect() as conn:
        await cleanup_admin_cascade(conn, admin.id)
        await conn.commit()
