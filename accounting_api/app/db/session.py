"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support for PostgreSQL.
"""

import logging

import asyncpg
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from accounting_api.app.core.config import settings

logger = logging.getLogger("accounting_api")

# Create async engine (bounded pool shared by all requests)
engine = create_async_engine(
    settings.sqlalchemy_database_url,
    echo=settings.db_echo,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Create declarative base for models
Base = declarative_base()

# Failures raised while reaching or querying the database. Errors raised by
# asyncpg during connect are not wrapped by SQLAlchemy.
DATABASE_ERRORS = (SQLAlchemyError, OSError, asyncpg.PostgresError, asyncpg.InterfaceError)


async def get_db():
    """
    FastAPI dependency for database sessions.

    Yields an async database session and ensures its connection
    goes back to the pool, also when the request fails.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def dispose_engine():
    """Drain the connection pool on shutdown."""
    logger.info("Closing database pool")
    await engine.dispose()
