"""Async engine, session factory and the commit boundary."""

import asyncio
import logging
from typing import AsyncGenerator

from sqlalchemy import MetaData
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from catalog.core.config import settings
from catalog.core.exceptions import CatalogError, InvalidReferenceError

logger = logging.getLogger(__name__)

CATALOG_SCHEMA = "catalog"

# SQLSTATE raised by PostgreSQL for a foreign key violation
FOREIGN_KEY_VIOLATION = "23503"


class Base(DeclarativeBase):
    metadata = MetaData(schema=CATALOG_SCHEMA)


engine = create_async_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, pool_pre_ping=True)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request. Uncommitted work is rolled back on exit."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except asyncio.CancelledError:
            logger.info("Request cancelled, rolling back pending changes")
            await asyncio.shield(session.rollback())
            raise


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


async def commit(
    db: AsyncSession,
    conflict: CatalogError,
    broken_reference: CatalogError | None = None,
) -> None:
    """Commit the session, translating constraint violations into domain errors.

    The pre-mutation checks in ``catalog.services.integrity`` can race with a
    concurrent request; the schema constraints are what finally decide.
    ``conflict`` is raised for unique violations, ``broken_reference`` for
    foreign key violations.
    """
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        if _sqlstate(exc) == FOREIGN_KEY_VIOLATION:
            logger.warning("Foreign key violation on commit: %s", exc.orig)
            raise (
                broken_reference
                or InvalidReferenceError("A referenced brand or category no longer exists.")
            ) from exc
        logger.warning("Constraint violation on commit: %s", exc.orig)
        raise conflict from exc
