"""Engine, session maker and schema management for the relational store."""

import logging
from pathlib import Path

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlalchemy.schema import CreateSchema

from portal_link.infrastructure.persistence.sqlalchemy.models import Base
from portal_link_config.settings import Settings

logger = logging.getLogger(__name__)


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine for the configured database.

    Tables are created unqualified; when a non-default schema is configured
    the engine translates them into that schema.

    Parameters
    ----------
    settings
        Application settings providing the database URL and schema

    Returns
    -------
    AsyncEngine instance (no connection is opened yet)
    """
    url = settings.database_url
    options: dict = {"echo": False}

    if url.startswith("sqlite"):
        if ":memory:" in url:
            # One shared connection, otherwise every checkout sees an empty db
            options["poolclass"] = StaticPool
            options["connect_args"] = {"check_same_thread": False}
        else:
            db_path = url.split("///")[-1]
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    else:
        options["pool_pre_ping"] = True  # Verify connections before use

    schema = settings.database_schema
    if schema:
        options["execution_options"] = {"schema_translate_map": {None: schema}}

    return create_async_engine(url, **options)


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session maker whose objects stay readable after commit."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine, schema: str | None = None) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        if schema:
            await conn.execute(CreateSchema(schema, if_not_exists=True))
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date (missing tables created if needed)")


async def drop_tables(engine: AsyncEngine) -> None:
    """
    Drop all database tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    logger.warning("Dropping all database tables...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    logger.info("Database tables dropped successfully")
