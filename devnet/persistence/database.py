"""Async engine and session factory for PostgreSQL (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from devnet.config import Settings

APPLICATION_NAME = "devnet-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine from database settings.

    SQL echo follows ``settings.debug``. Connections are pinged before use
    since the pool outlives database restarts.
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory used once per request.

    Repositories flush explicitly and the DI provider commits at the end of
    the request, so autoflush is off and objects stay readable after commit.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
