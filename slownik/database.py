import json
import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy import MetaData
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base

from slownik.config import settings, get_database_url, to_async_database_url

logger = logging.getLogger(__name__)

# PostgreSQL naming conventions
POSTGRES_INDEXES_NAMING_CONVENTION = {
    "ix": "%(column_0_label)s_idx",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}

metadata = MetaData(naming_convention=POSTGRES_INDEXES_NAMING_CONVENTION)

# Create Base class with naming conventions
Base = declarative_base(metadata=metadata)


def _json_serializer(value) -> str:
    # Keep Polish/Silesian letters readable inside JSON columns
    return json.dumps(value, ensure_ascii=False)


class Database:
    """Owns the async engine and session factory for one application instance.

    Built once by the application (see ``slownik.main.create_app``) and disposed
    at shutdown; request handlers reach it through ``get_db``.
    """

    def __init__(self, database_url: Optional[str] = None, **engine_kwargs):
        self.url = to_async_database_url(database_url or get_database_url())

        connect_args = {}
        if self.url.startswith("postgresql+asyncpg://"):
            connect_args = {"server_settings": {"timezone": "UTC"}}

        engine_kwargs.setdefault("echo", settings.DATABASE_ECHO)
        self.engine = create_async_engine(
            self.url,
            future=True,
            json_serializer=_json_serializer,
            connect_args=connect_args,
            **engine_kwargs,
        )
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create every registered table (tests and local bootstrap; production uses Alembic)."""
        import slownik.models  # noqa: F401  register all tables on Base.metadata

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")


# Dependency to get async database session
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        try:
            yield session
        finally:
            await session.close()
