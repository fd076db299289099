"""SQL key-value store."""

from typing import Any

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import Insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from topten.domain.error import StorageError
from topten.domain.repository.key_value import KeyValueStore
from topten.persistence.database import create_session_factory
from topten.persistence.tables import kv_entries_table, metadata


def upsert_statement(key: str, value: Any) -> Insert:
    """INSERT ... ON CONFLICT (key) DO UPDATE for one entry."""
    stmt = pg_insert(kv_entries_table).values(key=key, value=value)
    return stmt.on_conflict_do_update(
        index_elements=[kv_entries_table.c.key],
        set_={"value": stmt.excluded.value, "updated_at": func.now()},
    )


class SqlKeyValueStore(KeyValueStore):
    """Key-value store backed by the ``kv_entries`` table.

    Every call runs in its own short transaction. Values are JSON documents,
    so a list aggregate is one row.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        """Initialize store with a database engine.

        Args:
            engine: SQLAlchemy async engine
        """
        self.engine = engine
        self.session_factory: async_sessionmaker[AsyncSession] = (
            create_session_factory(engine)
        )

    async def create_schema(self) -> None:
        """Create the kv_entries table if it does not exist."""
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logfire.info("kv_entries schema ensured")

    async def get(self, key: str) -> Any | None:
        """Read a value."""
        stmt = select(kv_entries_table.c.value).where(kv_entries_table.c.key == key)
        try:
            async with self.session_factory() as session:
                result = await session.execute(stmt)
                row = result.fetchone()
        except SQLAlchemyError as e:
            logfire.error("Store read failed", key=key, error=str(e))
            raise StorageError(f"Cannot read key {key}") from e
        return row.value if row else None

    async def set(self, key: str, value: Any) -> None:
        """Write a value in one upsert statement."""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await session.execute(upsert_statement(key, value))
        except SQLAlchemyError as e:
            logfire.error("Store write failed", key=key, error=str(e))
            raise StorageError(f"Cannot write key {key}") from e

    async def delete(self, key: str) -> None:
        """Remove a key."""
        try:
            async with self.session_factory() as session:
                async with session.begin():
                    await session.execute(
                        delete(kv_entries_table).where(kv_entries_table.c.key == key)
                    )
        except SQLAlchemyError as e:
            logfire.error("Store delete failed", key=key, error=str(e))
            raise StorageError(f"Cannot delete key {key}") from e

    async def close(self) -> None:
        """Dispose of the connection pool."""
        await self.engine.dispose()
        logfire.info("SQL store closed")
