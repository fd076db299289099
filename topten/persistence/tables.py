"""SQLAlchemy table definitions for Top Ten.

The SQL backend is a plain key-value table; list aggregates are stored as
JSON documents. The table matches the schema defined in Alembic migrations.
"""

from sqlalchemy import JSON, Column, DateTime, MetaData, String, Table, func

# Metadata object for all tables
metadata = MetaData()

kv_entries_table = Table(
    "kv_entries",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", JSON, nullable=True),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
)
