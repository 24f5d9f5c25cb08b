"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.types import JSON

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PACKAGES TABLE (one row per published version, keyed by derived address)
# ============================================================================
packages_table = Table(
    "packages",
    metadata,
    Column("address", String(64), primary_key=True),
    Column("name", String(32), nullable=False),
    Column("version", String(16), nullable=False),
    Column("authority", String(44), nullable=False),
    Column("content_id", String(64), nullable=False),
    Column("description", Text, nullable=False),
    Column("dependencies", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_packages_name", packages_table.c.name)


# ============================================================================
# EVENTS TABLE (Outbox); position gives the global order of the change feed
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column(
        "position",
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    ),
    Column("id", String(36), nullable=False, unique=True),
    Column("event_type", String(128), nullable=False),
    Column("payload", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("delivery_status", String(32), nullable=False),  # pending, delivered
    Column("delivered_at", DateTime(timezone=True), nullable=True),
)

Index("idx_events_type_position", events_table.c.event_type, events_table.c.position)
Index("idx_events_delivery_status", events_table.c.delivery_status)
