"""SQLAlchemy table definitions for ident.

Column types are portable between PostgreSQL and SQLite. They match the
schema defined in the Alembic migrations.
"""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

metadata = MetaData()

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    # Primary key: token uniqueness is enforced by the database
    Column("token", String(255), primary_key=True),
    Column("medium", String(16), nullable=False),
    Column("address", Text, nullable=False),
    Column("room_id", Text, nullable=False),
    Column("sender", Text, nullable=False),
    Column("ephemeral_public_key", String(64), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# EPHEMERAL PUBLIC KEYS TABLE (append-only)
# ============================================================================
ephemeral_public_keys_table = Table(
    "ephemeral_public_keys",
    metadata,
    Column("public_key", String(64), primary_key=True),
)
