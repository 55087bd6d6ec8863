"""SQLAlchemy table definitions for Taskflow.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    # Stored lower-cased; uniqueness is the guard against duplicate accounts
    Column("email", String(255), nullable=False),
    Column("password_hash", Text, nullable=True),  # NULL for Google-only accounts
    Column("google_id", String(255), nullable=True),
    Column("provider", String(50), nullable=False, server_default="local"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
    UniqueConstraint("google_id", name="uq_users_google_id"),
)

# ============================================================================
# TASKS TABLE
# ============================================================================
tasks_table = Table(
    "tasks",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Listing is always per user, newest first
Index("idx_tasks_user_created", tasks_table.c.user_id, tasks_table.c.created_at)
