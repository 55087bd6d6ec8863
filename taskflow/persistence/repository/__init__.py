"""PostgreSQL repository implementations."""

from taskflow.persistence.repository.task import PostgresTaskRepository
from taskflow.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresTaskRepository",
    "PostgresUserRepository",
]
