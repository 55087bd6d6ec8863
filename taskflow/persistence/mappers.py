"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from taskflow.domain.model import Task, User
from taskflow.domain.value import (
    AuthProvider,
    Email,
    TaskId,
    TaskStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=Email(row["email"]),
        password_hash=row.get("password_hash"),
        google_id=row.get("google_id"),
        provider=AuthProvider(row["provider"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "google_id": user.google_id,
        "provider": user.provider.value,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_task(row: Dict[str, Any]) -> Task:
    """Convert database row to Task domain model."""
    return Task(
        id=TaskId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        title=row["title"],
        description=row.get("description"),
        status=TaskStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def task_to_dict(task: Task) -> Dict[str, Any]:
    """Convert Task domain model to database dict."""
    return {
        "id": task.id,
        "user_id": task.user_id,
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "created_at": task.created_at,
        "updated_at": task.updated_at,
    }
