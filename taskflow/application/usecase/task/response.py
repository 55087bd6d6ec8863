"""Task representation returned by the task use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from taskflow.domain.model import Task
from taskflow.domain.value import TaskStatus


class TaskResponse(BaseModel):
    """Task details."""

    id: str
    user: str  # Owner ID
    title: str
    description: str | None
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            id=str(task.id),
            user=str(task.user_id),
            title=task.title,
            description=task.description,
            status=task.status,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


def parse_id(value: str) -> UUID | None:
    """Parse a UUID string, returning None when malformed."""
    try:
        return UUID(value)
    except ValueError:
        return None
