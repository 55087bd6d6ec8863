"""Task entity.

Tasks belong to exactly one user; only the owner may change them.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from taskflow.domain.model.common import DomainModel
from taskflow.domain.value import TaskId, TaskStatus, UserId


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(DomainModel):
    """A to-do item owned by a user."""

    id: TaskId
    user_id: UserId  # Owner
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    def is_owned_by(self, user_id: UserId) -> bool:
        """Check task ownership."""
        return self.user_id == user_id
