"""Domain model entities for Taskflow."""

from taskflow.domain.model.task import Task
from taskflow.domain.model.user import User

__all__ = [
    "User",
    "Task",
]
