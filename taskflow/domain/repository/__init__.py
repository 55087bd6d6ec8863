"""Repository interfaces for Taskflow domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from taskflow.domain.repository.task import TaskRepository
from taskflow.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TaskRepository",
]
