"""Task repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from taskflow.domain.model.task import Task
from taskflow.domain.value import TaskId, UserId


class TaskRepository(ABC):
    """Repository for Task entity."""

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID.

        Args:
            task_id: The task's unique identifier

        Returns:
            The task if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_user(self, user_id: UserId) -> list[Task]:
        """List a user's tasks, newest first.

        Args:
            user_id: Owner ID

        Returns:
            Tasks ordered by created_at descending (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Save a task (create or update).

        Args:
            task: The task to save

        Returns:
            The saved task
        """
        pass

    @abstractmethod
    async def delete(self, task_id: TaskId) -> None:
        """Delete a task.

        Args:
            task_id: The task to delete
        """
        pass
