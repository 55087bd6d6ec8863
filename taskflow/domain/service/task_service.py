"""Task domain service."""

import logfire

from taskflow.domain.error import NotAuthorizedError, NotFoundError
from taskflow.domain.model import Task
from taskflow.domain.repository import TaskRepository
from taskflow.domain.value import TaskId, UserId

from .base import Service


class TaskService(Service):
    """Domain service for task operations."""

    def __init__(self, task_repository: TaskRepository) -> None:
        """Initialize task service.

        Args:
            task_repository: Task repository
        """
        self.task_repository = task_repository

    async def list_for_user(self, user_id: UserId) -> list[Task]:
        """List a user's tasks, newest first."""
        with logfire.span("task_service.list_for_user", user_id=str(user_id)):
            tasks = await self.task_repository.find_all_by_user(user_id)
            logfire.info("Tasks listed", user_id=str(user_id), count=len(tasks))
            return tasks

    async def get_owned(self, task_id: TaskId, user_id: UserId) -> Task:
        """Get a task and check that the user owns it.

        Args:
            task_id: Task ID
            user_id: Requesting user

        Returns:
            The task

        Raises:
            NotFoundError: If task does not exist
            NotAuthorizedError: If the task belongs to someone else
        """
        with logfire.span(
            "task_service.get_owned", task_id=str(task_id), user_id=str(user_id)
        ):
            task = await self.task_repository.find_by_id(task_id)
            if task is None:
                logfire.warn("Task not found", task_id=str(task_id))
                raise NotFoundError("Task", str(task_id))

            if not task.is_owned_by(user_id):
                logfire.warn(
                    "Task ownership check failed",
                    task_id=str(task_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("task", str(task_id), str(user_id))

            return task

    async def save(self, task: Task) -> Task:
        """Save task (create or update)."""
        with logfire.span("task_service.save", task_id=str(task.id)):
            saved = await self.task_repository.save(task)
            logfire.info("Task saved", task_id=str(saved.id), status=saved.status.value)
            return saved

    async def delete(self, task_id: TaskId) -> None:
        """Delete a task by ID."""
        with logfire.span("task_service.delete", task_id=str(task_id)):
            await self.task_repository.delete(task_id)
            logfire.info("Task deleted", task_id=str(task_id))
