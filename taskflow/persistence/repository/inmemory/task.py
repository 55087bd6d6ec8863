"""In-memory task repository for testing."""

from typing import Optional

from taskflow.domain.model.task import Task
from taskflow.domain.repository.task import TaskRepository
from taskflow.domain.value import TaskId, UserId


class InMemoryTaskRepository(TaskRepository):
    """In-memory implementation of TaskRepository for testing."""

    def __init__(self) -> None:
        self._tasks: dict[TaskId, Task] = {}

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        return self._tasks.get(task_id)

    async def find_all_by_user(self, user_id: UserId) -> list[Task]:
        """List a user's tasks, newest first."""
        tasks = [task for task in self._tasks.values() if task.user_id == user_id]
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    async def save(self, task: Task) -> Task:
        """Save or update a task."""
        self._tasks[task.id] = task
        return task

    async def delete(self, task_id: TaskId) -> None:
        """Delete a task."""
        self._tasks.pop(task_id, None)
