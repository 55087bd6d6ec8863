"""Update task use case."""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel

from taskflow.domain.error import NotFoundError
from taskflow.domain.service import TaskService
from taskflow.domain.value import TaskId, TaskStatus, UserId

from .response import TaskResponse, parse_id


class UpdateTaskRequest(BaseModel):
    """Update task request.

    Omitted fields keep their current values. A supplied description,
    even an empty one, replaces the current description.
    """

    task_id: str
    user_id: str  # Current user ID (must be owner)
    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None


class UpdateTaskUseCase:
    """Use case for updating a task."""

    def __init__(self, task_service: TaskService) -> None:
        """Initialize update task use case.

        Args:
            task_service: Task domain service
        """
        self.task_service = task_service

    async def execute(self, request: UpdateTaskRequest) -> TaskResponse:
        """Execute update task flow.

        Args:
            request: Update task request

        Returns:
            Updated task

        Raises:
            NotFoundError: If the task does not exist or the ID is malformed
            NotAuthorizedError: If user doesn't own the task
        """
        task_uuid = parse_id(request.task_id)
        if task_uuid is None:
            raise NotFoundError("Task", request.task_id)

        task = await self.task_service.get_owned(
            TaskId(task_uuid), UserId(UUID(request.user_id))
        )

        title = (request.title or "").strip() or task.title
        description = (
            request.description
            if "description" in request.model_fields_set
            else task.description
        )

        updated = task.model_copy(
            update={
                "title": title,
                "description": description,
                "status": request.status or task.status,
                "updated_at": datetime.now(timezone.utc),
            }
        )
        saved = await self.task_service.save(updated)
        return TaskResponse.from_task(saved)
