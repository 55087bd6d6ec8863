"""Delete task use case."""

from uuid import UUID

from pydantic import BaseModel

from taskflow.domain.error import NotFoundError
from taskflow.domain.service import TaskService
from taskflow.domain.value import TaskId, UserId

from .response import parse_id


class DeleteTaskRequest(BaseModel):
    """Delete task request."""

    task_id: str
    user_id: str


class DeleteTaskUseCase:
    """Use case for deleting a task."""

    def __init__(self, task_service: TaskService) -> None:
        self.task_service = task_service

    async def execute(self, request: DeleteTaskRequest) -> None:
        """Delete a task owned by the requesting user.

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
        await self.task_service.delete(task.id)
