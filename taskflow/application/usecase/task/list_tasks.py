"""List tasks use case."""

from uuid import UUID

from pydantic import BaseModel

from taskflow.domain.service import TaskService
from taskflow.domain.value import UserId

from .response import TaskResponse


class ListTasksRequest(BaseModel):
    """List tasks request."""

    user_id: str


class ListTasksResponse(BaseModel):
    """List tasks response."""

    count: int
    tasks: list[TaskResponse]


class ListTasksUseCase:
    """Use case for listing the current user's tasks."""

    def __init__(self, task_service: TaskService) -> None:
        self.task_service = task_service

    async def execute(self, request: ListTasksRequest) -> ListTasksResponse:
        """Return the user's tasks, newest first."""
        tasks = await self.task_service.list_for_user(UserId(UUID(request.user_id)))
        return ListTasksResponse(
            count=len(tasks),
            tasks=[TaskResponse.from_task(task) for task in tasks],
        )
