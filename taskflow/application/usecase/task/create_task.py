"""Create task use case."""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import BaseModel

from taskflow.domain.error import MissingFieldsError
from taskflow.domain.model import Task
from taskflow.domain.service import TaskService
from taskflow.domain.value import TaskId, TaskStatus, UserId

from .response import TaskResponse


class CreateTaskRequest(BaseModel):
    """Create task request."""

    user_id: str  # Owner, from the verified token
    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None


class CreateTaskUseCase:
    """Use case for creating a task."""

    def __init__(self, task_service: TaskService) -> None:
        """Initialize create task use case.

        Args:
            task_service: Task domain service
        """
        self.task_service = task_service

    async def execute(self, request: CreateTaskRequest) -> TaskResponse:
        """Create a task owned by the requesting user.

        Args:
            request: Task fields; status defaults to pending

        Returns:
            Created task

        Raises:
            MissingFieldsError: If title is absent or blank
        """
        title = (request.title or "").strip()
        if not title:
            raise MissingFieldsError("Please provide a task title", fields=["title"])

        now = datetime.now(timezone.utc)
        task = Task(
            id=TaskId(uuid4()),
            user_id=UserId(UUID(request.user_id)),
            title=title,
            description=request.description,
            status=request.status or TaskStatus.PENDING,
            created_at=now,
            updated_at=now,
        )

        saved = await self.task_service.save(task)
        return TaskResponse.from_task(saved)
