"""Task routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
import logfire
from pydantic import BaseModel, Field

from taskflow.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskUseCase,
    ListTasksRequest,
    ListTasksResponse,
    ListTasksUseCase,
    TaskResponse,
    UpdateTaskRequest,
    UpdateTaskUseCase,
)
from taskflow.domain.error import MissingFieldsError, NotAuthorizedError, NotFoundError
from taskflow.domain.value import TaskStatus
from taskflow.interface.api.security import require_user_id

router = APIRouter(prefix="/api/tasks", tags=["tasks"], route_class=DishkaRoute)


class CreateTaskAPIRequest(BaseModel):
    """API request for creating a task."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus | None = None


class UpdateTaskAPIRequest(BaseModel):
    """API request for updating a task. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, max_length=200)
    description: str | None = Field(default=None, max_length=2000)
    status: TaskStatus | None = None


class DeleteTaskResponse(BaseModel):
    """Delete task response."""

    success: bool
    message: str


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")


@router.get("", response_model=ListTasksResponse)
async def list_tasks(
    list_tasks_use_case: FromDishka[ListTasksUseCase],
    user_id: str = Depends(require_user_id),
) -> ListTasksResponse:
    """List the current user's tasks, newest first."""
    return await list_tasks_use_case.execute(ListTasksRequest(user_id=user_id))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    request: CreateTaskAPIRequest,
    create_task_use_case: FromDishka[CreateTaskUseCase],
    user_id: str = Depends(require_user_id),
) -> TaskResponse:
    """Create a task for the current user.

    Example:
        POST /api/tasks
        {"title": "Write report", "status": "in-progress"}
    """
    try:
        return await create_task_use_case.execute(
            CreateTaskRequest(
                user_id=user_id,
                title=request.title,
                description=request.description,
                status=request.status,
            )
        )
    except MissingFieldsError as e:
        logfire.warn("Task creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    request: UpdateTaskAPIRequest,
    update_task_use_case: FromDishka[UpdateTaskUseCase],
    user_id: str = Depends(require_user_id),
) -> TaskResponse:
    """Update a task owned by the current user."""
    try:
        return await update_task_use_case.execute(
            UpdateTaskRequest(
                task_id=task_id,
                user_id=user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except NotFoundError:
        raise _not_found()
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to update this task",
        )


@router.delete("/{task_id}", response_model=DeleteTaskResponse)
async def delete_task(
    task_id: str,
    delete_task_use_case: FromDishka[DeleteTaskUseCase],
    user_id: str = Depends(require_user_id),
) -> DeleteTaskResponse:
    """Delete a task owned by the current user."""
    try:
        await delete_task_use_case.execute(
            DeleteTaskRequest(task_id=task_id, user_id=user_id)
        )
    except NotFoundError:
        raise _not_found()
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this task",
        )

    return DeleteTaskResponse(success=True, message="Task deleted successfully")
