"""Task use cases."""

from .create_task import CreateTaskRequest, CreateTaskUseCase
from .delete_task import DeleteTaskRequest, DeleteTaskUseCase
from .list_tasks import ListTasksRequest, ListTasksResponse, ListTasksUseCase
from .response import TaskResponse
from .update_task import UpdateTaskRequest, UpdateTaskUseCase

__all__ = [
    "CreateTaskRequest",
    "CreateTaskUseCase",
    "DeleteTaskRequest",
    "DeleteTaskUseCase",
    "ListTasksRequest",
    "ListTasksResponse",
    "ListTasksUseCase",
    "TaskResponse",
    "UpdateTaskRequest",
    "UpdateTaskUseCase",
]
