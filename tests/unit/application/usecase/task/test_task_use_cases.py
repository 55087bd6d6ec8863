"""Unit tests for task use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from taskflow.application.usecase.task import (
    CreateTaskRequest,
    CreateTaskUseCase,
    DeleteTaskRequest,
    DeleteTaskUseCase,
    ListTasksRequest,
    ListTasksUseCase,
    UpdateTaskRequest,
    UpdateTaskUseCase,
)
from taskflow.domain.error import MissingFieldsError, NotAuthorizedError, NotFoundError
from taskflow.domain.value import TaskStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def create_task(env: AsyncContainer, user_id: str, title: str = "Write report"):
    use_case = await env.get(CreateTaskUseCase)
    return await use_case.execute(
        CreateTaskRequest(user_id=user_id, title=title, description="Quarterly")
    )


class TestCreateTaskUseCase:
    """Tests for CreateTaskUseCase."""

    @pytest.mark.asyncio
    async def test_defaults_to_pending(self, unit_env: AsyncContainer):
        """Should create a pending task owned by the caller."""
        user_id = str(uuid4())

        task = await create_task(unit_env, user_id)

        assert task.user == user_id
        assert task.title == "Write report"
        assert task.status == TaskStatus.PENDING

    @pytest.mark.asyncio
    async def test_blank_title(self, unit_env: AsyncContainer):
        """Should require a title."""
        use_case = await unit_env.get(CreateTaskUseCase)

        with pytest.raises(MissingFieldsError) as exc_info:
            await use_case.execute(CreateTaskRequest(user_id=str(uuid4()), title="  "))

        assert str(exc_info.value) == "Please provide a task title"


class TestListTasksUseCase:
    """Tests for ListTasksUseCase."""

    @pytest.mark.asyncio
    async def test_lists_own_tasks(self, unit_env: AsyncContainer):
        """Should only count the caller's tasks."""
        user_id = str(uuid4())
        await create_task(unit_env, user_id, "one")
        await create_task(unit_env, user_id, "two")
        await create_task(unit_env, str(uuid4()), "someone else")
        use_case = await unit_env.get(ListTasksUseCase)

        response = await use_case.execute(ListTasksRequest(user_id=user_id))

        assert response.count == 2
        assert {t.title for t in response.tasks} == {"one", "two"}


class TestUpdateTaskUseCase:
    """Tests for UpdateTaskUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env: AsyncContainer):
        """Should only change the supplied fields."""
        user_id = str(uuid4())
        task = await create_task(unit_env, user_id)
        use_case = await unit_env.get(UpdateTaskUseCase)

        updated = await use_case.execute(
            UpdateTaskRequest(
                task_id=task.id, user_id=user_id, status=TaskStatus.COMPLETED
            )
        )

        assert updated.status == TaskStatus.COMPLETED
        assert updated.title == "Write report"
        assert updated.description == "Quarterly"

    @pytest.mark.asyncio
    async def test_explicit_empty_description(self, unit_env: AsyncContainer):
        """Should clear the description when one is supplied."""
        user_id = str(uuid4())
        task = await create_task(unit_env, user_id)
        use_case = await unit_env.get(UpdateTaskUseCase)

        updated = await use_case.execute(
            UpdateTaskRequest(task_id=task.id, user_id=user_id, description="")
        )

        assert updated.description == ""

    @pytest.mark.asyncio
    async def test_foreign_task(self, unit_env: AsyncContainer):
        """Should forbid updating another user's task."""
        task = await create_task(unit_env, str(uuid4()))
        use_case = await unit_env.get(UpdateTaskUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateTaskRequest(task_id=task.id, user_id=str(uuid4()), title="x")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("task_id", [str(uuid4()), "not-a-uuid"])
    async def test_unknown_task(self, unit_env: AsyncContainer, task_id):
        """Should report unknown and malformed IDs as not found."""
        use_case = await unit_env.get(UpdateTaskUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateTaskRequest(task_id=task_id, user_id=str(uuid4()), title="x")
            )


class TestDeleteTaskUseCase:
    """Tests for DeleteTaskUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_task(self, unit_env: AsyncContainer):
        """Should remove the task for its owner."""
        user_id = str(uuid4())
        task = await create_task(unit_env, user_id)
        use_case = await unit_env.get(DeleteTaskUseCase)
        list_use_case = await unit_env.get(ListTasksUseCase)

        await use_case.execute(DeleteTaskRequest(task_id=task.id, user_id=user_id))

        assert (await list_use_case.execute(ListTasksRequest(user_id=user_id))).count == 0

    @pytest.mark.asyncio
    async def test_foreign_task(self, unit_env: AsyncContainer):
        """Should forbid deleting another user's task."""
        task = await create_task(unit_env, str(uuid4()))
        use_case = await unit_env.get(DeleteTaskUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteTaskRequest(task_id=task.id, user_id=str(uuid4()))
            )
