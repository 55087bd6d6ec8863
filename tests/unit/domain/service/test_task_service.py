"""Unit tests for TaskService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from taskflow.domain.error import NotAuthorizedError, NotFoundError
from taskflow.domain.model import Task
from taskflow.domain.service import TaskService
from taskflow.domain.value import TaskId, UserId
from taskflow.persistence.repository.inmemory import InMemoryTaskRepository


def make_task(user_id: UserId, title: str = "Task", **kwargs) -> Task:
    return Task(id=TaskId(uuid4()), user_id=user_id, title=title, **kwargs)


class TestListForUser:
    """Tests for TaskService.list_for_user()."""

    @pytest.mark.asyncio
    async def test_lists_only_own_tasks_newest_first(self):
        """Should return the owner's tasks ordered by creation, newest first."""
        repo = InMemoryTaskRepository()
        service = TaskService(repo)
        owner = UserId(uuid4())
        other = UserId(uuid4())
        now = datetime.now(timezone.utc)

        older = make_task(owner, "older", created_at=now - timedelta(minutes=5))
        newer = make_task(owner, "newer", created_at=now)
        await repo.save(older)
        await repo.save(newer)
        await repo.save(make_task(other, "not mine"))

        tasks = await service.list_for_user(owner)

        assert [t.title for t in tasks] == ["newer", "older"]


class TestGetOwned:
    """Tests for TaskService.get_owned()."""

    @pytest.mark.asyncio
    async def test_returns_owned_task(self):
        """Should return the task for its owner."""
        repo = InMemoryTaskRepository()
        service = TaskService(repo)
        owner = UserId(uuid4())
        task = await repo.save(make_task(owner))

        assert (await service.get_owned(task.id, owner)).id == task.id

    @pytest.mark.asyncio
    async def test_missing_task(self):
        """Should raise NotFoundError for an unknown ID."""
        service = TaskService(InMemoryTaskRepository())

        with pytest.raises(NotFoundError):
            await service.get_owned(TaskId(uuid4()), UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_foreign_task(self):
        """Should raise NotAuthorizedError for another user's task."""
        repo = InMemoryTaskRepository()
        service = TaskService(repo)
        task = await repo.save(make_task(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await service.get_owned(task.id, UserId(uuid4()))


class TestDelete:
    """Tests for TaskService.delete()."""

    @pytest.mark.asyncio
    async def test_delete_removes_task(self):
        """Should remove the task from the repository."""
        repo = InMemoryTaskRepository()
        service = TaskService(repo)
        task = await repo.save(make_task(UserId(uuid4())))

        await service.delete(task.id)

        assert await repo.find_by_id(task.id) is None
