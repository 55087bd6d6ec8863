"""PostgreSQL implementation of Task repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskflow.domain.model import Task
from taskflow.domain.repository import TaskRepository
from taskflow.domain.value import TaskId, UserId
from taskflow.persistence.mappers import row_to_task, task_to_dict
from taskflow.persistence.repository.errors import translate_errors
from taskflow.persistence.tables import tasks_table


class PostgresTaskRepository(TaskRepository):
    """PostgreSQL implementation of TaskRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """Find a task by ID."""
        stmt = select(tasks_table).where(tasks_table.c.id == task_id)
        async with translate_errors("Task"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_task(dict(row)) if row else None

    async def find_all_by_user(self, user_id: UserId) -> list[Task]:
        """List a user's tasks, newest first."""
        stmt = (
            select(tasks_table)
            .where(tasks_table.c.user_id == user_id)
            .order_by(tasks_table.c.created_at.desc())
        )
        async with translate_errors("Task"):
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        return [row_to_task(dict(row)) for row in rows]

    async def save(self, task: Task) -> Task:
        """Save a task (create or update).

        Args:
            task: Task to save

        Returns:
            Saved task
        """
        existing = await self.find_by_id(task.id)
        task_dict = task_to_dict(task)

        async with translate_errors("Task"):
            if existing:
                task_dict.pop("id")
                task_dict.pop("created_at")
                stmt = (
                    tasks_table.update()
                    .where(tasks_table.c.id == task.id)
                    .values(**task_dict)
                )
            else:
                stmt = tasks_table.insert().values(**task_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return task

    async def delete(self, task_id: TaskId) -> None:
        """Delete a task."""
        async with translate_errors("Task"):
            await self.session.execute(
                tasks_table.delete().where(tasks_table.c.id == task_id)
            )
            await self.session.flush()
