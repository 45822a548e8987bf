"""SQLAlchemy repository implementations.

Every call opens its own session from the factory: resolution issues its
reads concurrently, and a single AsyncSession cannot run concurrent queries.
"""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.adapters.persistence.models import (
    FileModel,
    ProfileModel,
    TaskActionModel,
    TaskIterationModel,
    TaskModel,
)
from app.application.ports.action_log_repo import ActionLogRepository
from app.application.ports.attachment_repo import AttachmentRepository
from app.application.ports.profile_directory import ProfileDirectory
from app.application.ports.task_repo import TaskRepository
from app.domain.entities.action_record import ActionRecord
from app.domain.entities.attachment_record import AttachmentRecord
from app.domain.entities.profile import Profile
from app.domain.value_objects.enums import ActionKind

# ─── Mappers ─────────────────────────────────────────────────────────


def _action_to_domain(m: TaskActionModel) -> ActionRecord:
    return ActionRecord(
        id=m.id,
        task_id=m.task_id,
        user_id=m.user_id,
        action_type=m.action_type,
        created_at=m.created_at,
        metadata=m.payload if isinstance(m.payload, dict) else {},
    )


def _file_to_domain(m: FileModel) -> AttachmentRecord:
    return AttachmentRecord(
        id=m.id,
        task_id=m.task_id,
        created_at=m.created_at,
        taken_by=m.taken_by,
        assigned_to=m.assigned_to if isinstance(m.assigned_to, list) else [],
    )


def _profile_to_domain(m: ProfileModel) -> Profile:
    return Profile(id=m.id, name=m.name, email=m.email, role=m.role)


# ─── Repositories ────────────────────────────────────────────────────


class SqlTaskRepository(TaskRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get_creator(self, task_id: str) -> str | None:
        async with self._sessions() as s:
            result = await s.execute(
                select(TaskModel.created_by).where(TaskModel.task_id == task_id)
            )
            return result.scalar_one_or_none()

    async def get_current_stage(self, task_id: str) -> str | None:
        async with self._sessions() as s:
            result = await s.execute(
                select(TaskIterationModel.current_stage).where(
                    TaskIterationModel.task_id == task_id
                )
            )
            return result.scalar_one_or_none()


class SqlActionLogRepository(ActionLogRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get_actions(
        self, task_id: str, kinds: Iterable[ActionKind]
    ) -> list[ActionRecord]:
        kind_values = sorted(ActionKind(k).value for k in kinds)
        if not kind_values:
            return []
        async with self._sessions() as s:
            result = await s.execute(
                select(TaskActionModel)
                .where(
                    TaskActionModel.task_id == task_id,
                    TaskActionModel.action_type.in_(kind_values),
                )
                .order_by(TaskActionModel.created_at.desc(), TaskActionModel.id.desc())
            )
            return [_action_to_domain(m) for m in result.scalars()]


class SqlAttachmentRepository(AttachmentRepository):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get_by_task(self, task_id: str) -> list[AttachmentRecord]:
        async with self._sessions() as s:
            result = await s.execute(
                select(FileModel).where(FileModel.task_id == task_id).order_by(FileModel.id)
            )
            return [_file_to_domain(m) for m in result.scalars()]


class SqlProfileDirectory(ProfileDirectory):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def get_by_id(self, actor_id: str) -> Profile | None:
        async with self._sessions() as s:
            m = await s.get(ProfileModel, actor_id)
            return _profile_to_domain(m) if m else None
