"""Port interface for the append-only task action log."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from app.domain.entities.action_record import ActionRecord
from app.domain.value_objects.enums import ActionKind


class ActionLogRepository(ABC):
    @abstractmethod
    async def get_actions(
        self, task_id: str, kinds: Iterable[ActionKind]
    ) -> list[ActionRecord]:
        """Return the task's actions of the given kinds, newest first."""
        ...
