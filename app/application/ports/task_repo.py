"""Port interface for task and iteration metadata."""

from abc import ABC, abstractmethod


class TaskRepository(ABC):
    @abstractmethod
    async def get_creator(self, task_id: str) -> str | None:
        ...

    @abstractmethod
    async def get_current_stage(self, task_id: str) -> str | None:
        """Return the task's current stage, or None if it has no iteration yet."""
        ...
