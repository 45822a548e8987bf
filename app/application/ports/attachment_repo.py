"""Port interface for per-task attachment records."""

from abc import ABC, abstractmethod

from app.domain.entities.attachment_record import AttachmentRecord


class AttachmentRepository(ABC):
    @abstractmethod
    async def get_by_task(self, task_id: str) -> list[AttachmentRecord]:
        ...
