"""AttachmentRecord — a file attached to a task with its own assignment fields."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class AttachmentRecord:
    id: int | None
    task_id: str
    created_at: datetime
    taken_by: str | None = None
    # Raw JSON entries: {user_id?, id?, name?, email?, role?, assigned_at?}
    assigned_to: list = field(default_factory=list)
