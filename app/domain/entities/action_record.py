"""ActionRecord — one row of the append-only task action log."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ActionRecord:
    id: int | None
    task_id: str
    user_id: str | None
    action_type: str
    created_at: datetime
    metadata: dict = field(default_factory=dict)

    def meta(self, key: str) -> str:
        """Return a non-empty string side-payload field, or empty string."""
        if not isinstance(self.metadata, dict):
            return ""
        value = self.metadata.get(key)
        if value is None:
            return ""
        return str(value).strip()
