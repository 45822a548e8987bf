"""TransitionBoundary — the instant before which assignment signals are stale."""

from __future__ import annotations

from datetime import datetime

from app.domain.entities.action_record import ActionRecord
from app.domain.value_objects.identity import EPOCH, ensure_utc


def find_transition_boundary(transitions: list[ActionRecord]) -> datetime:
    """Return the time of the most recent handover/send-to event, or EPOCH.

    ``transitions`` arrives newest first from the action log, so the first
    entry is the boundary.
    """
    if not transitions:
        return EPOCH
    return ensure_utc(transitions[0].created_at)
