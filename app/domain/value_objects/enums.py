"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ActionKind(str, Enum):
    """Action types recorded in the task action log.

    Values match the raw ``action_type`` column so records can be mapped
    without translation.
    """

    TAKEN = "taken_by"
    ASSIGNED = "assigned_to"
    HANDOVER = "handover"
    SEND_TO = "send_to"

    def is_transition(self) -> bool:
        return self in TRANSITION_KINDS


# Kinds that may become assignment candidates
ASSIGNMENT_KINDS = frozenset({ActionKind.TAKEN, ActionKind.ASSIGNED})

# Kinds that move a task out of its current state; used only for staleness
TRANSITION_KINDS = frozenset({ActionKind.HANDOVER, ActionKind.SEND_TO})


class CandidateOrigin(str, Enum):
    ACTION_LOG = "task_actions"
    ATTACHMENTS = "files"


class CollapseMode(str, Enum):
    MOST_RECENT = "most_recent"
    KEEP_ALL = "keep_all"
