"""IdentityNormalizer — turn raw history records into AssignmentCandidates.

Both history sources are shaped differently; everything downstream of this
module works on AssignmentCandidate only.

Action log rules (``task_actions``):
  * ``taken_by``    → the acting user is the candidate.
  * ``assigned_to`` → the target user from the side payload, falling back to
    the acting user. Display fields prefer the ``assigned_to_user_*`` variant,
    then the generic ``user_*`` variant.
  * stage comes from ``assignment_stage`` (assigned) or ``stage`` (taken).

Attachment rules (``files``):
  * ``taken_by`` → a taken candidate with no display fields and no stage,
    timestamped at the file's creation time.
  * each ``assigned_to`` entry → an assigned candidate whose stage label is
    the entry's ``role`` and whose time is ``assigned_at`` or the file time.

Signals from the task creator never count and are dropped here.
"""

from __future__ import annotations

from app.domain.entities.action_record import ActionRecord
from app.domain.entities.assignment_candidate import AssignmentCandidate
from app.domain.entities.attachment_record import AttachmentRecord
from app.domain.value_objects.enums import ActionKind, CandidateOrigin
from app.domain.value_objects.identity import (
    UNKNOWN_ACTOR_ID,
    ensure_utc,
    parse_timestamp,
)


def _text(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def normalize_action(
    record: ActionRecord,
    creator_id: str | None,
) -> AssignmentCandidate | None:
    """Normalize one action-log record; returns None for non-candidate kinds."""
    try:
        kind = ActionKind(record.action_type)
    except ValueError:
        return None
    if kind.is_transition():
        return None

    acting_id = _text(record.user_id)

    if kind == ActionKind.ASSIGNED:
        actor_id = record.meta("assigned_to_user_id") or acting_id
        name = record.meta("assigned_to_user_name") or record.meta("user_name")
        email = record.meta("assigned_to_user_email") or record.meta("user_email")
        role = record.meta("assigned_to_user_role") or record.meta("user_role")
        stage = record.meta("assignment_stage")
    else:
        actor_id = acting_id
        name = record.meta("user_name")
        email = record.meta("user_email")
        role = record.meta("user_role")
        stage = record.meta("stage")

    actor_id = actor_id or UNKNOWN_ACTOR_ID
    if creator_id and actor_id == creator_id:
        return None

    return AssignmentCandidate(
        actor_id=actor_id,
        action_kind=kind,
        occurred_at=ensure_utc(record.created_at),
        origin=CandidateOrigin.ACTION_LOG,
        display_name=name,
        email=email,
        role=role,
        stage_label=stage,
    )


def normalize_attachment(
    record: AttachmentRecord,
    creator_id: str | None,
) -> list[AssignmentCandidate]:
    """Normalize one attachment row into zero or more candidates."""
    created_at = ensure_utc(record.created_at)
    candidates: list[AssignmentCandidate] = []

    taken_by = _text(record.taken_by)
    if taken_by and taken_by != creator_id:
        candidates.append(
            AssignmentCandidate(
                actor_id=taken_by,
                action_kind=ActionKind.TAKEN,
                occurred_at=created_at,
                origin=CandidateOrigin.ATTACHMENTS,
            )
        )

    entries = record.assigned_to if isinstance(record.assigned_to, list) else []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        actor_id = _text(entry.get("user_id")) or _text(entry.get("id")) or UNKNOWN_ACTOR_ID
        if creator_id and actor_id == creator_id:
            continue
        role = _text(entry.get("role"))
        candidates.append(
            AssignmentCandidate(
                actor_id=actor_id,
                action_kind=ActionKind.ASSIGNED,
                occurred_at=parse_timestamp(entry.get("assigned_at"), default=created_at),
                origin=CandidateOrigin.ATTACHMENTS,
                display_name=_text(entry.get("name")),
                email=_text(entry.get("email")),
                role=role,
                # Attachment entries carry no stage; role stands in for it
                stage_label=role,
            )
        )

    return candidates


def normalize_all(
    actions: list[ActionRecord],
    attachments: list[AttachmentRecord],
    creator_id: str | None,
) -> list[AssignmentCandidate]:
    """Normalize both sources, action log first."""
    candidates: list[AssignmentCandidate] = []
    for action in actions:
        candidate = normalize_action(action, creator_id)
        if candidate is not None:
            candidates.append(candidate)
    for attachment in attachments:
        candidates.extend(normalize_attachment(attachment, creator_id))
    return candidates
