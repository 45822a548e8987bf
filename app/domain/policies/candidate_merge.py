"""CandidateMerge — drop stale signals and keep the latest signal per actor."""

from __future__ import annotations

from datetime import datetime

from app.domain.entities.assignment_candidate import AssignmentCandidate


def merge_candidates(
    candidates: list[AssignmentCandidate],
    boundary: datetime,
) -> list[AssignmentCandidate]:
    """Filter by the transition boundary, then deduplicate by actor_id.

    A candidate survives the boundary only if it happened strictly after it.
    Among survivors with the same actor, the latest ``occurred_at`` wins; on
    an exact tie the first one seen is kept.
    """
    latest: dict[str, AssignmentCandidate] = {}
    for candidate in candidates:
        if candidate.occurred_at <= boundary:
            continue
        current = latest.get(candidate.actor_id)
        if current is None or candidate.occurred_at > current.occurred_at:
            latest[candidate.actor_id] = candidate
    return list(latest.values())
