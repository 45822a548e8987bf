"""ActiveSetSelector — decide who is actively assigned to the current stage."""

from __future__ import annotations

from abc import ABC, abstractmethod

from app.domain.entities.assignment_candidate import AssignedUser, AssignmentCandidate
from app.domain.value_objects.enums import CollapseMode


class CollapsePolicy(ABC):
    """Reduces the ranked (newest first) candidate list to the active set."""

    @abstractmethod
    def collapse(self, ranked: list[AssignmentCandidate]) -> list[AssignmentCandidate]:
        ...


class CollapseToMostRecentAssignee(CollapsePolicy):
    """At most one actor is actively assigned to a stage at a time."""

    def collapse(self, ranked: list[AssignmentCandidate]) -> list[AssignmentCandidate]:
        return ranked[:1]


class KeepAllInStageAssignees(CollapsePolicy):
    def collapse(self, ranked: list[AssignmentCandidate]) -> list[AssignmentCandidate]:
        return list(ranked)


def collapse_policy_for(mode: CollapseMode | str) -> CollapsePolicy:
    if CollapseMode(mode) == CollapseMode.KEEP_ALL:
        return KeepAllInStageAssignees()
    return CollapseToMostRecentAssignee()


def select_active(
    candidates: list[AssignmentCandidate],
    current_stage: str | None,
    creator_id: str | None = None,
    exclude_actor_id: str | None = None,
    policy: CollapsePolicy | None = None,
) -> list[AssignedUser]:
    """Apply stage filter, exclusions, recency ordering and the collapse policy.

    Steps:
      1. Drop candidates scoped to a different stage (case-insensitive).
      2. Drop the task creator and the caller-excluded actor.
      3. Sort newest first (stable, so ties keep merge order).
      4. Collapse via ``policy`` (most recent only by default).
      5. Project to the public AssignedUser shape.
    """
    policy = policy or CollapseToMostRecentAssignee()
    excluded = {a for a in (creator_id, exclude_actor_id) if a}

    eligible = [
        c for c in candidates
        if c.matches_stage(current_stage) and c.actor_id not in excluded
    ]
    ranked = sorted(eligible, key=lambda c: c.occurred_at, reverse=True)
    return [c.to_assigned_user() for c in policy.collapse(ranked)]
