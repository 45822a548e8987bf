"""ResolveAssignmentsUseCase — who is actively assigned to a task right now."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from app.application.ports.action_log_repo import ActionLogRepository
from app.application.ports.attachment_repo import AttachmentRepository
from app.application.ports.task_repo import TaskRepository
from app.application.use_cases.resolve_identities import ResolveIdentitiesUseCase
from app.domain.entities.assignment_candidate import AssignedUser
from app.domain.policies.active_set import CollapsePolicy, select_active
from app.domain.policies.candidate_merge import merge_candidates
from app.domain.policies.identity_normalizer import normalize_all
from app.domain.policies.transition_boundary import find_transition_boundary
from app.domain.value_objects.enums import ASSIGNMENT_KINDS, TRANSITION_KINDS
from app.domain.value_objects.identity import EPOCH, is_unknown_actor

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResolveAssignmentsUseCase:
    """Replays a task's assignment history to find its active assignee(s)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        action_log: ActionLogRepository,
        attachment_repo: AttachmentRepository,
        resolve_identities: ResolveIdentitiesUseCase,
        collapse_policy: CollapsePolicy | None = None,
    ):
        self._tasks = task_repo
        self._actions = action_log
        self._attachments = attachment_repo
        self._identities = resolve_identities
        self._policy = collapse_policy

    async def execute(
        self, task_id: str, exclude_actor_id: str | None = None
    ) -> list[AssignedUser]:
        """Resolve the task's active assignees, newest first.

        Pipeline:
        1. Read creator, stage, signals (both sources) and transitions concurrently
        2. Normalize signals into candidates, dropping creator self-signals
        3. Drop signals at or before the latest transition, keep latest per actor
        4. Fill missing display fields from profiles
        5. Stage filter, exclusions, ordering and collapse

        Never raises; any unexpected failure yields an empty list.
        """
        try:
            creator_id, current_stage, actions, attachments, transitions = await asyncio.gather(
                self._read(self._tasks.get_creator(task_id), None, task_id, "task creator"),
                self._read(self._tasks.get_current_stage(task_id), None, task_id, "current stage"),
                self._read(self._actions.get_actions(task_id, ASSIGNMENT_KINDS), [], task_id, "action log"),
                self._read(self._attachments.get_by_task(task_id), [], task_id, "attachments"),
                self._read(self._actions.get_actions(task_id, TRANSITION_KINDS), [], task_id, "transitions"),
            )

            candidates = normalize_all(actions, attachments, creator_id)
            boundary = find_transition_boundary(transitions)
            merged = merge_candidates(candidates, boundary)
            unresolvable = sum(1 for c in merged if is_unknown_actor(c.actor_id))
            if unresolvable:
                logger.warning("Task %s: %d signal(s) without a resolvable actor", task_id, unresolvable)
            resolved = await self._identities.execute(merged)

            result = select_active(
                resolved,
                current_stage=current_stage,
                creator_id=creator_id,
                exclude_actor_id=exclude_actor_id,
                policy=self._policy,
            )

            logger.info(
                "Task %s: stage=%s, candidates=%d, after merge=%d, boundary=%s → %s",
                task_id, current_stage, len(candidates), len(merged),
                boundary.isoformat() if boundary != EPOCH else "none",
                [u.actor_id for u in result],
            )
            return result

        except Exception:
            logger.exception("Error resolving assignments for task %s", task_id)
            return []

    @staticmethod
    async def _read(source: Awaitable[T], default: T, task_id: str, what: str) -> T:
        """Await one collaborator read, degrading to ``default`` on failure."""
        try:
            return await source
        except Exception as e:
            logger.warning("Task %s: failed to read %s, using default: %s", task_id, what, e)
            return default


class BatchResolveAssignmentsUseCase:
    """Resolve many tasks concurrently; each task is isolated from the others."""

    def __init__(self, resolve_assignments: ResolveAssignmentsUseCase):
        self._resolve = resolve_assignments

    async def execute(self, task_ids: list[str]) -> dict[str, list[AssignedUser]]:
        unique_ids = list(dict.fromkeys(task_ids))
        logger.info("Batch resolving assignments for %d tasks", len(unique_ids))

        results = await asyncio.gather(
            *(self._resolve.execute(task_id) for task_id in unique_ids),
            return_exceptions=True,
        )

        by_task: dict[str, list[AssignedUser]] = {}
        for task_id, result in zip(unique_ids, results):
            if isinstance(result, BaseException):
                logger.error("Task %s: batch resolution failed: %s", task_id, result)
                by_task[task_id] = []
            else:
                by_task[task_id] = result

        assigned = sum(1 for users in by_task.values() if users)
        logger.info("Batch complete: %d/%d tasks have an assignee", assigned, len(by_task))
        return by_task
