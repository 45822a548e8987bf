"""Assignment endpoints — active assignee(s) per task."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.application.use_cases.resolve_assignments import (
    BatchResolveAssignmentsUseCase,
    ResolveAssignmentsUseCase,
)
from app.config import settings
from app.infrastructure.api.dependencies import (
    get_batch_resolve_assignments_uc,
    get_resolve_assignments_uc,
)

router = APIRouter(prefix="/tasks", tags=["assignments"])


class BatchAssignmentsRequest(BaseModel):
    task_ids: list[str] = Field(default_factory=list)


@router.post("/assignments/batch")
async def batch_assignments(
    body: BatchAssignmentsRequest,
    batch_uc: BatchResolveAssignmentsUseCase = Depends(get_batch_resolve_assignments_uc),
):
    """Resolve active assignees for many tasks at once."""
    task_ids = [t for t in body.task_ids if t]
    if len(set(task_ids)) > settings.batch_max_tasks:
        raise HTTPException(
            status_code=422,
            detail=f"At most {settings.batch_max_tasks} task ids per request",
        )
    if not task_ids:
        return {}

    results = await batch_uc.execute(task_ids)
    return {
        task_id: [u.to_dict() for u in users]
        for task_id, users in results.items()
    }


@router.get("/{task_id}/assignments")
async def get_assignments(
    task_id: str,
    exclude_actor_id: str | None = None,
    resolve_uc: ResolveAssignmentsUseCase = Depends(get_resolve_assignments_uc),
):
    """Active assignee(s) for a task's current stage, newest first."""
    users = await resolve_uc.execute(task_id, exclude_actor_id=exclude_actor_id)
    return {
        "task_id": task_id,
        "assignments": [u.to_dict() for u in users],
    }
