"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from app.adapters.persistence.database import async_session_factory
from app.adapters.persistence.repositories import (
    SqlActionLogRepository,
    SqlAttachmentRepository,
    SqlProfileDirectory,
    SqlTaskRepository,
)
from app.adapters.profiles.http_directory import HttpProfileDirectory
from app.application.ports.profile_directory import ProfileDirectory
from app.application.use_cases.resolve_assignments import (
    BatchResolveAssignmentsUseCase,
    ResolveAssignmentsUseCase,
)
from app.application.use_cases.resolve_identities import ResolveIdentitiesUseCase
from app.config import settings
from app.domain.policies.active_set import collapse_policy_for

logger = logging.getLogger(__name__)

# Singleton adapters (stateless; each call opens its own session / client)
_task_repo = SqlTaskRepository(async_session_factory)
_action_log = SqlActionLogRepository(async_session_factory)
_attachment_repo = SqlAttachmentRepository(async_session_factory)

_profile_directory: ProfileDirectory
if settings.profile_service_url:
    _profile_directory = HttpProfileDirectory()
    logger.info("Using profile service at %s", settings.profile_service_url)
else:
    _profile_directory = SqlProfileDirectory(async_session_factory)

_collapse_policy = collapse_policy_for(settings.collapse_policy)


def get_resolve_assignments_uc() -> ResolveAssignmentsUseCase:
    return ResolveAssignmentsUseCase(
        task_repo=_task_repo,
        action_log=_action_log,
        attachment_repo=_attachment_repo,
        resolve_identities=ResolveIdentitiesUseCase(profiles=_profile_directory),
        collapse_policy=_collapse_policy,
    )


def get_batch_resolve_assignments_uc() -> BatchResolveAssignmentsUseCase:
    return BatchResolveAssignmentsUseCase(resolve_assignments=get_resolve_assignments_uc())
