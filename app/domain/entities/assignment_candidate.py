"""AssignmentCandidate — a normalized assignment signal from either source."""

from dataclasses import dataclass, replace
from datetime import datetime

from app.domain.entities.profile import Profile
from app.domain.value_objects.enums import ActionKind, CandidateOrigin


@dataclass(frozen=True)
class AssignedUser:
    """Public projection of a candidate returned to callers."""

    actor_id: str
    display_name: str
    email: str
    role: str
    action_kind: ActionKind

    def to_dict(self) -> dict:
        # Wire names follow the historical client contract
        return {
            "user_id": self.actor_id,
            "name": self.display_name,
            "email": self.email,
            "role": self.role,
            "action_type": self.action_kind.value,
        }


@dataclass(frozen=True)
class AssignmentCandidate:
    actor_id: str
    action_kind: ActionKind
    occurred_at: datetime
    origin: CandidateOrigin
    display_name: str = ""
    email: str = ""
    role: str = ""
    stage_label: str = ""

    def needs_profile_lookup(self) -> bool:
        return not self.display_name or self.display_name == self.actor_id

    def matches_stage(self, current_stage: str | None) -> bool:
        """Empty labels are unscoped and always match; otherwise compare case-insensitively."""
        if not current_stage or not self.stage_label:
            return True
        return self.stage_label.lower() == current_stage.lower()

    def with_profile(self, profile: Profile) -> "AssignmentCandidate":
        """Fill empty display fields from a profile; non-empty fields are kept."""
        name = self.display_name
        if self.needs_profile_lookup() and profile.name:
            name = profile.name
        return replace(
            self,
            display_name=name,
            email=self.email or profile.email or "",
            role=self.role or profile.role or "",
        )

    def to_assigned_user(self) -> AssignedUser:
        return AssignedUser(
            actor_id=self.actor_id,
            display_name=self.display_name,
            email=self.email,
            role=self.role,
            action_kind=self.action_kind,
        )
