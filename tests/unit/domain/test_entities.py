"""Tests for domain entities."""

from datetime import datetime, timezone

from app.domain.entities.action_record import ActionRecord
from app.domain.entities.assignment_candidate import AssignmentCandidate
from app.domain.entities.profile import Profile
from app.domain.value_objects.enums import ActionKind, CandidateOrigin

T0 = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def _candidate(**overrides) -> AssignmentCandidate:
    fields = dict(
        actor_id="u2",
        action_kind=ActionKind.ASSIGNED,
        occurred_at=T0,
        origin=CandidateOrigin.ACTION_LOG,
    )
    fields.update(overrides)
    return AssignmentCandidate(**fields)


# ─── ActionRecord ────────────────────────────────────────────────────


def test_action_meta_returns_stripped_text():
    a = ActionRecord(
        id=1, task_id="t1", user_id="u1", action_type="taken_by",
        created_at=T0, metadata={"user_name": "  Alice  ", "stage": None},
    )
    assert a.meta("user_name") == "Alice"
    assert a.meta("stage") == ""
    assert a.meta("missing") == ""


def test_action_meta_tolerates_non_dict_payload():
    a = ActionRecord(
        id=1, task_id="t1", user_id="u1", action_type="taken_by",
        created_at=T0, metadata=None,
    )
    assert a.meta("user_name") == ""


# ─── AssignmentCandidate ─────────────────────────────────────────────


def test_needs_profile_lookup_when_name_empty():
    assert _candidate(display_name="").needs_profile_lookup() is True


def test_needs_profile_lookup_when_name_is_id():
    assert _candidate(display_name="u2").needs_profile_lookup() is True


def test_no_profile_lookup_when_named():
    assert _candidate(display_name="Bob").needs_profile_lookup() is False


def test_matches_stage_case_insensitive():
    c = _candidate(stage_label="Review")
    assert c.matches_stage("review") is True
    assert c.matches_stage("REVIEW") is True
    assert c.matches_stage("intake") is False


def test_unscoped_candidate_matches_any_stage():
    assert _candidate(stage_label="").matches_stage("intake") is True


def test_any_candidate_matches_when_task_has_no_stage():
    assert _candidate(stage_label="intake").matches_stage(None) is True


def test_with_profile_fills_only_empty_fields():
    c = _candidate(display_name="", email="bob@corp.example", role="")
    resolved = c.with_profile(Profile(id="u2", name="Bob", email="other@x", role="editor"))
    assert resolved.display_name == "Bob"
    assert resolved.email == "bob@corp.example"
    assert resolved.role == "editor"


def test_with_profile_replaces_id_placeholder_name():
    c = _candidate(display_name="u2")
    assert c.with_profile(Profile(id="u2", name="Bob")).display_name == "Bob"


def test_with_profile_keeps_fields_when_profile_blank():
    c = _candidate(display_name="u2", email="", role="")
    resolved = c.with_profile(Profile(id="u2"))
    assert resolved.display_name == "u2"
    assert resolved.email == ""
    assert resolved.role == ""


def test_with_profile_is_idempotent_for_populated_candidate():
    c = _candidate(display_name="Bob", email="bob@x", role="reviewer")
    resolved = c.with_profile(Profile(id="u2", name="Robert", email="r@x", role="admin"))
    assert resolved == c


def test_to_assigned_user_wire_shape():
    c = _candidate(display_name="Bob", email="bob@x", role="reviewer", stage_label="review")
    assert c.to_assigned_user().to_dict() == {
        "user_id": "u2",
        "name": "Bob",
        "email": "bob@x",
        "role": "reviewer",
        "action_type": "assigned_to",
    }
