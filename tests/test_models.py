"""Tests for prassign.models (validation, aliases, projections)."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from prassign.models import (
    STATUS_MERGED,
    STATUS_OPEN,
    PullRequest,
    PullRequestShort,
    Team,
    TeamMember,
    User,
)


class TestTeam:
    """Team and TeamMember validation and wire names."""

    def test_accepts_wire_names(self) -> None:
        """Team validates from the JSON shape (team_name, members)."""
        team = Team.model_validate(
            {
                "team_name": "core",
                "members": [{"user_id": "u1", "username": "Alice", "is_active": True}],
            }
        )
        assert team.name == "core"
        assert team.members[0].user_id == "u1"
        assert [m.user_id for m in team.members] == ["u1"]

    def test_accepts_field_names(self) -> None:
        """populate_by_name allows construction by field name."""
        team = Team(name="core", members=[TeamMember(user_id="u1", username="A")])
        assert team.model_dump(by_alias=True)["team_name"] == "core"

    def test_empty_name_rejected(self) -> None:
        """Team name must be non-empty."""
        with pytest.raises(ValidationError):
            Team(name="", members=[])

    def test_empty_member_id_rejected(self) -> None:
        """Member user_id must be non-empty."""
        with pytest.raises(ValidationError):
            TeamMember(user_id="", username="A")

    def test_extra_fields_forbidden(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            Team.model_validate({"team_name": "core", "members": [], "lead": "u1"})


class TestUser:
    def test_dump_by_alias(self) -> None:
        """User serializes with user_id key."""
        user = User(id="u1", username="Alice", team_name="core", is_active=False)
        assert user.model_dump(by_alias=True) == {
            "user_id": "u1",
            "username": "Alice",
            "team_name": "core",
            "is_active": False,
        }


class TestPullRequest:
    """PullRequest defaults, validation and to_short."""

    def test_defaults(self) -> None:
        """New pull request is OPEN with no reviewers and no timestamps."""
        pr = PullRequest(id="pr-1", name="Add search", author_id="u1")
        assert pr.status == STATUS_OPEN
        assert pr.assigned_reviewers == []
        assert pr.created_at is None
        assert pr.merged_at is None
        assert not pr.is_merged

    def test_duplicate_reviewers_rejected(self) -> None:
        """assigned_reviewers may not contain the same ID twice."""
        with pytest.raises(ValidationError):
            PullRequest(id="pr-1", name="X", author_id="u1", assigned_reviewers=["u2", "u2"])

    def test_unknown_status_rejected(self) -> None:
        """Only OPEN and MERGED are valid statuses."""
        with pytest.raises(ValidationError):
            PullRequest(id="pr-1", name="X", author_id="u1", status="CLOSED")

    @pytest.mark.parametrize("field", ["id", "name", "author_id"])
    def test_required_fields_non_empty(self, field: str) -> None:
        """ID, name and author must be non-empty."""
        data = {"id": "pr-1", "name": "X", "author_id": "u1"}
        data[field] = ""
        with pytest.raises(ValidationError):
            PullRequest(**data)

    def test_dump_by_alias_uses_wire_names(self) -> None:
        """Timestamps dump as createdAt / mergedAt."""
        ts = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)
        pr = PullRequest(
            id="pr-1",
            name="X",
            author_id="u1",
            status=STATUS_MERGED,
            assigned_reviewers=["u2"],
            created_at=ts,
            merged_at=ts,
        )
        data = pr.model_dump(by_alias=True, mode="json")
        assert data["pull_request_id"] == "pr-1"
        assert data["pull_request_name"] == "X"
        assert data["assigned_reviewers"] == ["u2"]
        assert data["createdAt"].startswith("2025-01-02T03:04:05")
        assert data["mergedAt"].startswith("2025-01-02T03:04:05")
        assert pr.is_merged

    def test_to_short(self) -> None:
        """to_short keeps id, name, author and status only."""
        pr = PullRequest(id="pr-1", name="X", author_id="u1", assigned_reviewers=["u2"])
        short = pr.to_short()
        assert isinstance(short, PullRequestShort)
        assert short.model_dump() == {
            "id": "pr-1",
            "name": "X",
            "author_id": "u1",
            "status": STATUS_OPEN,
        }
