"""Data models for teams, users and pull requests (Pydantic)."""

from prassign.models.pull_request import (
    STATUS_MERGED,
    STATUS_OPEN,
    PullRequest,
    PullRequestShort,
    PullRequestStatus,
)
from prassign.models.team import Team, TeamMember
from prassign.models.user import User

__all__ = [
    "STATUS_MERGED",
    "STATUS_OPEN",
    "PullRequest",
    "PullRequestShort",
    "PullRequestStatus",
    "Team",
    "TeamMember",
    "User",
]
