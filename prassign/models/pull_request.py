"""Pull request model and its short listing projection.

Lifecycle: OPEN -> MERGED. MERGED is terminal.
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

STATUS_OPEN = "OPEN"
STATUS_MERGED = "MERGED"

PullRequestStatus = Literal["OPEN", "MERGED"]


class PullRequestShort(BaseModel):
    """Read-only projection used in review listings."""

    id: str = Field(..., alias="pull_request_id")
    name: str = Field(..., alias="pull_request_name")
    author_id: str
    status: PullRequestStatus

    model_config = {"extra": "forbid", "populate_by_name": True, "frozen": True}


class PullRequest(BaseModel):
    """Pull request with its assigned reviewers (in assignment order)."""

    id: str = Field(..., alias="pull_request_id", min_length=1)
    name: str = Field(..., alias="pull_request_name", min_length=1)
    author_id: str = Field(..., min_length=1)
    status: PullRequestStatus = STATUS_OPEN
    assigned_reviewers: List[str] = Field(default_factory=list)
    created_at: datetime | None = Field(default=None, alias="createdAt")
    merged_at: datetime | None = Field(default=None, alias="mergedAt")

    model_config = {"extra": "forbid", "populate_by_name": True}

    @field_validator("assigned_reviewers")
    @classmethod
    def _no_duplicate_reviewers(cls, value: List[str]) -> List[str]:
        seen: set[str] = set()
        for reviewer_id in value:
            if reviewer_id in seen:
                raise ValueError(f"duplicate reviewer id: {reviewer_id}")
            seen.add(reviewer_id)
        return value

    @property
    def is_merged(self) -> bool:
        return self.status == STATUS_MERGED

    def to_short(self) -> PullRequestShort:
        """Project to PullRequestShort (id, name, author, status)."""
        return PullRequestShort(
            id=self.id,
            name=self.name,
            author_id=self.author_id,
            status=self.status,
        )
