"""Team and its membership snapshot."""

from typing import List

from pydantic import BaseModel, Field


class TeamMember(BaseModel):
    """Member entry as given when the team was created."""

    user_id: str = Field(..., min_length=1, description="Unique user ID")
    username: str = Field(default="", description="Display name")
    is_active: bool = Field(default=True, description="Activity flag at team creation time")

    model_config = {"extra": "forbid", "populate_by_name": True}


class Team(BaseModel):
    """Named group of users; reviewer pool for its members' pull requests.

    Member order is kept as given. The member list is fixed once the team is
    saved; only the live user records change afterwards.
    """

    name: str = Field(..., alias="team_name", min_length=1, description="Unique team name")
    members: List[TeamMember] = Field(default_factory=list)

    model_config = {"extra": "forbid", "populate_by_name": True}
