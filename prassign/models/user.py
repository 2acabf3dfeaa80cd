"""User record, materialized from team membership."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """Live user record. team_name refers back to the owning team."""

    id: str = Field(..., alias="user_id", min_length=1)
    username: str = ""
    team_name: str = Field(..., min_length=1)
    is_active: bool = True

    model_config = {"extra": "forbid", "populate_by_name": True}
