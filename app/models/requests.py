"""Request models for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts camelCase keys from the client as well as field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _clean_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("Name cannot be empty")
    return v


class CreateLobbyRequest(CamelModel):
    """Request to create a lobby."""

    host_name: str = Field(..., min_length=1, max_length=20, description="Host's display name")

    @field_validator("host_name")
    @classmethod
    def host_name_must_be_clean(cls, v: str) -> str:
        return _clean_name(v)


class JoinLobbyRequest(CamelModel):
    """Request to join a lobby by its code."""

    code: str = Field(..., min_length=1, description="Lobby join code")
    player_name: str = Field(..., min_length=1, max_length=20, description="Player's display name")

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        """Join codes are typed by hand, so ignore case and padding."""
        return v.strip().upper()

    @field_validator("player_name")
    @classmethod
    def player_name_must_be_clean(cls, v: str) -> str:
        return _clean_name(v)


class PlayerActionRequest(CamelModel):
    """Request naming the acting player."""

    player_id: str = Field(..., min_length=1, description="ID of the acting player")


class StartRoundRequest(CamelModel):
    """Request to start a round."""

    game_duration: int | None = Field(None, gt=0, description="Countdown length in milliseconds")


class VoteRequest(CamelModel):
    """Request to vote for the suspected Insider."""

    voter_id: str = Field(..., min_length=1, description="ID of the voting player")
    voted_for_id: str = Field(..., min_length=1, description="ID of player to vote for")
