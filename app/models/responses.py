"""Response models for API endpoints."""

from models.requests import CamelModel


class PlayerResponse(CamelModel):
    """Player information for API responses."""

    id: str
    name: str
    is_host: bool
    is_ready: bool
    role: str | None = None  # Hidden from other players while a round runs


class LobbyResponse(CamelModel):
    """Lobby state response."""

    id: str
    code: str
    players: list[PlayerResponse]
    max_players: int
    status: str
    created_at: int


class GameStateResponse(CamelModel):
    """Round state response."""

    word: str | None = None
    players: list[PlayerResponse]
    status: str
    start_time: int | None = None
    word_guessed: bool
    end_time: int | None = None
    winner: str | None = None  # "master" or "insider"
    game_duration: int
    time_left: int | None = None


class StartRoundResponse(LobbyResponse):
    """Lobby state together with its freshly started round."""

    game_state: GameStateResponse


class GuessResponse(CamelModel):
    """Result of the Master marking the word as guessed."""

    game_state: GameStateResponse
    time_left: int = 0
    should_redirect: bool = True


class TimeResponse(CamelModel):
    """Countdown reading."""

    time_left: int
    should_redirect: bool
    game_state: GameStateResponse | None = None


class VoteResponse(CamelModel):
    """A single vote."""

    voter_id: str
    voted_for_id: str


class VoteResultResponse(CamelModel):
    """Round state and tally after a vote."""

    game_state: GameStateResponse
    votes: list[VoteResponse]
    vote_counts: dict[str, int]
    all_players_voted: bool


class VotesResponse(CamelModel):
    """All votes cast in a lobby."""

    votes: list[VoteResponse]
    vote_counts: dict[str, int]
