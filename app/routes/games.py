"""Routes for a running round: state, countdown, guessing and voting."""
from fastapi import APIRouter, Depends, Query

from core.game_manager import GameManager, get_game_manager
from models.requests import PlayerActionRequest, VoteRequest
from models.responses import (
    GameStateResponse,
    GuessResponse,
    TimeResponse,
    VoteResultResponse,
    VotesResponse,
)

router = APIRouter(prefix="/api/games", tags=["games"])


@router.get("/{lobby_id}", response_model=GameStateResponse, response_model_exclude_none=True)
async def get_game(
    lobby_id: str,
    player_id: str | None = Query(None, alias="playerId"),
    manager: GameManager = Depends(get_game_manager),
):
    """Get the round state of a lobby.

    Args:
        lobby_id: The lobby whose round to show
        player_id: Render the state as this player sees it, in full if omitted
        manager: The game state store

    Returns:
        The round state, with ``timeLeft`` 0 once it has ended
    """
    state = manager.rounds.view(lobby_id, player_id)
    if state["status"] == "ended":
        state["time_left"] = 0
    return state


@router.post("/{lobby_id}/guess", response_model=GuessResponse, response_model_exclude_none=True)
async def mark_guessed(
    lobby_id: str, request: PlayerActionRequest, manager: GameManager = Depends(get_game_manager)
):
    """Master declares the word guessed, ending the guessing phase."""
    game_round = manager.rounds.mark_guessed(lobby_id, request.player_id)
    return {"game_state": game_round.to_dict(), "time_left": 0, "should_redirect": True}


@router.get("/{lobby_id}/time", response_model=TimeResponse, response_model_exclude_none=True)
async def check_time(lobby_id: str, manager: GameManager = Depends(get_game_manager)):
    """Read the countdown; the first read after the deadline ends the round."""
    check = manager.rounds.check_time(lobby_id)
    return {
        "time_left": check.time_left,
        "should_redirect": check.should_redirect,
        "game_state": check.game_round.to_dict() if check.time_left == 0 else None,
    }


@router.post("/{lobby_id}/vote", response_model=VoteResultResponse, response_model_exclude_none=True)
async def submit_vote(lobby_id: str, request: VoteRequest, manager: GameManager = Depends(get_game_manager)):
    """Cast a vote for the suspected Insider."""
    outcome = manager.rounds.submit_vote(lobby_id, request.voter_id, request.voted_for_id)
    return {
        "game_state": outcome.game_round.to_dict(),
        "votes": [vote.to_dict() for vote in outcome.votes],
        "vote_counts": outcome.vote_counts,
        "all_players_voted": outcome.all_voted,
    }


@router.get("/{lobby_id}/votes", response_model=VotesResponse)
async def get_votes(lobby_id: str, manager: GameManager = Depends(get_game_manager)):
    """Get every vote cast in a lobby and the tally."""
    votes, vote_counts = manager.rounds.get_votes(lobby_id)
    return {"votes": [vote.to_dict() for vote in votes], "vote_counts": vote_counts}
