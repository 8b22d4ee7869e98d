"""Routes for lobby creation, joining and starting rounds."""
from fastapi import APIRouter, Depends

from core.game_manager import GameManager, get_game_manager
from models.requests import CreateLobbyRequest, JoinLobbyRequest, PlayerActionRequest, StartRoundRequest
from models.responses import LobbyResponse, StartRoundResponse

router = APIRouter(prefix="/api/lobbies", tags=["lobbies"])


@router.post("", response_model=LobbyResponse, response_model_exclude_none=True)
async def create_lobby(request: CreateLobbyRequest, manager: GameManager = Depends(get_game_manager)):
    """Create a new lobby with the requester as host.

    Args:
        request: Host's name
        manager: The game state store

    Returns:
        The new lobby
    """
    lobby = manager.lobbies.create_lobby(request.host_name)
    return lobby.to_dict()


@router.post("/join", response_model=LobbyResponse, response_model_exclude_none=True)
async def join_lobby(request: JoinLobbyRequest, manager: GameManager = Depends(get_game_manager)):
    """Add a player to the lobby behind a join code.

    The new player is the last entry of the returned player list.
    """
    lobby = manager.lobbies.join_lobby(request.code, request.player_name)
    return lobby.to_dict()


@router.get("/{lobby_id}", response_model=LobbyResponse, response_model_exclude_none=True)
async def get_lobby(lobby_id: str, manager: GameManager = Depends(get_game_manager)):
    """Get lobby information."""
    return manager.lobbies.get_lobby(lobby_id).to_dict()


@router.post("/{lobby_id}/ready", response_model=LobbyResponse, response_model_exclude_none=True)
async def toggle_ready(
    lobby_id: str, request: PlayerActionRequest, manager: GameManager = Depends(get_game_manager)
):
    """Toggle a player's ready state."""
    return manager.lobbies.toggle_ready(lobby_id, request.player_id).to_dict()


@router.post("/{lobby_id}/leave", response_model=LobbyResponse | None, response_model_exclude_none=True)
async def leave_lobby(
    lobby_id: str, request: PlayerActionRequest, manager: GameManager = Depends(get_game_manager)
):
    """Remove a player from the lobby.

    Returns:
        The updated lobby, or null once the last player has left
    """
    lobby = manager.lobbies.leave(lobby_id, request.player_id)
    return lobby.to_dict() if lobby else None


@router.post("/{lobby_id}/start", response_model=StartRoundResponse, response_model_exclude_none=True)
async def start_round(
    lobby_id: str,
    request: StartRoundRequest | None = None,
    manager: GameManager = Depends(get_game_manager),
):
    """Start a round once every non-host player is ready.

    Args:
        lobby_id: The lobby to start
        request: Optional countdown length in milliseconds
        manager: The game state store

    Returns:
        The lobby with its new round under ``gameState``
    """
    game_duration = request.game_duration if request else None
    lobby, game_round = manager.rounds.start(lobby_id, game_duration)
    return {**lobby.to_dict(), "game_state": game_round.to_dict()}
