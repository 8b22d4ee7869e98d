"""Registry of live lobbies, indexed by id and by join code."""

import logging
import random
import secrets
import string
from threading import RLock

from .constants import LOBBY_CODE_LENGTH, MAX_PLAYERS
from .errors import DuplicateName, InvalidInput, LobbyFull, NotFound
from .lobby import GameStatus, Lobby
from .locks import LobbyLocks
from .player import Player

logger = logging.getLogger(__name__)


def generate_lobby_code(length: int = LOBBY_CODE_LENGTH) -> str:
    """Generate a random uppercase join code."""
    return "".join(random.choices(string.ascii_uppercase, k=length))


class LobbyRegistry:
    """Tracks lobbies from creation until the last player leaves."""

    def __init__(self, locks: LobbyLocks | None = None, max_players: int = MAX_PLAYERS):
        self.locks = locks or LobbyLocks()
        self.max_players = max_players
        self._index_lock = RLock()
        self.lobbies: dict[str, Lobby] = {}
        self.codes: dict[str, str] = {}

    def create_lobby(self, host_name: str) -> Lobby:
        """Create a lobby with ``host_name`` as its only player and host.

        Args:
            host_name: Display name of the host

        Returns:
            The newly created Lobby

        Raises:
            InvalidInput: If the host name is blank
        """
        host_name = (host_name or "").strip()
        if not host_name:
            raise InvalidInput("Host name is required")

        with self._index_lock:
            lobby_id = secrets.token_urlsafe(6)
            while lobby_id in self.lobbies:
                lobby_id = secrets.token_urlsafe(6)

            code = generate_lobby_code()
            while code in self.codes:
                code = generate_lobby_code()

            lobby = Lobby(lobby_id, code, host_name, max_players=self.max_players)
            self.lobbies[lobby_id] = lobby
            self.codes[code] = lobby_id

        logger.info("Created lobby %s (code=%s, host=%s)", lobby.id, code, host_name)
        return lobby

    def join_lobby(self, code: str, player_name: str) -> Lobby:
        """Add a player to the lobby behind a join code.

        Args:
            code: The lobby's join code
            player_name: Display name of the new player

        Returns:
            The lobby, with the new player last

        Raises:
            InvalidInput: If the code or name is blank
            NotFound: If no lobby uses the code
            LobbyFull: If the lobby has no free seat
            DuplicateName: If the name is already taken in the lobby
        """
        code = (code or "").strip().upper()
        player_name = (player_name or "").strip()
        if not code or not player_name:
            raise InvalidInput("Code and player name are required")

        with self._index_lock:
            lobby_id = self.codes.get(code)
        if lobby_id is None:
            raise NotFound("Invalid lobby code")

        with self.locks.hold(lobby_id):
            lobby = self.get_lobby(lobby_id)
            if lobby.is_full:
                raise LobbyFull()
            if lobby.has_name(player_name):
                raise DuplicateName(player_name)

            lobby.players.append(Player(player_name))

        logger.info("Player %s joined lobby %s", player_name, lobby_id)
        return lobby

    def get_lobby(self, lobby_id: str) -> Lobby:
        """Retrieve a lobby by id.

        Raises:
            NotFound: If the lobby does not exist
        """
        with self._index_lock:
            lobby = self.lobbies.get(lobby_id)
        if lobby is None:
            raise NotFound("Lobby not found")
        return lobby

    def toggle_ready(self, lobby_id: str, player_id: str) -> Lobby:
        """Flip a player's ready flag.

        Raises:
            NotFound: If the lobby or player does not exist
        """
        with self.locks.hold(lobby_id):
            lobby = self.get_lobby(lobby_id)
            player = lobby.find_player(player_id)
            if player is None:
                raise NotFound("Player not found")

            player.is_ready = not player.is_ready
            return lobby

    def leave(self, lobby_id: str, player_id: str) -> Lobby | None:
        """Remove a player from a lobby.

        The earliest remaining player becomes host when the host leaves.
        The last player leaving deletes the lobby and frees its code.

        Returns:
            The updated lobby, or None if it was deleted

        Raises:
            NotFound: If the lobby or player does not exist
        """
        with self.locks.hold(lobby_id):
            lobby = self.get_lobby(lobby_id)
            player = lobby.find_player(player_id)
            if player is None:
                raise NotFound("Player not found")

            lobby.players.remove(player)
            logger.info("Player %s left lobby %s", player.name, lobby_id)

            if not lobby.players:
                self._delete(lobby)
                return None

            if player.is_host:
                lobby.players[0].is_host = True
                logger.info("Player %s is now host of lobby %s", lobby.players[0].name, lobby_id)

            return lobby

    def set_status(self, lobby_id: str, status: GameStatus) -> None:
        """Set the status of a lobby if it still exists."""
        with self.locks.hold(lobby_id):
            with self._index_lock:
                lobby = self.lobbies.get(lobby_id)
            if lobby is not None:
                lobby.status = status

    def _delete(self, lobby: Lobby) -> None:
        with self._index_lock:
            self.lobbies.pop(lobby.id, None)
            self.codes.pop(lobby.code, None)
        logger.info("Deleted empty lobby %s (code=%s)", lobby.id, lobby.code)

    def stats(self) -> dict:
        """Get statistics about live lobbies.

        Returns:
            Dictionary with lobby and player counts
        """
        with self._index_lock:
            lobbies = list(self.lobbies.values())
        return {
            "lobbies": len(lobbies),
            "players": sum(len(lobby.players) for lobby in lobbies),
        }
