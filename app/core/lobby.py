"""Lobby model and the status values shared with rounds."""

import time
from enum import Enum

from .constants import MAX_PLAYERS
from .player import Player


class GameStatus(str, Enum):
    """Lifecycle status of a lobby or a round."""

    WAITING = "waiting"
    STARTING = "starting"
    PLAYING = "playing"
    ENDED = "ended"


class Lobby:
    """Pre-game waiting room, addressed by id or by its join code."""

    def __init__(self, lobby_id: str, code: str, host_name: str, max_players: int = MAX_PLAYERS):
        self.id: str = lobby_id
        self.code: str = code
        self.players: list[Player] = [Player(host_name, is_host=True)]
        self.max_players: int = max_players
        self.status: GameStatus = GameStatus.WAITING
        self.created_at: int = int(time.time() * 1000)

    @property
    def host(self) -> Player | None:
        return next((p for p in self.players if p.is_host), None)

    @property
    def is_full(self) -> bool:
        return len(self.players) >= self.max_players

    def find_player(self, player_id: str) -> Player | None:
        return next((p for p in self.players if p.id == player_id), None)

    def has_name(self, name: str) -> bool:
        return any(p.name == name for p in self.players)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "code": self.code,
            "players": [p.to_dict() for p in self.players],
            "max_players": self.max_players,
            "status": self.status.value,
            "created_at": self.created_at,
        }
