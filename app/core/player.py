"""Player model for the game."""
from typing import Optional
import uuid


class Player:
    """Represents a player in a lobby or a round."""

    def __init__(self, name: str, is_host: bool = False, player_id: Optional[str] = None):
        """Initialize a new player.

        Args:
            name: The player's display name
            is_host: Whether this player is the lobby host
            player_id: Identifier to reuse, a fresh one is generated if omitted
        """
        self.id: str = player_id or str(uuid.uuid4())
        self.name: str = name
        self.is_host: bool = is_host
        self.is_ready: bool = False
        self.role: Optional[str] = None  # Only set on round copies

    def with_role(self, role: str) -> "Player":
        """Return a copy of this player tagged with a round role.

        Args:
            role: The role value to assign

        Returns:
            A new Player sharing this player's identity
        """
        copy = Player(self.name, is_host=self.is_host, player_id=self.id)
        copy.is_ready = self.is_ready
        copy.role = role
        return copy

    def to_dict(self, include_role: bool = False) -> dict:
        """Convert player to dictionary for API responses.

        Args:
            include_role: Whether to include the player's role

        Returns:
            Dictionary representation of the player
        """
        data = {
            "id": self.id,
            "name": self.name,
            "is_host": self.is_host,
            "is_ready": self.is_ready,
        }
        if include_role:
            data["role"] = self.role
        return data

    def __repr__(self) -> str:
        return f"Player(id={self.id}, name={self.name}, role={self.role})"
