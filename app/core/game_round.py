"""State of one play-through of a lobby."""

from .lobby import GameStatus
from .player import Player
from .roles import Role


class GameRound:
    """A round from role assignment to the final winner.

    Times are integer milliseconds since the epoch, ``game_duration`` is
    in milliseconds.
    """

    def __init__(self, word: str, players: list[Player], start_time: int, game_duration: int):
        self.word: str = word
        self.players: list[Player] = players
        self.status: GameStatus = GameStatus.PLAYING
        self.start_time: int = start_time
        self.word_guessed: bool = False
        self.end_time: int | None = None
        self.winner: str | None = None
        self.game_duration: int = game_duration

    @property
    def is_ended(self) -> bool:
        return self.status == GameStatus.ENDED

    def find_player(self, player_id: str) -> Player | None:
        return next((p for p in self.players if p.id == player_id), None)

    def player_with_role(self, role: Role) -> Player | None:
        return next((p for p in self.players if p.role == role.value), None)

    def to_dict(self, viewer: Player | None = None) -> dict:
        """Convert the round to a dictionary for API responses.

        Without a viewer everything is included. For a viewer of a round
        still in progress, roles are shown only for the viewer and the
        Master, and the word only to the Master and the Insider.

        Args:
            viewer: The round player the state is rendered for

        Returns:
            Dictionary representation of the round
        """
        hidden = viewer is not None and not self.is_ended

        players = []
        for player in self.players:
            show_role = not hidden or player.id == viewer.id or player.role == Role.MASTER.value
            players.append(player.to_dict(include_role=show_role))

        knows_word = not hidden or viewer.role in (Role.MASTER.value, Role.INSIDER.value)

        return {
            "word": self.word if knows_word else None,
            "players": players,
            "status": self.status.value,
            "start_time": self.start_time,
            "word_guessed": self.word_guessed,
            "end_time": self.end_time,
            "winner": self.winner,
            "game_duration": self.game_duration,
        }
