"""Game manager singleton holding all in-memory game state."""

import random
from collections.abc import Callable

from .lobby_registry import LobbyRegistry
from .locks import LobbyLocks
from .round_engine import RoundEngine, now_ms
from .vote_ledger import VoteLedger
from .words import WordSource


class GameManager:
    """Owns lobbies, rounds and votes for the lifetime of the process.

    Lobby and round operations share one lock table, so everything that
    touches a given lobby is serialized.
    """

    def __init__(
        self,
        word_source: WordSource | None = None,
        clock: Callable[[], int] = now_ms,
        rng: random.Random | None = None,
    ):
        """Initialize the game manager.

        Args:
            word_source: Where secret words come from, the bundled list if omitted
            clock: Millisecond clock used for round timing
            rng: Random generator for role assignment
        """
        self.locks = LobbyLocks()
        self.lobbies = LobbyRegistry(self.locks)
        self.votes = VoteLedger()
        self.rounds = RoundEngine(
            self.lobbies,
            self.votes,
            word_source or WordSource(),
            self.locks,
            clock=clock,
            rng=rng,
        )

    def get_stats(self) -> dict:
        """Get statistics about live lobbies and rounds.

        Returns:
            Dictionary with game statistics
        """
        stats = self.lobbies.stats()
        stats["rounds"] = len(self.rounds.rounds)
        return stats


# Global singleton instance
game_manager = GameManager()


def get_game_manager() -> GameManager:
    """Get the process-wide game manager."""
    return game_manager
