"""Round lifecycle: start, guess, countdown and voting."""

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from services.game_state import all_non_host_ready, is_timed_out, time_left, transition_to_ended
from services.voting import all_votes_submitted, missing_voters, tally_votes
from services.win_conditions import determine_winner

from .constants import DEFAULT_GAME_DURATION_MS, MIN_PLAYERS
from .errors import Forbidden, InvalidInput, NotAllReady, NotFound
from .game_round import GameRound
from .lobby import GameStatus, Lobby
from .lobby_registry import LobbyRegistry
from .locks import LobbyLocks
from .roles import Role, assign_roles
from .vote_ledger import Vote, VoteLedger
from .words import WordSource

logger = logging.getLogger(__name__)


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class TimeCheck:
    time_left: int
    should_redirect: bool
    game_round: GameRound


@dataclass
class VoteOutcome:
    game_round: GameRound
    votes: list[Vote]
    vote_counts: dict[str, int]
    all_voted: bool


class RoundEngine:
    """Owns the round of every lobby and drives it to a winner.

    The countdown has no background timer: the timeout transition happens
    in ``check_time``, on the first poll after the deadline.
    """

    def __init__(
        self,
        registry: LobbyRegistry,
        ledger: VoteLedger,
        word_source: WordSource,
        locks: LobbyLocks,
        clock: Callable[[], int] = now_ms,
        rng: random.Random | None = None,
    ):
        self.registry = registry
        self.ledger = ledger
        self.word_source = word_source
        self.locks = locks
        self.clock = clock
        self.rng = rng
        self.rounds: dict[str, GameRound] = {}

    def start(self, lobby_id: str, game_duration: int | None = None) -> tuple[Lobby, GameRound]:
        """Start a new round in a lobby.

        Args:
            lobby_id: The lobby to start
            game_duration: Countdown length in milliseconds, 5 minutes if omitted

        Returns:
            The lobby and its new round

        Raises:
            NotFound: If the lobby does not exist
            NotAllReady: If a non-host player is not ready
            InvalidInput: If the lobby is too small or the duration is not positive
        """
        if game_duration is None:
            game_duration = DEFAULT_GAME_DURATION_MS
        if game_duration <= 0:
            raise InvalidInput("Game duration must be positive")

        with self.locks.hold(lobby_id):
            lobby = self.registry.get_lobby(lobby_id)
            if not all_non_host_ready(lobby):
                raise NotAllReady()
            if len(lobby.players) < MIN_PLAYERS:
                raise InvalidInput(f"At least {MIN_PLAYERS} players are required")

            if lobby_id in self.rounds and self.ledger.votes_for(lobby_id):
                logger.warning("Restarting lobby %s over votes from its previous round", lobby_id)

            game_round = GameRound(
                word=self.word_source.next_word(),
                players=assign_roles(lobby.players, self.rng),
                start_time=self.clock(),
                game_duration=game_duration,
            )
            self.rounds[lobby_id] = game_round
            lobby.status = GameStatus.STARTING

        logger.info("Started round in lobby %s with %d players", lobby_id, len(game_round.players))
        return lobby, game_round

    def get_round(self, lobby_id: str) -> GameRound:
        """Retrieve the current round of a lobby.

        Raises:
            NotFound: If the lobby has no round
        """
        game_round = self.rounds.get(lobby_id)
        if game_round is None:
            raise NotFound("Game not found")
        return game_round

    def view(self, lobby_id: str, viewer_id: str | None = None) -> dict:
        """Render a round as seen by one of its players, or in full.

        Raises:
            NotFound: If the lobby has no round or the viewer is not in it
        """
        with self.locks.hold(lobby_id):
            game_round = self.get_round(lobby_id)
            viewer = None
            if viewer_id is not None:
                viewer = game_round.find_player(viewer_id)
                if viewer is None:
                    raise NotFound("Player not found")
            return game_round.to_dict(viewer=viewer)

    def mark_guessed(self, lobby_id: str, player_id: str) -> GameRound:
        """Record that the word was guessed, ending the round for the Master.

        A round that already ended is returned unchanged.

        Raises:
            NotFound: If the round or player does not exist
            Forbidden: If the player is not the Master
        """
        with self.locks.hold(lobby_id):
            game_round = self.get_round(lobby_id)
            player = game_round.find_player(player_id)
            if player is None:
                raise NotFound("Player not found")
            if player.role != Role.MASTER.value:
                raise Forbidden("Only the master can mark the word as guessed")

            if game_round.is_ended:
                return game_round

            game_round.word_guessed = True
            transition_to_ended(game_round, Role.MASTER.value, self.clock())
            self.registry.set_status(lobby_id, GameStatus.ENDED)

        logger.info("Word guessed in lobby %s", lobby_id)
        return game_round

    def check_time(self, lobby_id: str) -> TimeCheck:
        """Read the countdown, ending the round if it ran out.

        On the first check after the deadline with the word unguessed, the
        Insider wins and every player who has not voted gets a self-vote so
        the voting phase is already complete.

        Raises:
            NotFound: If the lobby has no round
        """
        with self.locks.hold(lobby_id):
            game_round = self.get_round(lobby_id)
            now = self.clock()
            remaining = time_left(game_round, now)
            timed_out = is_timed_out(game_round, now)

            if timed_out and game_round.status == GameStatus.PLAYING:
                transition_to_ended(game_round, Role.INSIDER.value, now)
                for player in missing_voters(game_round, self.ledger.votes_for(lobby_id)):
                    self.ledger.record(lobby_id, player.id, player.id)
                self.registry.set_status(lobby_id, GameStatus.ENDED)
                logger.info("Time ran out in lobby %s", lobby_id)

            return TimeCheck(time_left=remaining, should_redirect=timed_out, game_round=game_round)

    def submit_vote(self, lobby_id: str, voter_id: str, voted_for_id: str) -> VoteOutcome:
        """Record a vote and resolve the round once everyone has voted.

        Raises:
            NotFound: If the round, voter or candidate does not exist
            InvalidInput: If an id is blank
            AlreadyVoted: If the voter already voted
        """
        if not voter_id or not voted_for_id:
            raise InvalidInput("Voter and candidate are required")

        with self.locks.hold(lobby_id):
            game_round = self.get_round(lobby_id)
            if game_round.find_player(voter_id) is None:
                raise NotFound("Player not found")
            if game_round.find_player(voted_for_id) is None:
                raise NotFound("Voted-for player not found")

            self.ledger.record(lobby_id, voter_id, voted_for_id)

            votes = self.ledger.votes_for(lobby_id)
            vote_counts = tally_votes(votes)
            all_voted = all_votes_submitted(game_round, votes)

            if all_voted:
                winner = determine_winner(vote_counts, game_round.players)
                transition_to_ended(game_round, winner, self.clock())
                logger.info("Voting finished in lobby %s, %s wins", lobby_id, winner)

            return VoteOutcome(game_round, votes, vote_counts, all_voted)

    def get_votes(self, lobby_id: str) -> tuple[list[Vote], dict[str, int]]:
        """Get the votes cast in a lobby and their tally."""
        with self.locks.hold(lobby_id):
            votes = self.ledger.votes_for(lobby_id)
            return votes, tally_votes(votes)
