"""Round state transition helpers."""

from core.game_round import GameRound
from core.lobby import GameStatus, Lobby


def all_non_host_ready(lobby: Lobby) -> bool:
    """Check if every player except the host is ready.

    The host's own ready flag is cosmetic and never blocks a start.

    Args:
        lobby: The lobby about to start

    Returns:
        True if no non-host player is unready
    """
    return all(p.is_ready for p in lobby.players if not p.is_host)


def time_left(game_round: GameRound, now: int) -> int:
    """Milliseconds left on the round's countdown, never negative.

    Args:
        game_round: The round
        now: Current time in milliseconds

    Returns:
        Remaining milliseconds, 0 once the countdown has run out
    """
    return max(0, game_round.game_duration - (now - game_round.start_time))


def is_timed_out(game_round: GameRound, now: int) -> bool:
    """Check if the countdown ran out before the word was guessed."""
    return time_left(game_round, now) == 0 and not game_round.word_guessed


def transition_to_ended(game_round: GameRound, winner: str, now: int) -> None:
    """End the round with the given winner.

    Args:
        game_round: The round
        winner: "master" or "insider"
        now: Current time in milliseconds
    """
    game_round.status = GameStatus.ENDED
    game_round.end_time = now
    game_round.winner = winner
