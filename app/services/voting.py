"""Voting service helpers."""

from core.game_round import GameRound
from core.player import Player
from core.vote_ledger import Vote


def tally_votes(votes: list[Vote]) -> dict[str, int]:
    """Count the votes cast against each candidate.

    Args:
        votes: Votes in the order they were cast

    Returns:
        Mapping of candidate id to vote count, in order of first vote
    """
    counts: dict[str, int] = {}
    for vote in votes:
        counts[vote.voted_for_id] = counts.get(vote.voted_for_id, 0) + 1
    return counts


def all_votes_submitted(game_round: GameRound, votes: list[Vote]) -> bool:
    """Check if every round player has voted.

    Args:
        game_round: The round being voted on
        votes: Votes recorded for the round's lobby

    Returns:
        True if there are exactly as many votes as players
    """
    return len(votes) == len(game_round.players)


def missing_voters(game_round: GameRound, votes: list[Vote]) -> list[Player]:
    """List the round players who have not voted yet, in round order."""
    voted = {vote.voter_id for vote in votes}
    return [p for p in game_round.players if p.id not in voted]
