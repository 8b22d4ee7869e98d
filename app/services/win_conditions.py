"""Win condition checking service."""

from core.player import Player
from core.roles import Role


def find_insider(players: list[Player]) -> Player | None:
    """Find the player holding the Insider role.

    Args:
        players: Role-tagged round players

    Returns:
        The Insider, or None if nobody has the role
    """
    return next((p for p in players if p.role == Role.INSIDER.value), None)


def top_candidates(vote_counts: dict[str, int]) -> set[str]:
    """Get the ids of every candidate sharing the highest vote count.

    Args:
        vote_counts: Mapping of candidate id to vote count

    Returns:
        Set of most-voted candidate ids, empty if nobody got a vote
    """
    if not vote_counts:
        return set()
    max_votes = max(vote_counts.values())
    return {candidate for candidate, count in vote_counts.items() if count == max_votes}


def determine_winner(vote_counts: dict[str, int], players: list[Player]) -> str:
    """Determine the winner of a round from the final tally.

    The Master's side wins only when the Insider alone has the most
    votes. A tie at the top, or anyone else on top, is an Insider win.

    Args:
        vote_counts: Mapping of candidate id to vote count
        players: Role-tagged round players

    Returns:
        "master" or "insider"
    """
    insider = find_insider(players)
    if insider is not None and top_candidates(vote_counts) == {insider.id}:
        return Role.MASTER.value
    return Role.INSIDER.value
