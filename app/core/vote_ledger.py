"""Append-only vote log per lobby."""

from dataclasses import dataclass

from .errors import AlreadyVoted


@dataclass(frozen=True)
class Vote:
    voter_id: str
    voted_for_id: str

    def to_dict(self) -> dict:
        return {"voter_id": self.voter_id, "voted_for_id": self.voted_for_id}


class VoteLedger:
    """Votes keyed by lobby id, at most one per voter.

    The ledger is not cleared when a lobby starts another round. Callers
    serialize access per lobby.
    """

    def __init__(self):
        self._votes: dict[str, list[Vote]] = {}

    def votes_for(self, lobby_id: str) -> list[Vote]:
        return list(self._votes.get(lobby_id, []))

    def has_voted(self, lobby_id: str, voter_id: str) -> bool:
        return any(v.voter_id == voter_id for v in self._votes.get(lobby_id, []))

    def record(self, lobby_id: str, voter_id: str, voted_for_id: str) -> Vote:
        """Append a vote.

        Raises:
            AlreadyVoted: If the voter already has a vote in this lobby
        """
        if self.has_voted(lobby_id, voter_id):
            raise AlreadyVoted()

        vote = Vote(voter_id, voted_for_id)
        self._votes.setdefault(lobby_id, []).append(vote)
        return vote

    def __len__(self) -> int:
        return sum(len(votes) for votes in self._votes.values())
