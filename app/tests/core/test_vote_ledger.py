"""Tests for the vote ledger."""

import pytest

from core.errors import AlreadyVoted
from core.vote_ledger import Vote, VoteLedger


class TestVoteLedger:
    """Tests for VoteLedger."""

    def test_record_appends_in_order(self):
        ledger = VoteLedger()
        ledger.record("lobby", "a", "b")
        ledger.record("lobby", "b", "a")

        assert ledger.votes_for("lobby") == [Vote("a", "b"), Vote("b", "a")]

    def test_second_vote_rejected_and_first_kept(self):
        ledger = VoteLedger()
        ledger.record("lobby", "a", "b")

        with pytest.raises(AlreadyVoted):
            ledger.record("lobby", "a", "c")
        assert ledger.votes_for("lobby") == [Vote("a", "b")]

    def test_lobbies_are_separate(self):
        ledger = VoteLedger()
        ledger.record("one", "a", "b")
        ledger.record("two", "a", "b")

        assert ledger.has_voted("one", "a")
        assert ledger.has_voted("two", "a")
        assert not ledger.has_voted("three", "a")
        assert len(ledger) == 2

    def test_unknown_lobby_has_no_votes(self):
        assert VoteLedger().votes_for("missing") == []
