"""Pytest configuration and fixtures."""

import random

import pytest
from fastapi.testclient import TestClient

from core.game_manager import GameManager, get_game_manager
from core.roles import Role
from core.words import WordSource


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def manager(clock):
    """Create a game manager with a fixed word and seeded role assignment."""
    return GameManager(
        word_source=WordSource(path=None, words=["lighthouse"]),
        clock=clock,
        rng=random.Random(7),
    )


@pytest.fixture
def lobby_with_players(manager):
    """Create a lobby hosted by Alice that Bob and Cara have joined."""
    lobby = manager.lobbies.create_lobby("Alice")
    manager.lobbies.join_lobby(lobby.code, "Bob")
    manager.lobbies.join_lobby(lobby.code, "Cara")
    return lobby


@pytest.fixture
def ready_lobby(manager, lobby_with_players):
    """Create a lobby whose non-host players are all ready."""
    for player in lobby_with_players.players[1:]:
        manager.lobbies.toggle_ready(lobby_with_players.id, player.id)
    return lobby_with_players


@pytest.fixture
def started_round(manager, ready_lobby):
    """Start a one-second round in the ready lobby."""
    _, game_round = manager.rounds.start(ready_lobby.id, 1000)
    return game_round


@pytest.fixture
def roles(started_round):
    """Map each role to the round player holding it."""
    return {
        Role.MASTER: started_round.player_with_role(Role.MASTER),
        Role.INSIDER: started_round.player_with_role(Role.INSIDER),
        Role.COMMON: started_round.player_with_role(Role.COMMON),
    }


@pytest.fixture
def client(manager):
    """HTTP client for the app, backed by the test game manager."""
    from main import app

    app.dependency_overrides[get_game_manager] = lambda: manager
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
