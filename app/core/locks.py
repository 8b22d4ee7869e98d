"""Per-lobby locking."""

from collections.abc import Iterator
from contextlib import contextmanager
from threading import RLock


class LobbyLocks:
    """Hands out one re-entrant lock per lobby id.

    Every read-modify-write on a lobby, its round or its votes runs while
    holding that lobby's lock. Locks for other lobbies are independent.
    A lock outlives its lobby, since the lobby's round is still served
    after the last player leaves.
    """

    def __init__(self):
        self._guard = RLock()
        self._locks: dict[str, RLock] = {}

    def _get(self, lobby_id: str) -> RLock:
        with self._guard:
            lock = self._locks.get(lobby_id)
            if lock is None:
                lock = self._locks[lobby_id] = RLock()
            return lock

    @contextmanager
    def hold(self, lobby_id: str) -> Iterator[None]:
        """Hold the lock for ``lobby_id`` for the duration of the block."""
        lock = self._get(lobby_id)
        with lock:
            yield
