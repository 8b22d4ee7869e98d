"""Errors raised by the lobby registry and round engine.

Each error carries the HTTP status it is reported with, so the API layer
can render every failure as ``{"error": message}`` without knowing the
individual cases.
"""


class GameError(Exception):
    """Base class for recoverable game errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(GameError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFound(GameError):
    """Unknown lobby, round, player or join code."""

    status_code = 404


class Forbidden(GameError):
    """The player's role does not allow the action."""

    status_code = 403


class Conflict(GameError):
    """The request clashes with the current lobby or round state."""

    status_code = 409


class DuplicateName(Conflict):
    def __init__(self, name: str):
        super().__init__(f"Player name '{name}' already exists")


class LobbyFull(Conflict):
    def __init__(self):
        super().__init__("Lobby is full")


class NotAllReady(Conflict):
    def __init__(self):
        super().__init__("Not all players are ready")


class AlreadyVoted(Conflict):
    def __init__(self):
        super().__init__("You have already voted")
