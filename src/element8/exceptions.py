"""Exception hierarchy for the Element8 turn engine."""
from __future__ import annotations


class Element8Error(Exception):
    """Base class for every error raised by the engine."""


class GameConfigurationError(Element8Error, ValueError):
    """Setup was requested with values the rules cannot accept."""


class BoardConfigurationError(GameConfigurationError):
    """The board cannot be built with the requested size and barrier count."""


class UnknownCharacterError(Element8Error, KeyError):
    """A character key was looked up that the registry does not hold."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown character '{self.key}'"


class GameStateError(Element8Error, RuntimeError):
    """A command was issued in a phase where it is not allowed."""


class GameNotStartedError(GameStateError):
    """The command needs a roster but no game has been started."""


class GameOverError(GameStateError):
    """The command was issued after the game reached its terminal state."""
