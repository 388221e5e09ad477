"""
Engine errors.

Both classes are caller-contract violations. They are raised by the
pure transitions and surfaced by the reducer as failed ActionResults.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for engine errors."""


class InvalidStateError(GameError):
    """Raised when a transition receives something that is not an ApplicationState."""

    def __init__(self, received: object):
        self.received = received
        super().__init__(f"Invalid state: expected ApplicationState, got {type(received).__name__}")


class InvalidMoveError(GameError):
    """Raised when a tap targets an occupied cell, a finished game, or no cell at all."""

    def __init__(self, cell_index: object, reason: str):
        self.cell_index = cell_index
        self.reason = reason
        super().__init__(f"Invalid move at cell {cell_index}: {reason}")
