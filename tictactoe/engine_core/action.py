"""
Action System - Actions, payloads, and results.

Actions represent the two things a player can ask for:
1. Start a new game (scores are kept)
2. Tap a cell on the board

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    NEW_GAME = "new_game"
    PLAYER_DID_TAP_CELL = "player_did_tap_cell"


@dataclass(frozen=True)
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    New game carries nothing; a tap carries the cell index.
    Validation happens in the reducer.
    """
    cell_index: int | None = None


@dataclass(frozen=True)
class Action:
    """
    A complete action to be dispatched against the application state.

    Actions are applied atomically by the reducer.
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def new_game(cls) -> Action:
        """Factory for new game action."""
        return cls(action_type=ActionType.NEW_GAME)

    @classmethod
    def tap(cls, cell_index: int) -> Action:
        """Factory for cell tap action."""
        return cls(
            action_type=ActionType.PLAYER_DID_TAP_CELL,
            payload=ActionPayload(cell_index=cell_index),
        )


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Error and error code (if failed)
    - Human-readable changes for the presentation layer
    """
    success: bool
    new_state: Any | None = None  # ApplicationState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
        )
