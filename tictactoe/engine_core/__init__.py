"""
Engine Core - Deterministic game state and transitions.

The engine is the runtime that:
1. Holds the ApplicationState value
2. Detects the line completed by a move
3. Applies actions via the reducer
4. Lists legal actions for the presentation layer
"""

from .state import (
    ApplicationState,
    Board,
    GameStatus,
    Player,
    initial_state,
    make_rng,
)
from .errors import GameError, InvalidMoveError, InvalidStateError
from .action import Action, ActionType, ActionPayload, ActionResult
from .win_detector import LINES, lines_through, winning_line
from .reducer import Reducer, apply_action, new_game, player_tapped
from .action_generator import ActionGenerator, legal_actions, legal_cells

__all__ = [
    "ApplicationState",
    "Board",
    "GameStatus",
    "Player",
    "initial_state",
    "make_rng",
    "GameError",
    "InvalidMoveError",
    "InvalidStateError",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "LINES",
    "lines_through",
    "winning_line",
    "Reducer",
    "apply_action",
    "new_game",
    "player_tapped",
    "ActionGenerator",
    "legal_actions",
    "legal_cells",
]
