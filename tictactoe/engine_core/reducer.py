"""
Reducer - Applies actions to the application state.

The reducer is the single point of state change.
All state changes must go through new_game() or player_tapped(),
either directly or via Reducer.apply().

Design principles:
- Pure functions: (state, input) -> new_state
- The incoming state is never modified
- Invalid moves are rejected loudly, never auto-corrected
- Reducer.apply() wraps the transitions in an ActionResult envelope
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from .state import ApplicationState, BOARD_SIZE, WIN_POINTS, make_rng, choose_first_player
from .action import Action, ActionType, ActionResult
from .errors import InvalidMoveError, InvalidStateError
from .win_detector import winning_line

logger = logging.getLogger(__name__)


INVALID_MOVE = "INVALID_MOVE"
INVALID_STATE = "INVALID_STATE"
NO_HANDLER = "NO_HANDLER"


def _require_state(state: object) -> ApplicationState:
    if not isinstance(state, ApplicationState):
        raise InvalidStateError(state)
    return state


def new_game(state: ApplicationState, rng: random.Random | None = None) -> ApplicationState:
    """
    Start a fresh game, keeping both scores.

    Board, finished flag and winning line reset; the first turn is
    re-drawn from rng.
    """
    state = _require_state(state)
    fresh = ApplicationState(
        turn=choose_first_player(rng),
        player1_score=state.player1_score,
        player2_score=state.player2_score,
    )
    logger.debug("New game, %s to move", fresh.turn.value)
    return fresh


def player_tapped(cell_index: int, state: ApplicationState) -> ApplicationState:
    """
    Apply the current player's move at cell_index.

    Exactly one outcome applies:
    - win: game finished, line recorded, +10 to the mover, turn unchanged
    - draw: board full with no line, game finished, scores unchanged
    - continue: turn passes to the other player

    Raises InvalidMoveError for a finished game, an occupied cell or an
    index outside the board.
    """
    state = _require_state(state)

    if isinstance(cell_index, bool) or not isinstance(cell_index, int):
        raise InvalidMoveError(cell_index, "cell index must be an integer")
    if not 0 <= cell_index < BOARD_SIZE:
        raise InvalidMoveError(cell_index, "cell index out of range")
    if state.is_game_finished:
        raise InvalidMoveError(cell_index, "game is already finished")
    if state.board[cell_index] is not None:
        raise InvalidMoveError(cell_index, "cell is already occupied")

    mover = state.turn
    state = state.with_cell(cell_index, mover)

    line = winning_line(state.board, cell_index)
    if line is not None:
        logger.debug("Player %s completed line %s", mover.value, line)
        return state.with_points(mover, WIN_POINTS)._copy_with(
            is_game_finished=True,
            winning_line=line,
        )

    if state.is_board_full:
        logger.debug("Board full with no line, draw")
        return state._copy_with(is_game_finished=True)

    return state._copy_with(turn=mover.opposite())


@dataclass
class Reducer:
    """
    Reducer applies actions to the application state.

    Stateless apart from the random source used for new games;
    all game state is in ApplicationState.
    """
    rng: random.Random = field(default_factory=make_rng)

    @classmethod
    def seeded(cls, seed: int | None) -> Reducer:
        return cls(rng=make_rng(seed))

    def apply(self, state: ApplicationState, action: Action) -> ActionResult:
        """
        Apply an action to the application state.

        Returns ActionResult with new state or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=NO_HANDLER,
            )

        try:
            return handler(state, action)
        except InvalidStateError as e:
            logger.error("Rejected %s: %s", action.action_type.value, e)
            return ActionResult.failure(str(e), error_code=INVALID_STATE)
        except InvalidMoveError as e:
            logger.warning("Rejected %s: %s", action.action_type.value, e)
            return ActionResult.failure(str(e), error_code=INVALID_MOVE)

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.NEW_GAME: self._handle_new_game,
            ActionType.PLAYER_DID_TAP_CELL: self._handle_tap,
        }
        return handlers.get(action_type)

    def _handle_new_game(self, state: ApplicationState, action: Action) -> ActionResult:
        new_state = new_game(state, self.rng)
        return ActionResult.success_with_state(
            new_state,
            changes=[f"New game started, player {new_state.turn.value} to move"],
        )

    def _handle_tap(self, state: ApplicationState, action: Action) -> ActionResult:
        """Handle a tap, describing which of win / draw / continue happened."""
        cell_index = action.payload.cell_index
        if cell_index is None:
            return ActionResult.failure("Tap action has no cell index", error_code=INVALID_MOVE)

        mover = _require_state(state).turn
        new_state = player_tapped(cell_index, state)

        changes = [f"Player {mover.value} marked cell {cell_index}"]
        if new_state.winning_line is not None:
            line = "-".join(str(i) for i in new_state.winning_line)
            changes.append(f"Player {mover.value} wins with line {line}")
            logger.info("Player %s wins with line %s", mover.value, line)
        elif new_state.is_game_finished:
            changes.append("Draw, the board is full")
            logger.info("Game ended in a draw")
        else:
            changes.append(f"Player {new_state.turn.value} to move")

        return ActionResult.success_with_state(new_state, changes=changes)


def apply_action(
    state: ApplicationState,
    action: Action,
    rng: random.Random | None = None,
) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rng=rng) if rng is not None else Reducer()
    return reducer.apply(state, action)