"""
Application State - The single value the presentation layer renders.

Design principles:
- Immutable: every transition returns a new ApplicationState
- Whole-value replacement: the owner swaps the old state for the new one
- Scores outlive a single game; everything else resets on a new game
- Randomness is injected, so a seeded source gives repeatable games
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional
import random


BOARD_SIZE = 9

# Points awarded to the player who completes a line
WIN_POINTS = 10


class Player(Enum):
    """The two players in the game."""
    ONE = "one"
    TWO = "two"

    def opposite(self) -> Player:
        """Get the other player."""
        return Player.TWO if self == Player.ONE else Player.ONE


class GameStatus(Enum):
    """Where the current game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# Row-major 3x3 grid, None means the cell is empty
Board = tuple[Optional[Player], ...]


def empty_board() -> Board:
    return (None,) * BOARD_SIZE


def make_rng(seed: int | None = None) -> random.Random:
    """Create the random source used to pick the starting player."""
    return random.Random(seed)


def choose_first_player(rng: random.Random | None = None) -> Player:
    """Pick the starting player uniformly at random."""
    rng = rng or make_rng()
    return rng.choice((Player.ONE, Player.TWO))


@dataclass(frozen=True)
class ApplicationState:
    """
    Complete application state at a point in time.

    This is the canonical state that the reducer operates on.
    All state changes go through the reducer.
    """
    turn: Player
    board: Board = empty_board()
    is_game_finished: bool = False
    winning_line: tuple[int, int, int] | None = None

    # Persist across games within a session
    player1_score: int = 0
    player2_score: int = 0

    @classmethod
    def initial(cls, rng: random.Random | None = None) -> ApplicationState:
        """Create the process-start state: empty board, zeroed scores, random turn."""
        return cls(turn=choose_first_player(rng))

    @property
    def status(self) -> GameStatus:
        if not self.is_game_finished:
            return GameStatus.IN_PROGRESS
        if self.winning_line is not None:
            return GameStatus.WON
        return GameStatus.DRAW

    @property
    def winner(self) -> Player | None:
        """The player who completed a line, if any. Turn does not advance after a win."""
        return self.turn if self.winning_line is not None else None

    @property
    def empty_cells(self) -> list[int]:
        return [i for i, cell in enumerate(self.board) if cell is None]

    @property
    def is_board_full(self) -> bool:
        return all(cell is not None for cell in self.board)

    def score_of(self, player: Player) -> int:
        return self.player1_score if player == Player.ONE else self.player2_score

    def with_cell(self, cell_index: int, player: Player) -> ApplicationState:
        """Return new state with a mark placed on one cell."""
        new_board = list(self.board)
        new_board[cell_index] = player
        return self._copy_with(board=tuple(new_board))

    def with_points(self, player: Player, points: int) -> ApplicationState:
        """Return new state with points added to one player's score."""
        if player == Player.ONE:
            return self._copy_with(player1_score=self.player1_score + points)
        return self._copy_with(player2_score=self.player2_score + points)

    def _copy_with(self, **kwargs) -> ApplicationState:
        """Create a copy with some fields replaced."""
        return ApplicationState(
            turn=kwargs.get("turn", self.turn),
            board=kwargs.get("board", self.board),
            is_game_finished=kwargs.get("is_game_finished", self.is_game_finished),
            winning_line=kwargs.get("winning_line", self.winning_line),
            player1_score=kwargs.get("player1_score", self.player1_score),
            player2_score=kwargs.get("player2_score", self.player2_score),
        )


def initial_state(rng: random.Random | None = None) -> ApplicationState:
    """Convenience wrapper around ApplicationState.initial()."""
    return ApplicationState.initial(rng)
