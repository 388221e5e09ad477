"""
Pytest fixtures for tic-tac-toe tests.
"""

import pytest

from ..engine_core.state import ApplicationState, Player
from ..engine_core.reducer import Reducer, player_tapped
from ..session import Store


def board_from(rows: str) -> tuple:
    """Build a board from 9 characters: X for one, O for two, . for empty."""
    marks = {"X": Player.ONE, "O": Player.TWO, ".": None}
    cells = [marks[c] for c in rows if not c.isspace()]
    assert len(cells) == 9
    return tuple(cells)


def play(state: ApplicationState, *cells: int) -> ApplicationState:
    """Apply taps in order."""
    for cell in cells:
        state = player_tapped(cell, state)
    return state


@pytest.fixture
def one_to_move() -> ApplicationState:
    """Empty board, player one to move, zeroed scores."""
    return ApplicationState(turn=Player.ONE)


@pytest.fixture
def two_to_move() -> ApplicationState:
    """Empty board, player two to move, zeroed scores."""
    return ApplicationState(turn=Player.TWO)


@pytest.fixture
def seeded_reducer() -> Reducer:
    return Reducer.seeded(1234)


@pytest.fixture
def store(one_to_move) -> Store:
    return Store(state=one_to_move, seed=99)
