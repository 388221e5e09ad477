"""
Action Generator - Lists the actions that are legal in a state.

The presentation layer uses this to ignore input that the reducer
would reject, such as a tap on an occupied cell.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import ApplicationState
from .action import Action


@dataclass
class ActionGenerator:
    """
    Generates legal actions for the current state.

    New game is always legal. Taps are legal on empty cells while the
    game is in progress.
    """

    def generate(self, state: ApplicationState) -> list[Action]:
        actions = [Action.new_game()]
        if not state.is_game_finished:
            actions.extend(Action.tap(i) for i in state.empty_cells)
        return actions

    def is_legal(self, state: ApplicationState, action: Action) -> bool:
        return action in self.generate(state)


def legal_actions(state: ApplicationState) -> list[Action]:
    """Convenience function to get legal actions."""
    return ActionGenerator().generate(state)


def legal_cells(state: ApplicationState) -> list[int]:
    """Cells that can be tapped right now."""
    if state.is_game_finished:
        return []
    return state.empty_cells
