"""
Store - Owns the current ApplicationState and dispatches actions.

The store is the only holder of the live state. Each dispatch hands
the current value to the reducer and, on success, swaps in the
returned value as a whole and notifies subscribers so the
presentation layer can re-render.

A failed dispatch leaves the state untouched and notifies no one.
"""

from __future__ import annotations
from typing import Callable
import logging

from ..engine_core.state import ApplicationState, make_rng
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)

Listener = Callable[[ApplicationState], None]


class Store:
    """
    Holds one game's state across dispatches.

    Usage:
        store = Store(seed=42)
        unsubscribe = store.subscribe(render)

        result = store.tap(4)
        if not result.success:
            show_error(result.error)
    """

    def __init__(self, state: ApplicationState | None = None, seed: int | None = None):
        self._reducer = Reducer(rng=make_rng(seed))
        self._state = state or ApplicationState.initial(self._reducer.rng)
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ApplicationState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> ActionResult:
        """Apply an action and replace the state on success."""
        result = self._reducer.apply(self._state, action)
        if not result.success:
            return result

        self._state = result.new_state
        logger.debug("Dispatched %s", action.action_type.value)
        for listener in list(self._listeners):
            listener(self._state)
        return result

    def new_game(self) -> ActionResult:
        return self.dispatch(Action.new_game())

    def tap(self, cell_index: int) -> ActionResult:
        return self.dispatch(Action.tap(cell_index))
