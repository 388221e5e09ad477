"""
Tic-Tac-Toe - Unidirectional state engine for a two-player 3x3 game.

Actions are dispatched to a reducer, which computes a whole new
application state for the presentation layer to re-render.
The package provides:
- Immutable game state and the win detector
- Pure state transitions (new game, cell tapped)
- A store that owns the current state and notifies subscribers
- A small HTTP dispatch surface and a terminal client
"""

__version__ = "0.1.0"
