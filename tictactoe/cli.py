"""
Tic-Tac-Toe CLI - Command-line interface for the engine.

Usage:
    tictactoe play [--seed N]                 Play in the terminal
    tictactoe replay CELL... [--seed N]       Apply taps and print the result
    tictactoe serve [--host H] [--port P]     Run the HTTP API
"""

import argparse
import logging
import sys

from .config import (
    LOG_FORMAT,
    LOG_LEVELS,
    TICTACTOE_HOST,
    TICTACTOE_LOG_LEVEL,
    TICTACTOE_PORT,
    TICTACTOE_SEED,
)
from .engine_core.state import ApplicationState, GameStatus, Player

MARKS = {Player.ONE: "X", Player.TWO: "O"}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tic-Tac-Toe - unidirectional state engine",
        prog="tictactoe",
    )
    parser.add_argument(
        "--log-level",
        default=TICTACTOE_LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--seed", type=int, default=TICTACTOE_SEED, help="Random seed")

    replay_parser = subparsers.add_parser("replay", help="Apply a sequence of taps")
    replay_parser.add_argument("cells", type=int, nargs="+", help="Cell indices 0-8, in order")
    replay_parser.add_argument("--seed", type=int, default=TICTACTOE_SEED, help="Random seed")
    replay_parser.add_argument(
        "--first", choices=["one", "two"], help="Force the starting player",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=TICTACTOE_HOST)
    serve_parser.add_argument("--port", type=int, default=TICTACTOE_PORT)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "replay":
        return cmd_replay(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        return 1


def render_board(state: ApplicationState) -> str:
    """Draw the board as text; empty cells show their 1-9 key."""
    cells = [
        MARKS[cell] if cell is not None else str(i + 1)
        for i, cell in enumerate(state.board)
    ]
    rows = [" | ".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---------\n".join(f" {row}" for row in rows)


def describe(state: ApplicationState) -> str:
    """One line saying where the game stands."""
    if state.status == GameStatus.WON:
        line = "-".join(str(i) for i in state.winning_line)
        return f"Player {state.winner.value} ({MARKS[state.winner]}) wins on {line}"
    if state.status == GameStatus.DRAW:
        return "Draw"
    return f"Player {state.turn.value} ({MARKS[state.turn]}) to move"


def render_scores(state: ApplicationState) -> str:
    return f"Score - one: {state.player1_score}  two: {state.player2_score}"


def cmd_play(args, input_fn=input, output_fn=print):
    """Interactive game: 1-9 taps a cell, n starts a new game, q quits."""
    from .session import Store

    store = Store(seed=args.seed)

    def render(state):
        output_fn("")
        output_fn(render_board(state))
        output_fn(describe(state))
        if state.is_game_finished:
            output_fn(render_scores(state))
            output_fn("Press n for a new game or q to quit")

    store.subscribe(render)
    render(store.state)

    while True:
        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            break

        if command in ("q", "quit"):
            break
        if command in ("n", "new"):
            store.new_game()
            continue
        if not command.isdecimal() or not 1 <= int(command) <= 9:
            output_fn("Enter a cell 1-9, n or q")
            continue

        result = store.tap(int(command) - 1)
        if not result.success:
            output_fn(f"Error: {result.error}")

    output_fn(render_scores(store.state))
    return 0


def cmd_replay(args, output_fn=print):
    """Apply taps in order; stop at the first rejected one."""
    from .session import Store

    state = None
    if args.first:
        state = ApplicationState(turn=Player(args.first))
    store = Store(state=state, seed=args.seed)

    for cell in args.cells:
        result = store.tap(cell)
        if not result.success:
            output_fn(render_board(store.state))
            output_fn(f"Error: {result.error}")
            return 1

    output_fn(render_board(store.state))
    output_fn(describe(store.state))
    output_fn(render_scores(store.state))
    return 0


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn
    from .api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
