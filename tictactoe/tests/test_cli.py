"""
Tests for the terminal client.
"""

import argparse

from ..cli import cmd_play, cmd_replay, describe, main, render_board
from ..config import _log_level
from ..engine_core.state import ApplicationState, Player
from .conftest import play


def replay_args(*cells, first="one", seed=0):
    return argparse.Namespace(cells=list(cells), first=first, seed=seed)


class TestRendering:
    """Tests for board rendering."""

    def test_empty_board_shows_keys(self):
        text = render_board(ApplicationState(turn=Player.ONE))
        assert text.splitlines()[0] == " 1 | 2 | 3"
        assert text.splitlines()[-1] == " 7 | 8 | 9"

    def test_marks(self):
        state = play(ApplicationState(turn=Player.ONE), 0, 4)
        lines = render_board(state).splitlines()
        assert lines[0] == " X | 2 | 3"
        assert lines[2] == " 4 | O | 6"

    def test_describe(self):
        state = ApplicationState(turn=Player.TWO)
        assert describe(state) == "Player two (O) to move"

        won = play(ApplicationState(turn=Player.ONE), 0, 4, 1, 5, 2)
        assert describe(won) == "Player one (X) wins on 0-1-2"


class TestReplay:
    """Tests for the replay command."""

    def test_win(self):
        out = []
        code = cmd_replay(replay_args(0, 4, 1, 5, 2), output_fn=out.append)

        assert code == 0
        assert "Player one (X) wins on 0-1-2" in out
        assert "Score - one: 10  two: 0" in out

    def test_draw(self):
        out = []
        code = cmd_replay(replay_args(1, 0, 3, 2, 5, 4, 6, 7, 8, first="two"), output_fn=out.append)

        assert code == 0
        assert "Draw" in out

    def test_invalid_move(self):
        out = []
        code = cmd_replay(replay_args(0, 0), output_fn=out.append)

        assert code == 1
        assert any("occupied" in line for line in out)


class TestPlay:
    """Tests for the interactive command."""

    def test_scripted_session(self):
        inputs = iter(["5", "5", "x", "q"])
        out = []
        code = cmd_play(
            argparse.Namespace(seed=4),
            input_fn=lambda prompt: next(inputs),
            output_fn=out.append,
        )

        assert code == 0
        assert any(line.startswith("Error:") for line in out)
        assert "Enter a cell 1-9, n or q" in out
        assert out[-1] == "Score - one: 0  two: 0"

    def test_non_ascii_digit_is_rejected_not_fatal(self):
        """Superscript digits pass isdigit() but are not cell keys."""
        inputs = iter(["\u00b2", "q"])
        out = []
        code = cmd_play(
            argparse.Namespace(seed=1),
            input_fn=lambda prompt: next(inputs),
            output_fn=out.append,
        )

        assert code == 0
        assert "Enter a cell 1-9, n or q" in out

    def test_end_of_input_quits(self):
        def no_input(prompt):
            raise EOFError

        assert cmd_play(argparse.Namespace(seed=1), input_fn=no_input, output_fn=lambda line: None) == 0


def test_main_without_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_main_replay(capsys):
    assert main(["replay", "--first", "one", "0", "4", "1", "5", "2"]) == 0
    assert "wins on 0-1-2" in capsys.readouterr().out


class TestLogLevelConfig:
    """Tests for the log level read from the environment."""

    def test_known_level_normalised(self):
        assert _log_level(" debug ") == "DEBUG"

    def test_unknown_level_falls_back(self):
        assert _log_level("TRACE") == "WARNING"

    def test_missing_level(self):
        assert _log_level(None) == "WARNING"
