"""
Unit Tests for the Console Front-End

Tests for the terminal game, focusing on:
    - Square parsing
    - Board rendering (plain and ANSI)
    - The play loop: quitting, invalid and illegal input, engine replies,
      announcing the winner
    - Command-line entry point
"""

import logging
from io import StringIO

import pytest

from kamisado_engine.board import GameState, Player
from kamisado_engine.config import EngineConfig
from kamisado_engine.console import ConsoleGame, parse_squares, render_board, setup_logger
from kamisado_engine.console.__main__ import main
from kamisado_engine.rules.session import GameSession


@pytest.fixture
def config(tmp_path):
    return EngineConfig(depth=1, use_color=False, log_file=tmp_path / "engine.log")


def play(config, text, session=None):
    """Run a console game on scripted input and return everything printed."""
    output = StringIO()
    game = ConsoleGame(config, input_stream=StringIO(text), output=output)
    if session is not None:
        game.session = session
    game.run()
    return output.getvalue()


class TestParsing:
    """Tests for parse_squares()."""

    def test_two_squares(self):
        assert parse_squares("a1 d4") == [(7, 0), (4, 3)]

    def test_loose_format(self):
        assert parse_squares("  A1-D4\n") == [(7, 0), (4, 3)]

    def test_single_square(self):
        assert parse_squares("d3") == [(5, 3)]

    @pytest.mark.parametrize("text", ["", "hello", "z9", "i1"])
    def test_no_square(self, text):
        with pytest.raises(ValueError):
            parse_squares(text)


class TestRender:
    """Tests for render_board()."""

    def test_plain_board(self):
        text = render_board(GameState.initial(), Player.WHITE, use_color=False)
        lines = text.splitlines()

        assert len(lines) == 10
        assert "a" in lines[0] and "h" in lines[0]
        assert lines[1].strip().startswith("8")
        assert "O:ora" in lines[1]
        assert "X:bro" in lines[8]
        assert " pur " in lines[7]

    def test_markers_follow_human_side(self):
        text = render_board(GameState.initial(), Player.BLACK, use_color=False)
        assert "X:ora" in text.splitlines()[1]

    def test_color_board(self):
        text = render_board(GameState.initial(), Player.WHITE, use_color=True)
        assert "\033[" in text
        assert "\033[0m" in text


class TestConsoleGame:
    """Tests for the play loop."""

    def test_quit(self, config):
        output = play(config, "q\n")
        assert "Welcome to Kamisado! You play White (X)" in output

    def test_end_of_input(self, config):
        output = play(config, "")
        assert "Welcome" in output

    def test_invalid_input(self, config):
        output = play(config, "zz\nq\n")
        assert "Invalid move!" in output

    def test_opening_needs_two_squares(self, config):
        output = play(config, "a2\nq\n")
        assert "Invalid move!" in output

    def test_occupied_destination(self, config):
        output = play(config, "a1 b1\nq\n")
        assert "Illegal move!" in output

    def test_moving_enemy_piece(self, config):
        output = play(config, "a8 a7\nq\n")
        assert "Illegal move!" in output

    def test_engine_replies(self, config):
        output = play(config, "a1 a2\nq\n")

        # a2 is purple, so the engine has to answer with its purple piece
        assert "CPU moved purple to" in output
        assert "You must move your" in output

    def test_engine_opens_for_black_human(self, tmp_path):
        config = EngineConfig(
            depth=1,
            human_player="black",
            use_color=False,
            log_file=tmp_path / "engine.log",
        )
        output = play(config, "q\n")
        assert "You play Black" in output
        assert "CPU moved" in output

    def test_human_wins(self, config, open_file_state):
        output = play(config, "a1 a8\n", session=GameSession(open_file_state))
        assert "You won!" in output

    def test_log_written(self, config):
        play(config, "q\n")
        assert "Kamisado Engine Started" in config.log_file.read_text()


class TestSetupLogger:

    def test_levels(self, tmp_path):
        logger = setup_logger(tmp_path / "a.log", debug=True)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        logger = setup_logger(tmp_path / "b.log", debug=False)
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 1

    def test_creates_directory(self, tmp_path):
        setup_logger(tmp_path / "nested" / "engine.log")
        assert (tmp_path / "nested").is_dir()


class TestMain:

    def test_rejects_bad_depth(self, tmp_path):
        assert main(["0", "--log-file", str(tmp_path / "engine.log")]) == 2

    def test_quit_immediately(self, tmp_path, monkeypatch):
        monkeypatch.setattr("sys.stdin", StringIO("q\n"))
        assert main(["1", "--no-color", "--log-file", str(tmp_path / "engine.log")]) == 0
