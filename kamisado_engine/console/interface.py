"""
Console Front-End

Interactive human-vs-engine game on a terminal. The human types squares in
algebraic notation (files a-h, ranks 1-8):

    - opening move: source and destination, e.g. "a1 d4"
    - later moves: only the destination, e.g. "d3" (the piece to move is
      forced by the color the engine landed on)
    - "q" quits

Skipped turns are announced and handled by the GameSession: a blocked side
passes and the other side plays again.

Logging:
    The engine log goes to a file (default ~/.kamisado/engine.log) so the
    terminal only shows the game.
"""

import logging
import re
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from kamisado_engine.board.layout import Coord, square_to_coord, coord_to_square
from kamisado_engine.config import EngineConfig
from kamisado_engine.console.render import render_board
from kamisado_engine.evaluation.heuristic import ChainEvaluator
from kamisado_engine.rules.referee import IllegalMoveError
from kamisado_engine.rules.session import GameSession

SQUARE_PATTERN = re.compile(r"[a-h][1-8]")


def setup_logger(log_file: Path, debug: bool = False) -> logging.Logger:
    """
    Setup file-based logger for the engine.

    Args:
        log_file: File to write the log to (parent directory is created)
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("kamisado_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def parse_squares(text: str) -> List[Coord]:
    """
    Extract the squares typed on an input line.

    Args:
        text: Raw input, e.g. "a1 d4" or "d3"

    Returns:
        Coordinates in the order they appear

    Raises:
        ValueError: If the line holds no square
    """
    squares = SQUARE_PATTERN.findall(text.lower())
    if not squares:
        raise ValueError(f"No square found in {text!r}")
    return [square_to_coord(square) for square in squares]


class ConsoleGame:
    """
    Human-vs-engine game loop.

    Attributes:
        config: Engine configuration (depth, sides, rendering, logging)
        session: Turn bookkeeping for the live game
        evaluator: Position evaluator used by the engine
        input_stream / output: Text streams (stdin/stdout by default)
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        input_stream: TextIO = None,
        output: TextIO = None,
    ):
        self.config = config if config else EngineConfig()
        self.session = GameSession()
        self.evaluator = ChainEvaluator()
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output = output if output is not None else sys.stdout

        self.logger = setup_logger(self.config.log_file, debug=self.config.debug)
        self.logger.info("=== Kamisado Engine Started ===")
        self.logger.info(f"Config: {self.config}")

    def say(self, message: str = "") -> None:
        print(message, file=self.output)
        self.output.flush()

    def show_board(self) -> None:
        self.say(render_board(
            self.session.state,
            human_player=self.config.human_player,
            use_color=self.config.use_color,
        ))

    def run(self) -> None:
        """
        Main game loop. Runs until someone wins, the human quits, or the
        input stream ends.
        """
        human = self.config.human_player
        self.say(f"Welcome to Kamisado! You play {human.name.title()} (X)")
        self.show_board()

        while not self.session.is_over:
            if self.session.to_move is human:
                if not self.handle_human_turn():
                    self.logger.info("Human quit")
                    return
            else:
                self.handle_engine_turn()

        self.announce_result()

    def handle_human_turn(self) -> bool:
        """
        Read lines until the human plays a legal move.

        Returns:
            bool: False if the human quit or input ended, True otherwise
        """
        session = self.session
        if session.forced_color is None:
            prompt = "Enter your move (e.g. a1 d4): "
        else:
            self.say(f"You must move your {session.forced_color.label} piece")
            prompt = "Enter your move (e.g. d3): "

        while True:
            self.output.write(prompt)
            self.output.flush()
            line = self.input_stream.readline()
            if not line or line.strip().lower().startswith("q"):
                return False

            try:
                color, destination = self.read_move(line)
                session.play(color, destination)
            except IllegalMoveError as e:
                self.logger.debug(f"Illegal move {line.strip()!r}: {e}")
                self.say("Illegal move!")
                continue
            except ValueError as e:
                self.logger.debug(f"Invalid input {line.strip()!r}: {e}")
                self.say("Invalid move!")
                continue
            break

        if self.config.engine_player in session.last_passes and not session.is_over:
            self.say("CPU is blocked, you get to play again")
        return True

    def read_move(self, line: str):
        """
        Turn an input line into (color, destination) for the human.

        Raises:
            ValueError: If the line does not describe a move of a human piece
        """
        session = self.session
        squares = parse_squares(line)
        human = self.config.human_player

        if session.forced_color is None:
            if len(squares) != 2:
                raise ValueError("Opening move needs a source and a destination")
            piece = session.state.piece_at(squares[0])
            if piece is None or piece.player is not human:
                raise IllegalMoveError(f"No piece of yours on {coord_to_square(squares[0])}")
            return piece.color, squares[1]

        color = session.forced_color
        if len(squares) == 2 and squares[0] != session.state.locate(human, color):
            raise IllegalMoveError(f"You must move your {color.label} piece")
        return color, squares[-1]

    def handle_engine_turn(self) -> None:
        color, destination = self.session.play_engine(self.config.depth, self.evaluator)
        self.show_board()
        if self.session.is_over:
            return

        self.say(f"CPU moved {color.label} to {coord_to_square(destination)}")
        if self.config.human_player in self.session.last_passes:
            self.say("You are blocked, CPU will play again")
        else:
            self.say(f"CPU has played on {self.session.forced_color.label}")

    def announce_result(self) -> None:
        session = self.session
        self.show_board()
        if session.deadlocked:
            self.say("Deadlock!")
        if session.winner is self.config.human_player:
            self.say("You won!")
        else:
            self.say("CPU won")
        self.logger.info(f"Game over: {session.winner.name} wins after {session.plies} moves")
