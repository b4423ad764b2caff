"""
Engine Self-Play

Plays the engine against itself to compare search depths or evaluators.

Evaluation Metrics:
    - Wins per side
    - Game length in plies (real moves)
    - Skipped turns (blocked forced pieces)
    - Deadlocks

Games are deterministic for fixed depths and evaluators: the search has no
randomness and breaks ties by move generation order.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tqdm import tqdm

from kamisado_engine.board.layout import Color, Coord, Player
from kamisado_engine.evaluation.base import Evaluator
from kamisado_engine.rules.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class GameRecord:
    """
    Result of one self-play game.

    Attributes:
        winner: Winning side, None if the ply limit was reached
        plies: Number of real moves played
        passes: Number of skipped turns
        deadlocked: Whether the game ended in a deadlock
        moves: (player, color, destination) for every real move
    """
    winner: Optional[Player]
    plies: int
    passes: int
    deadlocked: bool = False
    moves: List[Tuple[Player, Color, Coord]] = field(default_factory=list)


def play_game(
    depth_white: int,
    depth_black: int,
    evaluator_white: Optional[Evaluator] = None,
    evaluator_black: Optional[Evaluator] = None,
    max_plies: int = 200,
) -> GameRecord:
    """
    Play one engine-vs-engine game from the starting position.

    Args:
        depth_white: Search depth for White
        depth_black: Search depth for Black
        evaluator_white: Evaluator for White (default: ChainEvaluator)
        evaluator_black: Evaluator for Black (default: ChainEvaluator)
        max_plies: Stop without a winner after this many moves

    Returns:
        GameRecord of the game
    """
    session = GameSession()
    settings = {
        Player.WHITE: (depth_white, evaluator_white),
        Player.BLACK: (depth_black, evaluator_black),
    }
    moves = []

    while not session.is_over and session.plies < max_plies:
        player = session.to_move
        depth, evaluator = settings[player]
        color, destination = session.play_engine(depth, evaluator)
        moves.append((player, color, destination))

    if not session.is_over:
        logger.warning(f"Game stopped after {max_plies} plies without a winner")

    return GameRecord(
        winner=session.winner,
        plies=session.plies,
        passes=session.passes,
        deadlocked=session.deadlocked,
        moves=moves,
    )


def run_match(
    games: int,
    depth_a: int,
    depth_b: int,
    max_plies: int = 200,
    verbose: bool = False,
) -> Dict[str, object]:
    """
    Play a series of self-play games between two depth settings.

    Games are deterministic, so the engines swap sides every game: engine A
    plays White in even-numbered games and Black in odd-numbered ones.

    Args:
        games: Number of games
        depth_a: Search depth of engine A
        depth_b: Search depth of engine B
        max_plies: Ply limit per game
        verbose: Show a progress bar

    Returns:
        Dictionary with win counts, average length and the game records
    """
    records = []
    a_wins = 0
    b_wins = 0
    for index in tqdm(range(games), desc="Self-play", disable=not verbose):
        a_side = Player.WHITE if index % 2 == 0 else Player.BLACK
        if a_side is Player.WHITE:
            record = play_game(depth_a, depth_b, max_plies=max_plies)
        else:
            record = play_game(depth_b, depth_a, max_plies=max_plies)
        records.append(record)

        if record.winner is a_side:
            a_wins += 1
        elif record.winner is not None:
            b_wins += 1

    average_plies = sum(r.plies for r in records) / len(records) if records else 0.0

    return {
        'games': len(records),
        'a_wins': a_wins,
        'b_wins': b_wins,
        'white_wins': sum(1 for r in records if r.winner is Player.WHITE),
        'black_wins': sum(1 for r in records if r.winner is Player.BLACK),
        'unfinished': sum(1 for r in records if r.winner is None),
        'deadlocks': sum(1 for r in records if r.deadlocked),
        'average_plies': average_plies,
        'results': records,
    }
