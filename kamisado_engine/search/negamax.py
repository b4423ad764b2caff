"""
Negamax Search with Forced Passes

This module implements the engine's search. Negamax is the single-function
form of minimax: each node returns its value from the point of view of the
player to move, and the parent negates it.

A node is (state, player to move, forced color, remaining depth). The forced
color is the color of the cell the opponent last landed on; only the piece
of that color may move. Each node is one of four kinds:

    TERMINAL: someone already stands on their goal row → +/- infinity
    HORIZON:  depth exhausted → static evaluation (root player's view,
              negated when the other side is to move)
    MOVE:     the forced piece has destinations → best negated child
    PASS:     the forced piece is blocked → the board stays as it is, the
              opponent must move the piece matching the color under the
              blocked piece, one unit of depth is consumed

Algorithm Complexity:
    O(b^d) where b = destinations of the forced piece (at most ~20) and
    d = depth. There is no pruning and no guard against large depths; the
    caller picks a depth that finishes in reasonable time.

References:
    - Negamax: https://www.chessprogramming.org/Negamax
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from kamisado_engine.board.layout import Color, Coord, Player, color_at
from kamisado_engine.board.state import GameState
from kamisado_engine.evaluation.base import LOSS_SCORE, WIN_SCORE, Evaluator
from kamisado_engine.evaluation.heuristic import ChainEvaluator
from kamisado_engine.rules.moves import possible_moves
from kamisado_engine.rules.referee import is_winning

logger = logging.getLogger(__name__)


class NodeKind(Enum):
    """Kind of a search node, see module docstring."""
    TERMINAL = 0
    HORIZON = 1
    MOVE = 2
    PASS = 3


@dataclass
class SearchResult:
    """
    Outcome of a root search.

    Attributes:
        destination: Chosen destination of the forced piece
        score: Negamax value of that destination (root player's view)
        nodes: Number of nodes visited below the root
        scores: (destination, score) for every root move, in generation order
    """
    destination: Coord
    score: float
    nodes: int = 0
    scores: List[Tuple[Coord, float]] = field(default_factory=list)


def classify_node(state: GameState, player: Player, color: Color, depth: int) -> NodeKind:
    """
    Decide which kind of node (state, player, color, depth) is.

    Args:
        state: Position at the node
        player: Side to move
        color: Forced color for the side to move
        depth: Remaining depth

    Returns:
        NodeKind of the node
    """
    if is_winning(state, player) or is_winning(state, player.opponent()):
        return NodeKind.TERMINAL
    if depth <= 0:
        return NodeKind.HORIZON
    if possible_moves(state, player, color):
        return NodeKind.MOVE
    return NodeKind.PASS


def negamax(
    state: GameState,
    player: Player,
    color: Color,
    depth: int,
    root_player: Player,
    evaluator: Evaluator,
    nodes_searched: Optional[List[int]] = None,
) -> float:
    """
    Negamax value of a node from the perspective of the player to move.

    Args:
        state: Position at the node (never mutated)
        player: Side to move
        color: Color of the piece the side to move must move
        depth: Remaining depth (decrements on moves and on passes)
        root_player: Side the root search is run for; horizon scores are
            computed from its view
        evaluator: Static evaluation used at the horizon
        nodes_searched: Optional mutable list [count] to track nodes visited

    Returns:
        float: Node value; +inf if the side to move has won, -inf if lost
    """
    if nodes_searched is not None:
        nodes_searched[0] += 1

    kind = classify_node(state, player, color, depth)

    if kind is NodeKind.TERMINAL:
        return WIN_SCORE if is_winning(state, player) else LOSS_SCORE

    if kind is NodeKind.HORIZON:
        value = evaluator.evaluate(state, root_player)
        return value if player is root_player else -value

    opponent = player.opponent()

    if kind is NodeKind.PASS:
        # Zero-length move: the next color is the one under the blocked piece
        standing_on = color_at(state.locate(player, color))
        return -negamax(
            state, opponent, standing_on, depth - 1, root_player, evaluator, nodes_searched
        )

    best_value = LOSS_SCORE
    for destination in possible_moves(state, player, color):
        child = state.clone()
        child.move_piece(player, color, destination)
        value = -negamax(
            child,
            opponent,
            color_at(destination),
            depth - 1,
            root_player,
            evaluator,
            nodes_searched,
        )
        if value > best_value:
            best_value = value

    return best_value


def analyse(
    state: GameState,
    player: Player,
    color: Color,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> SearchResult:
    """
    Search every destination of the forced piece and keep the best.

    The root is the first ply, so each child is searched with the full
    depth. Ties keep the destination generated first.

    Args:
        state: Current position (not mutated)
        player: Side to move
        color: Color of the piece that must move
        depth: Search depth
        evaluator: Position evaluator (default: ChainEvaluator)

    Returns:
        SearchResult for the position

    Raises:
        ValueError: If the depth is negative, or if the forced piece has no
            legal moves (callers must resolve blocked pieces before searching)
    """
    if depth < 0:
        raise ValueError(f"Search depth must not be negative, got {depth}")

    destinations = possible_moves(state, player, color)
    if not destinations:
        raise ValueError(f"No legal moves available for {player.name} {color.label}")

    if evaluator is None:
        evaluator = ChainEvaluator()

    opponent = player.opponent()
    nodes = [0]
    best: Optional[Coord] = None
    best_score = LOSS_SCORE
    scores = []

    for destination in destinations:
        child = state.clone()
        child.move_piece(player, color, destination)
        score = -negamax(
            child, opponent, color_at(destination), depth, player, evaluator, nodes
        )
        scores.append((destination, score))
        logger.debug(f"{player.name} {color.label} -> {destination}: {score}")

        if best is None or score > best_score:
            best = destination
            best_score = score

    logger.info(
        f"Search complete: {player.name} {color.label} -> {best}, "
        f"score={best_score}, depth={depth}, nodes={nodes[0]}"
    )
    return SearchResult(destination=best, score=best_score, nodes=nodes[0], scores=scores)


def find_best_move(
    state: GameState,
    player: Player,
    color: Color,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> Coord:
    """
    Find the best destination for the forced piece.

    Args:
        state: Current position
        player: Side to move
        color: Color of the piece that must move
        depth: Search depth
        evaluator: Position evaluator (default: ChainEvaluator)

    Returns:
        Destination (row, col)

    Raises:
        ValueError: If the depth is negative or the forced piece has no legal moves
    """
    return analyse(state, player, color, depth, evaluator).destination
