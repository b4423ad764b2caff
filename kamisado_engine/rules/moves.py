"""
Move Generation

A Kamisado piece moves like a chess queen limited to its three forward
directions: forward-left, straight forward and forward-right. It may travel
any distance but cannot jump over or land on another piece (there are no
captures).

Generation order is part of the engine's behavior: the search keeps the
first of several equally scored moves, so the rays are always walked
forward-left, forward, forward-right, nearest cell first.
"""

from typing import List, Set

from kamisado_engine.board.layout import Color, Coord, Player, color_at, forward_step, is_in_bounds
from kamisado_engine.board.state import GameState

# Column offsets of the three rays, in generation order
DIRECTIONS = (-1, 0, 1)


def ray(state: GameState, player: Player, color: Color, direction: int) -> List[Coord]:
    """
    Walk one ray from a piece and collect the empty cells before it is blocked.

    Args:
        state: Current position
        player: Owner of the piece
        color: Color of the piece
        direction: Column offset, one of DIRECTIONS

    Returns:
        Destinations along the ray, nearest first
    """
    row, col = state.locate(player, color)
    step = forward_step(player)

    cells = []
    while True:
        row += step
        col += direction
        if not is_in_bounds((row, col)) or not state.is_empty((row, col)):
            break
        cells.append((row, col))
    return cells


def possible_moves(state: GameState, player: Player, color: Color) -> List[Coord]:
    """
    Get every legal destination of a piece.

    Args:
        state: Current position
        player: Owner of the piece
        color: Color of the piece that must move

    Returns:
        Destinations in generation order; empty when the piece is blocked
    """
    moves = []
    for direction in DIRECTIONS:
        moves.extend(ray(state, player, color, direction))
    return moves


def reachable_colors(state: GameState, player: Player) -> Set[Color]:
    """Colors of all cells that any of the player's pieces could move to."""
    colors = set()
    for color in Color:
        for destination in possible_moves(state, player, color):
            colors.add(color_at(destination))
    return colors
