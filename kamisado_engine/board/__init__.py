"""
Board Module

This module provides the static board model and the mutable game state.

Key Components:
    - LAYOUT: Fixed 8x8 color layout (numpy array, Latin square)
    - Color / Player: Enumerations for piece colors and sides
    - color_at / is_in_bounds: Coordinate queries against the layout
    - coord_to_square / square_to_coord: Algebraic label conversion
    - GameState: Board grid + per-player location index, with cloning

Data Flow:
    GameState.initial() → move_piece() / clone() → rules & search
"""

from kamisado_engine.board.layout import (
    BOARD_SIZE,
    LAYOUT,
    Color,
    Coord,
    Player,
    color_at,
    coord_to_square,
    forward_step,
    goal_row,
    home_row,
    is_in_bounds,
    square_to_coord,
)
from kamisado_engine.board.state import GameState, Piece

__all__ = [
    'BOARD_SIZE',
    'LAYOUT',
    'Color',
    'Coord',
    'Player',
    'GameState',
    'Piece',
    'color_at',
    'coord_to_square',
    'forward_step',
    'goal_row',
    'home_row',
    'is_in_bounds',
    'square_to_coord',
]
