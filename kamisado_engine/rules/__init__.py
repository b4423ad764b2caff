"""
Rules Module

Move generation and the rules façade used by game drivers.

Key Components:
    - possible_moves: Legal destinations of one piece (three forward rays)
    - is_legal_move / is_blocked / is_winning / apply_move: Façade checks
    - GameSession (rules.session): Turn, forced color and skipped-turn
      bookkeeping for a live game
"""

from kamisado_engine.rules.moves import DIRECTIONS, possible_moves, ray, reachable_colors
from kamisado_engine.rules.referee import (
    IllegalMoveError,
    apply_move,
    is_blocked,
    is_legal_move,
    is_winning,
    next_forced_color,
    winner,
)

__all__ = [
    'DIRECTIONS',
    'IllegalMoveError',
    'apply_move',
    'is_blocked',
    'is_legal_move',
    'is_winning',
    'next_forced_color',
    'possible_moves',
    'ray',
    'reachable_colors',
    'winner',
]
