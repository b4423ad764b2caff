"""
Evaluation Module

This module provides position evaluation functions for the engine. Evaluators
are SWAPPABLE: the search works with any evaluator implementing the base
interface.

Key Components:
    - Evaluator (ABC): Abstract base class defining the evaluation interface
    - ChainEvaluator: Win-in-one threats and opponent flexibility heuristic

Data Flow:
    GameState, Player → evaluator.evaluate() → float
                                               Positive = good for Player
                                               Negative = good for opponent
"""

from kamisado_engine.evaluation.base import LOSS_SCORE, WIN_SCORE, Evaluator
from kamisado_engine.evaluation.heuristic import (
    ChainEvaluator,
    distinct_reachable_colors,
    win_in_one_count,
)

__all__ = [
    'Evaluator',
    'ChainEvaluator',
    'WIN_SCORE',
    'LOSS_SCORE',
    'distinct_reachable_colors',
    'win_in_one_count',
]
