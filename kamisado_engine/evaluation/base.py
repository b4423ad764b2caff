"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators, so
that the search can be run with any heuristic without modification.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() scores the position from the given player's perspective
    3. Positive = good for that player, negative = good for the opponent
    4. Won/lost positions are scored by the search as +/- infinity, never
       by the evaluator
"""

import math
from abc import ABC, abstractmethod

from kamisado_engine.board.layout import Player
from kamisado_engine.board.state import GameState

# Scores for decided games. Every finite heuristic value lies strictly between.
WIN_SCORE = math.inf
LOSS_SCORE = -math.inf


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    Methods:
        evaluate(state, player): Returns the static score of the position
    """

    @abstractmethod
    def evaluate(self, state: GameState, player: Player) -> float:
        """
        Evaluate a position from the given player's perspective.

        Args:
            state: Position to evaluate
            player: Side whose point of view the score is expressed in

        Returns:
            float: Finite heuristic score
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
