"""
Unit Tests for Evaluation Module

Tests for position evaluation functions, focusing on:
    - Win-in-one threat counting
    - Distinct reachable colors
    - The combined heuristic formula
    - Symmetry of the starting position
"""

import pytest

from kamisado_engine.board import Color, GameState, Player
from kamisado_engine.evaluation import (
    LOSS_SCORE,
    WIN_SCORE,
    ChainEvaluator,
    Evaluator,
    distinct_reachable_colors,
    win_in_one_count,
)
from kamisado_engine.rules import reachable_colors


@pytest.fixture
def crossed_threats_state(build_state):
    """
    White brown on c3 eyeing h8, Black brown on h4, Black orange free to run
    down the a-file to a1.

    Black orange alone reaches all 8 colors (the a-file plus the orange
    diagonal), while the first new color of each black piece only covers 7.
    """
    return build_state({
        (Player.WHITE, Color.BROWN): (5, 2),
        (Player.BLACK, Color.BROWN): (4, 7),
    })


class TestComponents:
    """Tests for the heuristic's building blocks."""

    def test_no_threats_at_start(self):
        """Goal rows are full of enemy pieces, so nothing can land there."""
        state = GameState.initial()
        assert win_in_one_count(state, Player.WHITE) == 0
        assert win_in_one_count(state, Player.BLACK) == 0

    def test_open_file_is_a_threat(self, open_file_state):
        assert win_in_one_count(open_file_state, Player.WHITE) == 1
        assert win_in_one_count(open_file_state, Player.BLACK) == 0

    def test_all_colors_reachable_at_start(self):
        state = GameState.initial()
        assert distinct_reachable_colors(state, Player.WHITE) == len(Color)
        assert distinct_reachable_colors(state, Player.BLACK) == len(Color)

    def test_each_side_threatens_once(self, crossed_threats_state):
        assert win_in_one_count(crossed_threats_state, Player.WHITE) == 1
        assert win_in_one_count(crossed_threats_state, Player.BLACK) == 1

    def test_colors_counted_over_all_pieces(self, crossed_threats_state):
        assert reachable_colors(crossed_threats_state, Player.BLACK) == set(Color)
        assert distinct_reachable_colors(crossed_threats_state, Player.BLACK) == 8


class TestChainEvaluator:
    """Tests for ChainEvaluator."""

    @pytest.fixture
    def evaluator(self):
        return ChainEvaluator()

    def test_starting_position(self, evaluator):
        """0 threats each, opponent reaches all 8 colors."""
        state = GameState.initial()
        assert evaluator.evaluate(state, Player.WHITE) == -8.0

    def test_starting_position_symmetric(self, evaluator):
        state = GameState.initial()
        assert evaluator.evaluate(state, Player.WHITE) == evaluator.evaluate(state, Player.BLACK)

    def test_open_file_values(self, evaluator, open_file_state):
        """White: 1 threat, Black reaches 8 colors. Black: 0 threats vs 1, White reaches 8."""
        assert evaluator.evaluate(open_file_state, Player.WHITE) == -7.0
        assert evaluator.evaluate(open_file_state, Player.BLACK) == -9.0

    def test_crossed_threats(self, evaluator, crossed_threats_state):
        """1 threat each; Black reaches all 8 colors counted over every piece."""
        assert evaluator.evaluate(crossed_threats_state, Player.WHITE) == -8.0

    def test_threat_improves_score(self, evaluator, open_file_state):
        start = evaluator.evaluate(GameState.initial(), Player.WHITE)
        assert evaluator.evaluate(open_file_state, Player.WHITE) > start

    def test_returns_finite_float(self, evaluator, open_file_state):
        score = evaluator.evaluate(open_file_state, Player.BLACK)
        assert isinstance(score, float)
        assert LOSS_SCORE < score < WIN_SCORE

    def test_does_not_mutate_state(self, evaluator, open_file_state):
        before = open_file_state.clone()
        evaluator.evaluate(open_file_state, Player.WHITE)
        assert open_file_state == before

    def test_repr(self, evaluator):
        assert repr(evaluator) == "ChainEvaluator()"


class TestEvaluatorInterface:

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            Evaluator()
