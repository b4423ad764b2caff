"""
Unit Tests for Self-Play
"""

from kamisado_engine.board import GameState, Player
from kamisado_engine.rules import is_legal_move
from kamisado_engine.utils import GameRecord, play_game, run_match


class TestPlayGame:

    def test_respects_ply_limit(self):
        record = play_game(1, 1, max_plies=4)

        assert isinstance(record, GameRecord)
        assert record.plies <= 4
        assert len(record.moves) == record.plies
        assert record.winner in (None, Player.WHITE, Player.BLACK)

    def test_moves_replay_legally(self):
        record = play_game(1, 1, max_plies=6)

        state = GameState.initial()
        for player, color, destination in record.moves:
            assert is_legal_move(state, player, color, destination)
            state.move_piece(player, color, destination)

    def test_white_moves_first(self):
        record = play_game(1, 1, max_plies=1)
        assert record.moves[0][0] is Player.WHITE

    def test_deterministic(self):
        assert play_game(1, 1, max_plies=4).moves == play_game(1, 1, max_plies=4).moves


class TestRunMatch:

    def test_summary(self):
        result = run_match(2, 1, 1, max_plies=3)

        assert result['games'] == 2
        assert len(result['results']) == 2
        assert result['a_wins'] + result['b_wins'] + result['unfinished'] == 2
        assert result['white_wins'] + result['black_wins'] + result['unfinished'] == 2
        assert result['average_plies'] <= 3
