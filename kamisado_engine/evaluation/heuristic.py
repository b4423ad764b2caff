"""
Chain-Move Heuristic Evaluation

Static evaluation used at the search horizon. It combines two measures:

    1. Win-in-one threats: pieces that could reach their goal row with a
       single move
    2. Opponent flexibility: how many different colors the opponent could
       land on with its next move, i.e. how many different pieces it could
       force us to move

Formula:
    value = threats(player) - threats(opponent) - reachable_colors(opponent)

The formula is asymmetric (our own flexibility is not counted) and is kept
exactly as is so the engine keeps playing the same moves.
"""

from kamisado_engine.board.layout import Color, Player, goal_row
from kamisado_engine.board.state import GameState
from kamisado_engine.evaluation.base import Evaluator
from kamisado_engine.rules.moves import possible_moves, reachable_colors


def win_in_one_count(state: GameState, player: Player) -> int:
    """
    Count the player's pieces that can reach the goal row in one move.

    Args:
        state: Position to inspect
        player: Side to count for

    Returns:
        Number of distinct pieces with a destination on the goal row
    """
    row = goal_row(player)
    count = 0
    for color in Color:
        if any(dst[0] == row for dst in possible_moves(state, player, color)):
            count += 1
    return count


def distinct_reachable_colors(state: GameState, player: Player) -> int:
    return len(reachable_colors(state, player))


class ChainEvaluator(Evaluator):
    """
    Threat and flexibility evaluation for Kamisado.

    Stateless: every call recomputes the move sets it needs from the state.
    """

    def evaluate(self, state: GameState, player: Player) -> float:
        """
        Evaluate position using win-in-one threats and opponent flexibility.

        Args:
            state: Position to evaluate
            player: Side whose perspective the score is expressed in

        Returns:
            float: Heuristic score
        """
        opponent = player.opponent()

        score = win_in_one_count(state, player)
        score -= win_in_one_count(state, opponent)
        score -= distinct_reachable_colors(state, opponent)

        return float(score)
