"""
Game Session

Turn bookkeeping for a live game, shared by the console front-end and the
self-play harness:

    - which side is to move and which color it is forced to move
    - the opening move, where any piece may move
    - skipped turns: a side whose forced piece is blocked makes a
      zero-length move, so the other side must move the piece matching the
      color of the cell under the blocked piece
    - deadlock: if a chain of skipped turns comes back to a (player, color)
      already seen, nobody can ever move again; the player who made the last
      real move caused it and loses
"""

import logging
from typing import List, Optional, Tuple

from kamisado_engine.board.layout import Color, Coord, Player, color_at
from kamisado_engine.board.state import GameState
from kamisado_engine.evaluation.base import Evaluator
from kamisado_engine.rules.moves import possible_moves
from kamisado_engine.rules.referee import IllegalMoveError, apply_move, is_blocked, winner
from kamisado_engine.search.negamax import analyse

logger = logging.getLogger(__name__)


class GameSession:
    """
    Live game driven by alternating human and/or engine moves.

    Attributes:
        state: The live position (mutated only by played moves)
        to_move: Side to move
        forced_color: Color the side to move must move, None on the opening move
        last_move: (player, color, destination) of the last real move
        last_passes: Sides that had to skip after the last real move
        passes: Total number of skipped turns in the game
        plies: Number of real moves played
        deadlocked: True if the game ended in a deadlock
    """

    def __init__(self, state: Optional[GameState] = None, first_player: Player = Player.WHITE):
        self.state = state if state is not None else GameState.initial()
        self.to_move = first_player
        self.forced_color: Optional[Color] = None
        self.last_move: Optional[Tuple[Player, Color, Coord]] = None
        self.last_passes: List[Player] = []
        self.passes = 0
        self.plies = 0
        self.deadlocked = False
        self._deadlock_loser: Optional[Player] = None

    @property
    def winner(self) -> Optional[Player]:
        if self._deadlock_loser is not None:
            return self._deadlock_loser.opponent()
        return winner(self.state)

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def legal_destinations(self, color: Optional[Color] = None) -> List[Coord]:
        """
        Legal destinations for the side to move.

        Args:
            color: Piece to query; defaults to the forced color

        Raises:
            ValueError: If no color is given on the opening move
        """
        if color is None:
            color = self.forced_color
        if color is None:
            raise ValueError("Any piece may move on the opening move; give a color")
        return possible_moves(self.state, self.to_move, color)

    def play(self, color: Color, destination: Coord) -> None:
        """
        Play a move for the side to move, then resolve skipped turns.

        Args:
            color: Color of the piece to move
            destination: Target cell

        Raises:
            IllegalMoveError: If the game is over, the wrong piece is moved,
                or the destination is not legal
        """
        if self.is_over:
            raise IllegalMoveError("The game is over")
        if self.forced_color is not None and color != self.forced_color:
            raise IllegalMoveError(
                f"{self.to_move.name} must move {self.forced_color.label}, not {color.label}"
            )

        player = self.to_move
        apply_move(self.state, player, color, destination)
        destination = tuple(destination)

        self.last_move = (player, color, destination)
        self.plies += 1
        self.to_move = player.opponent()
        self.forced_color = color_at(destination)
        self.last_passes = []
        logger.info(f"{player.name} {color.label} -> {destination}")

        if not self.is_over:
            self._resolve_passes()

    def play_engine(self, depth: int, evaluator: Optional[Evaluator] = None) -> Tuple[Color, Coord]:
        """
        Let the engine choose and play the move for the side to move.

        On the opening move every piece is searched and the best scoring
        (color, destination) wins, earliest color first on ties.

        Returns:
            (color, destination) that was played

        Raises:
            IllegalMoveError: If the game is over
        """
        if self.is_over:
            raise IllegalMoveError("The game is over")

        if self.forced_color is not None:
            color = self.forced_color
            destination = analyse(self.state, self.to_move, color, depth, evaluator).destination
        else:
            best = None
            for candidate in Color:
                if is_blocked(self.state, self.to_move, candidate):
                    continue
                result = analyse(self.state, self.to_move, candidate, depth, evaluator)
                if best is None or result.score > best[2]:
                    best = (candidate, result.destination, result.score)
            if best is None:
                raise ValueError(f"No legal moves available for {self.to_move.name}")
            color, destination = best[0], best[1]

        self.play(color, destination)
        return color, destination

    def _resolve_passes(self) -> None:
        seen = set()
        while is_blocked(self.state, self.to_move, self.forced_color):
            key = (self.to_move, self.forced_color)
            if key in seen:
                self.deadlocked = True
                self._deadlock_loser = self.last_move[0]
                logger.info(f"Deadlock: {self._deadlock_loser.name} caused it and loses")
                return
            seen.add(key)

            blocked_at = self.state.locate(self.to_move, self.forced_color)
            logger.info(
                f"{self.to_move.name} {self.forced_color.label} is blocked, turn skipped"
            )
            self.last_passes.append(self.to_move)
            self.passes += 1
            self.to_move = self.to_move.opponent()
            self.forced_color = color_at(blocked_at)
