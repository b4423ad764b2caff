"""
Rules Façade

The functions a game driver needs to run a Kamisado game: legality checks,
blocked-piece detection, win detection and move application. Drivers never
touch GameState.move_piece() directly.
"""

from typing import Optional

from kamisado_engine.board.layout import BOARD_SIZE, Color, Coord, Player, color_at, goal_row
from kamisado_engine.board.state import GameState
from kamisado_engine.rules.moves import possible_moves


class IllegalMoveError(ValueError):
    """Raised when a move that is not in the legal set is applied."""


def is_legal_move(state: GameState, player: Player, color: Color, destination: Coord) -> bool:
    """Check whether the player's piece of this color may move to destination."""
    return tuple(destination) in possible_moves(state, player, color)


def is_blocked(state: GameState, player: Player, color: Color) -> bool:
    """Check whether the player's piece of this color has nowhere to go."""
    return not possible_moves(state, player, color)


def is_winning(state: GameState, player: Player) -> bool:
    """
    Check whether any of the player's pieces stands on its goal row.

    Args:
        state: Position to inspect
        player: Side to check

    Returns:
        bool: True if the player has won
    """
    row = goal_row(player)
    for col in range(BOARD_SIZE):
        piece = state.piece_at((row, col))
        if piece is not None and piece.player is player:
            return True
    return False


def winner(state: GameState) -> Optional[Player]:
    for player in Player:
        if is_winning(state, player):
            return player
    return None


def next_forced_color(destination: Coord) -> Color:
    """The opponent must next move its piece of the color just landed on."""
    return color_at(destination)


def apply_move(state: GameState, player: Player, color: Color, destination: Coord) -> None:
    """
    Play a move on the live state.

    Raises:
        IllegalMoveError: If the destination is not a legal move for that piece
    """
    if not is_legal_move(state, player, color, destination):
        raise IllegalMoveError(
            f"Illegal move for {player.name} {color.label}: {tuple(destination)}"
        )
    state.move_piece(player, color, tuple(destination))
