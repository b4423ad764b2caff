"""
Shared fixtures for building positions.

Positions are described as changes to the starting position:
{(player, color): (row, col)} for every piece that is moved.
"""

import pytest

from kamisado_engine.board import BOARD_SIZE, Color, GameState, Player, color_at, home_row


def starting_placement():
    placement = {}
    for player in Player:
        row = home_row(player)
        for col in range(BOARD_SIZE):
            placement[(player, color_at((row, col)))] = (row, col)
    return placement


@pytest.fixture
def build_state():
    """Factory building a GameState from the start position plus relocations."""

    def _build(relocations=None):
        placement = starting_placement()
        placement.update(relocations or {})
        return GameState.from_placement(placement)

    return _build


@pytest.fixture
def boxed_in_state(build_state):
    """White brown in the a1 corner with both forward cells held by White."""
    return build_state({
        (Player.WHITE, Color.RED): (6, 0),
        (Player.WHITE, Color.GREEN): (6, 1),
    })


@pytest.fixture
def open_file_state(build_state):
    """Black orange moved off a8, so White brown can run up the a-file."""
    return build_state({
        (Player.BLACK, Color.ORANGE): (3, 3),
    })
