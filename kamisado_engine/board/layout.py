"""
Board Layout and Coordinates

This module holds the fixed color layout of the Kamisado board and the
coordinate helpers built on it.

Board Orientation:
    - Row 0 = Rank 8 (Black's home row, White's goal row)
    - Row 7 = Rank 1 (White's home row, Black's goal row)
    - Column 0 = A-file
    - Column 7 = H-file

The layout is a Latin square: every color appears exactly once in each row
and each column. This is what makes "the piece of color C" unambiguous for
each player.
"""

from enum import Enum, IntEnum
from typing import Tuple

import numpy as np

BOARD_SIZE = 8

Coord = Tuple[int, int]


class Color(IntEnum):
    """The eight cell/piece colors."""
    ORANGE = 0
    BLUE = 1
    PURPLE = 2
    PINK = 3
    YELLOW = 4
    RED = 5
    GREEN = 6
    BROWN = 7

    @property
    def label(self) -> str:
        return self.name.lower()


class Player(Enum):
    """
    The two sides.

    WHITE starts on row 7 and races toward row 0.
    BLACK starts on row 0 and races toward row 7.
    """
    WHITE = 0
    BLACK = 1

    def opponent(self) -> "Player":
        return Player.BLACK if self is Player.WHITE else Player.WHITE


_O, _B, _U, _P, _Y, _R, _G, _N = (
    Color.ORANGE,
    Color.BLUE,
    Color.PURPLE,
    Color.PINK,
    Color.YELLOW,
    Color.RED,
    Color.GREEN,
    Color.BROWN,
)

#fmt: off
LAYOUT = np.array([
    [_O, _B, _U, _P, _Y, _R, _G, _N],  # Rank 8 (Black home)
    [_R, _O, _P, _G, _B, _Y, _N, _U],  # Rank 7
    [_G, _P, _O, _R, _U, _N, _Y, _B],  # Rank 6
    [_P, _U, _B, _O, _N, _G, _R, _Y],  # Rank 5
    [_Y, _R, _G, _N, _O, _B, _U, _P],  # Rank 4
    [_B, _Y, _N, _U, _R, _O, _P, _G],  # Rank 3
    [_U, _N, _Y, _B, _G, _P, _O, _R],  # Rank 2
    [_N, _G, _R, _Y, _P, _U, _B, _O],  # Rank 1 (White home)
], dtype=np.int8)
#fmt: on
LAYOUT.setflags(write=False)

FILES = "abcdefgh"


def is_in_bounds(coord: Coord) -> bool:
    """Check whether a (row, col) pair lies on the board."""
    row, col = coord
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def color_at(coord: Coord) -> Color:
    """
    Get the color of a board cell.

    Args:
        coord: In-bounds (row, col) pair

    Returns:
        The cell's Color
    """
    row, col = coord
    return Color(int(LAYOUT[row, col]))


def home_row(player: Player) -> int:
    return BOARD_SIZE - 1 if player is Player.WHITE else 0


def goal_row(player: Player) -> int:
    return 0 if player is Player.WHITE else BOARD_SIZE - 1


def forward_step(player: Player) -> int:
    """Row increment that moves a piece of this player toward its goal row."""
    return -1 if player is Player.WHITE else 1


def coord_to_square(coord: Coord) -> str:
    """
    Convert (row, col) coordinates to an algebraic square label.

    Args:
        coord: (row, col) where row 0 is rank 8 and col 0 is the A-file

    Returns:
        Label such as "a1" or "h8"
    """
    row, col = coord
    return f"{FILES[col]}{BOARD_SIZE - row}"


def square_to_coord(square: str) -> Coord:
    """
    Convert an algebraic square label to (row, col) coordinates.

    Args:
        square: Label such as "d4" (case-insensitive, surrounding spaces ignored)

    Returns:
        (row, col) tuple

    Raises:
        ValueError: If the label is not a square of the board
    """
    text = square.strip().lower()
    if len(text) != 2 or text[0] not in FILES or not text[1].isdigit():
        raise ValueError(f"Invalid square: {square!r}")

    rank = int(text[1])
    if not 1 <= rank <= BOARD_SIZE:
        raise ValueError(f"Invalid square: {square!r}")

    return BOARD_SIZE - rank, FILES.index(text[0])
