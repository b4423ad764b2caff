"""
Game State

The GameState owns the two views of the position:
    - grid: 8x8 cells, each either None or the Piece standing on it
    - locations: for each player, a table indexed by Color giving the
      coordinates of that player's piece of that color

The location table is the authoritative index, the grid is kept in sync on
every mutation. Neither is exposed for direct writing; move_piece() is the
only mutator.

Search explores hypothetical branches on clones, so the live state is only
touched by moves that were actually played.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from kamisado_engine.board.layout import (
    BOARD_SIZE,
    Color,
    Coord,
    Player,
    color_at,
    coord_to_square,
    home_row,
    is_in_bounds,
)


@dataclass(frozen=True)
class Piece:
    """A piece is identified by its owner and its (immutable) color."""
    player: Player
    color: Color

    def __repr__(self) -> str:
        side = "W" if self.player is Player.WHITE else "B"
        return f"{side}:{self.color.label}"


class GameState:
    """
    Mutable Kamisado position.

    Attributes:
        _grid: Row-major 8x8 list of Optional[Piece]
        _locations: Per-player list of coordinates, indexed by Color
    """

    __slots__ = ("_grid", "_locations")

    def __init__(self, grid: List[List[Optional[Piece]]], locations: Dict[Player, List[Coord]]):
        self._grid = grid
        self._locations = locations

    @classmethod
    def initial(cls) -> "GameState":
        """
        Create the starting position.

        White fills row 7 and Black fills row 0; each piece starts on the
        cell of its own color.
        """
        placement = {}
        for player in Player:
            row = home_row(player)
            for col in range(BOARD_SIZE):
                placement[(player, color_at((row, col)))] = (row, col)
        return cls.from_placement(placement)

    @classmethod
    def from_placement(cls, placement: Mapping[Tuple[Player, Color], Coord]) -> "GameState":
        """
        Build a position from an explicit piece placement.

        Args:
            placement: Mapping (player, color) -> (row, col) for all 16 pieces

        Returns:
            New GameState

        Raises:
            ValueError: If a piece is missing, off the board, or shares a cell
        """
        missing = [
            (player.name, color.label)
            for player in Player
            for color in Color
            if (player, color) not in placement
        ]
        if missing:
            raise ValueError(f"Placement is missing pieces: {missing}")

        grid: List[List[Optional[Piece]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        locations: Dict[Player, List[Coord]] = {}

        for player in Player:
            table = []
            for color in Color:
                coord = tuple(placement[(player, color)])
                if not is_in_bounds(coord):
                    raise ValueError(f"Piece {player.name} {color.label} is off the board: {coord}")
                row, col = coord
                if grid[row][col] is not None:
                    raise ValueError(
                        f"Multiple pieces on square {coord_to_square(coord)}"
                    )
                grid[row][col] = Piece(player, color)
                table.append((row, col))
            locations[player] = table

        return cls(grid, locations)

    def locate(self, player: Player, color: Color) -> Coord:
        """Current cell of the given player's piece of the given color."""
        return self._locations[player][color]

    def piece_at(self, coord: Coord) -> Optional[Piece]:
        row, col = coord
        return self._grid[row][col]

    def is_empty(self, coord: Coord) -> bool:
        row, col = coord
        return self._grid[row][col] is None

    def pieces(self, player: Player) -> Iterator[Tuple[Color, Coord]]:
        """Yield (color, coord) for each of the player's pieces, in Color order."""
        for color in Color:
            yield color, self._locations[player][color]

    def move_piece(self, player: Player, color: Color, destination: Coord) -> None:
        """
        Relocate a piece.

        No legality check is made here: moving onto an occupied cell breaks
        the one-piece-per-cell invariant. Callers go through the rules layer.
        """
        src_row, src_col = self._locations[player][color]
        dst_row, dst_col = destination

        piece = self._grid[src_row][src_col]
        self._grid[src_row][src_col] = None
        self._grid[dst_row][dst_col] = piece
        self._locations[player][color] = (dst_row, dst_col)

    def clone(self) -> "GameState":
        """
        Independent copy for search branches.

        Rows and location tables are copied; Piece values are immutable and
        shared.
        """
        return GameState(
            [row[:] for row in self._grid],
            {player: table[:] for player, table in self._locations.items()},
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        parts = []
        for player in Player:
            squares = " ".join(coord_to_square(coord) for _, coord in self.pieces(player))
            parts.append(f"{player.name}=[{squares}]")
        return f"GameState({', '.join(parts)})"
