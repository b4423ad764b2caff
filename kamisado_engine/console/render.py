"""
Text rendering of the board for the console front-end.

Layout:
        a    b    c    d    e    f    g    h
     8 ...                                    8
     ...
     1 ...                                    1
        a    b    c    d    e    f    g    h

Each cell is five characters wide. With color enabled the cell is painted
with its ANSI background color and the piece marker (X for the human, O for
the engine) is printed in the piece's own color. Without color, empty cells
show a three-letter color name and pieces show "X:bro" style markers.
"""

from kamisado_engine.board.layout import BOARD_SIZE, FILES, Color, Player, color_at
from kamisado_engine.board.state import GameState

RESET = "\033[0m"

# (foreground, background) ANSI codes per color
ANSI_CODES = {
    Color.ORANGE: (91, 101),
    Color.BLUE: (36, 46),
    Color.PURPLE: (34, 44),
    Color.PINK: (95, 105),
    Color.YELLOW: (93, 103),
    Color.RED: (31, 41),
    Color.GREEN: (32, 42),
    Color.BROWN: (90, 100),
}


def _file_header() -> str:
    return "     " + "".join(f"  {f}  " for f in FILES)


def _cell(state: GameState, row: int, col: int, human_player: Player, use_color: bool) -> str:
    cell_color = color_at((row, col))
    piece = state.piece_at((row, col))
    marker = " "
    if piece is not None:
        marker = "X" if piece.player is human_player else "O"

    if not use_color:
        if piece is None:
            return f" {cell_color.label[:3]} "
        return f"{marker}:{piece.color.label[:3]}"

    bg = f"\033[{ANSI_CODES[cell_color][1]}m"
    if piece is None:
        return f"{bg}     {RESET}"
    fg = f"\033[{ANSI_CODES[piece.color][0]}m"
    return f"{bg}  {RESET}{fg}{marker}{RESET}{bg}  {RESET}"


def render_board(state: GameState, human_player: Player = Player.WHITE, use_color: bool = True) -> str:
    """
    Render the position as a multi-line string.

    Args:
        state: Position to draw
        human_player: Side drawn with "X" markers
        use_color: Use ANSI colors

    Returns:
        Board drawing, ending with a newline
    """
    lines = [_file_header()]
    for row in range(BOARD_SIZE):
        rank = BOARD_SIZE - row
        cells = "".join(_cell(state, row, col, human_player, use_color) for col in range(BOARD_SIZE))
        lines.append(f"  {rank}  {cells}  {rank}")
    lines.append(_file_header())
    return "\n".join(lines) + "\n"
