from __future__ import annotations

from typing import List

from ...engine.board import Board
from ...engine.position import BOARD_SIZE, FILES, Position


HEADER = "    " + "   ".join(FILES)
SEPARATOR = "  " + "+---" * BOARD_SIZE + "+"


def render_board(board: Board) -> List[str]:
    """Render ``board`` as text lines, rank 8 at the top.

    Each cell shows the piece symbol or a blank; the last line is empty.
    """
    lines = [HEADER, SEPARATOR]
    for y in range(BOARD_SIZE - 1, -1, -1):
        cells = ""
        for x in range(BOARD_SIZE):
            piece = board.get(Position(x, y))
            cells += " " + (piece.symbol if piece is not None else " ") + " |"
        lines.append(f"{y + 1} |{cells} {y + 1}")
        lines.append(SEPARATOR)
    lines.append(HEADER)
    lines.append("")
    return lines
