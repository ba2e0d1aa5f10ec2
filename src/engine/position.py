from __future__ import annotations

from dataclasses import dataclass


BOARD_SIZE = 8
FILES = "abcdefgh"


@dataclass(frozen=True)
class Position:
    """Board coordinate.

    Attributes:
        x (int): File index, 0 for ``a`` through 7 for ``h``.
        y (int): Rank index, 0 for rank 1 through 7 for rank 8.

    Notes:
    - No bounds check happens here; callers use :func:`in_bounds`.
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def on_board(self) -> bool:
        return in_bounds(self.x, self.y)

    def __str__(self) -> str:
        if not self.on_board():
            return f"({self.x},{self.y})"
        return square_name(self)


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def parse_square(token: str) -> Position:
    """Convert a ``<file><rank>`` token into a position.

    Args:
        token (str): Two characters, a letter then a digit (e.g. ``"e2"``).

    Returns:
        Position: The mapped coordinate. It may lie off the board (``"i9"``
        maps to ``(8, 8)``); rejecting it is the caller's job.

    Raises:
        ValueError: If ``token`` is not a letter followed by a digit.
    """
    if len(token) != 2 or not token[0].isalpha() or not token[1].isdigit():
        raise ValueError(f"invalid square: {token!r}")
    return Position(ord(token[0].lower()) - ord("a"), ord(token[1]) - ord("1"))


def square_name(pos: Position) -> str:
    """Convert an on-board position into algebraic notation.

    Raises:
        ValueError: If ``pos`` lies outside the board.
    """
    if not in_bounds(pos.x, pos.y):
        raise ValueError(f"position off the board: ({pos.x}, {pos.y})")
    return FILES[pos.x] + str(pos.y + 1)
