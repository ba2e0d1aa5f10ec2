from __future__ import annotations

from dataclasses import dataclass

from .position import Position, parse_square, square_name


@dataclass(frozen=True)
class Move:
    """A request to move whatever stands on ``start`` to ``end``.

    Attributes:
        start (Position): Source square.
        end (Position): Destination square.
    """

    start: Position
    end: Position

    def on_board(self) -> bool:
        return self.start.on_board() and self.end.on_board()

    def to_text(self) -> str:
        """Serialize the move as two algebraic squares.

        Returns:
            str: Move encoded like ``"e2 e4"``.

        Raises:
            ValueError: If either square lies off the board.
        """
        return square_name(self.start) + " " + square_name(self.end)


def parse_move(text: str) -> Move:
    """Parse a move written as two squares.

    Args:
        text (str): ``"e2 e4"`` (whitespace separated) or ``"e2e4"``.

    Returns:
        Move: Parsed move. Coordinates are not bounds-checked.

    Raises:
        ValueError: If the text does not hold exactly two square tokens.
    """
    parts = text.split()
    if len(parts) == 1 and len(parts[0]) == 4:
        parts = [parts[0][:2], parts[0][2:]]
    if len(parts) != 2:
        raise ValueError(f"invalid move: {text!r}")
    return Move(parse_square(parts[0]), parse_square(parts[1]))
