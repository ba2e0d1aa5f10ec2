from __future__ import annotations


class MoveError(ValueError):
    """A move rejected by the controller; the game state is unchanged.

    Attributes:
        code (str): Stable machine-readable identifier.
        message (str): Text shown to the player.
    """

    code = "illegal_move"
    message = "Illegal move."

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.message)
        self.detail = detail


class InvalidCoordinatesError(MoveError):
    """A square lies outside the 8x8 board."""

    code = "invalid_coordinates"
    message = "Invalid coordinates."


class InvalidPieceError(MoveError):
    """The source square is empty or holds a piece of the other side."""

    code = "invalid_move"
    message = "Invalid move."


class MoveNotAllowedError(MoveError):
    code = "move_not_allowed"
    message = "Move not allowed for piece."
