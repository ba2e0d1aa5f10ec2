from __future__ import annotations

from dataclasses import dataclass


WHITE = "white"
BLACK = "black"
COLORS = (WHITE, BLACK)

# Piece kinds, identified by their white symbol
PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = "P", "N", "B", "R", "Q", "K"
KINDS = (PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING)

# Officer order on the back rank, file a to file h
BACK_RANK = (ROOK, KNIGHT, BISHOP, QUEEN, KING, BISHOP, KNIGHT, ROOK)


def opposite(color: str) -> str:
    if color not in COLORS:
        raise ValueError(f"invalid color: {color!r}")
    return BLACK if color == WHITE else WHITE


def parse_color(value: str) -> str:
    """Normalize a user-supplied color name (``"White"``, ``"b"``...)."""
    v = value.strip().lower()
    if v in ("w", WHITE):
        return WHITE
    if v in ("b", BLACK):
        return BLACK
    raise ValueError(f"invalid color: {value!r}")


@dataclass(frozen=True)
class Piece:
    """A colored piece of one of the six kinds.

    Pieces carry no coordinate; their location is wherever the board maps
    them.
    """

    color: str
    kind: str

    def __post_init__(self) -> None:
        if self.color not in COLORS:
            raise ValueError(f"invalid color: {self.color!r}")
        if self.kind not in KINDS:
            raise ValueError(f"invalid piece kind: {self.kind!r}")

    @property
    def symbol(self) -> str:
        """Display letter: uppercase for white, lowercase for black."""
        return self.kind if self.color == WHITE else self.kind.lower()

    @property
    def direction(self) -> int:
        """Forward rank step for pawns: +1 for white, -1 for black."""
        return 1 if self.color == WHITE else -1

    @classmethod
    def from_symbol(cls, ch: str) -> "Piece":
        if len(ch) != 1 or ch.upper() not in KINDS:
            raise ValueError(f"invalid piece symbol: {ch!r}")
        return cls(WHITE if ch.isupper() else BLACK, ch.upper())

    def __str__(self) -> str:
        return self.symbol
