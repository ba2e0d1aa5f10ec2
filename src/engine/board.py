from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from .move import Move
from .piece import BACK_RANK, BLACK, KING, PAWN, WHITE, Piece
from .position import BOARD_SIZE, Position, in_bounds


STARTPOS_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


@dataclass
class Board:
    """Sparse piece placement keyed by :class:`Position`.

    Notes:
    - A missing key is an empty square; at most one piece per square.
    - Nothing enforces one king per color; a king can be captured like any
      other piece.
    - ``make_move``/``unmake_move`` keep a history stack of captured pieces
      so a move can be reverted exactly.
    """

    squares: Dict[Position, Piece] = field(default_factory=dict)
    _history: List[Optional[Piece]] = field(default_factory=list, repr=False, compare=False)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def startpos(cls) -> "Board":
        """Create a board holding the standard starting position.

        Returns:
            Board: White pawns on rank index 1 and officers on rank index 0,
            black pawns on rank index 6 and officers on rank index 7.
        """
        board = cls()
        for x in range(BOARD_SIZE):
            board.place(Position(x, 1), Piece(WHITE, PAWN))
            board.place(Position(x, 6), Piece(BLACK, PAWN))
        for x, kind in enumerate(BACK_RANK):
            board.place(Position(x, 0), Piece(WHITE, kind))
            board.place(Position(x, 7), Piece(BLACK, kind))
        return board

    @classmethod
    def from_placement(cls, placement: str) -> "Board":
        """Create a board from a FEN piece-placement field.

        Args:
            placement (str): Ranks 8 down to 1 separated by ``/``; digits
                stand for runs of empty squares (e.g. ``"8/8/8/8/8/8/8/R7"``).

        Returns:
            Board: Board holding the described pieces.

        Raises:
            ValueError: If the field does not describe exactly 8 ranks of 8
                squares or contains an unknown piece letter.
        """
        if not placement or not isinstance(placement, str):
            raise ValueError("placement must be a non-empty string")
        ranks = placement.strip().split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError("placement must have 8 ranks")
        board = cls()
        for y, rank in zip(range(BOARD_SIZE - 1, -1, -1), ranks):
            x = 0
            for ch in rank:
                if ch.isdigit():
                    n = int(ch)
                    if n < 1 or n > BOARD_SIZE:
                        raise ValueError("invalid empty count in placement rank")
                    x += n
                    continue
                if x >= BOARD_SIZE:
                    raise ValueError("too many squares in placement rank")
                board.place(Position(x, y), Piece.from_symbol(ch))
                x += 1
            if x != BOARD_SIZE:
                raise ValueError(f"placement rank {y + 1} does not cover 8 squares")
        return board

    def to_placement(self) -> str:
        """Serialize on-board pieces as a FEN piece-placement field."""
        rows: List[str] = []
        for y in range(BOARD_SIZE - 1, -1, -1):
            row = ""
            empty = 0
            for x in range(BOARD_SIZE):
                piece = self.squares.get(Position(x, y))
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.symbol
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # --- Element access ---
    def get(self, pos: Position) -> Optional[Piece]:
        return self.squares.get(pos)

    def __contains__(self, pos: object) -> bool:
        return pos in self.squares

    def __len__(self) -> int:
        return len(self.squares)

    def items(self) -> List[Tuple[Position, Piece]]:
        # Snapshot so callers may mutate the board while iterating
        return list(self.squares.items())

    def pieces(self, color: str) -> List[Tuple[Position, Piece]]:
        return [(pos, p) for pos, p in self.squares.items() if p.color == color]

    def has_king(self, color: str) -> bool:
        return any(p.kind == KING and p.color == color for p in self.squares.values())

    def place(self, pos: Position, piece: Piece) -> None:
        self.squares[pos] = piece

    def remove(self, pos: Position) -> Optional[Piece]:
        return self.squares.pop(pos, None)

    def copy(self) -> "Board":
        """Copy of the placement without move history."""
        return Board(squares=dict(self.squares))

    # --- Mutation ---
    def make_move(self, move: Move) -> Optional[Piece]:
        """Move the piece on ``move.start`` to ``move.end``.

        The destination is overwritten (capturing any occupant) and the source
        is cleared. No legality check is performed.

        Args:
            move (Move): Move to apply; ``move.start`` must hold a piece.

        Returns:
            Optional[Piece]: The captured piece, if any.

        Raises:
            ValueError: If ``move.start`` is empty.
        """
        piece = self.squares.get(move.start)
        if piece is None:
            raise ValueError(f"no piece on {move.start}")
        captured = self.squares.get(move.end)
        self.squares[move.end] = piece
        del self.squares[move.start]
        self._history.append(captured)
        return captured

    def unmake_move(self, move: Move) -> None:
        """Undo the last :meth:`make_move`, restoring any captured piece."""
        if not self._history:
            raise ValueError("no move to unmake")
        captured = self._history.pop()
        piece = self.squares.pop(move.end)
        self.squares[move.start] = piece
        if captured is not None:
            self.squares[move.end] = captured

    @contextmanager
    def simulated(self, move: Move) -> Iterator["Board"]:
        """Apply ``move`` for the duration of a ``with`` block.

        The move is reverted on every exit path, including early returns
        and exceptions raised inside the block.
        """
        self.make_move(move)
        try:
            yield self
        finally:
            self.unmake_move(move)


def no_conflict(board: Board, color: str, x: int, y: int) -> bool:
    """Whether a non-sliding piece of ``color`` may land on ``(x, y)``.

    True iff the square is on the board and either empty or held by the
    opposite color.
    """
    if not in_bounds(x, y):
        return False
    occupant = board.get(Position(x, y))
    return occupant is None or occupant.color != color
