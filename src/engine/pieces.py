from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .board import Board, no_conflict
from .piece import BISHOP, KING, KNIGHT, PAWN, QUEEN, ROOK, Piece
from .position import Position, in_bounds


ROOK_DIRS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)
KING_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy
)

Generator = Callable[[Piece, Position, Board], List[Position]]


def _rays(
    color: str, pos: Position, board: Board, dirs: Tuple[Tuple[int, int], ...]
) -> List[Position]:
    """Cast a ray per direction until the edge or the first occupied square.

    An enemy-occupied square is included (a capture) and ends the ray; an
    own-color square ends the ray without being included.
    """
    res: List[Position] = []
    for dx, dy in dirs:
        nx, ny = pos.x + dx, pos.y + dy
        while in_bounds(nx, ny):
            target = Position(nx, ny)
            occupant = board.get(target)
            if occupant is None:
                res.append(target)
            else:
                if occupant.color != color:
                    res.append(target)
                break
            nx += dx
            ny += dy
    return res


def _steps(
    color: str, pos: Position, board: Board, offsets: Tuple[Tuple[int, int], ...]
) -> List[Position]:
    return [
        Position(pos.x + dx, pos.y + dy)
        for dx, dy in offsets
        if no_conflict(board, color, pos.x + dx, pos.y + dy)
    ]


def rook_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    return _rays(piece.color, pos, board, ROOK_DIRS)


def bishop_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    return _rays(piece.color, pos, board, BISHOP_DIRS)


def queen_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    # Rook rays first, then bishop rays
    return _rays(piece.color, pos, board, ROOK_DIRS) + _rays(piece.color, pos, board, BISHOP_DIRS)


def knight_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    return _steps(piece.color, pos, board, KNIGHT_OFFSETS)


def king_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    # No castling and no check safety: a king may step onto an attacked square.
    return _steps(piece.color, pos, board, KING_OFFSETS)


def pawn_destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    """Single forward push onto an empty square plus diagonal captures.

    The forward square is not bounds-checked: a pawn on its last rank still
    yields the (empty) square beyond the edge. No double step, en passant or
    promotion.
    """
    res: List[Position] = []
    step = piece.direction
    fwd = Position(pos.x, pos.y + step)
    if fwd not in board:
        res.append(fwd)
    for dx in (-1, 1):
        diag = Position(pos.x + dx, pos.y + step)
        occupant = board.get(diag)
        if occupant is not None and occupant.color != piece.color:
            res.append(diag)
    return res


_GENERATORS: Dict[str, Generator] = {
    PAWN: pawn_destinations,
    KNIGHT: knight_destinations,
    BISHOP: bishop_destinations,
    ROOK: rook_destinations,
    QUEEN: queen_destinations,
    KING: king_destinations,
}


def destinations(piece: Piece, pos: Position, board: Board) -> List[Position]:
    """Compute the destination set of ``piece`` standing on ``pos``.

    Args:
        piece (Piece): Moving piece; it is not looked up on the board.
        pos (Position): Coordinate the piece moves from.
        board (Board): Current placement; never mutated.

    Returns:
        List[Position]: Reachable squares in generation order. Moves and
        captures are not distinguished.
    """
    return _GENERATORS[piece.kind](piece, pos, board)
