from __future__ import annotations

import logging
from typing import List

from .board import Board
from .move import Move
from .piece import Piece
from .pieces import destinations
from .position import Position


logger = logging.getLogger(__name__)


def is_valid(piece: Piece, start: Position, end: Position, board: Board) -> bool:
    """Whether ``end`` is in the destination set of ``piece`` on ``start``.

    The caller must already have fetched ``piece`` from ``start``.
    """
    return end in destinations(piece, start, board)


def legal_moves(board: Board, color: str) -> List[Move]:
    """All moves of ``color`` whose destination lies on the board.

    Check is not modelled, so these are pseudo-legal moves. A pawn on its
    last rank generates an off-board push which is left out here because the
    controller can never accept it.
    """
    moves: List[Move] = []
    for pos, piece in board.pieces(color):
        for to in destinations(piece, pos, board):
            if to.on_board():
                moves.append(Move(pos, to))
    return moves


def is_checkmate(board: Board, color: str) -> bool:
    """Termination test used as the game's only end condition.

    Each candidate move of ``color`` is simulated and the board is scanned
    for the mover's king; the first candidate after which the king is
    still present ends the search. While the king is on the board this is
    true exactly when ``color`` has no destination for any of its pieces.
    A side whose king has been captured is terminal whatever else it can
    move. Whether the king is attacked is never examined.

    The board is restored after every simulation, whatever the exit path.
    """
    for pos, piece in board.pieces(color):
        for to in destinations(piece, pos, board):
            with board.simulated(Move(pos, to)):
                if board.has_king(color):
                    return False
    logger.info("no moves left", extra={"color": color})
    return True
