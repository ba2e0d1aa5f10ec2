from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .board import Board
from .errors import InvalidCoordinatesError, InvalidPieceError, MoveNotAllowedError
from .move import Move
from .piece import BLACK, opposite, parse_color
from .rules import is_checkmate, is_valid, legal_moves


logger = logging.getLogger(__name__)

# The reference game hands the first move to black.
DEFAULT_FIRST_TURN = BLACK


@dataclass
class Game:
    """Turn controller around a board.

    Responsibility: track whose turn it is, validate and apply moves, keep
    the move history for undo, and report the end of the game.
    """

    board: Board
    turn: str = DEFAULT_FIRST_TURN
    move_stack: List[Move] = field(default_factory=list)

    @classmethod
    def new(cls, first_turn: str = DEFAULT_FIRST_TURN) -> "Game":
        return cls(board=Board.startpos(), turn=parse_color(first_turn))

    @classmethod
    def from_placement(cls, placement: str, turn: str = DEFAULT_FIRST_TURN) -> "Game":
        return cls(board=Board.from_placement(placement), turn=parse_color(turn))

    def to_placement(self) -> str:
        return self.board.to_placement()

    def legal_moves(self) -> List[Move]:
        return legal_moves(self.board, self.turn)

    def apply_move(self, move: Move) -> None:
        """Validate ``move`` for the side to move and apply it.

        Raises:
            InvalidCoordinatesError: If either square is off the board.
            InvalidPieceError: If the source is empty or holds a piece of the
                side not to move.
            MoveNotAllowedError: If the destination is not reachable for the
                piece.
        """
        if not move.on_board():
            logger.debug("rejected move: off board", extra={"turn": self.turn})
            raise InvalidCoordinatesError()
        piece = self.board.get(move.start)
        if piece is None or piece.color != self.turn:
            logger.debug("rejected move %s: wrong piece", move.to_text())
            raise InvalidPieceError()
        if not is_valid(piece, move.start, move.end, self.board):
            logger.debug("rejected move %s: not reachable", move.to_text())
            raise MoveNotAllowedError()
        self.board.make_move(move)
        self.move_stack.append(move)
        logger.debug("%s played %s", self.turn, move.to_text())
        self.turn = opposite(self.turn)

    def undo_move(self) -> None:
        if not self.move_stack:
            raise ValueError("no moves to undo")
        last = self.move_stack.pop()
        self.board.unmake_move(last)
        self.turn = opposite(self.turn)

    # --- State flags for protocols ---
    def checkmate(self) -> bool:
        return is_checkmate(self.board, self.turn)

    def winner(self) -> Optional[str]:
        return opposite(self.turn) if self.checkmate() else None

    def move_history(self) -> List[str]:
        return [m.to_text() for m in self.move_stack]
