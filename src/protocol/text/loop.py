from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, Iterator, Optional

from ...engine.errors import InvalidCoordinatesError, MoveError
from ...engine.game import Game
from ...engine.move import Move
from ...engine.position import parse_square
from .render import render_board


Writer = Callable[[str], None]

logger = logging.getLogger(__name__)

COMMANDS = ("quit", "undo", "moves")


def tokenize(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens; a move may span several lines."""
    for raw in lines:
        for tok in raw.split():
            yield tok


class TextGame:
    """Text protocol adapter around the turn controller.

    Notes:
    - Core remains pure; I/O is isolated here behind a writer and a token
      iterator.
    - Rejected input never changes the game; the player is prompted again.
    - Commands accepted in place of a source square: quit, undo, moves.
    """

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game: Game = game if game is not None else Game.new()

    def run(self, tokens: Iterator[str], write: Writer) -> Optional[str]:
        """Play until the game ends, input runs out or ``quit`` is read.

        Returns:
            Optional[str]: The winning color, or None when play stopped
            without a result.
        """
        while True:
            self.print_board(write)
            if self.game.checkmate():
                winner = self.game.winner()
                write(f"Checkmate! {winner} wins.")
                return winner
            write(f"{self.game.turn} to move. Enter move (e.g. e2 e4): ")
            first = next(tokens, None)
            if first is None:
                return None
            if first in COMMANDS:
                if first == "quit":
                    return None
                self.cmd(first, write)
                continue
            second = next(tokens, None)
            if second is None:
                return None
            self.submit(first, second, write)

    def print_board(self, write: Writer) -> None:
        for line in render_board(self.game.board):
            write(line)

    def cmd(self, name: str, write: Writer) -> None:
        if name == "undo":
            try:
                self.game.undo_move()
            except ValueError as e:
                write(f"Cannot undo: {e}.")
        elif name == "moves":
            moves = self.game.legal_moves()
            write(", ".join(m.to_text() for m in moves) if moves else "No moves.")

    def submit(self, a: str, b: str, write: Writer) -> bool:
        """Try the move given by two square tokens; report any rejection."""
        try:
            move = Move(parse_square(a), parse_square(b))
        except ValueError:
            logger.debug("malformed squares %r %r", a, b)
            write(InvalidCoordinatesError.message)
            return False
        try:
            self.game.apply_move(move)
        except MoveError as e:
            write(e.message)
            return False
        return True


def _default_writer(line: str) -> None:
    # Prompts end without a newline so input follows on the same line
    if line.endswith(": "):
        sys.stdout.write(line)
    else:
        sys.stdout.write(line + "\n")
    sys.stdout.flush()


def run_text(game: Optional[Game] = None) -> Optional[str]:
    eng = TextGame(game)
    return eng.run(tokenize(sys.stdin), _default_writer)
