from __future__ import annotations

from .board import Board
from .piece import opposite
from .rules import legal_moves


def perft(board: Board, color: str, depth: int) -> int:
    """Count leaf nodes of the move tree rooted at ``board``.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over every child reached by a move of
      ``color`` of perft(child, opposite(color), depth - 1).

    Moves come from :func:`legal_moves`, so check is ignored and captured
    kings do not end a line. The board is walked with make/unmake and is
    unchanged on return.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for m in legal_moves(board, color):
        with board.simulated(m):
            nodes += perft(board, opposite(color), depth - 1)
    return nodes
