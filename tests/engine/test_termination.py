"""Termination check.

The rule here is not chess checkmate: a side is finished exactly when none
of its pieces has a destination. Attacks on the king are never examined.
"""

from __future__ import annotations

from src.engine.board import Board
from src.engine.piece import BLACK, WHITE
from src.engine.rules import is_checkmate


BOXED_WHITE = "RBBQKBBR/PPPPPPPP/8/8/8/8/8/k7"


def test_start_position_is_ongoing_for_both_sides() -> None:
    b = Board.startpos()
    assert is_checkmate(b, WHITE) is False
    assert is_checkmate(b, BLACK) is False


def test_boxed_in_side_is_terminal_without_any_attack() -> None:
    # White walled in on the top two ranks by its own pieces (no knights);
    # the black king is nowhere near.
    b = Board.from_placement(BOXED_WHITE)
    assert is_checkmate(b, WHITE) is True
    assert is_checkmate(b, BLACK) is False


def test_real_checkmate_is_not_detected_while_moves_exist() -> None:
    # Back-rank mate in real chess: the white king still has pseudo-legal steps
    b = Board.from_placement("4r2k/8/8/8/8/8/5PPP/6K1")
    assert is_checkmate(b, WHITE) is False


def test_side_with_moves_but_king_in_danger_is_ongoing() -> None:
    # White king may step next to the black queen; that still counts as a move
    b = Board.from_placement("7k/8/8/8/8/8/1q6/K7")
    assert is_checkmate(b, WHITE) is False


def test_no_pieces_means_terminal() -> None:
    b = Board.from_placement("7k/8/8/8/8/8/8/8")
    assert is_checkmate(b, WHITE) is True


def test_side_without_king_is_terminal_even_with_moves() -> None:
    # The rook can move, but no candidate leaves a white king on the board
    b = Board.from_placement("7k/8/8/8/8/8/8/R7")
    assert is_checkmate(b, WHITE) is True
    assert is_checkmate(b, BLACK) is False


def test_board_restored_after_check() -> None:
    for placement in (BOXED_WHITE, "4r2k/8/8/8/8/8/5PPP/6K1"):
        b = Board.from_placement(placement)
        before = b.copy()
        is_checkmate(b, WHITE)
        is_checkmate(b, BLACK)
        assert b == before
