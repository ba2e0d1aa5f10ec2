from __future__ import annotations

import pytest

from src.engine.board import Board, STARTPOS_PLACEMENT
from src.engine.piece import BACK_RANK, BLACK, KING, PAWN, WHITE, Piece
from src.engine.position import Position


def test_startpos_layout() -> None:
    b = Board.startpos()
    assert len(b) == 32
    for x in range(8):
        assert b.get(Position(x, 1)) == Piece(WHITE, PAWN)
        assert b.get(Position(x, 6)) == Piece(BLACK, PAWN)
        assert b.get(Position(x, 0)) == Piece(WHITE, BACK_RANK[x])
        assert b.get(Position(x, 7)) == Piece(BLACK, BACK_RANK[x])
        for y in range(2, 6):
            assert b.get(Position(x, y)) is None
    assert b.get(Position(4, 0)) == Piece(WHITE, KING)
    assert b.get(Position(4, 0)).symbol == "K"  # type: ignore[union-attr]
    assert b.get(Position(4, 7)).symbol == "k"  # type: ignore[union-attr]


def test_startpos_round_trip() -> None:
    assert Board.startpos().to_placement() == STARTPOS_PLACEMENT
    assert Board.from_placement(STARTPOS_PLACEMENT) == Board.startpos()


@pytest.mark.parametrize(
    "placement",
    [
        "r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R",
        "8/8/8/8/8/8/8/8",
        "4k3/8/8/8/8/8/8/R3K3",
    ],
)
def test_round_trip_various_positions(placement: str) -> None:
    assert Board.from_placement(placement).to_placement() == placement


@pytest.mark.parametrize(
    "placement",
    [
        "",  # empty
        "8/8/8/8/8/8/8",  # not enough ranks
        "9/8/8/8/8/8/8/8",  # bad empty count
        "8/8/8/8/8/8/8/7",  # short rank
        "8/8/8/8/8/8/8/PPPPPPPPP",  # too many squares
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX",  # bad piece
    ],
)
def test_invalid_placement_raises(placement: str) -> None:
    with pytest.raises(ValueError):
        Board.from_placement(placement)


def test_piece_symbols_and_direction() -> None:
    assert Piece.from_symbol("n") == Piece(BLACK, "N")
    assert Piece(WHITE, PAWN).direction == 1
    assert Piece(BLACK, PAWN).direction == -1
    with pytest.raises(ValueError):
        Piece.from_symbol("x")
    with pytest.raises(ValueError):
        Piece("red", PAWN)
