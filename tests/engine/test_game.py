from __future__ import annotations

import pytest

from src.engine.errors import (
    InvalidCoordinatesError,
    InvalidPieceError,
    MoveError,
    MoveNotAllowedError,
)
from src.engine.game import Game
from src.engine.move import Move, parse_move
from src.engine.piece import BLACK, WHITE
from src.engine.position import Position, parse_square


def test_new_game_starts_with_black_by_default() -> None:
    game = Game.new()
    assert game.turn == BLACK
    assert game.move_stack == []
    assert game.checkmate() is False
    assert game.winner() is None


def test_first_turn_is_configurable() -> None:
    assert Game.new("white").turn == WHITE
    with pytest.raises(ValueError):
        Game.new("green")


def test_accepted_move_updates_board_and_flips_turn() -> None:
    game = Game.new()
    game.apply_move(parse_move("e7 e6"))
    assert game.turn == WHITE
    assert game.board.get(parse_square("e6")) is not None
    assert game.board.get(parse_square("e7")) is None
    assert game.move_history() == ["e7 e6"]


def test_off_board_squares_rejected_first() -> None:
    game = Game.new()
    before = game.board.copy()
    # Even an empty source reports coordinates first
    with pytest.raises(InvalidCoordinatesError) as exc:
        game.apply_move(Move(parse_square("e4"), Position(4, 8)))
    assert exc.value.message == "Invalid coordinates."
    assert game.board == before and game.turn == BLACK


def test_empty_source_or_wrong_color_rejected() -> None:
    game = Game.new()
    with pytest.raises(InvalidPieceError) as exc:
        game.apply_move(parse_move("e4 e5"))
    assert exc.value.message == "Invalid move."
    # Black to move; e2 holds a white pawn
    with pytest.raises(InvalidPieceError):
        game.apply_move(parse_move("e2 e3"))
    assert game.turn == BLACK and game.move_stack == []


def test_unreachable_destination_rejected() -> None:
    game = Game.new(WHITE)
    before = game.board.copy()
    with pytest.raises(MoveNotAllowedError) as exc:
        game.apply_move(parse_move("e2 e4"))
    assert exc.value.message == "Move not allowed for piece."
    assert exc.value.code == "move_not_allowed"
    assert isinstance(exc.value, MoveError) and isinstance(exc.value, ValueError)
    assert game.board == before


def test_capture_and_undo() -> None:
    game = Game.from_placement("4k3/8/8/8/8/8/4q3/4K3", WHITE)
    before = game.board.copy()
    game.apply_move(parse_move("e1 e2"))
    assert game.board.get(parse_square("e2")).symbol == "K"  # type: ignore[union-attr]
    assert game.turn == BLACK
    game.undo_move()
    assert game.board == before
    assert game.turn == WHITE
    assert game.move_stack == []


def test_undo_without_moves_raises() -> None:
    with pytest.raises(ValueError):
        Game.new().undo_move()


def test_winner_when_side_to_move_is_stuck() -> None:
    game = Game.from_placement("RBBQKBBR/PPPPPPPP/8/8/8/8/8/k7", WHITE)
    assert game.checkmate() is True
    assert game.winner() == BLACK
    assert game.legal_moves() == []


def test_king_capture_is_an_ordinary_move() -> None:
    game = Game.from_placement("4k3/8/8/8/8/8/4q3/4K3", BLACK)
    game.apply_move(parse_move("e2 e1"))
    assert not game.board.has_king(WHITE)
    assert game.turn == WHITE
    # White has no pieces left at all
    assert game.winner() == BLACK


def test_capturing_the_king_ends_the_game_for_the_capturer() -> None:
    # White keeps a rook that can still move after losing its king
    game = Game.from_placement("4k3/8/8/8/8/8/4q3/R3K3", BLACK)
    assert game.winner() is None
    game.apply_move(parse_move("e2 e1"))
    assert game.turn == WHITE
    assert game.legal_moves() != []
    assert game.checkmate() is True
    assert game.winner() == BLACK
