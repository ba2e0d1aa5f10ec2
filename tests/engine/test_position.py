from __future__ import annotations

import pytest

from src.engine.position import Position, in_bounds, parse_square, square_name


def test_positions_compare_and_hash_by_value() -> None:
    assert Position(3, 4) == Position(3, 4)
    assert Position(3, 4) != Position(4, 3)
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_position_is_immutable() -> None:
    p = Position(0, 0)
    with pytest.raises(AttributeError):
        p.x = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "x,y,expected",
    [(0, 0, True), (7, 7, True), (-1, 0, False), (0, 8, False), (8, 3, False), (3, -1, False)],
)
def test_in_bounds(x: int, y: int, expected: bool) -> None:
    assert in_bounds(x, y) is expected


def test_parse_square_maps_file_and_rank() -> None:
    assert parse_square("a1") == Position(0, 0)
    assert parse_square("e2") == Position(4, 1)
    assert parse_square("h8") == Position(7, 7)


def test_parse_square_allows_off_board_coordinates() -> None:
    # Range checking is the caller's job
    p = parse_square("i9")
    assert p == Position(8, 8)
    assert not p.on_board()


@pytest.mark.parametrize("token", ["", "e", "e22", "22", "ee", "-1"])
def test_parse_square_rejects_malformed_tokens(token: str) -> None:
    with pytest.raises(ValueError):
        parse_square(token)


def test_square_name_round_trip_and_off_board() -> None:
    assert square_name(Position(4, 3)) == "e4"
    assert str(Position(4, 3)) == "e4"
    with pytest.raises(ValueError):
        square_name(Position(0, 8))
