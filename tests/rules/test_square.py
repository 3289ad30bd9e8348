"""Unit tests for /src/rules/square.py"""

from string import ascii_lowercase

import pytest

from src.rules.square import BOARD_DIMENSIONS, Square, all_squares


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{8 - row}")
        for row in range(8)
        for col in range(8)
    ],
)
def test_creating_from_algebraic(row: int, col: int, notation: str) -> None:
    """'a8' is the top left corner (0, 0), 'h1' the bottom right corner (7, 7)"""
    square = Square.from_algebraic(notation)
    assert square.row == row
    assert square.col == col


@pytest.mark.parametrize(
    "square, notation",
    [
        (Square(0, 0), "a8"),
        (Square(7, 7), "h1"),
        (Square(6, 4), "e2"),
        (Square(0, 4), "e8"),
        (Square(4, 3), "d4"),
    ],
)
def test_to_algebraic_notation(square: Square, notation: str) -> None:
    """Rank is 8 - row, file is the column mapped onto a..h"""
    assert square.to_algebraic() == notation


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for col in range(BOARD_DIMENSIONS[1]):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "square", [Square(-1, 0), Square(0, -1), Square(8, 0), Square(0, 8), Square(-1, 9)]
)
def test_square_out_of_bounds(square: Square) -> None:
    assert not square.is_within_bounds()


def test_offset_can_leave_the_board() -> None:
    """Bounds are only checked by whoever generates moves"""
    assert Square(0, 0).offset(1, 2) == Square(1, 2)
    assert not Square(0, 0).offset(-1, 0).is_within_bounds()


def test_all_squares() -> None:
    squares = all_squares()
    assert len(squares) == 64
    assert len(set(squares)) == 64
