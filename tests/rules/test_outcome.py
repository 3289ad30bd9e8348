"""Unit tests for /src/rules/outcome.py"""

import pytest

from src.core.shared_types import Color, Outcome
from src.rules.board import Board
from src.rules.legality import legal_moves
from src.rules.outcome import (
    classify,
    has_any_move,
    is_checkmate,
    is_in_check,
    is_stalemate,
)
from src.rules.square import Square
from src.rules.transition import apply_move

# black king h8, white king f7, white queen g6. Black to move
STALEMATE = "/".join(["7k", "5K2", "6Q1", "8", "8", "8", "8", "8"])
# black king a8 and rook e8 against the white king e1. White to move
CHECK = "/".join(["k3r3", "8", "8", "8", "8", "8", "8", "4K3"])


def play(board: Board, moves: list[str]) -> Board:
    """Play a list of moves like 'e2e4', alternating colors starting with white. Only legal moves are accepted."""
    color = Color.WHITE
    for move in moves:
        origin = Square.from_algebraic(move[:2])
        destination = Square.from_algebraic(move[2:4])
        (chosen,) = [
            candidate
            for candidate in legal_moves(board, origin, color)
            if candidate.destination == destination
        ]
        board = apply_move(board, origin, chosen)
        color = Color.BLACK if color == Color.WHITE else Color.WHITE
    return board


def test_starting_position_is_ongoing() -> None:
    board = Board.starting_position()
    assert not is_in_check(board, Color.WHITE)
    assert has_any_move(board, Color.WHITE)
    assert classify(board, Color.WHITE) == Outcome.ONGOING


def test_fools_mate() -> None:
    board = play(Board.starting_position(), ["f2f3", "e7e5", "g2g4", "d8h4"])
    assert is_in_check(board, Color.WHITE)
    assert not has_any_move(board, Color.WHITE)
    assert is_checkmate(board, Color.WHITE)
    assert not is_stalemate(board, Color.WHITE)
    assert classify(board, Color.WHITE) == Outcome.CHECKMATE


def test_check_but_not_mate() -> None:
    board = Board.from_fen(CHECK)
    assert is_in_check(board, Color.WHITE)
    assert not is_in_check(board, Color.BLACK)
    assert classify(board, Color.WHITE) == Outcome.ONGOING


def test_stalemate() -> None:
    board = Board.from_fen(STALEMATE)
    assert not is_in_check(board, Color.BLACK)
    assert not has_any_move(board, Color.BLACK)
    assert is_stalemate(board, Color.BLACK)
    assert not is_checkmate(board, Color.BLACK)
    assert classify(board, Color.BLACK) == Outcome.STALEMATE

    # the other side is not stuck at all
    assert classify(board, Color.WHITE) == Outcome.ONGOING


def test_back_rank_mate() -> None:
    """King boxed in by its own pawns"""
    board = Board.from_fen("/".join(["R5k1", "5ppp", "8", "8", "8", "8", "8", "6K1"]))
    assert classify(board, Color.BLACK) == Outcome.CHECKMATE


@pytest.mark.parametrize("color", list(Color))
def test_no_king_is_never_in_check(color: Color) -> None:
    board = Board.empty()
    assert not is_in_check(board, color)
    # nothing to move at all
    assert classify(board, color) == Outcome.STALEMATE
