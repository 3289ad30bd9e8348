"""
Checks for the end of the game, for the side that is about to move.

Everything is recomputed from the board: nothing is stored on the board itself.
"""

from src.core.shared_types import Color, Outcome, opponent
from src.rules.attacks import find_king, is_square_attacked
from src.rules.board import Board
from src.rules.legality import legal_moves


def is_in_check(board: Board, color: Color) -> bool:
    """The king of `color` is attacked by the opponent. Without a king on the board you are never in check."""
    king_square = find_king(board, color)
    if king_square is None:
        return False
    return is_square_attacked(board, king_square, opponent(color))


def has_any_move(board: Board, color: Color) -> bool:
    """Stops at the first piece that has a legal move"""
    return any(
        legal_moves(board, square, color) for square in board.locate_color(color)
    )


def is_checkmate(board: Board, color: Color) -> bool:
    return is_in_check(board, color) and not has_any_move(board, color)


def is_stalemate(board: Board, color: Color) -> bool:
    return not is_in_check(board, color) and not has_any_move(board, color)


def classify(board: Board, color: Color) -> Outcome:
    if has_any_move(board, color):
        return Outcome.ONGOING
    return Outcome.CHECKMATE if is_in_check(board, color) else Outcome.STALEMATE
