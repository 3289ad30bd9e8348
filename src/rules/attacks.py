"""
Is a square under attack?

There is no precomputed attack map: every piece of the attacking color is asked for its moves in attack mode,
and we check if the square shows up as one of the destinations.
"""

from typing import Optional

from src.core.shared_types import Color, PieceType
from src.rules.board import Board
from src.rules.moves import pseudo_legal_moves
from src.rules.square import Square


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    for attacker_square in board.locate_color(by_color):
        attacks = pseudo_legal_moves(board, attacker_square, for_attack=True)
        if any(move.destination == square for move in attacks):
            return True
    return False


def find_king(board: Board, color: Color) -> Optional[Square]:
    """There is at most one king of each color. Positions without one are allowed (they are never in check)."""
    kings = board.locate_pieces(PieceType.KING, color)
    return kings[0] if kings else None
