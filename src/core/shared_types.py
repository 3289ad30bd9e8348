"""
Type definitions used across layers
"""

from enum import StrEnum


class Outcome(StrEnum):
    """State of the game from the point of view of the side to move."""

    ONGOING = "ongoing"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


def opponent(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK
