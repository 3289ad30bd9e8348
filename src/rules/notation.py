"""
Human readable description of a move that was just played.

ex) "White pawn e7 → d8 captures black rook promoting to queen — check."
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared_types import Color, PieceType
from src.rules.pieces import Piece
from src.rules.square import Square


@dataclass(frozen=True)
class MoveRecord:
    """Snapshot of a move once it has been played (piece_type is the type AFTER promotion)"""

    color: Color
    piece_type: PieceType
    origin: Square
    destination: Square
    captured: Optional[Piece] = None
    promotion: Optional[PieceType] = None
    is_check: bool = False
    is_mate: bool = False


def square_name(square: Square) -> str:
    return square.to_algebraic()


def describe_move(record: MoveRecord) -> str:
    text = (
        f"{record.color.value.capitalize()} {record.piece_type.value} "
        f"{square_name(record.origin)} → {square_name(record.destination)}"
    )
    if record.captured is not None:
        text += f" captures {record.captured.color.value} {record.captured.type.value}"
    if record.promotion is not None:
        text += f" promoting to {record.promotion.value}"

    # mate is also a check, only mention the stronger one
    if record.is_mate:
        text += " — checkmate!"
    elif record.is_check:
        text += " — check."
    return text
