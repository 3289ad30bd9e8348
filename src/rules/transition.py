"""
Applying a move: the only operation producing a new position.

NOTE: The move is expected to come from the latest `legal_moves()` call for the same board and origin.
This is not checked again here.
"""

from src.rules.board import Board
from src.rules.moves import CandidateMove
from src.rules.square import Square


def apply_move(board: Board, origin: Square, move: CandidateMove) -> Board:
    """
    New board where:
    1. the origin is empty
    2. the moving piece (marked as moved, and promoted if needed) stands on the destination
    3. whatever stood on the destination is gone (captured)

    The board passed in is not modified.
    """
    moving_piece = board.piece(origin)
    assert moving_piece is not None, f"No piece to move on {origin.to_algebraic()}"

    arriving_piece = moving_piece.moved()
    if move.promotion is not None:
        arriving_piece = arriving_piece.promoted_to(move.promotion)

    return board.with_changes({origin: None, move.destination: arriving_piece})
