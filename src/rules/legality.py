"""Legal moves: the candidate moves that do not leave your own king under attack"""

from src.core.shared_types import Color, opponent
from src.rules.attacks import find_king, is_square_attacked
from src.rules.board import Board
from src.rules.moves import CandidateMove, pseudo_legal_moves
from src.rules.square import Square
from src.rules.transition import apply_move


def legal_moves(board: Board, square: Square, color: Color) -> list[CandidateMove]:
    """
    List of legal moves for the piece on `square`, played by `color`.
    ----

    Empty when the square is off the board, empty, or holds a piece of the other color.

    1. generate candidate moves using the movement rules of the piece
    2. remove every move that puts (or leaves) you in check
    """
    piece = board.piece(square)
    if piece is None or piece.color != color:
        return []

    return [
        move
        for move in pseudo_legal_moves(board, square)
        if not is_putting_yourself_in_check(board, square, move, color)
    ]


def is_putting_yourself_in_check(
    board: Board, origin: Square, move: CandidateMove, color: Color
) -> bool:
    """Return True if the move leaves the king of `color` under attack

    plan:
    1. make the candidate move on a copy of the board
    2. determine if king is in check on the new board
    """
    simulated = apply_move(board, origin, move)
    king_square = find_king(simulated, color)
    if king_square is None:
        return False
    return is_square_attacked(simulated, king_square, opponent(color))
