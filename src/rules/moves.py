"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define candidate move sets for each piece type.

These are pseudo-legal moves: whether a move leaves your own king under attack is checked later (see legality.py).

The same rules answer the attack question when called with `for_attack=True`.
The only piece that attacks differently from how it moves is the pawn.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.core.shared_types import Color, PieceType
from src.rules.pieces import Piece
from src.rules.square import BOARD_DIMENSIONS, Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class CandidateMove:
    """
    A move of the piece standing on the square that was queried.
    The origin is not stored: it is always the square the moves were generated for.
    """

    destination: Square
    capture: bool = False
    promotion: Optional[PieceType] = None


# --- DIRECTIONS (row, col) ---
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]


# --- PAWN GEOMETRY ---
def pawn_direction(color: Color) -> int:
    """White moves UP the board (towards row 0), black moves DOWN"""
    return -1 if color == Color.WHITE else 1


def pawn_start_row(color: Color) -> int:
    return BOARD_DIMENSIONS[0] - 2 if color == Color.WHITE else 1


def promotion_row(color: Color) -> int:
    return 0 if color == Color.WHITE else BOARD_DIMENSIONS[0] - 1


def _promotion_for(target_square: Square, color: Color) -> Optional[PieceType]:
    """Promotion is always to a queen"""
    return PieceType.QUEEN if target_square.row == promotion_row(color) else None


# --- MOVEMENT RULES ---
def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[CandidateMove]:
    """
    Raycasting algorithm
    -----

    ---
    The main trick we use to check the 'line of sight of a piece'.
    We define move directions and move along them until we hit another piece or
    the edge of the board.
    """
    player_piece = board.piece(square)
    assert player_piece is not None

    moves: list[CandidateMove] = []
    for d_row, d_col in directions:
        target_square = square
        while True:
            target_square = target_square.offset(d_row, d_col)
            if not target_square.is_within_bounds():
                break

            piece_found = board.piece(target_square)
            if piece_found is not None:
                # only need to add the first occupied square found if it is the opponent's: then it can be captured.
                if piece_found.color != player_piece.color:
                    moves.append(CandidateMove(target_square, capture=True))
                break

            moves.append(CandidateMove(target_square))
    return moves


def single_step_move(
    square: Square, board: Board, deltas: list[Vector]
) -> list[CandidateMove]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just can move a single step along a direction"""
    player_piece = board.piece(square)
    assert player_piece is not None

    moves: list[CandidateMove] = []
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue

        piece_found = board.piece(target_square)
        if piece_found is None:
            moves.append(CandidateMove(target_square))
        elif piece_found.color != player_piece.color:
            moves.append(CandidateMove(target_square, capture=True))

    return moves


def candidate_pawn_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """
    A pawn:
    - moves by a single square forward.
    - It can move by two in their first move (so when on their starting row)
    - takes diagonally
    - promotes to a queen when reaching the far side of the board

    When asking for attacks, the pawn threatens both diagonal squares, whether something stands there or not.
    It never threatens the squares in front of it.
    """
    pawn = board.piece(square)
    assert pawn is not None
    direction = pawn_direction(pawn.color)

    moves: list[CandidateMove] = []
    one_step = square.offset(direction, 0)
    if (
        not for_attack
        and one_step.is_within_bounds()
        and board.piece(one_step) is None
    ):
        moves.append(
            CandidateMove(one_step, promotion=_promotion_for(one_step, pawn.color))
        )

        # double push: only from the starting row, and the square in between is already known to be empty
        two_steps = square.offset(2 * direction, 0)
        if (
            square.row == pawn_start_row(pawn.color)
            and two_steps.is_within_bounds()
            and board.piece(two_steps) is None
        ):
            moves.append(CandidateMove(two_steps))

    # pawns take diagonally:
    for d_col in [-1, 1]:
        target_square = square.offset(direction, d_col)
        if not target_square.is_within_bounds():
            continue

        target = board.piece(target_square)
        is_opponent_piece = target is not None and target.color != pawn.color
        if for_attack or is_opponent_piece:
            moves.append(
                CandidateMove(
                    target_square,
                    capture=True,
                    promotion=_promotion_for(target_square, pawn.color),
                )
            )
    return moves


def candidate_knight_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """Knights always move such that |delta_row| + |delta_col| = 3"""
    return single_step_move(square, board, KNIGHT_DELTAS)


def candidate_bishop_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return raycasting_move(square, board, DIAGONALS)


def candidate_rook_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(square, board, STRAIGHTS)


def candidate_queen_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_move(square, board, STRAIGHTS + DIAGONALS)


def candidate_king_moves(
    square: Square, board: Board, for_attack: bool = False
) -> list[CandidateMove]:
    """The king can move by a single square at the time. There is no castling."""
    return single_step_move(square, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board, bool], list[CandidateMove]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


def pseudo_legal_moves(
    board: Board, square: Square, for_attack: bool = False
) -> list[CandidateMove]:
    """Candidate moves of the piece on `square`. Empty for an empty square or a square off the board."""
    if not square.is_within_bounds():
        return []
    piece = board.piece(square)
    if piece is None:
        return []
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(square, board, for_attack)
