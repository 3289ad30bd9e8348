"""The Board is an immutable snapshot of the position (in chess: the configuration of pieces on the board)"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Self

from src.core.exceptions import InvalidFENError
from src.core.shared_types import Color, PieceType
from src.rules.fen import EMPTY_POSITION, is_valid_position
from src.rules.pieces import Piece
from src.rules.square import BOARD_DIMENSIONS, Square, all_squares

# A cell either holds a Piece or is empty (None)
Grid = tuple[tuple[Optional[Piece], ...], ...]

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True)
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls.from_fen(EMPTY_POSITION)

    @classmethod
    def starting_position(cls) -> Self:
        """
        Back ranks: rook, knight, bishop, queen, king, bishop, knight, rook.
        Black on row 0 with its pawns on row 1, white on row 7 with its pawns on row 6.
        """
        num_rows, num_cols = BOARD_DIMENSIONS
        rows: list[tuple[Optional[Piece], ...]] = [(None,) * num_cols] * num_rows
        rows[0] = tuple(Piece(piece_type, Color.BLACK) for piece_type in BACK_RANK)
        rows[1] = tuple(Piece(PieceType.PAWN, Color.BLACK) for _ in range(num_cols))
        rows[6] = tuple(Piece(PieceType.PAWN, Color.WHITE) for _ in range(num_cols))
        rows[7] = tuple(Piece(piece_type, Color.WHITE) for piece_type in BACK_RANK)
        return cls(tuple(rows))

    @classmethod
    def from_fen(cls, fen_str: str, moved_squares: Iterable[Square] = ()) -> Self:
        """Construct a board using the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * the first rank listed (the 8th) is row 0: black pieces, read from the a-file onwards
        * numbers denote that many consecutive empty squares
        * capital letters are the white pieces

        Pieces standing on one of the `moved_squares` are marked as having moved already.
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(f"Invalid piece placement: {fen_str!r}")

        moved = set(moved_squares)
        rows: list[tuple[Optional[Piece], ...]] = []
        for row, fen_one_rank in enumerate(fen_str.split("/")):
            cells: list[Optional[Piece]] = []
            for character in fen_one_rank:
                if character.isalpha():
                    piece = Piece.from_fen(character)
                    if Square(row, len(cells)) in moved:
                        piece = piece.moved()
                    cells.append(piece)
                else:
                    cells.extend([None] * int(character))
            rows.append(tuple(cells))
        return cls(tuple(rows))

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    @staticmethod
    def _row_to_fen(row: tuple[Optional[Piece], ...]) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        """None for an empty square. Also None for squares off the board."""
        if not square.is_within_bounds():
            return None
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in all_squares()
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            square
            for square in all_squares()
            if (piece := self.piece(square)) is not None
            and piece.color == color
            and piece.type == piece_type
        ]

    def moved_squares(self) -> list[Square]:
        """Squares holding a piece that has moved at least once"""
        return [
            square
            for square in all_squares()
            if (piece := self.piece(square)) is not None and piece.has_moved
        ]

    def with_changes(self, changes: Mapping[Square, Optional[Piece]]) -> Self:
        """Copy of the board with the given cells replaced. The board itself is left as is."""
        rows = [list(row) for row in self.grid]
        for square, piece in changes.items():
            rows[square.row][square.col] = piece
        return type(self)(tuple(tuple(row) for row in rows))
