"""
Validation of the piece placement part of a FEN string.

Only the placement field is used in this variant (no castling, en passant or move counters).
"""

from src.rules.pieces import FEN_TO_PIECE
from src.rules.square import BOARD_DIMENSIONS

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
EMPTY_POSITION = "/".join(["8"] * BOARD_DIMENSIONS[0])


def is_valid_position(position: str) -> bool:
    """Eight ranks separated by slashes, each adding up to eight files."""
    num_rows, num_cols = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_rows:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character.isascii() and character.isdigit():
                file_count += int(character)
            elif character.lower() in FEN_TO_PIECE:
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        if file_count != num_cols:
            return False

    return has_at_most_one_king_per_color(position)


def has_at_most_one_king_per_color(position: str) -> bool:
    return position.count("K") <= 1 and position.count("k") <= 1
