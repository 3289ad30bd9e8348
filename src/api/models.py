"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, Outcome
from src.rules.fen import is_valid_position
from src.rules.square import BOARD_DIMENSIONS, FILES

SquareName = str
RANKS = "".join(str(rank) for rank in range(1, BOARD_DIMENSIONS[0] + 1))


def _is_algebraic_notation(value: str) -> bool:
    if len(value) != 2:
        return False

    first_character = value[0]
    second_character = value[1]
    if first_character not in FILES:
        return False
    if second_character not in RANKS:
        return False
    return True


def validate_square_name(value: str) -> str:
    if not _is_algebraic_notation(value):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        )
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    starting_position: Optional[str] = None
    side_to_move: Color = Color.WHITE

    @field_validator("starting_position")
    @classmethod
    def validate_starting_position(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        position = value.strip()
        if not is_valid_position(position):
            raise InvalidRequestError(
                f"Starting position {value!r} is not a valid piece placement (8 ranks of 8 files, one king per color at most)."
            )
        return position


class GetGameRequest(BaseModel):
    game_id: UUID


class SelectSquareRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


class ClickSquareRequest(SelectSquareRequest):
    pass


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return validate_square_name(value)


class ResetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    position: str
    side_to_move: Color
    selected: Optional[SquareName]
    legal_moves: list[SquareName]
    history: list[str]
    status: Outcome
    in_check: bool
    title: str
    message: str
