"""
The Game class is the entrypoint into the domain layer for the service layer.

It holds the state a player interface needs (board, side to move, selection, move log, outcome and status message)
and orchestrates the rule functions to play a turn. The rules themselves never hold on to any state:
they only ever receive the board / square / color to work with.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Optional, Self

from src.core.exceptions import (
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, Outcome, opponent
from src.rules.board import Board
from src.rules.legality import legal_moves
from src.rules.moves import CandidateMove
from src.rules.notation import MoveRecord, describe_move
from src.rules.outcome import classify, is_in_check
from src.rules.square import Square
from src.rules.transition import apply_move

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Select a piece to see its legal moves."


def new_game() -> tuple[Board, Color]:
    """Standard starting position, white to move"""
    return Board.starting_position(), Color.WHITE


@dataclass
class Game:
    board: Board
    side_to_move: Color
    selected: Optional[Square] = None
    legal_moves: list[CandidateMove] = field(default_factory=list)
    history: list[str] = field(default_factory=list)
    status: Outcome = Outcome.ONGOING
    title: str = ""
    message: str = WELCOME_MESSAGE

    @classmethod
    def new_game(cls) -> Self:
        board, side_to_move = new_game()
        return cls(board, side_to_move)

    @classmethod
    def from_position(cls, position: str, side_to_move: Color = Color.WHITE) -> Self:
        """
        Start from a custom piece placement (the first part of a FEN string).
        The welcome message stays unless the position is already decided or the side to move is in check.
        """
        game = cls(Board.from_fen(position), side_to_move)
        game._update_outcome(mover=opponent(side_to_move))
        if not game.is_over and not game.in_check:
            game.message = WELCOME_MESSAGE
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""
        if model.status not in [outcome.value for outcome in Outcome]:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join(Outcome)}"
            )

        board = Board.from_fen(
            model.position,
            moved_squares=[Square.from_algebraic(sq) for sq in model.moved_squares],
        )
        game = cls(
            board=board,
            side_to_move=Color(model.side_to_move),
            history=list(model.history),
            status=Outcome(model.status),
            title=model.title,
            message=model.message,
        )
        if model.selected is not None:
            # legal moves are not stored: they follow from the board and the selection
            game.selected = Square.from_algebraic(model.selected)
            game.legal_moves = legal_moves(board, game.selected, game.side_to_move)
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            position=self.board.to_fen(),
            side_to_move=self.side_to_move.value,
            status=self.status.value,
            moved_squares=[sq.to_algebraic() for sq in self.board.moved_squares()],
            selected=self.selected.to_algebraic() if self.selected else None,
            history=list(self.history),
            title=self.title,
            message=self.message,
        )

    @property
    def is_over(self) -> bool:
        return self.status != Outcome.ONGOING

    @property
    def in_check(self) -> bool:
        return is_in_check(self.board, self.side_to_move)

    @property
    def winner(self) -> Optional[Color]:
        """Only checkmate has a winner: the side that just got mated is the one to move."""
        if self.status != Outcome.CHECKMATE:
            return None
        return opponent(self.side_to_move)

    def destinations(self) -> list[Square]:
        return [move.destination for move in self.legal_moves]

    # --- PLAYER ACTIONS ---
    def select(self, square: Square, strict: bool = False) -> None:
        """
        Select a piece to see its legal moves.
        ----

        * Selecting your own piece shows its legal moves. Selecting it again clears the selection.
        * Anything else clears the selection (or raises NotYourTurnError when `strict` and it is the opponent's piece).
        """
        self._assert_in_progress()

        piece = self.board.piece(square)
        if strict and piece is not None and piece.color != self.side_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.side_to_move} to make a move first."
            )

        if piece is None or piece.color != self.side_to_move or square == self.selected:
            self.clear_selection()
            return

        self.selected = square
        self.legal_moves = legal_moves(self.board, square, self.side_to_move)
        if not self.legal_moves:
            self.message = f"No legal moves for the {piece.color} {piece.type}."
        else:
            self.message = f"{piece.color.value.capitalize()} {piece.type} on {square.to_algebraic()} ready."

    def clear_selection(self) -> None:
        self.selected = None
        self.legal_moves = []
        self.message = f"{self.side_to_move.value.capitalize()} to move."

    def click(self, square: Square) -> None:
        """A click on the board: play the move if it is a destination of the selected piece, otherwise (de)select."""
        self._assert_in_progress()
        if self.selected is not None and square in self.destinations():
            self.make_move(square)
        else:
            self.select(square)

    def make_move(self, destination: Square) -> str:
        """
        Play the selected piece to `destination`
        -----

        1. find the move among the legal moves of the selection
        2. update the board and pass the turn
        3. classify the position for the opponent (check / checkmate / stalemate)
        4. describe the move and append it to the history

        Returns the description of the move.
        """
        self._assert_in_progress()
        if self.selected is None:
            raise IllegalMoveError("Select a piece before making a move.")

        move = next(
            (move for move in self.legal_moves if move.destination == destination),
            None,
        )
        if move is None:
            raise IllegalMoveError(
                f"Move not allowed: {self.selected.to_algebraic()}{destination.to_algebraic()}"
            )

        origin = self.selected
        moving_piece = self.board.piece(origin)
        assert moving_piece is not None
        captured_piece = self.board.piece(destination)

        self.board = apply_move(self.board, origin, move)
        self.selected = None
        self.legal_moves = []
        mover = self.side_to_move
        self.side_to_move = opponent(mover)

        self._update_outcome(mover)
        record = MoveRecord(
            color=mover,
            piece_type=move.promotion or moving_piece.type,
            origin=origin,
            destination=destination,
            captured=captured_piece,
            promotion=move.promotion,
            is_check=self.in_check,
            is_mate=self.status == Outcome.CHECKMATE,
        )
        notation = describe_move(record)
        self.history.append(notation)
        logger.info("Move %d: %s", len(self.history), notation)
        return notation

    def reset(self) -> None:
        """Back to the starting position"""
        fresh = type(self).new_game()
        for game_field in fields(self):
            setattr(self, game_field.name, getattr(fresh, game_field.name))
        logger.info("Game reset")

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_over:
            raise GameStateError(f"Game is over. status: {self.status}")

    def _update_outcome(self, mover: Color) -> None:
        """Classify the position for the side to move and set title / message accordingly."""
        defender = self.side_to_move
        self.status = classify(self.board, defender)

        if self.status == Outcome.CHECKMATE:
            self.title = f"{mover.value.capitalize()} wins by checkmate"
            self.message = f"Checkmate! {mover.value.capitalize()} defeats {defender.value.capitalize()}."
            logger.info("Checkmate, %s wins", mover)
        elif self.status == Outcome.STALEMATE:
            self.title = "Drawn game"
            self.message = "Stalemate! No legal moves remain."
            logger.info("Stalemate")
        elif self.in_check:
            self.message = f"{defender.value.capitalize()} is in check."
        else:
            self.message = f"{defender.value.capitalize()} to move."
