"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ClickSquareRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ResetGameRequest,
    SelectSquareRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.rules.game import Game
from src.rules.square import Square

logger = logging.getLogger(__name__)


class GameService:
    """Orchestration of layers for a game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a game from the standard starting position, or from the requested one."""

        new_game = (
            Game.from_position(request.starting_position, request.side_to_move)
            if request.starting_position
            else Game.new_game()
        )

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("New game %s created", game_id)
        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def select_square(self, request: SelectSquareRequest) -> GameResponse:
        """Select one of your pieces to get its legal moves. Selecting the opponent's pieces raises NotYourTurnError."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.select(Square.from_algebraic(request.square), strict=True)
        return self._store(request.game_id, game)

    def click_square(self, request: ClickSquareRequest) -> GameResponse:
        """Board click: either plays the selected piece to this square or changes the selection."""
        game = Game.from_model(self._fetch_game(request.game_id))
        game.click(Square.from_algebraic(request.square))
        return self._store(request.game_id, game)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt: selects the piece on from_square and plays it to to_square."""
        game = Game.from_model(self._fetch_game(request.game_id))

        from_square = Square.from_algebraic(request.from_square)
        if game.selected != from_square:
            game.select(from_square, strict=True)
        game.make_move(Square.from_algebraic(request.to_square))
        return self._store(request.game_id, game)

    def reset_game(self, request: ResetGameRequest) -> GameResponse:
        game = Game.from_model(self._fetch_game(request.game_id))
        game.reset()
        return self._store(request.game_id, game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        if self.repo.delete_game(request.game_id) is None:
            raise RepositoryError(f"Game with {request.game_id=} not found.")

    # -- Internal helpers --
    def _store(self, game_id: UUID, game: Game) -> GameResponse:
        """Persist the updated game and build the response"""
        self.repo.update_game(game_id, game.to_model())
        return self._create_game_response(game_id, game)

    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        return GameResponse(
            game_id=game_id,
            position=game.board.to_fen(),
            side_to_move=game.side_to_move,
            selected=game.selected.to_algebraic() if game.selected else None,
            legal_moves=[square.to_algebraic() for square in game.destinations()],
            history=game.history,
            status=game.status,
            in_check=game.in_check,
            title=game.title,
            message=game.message,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
