"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from src.core.shared_types import Outcome
from src.db.sql_repository import GameModel, SQLGameRepository
from src.rules.fen import STARTING_POSITION


@pytest.fixture
def model() -> GameModel:
    """Mock game data (the repository does not care if the game makes sense)"""
    return GameModel(
        position=STARTING_POSITION,
        side_to_move="black",
        status=Outcome.ONGOING,
        moved_squares=["e4"],
        selected="g8",
        history=["White pawn e2 → e4"],
        title="",
        message="Black knight on g8 ready.",
    )


def test_create_game(db_session_repo: Session, model: GameModel) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session, model: GameModel) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(model)
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """Should return None if ID does not match anything in database."""
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(model)
    assert repo.get_game(uuid4()) is None


def test_consecutive_game_updates(db_session_repo: Session, model: GameModel) -> None:
    """Tests that we can successfully make multiple updates to the same game, including the JSON columns."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(model)

    first_update = GameModel(
        position="rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR",
        side_to_move="black",
        status=Outcome.ONGOING,
        moved_squares=["e4"],
        history=["White pawn e2 → e4"],
        message="Black to move.",
    )
    second_update = GameModel(
        position="rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR",
        side_to_move="white",
        status=Outcome.ONGOING,
        moved_squares=["e5", "e4"],
        history=["White pawn e2 → e4", "Black pawn e7 → e5"],
        message="White to move.",
    )

    assert repo.update_game(game_id, first_update) == first_update
    assert repo.update_game(game_id, second_update) == second_update

    after_all_updates = repo.get_game(game_id)
    assert after_all_updates == second_update


def test_attempt_updating_unknown_game(db_session_repo: Session, model: GameModel) -> None:
    """the update_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), model) is None


def test_delete_game(db_session_repo: Session, model: GameModel) -> None:
    """Record of the game should no longer exist after deletion"""
    repo = SQLGameRepository(db_session_repo)
    created_game, game_id = repo.create_game(model)
    deleted_game = repo.delete_game(game_id)

    # the correct game should be deleted
    assert deleted_game == created_game

    # The game should no longer be available in db
    assert repo.get_game(game_id) is None


def test_attempt_deleting_unknown_game(db_session_repo: Session) -> None:
    """the delete_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.delete_game(uuid4()) is None
