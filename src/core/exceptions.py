"""
Custom exceptions.

NOTE: None of these derive from ValueError on purpose of pydantic: a validator raising one of them propagates as-is
instead of being wrapped in a ValidationError.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong while handling a game"""


class GameStateError(GameError):
    """The requested action is not allowed in the current state of the game (ex. the game already ended)"""


class IllegalMoveError(GameError):
    """Destination is not one of the legal moves of the selected piece"""


class NotYourTurnError(GameError):
    """Tried to select a piece of the side that is not to move"""


class InvalidFENError(GameError):
    """Could not parse the piece placement string"""


class InvalidRequestError(GameError):
    """Request data did not pass validation"""


class RepositoryError(GameError):
    """Persistence layer could not find / store the requested game"""


class ConfigurationError(Exception):
    """Settings from the environment could not be parsed"""
