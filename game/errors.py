"""
Errors raised by the game engine and the game managers.
Each carries the HTTP status the controllers answer with.
"""


class GameError(Exception):
    status_code = 500
    default_message = "Game operation failed"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentifier(GameError):
    status_code = 400
    default_message = "Invalid game ID"


class GameNotFound(GameError):
    status_code = 404
    default_message = "Game not found"


class AlreadyJoined(GameError):
    status_code = 409
    default_message = "Player already in the game"


class PlayerNotFound(GameError):
    status_code = 404
    default_message = "Player not found in the game"


class EmptyDeck(GameError):
    status_code = 409
    default_message = "No cards left to deal"


class PersistenceError(GameError):
    status_code = 500
    default_message = "Game store unavailable"
