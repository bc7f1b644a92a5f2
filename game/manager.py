import copy

from config import AppConfig, RedisConfig
from game.errors import GameNotFound
from game.manager_redis import RedisGameManager
from game.models import Game
from utils import get_logger

logger = get_logger(__name__)


class GameManager:
    """
    In-memory game store used for development and tests.

    Games are kept as plain documents, not live objects, so every load
    hands out an independent copy just like the Redis store does.
    """

    def __init__(self):
        # game_id -> game document
        self.games = {}

    # -----------------------------
    # LOAD GAME
    # -----------------------------

    def load(self, game_id):
        document = self.games.get(game_id)

        if document is None:
            raise GameNotFound(f"Game {game_id} not found")

        return Game.from_dict(document)

    # -----------------------------
    # SAVE GAME
    # -----------------------------

    def save(self, game):
        self.games[game.id] = copy.deepcopy(game.to_dict())
        logger.debug(f"[MANAGER] Saved game {game.id} in memory")

    # -----------------------------
    # DELETE GAME
    # -----------------------------

    def delete(self, game_id):
        if game_id in self.games:
            del self.games[game_id]
            logger.info(f"[MANAGER] Deleted game {game_id} from memory")
            return 1
        return 0


def create_game_manager(backend=None):
    """
    Build the game store selected by AppConfig.STORE_BACKEND.
    """
    backend = backend or AppConfig.STORE_BACKEND

    if backend == AppConfig.STORE_MEMORY:
        logger.info("[MANAGER] Using in-memory game storage")
        return GameManager()

    if backend == AppConfig.STORE_REDIS:
        return RedisGameManager.from_config(RedisConfig)

    raise ValueError(f"Unsupported game store: {backend}")
