import json

import redis

from game.errors import GameNotFound, PersistenceError
from game.models import Game
from utils import get_logger

logger = get_logger(__name__)


class RedisGameManager:
    """
    Redis-backed game store for multi-worker deployments.

    Each game is one JSON document under "<prefix>:<game_id>". Writes are
    plain SETs, so two workers mutating the same game race and the last
    write wins.
    """

    def __init__(self, client, key_prefix="game", ttl_seconds=0):
        self.redis_client = client
        self.key_prefix = key_prefix
        self.ttl_seconds = ttl_seconds

    @classmethod
    def from_config(cls, cfg):
        client = redis.Redis(
            host=cfg.HOST,
            port=cfg.PORT,
            password=cfg.PASSWORD,
            db=cfg.DB,
            decode_responses=True,
            socket_connect_timeout=cfg.OPERATION_TIMEOUT,
            socket_timeout=cfg.OPERATION_TIMEOUT,
        )
        logger.info(f"[MANAGER] Using Redis at {cfg.HOST}:{cfg.PORT} (db {cfg.DB})")
        return cls(client, key_prefix=cfg.KEY_PREFIX, ttl_seconds=cfg.GAME_TTL_SECONDS)

    def _key(self, game_id):
        return f"{self.key_prefix}:{game_id}"

    # -----------------------------
    # LOAD GAME
    # -----------------------------

    def load(self, game_id):
        try:
            serialized = self.redis_client.get(self._key(game_id))
        except redis.exceptions.RedisError as e:
            logger.error(f"[MANAGER] Failed to load game {game_id} from Redis: {e}")
            raise PersistenceError(f"Failed to load game: {e}") from e

        if not serialized:
            raise GameNotFound(f"Game {game_id} not found")

        try:
            return Game.from_dict(json.loads(serialized))
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"[MANAGER] Corrupt document for game {game_id}: {e}")
            raise PersistenceError(f"Stored game {game_id} is unreadable") from e

    # -----------------------------
    # SAVE GAME
    # -----------------------------

    def save(self, game):
        serialized = json.dumps(game.to_dict())
        try:
            if self.ttl_seconds:
                self.redis_client.setex(self._key(game.id), self.ttl_seconds, serialized)
            else:
                self.redis_client.set(self._key(game.id), serialized)
        except redis.exceptions.RedisError as e:
            logger.error(f"[MANAGER] Failed to store game {game.id} in Redis: {e}")
            raise PersistenceError(f"Failed to save game: {e}") from e

        logger.debug(f"[MANAGER] Saved game {game.id} in Redis")

    # -----------------------------
    # DELETE GAME
    # -----------------------------

    def delete(self, game_id):
        try:
            deleted = self.redis_client.delete(self._key(game_id))
        except redis.exceptions.RedisError as e:
            logger.error(f"[MANAGER] Failed to delete game {game_id} from Redis: {e}")
            raise PersistenceError(f"Failed to delete game: {e}") from e

        if deleted:
            logger.info(f"[MANAGER] Deleted game {game_id} from Redis")
        return deleted
