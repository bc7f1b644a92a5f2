"""
Service Configuration
Centralized settings for the card table service
"""
import os


def _optional_int(name):
    raw = os.getenv(name)
    if raw is None or raw == '':
        return None
    return int(raw)


class AppConfig:
    """Flask app and process settings"""

    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-card-table-secret')
    HOST = os.getenv('CARD_GAME_HOST', '0.0.0.0')
    PORT = int(os.getenv('CARD_GAME_PORT', 8080))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Persistence backend
    STORE_MEMORY = 'memory'
    STORE_REDIS = 'redis'
    STORE_BACKEND = os.getenv('CARD_GAME_STORE', STORE_MEMORY)


class RedisConfig:
    """Redis connection settings for the game store"""

    HOST = os.getenv('REDIS_HOST', 'localhost')
    PORT = int(os.getenv('REDIS_PORT', 6379))
    PASSWORD = os.getenv('REDIS_PASSWORD', None)
    DB = int(os.getenv('REDIS_DB', 0))

    KEY_PREFIX = os.getenv('REDIS_KEY_PREFIX', 'game')

    # 0 keeps games until they are deleted explicitly
    GAME_TTL_SECONDS = int(os.getenv('REDIS_GAME_TTL', 0))

    # Upper bound in seconds for every store round trip
    OPERATION_TIMEOUT = float(os.getenv('REDIS_TIMEOUT', 5))


class GameConfig:
    """Core game settings"""

    # Seed for the engine's shuffle RNG; unset means OS entropy
    SHUFFLE_SEED = _optional_int('CARD_GAME_SHUFFLE_SEED')
