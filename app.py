import random

from flask import Flask

from config import AppConfig, GameConfig
from controllers.game_controller import game_bp
from game.engine import CardGameEngine
from game.manager import create_game_manager
from utils import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(engine=None):
    """
    Build the Flask app around a game engine.
    Without an engine one is built from the configured store backend.
    """
    app = Flask(__name__)
    app.config['SECRET_KEY'] = AppConfig.SECRET_KEY

    if engine is None:
        engine = CardGameEngine(
            create_game_manager(),
            rng=random.Random(GameConfig.SHUFFLE_SEED),
        )
    app.config['GAME_ENGINE'] = engine

    app.register_blueprint(game_bp)

    logger.info("[APP] Card table service ready")
    return app


def main():
    setup_logging()
    app = create_app()
    app.run(host=AppConfig.HOST, port=AppConfig.PORT)


if __name__ == "__main__":
    main()
