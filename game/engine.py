import random
import uuid

from game.deck import create_deck
from game.errors import (
    AlreadyJoined,
    EmptyDeck,
    GameNotFound,
    InvalidIdentifier,
    PlayerNotFound,
)
from game.models import Game
from game.rules import count_by_suit, count_sorted, rank_hands
from utils import get_logger

logger = get_logger(__name__)


def validate_game_id(game_id):
    """Game ids are canonical lowercase UUID strings."""
    try:
        parsed = uuid.UUID(str(game_id))
    except (ValueError, TypeError):
        raise InvalidIdentifier(f"Invalid game ID: {game_id!r}") from None
    if str(parsed) != game_id:
        raise InvalidIdentifier(f"Invalid game ID: {game_id!r}")
    return game_id


class CardGameEngine:
    """
    Applies one operation per call to a stored game: load it from the
    manager, change or inspect it, save it back when it changed.

    The manager and the RNG are injected so tests can run against the
    in-memory store with a seeded generator.
    """

    def __init__(self, manager, rng=None):
        self.manager = manager
        self.rng = rng or random.Random()

    # ---------------------
    # STATE HELPERS
    # ---------------------

    def _load(self, game_id):
        validate_game_id(game_id)
        return self.manager.load(game_id)

    # ---------------------
    # GAME LIFECYCLE
    # ---------------------

    def create_game(self, name):
        game = Game(name)
        self.manager.save(game)
        logger.info(f"[ENGINE] Created game {game.id} ({name!r})")
        return game

    def get_game(self, game_id):
        return self._load(game_id)

    def delete_game(self, game_id):
        validate_game_id(game_id)
        if not self.manager.delete(game_id):
            raise GameNotFound(f"Game {game_id} not found")
        logger.info(f"[ENGINE] Deleted game {game_id}")

    # ---------------------
    # DECK
    # ---------------------

    def add_deck_to_game(self, game_id, deck=None):
        game = self._load(game_id)
        if deck is None:
            deck = create_deck()

        game.add_deck(deck)
        self.manager.save(game)

        logger.info(f"[ENGINE] Added {len(deck.cards)} cards to game {game_id}, draw pile now {len(game.game_deck)}")
        return game

    def shuffle_game_deck(self, game_id):
        game = self._load(game_id)

        game.shuffle_deck(self.rng)
        self.manager.save(game)

        logger.info(f"[ENGINE] Shuffled {len(game.game_deck)} cards in game {game_id}")
        return game

    # ---------------------
    # PLAYERS
    # ---------------------

    def add_player(self, game_id, player_name):
        game = self._load(game_id)

        if player_name in game.players:
            raise AlreadyJoined(f"Player {player_name!r} already in the game")

        game.players.append(player_name)
        self.manager.save(game)

        logger.info(f"[ENGINE] Player {player_name!r} joined game {game_id}")
        return game

    def remove_player(self, game_id, player_name):
        """
        Drop the player from the table. Any hand already dealt to them
        stays in player_hands and keeps counting towards hand values.
        """
        game = self._load(game_id)

        if player_name not in game.players:
            raise PlayerNotFound(f"Player {player_name!r} not found in the game")

        game.players.remove(player_name)
        self.manager.save(game)

        logger.info(f"[ENGINE] Player {player_name!r} left game {game_id}")
        return game

    # ---------------------
    # DEALING
    # ---------------------

    def deal_card_to_player(self, game_id, player_name):
        """
        Move the top card of the draw pile to the end of the player's hand.
        The player does not have to be seated in the game to be dealt to.
        """
        game = self._load(game_id)

        if not game.game_deck:
            raise EmptyDeck()

        card = game.game_deck.pop(0)
        game.player_hands.setdefault(player_name, []).append(card)
        self.manager.save(game)

        logger.info(f"[ENGINE] Dealt {card} to {player_name!r} in game {game_id}")
        return card

    def get_player_hand(self, game_id, player_name):
        game = self._load(game_id)

        if player_name not in game.player_hands:
            raise PlayerNotFound(f"Player {player_name!r} not found or no cards dealt to this player")

        return game.player_hands[player_name]

    def get_players_with_hand_values(self, game_id):
        game = self._load(game_id)
        return rank_hands(game.player_hands)

    # ---------------------
    # REMAINING CARDS
    # ---------------------

    def get_remaining_cards_count_by_suit(self, game_id):
        game = self._load(game_id)
        return count_by_suit(game.game_deck)

    def get_remaining_cards_sorted(self, game_id):
        game = self._load(game_id)
        return count_sorted(game.game_deck)
