"""
Game Controller
HTTP endpoints for games, decks, players and remaining-card statistics
"""

from flask import Blueprint, current_app, request, jsonify

from game.deck import create_deck
from game.errors import GameError
from utils import get_logger

logger = get_logger(__name__)

game_bp = Blueprint('game', __name__)


def get_engine():
    return current_app.config['GAME_ENGINE']


def bad_request(message):
    return jsonify({'success': False, 'error': message}), 400


def required_player_name():
    """
    Read player_name from the JSON body.
    Returns (name, None) or (None, error response).
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, bad_request('Invalid request payload')

    player_name = data.get('player_name')
    if not isinstance(player_name, str) or not player_name:
        return None, bad_request('player_name is required')

    return player_name, None


@game_bp.errorhandler(GameError)
def handle_game_error(error):
    if error.status_code >= 500:
        logger.error(f"[APP] {type(error).__name__}: {error.message}")
    else:
        logger.info(f"[APP] {type(error).__name__}: {error.message}")
    return jsonify({'success': False, 'error': error.message}), error.status_code


# -----------------------------
# GAME LIFECYCLE
# -----------------------------

@game_bp.route('/games', methods=['POST'])
def create_game():
    """
    Request JSON:
        name: str
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get('name'), str):
        return bad_request('Invalid request payload')

    game = get_engine().create_game(data['name'])
    return jsonify(game.to_dict())


@game_bp.route('/games/<game_id>', methods=['GET'])
def get_game(game_id):
    return jsonify(get_engine().get_game(game_id).to_dict())


@game_bp.route('/games/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    get_engine().delete_game(game_id)
    return '', 204


# -----------------------------
# DECKS
# -----------------------------

@game_bp.route('/decks', methods=['POST'])
def create_deck_endpoint():
    return jsonify(create_deck().to_dict())


@game_bp.route('/games/<game_id>/add-deck', methods=['POST'])
def add_deck(game_id):
    game = get_engine().add_deck_to_game(game_id, create_deck())
    return jsonify(game.to_dict())


@game_bp.route('/games/<game_id>/shuffle', methods=['POST'])
def shuffle(game_id):
    game = get_engine().shuffle_game_deck(game_id)
    return jsonify(game.to_dict())


# -----------------------------
# PLAYERS
# -----------------------------

@game_bp.route('/games/<game_id>/add-player', methods=['POST'])
def add_player(game_id):
    player_name, error = required_player_name()
    if error:
        return error

    game = get_engine().add_player(game_id, player_name)
    return jsonify(game.to_dict())


@game_bp.route('/games/<game_id>/remove-player', methods=['POST'])
def remove_player(game_id):
    player_name, error = required_player_name()
    if error:
        return error

    game = get_engine().remove_player(game_id, player_name)
    return jsonify(game.to_dict())


@game_bp.route('/games/<game_id>/deal-card', methods=['POST'])
def deal_card(game_id):
    player_name, error = required_player_name()
    if error:
        return error

    card = get_engine().deal_card_to_player(game_id, player_name)
    return jsonify(card.to_dict())


@game_bp.route('/games/<game_id>/player-hand', methods=['GET'])
def player_hand(game_id):
    player_name = request.args.get('player_name', '')
    if not player_name:
        return bad_request('player_name is required')

    hand = get_engine().get_player_hand(game_id, player_name)
    return jsonify([card.to_dict() for card in hand])


@game_bp.route('/games/<game_id>/player-hand-values', methods=['GET'])
def player_hand_values(game_id):
    values = get_engine().get_players_with_hand_values(game_id)
    return jsonify([v.to_dict() for v in values])


# -----------------------------
# REMAINING CARDS
# -----------------------------

@game_bp.route('/games/<game_id>/remaining-cards-suit-count', methods=['GET'])
def remaining_cards_suit_count(game_id):
    counts = get_engine().get_remaining_cards_count_by_suit(game_id)
    return jsonify([c.to_dict() for c in counts])


@game_bp.route('/games/<game_id>/remaining-cards-sorted', methods=['GET'])
def remaining_cards_sorted(game_id):
    counts = get_engine().get_remaining_cards_sorted(game_id)
    return jsonify([c.to_dict() for c in counts])
