"""Tests for the game engine against the in-memory game manager."""

import random
import uuid

import pytest

from game.deck import create_deck
from game.engine import CardGameEngine, validate_game_id
from game.errors import (
    AlreadyJoined,
    EmptyDeck,
    GameNotFound,
    InvalidIdentifier,
    PersistenceError,
    PlayerNotFound,
)
from game.manager import GameManager
from game.models import Card, CardCount, PlayerHandValue, SuitCount


@pytest.fixture
def manager():
    return GameManager()


@pytest.fixture
def engine(manager):
    return CardGameEngine(manager, rng=random.Random(1234))


@pytest.fixture
def game(engine):
    return engine.create_game("friday night")


class FailingManager(GameManager):
    def save(self, game):
        raise PersistenceError("store is down")


# -----------------------------
# IDENTIFIERS
# -----------------------------

def test_validate_game_id_accepts_canonical_uuid():
    game_id = str(uuid.uuid4())
    assert validate_game_id(game_id) == game_id


@pytest.mark.parametrize("bad_id", ["", "abc", "123", str(uuid.uuid4()).upper(), None])
def test_validate_game_id_rejects_malformed(bad_id):
    with pytest.raises(InvalidIdentifier):
        validate_game_id(bad_id)


def test_malformed_id_is_rejected_before_lookup(engine):
    with pytest.raises(InvalidIdentifier):
        engine.add_player("not-a-game", "Alice")


def test_unknown_game(engine):
    with pytest.raises(GameNotFound):
        engine.shuffle_game_deck(str(uuid.uuid4()))


# -----------------------------
# LIFECYCLE
# -----------------------------

def test_create_game_is_stored_empty(engine, game):
    stored = engine.get_game(game.id)
    assert stored.name == "friday night"
    assert stored.players == []
    assert stored.game_deck == []
    assert stored.player_hands == {}


def test_create_game_store_failure():
    engine = CardGameEngine(FailingManager())
    with pytest.raises(PersistenceError):
        engine.create_game("x")


def test_delete_game(engine, game):
    engine.delete_game(game.id)
    with pytest.raises(GameNotFound):
        engine.get_game(game.id)


def test_delete_missing_game(engine):
    with pytest.raises(GameNotFound):
        engine.delete_game(str(uuid.uuid4()))


def test_delete_malformed_id(engine):
    with pytest.raises(InvalidIdentifier):
        engine.delete_game("nope")


# -----------------------------
# DECK
# -----------------------------

def test_add_deck_twice(engine, game):
    engine.add_deck_to_game(game.id, create_deck())
    updated = engine.add_deck_to_game(game.id)

    assert len(updated.game_deck) == 104
    assert len(engine.get_game(game.id).game_deck) == 104
    assert updated.game_deck[52] == Card("Hearts", "Ace")


def test_shuffle_persists_new_order(manager, game):
    engine = CardGameEngine(manager, rng=random.Random(99))
    engine.add_deck_to_game(game.id)

    shuffled = engine.shuffle_game_deck(game.id)

    expected = list(create_deck().cards)
    random.Random(99).shuffle(expected)
    assert shuffled.game_deck == expected
    assert engine.get_game(game.id).game_deck == expected


def test_shuffle_empty_pile(engine, game):
    assert engine.shuffle_game_deck(game.id).game_deck == []


# -----------------------------
# PLAYERS
# -----------------------------

def test_add_player_twice(engine, game):
    engine.add_player(game.id, "Alice")

    with pytest.raises(AlreadyJoined):
        engine.add_player(game.id, "Alice")

    assert engine.get_game(game.id).players == ["Alice"]


def test_add_players_keeps_join_order(engine, game):
    engine.add_player(game.id, "Alice")
    engine.add_player(game.id, "alice")
    updated = engine.add_player(game.id, "Bob")
    assert updated.players == ["Alice", "alice", "Bob"]


def test_remove_player_keeps_order(engine, game):
    for name in ("Alice", "Bob", "Carol"):
        engine.add_player(game.id, name)

    updated = engine.remove_player(game.id, "Bob")

    assert updated.players == ["Alice", "Carol"]
    assert engine.get_game(game.id).players == ["Alice", "Carol"]


def test_remove_unknown_player(engine, game):
    engine.add_player(game.id, "Alice")
    with pytest.raises(PlayerNotFound):
        engine.remove_player(game.id, "Bob")


def test_removed_player_keeps_hand(engine, game):
    engine.add_deck_to_game(game.id)
    engine.add_player(game.id, "Alice")
    engine.deal_card_to_player(game.id, "Alice")

    engine.remove_player(game.id, "Alice")

    assert engine.get_player_hand(game.id, "Alice") == [Card("Hearts", "Ace")]
    assert engine.get_players_with_hand_values(game.id) == [PlayerHandValue("Alice", 1)]


# -----------------------------
# DEALING
# -----------------------------

def test_deal_moves_top_card(engine, game):
    engine.add_deck_to_game(game.id)
    engine.shuffle_game_deck(game.id)
    top = engine.get_game(game.id).game_deck[0]

    card = engine.deal_card_to_player(game.id, "Alice")

    stored = engine.get_game(game.id)
    assert card == top
    assert len(stored.game_deck) == 51
    assert stored.player_hands["Alice"] == [top]


def test_deal_appends_in_deal_order(engine, game):
    engine.add_deck_to_game(game.id)
    for _ in range(3):
        engine.deal_card_to_player(game.id, "Alice")

    assert engine.get_player_hand(game.id, "Alice") == [
        Card("Hearts", "Ace"), Card("Hearts", "2"), Card("Hearts", "3"),
    ]


def test_deal_does_not_require_seat(engine, game):
    engine.add_deck_to_game(game.id)
    engine.deal_card_to_player(game.id, "Ghost")

    stored = engine.get_game(game.id)
    assert stored.players == []
    assert list(stored.player_hands) == ["Ghost"]


def test_deal_from_empty_pile(engine, game):
    engine.add_player(game.id, "Alice")

    with pytest.raises(EmptyDeck):
        engine.deal_card_to_player(game.id, "Alice")

    stored = engine.get_game(game.id)
    assert stored.game_deck == []
    assert stored.player_hands == {}


def test_dealing_never_creates_or_destroys_cards(engine, game):
    engine.add_deck_to_game(game.id)
    engine.shuffle_game_deck(game.id)
    for i in range(20):
        engine.deal_card_to_player(game.id, ["Alice", "Bob", "Carol"][i % 3])

    stored = engine.get_game(game.id)
    every_card = list(stored.game_deck)
    for hand in stored.player_hands.values():
        every_card.extend(hand)
    assert sorted(every_card, key=repr) == sorted(create_deck().cards, key=repr)


def test_empty_hand_is_not_a_missing_hand(engine, manager, game):
    stored = manager.load(game.id)
    stored.player_hands = {"Alice": []}
    manager.save(stored)

    assert engine.get_player_hand(game.id, "Alice") == []
    assert engine.get_players_with_hand_values(game.id) == [PlayerHandValue("Alice", 0)]
    with pytest.raises(PlayerNotFound):
        engine.get_player_hand(game.id, "Bob")


def test_hand_before_any_deal(engine):
    game = engine.create_game("x")
    with pytest.raises(PlayerNotFound):
        engine.get_player_hand(game.id, "Alice")


# -----------------------------
# STATISTICS
# -----------------------------

def test_hand_values_ranked(engine, manager, game):
    stored = manager.load(game.id)
    stored.player_hands = {
        "Bob": [Card("Spades", "Queen")],
        "Alice": [Card("Hearts", "King"), Card("Hearts", "Ace")],
    }
    manager.save(stored)

    assert engine.get_players_with_hand_values(game.id) == [
        PlayerHandValue("Alice", 14),
        PlayerHandValue("Bob", 12),
    ]


def test_hand_values_no_hands(engine, game):
    assert engine.get_players_with_hand_values(game.id) == []


def test_suit_counts_after_deals(engine, game):
    assert engine.get_remaining_cards_count_by_suit(game.id) == [
        SuitCount("Hearts", 0), SuitCount("Diamonds", 0),
        SuitCount("Clubs", 0), SuitCount("Spades", 0),
    ]

    engine.add_deck_to_game(game.id)
    for _ in range(15):
        engine.deal_card_to_player(game.id, "Alice")

    assert engine.get_remaining_cards_count_by_suit(game.id) == [
        SuitCount("Hearts", 0), SuitCount("Diamonds", 11),
        SuitCount("Clubs", 13), SuitCount("Spades", 13),
    ]


def test_remaining_cards_sorted(engine, manager, game):
    stored = manager.load(game.id)
    stored.game_deck = [Card("Hearts", "King"), Card("Hearts", "Ace"), Card("Clubs", "2")]
    manager.save(stored)

    assert engine.get_remaining_cards_sorted(game.id) == [
        CardCount("Hearts", "King", 1),
        CardCount("Hearts", "Ace", 1),
        CardCount("Clubs", "2", 1),
    ]


def test_reads_do_not_save():
    class CountingManager(GameManager):
        def __init__(self):
            super().__init__()
            self.saves = 0

        def save(self, game):
            self.saves += 1
            super().save(game)

    manager = CountingManager()
    engine = CardGameEngine(manager)
    created = engine.create_game("x")
    engine.get_remaining_cards_sorted(created.id)
    engine.get_remaining_cards_count_by_suit(created.id)
    engine.get_players_with_hand_values(created.id)

    assert manager.saves == 1
