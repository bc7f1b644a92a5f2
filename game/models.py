import uuid
from dataclasses import dataclass

# -----------------------------
# CARD
# -----------------------------

@dataclass(frozen=True)
class Card:
    """
    Immutable playing card identified only by (suit, value).
    """
    suit: str
    value: str

    def __str__(self):
        return f"{self.value} of {self.suit}"

    def to_dict(self):
        return {"suit": self.suit, "value": self.value}

    @classmethod
    def from_dict(cls, data):
        return cls(data["suit"], data["value"])


# -----------------------------
# GAME
# -----------------------------

class Game:
    """
    Aggregate root for one table: players, the draw pile and dealt hands.

    game_deck[0] is the top of the draw pile. player_hands keeps each hand
    in deal order, keyed by player name in the order players were first
    dealt to.
    """

    def __init__(self, name, game_id=None, players=None, game_deck=None, player_hands=None):
        self.id = game_id or str(uuid.uuid4())
        self.name = name
        self.players = list(players or [])
        self.game_deck = list(game_deck or [])
        self.player_hands = {
            player: list(hand) for player, hand in (player_hands or {}).items()
        }

    def __repr__(self):
        return f"<Game {self.id} {self.name!r} players={len(self.players)} deck={len(self.game_deck)}>"

    # ---------------------
    # MUTATIONS
    # ---------------------

    def add_deck(self, deck):
        """Append every card of the deck after the current draw pile."""
        self.game_deck.extend(deck.cards)

    def shuffle_deck(self, rng):
        """
        Shuffle the draw pile in place.
        random.Random.shuffle is a Fisher-Yates shuffle, so every
        permutation is equally likely for a well-seeded generator.
        """
        rng.shuffle(self.game_deck)

    # ---------------------
    # SERIALIZATION
    # ---------------------

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "players": list(self.players),
            "game_deck": [card.to_dict() for card in self.game_deck],
            "player_hands": {
                player: [card.to_dict() for card in hand]
                for player, hand in self.player_hands.items()
            },
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise TypeError(f"Game document must be an object, got {type(data).__name__}")
        return cls(
            name=data.get("name", ""),
            game_id=data["id"],
            players=data.get("players") or [],
            game_deck=[Card.from_dict(c) for c in data.get("game_deck") or []],
            player_hands={
                player: [Card.from_dict(c) for c in hand]
                for player, hand in (data.get("player_hands") or {}).items()
            },
        )


# -----------------------------
# QUERY RESULTS
# -----------------------------

class PlayerHandValue:
    def __init__(self, player_name, hand_value):
        self.player_name = player_name
        self.hand_value = hand_value

    def __eq__(self, other):
        if not isinstance(other, PlayerHandValue):
            return NotImplemented
        return (self.player_name, self.hand_value) == (other.player_name, other.hand_value)

    def __repr__(self):
        return f"PlayerHandValue({self.player_name!r}, {self.hand_value})"

    def to_dict(self):
        return {"player_name": self.player_name, "hand_value": self.hand_value}


class SuitCount:
    def __init__(self, suit, count):
        self.suit = suit
        self.count = count

    def __eq__(self, other):
        if not isinstance(other, SuitCount):
            return NotImplemented
        return (self.suit, self.count) == (other.suit, other.count)

    def __repr__(self):
        return f"SuitCount({self.suit!r}, {self.count})"

    def to_dict(self):
        return {"suit": self.suit, "count": self.count}


class CardCount:
    def __init__(self, suit, value, count):
        self.suit = suit
        self.value = value
        self.count = count

    def __eq__(self, other):
        if not isinstance(other, CardCount):
            return NotImplemented
        return (self.suit, self.value, self.count) == (other.suit, other.value, other.count)

    def __repr__(self):
        return f"CardCount({self.suit!r}, {self.value!r}, {self.count})"

    def to_dict(self):
        return {"suit": self.suit, "value": self.value, "count": self.count}
