from game.models import Card

SUITS = ["Hearts", "Diamonds", "Clubs", "Spades"]
VALUES = ["Ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "Jack", "Queen", "King"]


class Deck:
    """
    A fresh 52-card deck in suit-major order. Never shuffled on creation;
    shuffling happens on a game's draw pile once the deck is added.
    """
    def __init__(self):
        self.cards = [
            Card(suit, value)
            for suit in SUITS
            for value in VALUES
        ]

    def __len__(self):
        return len(self.cards)

    def to_dict(self):
        return {"cards": [card.to_dict() for card in self.cards]}


def create_deck():
    return Deck()
