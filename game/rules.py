'''
Card arithmetic for the table statistics.

Two suit orders are in use and they are intentionally different:
  - suit counts report Hearts, Diamonds, Clubs, Spades (deck order)
  - the sorted remaining-cards listing reports Hearts, Spades, Clubs, Diamonds,
    each suit from King down to Ace
'''
from collections import Counter

from game.deck import SUITS
from game.models import PlayerHandValue, SuitCount, CardCount

CARD_VALUES = {
    "Ace": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7,
    "8": 8, "9": 9, "10": 10, "Jack": 11, "Queen": 12, "King": 13,
}

SUIT_COUNT_ORDER = list(SUITS)
SORTED_SUIT_ORDER = ["Hearts", "Spades", "Clubs", "Diamonds"]
SORTED_VALUE_ORDER = ["King", "Queen", "Jack", "10", "9", "8", "7", "6", "5", "4", "3", "2", "Ace"]


def card_value(card):
    # unknown values score nothing
    return CARD_VALUES.get(card.value, 0)


def hand_value(hand):
    return sum(card_value(card) for card in hand)


def rank_hands(player_hands):
    """
    Hand value of every dealt-to player, highest first.
    sorted() is stable, so tied players keep the order they were first dealt to.
    """
    values = [
        PlayerHandValue(player, hand_value(hand))
        for player, hand in player_hands.items()
    ]
    return sorted(values, key=lambda v: v.hand_value, reverse=True)


def count_by_suit(cards):
    counts = Counter(card.suit for card in cards)
    return [SuitCount(suit, counts[suit]) for suit in SUIT_COUNT_ORDER]


def count_sorted(cards):
    counts = Counter((card.suit, card.value) for card in cards)
    return [
        CardCount(suit, value, counts[(suit, value)])
        for suit in SORTED_SUIT_ORDER
        for value in SORTED_VALUE_ORDER
        if counts[(suit, value)] > 0
    ]
