from .card import Card
from .constants import (
    Suit, HEART_POINTS, Q_SPADES_POINTS, QUEEN_RANK, TWO_RANK, CARDS_IN_DECK,
)

Q_SPADES = Card(Suit.SPADE, QUEEN_RANK)
TWO_OF_CLUBS = Card(Suit.CLUB, TWO_RANK)


def is_heart(card: Card) -> bool:
    return card.suit == Suit.HEART


def is_queen_of_spades(card: Card) -> bool:
    return card == Q_SPADES


def is_starting_card(card: Card) -> bool:
    return card == TWO_OF_CLUBS


def points_for_card(card: Card) -> int:
    if is_heart(card):
        return HEART_POINTS
    if is_queen_of_spades(card):
        return Q_SPADES_POINTS
    return 0


def rank_order(card: Card) -> int:
    """Strength of a card, meaningful only against cards of the same suit"""
    return card.rank


def compare_in_trick(a: Card, b: Card, led_suit: Suit) -> int:
    """
    Compares two cards within a trick.

    Returns:
        1 if ``a`` beats ``b``, -1 if ``b`` beats ``a``, 0 otherwise.
        A card of the leading suit always beats an off-suit card, and two
        off-suit cards are equal since neither of them can take the trick.
    """
    a_follows = a.suit == led_suit
    b_follows = b.suit == led_suit
    if a_follows and b_follows:
        return (rank_order(a) > rank_order(b)) - (rank_order(a) < rank_order(b))
    return int(a_follows) - int(b_follows)


def hearts_card_sort_key(card: Card) -> tuple[int, int]:
    """Display order of a hand: by suit (clubs, diamonds, spades, hearts), then by rank"""
    return Suit.order(card.suit), card.rank


def full_deck() -> list[Card]:
    return [Card.from_idx(i) for i in range(CARDS_IN_DECK)]
