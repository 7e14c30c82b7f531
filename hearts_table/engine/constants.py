from enum import Enum

PLAYER_COUNT = 4
CARDS_IN_DECK = 52
RANKS_PER_SUIT = 13
CARDS_PER_PLAYER = CARDS_IN_DECK // PLAYER_COUNT

HEART_POINTS = 1
Q_SPADES_POINTS = 13
MAX_POINTS = 26

QUEEN_RANK = 10
TWO_RANK = 0

DEFAULT_OPPONENT_NAMES = ('Paul', 'Simon', 'Lisa')


class Suit(Enum):
    CLUB = '\u2663'
    DIAMOND = '\u2666'
    SPADE = '\u2660'
    HEART = '\u2665'

    @staticmethod
    def order(suit: 'Suit') -> int:
        return list(Suit).index(suit)
