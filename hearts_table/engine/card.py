from dataclasses import dataclass

from .constants import Suit, RANKS_PER_SUIT, CARDS_IN_DECK


@dataclass(frozen=True, slots=True)
class Card:
    """
    Args:
        suit: Suit of the card
        rank: Value from the range 0-12 representing the rank of the card,
            from 2 (0) to Ace (12)
    """
    suit: Suit
    rank: int

    ranks_str = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise ValueError(f'Invalid suit: {self.suit!r}')
        if not 0 <= self.rank < RANKS_PER_SUIT:
            raise ValueError(f'Rank must be in range 0-{RANKS_PER_SUIT - 1}, got {self.rank}')

    @classmethod
    def of(cls, rank: str, suit: Suit) -> 'Card':
        return cls(suit, Card.ranks_str.index(rank))

    @classmethod
    def from_idx(cls, idx: int) -> 'Card':
        """
        Args:
            idx: Value from the range 0-51. The cards are ordered by suit:
                clubs, diamonds, spades, hearts; and within each suit by
                rank: from 2 to Ace
        """
        if not 0 <= idx < CARDS_IN_DECK:
            raise ValueError(f'Card index must be in range 0-{CARDS_IN_DECK - 1}, got {idx}')
        return cls(list(Suit)[idx // RANKS_PER_SUIT], idx % RANKS_PER_SUIT)

    @property
    def idx(self) -> int:
        return Suit.order(self.suit) * RANKS_PER_SUIT + self.rank

    @property
    def rank_str(self) -> str:
        return Card.ranks_str[self.rank]

    def __str__(self) -> str:
        return f'{self.rank_str}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)
