from typing import Self, Sequence

import numpy as np

from hearts_table.engine import Card
from hearts_table.engine.constants import CARDS_IN_DECK


class Deck:
    """
    Standard 52 cards deck.
    Upon creating the object the deck is automatically shuffled
    """

    __slots__ = ['_rng', '_order', '_cards_left']

    def __init__(self, random_state: int | None = None):
        self._rng = np.random.default_rng(random_state)
        self._order = np.arange(CARDS_IN_DECK)
        self._cards_left = 0
        self.shuffle()

    def shuffle(self) -> Self:
        """
        Resets and shuffles the deck
        """
        self._order = self._rng.permutation(CARDS_IN_DECK)
        self._cards_left = CARDS_IN_DECK
        return self

    def deal(self, n: int) -> list[Card]:
        """
        Deals n cards from the top
        """
        if n > self._cards_left:
            raise ValueError('Not enough cards left in the deck')

        start_idx = CARDS_IN_DECK - self._cards_left
        dealt_idx = self._order[start_idx:start_idx + n]
        self._cards_left -= n

        return [Card.from_idx(int(i)) for i in dealt_idx]

    def all(self) -> list[Card]:
        """Deal all remaining cards"""
        return self.deal(self._cards_left)


def validate_full_deck(cards: Sequence[Card]):
    """
    Raises:
        ValueError: If ``cards`` is not a permutation of the standard deck
    """
    if not all(isinstance(card, Card) for card in cards):
        raise ValueError('A deck can only contain cards')
    if len(cards) != CARDS_IN_DECK:
        raise ValueError(f'A deck needs exactly {CARDS_IN_DECK} cards, got {len(cards)}')
    if len(set(cards)) != CARDS_IN_DECK:
        raise ValueError('A deck cannot contain duplicate cards')
