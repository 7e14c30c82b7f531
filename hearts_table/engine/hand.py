from typing import Iterable, Iterator

from .card import Card
from .constants import Suit
from .errors import InvariantViolation
from .utils import hearts_card_sort_key, points_for_card


class Hand:
    """
    Cards held by a single player, together with the cards they have taken
    in tricks during the current round.

    Held cards live in fixed slots: playing a card empties its slot instead
    of shifting the remaining cards, so a slot index identifies the same card
    for the whole round.

    Args:
        cards: Initial cards, kept in the given order
    """

    __slots__ = ['_slots', '_taken']

    def __init__(self, cards: Iterable[Card] = ()):
        self._slots: list[Card | None] = list(cards)
        self._taken: list[Card] = []

    @property
    def slots(self) -> list[Card | None]:
        return self._slots.copy()

    @property
    def cards(self) -> list[Card]:
        """Cards still held, in slot order"""
        return [card for card in self._slots if card is not None]

    @property
    def taken(self) -> list[Card]:
        return self._taken.copy()

    @property
    def points_taken(self) -> int:
        return sum(points_for_card(card) for card in self._taken)

    @property
    def is_empty(self) -> bool:
        return all(card is None for card in self._slots)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._slots

    def __getitem__(self, slot_idx: int) -> Card | None:
        return self._slots[slot_idx]

    def slot_of(self, card: Card) -> int | None:
        for slot_idx, held in enumerate(self._slots):
            if held == card:
                return slot_idx
        return None

    def has_suit(self, suit: Suit) -> bool:
        return any(card.suit == suit for card in self.cards)

    def deal(self, cards: Iterable[Card]):
        """
        Replaces the held cards with a fresh deal, sorted in display order,
        and clears the taken cards
        """
        self._slots = sorted(cards, key=hearts_card_sort_key)
        self._taken = []

    def remove(self, slot_idx: int) -> Card:
        """Takes the card out of the given slot, leaving the slot empty"""
        if not 0 <= slot_idx < len(self._slots):
            raise InvariantViolation(f'Slot {slot_idx} does not exist')
        card = self._slots[slot_idx]
        if card is None:
            raise InvariantViolation(f'Slot {slot_idx} has already been played')
        self._slots[slot_idx] = None
        return card

    def take(self, cards: Iterable[Card]):
        self._taken.extend(cards)

    def sort_taken(self):
        self._taken.sort(key=hearts_card_sort_key)
