"""
Rules deciding which cards may be played. All functions here are pure: they
only read the hand and the round view they are given.
"""
from typing import Iterable, Sequence

from .card import Card
from .constants import Suit
from .state import RoundView
from .utils import is_heart, is_starting_card, points_for_card

REASON_FIRST_CARD = 'The first card must be Two of Clubs.'
REASON_POINTS_IN_FIRST_TRICK = "You can't play a card worth points in the first trick."
REASON_HEARTS_NOT_BROKEN = "Hearts haven't been broken."
REASON_FOLLOW_SUIT = 'You must follow suit.'


def _held_cards(hand: Iterable[Card | None]) -> list[Card]:
    return [card for card in hand if card is not None]


def check_play(hand: Iterable[Card | None],
               card: Card,
               view: RoundView) -> tuple[bool, str | None]:
    """
    Checks whether ``card`` can be played from ``hand`` in the current trick.

    Args:
        hand: Cards (or slots, possibly empty) held by the player
        card: The card the player wants to play
        view: Snapshot of the round

    Returns:
        A tuple of two elements: whether the play is legal, and the
        explanation of the broken rule (``None`` when the play is legal)
    """
    held = _held_cards(hand)

    # first card of the round must be the 2 of clubs
    if view.trick_number == 0 and len(view.trick) == 0:
        if is_starting_card(card):
            return True, None
        return False, REASON_FIRST_CARD

    # no points in the first trick...
    if view.trick_number == 0 and points_for_card(card) > 0:
        # ...unless the player has nothing else (e.g. 12 hearts and the queen of spades)
        all_points_cards = all(points_for_card(other) > 0 for other in held)
        if all_points_cards and is_heart(card):
            return True, None
        return False, REASON_POINTS_IN_FIRST_TRICK

    if len(view.trick) == 0:
        if view.hearts_broken or not is_heart(card):
            return True, None
        only_has_hearts = all(is_heart(other) for other in held)
        if only_has_hearts:
            return True, None
        return False, REASON_HEARTS_NOT_BROKEN

    leading_suit = view.trick[0].suit
    if card.suit == leading_suit:
        return True, None
    if _has_suit(held, leading_suit):
        return False, REASON_FOLLOW_SUIT
    return True, None


def is_legal(hand: Iterable[Card | None], card: Card, view: RoundView) -> bool:
    is_valid, _ = check_play(hand, card, view)
    return is_valid


def legal_slots(slots: Sequence[Card | None], view: RoundView) -> list[int]:
    """
    Returns:
        Indexes of the slots holding a card which can be legally played
    """
    return [
        slot_idx for slot_idx, card in enumerate(slots)
        if card is not None and is_legal(slots, card, view)
    ]


def _has_suit(cards: list[Card], suit: Suit) -> bool:
    return any(card.suit == suit for card in cards)
