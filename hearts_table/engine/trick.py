from typing import Sequence

from .card import Card
from .utils import compare_in_trick, points_for_card


def winning_card_idx(trick: Sequence[Card]) -> int:
    """
    Returns:
        Position within the trick of the card taking it: the highest card
        of the leading suit. Off-suit cards never win.
    """
    if len(trick) == 0:
        raise ValueError('Cannot determine the winner of an empty trick')

    leading_suit = trick[0].suit
    winner_idx = 0
    for i in range(1, len(trick)):
        if compare_in_trick(trick[i], trick[winner_idx], leading_suit) > 0:
            winner_idx = i
    return winner_idx


def highest_card(trick: Sequence[Card]) -> Card:
    """The card currently winning the trick"""
    return trick[winning_card_idx(trick)]


def points_in(trick: Sequence[Card]) -> list[Card]:
    """Cards worth points, which go to the player taking the trick"""
    return [card for card in trick if points_for_card(card) > 0]


def trick_points(trick: Sequence[Card]) -> int:
    return sum(points_for_card(card) for card in trick)
