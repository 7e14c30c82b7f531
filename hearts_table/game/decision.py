"""
Rule-of-thumb strategy for computer-controlled players.

The strategy only looks at the round view it is given: its own hand, the
cards still held by the other players, the current trick and whether hearts
are broken. It keeps no memory between decisions.
"""
import logging
from typing import Sequence

from hearts_table.engine import Card, Suit, RoundView, InvariantViolation
from hearts_table.engine.constants import PLAYER_COUNT, QUEEN_RANK
from hearts_table.engine.legality import legal_slots
from hearts_table.engine.trick import highest_card, trick_points
from hearts_table.engine.utils import (
    Q_SPADES, TWO_OF_CLUBS, points_for_card, rank_order, hearts_card_sort_key,
)

logger = logging.getLogger(__name__)

Slots = Sequence[Card | None]


def _others_in_suit(view: RoundView, seat: int, suit: Suit) -> list[Card]:
    """Cards of the given suit still held by players other than ``seat``"""
    return [
        card
        for other_seat, slots in enumerate(view.hands) if other_seat != seat
        for card in slots if card is not None and card.suit == suit
    ]


def other_player_has_lower_value_card(view: RoundView, seat: int, card: Card) -> bool:
    return any(rank_order(other) < rank_order(card)
               for other in _others_in_suit(view, seat, card.suit))


def other_player_has_higher_value_card(view: RoundView, seat: int, card: Card) -> bool:
    return any(rank_order(other) > rank_order(card)
               for other in _others_in_suit(view, seat, card.suit))


def _low_points_high_value_key(card: Card) -> tuple:
    return points_for_card(card), -rank_order(card), hearts_card_sort_key(card)


def _max_points_key(card: Card) -> tuple:
    return -points_for_card(card), -rank_order(card), hearts_card_sort_key(card)


def _pick_specific_card(slots: Slots, legal: list[int], card: Card) -> int | None:
    for slot_idx in legal:
        if slots[slot_idx] == card:
            return slot_idx
    return None


def _pick_lower_value_card(slots: Slots, legal: list[int], other_card: Card) -> int | None:
    """The highest card of the same suit which is still lower than ``other_card``"""
    candidates = [
        slot_idx for slot_idx in legal
        if slots[slot_idx].suit == other_card.suit
        and rank_order(slots[slot_idx]) < rank_order(other_card)
    ]
    if len(candidates) == 0:
        return None
    return max(candidates, key=lambda slot_idx: rank_order(slots[slot_idx]))


def _pick_slightly_higher_value_card(slots: Slots, legal: list[int], other_card: Card) -> int | None:
    """The lowest card of the same suit which is higher than ``other_card``"""
    candidates = [
        slot_idx for slot_idx in legal
        if slots[slot_idx].suit == other_card.suit
        and rank_order(slots[slot_idx]) > rank_order(other_card)
    ]
    if len(candidates) == 0:
        return None
    return min(candidates, key=lambda slot_idx: rank_order(slots[slot_idx]))


def _pick_low_points_high_value_card(slots: Slots,
                                     legal: list[int],
                                     suit: Suit | None = None) -> int | None:
    candidates = [
        slot_idx for slot_idx in legal
        if suit is None or slots[slot_idx].suit == suit
    ]
    if len(candidates) == 0:
        return None
    return min(candidates, key=lambda slot_idx: _low_points_high_value_key(slots[slot_idx]))


def _pick_max_points_card(slots: Slots, legal: list[int]) -> int:
    return min(legal, key=lambda slot_idx: _max_points_key(slots[slot_idx]))


def _pick_discard(slots: Slots, legal: list[int], view: RoundView) -> int:
    if view.is_first_trick:
        return _pick_low_points_high_value_card(slots, legal)
    return _pick_max_points_card(slots, legal)


def _pick_lead_card(seat: int, slots: Slots, legal: list[int], view: RoundView) -> int:
    """
    Leads the most valuable card that is sure to be undercut by nobody, yet
    can still be beaten by someone. Falls back to the cheapest card.
    """
    ordered = sorted(legal, key=lambda slot_idx: _max_points_key(slots[slot_idx]))
    for slot_idx in ordered:
        card = slots[slot_idx]
        if (not other_player_has_lower_value_card(view, seat, card)
                and other_player_has_higher_value_card(view, seat, card)):
            logger.debug('Preferring card %s', card)
            return slot_idx
    return ordered[-1]


def _pick_follow_card(slots: Slots, legal: list[int], view: RoundView) -> int | None:
    high_card = highest_card(view.trick)
    if high_card.suit == Suit.SPADE and rank_order(high_card) > QUEEN_RANK:
        # someone else is taking the trick anyway, get rid of the queen
        q_spades_slot = _pick_specific_card(slots, legal, Q_SPADES)
        if q_spades_slot is not None:
            return q_spades_slot

    is_trailing_player = len(view.trick) == PLAYER_COUNT - 1
    if trick_points(view.trick) == 0 and is_trailing_player:
        slot_idx = _pick_low_points_high_value_card(slots, legal, view.leading_suit)
        if slot_idx is not None:
            return slot_idx
        return _pick_discard(slots, legal, view)

    slot_idx = _pick_lower_value_card(slots, legal, high_card)
    if slot_idx is not None:
        return slot_idx

    if not is_trailing_player:
        slot_idx = _pick_slightly_higher_value_card(slots, legal, high_card)
    else:
        slot_idx = _pick_low_points_high_value_card(slots, legal, high_card.suit)
    if slot_idx is not None:
        return slot_idx

    return _pick_discard(slots, legal, view)


def pick_card(seat: int, view: RoundView) -> int:
    """
    Pick a card to play for a computer-controlled player.

    Args:
        seat: Seat of the player to move
        view: Snapshot of the round

    Returns:
        Index of the slot in the player's hand holding the card to play.
        The card is always a legal play.

    Raises:
        InvariantViolation: If the player has no card they could play
    """
    slots = view.hands[seat]
    if all(card is None for card in slots):
        raise InvariantViolation(f'Player at seat {seat} has no cards left to play')

    legal = legal_slots(slots, view)
    if len(legal) == 0:
        raise InvariantViolation(f'Player at seat {seat} has no legal card to play')

    if len(view.trick) == 0 and view.is_first_trick:
        slot_idx = _pick_specific_card(slots, legal, TWO_OF_CLUBS)
        if slot_idx is None:
            raise InvariantViolation('The player leading the first trick must hold Two of Clubs')
    elif len(view.trick) == 0:
        slot_idx = _pick_lead_card(seat, slots, legal, view)
    else:
        slot_idx = _pick_follow_card(slots, legal, view)

    if slot_idx is None:
        slot_idx = legal[0]
    return slot_idx
