"""
Utilities for tests
"""
from hearts_table.engine import Card, Suit, RoundView


def c(card_str: str) -> Card:
    """
    A quick way to parse a Card object from a string e.g. "10♥"
    """
    rank_str = card_str[:-1]
    suit_str = card_str[-1]
    suit = [s for s in list(Suit) if s.value == suit_str][0]
    return Card.of(rank_str, suit)


def cl(cards_str: list[str]) -> list[Card]:
    """
    A quick way to parse a list of Card object from a string e.g. ["10♥", "Q♣"]
    """
    return [c(s) for s in cards_str]


def make_view(hands: list[list[str]],
              trick: list[str] | None = None,
              trick_number: int = 1,
              hearts_broken: bool = False,
              leading_player_idx: int | None = None) -> RoundView:
    """
    Builds a round view from card strings. By default the trick is led by
    the player sitting so that seat 0 is the one to move.
    """
    trick = trick or []
    if leading_player_idx is None:
        leading_player_idx = -len(trick) % 4
    return RoundView(
        hands=tuple(tuple(cl(hand)) for hand in hands),
        trick=tuple(cl(trick)),
        trick_number=trick_number,
        hearts_broken=hearts_broken,
        leading_player_idx=leading_player_idx,
    )
