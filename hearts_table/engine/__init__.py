"""
This module contains the rules of Hearts: the card model, players' hands,
the legality of plays and the resolution of tricks.
"""

from .card import Card
from .constants import Suit
from .errors import HeartsError, IllegalMoveError, InvariantViolation
from .hand import Hand
from .legality import check_play, is_legal, legal_slots
from .state import Player, PlayerKind, RoundState, RoundView
from .trick import winning_card_idx, highest_card, points_in, trick_points
from .utils import points_for_card, rank_order, compare_in_trick
