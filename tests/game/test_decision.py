import unittest

from hearts_table.engine import InvariantViolation, RoundView, is_legal
from hearts_table.game.decision import (
    pick_card,
    other_player_has_lower_value_card,
    other_player_has_higher_value_card,
)
from tests.utils import c, make_view


class TestCrossHandInference(unittest.TestCase):
    def test_scans_only_other_players_of_same_suit(self):
        view = make_view([['5♠', '2♠'], ['3♦'], ['K♠'], []])
        self.assertFalse(other_player_has_lower_value_card(view, 0, c('5♠')))
        self.assertTrue(other_player_has_higher_value_card(view, 0, c('5♠')))
        self.assertTrue(other_player_has_lower_value_card(view, 1, c('K♠')))
        self.assertFalse(other_player_has_higher_value_card(view, 2, c('K♠')))


class TestPickCardLeading(unittest.TestCase):
    def test_opens_round_with_two_of_clubs(self):
        view = make_view([['K♣', '2♣', '5♥'], [], [], []], trick_number=0)
        self.assertEqual(1, pick_card(0, view))

    def test_prefers_lead_nobody_can_undercut(self):
        view = make_view([
            ['3♣', '9♦', '5♠'],
            ['4♣', '10♦'],
            ['K♠', '2♦'],
            ['8♦', '6♠'],
        ])
        self.assertEqual(2, pick_card(0, view))

    def test_falls_back_to_cheapest_lead(self):
        view = make_view([
            ['3♣', '9♦'],
            ['2♣', '10♦'],
            ['8♦'],
            [],
        ])
        self.assertEqual(0, pick_card(0, view))

    def test_prefers_leading_points_that_cannot_win(self):
        view = make_view([
            ['9♦', '2♥'],
            ['5♥'],
            ['8♦', '3♦'],
            [],
        ], hearts_broken=True)
        self.assertEqual(1, pick_card(0, view))

    def test_does_not_lead_hearts_before_broken(self):
        view = make_view([
            ['9♦', '2♥'],
            ['5♥'],
            ['8♦', '3♦'],
            [],
        ], hearts_broken=False)
        self.assertEqual(0, pick_card(0, view))


class TestPickCardFollowing(unittest.TestCase):
    def test_dumps_queen_under_king_of_spades(self):
        view = make_view([['Q♠', '3♠', '8♦'], [], [], []], trick=['K♠'], trick_number=4)
        self.assertEqual(0, pick_card(0, view))

    def test_dumps_queen_under_ace_of_spades(self):
        view = make_view([['3♠', 'Q♠'], [], [], []], trick=['4♠', 'A♠'], trick_number=4)
        self.assertEqual(1, pick_card(0, view))

    def test_trailing_pointless_trick_sheds_high_card_of_suit(self):
        view = make_view([['3♦', 'K♦', 'Q♠'], [], [], []], trick=['5♦', '9♦', '2♦'], trick_number=4)
        self.assertEqual(1, pick_card(0, view))

    def test_trailing_pointless_trick_void_discards_most_points(self):
        view = make_view([['3♣', 'K♣', 'Q♠', '4♥'], [], [], []],
                         trick=['5♦', '9♦', '2♦'], trick_number=4)
        self.assertEqual(2, pick_card(0, view))

    def test_trailing_first_trick_void_discards_high_pointless_card(self):
        view = make_view([['A♦', '3♦', 'Q♠', '4♥'], [], [], []],
                         trick=['2♣', '9♣', '5♣'], trick_number=0)
        self.assertEqual(0, pick_card(0, view))

    def test_first_trick_void_before_last_discards_high_pointless_card(self):
        view = make_view([['A♦', '3♦', 'Q♠', '4♥'], [], [], []],
                         trick=['2♣', '9♣'], trick_number=0)
        self.assertEqual(0, pick_card(0, view))

    def test_plays_highest_card_under_winning_card(self):
        view = make_view([['3♦', '9♦', 'J♦'], [], [], []], trick=['10♦'], trick_number=4)
        self.assertEqual(1, pick_card(0, view))

    def test_plays_slightly_higher_card_when_not_trailing(self):
        view = make_view([['8♦', 'Q♦'], [], [], []], trick=['2♦', '5♦'], trick_number=4)
        self.assertEqual(0, pick_card(0, view))

    def test_trailing_forced_to_take_points_plays_highest(self):
        view = make_view([['8♦', 'K♦'], [], [], []], trick=['5♦', '2♥', '3♦'], trick_number=4)
        self.assertEqual(1, pick_card(0, view))

    def test_void_with_points_in_trick_discards_queen(self):
        view = make_view([['3♣', 'Q♠'], [], [], []], trick=['5♦', '2♥', '3♦'], trick_number=4)
        self.assertEqual(1, pick_card(0, view))


class TestPickCardInvariants(unittest.TestCase):
    def test_empty_hand_raises(self):
        view = make_view([[], [], [], []], trick=['5♦'], trick_number=4)
        with self.assertRaises(InvariantViolation):
            pick_card(0, view)

    def test_first_lead_without_two_of_clubs_raises(self):
        view = make_view([['3♣', '5♥'], [], [], []], trick_number=0)
        with self.assertRaises(InvariantViolation):
            pick_card(0, view)

    def test_empty_slots_are_never_picked(self):
        view = RoundView(
            hands=((None, c('9♦'), None), (), (), ()),
            trick=(c('5♦'),),
            trick_number=4,
            hearts_broken=False,
            leading_player_idx=3,
        )
        self.assertEqual(1, pick_card(0, view))

    def test_is_deterministic_and_legal(self):
        view = make_view([['3♣', 'K♣', 'Q♠', '4♥', '9♦'], ['2♦'], ['A♦'], []],
                         trick=['5♦', '9♠', '2♦'], trick_number=6)
        first = pick_card(0, view)
        second = pick_card(0, view)
        self.assertEqual(first, second)
        self.assertTrue(is_legal(view.hands[0], view.hands[0][first], view))
