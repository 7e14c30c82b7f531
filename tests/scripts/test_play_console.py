import io
import unittest
from unittest.mock import patch

from hearts_table.scripts import play_console
from tests.utils import c


class TestPlayConsole(unittest.TestCase):
    def test_pretty_print_hand_numbers_valid_cards(self):
        slots = [c('2♣'), None, c('10♦'), c('Q♠')]
        with patch('builtins.print') as mocked_print:
            play_console.pretty_print_hand(slots, valid_slots=[2, 3])
        numbers_row, cards_row = [call.args[0] for call in mocked_print.call_args_list]
        self.assertEqual('    |  1  |  2 ', numbers_row)
        self.assertEqual('2♣  | 10♦ | Q♠ ', cards_row)

    def test_read_choice_retries_until_valid(self):
        with patch('builtins.input', side_effect=['x', '7', '2']), patch('builtins.print'):
            self.assertEqual(1, play_console.read_choice(3))

    def test_autoplay_round_runs_without_input(self):
        with patch('builtins.input') as mocked_input, patch('builtins.print') as mocked_print:
            play_console.main(['--autoplay', '--seed', '3', '--rounds', '2'])
        mocked_input.assert_not_called()
        printed = [call.args[0] for call in mocked_print.call_args_list if call.args]
        self.assertEqual(2, sum(line.startswith('Round finished') for line in printed))

    def test_human_round_reads_choices(self):
        # always pick the first valid card
        with patch('builtins.input', return_value='1') as mocked_input, patch('builtins.print'):
            play_console.main(['--seed', '8', '--name', 'Ann'])
        self.assertEqual(13, mocked_input.call_count)

    def test_name_taken_by_opponent_is_a_usage_error(self):
        with patch('sys.stderr', new_callable=io.StringIO) as mocked_stderr:
            with self.assertRaises(SystemExit) as cm:
                play_console.main(['--name', 'Paul'])
        self.assertEqual(2, cm.exception.code)
        self.assertIn('Player names must be unique', mocked_stderr.getvalue())
