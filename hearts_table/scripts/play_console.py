"""
Play Hearts against three computer opponents in the console.

Usage:
    hearts-table --name Ann --rounds 3
    hearts-table --autoplay --seed 42 --verbose
"""
import argparse
import logging

from hearts_table.engine import Card
from hearts_table.engine.trick import trick_points
from hearts_table.game import HeartsTable, TableSettings


def pretty_print_hand(slots: list[Card | None], valid_slots: list[int]) -> None:
    """Prints held cards, numbering the ones which can be played"""
    held = [slot_idx for slot_idx, card in enumerate(slots) if card is not None]

    numbers_row = ' | '.join(
        f'{valid_slots.index(i) + 1:^3}'
        if i in valid_slots else ' ' * 3
        for i in held
    )
    cards_row = ' | '.join(f'{str(slots[i]):^3}' for i in held)

    print(numbers_row)
    print(cards_row)


def read_choice(valid_count: int) -> int:
    while True:
        try:
            choice = int(input(f'Choose a card (1-{valid_count}): ')) - 1
            if 0 <= choice < valid_count:
                return choice
            print('Choice out of range.')
        except ValueError:
            print('Please enter a number.')


def print_last_trick(table: HeartsTable) -> None:
    if table.last_trick is None:
        return
    trick, winner_idx = table.last_trick
    cards_str = ', '.join(str(card) for card in trick)
    print(f'Trick outcome: {cards_str} ({trick_points(trick)} pts), '
          f'taken by {table.players[winner_idx]}')


def play_human_turn(table: HeartsTable) -> None:
    print()
    trick = table.state.trick
    if len(trick) == 0:
        print('You are leading the trick')
    else:
        print(f"Current trick: {', '.join(str(card) for card in trick)}")

    print('Your hand:')
    valid_slots = table.legal_moves(table.human_player)
    pretty_print_hand(table.human_player.hand.slots, valid_slots)

    choice = read_choice(len(valid_slots))
    result = table.submit_human_play(valid_slots[choice])
    if not result.accepted:
        print(f"You can't play this card: {result.reason}")


def play_round(table: HeartsTable) -> None:
    table.start_round()
    last_seen = None
    while not table.is_round_over():
        if table.last_trick is not None and table.last_trick is not last_seen:
            print_last_trick(table)
            last_seen = table.last_trick
        play_human_turn(table)
    print_last_trick(table)

    print('=====')
    print(f'Round finished. Your score: {table.score(table.human_player)}')
    for player in table.players:
        print(f'  {player}: {table.score(player)}')
    print(f"Winners: {', '.join(sorted(table.winners()))}")
    print('=====')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Hearts against three computer players')
    parser.add_argument('--name', type=str, default='You', help='Your name at the table')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for shuffling')
    parser.add_argument('--rounds', type=int, default=1, help='Number of rounds to play')
    parser.add_argument('--autoplay', action='store_true',
                        help='Let the computer play your cards. Trick outcomes are logged as they happen')
    parser.add_argument('--verbose', action='store_true', help='Log every card played')
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        level = logging.DEBUG
    elif args.autoplay:
        # the whole round is played without stopping, so report tricks through the log
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(message)s')

    try:
        settings = TableSettings(
            player_name=args.name,
            random_state=args.seed,
            autoplay=args.autoplay,
        )
    except ValueError as e:
        parser.error(str(e))

    table = HeartsTable(settings)
    total_scores = [0] * len(table.players)
    for _ in range(args.rounds):
        play_round(table)
        total_scores = [total + score for total, score in zip(total_scores, table.scores)]
        print(f'Current scores (yours is first): {total_scores}')


if __name__ == '__main__':
    main()
