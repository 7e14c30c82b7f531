import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from hearts_table.engine import (
    Card, Player, PlayerKind, RoundState, IllegalMoveError, InvariantViolation,
)
from hearts_table.engine.constants import PLAYER_COUNT, CARDS_PER_PLAYER, MAX_POINTS
from hearts_table.engine.legality import check_play, legal_slots
from hearts_table.engine.trick import winning_card_idx, points_in, trick_points
from hearts_table.engine.utils import is_heart, is_starting_card
from .decision import pick_card
from .deck import Deck, validate_full_deck
from .settings import TableSettings

logger = logging.getLogger(__name__)

HUMAN_SEAT = 0


class TablePhase(Enum):
    IDLE = 'idle'
    DEALING = 'dealing'
    LEADING = 'leading'
    COLLECTING = 'collecting'
    AWAITING_HUMAN = 'awaiting_human'
    RESOLVING = 'resolving'
    ROUND_END = 'round_end'


@dataclass(frozen=True)
class PlayResult:
    """
    Outcome of a card submitted by the human player.

    Args:
        accepted: Whether the card was played
        reason: Why the card was rejected, ``None`` if accepted
        card: The card that was played, ``None`` if rejected
    """
    accepted: bool
    reason: str | None = None
    card: Card | None = None


class HeartsTable:
    """
    A table of one human and three computer players, playing rounds of
    Hearts.

    Computer players move synchronously whenever play reaches them. When it
    is the human player's turn the table stops in the ``AWAITING_HUMAN``
    phase and resumes only after :meth:`submit_human_play` accepts a card.

    Args:
        settings: Names, seed and autoplay setting of the table. See
            :class:`TableSettings` for defaults
    """

    def __init__(self, settings: TableSettings = TableSettings()):
        self.settings = settings
        self.deck = Deck(random_state=settings.random_state)

        human_kind = PlayerKind.COMPUTER if settings.autoplay else PlayerKind.HUMAN
        self.players = [Player(settings.player_name, human_kind)] + [
            Player(name, PlayerKind.COMPUTER) for name in settings.opponent_names
        ]
        self.state = RoundState(players=self.players)
        self.phase = TablePhase.IDLE
        self.status = ''
        self.last_trick: tuple[list[Card], int] | None = None

    @property
    def human_player(self) -> Player:
        return self.players[HUMAN_SEAT]

    @property
    def current_player(self) -> Player | None:
        """The player expected to throw the next card, ``None`` between rounds"""
        if self.phase in (TablePhase.IDLE, TablePhase.ROUND_END):
            return None
        return self.state.current_player

    @property
    def is_waiting_for_human(self) -> bool:
        return self.phase == TablePhase.AWAITING_HUMAN

    @property
    def scores(self) -> list[int]:
        """Points taken by each player in the current round"""
        return [player.hand.points_taken for player in self.players]

    def _seat(self, player: Player | int) -> int:
        if isinstance(player, Player):
            return self.state.seat_of(player)
        if not 0 <= player < PLAYER_COUNT:
            raise ValueError(f'Seat must be in range 0-{PLAYER_COUNT - 1}, got {player}')
        return player

    def start_round(self, player_name: str | None = None, shuffled: Sequence[Card] | None = None):
        """
        Discards whatever is in progress, deals a new round and plays until
        the human player has to move or the round ends.

        Args:
            player_name: New name for the human player. ``None`` keeps the
                current name
            shuffled: Order of the cards to deal, 13 cards per player in
                seat order. ``None`` means the table's own deck is shuffled
        """
        if player_name is not None and any(player_name == opponent.name for opponent in self.players[1:]):
            raise ValueError(f'Name {player_name!r} is already taken by an opponent')

        if shuffled is not None:
            validate_full_deck(shuffled)
            cards = list(shuffled)
        else:
            cards = self.deck.shuffle().all()

        if player_name is not None:
            self.human_player.name = player_name

        self.phase = TablePhase.DEALING
        logger.debug('=====')
        logger.debug('Resetting game')
        self.state.trick = []
        self.state.trick_number = 0
        self.state.hearts_broken = False
        self.last_trick = None
        for seat, player in enumerate(self.players):
            player.hand.deal(cards[seat * CARDS_PER_PLAYER:(seat + 1) * CARDS_PER_PLAYER])

        self.state.leading_player_idx = self._find_starting_player()
        self.phase = TablePhase.LEADING
        self._advance()

    def _find_starting_player(self) -> int:
        """Seat of the player with 2 of clubs on hand"""
        for seat, player in enumerate(self.players):
            if any(is_starting_card(card) for card in player.hand):
                return seat
        raise InvariantViolation('Nobody holds Two of Clubs')

    def submit_human_play(self, slot_idx: int) -> PlayResult:
        """
        Plays the card from the given slot of the human player's hand.
        A rejected card leaves the table untouched.
        """
        if not self.is_waiting_for_human:
            return PlayResult(accepted=False, reason="It's not your turn.")

        hand = self.human_player.hand
        if not 0 <= slot_idx < len(hand.slots) or hand[slot_idx] is None:
            return PlayResult(accepted=False, reason='There is no card in this slot.')

        try:
            card = self._play_card(HUMAN_SEAT, slot_idx)
        except IllegalMoveError as e:
            return PlayResult(accepted=False, reason=e.reason)

        self._advance()
        return PlayResult(accepted=True, card=card)

    def play_for_human(self) -> PlayResult:
        """Lets the computer pick and play the human player's card"""
        if not self.is_waiting_for_human:
            return PlayResult(accepted=False, reason="It's not your turn.")
        return self.submit_human_play(pick_card(HUMAN_SEAT, self.state.view()))

    def set_autoplay(self, enabled: bool):
        """Hands the human seat over to the computer, or takes it back"""
        self.human_player.kind = PlayerKind.COMPUTER if enabled else PlayerKind.HUMAN
        if self.is_waiting_for_human:
            self._advance()

    def legal_moves(self, player: Player | int) -> list[int]:
        """Slot indexes of the cards the player could legally play now"""
        seat = self._seat(player)
        return legal_slots(self.players[seat].hand.slots, self.state.view())

    def score(self, player: Player | int) -> int:
        return self.players[self._seat(player)].hand.points_taken

    def is_round_over(self) -> bool:
        return self.phase == TablePhase.ROUND_END

    def winners(self) -> set[str]:
        """
        Players with the lowest score, or the only player who took all the
        points (shot the moon)
        """
        scores = self.scores
        if MAX_POINTS in scores:
            return {self.players[scores.index(MAX_POINTS)].name}
        min_score = min(scores)
        return {player.name for player, score in zip(self.players, scores) if score == min_score}

    def _play_card(self, seat: int, slot_idx: int) -> Card:
        player = self.players[seat]
        if self.state.is_trick_full:
            raise InvariantViolation('Cannot play a card because the trick is full')
        if seat != self.state.current_player_idx:
            raise InvariantViolation(f'{player} is playing out of turn')

        card = player.hand[slot_idx]
        if card is None:
            raise InvariantViolation(f'{player} has no card in slot {slot_idx}')

        is_valid, explanation = check_play(player.hand, card, self.state.view())
        if not is_valid:
            raise IllegalMoveError(card, explanation)

        player.hand.remove(slot_idx)
        self.state.trick.append(card)
        logger.debug('%s plays %s', player, card)
        return card

    def _advance(self):
        while True:
            if self.state.is_trick_full:
                self._complete_trick()

            if self.state.is_finished:
                self._end_round()
                return

            player = self.state.current_player
            self.phase = TablePhase.LEADING if len(self.state.trick) == 0 else TablePhase.COLLECTING
            logger.debug('Leading player: %s, current player: %s', self.state.leading_player, player)

            if not player.is_computer_controlled:
                self.phase = TablePhase.AWAITING_HUMAN
                self.status = 'Select a card to play.'
                return

            self.status = f'Waiting for {player} to play a card...'
            seat = self.state.current_player_idx
            slot_idx = pick_card(seat, self.state.view())
            try:
                self._play_card(seat, slot_idx)
            except IllegalMoveError as e:
                raise InvariantViolation(f'{player} picked an illegal card: {e.reason}') from e

    def _complete_trick(self):
        self.phase = TablePhase.RESOLVING
        trick = self.state.trick
        winner_idx = (self.state.leading_player_idx + winning_card_idx(trick)) % PLAYER_COUNT
        winner = self.players[winner_idx]
        logger.debug('%s takes the trick', winner)

        taken = points_in(trick)
        for card in taken:
            logger.debug('%s takes card %s', winner, card)
        winner.hand.take(taken)
        if any(is_heart(card) for card in taken):
            self.state.hearts_broken = True

        self.last_trick = (trick.copy(), winner_idx)
        logger.info('Trick %d: %s (%d pts), taken by %s', self.state.trick_number + 1,
                    ', '.join(str(card) for card in trick), trick_points(trick), winner)
        self.state.trick = []
        self.state.leading_player_idx = winner_idx
        self.state.trick_number += 1
        logger.debug('-----')

    def _end_round(self):
        if any(not player.hand.is_empty for player in self.players):
            raise InvariantViolation('The round ended with cards left in hands')
        for player in self.players:
            player.hand.sort_taken()
        self.phase = TablePhase.ROUND_END
        self.status = 'Game ended.'
        logger.debug('Round finished. Scores: %s, winners: %s', self.scores, sorted(self.winners()))

    def dump_state(self):
        """Logs every player's hand and taken cards"""
        logger.debug('------------------------------')
        for player in self.players:
            logger.debug('Player %s', player)
            logger.debug('Hand:')
            for card in player.hand.slots:
                logger.debug('  %s', '<empty>' if card is None else card)
            logger.debug('Taken:')
            for card in player.hand.taken:
                logger.debug('  %s', card)
