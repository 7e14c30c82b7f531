from dataclasses import dataclass, field
from enum import Enum

from .card import Card
from .constants import PLAYER_COUNT, CARDS_PER_PLAYER, Suit
from .hand import Hand


class PlayerKind(Enum):
    HUMAN = 'human'
    COMPUTER = 'computer'


@dataclass(eq=False)
class Player:
    """
    Args:
        name: Name shown to the other players
        kind: Whether the player's moves come from outside or from the
            decision engine
        hand: Cards held and taken by the player
    """
    name: str
    kind: PlayerKind = PlayerKind.COMPUTER
    hand: Hand = field(default_factory=Hand)

    @property
    def is_computer_controlled(self) -> bool:
        return self.kind == PlayerKind.COMPUTER

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class RoundView:
    """
    Read-only snapshot of a round, as seen by the legality checker and the
    decision engine.

    Args:
        hands: Slots of every player's hand, indexed by seat
        trick: Cards in the current trick, in the order they were played
        trick_number: Number of tricks completed in this round
        hearts_broken: Whether a heart has been taken in this round
        leading_player_idx: Seat of the player who led the current trick
    """
    hands: tuple[tuple[Card | None, ...], ...]
    trick: tuple[Card, ...]
    trick_number: int
    hearts_broken: bool
    leading_player_idx: int

    @property
    def is_first_trick(self) -> bool:
        return self.trick_number == 0

    @property
    def leading_suit(self) -> Suit | None:
        """Leading suit in the current trick, or None if the trick is empty"""
        if len(self.trick) == 0:
            return None
        return self.trick[0].suit

    @property
    def current_player_idx(self) -> int:
        return (self.leading_player_idx + len(self.trick)) % PLAYER_COUNT


@dataclass
class RoundState:
    """
    Mutable state of the round being played. Owned by the table, which is
    the only place where it is modified.
    """
    players: list[Player]
    trick: list[Card] = field(default_factory=list)
    trick_number: int = 0
    leading_player_idx: int = 0
    hearts_broken: bool = False

    @property
    def leading_player(self) -> Player:
        return self.players[self.leading_player_idx]

    @property
    def current_player_idx(self) -> int:
        """Seat of the player that is expected to throw the next card"""
        return (self.leading_player_idx + len(self.trick)) % PLAYER_COUNT

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_idx]

    @property
    def leading_suit(self) -> Suit | None:
        if len(self.trick) == 0:
            return None
        return self.trick[0].suit

    @property
    def is_trick_full(self) -> bool:
        return len(self.trick) == PLAYER_COUNT

    @property
    def is_finished(self) -> bool:
        return self.trick_number == CARDS_PER_PLAYER

    def seat_of(self, player: Player) -> int:
        for seat, other in enumerate(self.players):
            if other is player:
                return seat
        raise ValueError(f'{player} does not sit at this table')

    def view(self) -> RoundView:
        return RoundView(
            hands=tuple(tuple(player.hand.slots) for player in self.players),
            trick=tuple(self.trick),
            trick_number=self.trick_number,
            hearts_broken=self.hearts_broken,
            leading_player_idx=self.leading_player_idx,
        )
