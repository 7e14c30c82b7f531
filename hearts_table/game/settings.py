from dataclasses import dataclass

from hearts_table.engine.constants import DEFAULT_OPPONENT_NAMES, PLAYER_COUNT


@dataclass(frozen=True)
class TableSettings:
    """
    Args:
        player_name: Name of the human player, who always sits at seat 0
        opponent_names: Names of the computer players, in turn order after
            the human player
        random_state: Random seed for shuffling, for reproducibility
        autoplay: If ``True``, the human seat is played by the computer
            from the start
    """
    player_name: str = 'You'
    opponent_names: tuple[str, ...] = DEFAULT_OPPONENT_NAMES
    random_state: int | None = None
    autoplay: bool = False

    def __post_init__(self):
        if len(self.opponent_names) != PLAYER_COUNT - 1:
            raise ValueError(f'There should be exactly {PLAYER_COUNT - 1} opponents')
        names = [self.player_name, *self.opponent_names]
        if len(set(names)) != PLAYER_COUNT:
            raise ValueError('Player names must be unique')
