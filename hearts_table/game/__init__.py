from .decision import pick_card
from .deck import Deck
from .settings import TableSettings
from .table import HeartsTable, TablePhase, PlayResult

__all__ = [
    'Deck',
    'HeartsTable',
    'PlayResult',
    'TablePhase',
    'TableSettings',
    'pick_card',
]
