"""
Rules engine and computer opponents for a game of Hearts between one human
and three computer players.
"""

from .engine import Card, Suit, Player, PlayerKind
from .game import HeartsTable, TableSettings, TablePhase, PlayResult
