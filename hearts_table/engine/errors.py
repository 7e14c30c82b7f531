class HeartsError(Exception):
    """Base class for errors raised by the Hearts engine"""


class IllegalMoveError(HeartsError, ValueError):
    """
    A card was played against the rules of the game. The round state is
    left untouched.

    Args:
        card: The rejected card
        reason: Human-readable explanation of the rule that was broken
    """

    def __init__(self, card, reason: str):
        super().__init__(f"You can't play this card: {reason}")
        self.card = card
        self.reason = reason


class InvariantViolation(HeartsError, RuntimeError):
    """The round state is corrupted. This is a programming error and should never be caught"""
