# Exception types for contract violations. Normal game outcomes are never errors.
class LudoError(Exception):
    """Base exception for game-engine errors."""

    pass


class InvalidDieValueError(LudoError, ValueError):
    """Raised when a die value falls outside the die faces."""

    def __init__(self, value, low: int = 1, high: int = 6):
        super().__init__(f"Die value must be an int in {low}..{high}, got {value!r}")
        self.value = value


class InvalidStateError(LudoError):
    """Raised when a game state breaks an invariant for the track it is played on."""

    pass


class InvalidPlayerError(LudoError, ValueError):
    """Raised when a player id does not name one of the two players."""

    pass


class NotYourTurnError(LudoError):
    """Raised when a roll is attempted by the player who is not on turn."""

    pass


class DiceExhaustedError(LudoError):
    """Raised when a scripted die source has no values left."""

    pass
