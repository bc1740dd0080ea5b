"""
Ludo Duel
Two-player pass-and-play race game: one token each on a shared circular track.
"""

from .config import config
from .dice import Dice, ScriptedDice
from .exceptions import (
    DiceExhaustedError,
    InvalidDieValueError,
    InvalidPlayerError,
    InvalidStateError,
    LudoError,
    NotYourTurnError,
)
from .game import reset, resolve_roll
from .session import GameSession, SessionSnapshot
from .simulator import GameRecord, SimulationSummary, Simulator, summarize
from .state import GameState
from .track import DEFAULT_TRACK, Track
from .types import Color, MoveEvents, OutcomeKind, Position, PositionKind, RollOutcome

__all__ = [
    "config",
    "Color",
    "Position",
    "PositionKind",
    "OutcomeKind",
    "MoveEvents",
    "RollOutcome",
    "Track",
    "DEFAULT_TRACK",
    "GameState",
    "resolve_roll",
    "reset",
    "Dice",
    "ScriptedDice",
    "GameSession",
    "SessionSnapshot",
    "Simulator",
    "GameRecord",
    "SimulationSummary",
    "summarize",
    "LudoError",
    "InvalidDieValueError",
    "InvalidPlayerError",
    "InvalidStateError",
    "NotYourTurnError",
    "DiceExhaustedError",
]
