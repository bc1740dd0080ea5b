from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Color(IntEnum):
    RED = 0
    BLUE = 1

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def opponent(self) -> "Color":
        return Color(1 - int(self))


class PositionKind(Enum):
    BASE = "base"
    ON_TRACK = "on_track"
    HOME = "home"


@dataclass(frozen=True, slots=True)
class Position:
    """Where a token is: in base, on a track cell, or home (terminal).

    Only ``ON_TRACK`` carries an index. Use the ``base()``, ``on_track()``
    and ``home()`` constructors rather than building one by hand.
    """

    kind: PositionKind
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is PositionKind.ON_TRACK:
            if isinstance(self.index, bool) or not isinstance(self.index, int):
                raise ValueError(f"ON_TRACK position needs an int index, got {self.index!r}")
            if self.index < 0:
                raise ValueError(f"Track index must be non-negative, got {self.index}")
        elif self.index is not None:
            raise ValueError(f"{self.kind.name} position cannot carry an index")

    @classmethod
    def base(cls) -> "Position":
        return cls(PositionKind.BASE)

    @classmethod
    def on_track(cls, index: int) -> "Position":
        return cls(PositionKind.ON_TRACK, index)

    @classmethod
    def home(cls) -> "Position":
        return cls(PositionKind.HOME)

    @property
    def is_base(self) -> bool:
        return self.kind is PositionKind.BASE

    @property
    def is_on_track(self) -> bool:
        return self.kind is PositionKind.ON_TRACK

    @property
    def is_home(self) -> bool:
        return self.kind is PositionKind.HOME

    def __str__(self) -> str:
        if self.is_on_track:
            return f"ON_TRACK({self.index})"
        return self.kind.name


class OutcomeKind(Enum):
    NEEDS_SIX = "needs-six"
    ALREADY_HOME = "already-home"
    MOVED = "moved"
    CAPTURED = "captured"
    REACHED_HOME = "reached-home-wins"
    ROLLED_SIX_AGAIN = "rolled-six-again"


@dataclass(frozen=True, slots=True)
class MoveEvents:
    entered: bool = False
    captured: Optional[Color] = None
    reached_home: bool = False


@dataclass(frozen=True, slots=True)
class RollOutcome:
    player: Color
    dice_roll: int
    kind: OutcomeKind
    old_position: Position
    new_position: Position
    events: MoveEvents
    extra_turn: bool
