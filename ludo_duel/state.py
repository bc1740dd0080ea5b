from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .config import config
from .types import Color, Position


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of one game: both token positions, who rolls next, last die.

    States are values. The engine returns a new ``GameState`` for every
    resolved roll instead of mutating the old one.
    """

    positions: Tuple[Position, Position]
    current_player: Color = Color.RED
    last_roll: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.positions) != len(Color):
            raise ValueError(f"Expected {len(Color)} positions, got {len(self.positions)}")
        for pos in self.positions:
            if not isinstance(pos, Position):
                raise TypeError(f"Positions must be Position values, got {pos!r}")
        # slots + frozen: normalise through object.__setattr__
        object.__setattr__(self, "positions", tuple(self.positions))
        object.__setattr__(self, "current_player", Color(self.current_player))

        red, blue = self.positions
        if red.is_on_track and blue.is_on_track and red.index == blue.index:
            raise ValueError(f"Both tokens on track cell {red.index}")
        if self.last_roll is not None and not (
            config.DICE_MIN <= self.last_roll <= config.DICE_MAX
        ):
            raise ValueError(f"last_roll out of range: {self.last_roll}")

    @classmethod
    def initial(cls) -> "GameState":
        return cls(positions=(Position.base(), Position.base()))

    def position_of(self, player: int | Color) -> Position:
        return self.positions[int(player)]

    def positions_by_color(self) -> Dict[Color, Position]:
        return {color: self.positions[int(color)] for color in Color}
