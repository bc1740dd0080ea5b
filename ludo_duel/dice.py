from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .config import config
from .exceptions import DiceExhaustedError

# Any zero-argument callable returning a face in 1..6 can act as a die.
DieSource = Callable[[], int]


@dataclass(slots=True)
class Dice:
    """Uniform six-sided die backed by its own ``random.Random``."""

    seed: Optional[int] = None
    rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = random.Random(self.seed)

    def roll(self) -> int:
        return self.rng.randint(config.DICE_MIN, config.DICE_MAX)

    def reseed(self, seed: Optional[int]) -> None:
        self.seed = seed
        self.rng.seed(seed)

    def __call__(self) -> int:
        return self.roll()


class ScriptedDice:
    """Replays a fixed sequence of die values, e.g. for tests or replays."""

    def __init__(self, values: Iterable[int]):
        self._values = deque(values)

    def roll(self) -> int:
        if not self._values:
            raise DiceExhaustedError("No scripted die values left")
        return self._values.popleft()

    def remaining(self) -> int:
        return len(self._values)

    def __call__(self) -> int:
        return self.roll()
