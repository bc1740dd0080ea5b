import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _env_int_list(name: str, default: str) -> list[int]:
    return [int(x) for x in os.getenv(name, default).split(",") if x.strip()]


def _env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    return int(raw) if raw not in (None, "") else None


@dataclass(slots=True)
class Config:
    # --- Constants ---
    BOARD_SIZE: int = 7  # 7x7 grid, track runs around the edge
    NUM_PLAYERS: int = 2
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_BASE_ROLL: int = 6
    EXTRA_TURN_ROLL: int = 6
    MAX_TURNS: int = int(os.getenv("MAX_TURNS", 1000))
    DICE_SEED: Optional[int] = field(default_factory=lambda: _env_optional_int("DICE_SEED"))

    # (row, col) of each track cell, in movement order
    TRACK_CELLS: list[tuple[int, int]] = field(
        default_factory=lambda: [
            # top row, left -> right
            (0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (0, 5),
            # right column, top -> down
            (1, 6), (2, 6), (3, 6), (4, 6), (5, 6),
            # bottom row, right -> left
            (6, 6), (6, 5), (6, 4), (6, 3), (6, 2), (6, 1),
            # left column, bottom -> up
            (6, 0), (5, 0), (4, 0), (3, 0), (2, 0), (1, 0),
            # inner bridge
            (1, 1), (1, 2), (1, 3), (1, 4), (1, 5),
        ]
    )
    ENTRY_INDICES: list[int] = field(
        default_factory=lambda: _env_int_list("ENTRY_INDICES", "0,14")
    )  # Red, Blue

    # Derived (populated in __post_init__ due to slots)
    TRACK_LENGTH: int = 0

    def __post_init__(self):
        self.TRACK_LENGTH = len(self.TRACK_CELLS)

        if len(self.ENTRY_INDICES) != self.NUM_PLAYERS:
            raise ValueError(
                f"ENTRY_INDICES must list {self.NUM_PLAYERS} track indices, got {self.ENTRY_INDICES}"
            )
        if len(set(self.ENTRY_INDICES)) != len(self.ENTRY_INDICES):
            raise ValueError("ENTRY_INDICES must be distinct")
        for idx in self.ENTRY_INDICES:
            if not 0 <= idx < self.TRACK_LENGTH:
                raise ValueError(
                    f"Entry index {idx} outside track of length {self.TRACK_LENGTH}"
                )
        if self.MAX_TURNS < 1:
            raise ValueError("MAX_TURNS must be positive")


config = Config()
