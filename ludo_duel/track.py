from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .config import config
from .types import Color


@dataclass(frozen=True, slots=True)
class Track:
    """Shared cyclic path plus each player's entry cell (no rule logic).

    Cells are identified by index ``0..N-1``; the coordinates only matter to
    whoever draws the board.
    """

    cells: Tuple[Tuple[int, int], ...]
    entry_indices: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.cells:
            raise ValueError("Track needs at least one cell")
        if len(self.entry_indices) != len(Color):
            raise ValueError(f"Track needs one entry index per player, got {self.entry_indices}")
        if len(set(self.entry_indices)) != len(self.entry_indices):
            raise ValueError("Entry indices must be distinct")
        for idx in self.entry_indices:
            if not 0 <= idx < len(self.cells):
                raise ValueError(f"Entry index {idx} outside track of {len(self.cells)} cells")

    @classmethod
    def build(
        cls, cells: Sequence[Sequence[int]], entry_indices: Sequence[int]
    ) -> "Track":
        return cls(
            cells=tuple((int(r), int(c)) for r, c in cells),
            entry_indices=tuple(int(i) for i in entry_indices),
        )

    def cell_count(self) -> int:
        return len(self.cells)

    def entry_index(self, player: int | Color) -> int:
        return self.entry_indices[int(player)]

    def advance(self, index: int, steps: int) -> int:
        """Wrap-around successor ``steps`` cells ahead of ``index``."""
        return (index + steps) % len(self.cells)

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self.cells)

    def coordinate(self, index: int) -> Tuple[int, int]:
        return self.cells[index]


DEFAULT_TRACK = Track.build(config.TRACK_CELLS, config.ENTRY_INDICES)
