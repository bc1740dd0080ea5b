from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np
from loguru import logger

from .config import config
from .dice import Dice, DieSource
from .session import GameSession
from .track import DEFAULT_TRACK, Track
from .types import Color


@dataclass(slots=True)
class GameRecord:
    winner: Optional[Color]
    rolls: int
    captures: Dict[Color, int] = field(default_factory=lambda: {c: 0 for c in Color})
    sixes: int = 0

    @property
    def finished(self) -> bool:
        return self.winner is not None


@dataclass(slots=True)
class SimulationSummary:
    games: int
    wins: Dict[Color, int]
    unfinished: int
    mean_rolls: float
    median_rolls: float
    max_rolls: int
    total_captures: Dict[Color, int]

    def win_rate(self, color: Color) -> float:
        return self.wins[color] / self.games if self.games else 0.0


@dataclass(slots=True)
class Simulator:
    """Plays whole games headlessly by rolling for both sides."""

    dice: DieSource = field(default_factory=lambda: Dice(config.DICE_SEED))
    max_turns: int = config.MAX_TURNS
    track: Track = DEFAULT_TRACK

    def play_game(self) -> GameRecord:
        session = GameSession(track=self.track, dice=self.dice)
        record = GameRecord(winner=None, rolls=0)

        while session.winner is None and session.turn_counter < self.max_turns:
            outcome = session.roll_die()
            record.rolls += 1
            if outcome.dice_roll == config.EXTRA_TURN_ROLL:
                record.sixes += 1
            if outcome.events.captured is not None:
                record.captures[outcome.player] += 1

        record.winner = session.winner
        if record.winner is None:
            logger.warning(f"Game stopped after {record.rolls} rolls without a winner")
        return record

    def run(self, num_games: int) -> List[GameRecord]:
        records: List[GameRecord] = []
        for i in range(num_games):
            records.append(self.play_game())
            if (i + 1) % 100 == 0:
                logger.info(f"Simulated {i + 1}/{num_games} games")
        return records


def summarize(records: Sequence[GameRecord]) -> SimulationSummary:
    rolls = np.asarray([r.rolls for r in records], dtype=np.int64)
    wins = {c: sum(1 for r in records if r.winner is c) for c in Color}
    captures = {c: sum(r.captures[c] for r in records) for c in Color}
    return SimulationSummary(
        games=len(records),
        wins=wins,
        unfinished=sum(1 for r in records if not r.finished),
        mean_rolls=float(rolls.mean()) if rolls.size else 0.0,
        median_rolls=float(np.median(rolls)) if rolls.size else 0.0,
        max_rolls=int(rolls.max()) if rolls.size else 0,
        total_captures=captures,
    )
