from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from loguru import logger

from .dice import Dice, DieSource
from .exceptions import InvalidPlayerError, NotYourTurnError
from .game import reset as initial_state
from .game import resolve_roll
from .messages import describe_outcome, new_game_message, welcome_message
from .state import GameState
from .track import DEFAULT_TRACK, Track
from .types import Color, Position, RollOutcome


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    positions: Dict[Color, Position]
    current_player: Color
    last_roll: Optional[int]
    message: str
    can_roll: bool
    turn_counter: int
    winner: Optional[Color] = None
    last_outcome: Optional[RollOutcome] = None


class GameSession:
    """Coordinates one pass-and-play game on behalf of a view.

    The view only issues intents (``roll_die``, ``reset``) and reads
    ``snapshot()``; the rules live in :func:`ludo_duel.game.resolve_roll`.
    """

    def __init__(self, track: Track = DEFAULT_TRACK, dice: Optional[DieSource] = None) -> None:
        self.track = track
        self.dice: DieSource = dice if dice is not None else Dice()
        self.state: GameState = initial_state()
        self.message: str = welcome_message()
        self.last_outcome: Optional[RollOutcome] = None
        self.winner: Optional[Color] = None
        self.turn_counter: int = 0

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------
    def roll_die(self, player: Optional[int | Color] = None) -> RollOutcome:
        """Draw a die value for the player on turn and resolve it."""

        if player is not None and self._as_color(player) != self.state.current_player:
            logger.warning(
                f"Rejected roll from {Color(player).display_name}: "
                f"{self.state.current_player.display_name} is on turn"
            )
            raise NotYourTurnError(
                f"It is {self.state.current_player.display_name}'s turn"
            )

        value = self.dice()
        # resolve_roll validates the value before anything is committed
        next_state, outcome = resolve_roll(self.state, value, self.track)

        self.state = next_state
        self.last_outcome = outcome
        self.message = describe_outcome(outcome)
        self.turn_counter += 1
        if outcome.events.reached_home and self.winner is None:
            self.winner = outcome.player
        return outcome

    def reset(self) -> None:
        self.state = initial_state()
        self.message = new_game_message()
        self.last_outcome = None
        self.winner = None
        self.turn_counter = 0
        logger.info("Game reset")

    @staticmethod
    def _as_color(player: int | Color) -> Color:
        if isinstance(player, bool) or not isinstance(player, int):
            raise InvalidPlayerError(f"Player id must be 0 or 1, got {player!r}")
        try:
            return Color(player)
        except ValueError as exc:
            raise InvalidPlayerError(f"Player id must be 0 or 1, got {player!r}") from exc

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------
    def can_roll(self) -> bool:
        return not self.state.position_of(self.state.current_player).is_home

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            positions=self.state.positions_by_color(),
            current_player=self.state.current_player,
            last_roll=self.state.last_roll,
            message=self.message,
            can_roll=self.can_roll(),
            turn_counter=self.turn_counter,
            winner=self.winner,
            last_outcome=self.last_outcome,
        )
