from __future__ import annotations

from typing import Tuple

from loguru import logger

from .config import config
from .exceptions import InvalidDieValueError, InvalidStateError
from .state import GameState
from .track import DEFAULT_TRACK, Track
from .types import Color, MoveEvents, OutcomeKind, Position, RollOutcome


def validate_die(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDieValueError(value, config.DICE_MIN, config.DICE_MAX)
    if not config.DICE_MIN <= value <= config.DICE_MAX:
        raise InvalidDieValueError(value, config.DICE_MIN, config.DICE_MAX)
    return value


def _check_state(state: GameState, track: Track) -> None:
    for color, pos in state.positions_by_color().items():
        if pos.is_on_track and not track.contains(pos.index):
            raise InvalidStateError(
                f"{color.display_name} at cell {pos.index} but track has {track.cell_count()} cells"
            )


# --- Rules: destination for a roll ---
def _destination(
    current: Position, player: Color, dice: int, track: Track
) -> Position:
    if current.is_home:
        return current
    if current.is_base:
        if dice == config.EXIT_BASE_ROLL:
            return Position.on_track(track.entry_index(player))
        return current
    target = track.advance(current.index, dice)
    # exact landing on own entry cell completes the lap
    if target == track.entry_index(player):
        return Position.home()
    return Position.on_track(target)


def _classify(
    old: Position, new: Position, events: MoveEvents, extra_turn: bool
) -> OutcomeKind:
    if old.is_home:
        return OutcomeKind.ALREADY_HOME
    if old.is_base and new.is_base:
        return OutcomeKind.NEEDS_SIX
    if events.reached_home:
        return OutcomeKind.REACHED_HOME
    if events.captured is not None:
        return OutcomeKind.CAPTURED
    if extra_turn:
        return OutcomeKind.ROLLED_SIX_AGAIN
    return OutcomeKind.MOVED


def resolve_roll(
    state: GameState, dice_roll: int, track: Track = DEFAULT_TRACK
) -> Tuple[GameState, RollOutcome]:
    """Apply one die value for the player on turn.

    Returns the next state and an outcome describing what happened. The input
    state is left untouched. A token in base needs a 6 to enter at its entry
    cell; a token on the track moves ``dice_roll`` cells and goes home when
    it lands exactly on its own entry cell; landing on the opponent sends it
    back to base. A 6 grants one more roll unless the move reached home.

    :raises InvalidDieValueError: if ``dice_roll`` is not an int in 1..6
    :raises InvalidStateError: if a token sits outside ``track``
    """
    dice = validate_die(dice_roll)
    _check_state(state, track)

    player = state.current_player
    opponent = player.opponent
    old = state.position_of(player)
    new = _destination(old, player, dice, track)

    opp_pos = state.position_of(opponent)
    captured = None
    if new.is_on_track and opp_pos.is_on_track and opp_pos.index == new.index:
        captured = opponent
        opp_pos = Position.base()

    events = MoveEvents(
        entered=old.is_base and new.is_on_track,
        captured=captured,
        reached_home=old.is_on_track and new.is_home,
    )
    extra_turn = (
        dice == config.EXTRA_TURN_ROLL
        and not old.is_home
        and not events.reached_home
    )
    kind = _classify(old, new, events, extra_turn)

    positions = [Position.base(), Position.base()]
    positions[int(player)] = new
    positions[int(opponent)] = opp_pos
    next_state = GameState(
        positions=tuple(positions),
        current_player=player if extra_turn else opponent,
        last_roll=dice,
    )

    logger.debug(
        f"{player.display_name} rolled {dice}: {old} -> {new} ({kind.value})"
    )
    if captured is not None:
        logger.info(f"{player.display_name} captured {captured.display_name} at cell {new.index}")
    if events.reached_home:
        logger.info(f"{player.display_name} reached home")

    outcome = RollOutcome(
        player=player,
        dice_roll=dice,
        kind=kind,
        old_position=old,
        new_position=new,
        events=events,
        extra_turn=extra_turn,
    )
    return next_state, outcome


def reset() -> GameState:
    return GameState.initial()
