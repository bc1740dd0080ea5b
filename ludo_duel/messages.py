from __future__ import annotations

from .types import Color, OutcomeKind, RollOutcome


def welcome_message() -> str:
    return f"Welcome! {Color.RED.display_name} starts."


def new_game_message() -> str:
    return f"New game! {Color.RED.display_name} starts."


def describe_outcome(outcome: RollOutcome) -> str:
    """Render a roll outcome as the line shown under the die."""
    name = outcome.player.display_name
    kind = outcome.kind

    if kind is OutcomeKind.NEEDS_SIX:
        return f"{name} needs a 6 to start. Turn passes."
    if kind is OutcomeKind.ALREADY_HOME:
        return f"{name} is already home. Turn passes."
    if kind is OutcomeKind.REACHED_HOME:
        return f"{name} reached home and wins!"
    if kind is OutcomeKind.CAPTURED:
        text = f"{name} captured {outcome.events.captured.display_name}!"
        if outcome.extra_turn:
            text += f" {name} rolled a 6. Go again!"
        return text
    if kind is OutcomeKind.ROLLED_SIX_AGAIN:
        return f"{name} rolled a 6. Go again!"
    return f"{name} moved to cell {outcome.new_position.index}."
