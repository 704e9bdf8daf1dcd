# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Single entry point from (state, outcome) to the next baserunning state."""

from __future__ import annotations

from functools import partial
from typing import Callable

from models import Outcome
from state_machine import rules
from state_machine.runners import (
    TransitionResult,
    advance_runner,
    record_advancement,
    score_runner,
)
from state_machine.state import BaserunningState

Handler = Callable[..., TransitionResult]

_HANDLERS: dict[Outcome, Handler] = {
    Outcome.SINGLE: partial(rules.handle_hit, outcome=Outcome.SINGLE),
    Outcome.DOUBLE: partial(rules.handle_hit, outcome=Outcome.DOUBLE),
    Outcome.TRIPLE: partial(rules.handle_hit, outcome=Outcome.TRIPLE),
    Outcome.HOME_RUN: partial(rules.handle_hit, outcome=Outcome.HOME_RUN),
    Outcome.WALK: rules.handle_walk_or_hbp,
    Outcome.HIT_BY_PITCH: rules.handle_walk_or_hbp,
    Outcome.STRIKEOUT: rules.handle_strikeout,
    Outcome.GROUND_OUT: rules.handle_ground_out,
    Outcome.FLY_OUT: rules.handle_fly_out,
    Outcome.LINE_OUT: rules.handle_line_out,
    Outcome.POP_OUT: rules.handle_pop_out,
    Outcome.SACRIFICE_FLY: rules.handle_sacrifice_fly,
    Outcome.SACRIFICE_BUNT: rules.handle_sacrifice_bunt,
    Outcome.FIELDERS_CHOICE: rules.handle_fielders_choice,
    Outcome.REACHED_ON_ERROR: rules.handle_reached_on_error,
    Outcome.CATCHER_INTERFERENCE: rules.handle_catcher_interference,
}


def transition(
    current_state: BaserunningState,
    outcome: Outcome | str,
    batter_id: str,
) -> TransitionResult:
    """Apply *outcome* to *current_state* and return the resulting state.

    *current_state* is never modified. ``next_state.outs`` is capped at 3;
    the caller clears the bases and resets outs for the next half-inning.

    Raises:
        ValueError: If *outcome* is not a known outcome.
    """
    handler = _HANDLERS.get(Outcome(outcome))
    if handler is None:
        raise ValueError(f"No baserunning rule for outcome: {outcome}")
    return handler(current_state, batter_id, advancement=[])


__all__ = [
    "TransitionResult",
    "advance_runner",
    "record_advancement",
    "score_runner",
    "transition",
]
