# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Fly outs, line outs and pop outs.

The batter is out and every runner holds. Tag-ups that score a run are
recorded as sacrifice flies instead, so a plain fly out never moves anyone.
"""

from __future__ import annotations

from typing import Optional

from state_machine.runners import TransitionResult, add_out
from state_machine.state import BaserunningEvent, BaserunningState


def _batter_out_runners_hold(
    current_state: BaserunningState,
    advancement: Optional[list[BaserunningEvent]],
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()
    add_out(next_state, current_state.outs)
    return TransitionResult(next_state, [], advancement)


def handle_fly_out(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    return _batter_out_runners_hold(current_state, advancement)


def handle_line_out(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    return _batter_out_runners_hold(current_state, advancement)


def handle_pop_out(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    # Infield fly: runners cannot be doubled off, they hold.
    return _batter_out_runners_hold(current_state, advancement)
