# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Fielder's choice.

The defense retires the lead runner instead of the batter, who reaches
first. Trailing runners move up only when forced by the batter and the
base ahead is free. With nobody on, there is no runner to choose, so the
batter simply reaches and no out is recorded.
"""

from __future__ import annotations

from typing import Optional

from state_machine.runners import (
    TransitionResult,
    add_out,
    advance_runner,
    inning_ending_out,
)
from state_machine.state import (
    Base,
    BaserunningEvent,
    BaserunningState,
    is_bases_empty,
)


def lead_runner(state: BaserunningState) -> tuple[Optional[Base], Optional[str]]:
    """The runner furthest along the bases, and where they stand."""
    for base in (Base.THIRD, Base.SECOND, Base.FIRST):
        runner = getattr(state, base.value)
        if runner:
            return base, runner
    return None, None


def handle_fielders_choice(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()

    if is_bases_empty(current_state):
        advance_runner(next_state, advancement, batter_id, Base.BENCH, Base.FIRST)
        return TransitionResult(next_state, [], advancement)

    lead_base, out_runner_id = lead_runner(current_state)
    if current_state.outs >= 2:
        return inning_ending_out(current_state, advancement, out_runner_id)

    # Retired runner leaves the bases without an advancement event.
    setattr(next_state, lead_base.value, None)

    if (
        current_state.second
        and lead_base != Base.SECOND
        and current_state.first
        and next_state.third is None
    ):
        advance_runner(next_state, advancement, current_state.second, Base.SECOND, Base.THIRD)
    if current_state.first and lead_base != Base.FIRST and next_state.second is None:
        advance_runner(next_state, advancement, current_state.first, Base.FIRST, Base.SECOND)
    advance_runner(next_state, advancement, batter_id, Base.BENCH, Base.FIRST)

    add_out(next_state, current_state.outs)
    return TransitionResult(next_state, [], advancement, out_runner_id)
