# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Ground outs.

The batter is thrown out at first. With two outs before the play that is
the third out and nobody advances or scores. Otherwise:

* runner on 3B holds with 0 outs and scores with 1 out
* runner on 2B takes third if it is open
* runner on 1B takes second if it is open

Runners are processed lead-first, so "open" means after the runner ahead
has already moved.
"""

from __future__ import annotations

from typing import Optional

from state_machine.runners import (
    TransitionResult,
    add_out,
    advance_runner,
    inning_ending_out,
    score_runner,
)
from state_machine.state import Base, BaserunningEvent, BaserunningState


def handle_ground_out(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    outs_before = current_state.outs
    if outs_before >= 2:
        return inning_ending_out(current_state, advancement)

    next_state = current_state.copy()
    scorer_ids: list[str] = []

    if current_state.third and outs_before == 1:
        score_runner(next_state, advancement, scorer_ids, current_state.third, Base.THIRD)
    if current_state.second and next_state.third is None:
        advance_runner(next_state, advancement, current_state.second, Base.SECOND, Base.THIRD)
    if current_state.first and next_state.second is None:
        advance_runner(next_state, advancement, current_state.first, Base.FIRST, Base.SECOND)

    add_out(next_state, outs_before)
    return TransitionResult(next_state, scorer_ids, advancement)
