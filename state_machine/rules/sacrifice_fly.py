# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Sacrifice flies: the runner on third tags and scores, everyone else holds."""

from __future__ import annotations

from typing import Optional

from state_machine.runners import (
    TransitionResult,
    add_out,
    inning_ending_out,
    score_runner,
)
from state_machine.state import Base, BaserunningEvent, BaserunningState


def handle_sacrifice_fly(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    # The catch is the third out; the run cannot count.
    if current_state.outs >= 2:
        return inning_ending_out(current_state, advancement)

    next_state = current_state.copy()
    scorer_ids: list[str] = []
    if current_state.third:
        score_runner(next_state, advancement, scorer_ids, current_state.third, Base.THIRD)

    add_out(next_state, current_state.outs)
    return TransitionResult(next_state, scorer_ids, advancement)
