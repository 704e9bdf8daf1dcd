# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Sacrifice bunts: batter out at first, every runner moves up one base."""

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


def handle_sacrifice_bunt(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    if current_state.outs >= 2:
        return inning_ending_out(current_state, advancement)

    next_state = current_state.copy()
    scorer_ids: list[str] = []

    if current_state.third:
        score_runner(next_state, advancement, scorer_ids, current_state.third, Base.THIRD)
    if current_state.second:
        advance_runner(next_state, advancement, current_state.second, Base.SECOND, Base.THIRD)
    if current_state.first:
        advance_runner(next_state, advancement, current_state.first, Base.FIRST, Base.SECOND)

    add_out(next_state, current_state.outs)
    return TransitionResult(next_state, scorer_ids, advancement)
