# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Walks and hit-by-pitch: force-only advancement.

A runner moves up exactly one base, and only when every base behind them
is occupied. With the bases loaded the runner on third is forced home.
"""

from __future__ import annotations

from typing import Optional

from state_machine.runners import TransitionResult, advance_runner, score_runner
from state_machine.state import Base, BaserunningEvent, BaserunningState


def handle_walk_or_hbp(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()
    scorer_ids: list[str] = []

    first_forced = current_state.first is not None
    second_forced = first_forced and current_state.second is not None
    third_forced = second_forced and current_state.third is not None

    if third_forced:
        score_runner(next_state, advancement, scorer_ids, current_state.third, Base.THIRD)
    if second_forced:
        advance_runner(next_state, advancement, current_state.second, Base.SECOND, Base.THIRD)
    if first_forced:
        advance_runner(next_state, advancement, current_state.first, Base.FIRST, Base.SECOND)
    advance_runner(next_state, advancement, batter_id, Base.BENCH, Base.FIRST)

    return TransitionResult(next_state, scorer_ids, advancement)
