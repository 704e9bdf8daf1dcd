# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Base hits.

Fixed advancement table, independent of runner speed:

    single    runners on 3B and 2B score, 1B -> 2B, batter -> 1B
    double    every runner scores, batter -> 2B
    triple    every runner scores, batter -> 3B
    home run  every runner and the batter score
"""

from __future__ import annotations

from typing import Optional

from models import Outcome
from state_machine.runners import TransitionResult, advance_runner, score_runner
from state_machine.state import Base, BaserunningEvent, BaserunningState

_BATTER_DESTINATION = {
    Outcome.DOUBLE: Base.SECOND,
    Outcome.TRIPLE: Base.THIRD,
}


def advance_on_single(
    current_state: BaserunningState,
    next_state: BaserunningState,
    advancement: list[BaserunningEvent],
    scorer_ids: list[str],
    batter_id: str,
) -> None:
    """Single-style movement: 3B and 2B score, 1B takes second, batter to first."""
    if current_state.third:
        score_runner(next_state, advancement, scorer_ids, current_state.third, Base.THIRD)
    if current_state.second:
        score_runner(next_state, advancement, scorer_ids, current_state.second, Base.SECOND)
    if current_state.first:
        advance_runner(next_state, advancement, current_state.first, Base.FIRST, Base.SECOND)
    advance_runner(next_state, advancement, batter_id, Base.BENCH, Base.FIRST)


def _clear_the_bases(
    current_state: BaserunningState,
    next_state: BaserunningState,
    advancement: list[BaserunningEvent],
    scorer_ids: list[str],
) -> None:
    for base in (Base.THIRD, Base.SECOND, Base.FIRST):
        runner = getattr(current_state, base.value)
        if runner:
            score_runner(next_state, advancement, scorer_ids, runner, base)


def handle_hit(
    current_state: BaserunningState,
    batter_id: str,
    outcome: Outcome,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()
    scorer_ids: list[str] = []

    if outcome == Outcome.SINGLE:
        advance_on_single(current_state, next_state, advancement, scorer_ids, batter_id)
    elif outcome == Outcome.HOME_RUN:
        _clear_the_bases(current_state, next_state, advancement, scorer_ids)
        score_runner(next_state, advancement, scorer_ids, batter_id, Base.BENCH)
    elif outcome in _BATTER_DESTINATION:
        _clear_the_bases(current_state, next_state, advancement, scorer_ids)
        advance_runner(next_state, advancement, batter_id, Base.BENCH, _BATTER_DESTINATION[outcome])
    else:
        raise ValueError(f"Not a hit: {outcome.value}")

    return TransitionResult(next_state, scorer_ids, advancement)
