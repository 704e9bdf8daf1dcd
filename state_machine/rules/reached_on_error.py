# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Reached on error: runners move as on a single, and no out is recorded."""

from __future__ import annotations

from typing import Optional

from state_machine.rules.hit import advance_on_single
from state_machine.runners import TransitionResult
from state_machine.state import BaserunningEvent, BaserunningState


def handle_reached_on_error(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()
    scorer_ids: list[str] = []
    advance_on_single(current_state, next_state, advancement, scorer_ids, batter_id)
    return TransitionResult(next_state, scorer_ids, advancement)
