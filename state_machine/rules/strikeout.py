# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Strikeouts: one out, nobody moves."""

from __future__ import annotations

from typing import Optional

from state_machine.runners import TransitionResult, add_out
from state_machine.state import BaserunningEvent, BaserunningState


def handle_strikeout(
    current_state: BaserunningState,
    batter_id: str,
    advancement: Optional[list[BaserunningEvent]] = None,
) -> TransitionResult:
    advancement = [] if advancement is None else advancement
    next_state = current_state.copy()
    add_out(next_state, current_state.outs)
    return TransitionResult(next_state, [], advancement)
