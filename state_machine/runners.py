# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Primitives shared by the rule handlers for moving runners around."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from state_machine.state import (
    Base,
    BaserunningEvent,
    BaserunningState,
    set_runner_at_base,
)

MAX_OUTS = 3


@dataclass
class TransitionResult:
    """What a single plate appearance did to the bases."""
    next_state: BaserunningState
    scorer_ids: list[str] = field(default_factory=list)
    advancement: list[BaserunningEvent] = field(default_factory=list)
    out_runner_id: Optional[str] = None

    @property
    def runs_scored(self) -> int:
        return len(self.scorer_ids)

    @property
    def inning_over(self) -> bool:
        return self.next_state.outs >= MAX_OUTS

    def to_dict(self) -> dict:
        return {
            "outs": self.next_state.outs,
            "bases": self.next_state.bases,
            "runners": list(self.next_state.runners),
            "runs_scored": self.runs_scored,
            "scorer_ids": list(self.scorer_ids),
            "advancement": [e.to_dict() for e in self.advancement],
            "out_runner_id": self.out_runner_id,
        }


def record_advancement(
    advancement: list[BaserunningEvent],
    runner_id: str,
    from_base: Base,
    to_base: Base,
) -> None:
    advancement.append(BaserunningEvent(runner_id, from_base, to_base))


def advance_runner(
    state: BaserunningState,
    advancement: list[BaserunningEvent],
    runner_id: str,
    from_base: Base,
    to_base: Base,
) -> None:
    """Move *runner_id* from one base to another, recording the event.

    ``Base.BENCH`` as the source means the batter; ``Base.HOME`` as the
    destination leaves no one on a base.
    """
    if from_base != Base.BENCH:
        set_runner_at_base(state, from_base, None)
    if to_base not in (Base.HOME, Base.DUGOUT):
        set_runner_at_base(state, to_base, runner_id)
    record_advancement(advancement, runner_id, from_base, to_base)


def score_runner(
    state: BaserunningState,
    advancement: list[BaserunningEvent],
    scorer_ids: list[str],
    runner_id: str,
    from_base: Base,
) -> None:
    advance_runner(state, advancement, runner_id, from_base, Base.HOME)
    scorer_ids.append(runner_id)


def add_out(state: BaserunningState, outs_before: int) -> None:
    state.outs = min(outs_before + 1, MAX_OUTS)


def inning_ending_out(
    current_state: BaserunningState,
    advancement: list[BaserunningEvent],
    out_runner_id: Optional[str] = None,
) -> TransitionResult:
    """Third out: nobody moves or scores, runners are left where they stood."""
    next_state = current_state.copy()
    next_state.outs = MAX_OUTS
    return TransitionResult(next_state, [], advancement, out_runner_id)
