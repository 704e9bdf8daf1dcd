# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Baserunning state: outs plus who is standing on which base.

There are 24 live states (0-2 outs × 8 base configurations). ``outs == 3``
marks a finished half-inning; the game loop resets it.

The occupancy bitmask (bit0 = first, bit1 = second, bit2 = third) is
derived from the runner slots, so it can never disagree with them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class Base(str, Enum):
    BENCH = "bench"      # batter before the play
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"
    HOME = "home"        # scored
    DUGOUT = "dugout"    # put out on the bases


OCCUPIABLE_BASES: tuple[Base, ...] = (Base.FIRST, Base.SECOND, Base.THIRD)

BASE_BITS: dict[Base, int] = {Base.FIRST: 1, Base.SECOND: 2, Base.THIRD: 4}

BASE_CONFIG_NAMES: dict[int, str] = {
    0b000: "Bases empty",
    0b001: "Runner on 1st",
    0b010: "Runner on 2nd",
    0b011: "Runners on 1st and 2nd",
    0b100: "Runner on 3rd",
    0b101: "Runners on 1st and 3rd",
    0b110: "Runners on 2nd and 3rd",
    0b111: "Bases loaded",
}


@dataclass
class BaserunningState:
    """Outs and runner identities for the current half-inning."""
    outs: int = 0
    first: Optional[str] = None
    second: Optional[str] = None
    third: Optional[str] = None

    @property
    def bases(self) -> int:
        return runners_to_base_config(self.first, self.second, self.third)

    @property
    def runners(self) -> tuple[Optional[str], Optional[str], Optional[str]]:
        return (self.first, self.second, self.third)

    def copy(self) -> BaserunningState:
        return replace(self)

    def describe(self) -> str:
        return f"{self.outs} out, {BASE_CONFIG_NAMES[self.bases]}"


@dataclass(frozen=True)
class BaserunningEvent:
    """One runner's movement on a play, e.g. first -> third."""
    runner_id: str
    from_base: Base
    to_base: Base

    def to_dict(self) -> dict:
        return {
            "runner_id": self.runner_id,
            "from": self.from_base.value,
            "to": self.to_base.value,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def runners_to_base_config(
    first: Optional[str], second: Optional[str], third: Optional[str]
) -> int:
    return (
        (1 if first is not None else 0)
        | (2 if second is not None else 0)
        | (4 if third is not None else 0)
    )


def base_config_to_runners(
    bases: int, runner_ids: tuple[str, str, str] = ("r1", "r2", "r3")
) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """Fill a bitmask with placeholder runner ids, one per occupied base."""
    if not 0 <= bases <= 7:
        raise ValueError(f"Base configuration must be 0-7, got {bases}")
    return (
        runner_ids[0] if bases & 1 else None,
        runner_ids[1] if bases & 2 else None,
        runner_ids[2] if bases & 4 else None,
    )


def create_baserunning_state(
    outs: int = 0,
    runners: tuple[Optional[str], Optional[str], Optional[str]] = (None, None, None),
) -> BaserunningState:
    first, second, third = runners
    return BaserunningState(outs=outs, first=first, second=second, third=third)


def get_runner_at_base(state: BaserunningState, base: Base) -> Optional[str]:
    if base not in BASE_BITS:
        return None
    return getattr(state, base.value)


def set_runner_at_base(state: BaserunningState, base: Base, runner_id: Optional[str]) -> None:
    if base not in BASE_BITS:
        raise ValueError(f"Cannot place a runner on {base.value}")
    setattr(state, base.value, runner_id)


def is_base_occupied(state: BaserunningState, base: Base) -> bool:
    return get_runner_at_base(state, base) is not None


def is_bases_loaded(state: BaserunningState) -> bool:
    return state.bases == 0b111


def is_bases_empty(state: BaserunningState) -> bool:
    return state.bases == 0


def count_runners(state: BaserunningState) -> int:
    return sum(1 for r in state.runners if r is not None)


def clear_runners(state: BaserunningState) -> None:
    for base in OCCUPIABLE_BASES:
        setattr(state, base.value, None)


def all_states() -> list[BaserunningState]:
    """The 24 live states, with placeholder runner ids."""
    return [
        create_baserunning_state(outs, base_config_to_runners(bases))
        for outs in range(3)
        for bases in range(8)
    ]
