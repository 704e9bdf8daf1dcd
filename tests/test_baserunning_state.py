# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for the baserunning state representation and its helpers."""

import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from state_machine import (
    BASE_CONFIG_NAMES,
    Base,
    BaserunningEvent,
    BaserunningState,
    all_states,
    base_config_to_runners,
    clear_runners,
    count_runners,
    create_baserunning_state,
    get_runner_at_base,
    is_base_occupied,
    is_bases_empty,
    is_bases_loaded,
    runners_to_base_config,
    set_runner_at_base,
)


def test_new_state_is_empty_with_no_outs():
    state = BaserunningState()
    assert state.outs == 0
    assert state.bases == 0
    assert state.runners == (None, None, None)
    assert is_bases_empty(state)


@pytest.mark.parametrize("first,second,third,expected", [
    (None, None, None, 0b000),
    ("a", None, None, 0b001),
    (None, "b", None, 0b010),
    (None, None, "c", 0b100),
    ("a", "b", None, 0b011),
    ("a", None, "c", 0b101),
    (None, "b", "c", 0b110),
    ("a", "b", "c", 0b111),
])
def test_bases_bitmask_matches_runners(first, second, third, expected):
    state = create_baserunning_state(1, (first, second, third))
    assert state.bases == expected
    assert runners_to_base_config(first, second, third) == expected


def test_bitmask_follows_runner_changes():
    state = BaserunningState()
    set_runner_at_base(state, Base.SECOND, "r2")
    assert state.bases == 0b010
    set_runner_at_base(state, Base.SECOND, None)
    assert state.bases == 0


def test_base_config_to_runners_round_trip():
    for bases in range(8):
        runners = base_config_to_runners(bases)
        assert runners_to_base_config(*runners) == bases


def test_base_config_to_runners_rejects_out_of_range():
    with pytest.raises(ValueError):
        base_config_to_runners(8)


def test_all_states_covers_24_states():
    states = all_states()
    assert len(states) == 24
    assert {(s.outs, s.bases) for s in states} == {
        (outs, bases) for outs in range(3) for bases in range(8)
    }


def test_copy_is_independent():
    state = create_baserunning_state(1, ("a", None, "c"))
    clone = state.copy()
    clone.first = None
    clone.outs = 2
    assert state.first == "a"
    assert state.outs == 1


def test_occupancy_helpers():
    state = create_baserunning_state(0, ("a", "b", "c"))
    assert is_bases_loaded(state)
    assert count_runners(state) == 3
    assert is_base_occupied(state, Base.THIRD)
    assert get_runner_at_base(state, Base.SECOND) == "b"
    assert get_runner_at_base(state, Base.HOME) is None

    clear_runners(state)
    assert is_bases_empty(state)
    assert count_runners(state) == 0


def test_cannot_place_runner_at_home():
    with pytest.raises(ValueError):
        set_runner_at_base(BaserunningState(), Base.HOME, "x")


def test_base_config_names_cover_all_configs():
    assert set(BASE_CONFIG_NAMES) == set(range(8))
    assert BASE_CONFIG_NAMES[0b111] == "Bases loaded"
    assert create_baserunning_state(2, ("a", None, None)).describe() == "2 out, Runner on 1st"


def test_event_is_immutable_and_serializable():
    event = BaserunningEvent("b1", Base.BENCH, Base.FIRST)
    with pytest.raises(AttributeError):
        event.runner_id = "other"
    assert event.to_dict() == {"runner_id": "b1", "from": "bench", "to": "first"}
