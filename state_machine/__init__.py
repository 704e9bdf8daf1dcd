# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Baserunning state machine: 24 states, one rule handler per outcome."""

from state_machine.outcomes import (
    BALL_IN_PLAY_OUTS,
    HIT_OUTCOMES,
    OUT_OUTCOMES,
    REACH_BASE_OUTCOMES,
    SACRIFICE_OUTCOMES,
    batter_reaches_base,
    is_at_bat,
    is_ball_in_play_out,
    is_hit,
    is_out,
    is_sacrifice,
)
from state_machine.state import (
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
from state_machine.transitions import (
    TransitionResult,
    advance_runner,
    record_advancement,
    score_runner,
    transition,
)
