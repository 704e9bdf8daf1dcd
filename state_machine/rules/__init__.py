# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""One transition function per outcome category."""

from state_machine.rules.air_outs import handle_fly_out, handle_line_out, handle_pop_out
from state_machine.rules.fielders_choice import handle_fielders_choice
from state_machine.rules.ground_out import handle_ground_out
from state_machine.rules.hit import handle_hit
from state_machine.rules.interference import handle_catcher_interference
from state_machine.rules.reached_on_error import handle_reached_on_error
from state_machine.rules.sacrifice_bunt import handle_sacrifice_bunt
from state_machine.rules.sacrifice_fly import handle_sacrifice_fly
from state_machine.rules.strikeout import handle_strikeout
from state_machine.rules.walk import handle_walk_or_hbp

__all__ = [
    "handle_catcher_interference",
    "handle_fielders_choice",
    "handle_fly_out",
    "handle_ground_out",
    "handle_hit",
    "handle_line_out",
    "handle_pop_out",
    "handle_reached_on_error",
    "handle_sacrifice_bunt",
    "handle_sacrifice_fly",
    "handle_strikeout",
    "handle_walk_or_hbp",
]
