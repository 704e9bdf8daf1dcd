# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Catcher interference: the batter is awarded first, same as a walk."""

from __future__ import annotations

from state_machine.rules.walk import handle_walk_or_hbp

handle_catcher_interference = handle_walk_or_hbp
