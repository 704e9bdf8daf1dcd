# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Outcome categories used by the box score and the rule handlers."""

from __future__ import annotations

from models import Outcome

HIT_OUTCOMES: frozenset[Outcome] = frozenset({
    Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE, Outcome.HOME_RUN,
})

# Batter ends the play standing on a base (or scoring).
REACH_BASE_OUTCOMES: frozenset[Outcome] = HIT_OUTCOMES | frozenset({
    Outcome.WALK,
    Outcome.HIT_BY_PITCH,
    Outcome.FIELDERS_CHOICE,
    Outcome.REACHED_ON_ERROR,
    Outcome.CATCHER_INTERFERENCE,
})

BALL_IN_PLAY_OUTS: frozenset[Outcome] = frozenset({
    Outcome.GROUND_OUT, Outcome.FLY_OUT, Outcome.LINE_OUT, Outcome.POP_OUT,
})

SACRIFICE_OUTCOMES: frozenset[Outcome] = frozenset({
    Outcome.SACRIFICE_FLY, Outcome.SACRIFICE_BUNT,
})

# Batter is retired on the play.
OUT_OUTCOMES: frozenset[Outcome] = BALL_IN_PLAY_OUTS | SACRIFICE_OUTCOMES | frozenset({
    Outcome.STRIKEOUT,
})

# Plate appearances that do not count as an official at-bat.
NON_AT_BAT_OUTCOMES: frozenset[Outcome] = SACRIFICE_OUTCOMES | frozenset({
    Outcome.WALK, Outcome.HIT_BY_PITCH, Outcome.CATCHER_INTERFERENCE,
})


def is_hit(outcome: Outcome) -> bool:
    return outcome in HIT_OUTCOMES


def is_out(outcome: Outcome) -> bool:
    return outcome in OUT_OUTCOMES


def is_ball_in_play_out(outcome: Outcome) -> bool:
    return outcome in BALL_IN_PLAY_OUTS


def is_sacrifice(outcome: Outcome) -> bool:
    return outcome in SACRIFICE_OUTCOMES


def batter_reaches_base(outcome: Outcome) -> bool:
    return outcome in REACH_BASE_OUTCOMES


def is_at_bat(outcome: Outcome) -> bool:
    return outcome not in NON_AT_BAT_OUTCOMES
