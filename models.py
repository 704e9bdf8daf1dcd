# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for the plate-appearance simulator.

Rate vectors, matchup inputs and the season data package consumed by the
game loop. Everything that crosses a file or API boundary is a pydantic
model; mutable in-game state lives in dataclasses next to the code that
owns it.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Hand(str, Enum):
    L = "L"
    R = "R"
    S = "S"  # switch-hitter


class ThrowHand(str, Enum):
    L = "L"
    R = "R"


class Half(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"


class Outcome(str, Enum):
    """Every way a plate appearance can end."""
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"
    HOME_RUN = "home_run"
    WALK = "walk"
    HIT_BY_PITCH = "hit_by_pitch"
    STRIKEOUT = "strikeout"
    GROUND_OUT = "ground_out"
    FLY_OUT = "fly_out"
    LINE_OUT = "line_out"
    POP_OUT = "pop_out"
    SACRIFICE_FLY = "sacrifice_fly"
    SACRIFICE_BUNT = "sacrifice_bunt"
    FIELDERS_CHOICE = "fielders_choice"
    REACHED_ON_ERROR = "reached_on_error"
    CATCHER_INTERFERENCE = "catcher_interference"


class PitcherRoleType(str, Enum):
    STARTER = "starter"
    RELIEVER = "reliever"
    CLOSER = "closer"


# Fixed iteration order used when sampling. Most frequent outcomes first.
EVENT_RATE_KEYS: tuple[Outcome, ...] = (
    Outcome.GROUND_OUT,
    Outcome.SINGLE,
    Outcome.STRIKEOUT,
    Outcome.FLY_OUT,
    Outcome.WALK,
    Outcome.POP_OUT,
    Outcome.LINE_OUT,
    Outcome.DOUBLE,
    Outcome.HOME_RUN,
    Outcome.REACHED_ON_ERROR,
    Outcome.SACRIFICE_BUNT,
    Outcome.TRIPLE,
    Outcome.HIT_BY_PITCH,
    Outcome.SACRIFICE_FLY,
    Outcome.FIELDERS_CHOICE,
    Outcome.CATCHER_INTERFERENCE,
)


# ---------------------------------------------------------------------------
# Rate vectors
# ---------------------------------------------------------------------------

class EventRates(BaseModel):
    """Per-outcome rates for one plate appearance.

    Raw player and league vectors are expected to sum to roughly 1.0, but
    that is checked by the consumer (see ``rates.validate_rates``) so that
    partially-built vectors can still be constructed.
    """
    single: float = Field(default=0.0, ge=0.0, description="Single rate")
    double: float = Field(default=0.0, ge=0.0, description="Double rate")
    triple: float = Field(default=0.0, ge=0.0, description="Triple rate")
    home_run: float = Field(default=0.0, ge=0.0, description="Home run rate")
    walk: float = Field(default=0.0, ge=0.0, description="Walk rate")
    hit_by_pitch: float = Field(default=0.0, ge=0.0, description="Hit-by-pitch rate")
    strikeout: float = Field(default=0.0, ge=0.0, description="Strikeout rate")
    ground_out: float = Field(default=0.0, ge=0.0, description="Ground out rate")
    fly_out: float = Field(default=0.0, ge=0.0, description="Fly out rate")
    line_out: float = Field(default=0.0, ge=0.0, description="Line out rate")
    pop_out: float = Field(default=0.0, ge=0.0, description="Pop out rate")
    sacrifice_fly: float = Field(default=0.0, ge=0.0, description="Sacrifice fly rate")
    sacrifice_bunt: float = Field(default=0.0, ge=0.0, description="Sacrifice bunt rate")
    fielders_choice: float = Field(default=0.0, ge=0.0, description="Fielder's choice rate")
    reached_on_error: float = Field(default=0.0, ge=0.0, description="Reached on error rate")
    catcher_interference: float = Field(default=0.0, ge=0.0, description="Catcher interference rate")

    def get(self, outcome: Outcome) -> float:
        return getattr(self, outcome.value)

    def total(self) -> float:
        return sum(self.get(o) for o in EVENT_RATE_KEYS)

    def as_dict(self) -> dict[Outcome, float]:
        return {o: self.get(o) for o in EVENT_RATE_KEYS}

    @classmethod
    def from_mapping(cls, mapping: dict) -> EventRates:
        """Build from a dict keyed by :class:`Outcome` or its string value."""
        return cls(**{Outcome(k).value: float(v) for k, v in mapping.items()})

    @classmethod
    def league_average(cls) -> EventRates:
        """A generic modern-era league line, used when nothing better exists."""
        return cls(
            single=0.150,
            double=0.045,
            triple=0.005,
            home_run=0.030,
            walk=0.080,
            hit_by_pitch=0.010,
            strikeout=0.220,
            ground_out=0.199,
            fly_out=0.120,
            line_out=0.050,
            pop_out=0.045,
            sacrifice_fly=0.008,
            sacrifice_bunt=0.005,
            fielders_choice=0.020,
            reached_on_error=0.012,
            catcher_interference=0.001,
        )


class ProbabilityDistribution(EventRates):
    """Normalized outcome probabilities for a single matchup."""

    @model_validator(mode="after")
    def _check_sum(self) -> ProbabilityDistribution:
        total = self.total()
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Distribution sums to {total:.6f}, expected 1.0")
        return self


class SplitRates(BaseModel):
    """Rates split by the opposing player's hand."""
    vs_left: EventRates
    vs_right: EventRates

    def for_hand(self, hand: Hand | ThrowHand) -> EventRates:
        return self.vs_left if hand.value == "L" else self.vs_right


# ---------------------------------------------------------------------------
# Matchup inputs
# ---------------------------------------------------------------------------

class MatchupBatter(BaseModel):
    hand: Hand
    rates: SplitRates


class MatchupPitcher(BaseModel):
    hand: ThrowHand
    rates: SplitRates


class Matchup(BaseModel):
    """One batter against one pitcher, in a given league environment.

    League rates are split by the pitcher's throwing hand.
    """
    batter: MatchupBatter
    pitcher: MatchupPitcher
    league: SplitRates


# ---------------------------------------------------------------------------
# Season package
# ---------------------------------------------------------------------------

class RelieverWorkload(BaseModel):
    """Typical reliever outing in batters faced, by inning group."""
    early: float = Field(gt=0, description="Innings 1-3")
    middle: float = Field(gt=0, description="Innings 4-6")
    late: float = Field(gt=0, description="Innings 7 and later")


class SeasonMeta(BaseModel):
    year: int = Field(ge=1871, le=2100)
    pitch_count_limit: Optional[int] = Field(
        default=None, ge=1, description="Hard pitch/batters-faced ceiling override"
    )
    reliever_bfp: Optional[RelieverWorkload] = None


class TeamInfo(BaseModel):
    team_id: str
    name: str
    league: str = ""


class BatterSeason(BaseModel):
    """A batter's season line as rate vectors split by pitcher hand."""
    player_id: str
    name: str
    team_id: str
    bats: Hand
    pa: int = Field(default=0, ge=0, description="Plate appearances")
    rates: SplitRates


class PitcherSeason(BaseModel):
    """A pitcher's season line: rates split by batter hand plus usage."""
    player_id: str
    name: str
    team_id: str
    throws: ThrowHand
    rates: SplitRates
    games: int = Field(default=0, ge=0)
    games_started: int = Field(default=0, ge=0)
    complete_games: int = Field(default=0, ge=0)
    saves: int = Field(default=0, ge=0)
    innings_pitched: float = Field(default=0.0, ge=0.0)
    era: float = Field(default=4.50, ge=0.0)
    whip: float = Field(default=1.35, ge=0.0)
    avg_batters_faced_as_starter: Optional[float] = Field(default=None, ge=0.0)
    avg_batters_faced_as_reliever: Optional[float] = Field(default=None, ge=0.0)


class SeasonPackage(BaseModel):
    """Everything the game loop needs to simulate games for one season."""
    meta: SeasonMeta
    league: SplitRates
    teams: dict[str, TeamInfo] = Field(default_factory=dict)
    batters: dict[str, BatterSeason] = Field(default_factory=dict)
    pitchers: dict[str, PitcherSeason] = Field(default_factory=dict)

    def team_batters(self, team_id: str) -> list[BatterSeason]:
        return [b for b in self.batters.values() if b.team_id == team_id]

    def team_pitchers(self, team_id: str) -> list[PitcherSeason]:
        return [p for p in self.pitchers.values() if p.team_id == team_id]
