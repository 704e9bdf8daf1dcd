# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Pitcher fatigue and bullpen management.

Decides when the current pitcher should come out and who comes in.
Workloads are measured in batters faced against each pitcher's own
season averages, so a deadball-era starter and a modern one-inning
specialist are both judged against what was normal for them.

All random draws go through an injectable ``rng`` so decisions can be
replayed from a seed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel

from models import Outcome, PitcherRoleType
from state_machine.outcomes import is_hit
from state_machine.state import runners_to_base_config

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

HARD_PITCH_LIMIT = 110          # batters faced; always pulled at or past this
DEFAULT_STARTER_BFP = 27
DEFAULT_RELIEVER_BFP = 12
DEFAULT_RELIEVER_CAPS = {"early": 15, "middle": 10, "late": 6}
BLOWOUT_MARGIN = 5
HIGH_LEVERAGE = 2.0

# Average pitches per plate appearance by how it ended.
PITCHES_PER_OUTCOME: dict[Outcome, float] = {
    Outcome.STRIKEOUT: 4.8,
    Outcome.WALK: 5.7,
    Outcome.HIT_BY_PITCH: 3.3,
    Outcome.CATCHER_INTERFERENCE: 3.0,
}
PITCHES_PER_BALL_IN_PLAY = 3.5

# Leverage multiplier per base configuration (bit0 = 1B, bit1 = 2B, bit2 = 3B).
BASES_LEVERAGE: dict[int, float] = {
    0b000: 1.0,
    0b001: 1.1,
    0b010: 1.15,
    0b100: 1.2,
    0b011: 1.3,
    0b101: 1.35,
    0b110: 1.4,
    0b111: 1.8,
}


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass
class PitcherRole:
    """A pitcher's usage and in-game line for one game."""
    pitcher_id: str
    role: PitcherRoleType
    stamina: float = 100.0
    pitches_thrown: int = 0
    batters_faced: int = 0
    avg_batters_faced_as_starter: Optional[float] = None
    avg_batters_faced_as_reliever: Optional[float] = None
    hits_allowed: int = 0
    walks_allowed: int = 0
    runs_allowed: int = 0
    is_workhorse: bool = False

    @property
    def is_starter(self) -> bool:
        return self.role == PitcherRoleType.STARTER

    @property
    def roughness(self) -> float:
        """Baserunners allowed per batter faced today."""
        if self.batters_faced == 0:
            return 0.0
        return (self.hits_allowed + self.walks_allowed) / self.batters_faced


@dataclass
class BullpenState:
    """One team's pitching staff for one game, by role."""
    starter: PitcherRole
    relievers: list[PitcherRole] = field(default_factory=list)  # best first
    closer: Optional[PitcherRole] = None
    setup: list[PitcherRole] = field(default_factory=list)
    long_relief: list[PitcherRole] = field(default_factory=list)

    def available(self) -> list[PitcherRole]:
        """Everyone who could still come out of the bullpen."""
        arms = [*self.setup, *self.long_relief, *self.relievers]
        if self.closer:
            arms.insert(0, self.closer)
        return arms

    def find(self, pitcher_id: str) -> Optional[PitcherRole]:
        if self.starter.pitcher_id == pitcher_id:
            return self.starter
        for p in self.available():
            if p.pitcher_id == pitcher_id:
                return p
        return None

    def remove(self, pitcher_id: str) -> None:
        """Take a pitcher out of the available pool once used."""
        if self.closer and self.closer.pitcher_id == pitcher_id:
            self.closer = None
        self.setup = [p for p in self.setup if p.pitcher_id != pitcher_id]
        self.long_relief = [p for p in self.long_relief if p.pitcher_id != pitcher_id]
        self.relievers = [p for p in self.relievers if p.pitcher_id != pitcher_id]


@dataclass
class GameContext:
    """The situation a pitching decision is made in.

    ``score_diff`` is from the pitching team's point of view: positive
    when the team in the field is ahead.
    """
    inning: int
    is_top_inning: bool
    outs: int
    bases: tuple[Optional[str], Optional[str], Optional[str]] = (None, None, None)
    score_diff: int = 0

    @property
    def base_config(self) -> int:
        return runners_to_base_config(*self.bases)


@dataclass
class PullOptions:
    """Season-level workload norms. Missing values fall back to defaults."""
    season_starter_bfp: Optional[float] = None
    season_reliever_bfp: Optional[dict[str, float]] = None  # early/middle/late
    hard_pitch_limit: int = HARD_PITCH_LIMIT


class PitchingDecision(BaseModel):
    should_change: bool
    new_pitcher: Optional[str] = None
    reason: Optional[str] = None


# ---------------------------------------------------------------------------
# Fatigue
# ---------------------------------------------------------------------------

def reduce_stamina(
    stamina: float,
    pitches_this_pa: float,
    hard_pitch_limit: int = HARD_PITCH_LIMIT,
) -> float:
    """Stamina left after a plate appearance. Tired pitchers tire faster."""
    fatigue_factor = 1 + (hard_pitch_limit - stamina) / 100
    return max(0.0, stamina - pitches_this_pa * fatigue_factor)


def estimate_pitches(outcome: Outcome) -> float:
    return PITCHES_PER_OUTCOME.get(outcome, PITCHES_PER_BALL_IN_PLAY)


def record_plate_appearance(
    pitcher: PitcherRole,
    outcome: Outcome,
    runs: int = 0,
    pitches: Optional[float] = None,
    hard_pitch_limit: int = HARD_PITCH_LIMIT,
) -> None:
    """Update *pitcher*'s in-game line after one plate appearance."""
    if pitches is None:
        pitches = estimate_pitches(outcome)
    pitcher.batters_faced += 1
    pitcher.pitches_thrown += round(pitches)
    pitcher.runs_allowed += runs
    if is_hit(outcome):
        pitcher.hits_allowed += 1
    elif outcome in (Outcome.WALK, Outcome.HIT_BY_PITCH):
        pitcher.walks_allowed += 1
    pitcher.stamina = reduce_stamina(pitcher.stamina, pitches, hard_pitch_limit)


# ---------------------------------------------------------------------------
# Leverage
# ---------------------------------------------------------------------------

def calculate_leverage_index(context: GameContext) -> float:
    """Rough importance of the situation; 1.0 is an average plate appearance.

    Product of an inning baseline, a score-closeness factor, a base
    occupancy factor and an outs factor.
    """
    inning = context.inning
    if inning > 9:
        li = 2.0 + (inning - 9) * 0.2
    elif inning >= 9:
        li = 2.0
    elif inning >= 8:
        li = 1.5
    elif inning >= 7:
        li = 1.2
    else:
        li = 1.0

    margin = abs(context.score_diff)
    if margin <= 1:
        li *= 1.5
    elif margin <= 2:
        li *= 1.2
    elif margin <= 3:
        li *= 1.1
    elif margin >= 5:
        li *= 0.7

    if context.score_diff == 0 and inning >= 9:
        li *= 2.0

    li *= BASES_LEVERAGE[context.base_config]

    if context.outs == 0:
        li *= 1.1
    elif context.outs == 2:
        li *= 1.2

    return li


# ---------------------------------------------------------------------------
# Reliever selection
# ---------------------------------------------------------------------------

def _first(*groups: list[PitcherRole]) -> Optional[PitcherRole]:
    for group in groups:
        if group:
            return group[0]
    return None


def select_reliever(
    context: GameContext,
    bullpen: BullpenState,
    exclude_pitcher_id: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Optional[PitcherRole]:
    """Pick who comes in, by role.

    * blowout (5+ either way): a generic or long reliever, never closer or setup
    * save situation (9th or later, up 1-3): the closer
    * 7th and later: the first setup man, else the best reliever
    * 5th or earlier: a long reliever
    * otherwise: a random middle reliever

    Returns ``None`` if nobody suitable is left in the bullpen.
    """
    rng = rng if rng is not None else random.Random()

    def usable(pitchers: list[PitcherRole]) -> list[PitcherRole]:
        return [p for p in pitchers if p.pitcher_id != exclude_pitcher_id]

    closer = [bullpen.closer] if bullpen.closer else []
    closer = usable(closer)
    setup = usable(bullpen.setup)
    long_relief = usable(bullpen.long_relief)
    generic = usable(bullpen.relievers)

    inning = context.inning
    diff = context.score_diff

    if abs(diff) >= BLOWOUT_MARGIN:
        return _first(generic, long_relief)

    if inning >= 9 and 1 <= diff <= 3:
        return _first(closer, setup, generic, long_relief)

    if inning >= 7:
        return _first(setup, generic, long_relief, closer)

    if inning <= 5 and long_relief:
        return long_relief[0]

    if generic:
        return rng.choice(generic)
    return _first(long_relief, setup, closer)


# ---------------------------------------------------------------------------
# Pull decision
# ---------------------------------------------------------------------------

def _reliever_cap(inning: int, options: PullOptions) -> float:
    caps = options.season_reliever_bfp or DEFAULT_RELIEVER_CAPS
    if inning <= 3:
        return caps["early"]
    if inning <= 6:
        return caps["middle"]
    return caps["late"]


def _starter_pull_chance(
    context: GameContext,
    pitcher: PitcherRole,
    typical: float,
    randomness: float,
) -> float:
    early_era = typical > 29
    modern_era = typical < 27
    roughness = pitcher.roughness
    diff = context.score_diff
    chance = 0.5

    if modern_era:
        if roughness < 0.1:
            chance -= 0.1
    else:
        if roughness < 0.2:
            chance -= 0.25
        elif roughness > 0.4:
            chance += 0.15

        if diff >= 4:
            chance -= 0.15
        elif diff <= -2 or 0 <= diff <= 2:
            chance += 0.15

        if context.inning >= 8 and diff > 0 and roughness < 0.3:
            chance -= 0.25

        if early_era:
            if roughness < 0.3:
                chance -= 0.2
            if pitcher.batters_faced < typical * 1.2 and roughness < 0.4:
                chance = min(chance, 0.3)
        elif roughness < 0.25:
            chance -= 0.1

    chance += randomness
    return max(0.1, min(chance, 1.0))


def should_pull_pitcher(
    context: GameContext,
    pitcher: PitcherRole,
    bullpen: BullpenState,
    randomness: float = 0.1,
    options: Optional[PullOptions] = None,
    rng: Optional[random.Random] = None,
) -> PitchingDecision:
    """Decide whether *pitcher* should be replaced before the next batter.

    Deterministic limits (the hard ceiling, 1.5x a starter's norm, the top
    of a reliever's band) always pull. Probabilistic pulls only happen if
    :func:`select_reliever` finds someone to bring in.
    """
    options = options or PullOptions()
    rng = rng if rng is not None else random.Random()
    bf = pitcher.batters_faced

    def replacement() -> Optional[str]:
        reliever = select_reliever(context, bullpen, pitcher.pitcher_id, rng)
        return reliever.pitcher_id if reliever else None

    def pull_if_available(reason: str) -> Optional[PitchingDecision]:
        new_pitcher = replacement()
        if new_pitcher is None:
            logger.debug("No reliever available to replace %s", pitcher.pitcher_id)
            return None
        return PitchingDecision(should_change=True, new_pitcher=new_pitcher, reason=reason)

    if bf >= options.hard_pitch_limit:
        return PitchingDecision(
            should_change=True,
            new_pitcher=replacement(),
            reason=f"Hard limit reached ({bf}/{options.hard_pitch_limit} BFP)",
        )

    if pitcher.is_starter:
        typical = (
            pitcher.avg_batters_faced_as_starter
            or options.season_starter_bfp
            or DEFAULT_STARTER_BFP
        )
        if bf >= typical * 1.5:
            return PitchingDecision(
                should_change=True,
                new_pitcher=replacement(),
                reason=f"Exceeded limit ({bf} BFP)",
            )

        if typical >= 27 or pitcher.is_workhorse:
            pull_threshold = typical
        else:
            pull_threshold = typical * 0.55
        if bf >= pull_threshold:
            chance = _starter_pull_chance(context, pitcher, typical, randomness)
            if rng.random() < chance:
                decision = pull_if_available(f"BFP count ({bf}/{typical:.0f} avg)")
                if decision:
                    return decision

        if bf >= typical * 0.8 and pitcher.roughness > 0.5:
            if rng.random() < 0.4 + randomness:
                decision = pull_if_available("Pitching ineffectively")
                if decision:
                    return decision

        return PitchingDecision(should_change=False)

    reliever_avg = pitcher.avg_batters_faced_as_reliever or DEFAULT_RELIEVER_BFP
    season_cap = _reliever_cap(context.inning, options)
    typical = min(reliever_avg, season_cap)
    variance = 0.15 if season_cap > 10 else 0.30
    lower = typical * (1 - variance)
    upper = typical * (1 + variance)

    if bf >= upper:
        return PitchingDecision(
            should_change=True,
            new_pitcher=replacement(),
            reason=f"Exceeded limit ({bf} BFP)",
        )

    if bf >= lower:
        progress = (bf - lower) / (upper - lower)
        chance = 0.3 + progress * 0.4
        if context.inning >= 9:
            chance += 0.15
        elif context.inning >= 7:
            chance += 0.1
        chance = min(chance + randomness, 1.0)
        if rng.random() < chance:
            decision = pull_if_available(f"BFP count ({bf}/{typical:.0f} avg)")
            if decision:
                return decision

    if calculate_leverage_index(context) > HIGH_LEVERAGE and bf >= lower * 0.8:
        if rng.random() < 0.7 + randomness:
            decision = pull_if_available("High leverage situation")
            if decision:
                return decision

    return PitchingDecision(should_change=False)
