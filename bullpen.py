# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Build a game-day pitching staff from season lines.

Each pitcher gets an era-normalized quality score (1.0 = league average),
then the staff is split into the ace starter, a closer and setup men where
the era used them, long relievers and everyone else.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from models import PitcherRoleType, PitcherSeason, SeasonPackage
from pitching import BullpenState, PitcherRole

logger = logging.getLogger(__name__)


STARTER_START_RATE = 0.5       # at least half of appearances were starts
RELIEVER_START_RATE = 0.2      # at most a fifth were starts
SWINGMAN_START_THRESHOLD = 15  # swingmen with this many starts count as starters
CLOSER_SAVE_THRESHOLD = 5
CLOSER_QUALITY_THRESHOLD = 1.2
LONG_RELIEF_IP_PER_GAME = 1.3
WORKHORSE_CG_RATE = 0.15
MAX_SETUP = 2
SEASON_GAMES = 162


@dataclass
class LeaguePitchingNorms:
    year: int
    avg_era: float = 4.00
    avg_whip: float = 1.35
    avg_saves_per_team: float = 0.0
    avg_cg_rate: float = 0.0


@dataclass
class PitcherQuality:
    pitcher_id: str
    quality_score: float
    is_workhorse: bool
    innings_per_game: float
    role: PitcherRoleType


def calculate_league_norms(
    pitchers: list[PitcherSeason], year: int, num_teams: int
) -> LeaguePitchingNorms:
    if not pitchers:
        return LeaguePitchingNorms(year=year)

    starters = [p for p in pitchers if p.games_started > 0]
    cg_rate = (
        sum(p.complete_games / p.games_started for p in starters) / len(starters)
        if starters else 0.0
    )
    return LeaguePitchingNorms(
        year=year,
        avg_era=sum(p.era for p in pitchers) / len(pitchers),
        avg_whip=sum(p.whip for p in pitchers) / len(pitchers),
        avg_saves_per_team=sum(p.saves for p in pitchers) / max(num_teams, 1),
        avg_cg_rate=cg_rate,
    )


def season_norms(season: SeasonPackage) -> LeaguePitchingNorms:
    """League norms for every pitcher in a season package."""
    team_ids = set(season.teams) or {p.team_id for p in season.pitchers.values()}
    return calculate_league_norms(
        list(season.pitchers.values()), season.meta.year, len(team_ids)
    )


def has_closers(norms: LeaguePitchingNorms) -> bool:
    """Whether managers of this era kept a designated closer."""
    if norms.year < 1950:
        return False
    if norms.year < 1970:
        return norms.avg_saves_per_team > 5
    if norms.year < 1990:
        return norms.avg_saves_per_team > 12
    return True


def get_pitcher_role(pitcher: PitcherSeason) -> PitcherRoleType:
    if pitcher.games == 0:
        return PitcherRoleType.STARTER if pitcher.games_started > 0 else PitcherRoleType.RELIEVER
    start_rate = pitcher.games_started / pitcher.games
    if start_rate >= STARTER_START_RATE:
        return PitcherRoleType.STARTER
    if start_rate <= RELIEVER_START_RATE:
        return PitcherRoleType.RELIEVER
    if pitcher.games_started >= SWINGMAN_START_THRESHOLD:
        return PitcherRoleType.STARTER
    return PitcherRoleType.RELIEVER


def _ratio(league_avg: float, value: float) -> float:
    # A zero ERA/WHIP over a handful of innings would divide by zero.
    return league_avg / max(value, 0.01)


def calculate_pitcher_quality(
    pitcher: PitcherSeason,
    norms: LeaguePitchingNorms,
    role: PitcherRoleType,
) -> PitcherQuality:
    """Score a pitcher relative to the league; above 1.0 is above average.

    Starters are rated on workload (starts, complete games) and run
    prevention. Relievers on saves, run prevention and short outings.
    """
    innings_per_game = pitcher.innings_pitched / pitcher.games if pitcher.games else 0.0
    cg_rate = pitcher.complete_games / pitcher.games_started if pitcher.games_started else 0.0
    era_ratio = _ratio(norms.avg_era, pitcher.era)
    whip_ratio = _ratio(norms.avg_whip, pitcher.whip)

    if role == PitcherRoleType.STARTER:
        score = (
            pitcher.games_started / SEASON_GAMES * 0.3
            + era_ratio * 0.35
            + whip_ratio * 0.25
            + cg_rate * 2
        )
    else:
        score = pitcher.saves / 30 * 0.4 + era_ratio * 0.3 + whip_ratio * 0.2
        if innings_per_game < 2:
            score += 0.2
        if pitcher.games_started == 0:
            score += 0.1

    return PitcherQuality(
        pitcher_id=pitcher.player_id,
        quality_score=score,
        is_workhorse=cg_rate >= WORKHORSE_CG_RATE,
        innings_per_game=innings_per_game,
        role=role,
    )


def _make_role(pitcher: PitcherSeason, quality: PitcherQuality, role: PitcherRoleType) -> PitcherRole:
    return PitcherRole(
        pitcher_id=pitcher.player_id,
        role=role,
        avg_batters_faced_as_starter=pitcher.avg_batters_faced_as_starter,
        avg_batters_faced_as_reliever=pitcher.avg_batters_faced_as_reliever,
        is_workhorse=quality.is_workhorse,
    )


def classify_pitchers(
    pitchers: list[PitcherSeason],
    norms: LeaguePitchingNorms,
) -> BullpenState:
    """Assign every pitcher on a staff to a role for one game.

    Raises:
        ValueError: If nobody on the staff qualifies as a starter.
    """
    rated = [
        (p, calculate_pitcher_quality(p, norms, get_pitcher_role(p)))
        for p in pitchers
    ]
    rated.sort(key=lambda pair: pair[1].quality_score, reverse=True)
    starters = [r for r in rated if r[1].role == PitcherRoleType.STARTER]
    relievers = [r for r in rated if r[1].role == PitcherRoleType.RELIEVER]
    if not starters:
        raise ValueError("No starting pitchers available")

    ace, ace_quality = starters[0]
    bullpen = BullpenState(starter=_make_role(ace, ace_quality, PitcherRoleType.STARTER))

    if has_closers(norms) and relievers:
        closer_idx = next((i for i, (p, _) in enumerate(relievers) if p.saves > 0), 0)
        candidate, candidate_quality = relievers[closer_idx]
        if (
            candidate.saves >= CLOSER_SAVE_THRESHOLD
            or relievers[0][1].quality_score > CLOSER_QUALITY_THRESHOLD
        ):
            bullpen.closer = _make_role(candidate, candidate_quality, PitcherRoleType.CLOSER)
            relievers.pop(closer_idx)

        for p, q in relievers[:MAX_SETUP]:
            bullpen.setup.append(_make_role(p, q, PitcherRoleType.RELIEVER))
        relievers = relievers[MAX_SETUP:]

    for p, q in relievers:
        role = _make_role(p, q, PitcherRoleType.RELIEVER)
        if q.innings_per_game > LONG_RELIEF_IP_PER_GAME:
            bullpen.long_relief.append(role)
        else:
            bullpen.relievers.append(role)

    logger.debug(
        "Staff classified: starter=%s closer=%s setup=%d long=%d other=%d",
        bullpen.starter.pitcher_id,
        bullpen.closer.pitcher_id if bullpen.closer else None,
        len(bullpen.setup),
        len(bullpen.long_relief),
        len(bullpen.relievers),
    )
    return bullpen
