# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Baseball game simulation loop.

Plays a full game one plate appearance at a time. Each plate appearance
is resolved by the matchup model, runners are moved by the baserunning
state machine, and pitching changes are made by the fatigue and bullpen
logic. Maintains the authoritative game state, the play-by-play log and
the box score.

All randomness is seeded for deterministic replay.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from bullpen import classify_pitchers, season_norms
from matchup_model import MatchupModel
from models import (
    BatterSeason,
    Half,
    Matchup,
    MatchupBatter,
    MatchupPitcher,
    Outcome,
    PitcherSeason,
    SeasonPackage,
)
from pitching import (
    HARD_PITCH_LIMIT,
    BullpenState,
    GameContext,
    PitcherRole,
    PullOptions,
    estimate_pitches,
    record_plate_appearance,
    should_pull_pitcher,
)
from state_machine import (
    BASE_CONFIG_NAMES,
    BaserunningState,
    TransitionResult,
    is_at_bat,
    transition,
)

logger = logging.getLogger(__name__)

LINEUP_SIZE = 9
REGULATION_INNINGS = 9
DEFAULT_MAX_INNINGS = 15
TIE_RESULT = "TIE (innings limit)"

OUTCOME_TEXT: dict[Outcome, str] = {
    Outcome.SINGLE: "singles",
    Outcome.DOUBLE: "doubles",
    Outcome.TRIPLE: "triples",
    Outcome.HOME_RUN: "homers",
    Outcome.WALK: "walks",
    Outcome.HIT_BY_PITCH: "is hit by a pitch",
    Outcome.STRIKEOUT: "strikes out",
    Outcome.GROUND_OUT: "grounds out",
    Outcome.FLY_OUT: "flies out",
    Outcome.LINE_OUT: "lines out",
    Outcome.POP_OUT: "pops out",
    Outcome.SACRIFICE_FLY: "hits a sacrifice fly",
    Outcome.SACRIFICE_BUNT: "lays down a sacrifice bunt",
    Outcome.FIELDERS_CHOICE: "reaches on a fielder's choice",
    Outcome.REACHED_ON_ERROR: "reaches on an error",
    Outcome.CATCHER_INTERFERENCE: "reaches on catcher's interference",
}


# ---------------------------------------------------------------------------
# In-game stat tracking
# ---------------------------------------------------------------------------

@dataclass
class BatterGameStats:
    ab: int = 0
    hits: int = 0
    runs: int = 0
    rbi: int = 0
    bb: int = 0
    k: int = 0
    hbp: int = 0
    doubles: int = 0
    triples: int = 0
    hr: int = 0
    pa: int = 0

    def to_dict(self) -> dict:
        return {
            "PA": self.pa, "AB": self.ab, "H": self.hits, "R": self.runs,
            "RBI": self.rbi, "BB": self.bb, "K": self.k,
            "2B": self.doubles, "3B": self.triples, "HR": self.hr,
            "HBP": self.hbp,
        }


@dataclass
class PitcherGameStats:
    ip_outs: int = 0  # outs recorded (3 = 1.0 IP)
    hits: int = 0
    runs: int = 0
    bb: int = 0
    k: int = 0
    pitches: int = 0
    batters_faced: int = 0
    hr_allowed: int = 0

    @property
    def ip(self) -> float:
        full = self.ip_outs // 3
        partial = self.ip_outs % 3
        return full + partial / 10.0

    def to_dict(self) -> dict:
        return {
            "IP": self.ip, "H": self.hits, "R": self.runs,
            "BB": self.bb, "K": self.k,
            "pitches": self.pitches, "HR": self.hr_allowed,
            "batters_faced": self.batters_faced,
        }


# ---------------------------------------------------------------------------
# Play-by-play event
# ---------------------------------------------------------------------------

Runners = tuple[Optional[str], Optional[str], Optional[str]]


@dataclass
class PlayEvent:
    inning: int
    half: Half
    outs_before: int
    description: str
    event_type: str  # "plate_appearance", "pitching_change", "inning_change", "game_end"
    outs_after: int = 0
    outcome: Optional[Outcome] = None
    batter_id: str = ""
    batter_name: str = ""
    pitcher_id: str = ""
    pitcher_name: str = ""
    runs_scored: int = 0
    scorer_ids: list[str] = field(default_factory=list)
    runners_before: Runners = (None, None, None)
    runners_after: Runners = (None, None, None)
    score_home: int = 0
    score_away: int = 0

    def to_dict(self) -> dict:
        return {
            "inning": self.inning,
            "half": self.half.value,
            "outs_before": self.outs_before,
            "outs_after": self.outs_after,
            "description": self.description,
            "event_type": self.event_type,
            "outcome": self.outcome.value if self.outcome else None,
            "batter_id": self.batter_id,
            "batter_name": self.batter_name,
            "pitcher_id": self.pitcher_id,
            "pitcher_name": self.pitcher_name,
            "runs_scored": self.runs_scored,
            "scorer_ids": list(self.scorer_ids),
            "runners_before": _runners_dict(self.runners_before),
            "runners_after": _runners_dict(self.runners_after),
            "score": {"home": self.score_home, "away": self.score_away},
        }


def _runners_dict(runners: Runners) -> dict:
    return {"1B": runners[0], "2B": runners[1], "3B": runners[2]}


# ---------------------------------------------------------------------------
# Team game state
# ---------------------------------------------------------------------------

@dataclass
class TeamState:
    """Mutable state for one team during a game."""
    team_id: str
    name: str
    lineup: list[BatterSeason]
    pitchers: dict[str, PitcherSeason]
    bullpen: BullpenState
    current_pitcher: PitcherRole
    lineup_index: int = 0  # who bats next (0-8)
    used_pitchers: list[str] = field(default_factory=list)

    batter_stats: dict[str, BatterGameStats] = field(default_factory=dict)
    pitcher_stats: dict[str, PitcherGameStats] = field(default_factory=dict)

    # Innings scored tracking for box score
    inning_runs: list[int] = field(default_factory=list)

    def current_batter(self) -> BatterSeason:
        return self.lineup[self.lineup_index]

    def advance_batter(self) -> BatterSeason:
        self.lineup_index = (self.lineup_index + 1) % len(self.lineup)
        return self.lineup[self.lineup_index]

    def get_batter_stats(self, player_id: str) -> BatterGameStats:
        if player_id not in self.batter_stats:
            self.batter_stats[player_id] = BatterGameStats()
        return self.batter_stats[player_id]

    def get_pitcher_stats(self, player_id: str) -> PitcherGameStats:
        if player_id not in self.pitcher_stats:
            self.pitcher_stats[player_id] = PitcherGameStats()
        return self.pitcher_stats[player_id]

    def current_pitcher_season(self) -> PitcherSeason:
        return self.pitchers[self.current_pitcher.pitcher_id]


# ---------------------------------------------------------------------------
# Main game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """Authoritative game state."""
    home: TeamState
    away: TeamState
    inning: int = 1
    half: Half = Half.TOP  # TOP = away bats, BOTTOM = home bats
    bases: BaserunningState = field(default_factory=BaserunningState)
    score_home: int = 0
    score_away: int = 0
    play_log: list[PlayEvent] = field(default_factory=list)
    game_over: bool = False
    winning_team: str = ""
    seed: int = 0

    _current_inning_runs: int = field(default=0, repr=False)

    @property
    def outs(self) -> int:
        return self.bases.outs

    def batting_team(self) -> TeamState:
        return self.away if self.half == Half.TOP else self.home

    def fielding_team(self) -> TeamState:
        return self.home if self.half == Half.TOP else self.away

    def pitching_score_diff(self) -> int:
        """Score margin from the fielding team's point of view."""
        if self.half == Half.TOP:
            return self.score_home - self.score_away
        return self.score_away - self.score_home

    def context(self) -> GameContext:
        return GameContext(
            inning=self.inning,
            is_top_inning=self.half == Half.TOP,
            outs=self.outs,
            bases=self.bases.runners,
            score_diff=self.pitching_score_diff(),
        )

    def score_display(self) -> str:
        return f"Away {self.score_away} - Home {self.score_home}"

    def situation_display(self) -> str:
        half_str = "Top" if self.half == Half.TOP else "Bot"
        return (
            f"{half_str} {self.inning}, {self.outs} out, "
            f"{BASE_CONFIG_NAMES[self.bases.bases].lower()}, {self.score_display()}"
        )


def _ordinal(n: int) -> str:
    """Return ordinal string for an integer (1st, 2nd, 3rd, etc.)."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def pull_options_for(season: SeasonPackage, hard_pitch_limit: int | None = None) -> PullOptions:
    """Workload norms for a season: starter and reliever outings, hard limit."""
    starter_bfp = [
        p.avg_batters_faced_as_starter
        for p in season.pitchers.values()
        if p.avg_batters_faced_as_starter
    ]
    reliever_bfp = season.meta.reliever_bfp
    return PullOptions(
        season_starter_bfp=sum(starter_bfp) / len(starter_bfp) if starter_bfp else None,
        season_reliever_bfp=reliever_bfp.model_dump() if reliever_bfp else None,
        hard_pitch_limit=hard_pitch_limit or season.meta.pitch_count_limit or HARD_PITCH_LIMIT,
    )


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------

class GameSimulator:
    """Plays one game between two teams from a season package.

    Lineups are the first nine batters listed for each team; staffs are
    classified into roles by :func:`bullpen.classify_pitchers`. The same
    seeded random source drives outcome sampling and pitching decisions.

    Raises:
        ValueError: If a team is missing or has fewer than nine batters.
    """

    def __init__(
        self,
        season: SeasonPackage,
        away_team_id: str,
        home_team_id: str,
        seed: int | None = None,
        model: MatchupModel | None = None,
        randomness: float = 0.1,
        hard_pitch_limit: int | None = None,
    ):
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.model = model if model is not None else MatchupModel(rng=self.rng)
        self.season = season
        self.randomness = randomness
        self.norms = season_norms(season)
        self.options = pull_options_for(season, hard_pitch_limit)
        self.max_innings = DEFAULT_MAX_INNINGS

        self.game = GameState(
            home=self._build_team(home_team_id),
            away=self._build_team(away_team_id),
            seed=seed,
        )
        self.game.play_log.append(PlayEvent(
            inning=1,
            half=Half.TOP,
            outs_before=0,
            description=f"--- Top of the 1st --- ({self.game.away.name} at {self.game.home.name})",
            event_type="inning_change",
        ))

    # -------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------

    def _build_team(self, team_id: str) -> TeamState:
        batters = self.season.team_batters(team_id)
        pitchers = self.season.team_pitchers(team_id)
        if len(batters) < LINEUP_SIZE:
            raise ValueError(
                f"Team {team_id} has {len(batters)} batters, need {LINEUP_SIZE}"
            )
        bullpen = classify_pitchers(pitchers, self.norms)
        info = self.season.teams.get(team_id)
        team = TeamState(
            team_id=team_id,
            name=info.name if info else team_id,
            lineup=batters[:LINEUP_SIZE],
            pitchers={p.player_id: p for p in pitchers},
            bullpen=bullpen,
            current_pitcher=bullpen.starter,
        )
        team.used_pitchers.append(bullpen.starter.pitcher_id)
        return team

    def _player_name(self, player_id: str) -> str:
        batter = self.season.batters.get(player_id)
        if batter:
            return batter.name
        pitcher = self.season.pitchers.get(player_id)
        return pitcher.name if pitcher else player_id

    def matchup_for(self, batter: BatterSeason, pitcher: PitcherSeason) -> Matchup:
        return Matchup(
            batter=MatchupBatter(hand=batter.bats, rates=batter.rates),
            pitcher=MatchupPitcher(hand=pitcher.throws, rates=pitcher.rates),
            league=self.season.league,
        )

    # -------------------------------------------------------------------
    # Pitching changes
    # -------------------------------------------------------------------

    def manage_pitcher(self) -> Optional[PlayEvent]:
        """Ask the bullpen logic whether to change pitchers before the next batter."""
        game = self.game
        ft = game.fielding_team()
        decision = should_pull_pitcher(
            game.context(),
            ft.current_pitcher,
            ft.bullpen,
            randomness=self.randomness,
            options=self.options,
            rng=self.rng,
        )
        if not decision.should_change:
            return None
        if decision.new_pitcher is None:
            logger.debug(
                "%s should come out (%s) but no reliever fits the situation",
                ft.current_pitcher.pitcher_id, decision.reason,
            )
            return None
        return self._change_pitcher(ft, decision.new_pitcher, decision.reason or "")

    def _change_pitcher(self, team: TeamState, new_pitcher_id: str, reason: str) -> PlayEvent:
        game = self.game
        old = team.current_pitcher
        new = team.bullpen.find(new_pitcher_id)
        if new is None:
            raise ValueError(f"Pitcher {new_pitcher_id} is not available to {team.name}")
        team.bullpen.remove(new_pitcher_id)
        team.current_pitcher = new
        team.used_pitchers.append(new_pitcher_id)

        desc = (
            f"Pitching change: {self._player_name(new_pitcher_id)} replaces "
            f"{self._player_name(old.pitcher_id)} ({reason})"
        )
        logger.info("%s: %s", team.name, desc)
        event = PlayEvent(
            inning=game.inning,
            half=game.half,
            outs_before=game.outs,
            outs_after=game.outs,
            description=desc,
            event_type="pitching_change",
            pitcher_id=new_pitcher_id,
            pitcher_name=self._player_name(new_pitcher_id),
            runners_before=game.bases.runners,
            runners_after=game.bases.runners,
            score_home=game.score_home,
            score_away=game.score_away,
        )
        game.play_log.append(event)
        return event

    # -------------------------------------------------------------------
    # Plate appearances
    # -------------------------------------------------------------------

    def simulate_plate_appearance(self) -> list[PlayEvent]:
        """Play one plate appearance, including any pitching change before it.

        Returns the events generated, in order.
        """
        game = self.game
        if game.game_over:
            return []
        events: list[PlayEvent] = []

        change = self.manage_pitcher()
        if change:
            events.append(change)

        bt = game.batting_team()
        ft = game.fielding_team()
        batter = bt.current_batter()
        pitcher_role = ft.current_pitcher
        pitcher = ft.current_pitcher_season()

        outcome = self.model.simulate(self.matchup_for(batter, pitcher))
        before = game.bases
        result = transition(before, outcome, batter.player_id)
        events.append(self._apply_result(batter, pitcher, pitcher_role, outcome, before, result))

        if (game.half == Half.BOTTOM and game.inning >= REGULATION_INNINGS
                and game.score_home > game.score_away):
            self._record_inning_runs()
            events.append(self._finish(
                f"Walk-off! {game.home.name} wins {game.score_home}-{game.score_away}!"
            ))
            return events

        if result.inning_over:
            events.extend(self._end_half_inning())

        bt.advance_batter()
        return events

    def _apply_result(
        self,
        batter: BatterSeason,
        pitcher: PitcherSeason,
        pitcher_role: PitcherRole,
        outcome: Outcome,
        before: BaserunningState,
        result: TransitionResult,
    ) -> PlayEvent:
        game = self.game
        bt = game.batting_team()
        ft = game.fielding_team()
        runs = result.runs_scored
        outs_recorded = result.next_state.outs - before.outs

        if game.half == Half.TOP:
            game.score_away += runs
        else:
            game.score_home += runs
        game._current_inning_runs += runs
        game.bases = result.next_state

        # Batting line
        bstats = bt.get_batter_stats(batter.player_id)
        bstats.pa += 1
        if is_at_bat(outcome):
            bstats.ab += 1
        if outcome in (Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE, Outcome.HOME_RUN):
            bstats.hits += 1
        if outcome == Outcome.DOUBLE:
            bstats.doubles += 1
        elif outcome == Outcome.TRIPLE:
            bstats.triples += 1
        elif outcome == Outcome.HOME_RUN:
            bstats.hr += 1
        elif outcome == Outcome.WALK:
            bstats.bb += 1
        elif outcome == Outcome.HIT_BY_PITCH:
            bstats.hbp += 1
        elif outcome == Outcome.STRIKEOUT:
            bstats.k += 1
        if outcome != Outcome.REACHED_ON_ERROR:
            bstats.rbi += runs
        for scorer in result.scorer_ids:
            bt.get_batter_stats(scorer).runs += 1

        # Pitching line
        pitches = estimate_pitches(outcome)
        record_plate_appearance(
            pitcher_role, outcome, runs, pitches, self.options.hard_pitch_limit
        )
        pstats = ft.get_pitcher_stats(pitcher.player_id)
        pstats.batters_faced += 1
        pstats.pitches += round(pitches)
        pstats.runs += runs
        pstats.ip_outs += outs_recorded
        if outcome in (Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE, Outcome.HOME_RUN):
            pstats.hits += 1
        if outcome == Outcome.HOME_RUN:
            pstats.hr_allowed += 1
        elif outcome == Outcome.WALK:
            pstats.bb += 1
        elif outcome == Outcome.STRIKEOUT:
            pstats.k += 1

        desc = f"{batter.name} {OUTCOME_TEXT[outcome]}"
        if result.out_runner_id:
            desc += f", {self._player_name(result.out_runner_id)} out on the bases"
        for scorer in result.scorer_ids:
            if scorer != batter.player_id:
                desc += f". {self._player_name(scorer)} scores"
        if runs > 0:
            desc += f" [{game.score_display()}]"

        event = PlayEvent(
            inning=game.inning,
            half=game.half,
            outs_before=before.outs,
            outs_after=result.next_state.outs,
            description=desc,
            event_type="plate_appearance",
            outcome=outcome,
            batter_id=batter.player_id,
            batter_name=batter.name,
            pitcher_id=pitcher.player_id,
            pitcher_name=pitcher.name,
            runs_scored=runs,
            scorer_ids=list(result.scorer_ids),
            runners_before=before.runners,
            runners_after=result.next_state.runners,
            score_home=game.score_home,
            score_away=game.score_away,
        )
        game.play_log.append(event)
        logger.debug("%s | %s", game.situation_display(), desc)
        return event

    # -------------------------------------------------------------------
    # Innings and game end
    # -------------------------------------------------------------------

    def _finish(self, description: str, winner: str | None = None) -> PlayEvent:
        game = self.game
        game.game_over = True
        if winner is None:
            winner = game.home.name if game.score_home > game.score_away else game.away.name
        game.winning_team = winner
        event = PlayEvent(
            inning=game.inning,
            half=game.half,
            outs_before=game.outs,
            outs_after=game.outs,
            description=description,
            event_type="game_end",
            score_home=game.score_home,
            score_away=game.score_away,
        )
        game.play_log.append(event)
        return event

    def _record_inning_runs(self) -> None:
        game = self.game
        bt = game.batting_team()
        while len(bt.inning_runs) < game.inning:
            bt.inning_runs.append(0)
        bt.inning_runs[game.inning - 1] = game._current_inning_runs

    def _end_half_inning(self) -> list[PlayEvent]:
        """Handle the transition between half-innings."""
        game = self.game
        self._record_inning_runs()
        game.bases = BaserunningState()
        game._current_inning_runs = 0

        if game.half == Half.TOP:
            game.half = Half.BOTTOM
            if game.inning >= REGULATION_INNINGS and game.score_home > game.score_away:
                # Home team already leads; bottom half is not played.
                return [self._finish(
                    f"Game over! {game.home.name} wins {game.score_home}-{game.score_away}!"
                )]
            desc = f"--- Bottom of the {_ordinal(game.inning)} ---"
        else:
            last_inning = min(REGULATION_INNINGS, self.max_innings)
            if game.inning >= last_inning and game.score_home != game.score_away:
                high = max(game.score_home, game.score_away)
                low = min(game.score_home, game.score_away)
                winner = game.home.name if game.score_home > game.score_away else game.away.name
                return [self._finish(f"Game over! {winner} wins {high}-{low}!", winner)]
            if game.inning >= self.max_innings:
                return [self._finish(
                    f"Game called after {game.inning} innings, tied "
                    f"{game.score_away}-{game.score_home}",
                    TIE_RESULT,
                )]
            game.inning += 1
            game.half = Half.TOP
            desc = f"--- Top of the {_ordinal(game.inning)} ---"

        event = PlayEvent(
            inning=game.inning,
            half=game.half,
            outs_before=0,
            description=desc,
            event_type="inning_change",
            score_home=game.score_home,
            score_away=game.score_away,
        )
        game.play_log.append(event)
        return [event]

    def is_complete(self) -> bool:
        return self.game.game_over

    def simulate_game(self, max_innings: int = DEFAULT_MAX_INNINGS, verbose: bool = False) -> GameState:
        """Play until the game ends, or is called a tie after *max_innings*."""
        game = self.game
        self.max_innings = max_innings
        while not self.is_complete():
            events = self.simulate_plate_appearance()
            if verbose:
                for e in events:
                    if e.event_type in ("inning_change", "game_end"):
                        print(f"\n{e.description}")
                    else:
                        print(f"  {e.description}")

        logger.info(
            "Game over after %d innings: %s (seed %d)",
            game.inning, game.score_display(), self.seed,
        )
        return game

    # -------------------------------------------------------------------
    # Box score generation
    # -------------------------------------------------------------------

    def generate_box_score(self) -> dict:
        """Generate a complete box score for the game."""
        game = self.game

        def team_box(team: TeamState, is_home: bool) -> dict:
            batting_lines = [
                {"name": b.name, **team.get_batter_stats(b.player_id).to_dict()}
                for b in team.lineup
            ]
            pitching_lines = [
                {"name": self._player_name(pid), **team.get_pitcher_stats(pid).to_dict()}
                for pid in team.used_pitchers
            ]

            innings_played = game.inning
            inning_runs = list(team.inning_runs)
            while len(inning_runs) < innings_played:
                inning_runs.append(0)

            return {
                "team_name": team.name,
                "inning_runs": inning_runs,
                "total_runs": game.score_home if is_home else game.score_away,
                "total_hits": sum(team.get_batter_stats(b.player_id).hits for b in team.lineup),
                "batting": batting_lines,
                "pitching": pitching_lines,
            }

        return {
            "away": team_box(game.away, False),
            "home": team_box(game.home, True),
            "final_score": {"away": game.score_away, "home": game.score_home},
            "winning_team": game.winning_team,
            "innings": game.inning,
            "seed": game.seed,
        }

    def print_box_score(self) -> str:
        """Generate a formatted box score string."""
        box = self.generate_box_score()
        lines = []

        lines.append("=" * 72)
        lines.append("FINAL BOX SCORE")
        lines.append("=" * 72)

        header = f"{'Team':<20}"
        for i in range(1, box["innings"] + 1):
            header += f" {i:>3}"
        header += "  |   R   H"
        lines.append(header)
        lines.append("-" * len(header))

        for side in ("away", "home"):
            team = box[side]
            row = f"{team['team_name']:<20}"
            for r in team["inning_runs"]:
                row += f" {r:>3}"
            row += f"  | {team['total_runs']:>3} {team['total_hits']:>3}"
            lines.append(row)

        lines.append("")
        lines.append(f"Winner: {box['winning_team']}")
        lines.append(f"Seed: {box['seed']}")

        for side in ("away", "home"):
            team = box[side]
            lines.append(f"\n{team['team_name']} Batting:")
            lines.append(f"  {'Name':<20} {'AB':>3} {'H':>3} {'R':>3} {'RBI':>4} {'BB':>3} {'K':>3} {'HR':>3}")
            lines.append(f"  {'-'*20} {'-'*3} {'-'*3} {'-'*3} {'-'*4} {'-'*3} {'-'*3} {'-'*3}")
            for b in team["batting"]:
                lines.append(
                    f"  {b['name']:<20} {b['AB']:>3} {b['H']:>3} {b['R']:>3} "
                    f"{b['RBI']:>4} {b['BB']:>3} {b['K']:>3} {b['HR']:>3}"
                )

        for side in ("away", "home"):
            team = box[side]
            lines.append(f"\n{team['team_name']} Pitching:")
            lines.append(f"  {'Name':<20} {'IP':>5} {'H':>3} {'R':>3} {'BB':>3} {'K':>3} {'BF':>3} {'P':>4}")
            lines.append(f"  {'-'*20} {'-'*5} {'-'*3} {'-'*3} {'-'*3} {'-'*3} {'-'*3} {'-'*4}")
            for p in team["pitching"]:
                lines.append(
                    f"  {p['name']:<20} {p['IP']:>5.1f} {p['H']:>3} {p['R']:>3} "
                    f"{p['BB']:>3} {p['K']:>3} {p['batters_faced']:>3} {p['pitches']:>4}"
                )

        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Serialization support
# ---------------------------------------------------------------------------

def game_state_to_dict(game_state: GameState) -> dict:
    """Serialize game state to a dict for JSON persistence."""
    def team_to_dict(team: TeamState) -> dict:
        return {
            "team_id": team.team_id,
            "name": team.name,
            "lineup": [b.player_id for b in team.lineup],
            "lineup_index": team.lineup_index,
            "used_pitchers": list(team.used_pitchers),
            "current_pitcher_id": team.current_pitcher.pitcher_id,
            "inning_runs": list(team.inning_runs),
            "batter_stats": {k: v.to_dict() for k, v in team.batter_stats.items()},
            "pitcher_stats": {k: v.to_dict() for k, v in team.pitcher_stats.items()},
        }

    return {
        "inning": game_state.inning,
        "half": game_state.half.value,
        "outs": game_state.outs,
        "score_home": game_state.score_home,
        "score_away": game_state.score_away,
        "game_over": game_state.game_over,
        "winning_team": game_state.winning_team,
        "seed": game_state.seed,
        "runners": _runners_dict(game_state.bases.runners),
        "home": team_to_dict(game_state.home),
        "away": team_to_dict(game_state.away),
        "play_log": [e.to_dict() for e in game_state.play_log],
    }


# ---------------------------------------------------------------------------
# CLI entry point for testing
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    from config import configure_logging, get_hard_pitch_limit, get_model_coefficients, get_season_path, get_seed
    from data.season import load_season

    configure_logging()

    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    seed = int(args[0]) if args else get_seed()
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    season = load_season(get_season_path())
    team_ids = list(season.teams)
    if len(team_ids) < 2:
        print("Error: season package needs at least two teams.", file=sys.stderr)
        sys.exit(1)

    sim = GameSimulator(
        season,
        away_team_id=team_ids[0],
        home_team_id=team_ids[1],
        seed=seed,
        hard_pitch_limit=get_hard_pitch_limit(),
    )
    sim.model.update_coefficients(**get_model_coefficients().model_dump())

    print(f"Simulating game with seed {sim.seed}...")
    print(f"{sim.game.away.name} at {sim.game.home.name}")
    print("=" * 72)

    game = sim.simulate_game(verbose=verbose)

    print()
    print(sim.print_box_score())

    plate_appearances = [e for e in game.play_log if e.event_type == "plate_appearance"]
    print(f"\nTotal plate appearances: {len(plate_appearances)}")
    print(f"Total play events: {len(game.play_log)}")
