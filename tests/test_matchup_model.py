# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for the generalized log5 matchup model."""

import random
import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from matchup_model import (
    SAMPLE_FALLBACK,
    MatchupModel,
    ModelCoefficients,
    effective_batter_hand,
    select_rates,
)
from models import (
    EVENT_RATE_KEYS,
    EventRates,
    Hand,
    Matchup,
    MatchupBatter,
    MatchupPitcher,
    Outcome,
    SplitRates,
    ThrowHand,
)
from rates import RateValidationError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

LEAGUE = EventRates.league_average()

POWER_HITTER = EventRates(
    single=0.130, double=0.055, triple=0.004, home_run=0.065,
    walk=0.120, hit_by_pitch=0.010, strikeout=0.260, ground_out=0.150,
    fly_out=0.120, line_out=0.040, pop_out=0.025, sacrifice_fly=0.006,
    sacrifice_bunt=0.0, fielders_choice=0.008, reached_on_error=0.007,
    catcher_interference=0.0,
)

GROUND_BALLER = EventRates(
    single=0.160, double=0.040, triple=0.004, home_run=0.018,
    walk=0.075, hit_by_pitch=0.010, strikeout=0.180, ground_out=0.290,
    fly_out=0.090, line_out=0.045, pop_out=0.030, sacrifice_fly=0.008,
    sacrifice_bunt=0.005, fielders_choice=0.025, reached_on_error=0.019,
    catcher_interference=0.001,
)


class FixedRng:
    """Stands in for random.Random with a scripted draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def make_matchup(batter=LEAGUE, pitcher=LEAGUE, league=LEAGUE,
                 bats=Hand.R, throws=ThrowHand.R):
    return Matchup(
        batter=MatchupBatter(hand=bats, rates=SplitRates(vs_left=batter, vs_right=batter)),
        pitcher=MatchupPitcher(hand=throws, rates=SplitRates(vs_left=pitcher, vs_right=pitcher)),
        league=SplitRates(vs_left=league, vs_right=league),
    )


# ===========================================================================
# predict
# ===========================================================================

class TestPredict:
    def test_distribution_sums_to_one(self):
        dist = MatchupModel().predict(make_matchup(POWER_HITTER, GROUND_BALLER))
        assert dist.total() == pytest.approx(1.0, abs=1e-9)
        assert all(dist.get(o) >= 0 for o in EVENT_RATE_KEYS)

    def test_league_average_batter_returns_pitcher_line(self):
        """b * p / l with b == l leaves the pitcher's own rates."""
        dist = MatchupModel().predict(make_matchup(batter=LEAGUE, pitcher=GROUND_BALLER))
        for o in EVENT_RATE_KEYS:
            assert dist.get(o) == pytest.approx(GROUND_BALLER.get(o), abs=1e-4)

    def test_power_hitter_homers_more_than_league(self):
        dist = MatchupModel().predict(make_matchup(POWER_HITTER, LEAGUE))
        assert dist.home_run > LEAGUE.home_run
        assert dist.strikeout > LEAGUE.strikeout

    def test_zero_rate_is_clamped_not_fatal(self):
        dist = MatchupModel().predict(make_matchup(POWER_HITTER, GROUND_BALLER))
        # Batter has no bunts or interference; the epsilon keeps them tiny but defined.
        assert 0 < dist.sacrifice_bunt < 0.001
        assert 0 < dist.catcher_interference < 0.001

    def test_zero_coefficients_give_uniform_distribution(self):
        model = MatchupModel(ModelCoefficients(batter=0, pitcher=0, league=0))
        dist = model.predict(make_matchup(POWER_HITTER, GROUND_BALLER))
        for o in EVENT_RATE_KEYS:
            assert dist.get(o) == pytest.approx(1 / len(EVENT_RATE_KEYS))

    @pytest.mark.parametrize("side,label", [
        ("batter", "Batter"),
        ("pitcher", "Pitcher"),
        ("league", "League"),
    ])
    def test_rejects_unnormalized_input(self, side, label):
        half = EventRates.from_mapping({o: LEAGUE.get(o) / 2 for o in EVENT_RATE_KEYS})
        with pytest.raises(RateValidationError, match=f"{label} rates sum to 0.5000"):
            MatchupModel().predict(make_matchup(**{side: half}))

    def test_small_drift_within_tolerance_is_accepted(self):
        drifted = LEAGUE.model_copy(update={"single": LEAGUE.single + 0.005})
        dist = MatchupModel().predict(make_matchup(batter=drifted))
        assert dist.total() == pytest.approx(1.0)


# ===========================================================================
# Splits
# ===========================================================================

class TestSplits:
    def test_switch_hitter_bats_opposite_the_pitcher(self):
        assert effective_batter_hand(Hand.S, ThrowHand.R) == Hand.L
        assert effective_batter_hand(Hand.S, ThrowHand.L) == Hand.R
        assert effective_batter_hand(Hand.L, ThrowHand.L) == Hand.L

    def test_select_rates_uses_the_right_splits(self):
        matchup = Matchup(
            batter=MatchupBatter(
                hand=Hand.S,
                rates=SplitRates(vs_left=GROUND_BALLER, vs_right=POWER_HITTER),
            ),
            pitcher=MatchupPitcher(
                hand=ThrowHand.R,
                rates=SplitRates(vs_left=POWER_HITTER, vs_right=GROUND_BALLER),
            ),
            league=SplitRates(vs_left=GROUND_BALLER, vs_right=LEAGUE),
        )
        batter, pitcher, league = select_rates(matchup)
        # Batter vs a righty, pitcher vs a (switch) lefty bat, league vs righties.
        assert batter == POWER_HITTER
        assert pitcher == POWER_HITTER
        assert league == LEAGUE


# ===========================================================================
# sample / simulate
# ===========================================================================

class TestSample:
    def test_boundary_draw_lands_in_lower_bucket(self):
        dist = EventRates(ground_out=0.5, single=0.5)
        assert MatchupModel(rng=FixedRng(0.5)).sample(dist) == Outcome.GROUND_OUT
        assert MatchupModel(rng=FixedRng(0.50001)).sample(dist) == Outcome.SINGLE

    def test_falls_back_when_draw_exceeds_total(self):
        dist = EventRates(single=0.4, walk=0.4)
        assert MatchupModel(rng=FixedRng(0.95)).sample(dist) == SAMPLE_FALLBACK

    def test_seeded_sampling_is_reproducible(self):
        matchup = make_matchup(POWER_HITTER, GROUND_BALLER)
        a = MatchupModel(rng=random.Random(7))
        b = MatchupModel(rng=random.Random(7))
        assert [a.simulate(matchup) for _ in range(200)] == [b.simulate(matchup) for _ in range(200)]

    def test_sample_frequencies_match_distribution(self):
        """Chi-square goodness of fit over 20k seeded draws."""
        model = MatchupModel(rng=random.Random(2024))
        dist = model.predict(make_matchup(POWER_HITTER, GROUND_BALLER))
        n = 20_000
        counts = {o: 0 for o in EVENT_RATE_KEYS}
        for _ in range(n):
            counts[model.sample(dist)] += 1

        chi_square = 0.0
        for o in EVENT_RATE_KEYS:
            expected = dist.get(o) * n
            if expected >= 5:
                chi_square += (counts[o] - expected) ** 2 / expected
        # 15 degrees of freedom; 50 is far beyond p = 0.001
        assert chi_square < 50


# ===========================================================================
# Configuration
# ===========================================================================

class TestConfig:
    def test_default_coefficients(self):
        c = MatchupModel().config.coefficients
        assert (c.batter, c.pitcher, c.league) == (1.0, 1.0, -1.0)

    def test_update_coefficients(self):
        model = MatchupModel()
        model.update_coefficients(0.8, 1.2, -0.9)
        c = model.config.coefficients
        assert (c.batter, c.pitcher, c.league) == (0.8, 1.2, -0.9)

    def test_config_is_a_copy(self):
        model = MatchupModel()
        model.config.coefficients.batter = 5.0
        assert model.config.coefficients.batter == 1.0
