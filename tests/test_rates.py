# /// script
# requires-python = ">=3.12"
# dependencies = ["pytest>=7.0", "pydantic>=2.0"]
# ///
"""Tests for rate-vector helpers and the rate models."""

import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest
from pydantic import ValidationError

from models import EVENT_RATE_KEYS, EventRates, Hand, Outcome, ProbabilityDistribution, ThrowHand
from rates import (
    RateValidationError,
    calculate_rates,
    create_split_rates,
    normalize_rates,
    regress_rates,
    round_rates,
    validate_rates,
)


def test_league_average_sums_to_one():
    assert EventRates.league_average().total() == pytest.approx(1.0)


def test_event_rate_keys_cover_every_outcome_once():
    assert len(EVENT_RATE_KEYS) == len(set(EVENT_RATE_KEYS)) == len(Outcome) == 16


def test_negative_rates_rejected():
    with pytest.raises(ValidationError):
        EventRates(single=-0.1)


def test_probability_distribution_requires_unit_sum():
    with pytest.raises(ValidationError):
        ProbabilityDistribution(single=0.5)
    assert ProbabilityDistribution(single=0.25, walk=0.75).total() == pytest.approx(1.0)


def test_validate_rates_returns_sum():
    assert validate_rates(EventRates.league_average(), "League") == pytest.approx(1.0)


def test_validate_rates_names_the_vector():
    with pytest.raises(RateValidationError, match="Pitcher rates sum to 0.9000"):
        validate_rates(EventRates(single=0.9), "Pitcher")


def test_rate_validation_error_is_a_value_error():
    assert issubclass(RateValidationError, ValueError)


def test_calculate_rates_from_counts():
    rates = calculate_rates({"single": 30, Outcome.STRIKEOUT: 50, "walk": 20})
    assert rates.single == pytest.approx(0.3)
    assert rates.strikeout == pytest.approx(0.5)
    assert rates.walk == pytest.approx(0.2)
    assert rates.home_run == 0.0


def test_calculate_rates_with_no_events_is_league_average():
    assert calculate_rates({}) == EventRates.league_average()
    assert calculate_rates({"single": 0}) == EventRates.league_average()


@pytest.mark.parametrize("pa,weight", [(0, 0.0), (100, 0.5), (200, 1.0), (650, 1.0)])
def test_regress_rates_weights_by_plate_appearances(pa, weight):
    player = EventRates(home_run=0.1, ground_out=0.9)
    league = EventRates(home_run=0.0, ground_out=1.0)
    regressed = regress_rates(player, league, pa)
    assert regressed.home_run == pytest.approx(0.1 * weight)
    assert regressed.total() == pytest.approx(1.0)


def test_normalize_rates():
    normalized = normalize_rates(EventRates(single=2.0, walk=2.0))
    assert normalized.single == pytest.approx(0.5)
    assert normalized.total() == pytest.approx(1.0)


def test_normalize_zero_rates_raises():
    with pytest.raises(RateValidationError, match="Cannot normalize zero rates"):
        normalize_rates(EventRates())


def test_round_rates():
    assert round_rates(EventRates(single=0.123456)).single == 0.1235


def test_split_rates_for_hand():
    left = EventRates(single=1.0)
    right = EventRates(walk=1.0)
    split = create_split_rates(left, right)
    assert split.for_hand(Hand.L) is left
    assert split.for_hand(ThrowHand.R) is right
