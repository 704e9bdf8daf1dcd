# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Generalized log5 matchup model.

Blends batter, pitcher and league rate vectors into a single outcome
distribution:

    P(outcome) ∝ batter^α · pitcher^β · league^γ

With the default coefficients (α=1, β=1, γ=-1) this is classic log5
extended to many outcomes. Rates are clamped at a small epsilon before
exponentiation so that a zero rate on one side does not zero the product.
"""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel

from models import (
    EVENT_RATE_KEYS,
    EventRates,
    Hand,
    Matchup,
    Outcome,
    ProbabilityDistribution,
    ThrowHand,
)
from rates import RateValidationError, validate_rates

logger = logging.getLogger(__name__)

EPSILON = 1e-6
DISTRIBUTION_TOLERANCE = 0.001

# Returned if cumulative rounding leaves the draw above the last bucket.
SAMPLE_FALLBACK = Outcome.GROUND_OUT


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

class ModelCoefficients(BaseModel):
    batter: float = 1.0
    pitcher: float = 1.0
    league: float = -1.0


class ModelConfig(BaseModel):
    coefficients: ModelCoefficients = ModelCoefficients()


# ---------------------------------------------------------------------------
# Split selection
# ---------------------------------------------------------------------------

def effective_batter_hand(batter_hand: Hand, pitcher_hand: ThrowHand) -> Hand:
    """Switch hitters bat from the side opposite the pitcher's arm."""
    if batter_hand == Hand.S:
        return Hand.R if pitcher_hand == ThrowHand.L else Hand.L
    return batter_hand


def select_rates(matchup: Matchup) -> tuple[EventRates, EventRates, EventRates]:
    """Pick the batter, pitcher and league vectors that apply to *matchup*.

    The batter's and the league's splits are chosen by the pitcher's arm;
    the pitcher's split is chosen by the side the batter actually hits from.
    """
    pitcher_hand = matchup.pitcher.hand
    batter_hand = effective_batter_hand(matchup.batter.hand, pitcher_hand)
    return (
        matchup.batter.rates.for_hand(pitcher_hand),
        matchup.pitcher.rates.for_hand(batter_hand),
        matchup.league.for_hand(pitcher_hand),
    )


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------

class MatchupModel:
    """Predicts and samples plate-appearance outcomes for a matchup.

    Args:
        coefficients: Exponents for the batter, pitcher and league terms.
        rng: Source of uniform draws; anything with a ``random()`` method.
            Defaults to a fresh :class:`random.Random`.
    """

    def __init__(
        self,
        coefficients: ModelCoefficients | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = ModelConfig(coefficients=coefficients or ModelCoefficients())
        self.rng = rng if rng is not None else random.Random()

    @property
    def config(self) -> ModelConfig:
        """A copy of the current configuration."""
        return self._config.model_copy(deep=True)

    def update_coefficients(self, batter: float, pitcher: float, league: float) -> None:
        self._config = ModelConfig(
            coefficients=ModelCoefficients(batter=batter, pitcher=pitcher, league=league)
        )
        logger.debug("Matchup coefficients set to %s", self._config.coefficients)

    def _log5(self, b: float, p: float, l: float) -> float:
        c = self._config.coefficients
        return (
            max(b, EPSILON) ** c.batter
            * max(p, EPSILON) ** c.pitcher
            * max(l, EPSILON) ** c.league
        )

    def predict(self, matchup: Matchup) -> ProbabilityDistribution:
        """Return the normalized outcome distribution for *matchup*.

        Raises:
            RateValidationError: If any input vector does not sum to ~1.0,
                or the normalized result drifts from 1.0.
        """
        batter, pitcher, league = select_rates(matchup)
        validate_rates(batter, "Batter")
        validate_rates(pitcher, "Pitcher")
        validate_rates(league, "League")

        raw = {
            o: self._log5(batter.get(o), pitcher.get(o), league.get(o))
            for o in EVENT_RATE_KEYS
        }
        total = sum(raw.values())
        probs = {o.value: v / total for o, v in raw.items()}

        final_sum = sum(probs.values())
        if abs(final_sum - 1.0) > DISTRIBUTION_TOLERANCE:
            raise RateValidationError(
                f"Distribution sums to {final_sum:.6f}, expected 1.0"
            )
        return ProbabilityDistribution(**probs)

    def sample(self, distribution: EventRates) -> Outcome:
        """Inverse-transform sample one outcome from *distribution*."""
        r = self.rng.random()
        cumulative = 0.0
        for outcome in EVENT_RATE_KEYS:
            cumulative += distribution.get(outcome)
            if r <= cumulative:
                return outcome
        return SAMPLE_FALLBACK

    def simulate(self, matchup: Matchup) -> Outcome:
        return self.sample(self.predict(matchup))
