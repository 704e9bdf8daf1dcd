# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Helpers for building and checking outcome rate vectors."""

from __future__ import annotations

from models import EVENT_RATE_KEYS, EventRates, Outcome, SplitRates


RATE_SUM_TOLERANCE = 0.01
DEFAULT_REGRESSION_THRESHOLD = 200


class RateValidationError(ValueError):
    """A rate vector does not sum to 1.0, or cannot be normalized."""


def validate_rates(
    rates: EventRates,
    label: str,
    tolerance: float = RATE_SUM_TOLERANCE,
) -> float:
    """Check that *rates* sums to 1.0 within *tolerance*.

    Returns the observed sum. Raises :class:`RateValidationError` naming
    *label* (e.g. ``"Batter"``) and the sum otherwise.
    """
    total = rates.total()
    if abs(total - 1.0) > tolerance:
        raise RateValidationError(
            f"{label} rates sum to {total:.4f}, expected ~1.0"
        )
    return total


def calculate_rates(counts: dict) -> EventRates:
    """Convert raw event counts into rates.

    Counts may be keyed by :class:`Outcome` or by its string value; missing
    outcomes count as zero. With no events at all the league-average line
    is returned.
    """
    parsed = {Outcome(k): float(v) for k, v in counts.items()}
    total = sum(parsed.values())
    if total <= 0:
        return EventRates.league_average()
    return EventRates.from_mapping({o: n / total for o, n in parsed.items()})


def regress_rates(
    player: EventRates,
    league: EventRates,
    plate_appearances: int,
    threshold: int = DEFAULT_REGRESSION_THRESHOLD,
) -> EventRates:
    """Shrink a player's rates toward league average.

    Weight on the player is ``min(pa / threshold, 1)``: a player with no
    plate appearances gets the league line, one past the threshold keeps
    their own.
    """
    weight = min(plate_appearances / threshold, 1.0) if threshold > 0 else 1.0
    return EventRates.from_mapping({
        o: player.get(o) * weight + league.get(o) * (1.0 - weight)
        for o in EVENT_RATE_KEYS
    })


def normalize_rates(rates: EventRates) -> EventRates:
    total = rates.total()
    if total == 0:
        raise RateValidationError("Cannot normalize zero rates")
    return EventRates.from_mapping({o: rates.get(o) / total for o in EVENT_RATE_KEYS})


def round_rates(rates: EventRates, decimals: int = 4) -> EventRates:
    return EventRates.from_mapping({o: round(rates.get(o), decimals) for o in EVENT_RATE_KEYS})


def create_split_rates(vs_left: EventRates, vs_right: EventRates) -> SplitRates:
    return SplitRates(vs_left=vs_left, vs_right=vs_right)
