"""
Smart Pricing Module

Deterministic, multi-factor dynamic pricing for vendor listings:
- Demand and seasonality multipliers
- Occupancy-driven scarcity premium
- Booking-window urgency (last-minute / early bird)
- Competitive positioning and traveler budget alignment

Every function here is pure. Categorical inputs that are not recognized
resolve to a neutral 1.0 multiplier instead of raising.
"""

import logging
from dataclasses import asdict, dataclass
from datetime import date
from enum import Enum
from typing import Any, Iterable, Sequence

import numpy as np

from tripflow.numeric import round2, round_half_up

logger = logging.getLogger(__name__)


class DemandLevel(str, Enum):
    """Categorical demand signal for a bookable resource."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    PEAK = "peak"


class SeasonalFactor(str, Enum):
    """Calendar-driven pricing pressure."""
    OFF_SEASON = "off-season"
    SHOULDER = "shoulder"
    PEAK_SEASON = "peak-season"


class BudgetLevel(str, Enum):
    """Traveler budget tier."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


NEUTRAL_MULTIPLIER = 1.0

DEMAND_MULTIPLIERS: dict[DemandLevel, float] = {
    DemandLevel.LOW: 0.85,
    DemandLevel.MEDIUM: 1.0,
    DemandLevel.HIGH: 1.25,
    DemandLevel.PEAK: 1.5,
}

SEASONAL_MULTIPLIERS: dict[SeasonalFactor, float] = {
    SeasonalFactor.OFF_SEASON: 0.75,
    SeasonalFactor.SHOULDER: 0.9,
    SeasonalFactor.PEAK_SEASON: 1.3,
}

BUDGET_ADJUSTMENTS: dict[BudgetLevel, float] = {
    BudgetLevel.LOW: 0.9,
    BudgetLevel.MEDIUM: 1.0,
    BudgetLevel.HIGH: 1.1,
}

# 1-based calendar months
PEAK_MONTHS = frozenset({6, 7, 8, 12})
SHOULDER_MONTHS = frozenset({4, 5, 9, 10})

MAX_OCCUPANCY_PREMIUM = 0.2
COMPETITOR_PREMIUM_THRESHOLD = 1.1
COMPETITOR_ADJUSTMENT = 0.95
LIMITED_AVAILABILITY_THRESHOLD = 80
EXPLANATION_SEPARATOR = " • "
STANDARD_PRICING = "Standard pricing"


@dataclass(frozen=True)
class PricingFactors:
    """Inputs for a single pricing decision."""
    base_price: float
    demand_level: DemandLevel | str
    seasonal_factor: SeasonalFactor | str
    occupancy_rate: float
    days_until_booking: int
    competitor_prices: Sequence[float] | None = None
    user_budget_level: BudgetLevel | str | None = None


@dataclass(frozen=True)
class PricingResult:
    """Output of smart pricing, with the multipliers that were applied."""
    final_price: float
    discount: int
    demand_multiplier: float
    seasonal_multiplier: float
    urgency_multiplier: float
    explanation: str
    occupancy_multiplier: float = NEUTRAL_MULTIPLIER
    competitor_adjustment: float = NEUTRAL_MULTIPLIER
    budget_adjustment: float = NEUTRAL_MULTIPLIER

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PricePoint:
    """One historical observation used for price prediction."""
    date: date
    bookings: int
    price: float


def _coerce(enum_cls: type[Enum], value: Any) -> Enum | None:
    """Map a raw value onto ``enum_cls``, returning None when it is not a member."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def _lookup(table: dict, enum_cls: type[Enum], value: Any, label: str) -> float:
    key = _coerce(enum_cls, value)
    if key is None:
        logger.warning("Unrecognized %s %r, applying neutral multiplier", label, value)
        return NEUTRAL_MULTIPLIER
    return table[key]


# =============================================================================
# Individual Adjustments
# =============================================================================

def demand_multiplier(level: DemandLevel | str) -> float:
    """low 0.85, medium 1.0, high 1.25, peak 1.5; 1.0 for anything else."""
    return _lookup(DEMAND_MULTIPLIERS, DemandLevel, level, "demand level")


def seasonal_multiplier(season: SeasonalFactor | str) -> float:
    """off-season 0.75, shoulder 0.9, peak-season 1.3; 1.0 for anything else."""
    return _lookup(SEASONAL_MULTIPLIERS, SeasonalFactor, season, "seasonal factor")


def occupancy_multiplier(occupancy_rate: float) -> float:
    """Linear scarcity premium, up to +20% at full occupancy."""
    return 1 + (occupancy_rate / 100) * MAX_OCCUPANCY_PREMIUM


def urgency_multiplier(days_until_booking: int) -> float:
    """
    Booking-window multiplier.

    Thresholds are checked in order and the first match wins, so a booking
    3 days out gets the last-minute rate rather than the one-week rate.
    Negative values (past dates) fall into the last-minute bucket.
    """
    if days_until_booking <= 3:
        return 0.8
    if days_until_booking <= 7:
        return 0.9
    if days_until_booking >= 60:
        return 0.85
    return NEUTRAL_MULTIPLIER


def competitor_adjustment(base_price: float, competitor_prices: Sequence[float] | None) -> float:
    """5% cut when the base price sits more than 10% above the competitor mean."""
    if not competitor_prices:
        return NEUTRAL_MULTIPLIER

    avg_competitor_price = float(np.mean(competitor_prices))
    if base_price / avg_competitor_price > COMPETITOR_PREMIUM_THRESHOLD:
        return COMPETITOR_ADJUSTMENT
    return NEUTRAL_MULTIPLIER


def budget_adjustment(budget_level: BudgetLevel | str | None) -> float:
    """low 0.9, high 1.1; medium or absent 1.0."""
    if budget_level is None:
        return NEUTRAL_MULTIPLIER
    return _lookup(BUDGET_ADJUSTMENTS, BudgetLevel, budget_level, "budget level")


# =============================================================================
# Pricing
# =============================================================================

def calculate_smart_price(factors: PricingFactors) -> PricingResult:
    """
    Compute the dynamic price for a listing.

    The six adjustments are independent and multiplied onto the base price.
    The final price is rounded to cents; ``discount`` is the resulting
    percentage change against the base price (positive means cheaper).

    Args:
        factors: Base price and pricing context

    Returns:
        PricingResult with the applied multipliers and an explanation
    """
    base_price = factors.base_price

    demand = demand_multiplier(factors.demand_level)
    seasonal = seasonal_multiplier(factors.seasonal_factor)
    occupancy = occupancy_multiplier(factors.occupancy_rate)
    urgency = urgency_multiplier(factors.days_until_booking)
    competitor = competitor_adjustment(base_price, factors.competitor_prices)
    budget = budget_adjustment(factors.user_budget_level)

    calculated = base_price * demand * seasonal * occupancy * urgency * competitor * budget

    final_price = round2(calculated)
    discount = round_half_up(((base_price - final_price) / base_price) * 100)

    explanation = generate_pricing_explanation(
        demand_level=factors.demand_level,
        seasonal_factor=factors.seasonal_factor,
        occupancy_rate=factors.occupancy_rate,
        days_until_booking=factors.days_until_booking,
        discount=discount,
    )

    logger.debug(
        "Priced %.2f -> %.2f (demand=%s seasonal=%s occupancy=%.3f urgency=%s competitor=%s budget=%s)",
        base_price, final_price, demand, seasonal, occupancy, urgency, competitor, budget,
    )

    return PricingResult(
        final_price=final_price,
        discount=discount,
        demand_multiplier=demand,
        seasonal_multiplier=seasonal,
        urgency_multiplier=urgency,
        explanation=explanation,
        occupancy_multiplier=occupancy,
        competitor_adjustment=competitor,
        budget_adjustment=budget,
    )


def generate_pricing_explanation(
    demand_level: DemandLevel | str,
    seasonal_factor: SeasonalFactor | str,
    occupancy_rate: float,
    days_until_booking: int,
    discount: int,
) -> str:
    """Join the clauses for every rule that fired, or "Standard pricing"."""
    parts: list[str] = []

    if discount > 0:
        parts.append(f"{discount}% discount applied")
    elif discount < 0:
        parts.append(f"{abs(discount)}% premium due to high demand")

    if _coerce(DemandLevel, demand_level) in (DemandLevel.HIGH, DemandLevel.PEAK):
        parts.append("High demand period")

    season = _coerce(SeasonalFactor, seasonal_factor)
    if season is SeasonalFactor.PEAK_SEASON:
        parts.append("Peak season pricing")
    elif season is SeasonalFactor.OFF_SEASON:
        parts.append("Off-season discount")

    if days_until_booking <= 3:
        parts.append("Last-minute booking discount")
    elif days_until_booking >= 60:
        parts.append("Early bird discount")

    if occupancy_rate > LIMITED_AVAILABILITY_THRESHOLD:
        parts.append("Limited availability")

    return EXPLANATION_SEPARATOR.join(parts) or STANDARD_PRICING


# =============================================================================
# Context Derivation
# =============================================================================

def calculate_demand_level(
    current_bookings: float,
    capacity: float,
    historical_average: float,
) -> DemandLevel:
    """
    Classify demand from live bookings.

    Peak is checked first, then high, then medium. Either the occupancy
    threshold or the ratio against the historical average is enough to
    reach a tier. Zero capacity or average is the caller's problem.
    """
    occupancy_rate = (current_bookings / capacity) * 100
    demand_ratio = current_bookings / historical_average

    if occupancy_rate >= 90 or demand_ratio >= 1.5:
        return DemandLevel.PEAK
    if occupancy_rate >= 70 or demand_ratio >= 1.2:
        return DemandLevel.HIGH
    if occupancy_rate >= 40 or demand_ratio >= 0.8:
        return DemandLevel.MEDIUM
    return DemandLevel.LOW


def calculate_seasonal_factor(when: date, destination: str | None = None) -> SeasonalFactor:
    """
    Season for a travel date, by calendar month only.

    ``destination`` is accepted for destination-specific seasonality but is
    not used yet.
    """
    if when.month in PEAK_MONTHS:
        return SeasonalFactor.PEAK_SEASON
    if when.month in SHOULDER_MONTHS:
        return SeasonalFactor.SHOULDER
    return SeasonalFactor.OFF_SEASON


def predict_optimal_price(
    base_price: float,
    target_date: date,
    historical_data: Iterable[PricePoint],
) -> float:
    """Mean historical price for the target month, or ``base_price`` without history."""
    prices = [point.price for point in historical_data if point.date.month == target_date.month]

    if not prices:
        return base_price

    return round2(float(np.mean(prices)))
