"""
Itinerary Optimization Module

Greedy multi-day planner:
- Preference-aware activity scoring
- Score-ordered partitioning into day plans by pace
- Nearest-neighbor route ordering within each day
- Per-day quality score and whole-trip satisfaction prediction

The routing step is a heuristic approximation of the shortest path through a
day's activities, not an exact TSP solution. At most five activities are
scheduled per day, so the O(n^2) greedy search stays trivial.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from tripflow.numeric import round_half_up
from tripflow.optimization.geo import Location, haversine_km, travel_minutes

logger = logging.getLogger(__name__)


class Budget(str, Enum):
    """Traveler budget tier."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Pace(str, Enum):
    """How densely days are scheduled."""
    RELAXED = "relaxed"
    MODERATE = "moderate"
    PACKED = "packed"


ACTIVITIES_PER_DAY: dict[Pace, int] = {
    Pace.RELAXED: 2,
    Pace.MODERATE: 3,
    Pace.PACKED: 5,
}

# Highest single-activity cost still considered "within budget"
ACTIVITY_COST_CEILING: dict[Budget, float] = {
    Budget.LOW: 50,
    Budget.MEDIUM: 100,
    Budget.HIGH: 150,
}

DAILY_BUDGET_LIMIT: dict[Budget, float] = {
    Budget.LOW: 100,
    Budget.MEDIUM: 300,
    Budget.HIGH: 1000,
}

DEFAULT_BUDGET = Budget.MEDIUM
DEFAULT_PACE = Pace.MODERATE

PRIORITY_WEIGHT = 10
INTEREST_BONUS = 20
WITHIN_BUDGET_BONUS = 10
OVER_BUDGET_PENALTY = -5

EFFICIENT_TRAVEL_MINUTES = 120


@dataclass(frozen=True)
class Activity:
    """A candidate activity supplied by the caller."""
    name: str
    type: str
    duration: int
    cost: float
    location: Location
    priority: int
    best_time_slot: str = ""


@dataclass(frozen=True)
class TripPreferences:
    """
    Traveler preferences.

    ``group_size``, ``accessibility`` and ``dietary_restrictions`` are carried
    through but do not affect scoring.
    """
    budget: Budget | str = DEFAULT_BUDGET
    pace: Pace | str = DEFAULT_PACE
    interests: Sequence[str] = ()
    group_size: int = 1
    accessibility: Sequence[str] | None = None
    dietary_restrictions: Sequence[str] | None = None


@dataclass
class OptimizedItinerary:
    """One day of the plan, activities in visiting order."""
    day: int
    activities: list[Activity] = field(default_factory=list)
    estimated_cost: float = 0.0
    travel_time: int = 0
    optimization_score: float = 0.0


@dataclass
class ItinerarySummary:
    """Trip-level totals for an optimized itinerary."""
    total_cost: int
    total_travel_time: int
    satisfaction_score: int
    average_daily_cost: int
    total_activities: int


def _resolve(enum_cls: type[Enum], value: Any, default: Enum, label: str) -> Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        logger.warning("Unrecognized %s %r, falling back to %s", label, value, default.value)
        return default


def _budget(preferences: TripPreferences) -> Budget:
    return _resolve(Budget, preferences.budget, DEFAULT_BUDGET, "budget")


# =============================================================================
# Scoring
# =============================================================================

def score_activity(activity: Activity, preferences: TripPreferences) -> int:
    """
    Preference score for a single activity.

    priority x 10, +20 when any interest is a case-insensitive substring of
    the activity type, then +10 if the cost fits the budget ceiling or -5
    otherwise.
    """
    score = activity.priority * PRIORITY_WEIGHT

    activity_type = activity.type.lower()
    if any(interest.lower() in activity_type for interest in preferences.interests):
        score += INTEREST_BONUS

    if activity.cost <= ACTIVITY_COST_CEILING[_budget(preferences)]:
        score += WITHIN_BUDGET_BONUS
    else:
        score += OVER_BUDGET_PENALTY

    return score


def activities_per_day(pace: Pace | str) -> int:
    """relaxed 2, moderate 3, packed 5; unknown paces schedule like moderate."""
    return ACTIVITIES_PER_DAY[_resolve(Pace, pace, DEFAULT_PACE, "pace")]


# =============================================================================
# Routing
# =============================================================================

def optimize_route(activities: Sequence[Activity]) -> list[Activity]:
    """
    Order activities with the nearest-neighbor heuristic.

    Starts at the first activity and repeatedly moves to the closest
    unvisited one. No look-ahead, so the result is not guaranteed optimal.
    Equidistant candidates resolve to the earliest in input order.
    """
    if len(activities) <= 1:
        return list(activities)

    route = [activities[0]]
    remaining = list(activities[1:])

    while remaining:
        current = route[-1]
        nearest_index = 0
        min_distance = float("inf")

        for index, candidate in enumerate(remaining):
            distance = haversine_km(current.location, candidate.location)
            if distance < min_distance:
                min_distance = distance
                nearest_index = index

        route.append(remaining.pop(nearest_index))

    return route


def calculate_total_travel_time(route: Sequence[Activity]) -> int:
    """Total minutes between consecutive stops at city speed, rounded."""
    total = 0.0
    for here, there in zip(route, route[1:]):
        total += travel_minutes(haversine_km(here.location, there.location))
    return round_half_up(total)


def calculate_day_score(route: Sequence[Activity], preferences: TripPreferences) -> float:
    """Average of travel efficiency (100 - minutes, floored at 0) and budget fit (50 or 0)."""
    travel_time = calculate_total_travel_time(route)
    total_cost = sum(activity.cost for activity in route)

    travel_score = max(0, 100 - travel_time)
    budget_score = 50 if total_cost <= DAILY_BUDGET_LIMIT[_budget(preferences)] else 0

    return (travel_score + budget_score) / 2


# =============================================================================
# Planning
# =============================================================================

def optimize_itinerary(
    activities: Sequence[Activity],
    preferences: TripPreferences,
    days: int,
) -> list[OptimizedItinerary]:
    """
    Build a day-by-day plan from candidate activities.

    Activities are ranked by ``score_activity`` (ties keep input order) and
    handed out in consecutive batches of ``activities_per_day``: the best
    batch goes to day 1, the next to day 2, and so on. Each activity is
    assigned at most once. Days left after the pool runs out are empty.

    Args:
        activities: Candidate activities
        preferences: Traveler preferences
        days: Number of days to plan

    Returns:
        One OptimizedItinerary per day, day 1 first
    """
    ranked = sorted(activities, key=lambda a: score_activity(a, preferences), reverse=True)
    per_day = activities_per_day(preferences.pace)

    itinerary = []
    for day in range(1, days + 1):
        start = (day - 1) * per_day
        route = optimize_route(ranked[start:start + per_day])

        plan = OptimizedItinerary(
            day=day,
            activities=route,
            estimated_cost=sum(activity.cost for activity in route),
            travel_time=calculate_total_travel_time(route),
            optimization_score=calculate_day_score(route, preferences),
        )
        logger.debug(
            "Day %d: %d activities, cost=%.2f, travel=%d min, score=%.1f",
            day, len(route), plan.estimated_cost, plan.travel_time, plan.optimization_score,
        )
        itinerary.append(plan)

    return itinerary


def predict_satisfaction_score(
    itinerary: Sequence[OptimizedItinerary],
    preferences: TripPreferences,
) -> int:
    """
    Predicted traveler satisfaction in [0, 100].

    Each day contributes three checks: +20 when the day fits the daily budget,
    +15 when travel is under two hours, and +5 per distinct activity type.
    The score is the rounded average per check, capped at 100. An empty
    itinerary scores 0.
    """
    daily_limit = DAILY_BUDGET_LIMIT[_budget(preferences)]
    total_score = 0
    checks = 0

    for day in itinerary:
        if day.estimated_cost <= daily_limit:
            total_score += 20
        checks += 1

        if day.travel_time < EFFICIENT_TRAVEL_MINUTES:
            total_score += 15
        checks += 1

        total_score += len({activity.type for activity in day.activities}) * 5
        checks += 1

    if checks == 0:
        return 0

    return min(100, round_half_up(total_score / checks))


def summarize_itinerary(
    itinerary: Sequence[OptimizedItinerary],
    preferences: TripPreferences,
    days: int,
    total_activities: int,
) -> ItinerarySummary:
    """Trip totals as reported alongside an optimized itinerary."""
    total_cost = sum(day.estimated_cost for day in itinerary)
    total_travel_time = sum(day.travel_time for day in itinerary)

    return ItinerarySummary(
        total_cost=round_half_up(total_cost),
        total_travel_time=round_half_up(total_travel_time),
        satisfaction_score=predict_satisfaction_score(itinerary, preferences),
        average_daily_cost=round_half_up(total_cost / days) if days > 0 else 0,
        total_activities=total_activities,
    )
