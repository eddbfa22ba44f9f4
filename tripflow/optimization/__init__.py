"""Itinerary optimization: activity scoring, day planning and routing."""

from tripflow.optimization.geo import Location, haversine_km
from tripflow.optimization.itinerary import (
    Activity,
    Budget,
    ItinerarySummary,
    OptimizedItinerary,
    Pace,
    TripPreferences,
    optimize_itinerary,
    predict_satisfaction_score,
    summarize_itinerary,
)
from tripflow.optimization.recommendations import generate_personalized_recommendations

__all__ = [
    "Activity",
    "Budget",
    "ItinerarySummary",
    "Location",
    "OptimizedItinerary",
    "Pace",
    "TripPreferences",
    "generate_personalized_recommendations",
    "haversine_km",
    "optimize_itinerary",
    "predict_satisfaction_score",
    "summarize_itinerary",
]
