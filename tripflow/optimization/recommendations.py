"""
History-based recommendation scoring.

A lightweight similarity pass over a traveler's past bookings: options that
share a type or price range with the history, or that are highly rated where
the history was too, float to the top.
"""

from typing import Any, Mapping, Sequence

SAME_TYPE_WEIGHT = 10
SAME_PRICE_RANGE_WEIGHT = 5
BOTH_HIGHLY_RATED_WEIGHT = 8
HIGH_RATING = 4


def _price_range(entry: Mapping[str, Any]) -> Any:
    return entry.get("priceRange", entry.get("price_range"))


def _highly_rated(entry: Mapping[str, Any]) -> bool:
    rating = entry.get("rating")
    return rating is not None and rating >= HIGH_RATING


def score_option(option: Mapping[str, Any], user_history: Sequence[Mapping[str, Any]]) -> int:
    """Sum of similarity points against every past entry."""
    score = 0
    for past in user_history:
        if past.get("type") == option.get("type"):
            score += SAME_TYPE_WEIGHT
        if _price_range(past) == _price_range(option):
            score += SAME_PRICE_RANGE_WEIGHT
        if _highly_rated(past) and _highly_rated(option):
            score += BOTH_HIGHLY_RATED_WEIGHT
    return score


def generate_personalized_recommendations(
    user_history: Sequence[Mapping[str, Any]],
    options: Sequence[Mapping[str, Any]],
    limit: int = 10,
) -> list[dict[str, Any]]:
    """
    Rank options by similarity to the user's history.
    
    Args:
        user_history: Past bookings with ``type``, ``priceRange`` and ``rating``
        options: Candidate options with the same keys
        limit: Maximum number of options to return
        
    Returns:
        Copies of the top options with a ``recommendationScore`` key, best first
    """
    scored = [
        {**option, "recommendationScore": score_option(option, user_history)}
        for option in options
    ]
    scored.sort(key=lambda o: o["recommendationScore"], reverse=True)
    return scored[:limit]
