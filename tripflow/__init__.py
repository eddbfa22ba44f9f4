"""
TripFlow - Pricing and Itinerary Optimization Core

Two independent, side-effect-free engines for a trip-planning platform:
- Smart pricing: demand, seasonality, urgency and competitor-aware prices
- Itinerary optimization: preference scoring, day planning and greedy routing

Thin FastAPI and typer layers expose both to callers.
"""

__version__ = "1.0.0"
__author__ = "TripFlow Team"

from tripflow.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
