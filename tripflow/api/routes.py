"""
API Routes for TripFlow

Endpoints:
- /smart-pricing: Dynamic price for a listing and check-in date
- /optimize-trip: Multi-day itinerary with satisfaction summary
- /health: Health checks

Handlers validate and default the request, derive the pricing context, and
delegate all computation to the pure cores.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from tripflow import __version__
from tripflow.api.schemas import (
    DayPlanPayload,
    OptimizeTripRequest,
    OptimizeTripResponse,
    PricingContextPayload,
    PricingPayload,
    SmartPricingRequest,
    SmartPricingResponse,
    TripSummaryPayload,
)
from tripflow.config import Settings, get_settings
from tripflow.numeric import round_half_up
from tripflow.optimization.itinerary import optimize_itinerary, summarize_itinerary
from tripflow.pricing.smart_pricing import (
    PricingFactors,
    calculate_demand_level,
    calculate_seasonal_factor,
    calculate_smart_price,
)

logger = logging.getLogger(__name__)

router = APIRouter()

SECONDS_PER_DAY = 24 * 60 * 60


def get_now() -> datetime:
    """Current time; overridden in tests to pin the booking window."""
    return datetime.now(timezone.utc)


def days_until(check_in: datetime, now: datetime) -> int:
    """Whole days until check-in, rounded up. Naive datetimes are treated as UTC."""
    if check_in.tzinfo is None:
        check_in = check_in.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return math.ceil((check_in - now).total_seconds() / SECONDS_PER_DAY)


# =============================================================================
# Health & Status Endpoints
# =============================================================================

@router.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """API root endpoint."""
    return {
        "name": "TripFlow API",
        "version": __version__,
        "docs": "/docs",
    }


@router.get("/health", tags=["Health"])
async def health_check() -> dict[str, Any]:
    """Both engines are in-process, so the API is healthy once it answers."""
    return {
        "status": "healthy",
        "services": {"api": "healthy", "pricing": "available", "optimizer": "available"},
        "version": __version__,
    }


# =============================================================================
# Pricing Endpoints
# =============================================================================

@router.post("/smart-pricing", response_model=SmartPricingResponse, tags=["Pricing"])
async def smart_pricing(
    req: SmartPricingRequest,
    settings: Settings = Depends(get_settings),
    now: datetime = Depends(get_now),
) -> SmartPricingResponse:
    """
    Price a listing for a check-in date.

    Demand comes from live bookings against capacity and the historical
    average, seasonality from the check-in month, urgency from the number of
    days until check-in.
    """
    try:
        days_until_booking = days_until(req.check_in_date, now)

        # Zero and missing values both fall back to the configured defaults
        capacity = req.capacity or settings.default_capacity
        historical_average = req.historical_average or settings.default_historical_average
        current_bookings = req.current_bookings or 0

        demand_level = calculate_demand_level(current_bookings, capacity, historical_average)
        seasonal_factor = calculate_seasonal_factor(req.check_in_date, req.destination)

        if req.capacity:
            occupancy_rate = (current_bookings / req.capacity) * 100
        else:
            occupancy_rate = settings.default_occupancy_rate

        result = calculate_smart_price(PricingFactors(
            base_price=req.base_price,
            demand_level=demand_level,
            seasonal_factor=seasonal_factor,
            occupancy_rate=occupancy_rate,
            days_until_booking=days_until_booking,
            competitor_prices=req.competitor_prices,
            user_budget_level=req.user_budget_level,
        ))
    except Exception as e:
        logger.exception("Smart pricing failed for %s", req.destination)
        raise HTTPException(status_code=500, detail="Failed to calculate pricing") from e

    logger.info(
        "Priced %s: %.2f -> %.2f (%s)",
        req.destination, req.base_price, result.final_price, result.explanation,
    )

    return SmartPricingResponse(
        pricing=PricingPayload.from_result(result),
        factors=PricingContextPayload(
            demand_level=demand_level.value,
            seasonal_factor=seasonal_factor.value,
            occupancy_rate=round_half_up(occupancy_rate),
            days_until_booking=days_until_booking,
        ),
    )


# =============================================================================
# Trip Optimization Endpoints
# =============================================================================

@router.post("/optimize-trip", response_model=OptimizeTripResponse, tags=["Itinerary"])
async def optimize_trip(
    req: OptimizeTripRequest,
    settings: Settings = Depends(get_settings),
) -> OptimizeTripResponse:
    """Plan the given activities across ``days`` and summarize the result."""
    preferences = req.preferences.to_preferences(
        default_budget=settings.default_budget,
        default_pace=settings.default_pace,
        default_group_size=settings.default_group_size,
    )
    activities = [payload.to_activity() for payload in req.activities]

    try:
        itinerary = optimize_itinerary(activities, preferences, req.days)
        summary = summarize_itinerary(itinerary, preferences, req.days, len(activities))
    except Exception as e:
        logger.exception("Trip optimization failed")
        raise HTTPException(status_code=500, detail="Failed to optimize trip") from e

    logger.info(
        "Optimized %d activities over %d days (satisfaction=%d)",
        len(activities), req.days, summary.satisfaction_score,
    )

    return OptimizeTripResponse(
        optimized_itinerary=[DayPlanPayload.from_itinerary(plan) for plan in itinerary],
        summary=TripSummaryPayload.from_summary(summary),
    )
