"""
Pydantic request/response schemas for the HTTP layer.

Wire format is camelCase to match the web client; Python attributes stay
snake_case. Conversion to the core dataclasses happens here so the routes
stay thin.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tripflow.optimization.geo import Location
from tripflow.optimization.itinerary import (
    Activity,
    ItinerarySummary,
    OptimizedItinerary,
    TripPreferences,
)
from tripflow.pricing.smart_pricing import PricingResult


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Smart Pricing
# =============================================================================

class SmartPricingRequest(CamelModel):
    """Pricing request for a single listing and check-in date."""

    base_price: float = Field(..., gt=0, description="Listing base price")
    destination: str = Field(..., min_length=1, description="Destination name")
    check_in_date: datetime = Field(..., description="ISO-8601 date or datetime")
    current_bookings: float | None = Field(default=None, ge=0)
    capacity: float | None = Field(default=None, ge=0)
    historical_average: float | None = Field(default=None, ge=0)
    competitor_prices: list[float] | None = Field(default=None)
    user_budget_level: str | None = Field(default=None, description="low, medium, high")

    @field_validator("check_in_date", mode="before")
    @classmethod
    def parse_check_in(cls, v: Any) -> Any:
        if isinstance(v, str):
            return datetime.fromisoformat(v.replace("Z", "+00:00"))
        return v

    @field_validator("competitor_prices")
    @classmethod
    def positive_prices(cls, v: list[float] | None) -> list[float] | None:
        if v is not None and any(price <= 0 for price in v):
            raise ValueError("competitor prices must be positive")
        return v


class PricingPayload(CamelModel):
    final_price: float
    discount: int
    demand_multiplier: float
    seasonal_multiplier: float
    urgency_multiplier: float
    occupancy_multiplier: float
    competitor_adjustment: float
    budget_adjustment: float
    explanation: str

    @classmethod
    def from_result(cls, result: PricingResult) -> "PricingPayload":
        return cls(**result.as_dict())


class PricingContextPayload(CamelModel):
    """Derived factors reported back to the client."""

    demand_level: str
    seasonal_factor: str
    occupancy_rate: int
    days_until_booking: int


class SmartPricingResponse(CamelModel):
    success: bool = True
    pricing: PricingPayload
    factors: PricingContextPayload


# =============================================================================
# Trip Optimization
# =============================================================================

class LocationPayload(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class ActivityPayload(CamelModel):
    name: str
    type: str
    duration: int = Field(..., ge=0, description="Minutes")
    cost: float = Field(..., ge=0)
    location: LocationPayload
    best_time_slot: str = Field(default="")
    priority: int = Field(..., ge=1, le=10)

    def to_activity(self) -> Activity:
        return Activity(
            name=self.name,
            type=self.type,
            duration=self.duration,
            cost=self.cost,
            location=Location(lat=self.location.lat, lng=self.location.lng),
            priority=self.priority,
            best_time_slot=self.best_time_slot,
        )

    @classmethod
    def from_activity(cls, activity: Activity) -> "ActivityPayload":
        return cls(
            name=activity.name,
            type=activity.type,
            duration=activity.duration,
            cost=activity.cost,
            location=LocationPayload(lat=activity.location.lat, lng=activity.location.lng),
            best_time_slot=activity.best_time_slot,
            priority=activity.priority,
        )


class PreferencesPayload(CamelModel):
    """Traveler preferences; missing fields are filled from settings."""

    budget: str | None = None
    pace: str | None = None
    interests: list[str] | None = None
    group_size: int | None = Field(default=None, ge=1)
    accessibility: list[str] | None = None
    dietary_restrictions: list[str] | None = None

    def to_preferences(self, default_budget: str, default_pace: str, default_group_size: int) -> TripPreferences:
        return TripPreferences(
            budget=self.budget or default_budget,
            pace=self.pace or default_pace,
            interests=tuple(self.interests or ()),
            group_size=self.group_size or default_group_size,
            accessibility=self.accessibility,
            dietary_restrictions=self.dietary_restrictions,
        )


class OptimizeTripRequest(CamelModel):
    activities: list[ActivityPayload]
    preferences: PreferencesPayload
    days: int = Field(..., ge=1)


class DayPlanPayload(CamelModel):
    day: int
    activities: list[ActivityPayload]
    estimated_cost: float
    travel_time: int
    optimization_score: float

    @classmethod
    def from_itinerary(cls, plan: OptimizedItinerary) -> "DayPlanPayload":
        return cls(
            day=plan.day,
            activities=[ActivityPayload.from_activity(a) for a in plan.activities],
            estimated_cost=plan.estimated_cost,
            travel_time=plan.travel_time,
            optimization_score=plan.optimization_score,
        )


class TripSummaryPayload(CamelModel):
    total_cost: int
    total_travel_time: int
    satisfaction_score: int
    average_daily_cost: int
    total_activities: int

    @classmethod
    def from_summary(cls, summary: ItinerarySummary) -> "TripSummaryPayload":
        return cls(
            total_cost=summary.total_cost,
            total_travel_time=summary.total_travel_time,
            satisfaction_score=summary.satisfaction_score,
            average_daily_cost=summary.average_daily_cost,
            total_activities=summary.total_activities,
        )


class OptimizeTripResponse(CamelModel):
    success: bool = True
    optimized_itinerary: list[DayPlanPayload]
    summary: TripSummaryPayload
