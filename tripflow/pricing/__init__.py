"""Dynamic pricing engine."""

from tripflow.pricing.smart_pricing import (
    BudgetLevel,
    DemandLevel,
    PricePoint,
    PricingFactors,
    PricingResult,
    SeasonalFactor,
    calculate_demand_level,
    calculate_seasonal_factor,
    calculate_smart_price,
    predict_optimal_price,
)

__all__ = [
    "BudgetLevel",
    "DemandLevel",
    "PricePoint",
    "PricingFactors",
    "PricingResult",
    "SeasonalFactor",
    "calculate_demand_level",
    "calculate_seasonal_factor",
    "calculate_smart_price",
    "predict_optimal_price",
]
