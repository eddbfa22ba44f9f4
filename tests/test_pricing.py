"""
Tests for the smart pricing module.
"""

import logging
from datetime import date

import pytest

from tripflow.numeric import round2, round_half_up
from tripflow.pricing.smart_pricing import (
    BudgetLevel,
    DemandLevel,
    PricePoint,
    PricingFactors,
    SeasonalFactor,
    budget_adjustment,
    calculate_demand_level,
    calculate_seasonal_factor,
    calculate_smart_price,
    competitor_adjustment,
    demand_multiplier,
    predict_optimal_price,
    seasonal_multiplier,
    urgency_multiplier,
)


def make_factors(**overrides) -> PricingFactors:
    """Neutral factors: every adjustment evaluates to 1.0 except the shoulder season."""
    params = dict(
        base_price=100.0,
        demand_level="medium",
        seasonal_factor="shoulder",
        occupancy_rate=0,
        days_until_booking=30,
    )
    params.update(overrides)
    return PricingFactors(**params)


class TestMultiplierTables:
    """Test the individual lookups and their neutral defaults."""

    def test_demand_multipliers(self):
        assert demand_multiplier("low") == 0.85
        assert demand_multiplier("medium") == 1.0
        assert demand_multiplier(DemandLevel.HIGH) == 1.25
        assert demand_multiplier(DemandLevel.PEAK) == 1.5

    def test_seasonal_multipliers(self):
        assert seasonal_multiplier("off-season") == 0.75
        assert seasonal_multiplier("shoulder") == 0.9
        assert seasonal_multiplier(SeasonalFactor.PEAK_SEASON) == 1.3

    def test_unknown_values_are_neutral(self, caplog):
        """Typos never turn into NaN; they apply 1.0 and log a warning."""
        with caplog.at_level(logging.WARNING, logger="tripflow"):
            assert demand_multiplier("extreme") == 1.0
            assert seasonal_multiplier("monsoon") == 1.0
            assert budget_adjustment("luxury") == 1.0

        assert "extreme" in caplog.text

    def test_budget_adjustment(self):
        assert budget_adjustment("low") == 0.9
        assert budget_adjustment(BudgetLevel.MEDIUM) == 1.0
        assert budget_adjustment("high") == 1.1
        assert budget_adjustment(None) == 1.0

    def test_urgency_boundaries(self):
        """3 days takes the last-minute rate even though it is also within a week."""
        assert urgency_multiplier(3) == 0.8
        assert urgency_multiplier(4) == 0.9
        assert urgency_multiplier(7) == 0.9
        assert urgency_multiplier(8) == 1.0
        assert urgency_multiplier(59) == 1.0
        assert urgency_multiplier(60) == 0.85

    def test_urgency_past_dates_are_last_minute(self):
        assert urgency_multiplier(-5) == 0.8

    def test_competitor_adjustment(self):
        assert competitor_adjustment(120, [100, 100]) == 0.95
        assert competitor_adjustment(110, [100]) == 1.0  # exactly 10% above
        assert competitor_adjustment(90, [100, 120]) == 1.0
        assert competitor_adjustment(500, []) == 1.0
        assert competitor_adjustment(500, None) == 1.0


class TestCalculateSmartPrice:
    """Test end-to-end price calculation."""

    def test_neutral_factors_keep_base_price(self):
        result = calculate_smart_price(make_factors(seasonal_factor="unknown"))

        assert result.final_price == 100.0
        assert result.discount == 0
        assert result.explanation == "Standard pricing"

    def test_peak_last_minute_scenario(self):
        result = calculate_smart_price(PricingFactors(
            base_price=150,
            demand_level="peak",
            seasonal_factor="peak-season",
            occupancy_rate=95,
            days_until_booking=1,
        ))

        # 150 x 1.5 x 1.3 x 1.19 x 0.8
        assert result.final_price == pytest.approx(278.46, abs=0.01)
        assert result.discount == -86
        assert result.demand_multiplier == 1.5
        assert result.seasonal_multiplier == 1.3
        assert result.urgency_multiplier == 0.8
        assert result.explanation == " • ".join([
            "86% premium due to high demand",
            "High demand period",
            "Peak season pricing",
            "Last-minute booking discount",
            "Limited availability",
        ])

    def test_off_season_early_bird_discount(self):
        result = calculate_smart_price(make_factors(
            demand_level="low",
            seasonal_factor="off-season",
            days_until_booking=90,
            user_budget_level="low",
        ))

        # 100 x 0.85 x 0.75 x 0.85 x 0.9
        assert result.final_price == pytest.approx(48.77, abs=0.01)
        assert result.discount == 51
        assert result.explanation.split(" • ") == [
            "51% discount applied",
            "Off-season discount",
            "Early bird discount",
        ]

    def test_competitor_prices_applied(self):
        result = calculate_smart_price(make_factors(
            seasonal_factor="none",
            competitor_prices=[80.0, 85.0],
        ))

        assert result.competitor_adjustment == 0.95
        assert result.final_price == 95.0
        assert result.discount == 5

    def test_occupancy_is_monotonic(self):
        prices = [
            calculate_smart_price(make_factors(occupancy_rate=rate)).final_price
            for rate in range(0, 101, 10)
        ]

        assert prices == sorted(prices)

    def test_discount_consistent_with_final_price(self):
        for demand in ("low", "medium", "high", "peak"):
            for days in (1, 5, 30, 90):
                result = calculate_smart_price(make_factors(
                    base_price=237.5, demand_level=demand, days_until_booking=days,
                ))
                implied = round(237.5 * (1 - result.discount / 100), 2)
                assert abs(implied - result.final_price) <= 237.5 * 0.005 + 0.01

    def test_deterministic(self):
        factors = make_factors(demand_level="high", occupancy_rate=42, competitor_prices=(90, 95))

        assert calculate_smart_price(factors) == calculate_smart_price(factors)

    def test_as_dict(self):
        data = calculate_smart_price(make_factors()).as_dict()

        assert set(data) >= {
            "final_price", "discount", "demand_multiplier",
            "seasonal_multiplier", "urgency_multiplier", "explanation",
        }


class TestDemandAndSeason:
    """Test context derivation helpers."""

    def test_occupancy_triggers_peak(self):
        assert calculate_demand_level(95, 100, 50) is DemandLevel.PEAK

    def test_demand_ratio_triggers_tiers(self):
        assert calculate_demand_level(30, 1000, 20) is DemandLevel.PEAK
        assert calculate_demand_level(24, 1000, 20) is DemandLevel.HIGH
        assert calculate_demand_level(16, 1000, 20) is DemandLevel.MEDIUM
        assert calculate_demand_level(10, 1000, 20) is DemandLevel.LOW

    def test_occupancy_tiers(self):
        assert calculate_demand_level(75, 100, 1000) is DemandLevel.HIGH
        assert calculate_demand_level(45, 100, 1000) is DemandLevel.MEDIUM
        assert calculate_demand_level(39, 100, 1000) is DemandLevel.LOW

    @pytest.mark.parametrize("month, expected", [
        (1, SeasonalFactor.OFF_SEASON),
        (2, SeasonalFactor.OFF_SEASON),
        (4, SeasonalFactor.SHOULDER),
        (7, SeasonalFactor.PEAK_SEASON),
        (10, SeasonalFactor.SHOULDER),
        (11, SeasonalFactor.OFF_SEASON),
        (12, SeasonalFactor.PEAK_SEASON),
    ])
    def test_seasonal_factor_by_month(self, month, expected):
        assert calculate_seasonal_factor(date(2026, month, 15), "Lisbon") is expected

    def test_destination_is_optional(self):
        assert calculate_seasonal_factor(date(2026, 8, 1)) is SeasonalFactor.PEAK_SEASON


class TestPredictOptimalPrice:
    """Test history-based price prediction."""

    def test_mean_of_matching_month(self):
        history = [
            PricePoint(date=date(2024, 7, 3), bookings=10, price=120.0),
            PricePoint(date=date(2025, 7, 20), bookings=14, price=130.0),
            PricePoint(date=date(2025, 1, 5), bookings=2, price=60.0),
        ]

        assert predict_optimal_price(100.0, date(2026, 7, 1), history) == 125.0

    def test_no_history_returns_base(self):
        history = [PricePoint(date=date(2025, 3, 1), bookings=5, price=80.0)]

        assert predict_optimal_price(100.0, date(2026, 7, 1), history) == 100.0
        assert predict_optimal_price(100.0, date(2026, 7, 1), []) == 100.0


class TestRounding:
    """Test half-up rounding of prices and percentages."""

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(-2.5) == -2
        assert round_half_up(0.5) == 1
        assert round_half_up(-0.5) == 0
        assert round_half_up(2.4999) == 2

    def test_round2(self):
        assert round2(0.125) == 0.13
        assert round2(48.76875) == 48.77
        assert round2(-1.005) == -1.0

    def test_negative_half_discount(self):
        """A 2.5% markup reports as -2, not -3."""
        result = calculate_smart_price(PricingFactors(200, "medium", "x", 12.5, 30))

        assert result.final_price == 205.0
        assert result.discount == -2
        assert result.explanation.startswith("2% premium")

    def test_positive_half_discount(self):
        """A 2.5% discount reports as 3, where banker's rounding would give 2."""
        # 200 x 0.9 x (1 + 41.67 / 500) = 195.0012
        result = calculate_smart_price(make_factors(base_price=200, occupancy_rate=41.67))

        assert result.final_price == 195.0
        assert result.discount == 3
        assert result.explanation == "3% discount applied"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
