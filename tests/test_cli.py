"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from tripflow.cli import app

runner = CliRunner()


class TestPriceCommand:
    """Test `tripflow price`."""

    def test_peak_scenario(self):
        result = runner.invoke(app, [
            "price", "--base-price", "150", "--demand", "peak", "--season", "peak-season",
            "--occupancy", "95", "--days", "1",
        ])

        assert result.exit_code == 0
        assert "278.46" in result.output
        assert "-86%" in result.output

    def test_competitor_prices(self):
        result = runner.invoke(app, [
            "price", "--base-price", "100", "--season", "unknown",
            "--competitor", "80", "--competitor", "85",
        ])

        assert result.exit_code == 0
        assert "95.00" in result.output


class TestOptimizeCommand:
    """Test `tripflow optimize`."""

    def test_optimize_file(self, tmp_path):
        plan = {
            "activities": [
                {
                    "name": f"Stop {i}",
                    "type": "food" if i % 2 else "museum",
                    "duration": 60,
                    "cost": 15,
                    "location": {"lat": 35.68 + i * 0.01, "lng": 139.76},
                    "priority": 10 - i,
                }
                for i in range(4)
            ],
            "preferences": {"pace": "relaxed", "budget": "low"},
            "days": 2,
        }
        plan_file = tmp_path / "plan.json"
        plan_file.write_text(json.dumps(plan))

        result = runner.invoke(app, ["optimize", str(plan_file)])

        assert result.exit_code == 0
        assert "Day 1" in result.output
        assert "Day 2" in result.output
        assert "Trip Summary" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["optimize", str(tmp_path / "missing.json")])

        assert result.exit_code == 1

    def test_invalid_json(self, tmp_path):
        plan_file = tmp_path / "plan.json"
        plan_file.write_text("{not json")

        result = runner.invoke(app, ["optimize", str(plan_file)])

        assert result.exit_code == 1


class TestInfoCommand:
    """Test `tripflow info`."""

    def test_info(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "TripFlow Configuration" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
