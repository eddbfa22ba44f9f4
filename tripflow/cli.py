"""
TripFlow CLI

Command-line interface for serving the API and running the pricing and
itinerary engines locally.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="tripflow",
    help="TripFlow - Smart Pricing and Itinerary Optimization",
    add_completion=False,
)
console = Console()


def _setup_logging() -> None:
    from tripflow.config import get_settings
    from tripflow.log import configure_logging

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
) -> None:
    """Start the TripFlow API server."""
    import uvicorn

    console.print(f"[green]Starting TripFlow API on {host}:{port}[/green]")

    uvicorn.run(
        "tripflow.api.app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
    )


@app.command()
def price(
    base_price: float = typer.Option(..., "--base-price", "-b", help="Base price"),
    demand: str = typer.Option("medium", "--demand", "-d", help="Demand: low, medium, high, peak"),
    season: str = typer.Option("shoulder", "--season", "-s", help="Season: off-season, shoulder, peak-season"),
    occupancy: float = typer.Option(0.0, "--occupancy", "-o", help="Occupancy rate, 0-100"),
    days: int = typer.Option(30, "--days", help="Days until booking"),
    competitor: Optional[list[float]] = typer.Option(None, "--competitor", "-c", help="Competitor price (repeatable)"),
    budget: Optional[str] = typer.Option(None, "--budget", help="Traveler budget: low, medium, high"),
) -> None:
    """Calculate a smart price from explicit pricing factors."""
    from tripflow.pricing.smart_pricing import PricingFactors, calculate_smart_price

    _setup_logging()

    result = calculate_smart_price(PricingFactors(
        base_price=base_price,
        demand_level=demand,
        seasonal_factor=season,
        occupancy_rate=occupancy,
        days_until_booking=days,
        competitor_prices=competitor or None,
        user_budget_level=budget,
    ))

    table = Table(title="Smart Price")
    table.add_column("Factor", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Base price", f"{base_price:.2f}")
    table.add_row("Demand multiplier", f"{result.demand_multiplier:.3f}")
    table.add_row("Seasonal multiplier", f"{result.seasonal_multiplier:.3f}")
    table.add_row("Occupancy multiplier", f"{result.occupancy_multiplier:.3f}")
    table.add_row("Urgency multiplier", f"{result.urgency_multiplier:.3f}")
    table.add_row("Competitor adjustment", f"{result.competitor_adjustment:.3f}")
    table.add_row("Budget adjustment", f"{result.budget_adjustment:.3f}")
    table.add_row("Final price", f"{result.final_price:.2f}")
    table.add_row("Discount", f"{result.discount}%")

    console.print(table)
    console.print(f"[blue]{result.explanation}[/blue]")


@app.command()
def optimize(
    plan_file: Path = typer.Argument(..., help="JSON file with activities, preferences and days"),
    days: Optional[int] = typer.Option(None, "--days", "-n", help="Override the number of days"),
) -> None:
    """Optimize an itinerary from a JSON request file."""
    from pydantic import ValidationError

    from tripflow.api.schemas import OptimizeTripRequest
    from tripflow.config import get_settings
    from tripflow.optimization.itinerary import optimize_itinerary, summarize_itinerary

    _setup_logging()
    settings = get_settings()

    try:
        request = OptimizeTripRequest.model_validate(json.loads(plan_file.read_text()))
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        console.print(f"[red]✗ Could not read {plan_file}: {e}[/red]")
        raise typer.Exit(1)

    n_days = days if days is not None else request.days
    preferences = request.preferences.to_preferences(
        default_budget=settings.default_budget,
        default_pace=settings.default_pace,
        default_group_size=settings.default_group_size,
    )
    activities = [payload.to_activity() for payload in request.activities]

    itinerary = optimize_itinerary(activities, preferences, n_days)
    summary = summarize_itinerary(itinerary, preferences, n_days, len(activities))

    for plan in itinerary:
        table = Table(title=f"Day {plan.day}")
        table.add_column("#", style="dim")
        table.add_column("Activity", style="cyan")
        table.add_column("Type")
        table.add_column("Cost", style="green", justify="right")

        for position, activity in enumerate(plan.activities, 1):
            table.add_row(str(position), activity.name, activity.type, f"{activity.cost:.2f}")

        console.print(table)
        console.print(
            f"  cost {plan.estimated_cost:.2f} | travel {plan.travel_time} min | "
            f"score {plan.optimization_score:.1f}"
        )

    table = Table(title="Trip Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Total cost", str(summary.total_cost))
    table.add_row("Total travel time (min)", str(summary.total_travel_time))
    table.add_row("Average daily cost", str(summary.average_daily_cost))
    table.add_row("Satisfaction score", str(summary.satisfaction_score))
    table.add_row("Candidate activities", str(summary.total_activities))

    console.print(table)


@app.command()
def info() -> None:
    """Show system information."""
    from tripflow.config import get_settings

    settings = get_settings()

    table = Table(title="TripFlow Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("API Host", settings.api_host)
    table.add_row("API Port", str(settings.api_port))
    table.add_row("Default Capacity", str(settings.default_capacity))
    table.add_row("Default Historical Average", str(settings.default_historical_average))
    table.add_row("Default Budget", settings.default_budget)
    table.add_row("Default Pace", settings.default_pace)
    table.add_row("Log Level", settings.log_level)

    console.print(table)


if __name__ == "__main__":
    app()
