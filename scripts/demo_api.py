#!/usr/bin/env python3
"""
Demo script to exercise the TripFlow API.

Usage:
    python scripts/demo_api.py --host localhost --port 8000
"""

import argparse
import json
from datetime import date, timedelta

import httpx

ROME_ACTIVITIES = [
    {"name": "Colosseum", "type": "history", "duration": 150, "cost": 18,
     "location": {"lat": 41.8902, "lng": 12.4922}, "bestTimeSlot": "morning", "priority": 10},
    {"name": "Vatican Museums", "type": "art museum", "duration": 180, "cost": 20,
     "location": {"lat": 41.9065, "lng": 12.4536}, "bestTimeSlot": "morning", "priority": 9},
    {"name": "Trevi Fountain", "type": "landmark", "duration": 30, "cost": 0,
     "location": {"lat": 41.9009, "lng": 12.4833}, "bestTimeSlot": "evening", "priority": 8},
    {"name": "Pantheon", "type": "history", "duration": 45, "cost": 5,
     "location": {"lat": 41.8986, "lng": 12.4769}, "bestTimeSlot": "afternoon", "priority": 8},
    {"name": "Trastevere Food Tour", "type": "food", "duration": 180, "cost": 95,
     "location": {"lat": 41.8897, "lng": 12.4700}, "bestTimeSlot": "evening", "priority": 7},
    {"name": "Borghese Gallery", "type": "art museum", "duration": 120, "cost": 22,
     "location": {"lat": 41.9142, "lng": 12.4923}, "bestTimeSlot": "afternoon", "priority": 7},
]


def main():
    parser = argparse.ArgumentParser(description="Demo TripFlow API")
    parser.add_argument("--host", type=str, default="localhost")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    base_url = f"http://{args.host}:{args.port}"

    print("=" * 60)
    print("TripFlow API Demo")
    print("=" * 60)
    print(f"Base URL: {base_url}")

    with httpx.Client(timeout=30.0) as client:
        # Health check
        print("\n1. Health Check")
        print("-" * 40)
        try:
            resp = client.get(f"{base_url}/health")
            print(f"Status: {resp.status_code}")
            print(json.dumps(resp.json(), indent=2))
        except httpx.HTTPError as e:
            print(f"Error: {e}")
            print("Make sure the API is running: python -m tripflow.cli serve")
            return

        # Smart pricing
        print("\n2. Smart Pricing")
        print("-" * 40)

        pricing_request = {
            "basePrice": 150,
            "destination": "Rome",
            "checkInDate": (date.today() + timedelta(days=2)).isoformat(),
            "currentBookings": 92,
            "capacity": 100,
            "historicalAverage": 60,
            "competitorPrices": [120, 135, 140],
            "userBudgetLevel": "medium",
        }

        try:
            resp = client.post(f"{base_url}/smart-pricing", json=pricing_request)
            print(f"Status: {resp.status_code}")
            result = resp.json()
            pricing = result.get("pricing", {})
            print(f"Final price: {pricing.get('finalPrice')} (discount {pricing.get('discount')}%)")
            print(f"Why: {pricing.get('explanation')}")
            print(f"Factors: {json.dumps(result.get('factors'), indent=2)}")
        except httpx.HTTPError as e:
            print(f"Error: {e}")

        # Trip optimization
        print("\n3. Trip Optimization")
        print("-" * 40)

        trip_request = {
            "activities": ROME_ACTIVITIES,
            "preferences": {"budget": "medium", "pace": "moderate", "interests": ["history", "food"]},
            "days": 2,
        }

        try:
            resp = client.post(f"{base_url}/optimize-trip", json=trip_request)
            print(f"Status: {resp.status_code}")
            result = resp.json()

            for day in result.get("optimizedItinerary", []):
                names = " -> ".join(a["name"] for a in day["activities"])
                print(f"  Day {day['day']}: {names}")
                print(f"     cost {day['estimatedCost']}, travel {day['travelTime']} min, "
                      f"score {day['optimizationScore']}")

            print(f"\nSummary: {json.dumps(result.get('summary'), indent=2)}")
        except httpx.HTTPError as e:
            print(f"Error: {e}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
